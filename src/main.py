"""Entry point for the KeyPop reaction game when run from a source checkout."""
from keypop.app import main

if __name__ == "__main__":
    main()
