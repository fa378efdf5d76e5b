"""Exception types raised by the KeyPop core."""


class KeyPopError(Exception):
    """Base class for game core failures."""


class InvalidBoundsError(KeyPopError, ValueError):
    """Board or position bounds are not positive integers."""

    def __init__(self, max_x, max_y):
        super().__init__(f"bounds must be positive integers, got ({max_x!r}, {max_y!r})")
        self.max_x = max_x
        self.max_y = max_y


class RandomSourceFailure(KeyPopError, RuntimeError):
    """Letter or position generation failed; the session cannot continue."""
