from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

PYPROJECT = Path(__file__).resolve().parents[1] / "pyproject.toml"


def test_console_script_points_into_package():
    config = tomllib.loads(PYPROJECT.read_text(encoding="utf-8"))
    assert config["project"]["scripts"] == {"keypop": "keypop.app:main"}
    # Nothing is installed as a top-level module.
    assert "py-modules" not in config["tool"]["setuptools"]
