"""Package version lookup."""

import tomllib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path

_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def get_version() -> str:
    """Version of the installed distribution, or of the source checkout."""
    try:
        return _metadata_version("mathexpr")
    except PackageNotFoundError:
        pass
    if _PYPROJECT.exists():
        with open(_PYPROJECT, "rb") as f:
            return str(tomllib.load(f)["project"]["version"])
    return "0.0.0"
