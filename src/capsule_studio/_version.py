"""Package version lookup for capsule-studio."""

import tomllib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path

DISTRIBUTION_NAME = "capsule-studio"
UNKNOWN_VERSION = "0.0.0"

# src/capsule_studio/_version.py -> repository root
_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def _version_from_pyproject(pyproject: Path) -> str | None:
    """Read [project].version, only when the file describes this distribution."""
    if not pyproject.is_file():
        return None
    try:
        with open(pyproject, "rb") as f:
            project = tomllib.load(f).get("project", {})
    except tomllib.TOMLDecodeError:
        return None
    if project.get("name") != DISTRIBUTION_NAME:
        return None
    return project.get("version")


def get_version() -> str:
    """
    Resolve the package version.

    A source checkout reports the version in its pyproject.toml; an installed
    wheel reports its distribution metadata.
    """
    checkout_version = _version_from_pyproject(_PYPROJECT)
    if checkout_version:
        return checkout_version
    try:
        return _metadata_version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return UNKNOWN_VERSION


__version__ = get_version()
