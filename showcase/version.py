"""
Version retrieval module.

The installed distribution metadata is authoritative; a source checkout
falls back to reading pyproject.toml.
"""

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

import tomli

from showcase.models.logging import logger

PACKAGE_NAME = "showcase"


def get_version() -> str:
    """
    Retrieve the project version.

    Returns:
        str: Project version, or "unknown" when neither source is available
    """
    try:
        return version(PACKAGE_NAME)
    except PackageNotFoundError:
        logger.debug("Package metadata not found, reading pyproject.toml")

    pyproject_path = Path(__file__).parent.parent / "pyproject.toml"
    if not pyproject_path.exists():
        return "unknown"
    with open(pyproject_path, "rb") as f:
        pyproject_data = tomli.load(f)

    project_version = pyproject_data.get("project", {}).get("version", "unknown")
    logger.debug(f"Project version: {project_version}")
    return project_version
