"""
Version utilities for tolgee-puller.

Reads the installed distribution version, falling back to pyproject.toml
for source checkouts that were never installed.
"""

import logging
import tomllib
from functools import lru_cache
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

logger = logging.getLogger(__name__)

DISTRIBUTION_NAME = "tolgee-puller"


@lru_cache(maxsize=1)
def get_version() -> str:
    """
    Get the project version.

    Returns:
        Version string (e.g., "0.1.0"), or "unknown" when it cannot be determined
    """
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        logger.debug("importlib.metadata failed, falling back to pyproject.toml")

    pyproject_path = Path(__file__).parents[4] / "pyproject.toml"
    if not pyproject_path.exists():
        return "unknown"

    with pyproject_path.open("rb") as f:
        data = tomllib.load(f)

    project_data = data.get("project")
    if not isinstance(project_data, dict):
        return "unknown"

    project_version = project_data.get("version")  # pyright: ignore[reportUnknownMemberType,reportUnknownVariableType]
    return project_version if isinstance(project_version, str) else "unknown"
