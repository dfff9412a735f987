"""Configuration loading from pyproject.toml.

The loader searches upwards from a start directory for pyproject.toml
and reads the [tool.changelog-py] table. A project with no pyproject.toml
or no table gets the defaults.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from changelog_py.config.models import ChangelogConfig
from changelog_py.exceptions import ConfigNotFoundError, ConfigValidationError

logger = logging.getLogger(__name__)

TOOL_NAME = "changelog-py"


def find_pyproject_toml(start: Path | None = None) -> Path:
    """Find pyproject.toml in start or any parent directory.

    Args:
        start: Directory to start from (defaults to cwd)

    Returns:
        Path to pyproject.toml

    Raises:
        ConfigNotFoundError: If no pyproject.toml is found
    """
    current = (start or Path.cwd()).resolve()

    for directory in (current, *current.parents):
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate

    raise ConfigNotFoundError(f"No pyproject.toml found in {current} or any parent directory")


def load_pyproject_toml(path: Path) -> dict[str, Any]:
    """Load and parse a pyproject.toml file.

    Raises:
        ConfigNotFoundError: If the file does not exist
        ConfigValidationError: If the file is not valid TOML
    """
    if not path.is_file():
        raise ConfigNotFoundError(f"Configuration file not found: {path}")

    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigValidationError(f"Invalid TOML in {path}: {e}") from e


def extract_changelog_py_config(pyproject: dict[str, Any]) -> dict[str, Any]:
    """Return the [tool.changelog-py] table, or an empty dict."""
    return pyproject.get("tool", {}).get(TOOL_NAME, {})


def load_config(path: Path | None = None) -> ChangelogConfig:
    """Load configuration for the project containing path.

    A relative changelog path is resolved against the directory holding
    pyproject.toml.

    Args:
        path: Project directory or pyproject.toml path (defaults to cwd)

    Returns:
        Validated configuration

    Raises:
        ConfigValidationError: If the file or its values are invalid
    """
    try:
        if path is not None and path.is_file():
            pyproject_path = path
        else:
            pyproject_path = find_pyproject_toml(path)
    except ConfigNotFoundError:
        logger.info("No pyproject.toml found, using default configuration")
        return ChangelogConfig()

    data = extract_changelog_py_config(load_pyproject_toml(pyproject_path))

    try:
        config = ChangelogConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid [tool.{TOOL_NAME}] configuration: {e}") from e

    if not config.path.is_absolute():
        config = config.model_copy(update={"path": pyproject_path.parent / config.path})

    logger.debug("Loaded configuration from %s", pyproject_path)
    return config
