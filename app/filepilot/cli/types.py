"""Shared types and utilities for CLI commands.

This module provides common enums and helper functions used across
multiple CLI command modules to avoid code duplication.
"""

from enum import Enum
from pathlib import Path

import typer

from filepilot.browser.state import EngineState
from filepilot.core.config import ConfigError, EngineConfig, load_config_or_default
from filepilot.utils.formatting import print_error


class OutputFormat(str, Enum):
    """Output format options for listing commands."""

    TABLE = "table"
    JSON = "json"


def get_config() -> EngineConfig:
    """Load the engine config, exiting with an error if it is invalid.

    Returns:
        Loaded config, or defaults if no config file exists.

    Raises:
        typer.Exit: If the config file cannot be parsed or validated.
    """
    try:
        return load_config_or_default()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None


def create_state(start_dir: Path | None = None) -> EngineState:
    """Create an EngineState rooted at a directory.

    Args:
        start_dir: Initial directory. None uses the configured start
            directory or the working directory.

    Returns:
        Ready EngineState.

    Raises:
        typer.Exit: If the config is invalid or the directory does not exist.
    """
    config = get_config()
    try:
        return EngineState(start_dir, config=config)
    except NotADirectoryError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None


def require_directory(path: Path) -> Path:
    """Return the absolute path of an existing directory or exit.

    Raises:
        typer.Exit: If the path is not an existing directory.
    """
    directory = path.expanduser().absolute()
    if not directory.is_dir():
        print_error(f"Not a directory: {directory}")
        raise typer.Exit(code=1)
    return directory
