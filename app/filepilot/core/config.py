"""Engine configuration and settings.

This module provides the configuration model and I/O functions for
the file-management engine: search debounce, rename collision policy,
default folder name, terminal override and start directory.

Configuration is stored in ~/.config/filepilot/config.toml
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated, Literal

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from filepilot.core.paths import get_config_path

logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE_MS = 400
DEFAULT_FOLDER_NAME = "New Folder"


class EngineConfig(BaseModel):
    """Configuration for the file-management engine.

    Attributes:
        search_debounce_ms: Minimum milliseconds between two search recomputations.
        rename_collision: What rename does when the target name exists
            ("fail" refuses, "overwrite" replaces where the OS allows).
        new_folder_name: Name used when creating a folder without an explicit name.
        terminal_command: Optional terminal launcher override; "{path}" is
            replaced by the target directory.
        start_directory: Initial directory. None means the working directory.
    """

    model_config = ConfigDict(extra="forbid")

    search_debounce_ms: Annotated[
        int,
        Field(ge=0, le=10_000, description="Search debounce interval in milliseconds"),
    ] = DEFAULT_DEBOUNCE_MS
    rename_collision: Annotated[
        Literal["fail", "overwrite"],
        Field(description="Rename collision policy"),
    ] = "fail"
    new_folder_name: Annotated[
        str,
        Field(min_length=1, description="Default name for new folders"),
    ] = DEFAULT_FOLDER_NAME
    terminal_command: Annotated[
        list[str] | None,
        Field(description="Terminal launcher override"),
    ] = None
    start_directory: Annotated[
        Path | None,
        Field(description="Initial directory (None = working directory)"),
    ] = None

    @field_validator("terminal_command")
    @classmethod
    def validate_terminal_command(cls, v: list[str] | None) -> list[str] | None:
        """Reject an empty terminal command list."""
        if v is not None and not v:
            msg = "terminal_command cannot be empty"
            raise ValueError(msg)
        return v

    @property
    def search_debounce_seconds(self) -> float:
        """Debounce interval in seconds."""
        return self.search_debounce_ms / 1000


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> EngineConfig:
    """Load engine configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated EngineConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return EngineConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def load_config_or_default(path: Path | None = None) -> EngineConfig:
    """Load the config file, falling back to defaults when it is missing.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Loaded EngineConfig, or defaults if no file exists.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    try:
        return load_config(path)
    except ConfigNotFoundError:
        logger.debug("No config file found, using defaults")
        return EngineConfig()


def save_config(config: EngineConfig, path: Path | None = None) -> Path:
    """Save engine configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The EngineConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(_config_to_dict(config), f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def _config_to_dict(config: EngineConfig) -> dict[str, object]:
    """Convert EngineConfig to a dictionary for TOML serialization.

    TOML has no null, so unset optional values are left out.

    Args:
        config: The EngineConfig to convert.

    Returns:
        Dictionary ready for TOML serialization.
    """
    result: dict[str, object] = {
        "search_debounce_ms": config.search_debounce_ms,
        "rename_collision": config.rename_collision,
        "new_folder_name": config.new_folder_name,
    }

    if config.terminal_command is not None:
        result["terminal_command"] = list(config.terminal_command)

    if config.start_directory is not None:
        result["start_directory"] = str(config.start_directory)

    return result
