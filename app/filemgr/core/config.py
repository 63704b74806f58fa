"""Configuration file I/O.

Loads and saves the filemgr configuration (config.toml) with validation
through Pydantic models.
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from filemgr.core.paths import get_config_path
from filemgr.core.theme import ThemeColors

logger = logging.getLogger(__name__)

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when an explicitly requested config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


class ConfigValidationError(ConfigError):
    """Raised when config content is invalid."""


class AppConfig(BaseModel):
    """User configuration for filemgr.

    Attributes:
        recursive: Scan subdirectories when no --recursive flag is given.
        confirm: Ask before deleting or renaming.
        log_level: Logging level used when neither --verbose nor --quiet is set.
        colors: Theme color overrides.
    """

    model_config = ConfigDict(extra="forbid")

    recursive: Annotated[bool, Field(description="Default scan mode")] = False
    confirm: Annotated[bool, Field(description="Prompt before batch operations")] = True
    log_level: Annotated[str, Field(description="Default logging level")] = "WARNING"
    colors: Annotated[
        ThemeColors,
        Field(default_factory=ThemeColors, description="Theme colors"),
    ]

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: object) -> str:
        """Normalize and validate the logging level name."""
        if not isinstance(v, str):
            msg = "log_level must be a string"
            raise ValueError(msg)
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            msg = f"log_level must be one of {', '.join(LOG_LEVELS)}, got '{v}'"
            raise ValueError(msg)
        return level


def load_config(path: Path | None = None) -> AppConfig:
    """Load and validate the configuration file.

    A missing file at the default location is not an error: defaults are
    returned. A missing file at an explicitly given path is.

    Args:
        path: Path to the config file. If None, uses the default path.

    Returns:
        Validated AppConfig object.

    Raises:
        ConfigNotFoundError: If an explicit path doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigValidationError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        if path is not None:
            raise ConfigNotFoundError(f"Config file not found: {config_path}")
        logger.debug("No config file at %s, using defaults", config_path)
        return AppConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return AppConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid config content: {e}") from e


def save_config(config: AppConfig, path: Path | None = None) -> Path:
    """Save the configuration to a TOML file.

    The file is written atomically through a temporary file in the same
    directory followed by os.replace().

    Args:
        config: The configuration to save.
        path: Path to save to. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    data = config.model_dump(mode="json")

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
            tomli_w.dump(data, f)
        os.replace(tmp_path, config_path)
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path
