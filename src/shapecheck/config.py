"""Configuration management for shapecheck using Pydantic models."""

import json
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

CONFIG_FILENAME = ".shapecheck.json"


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"


class CheckConfig(BaseModel):
    """Conformance checking configuration section."""
    closed_objects: bool = Field(alias="closedObjects", default=False)
    strict_float: bool = Field(alias="strictFloat", default=False)

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.WARN

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        """Accept level names in any case, and 'warning' for 'warn'."""
        if isinstance(v, str):
            v = v.strip().lower()
            if v == "warning":
                return LogLevel.WARN.value
        return v

    model_config = ConfigDict(use_enum_values=True)


class ShapecheckConfig(BaseModel):
    """Complete shapecheck configuration model."""
    check: CheckConfig = Field(default_factory=CheckConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")


def load_config(config_path: str | Path | None = None) -> ShapecheckConfig:
    """Load configuration from file with fallback to defaults.

    Args:
        config_path: Optional path to configuration file. If None, searches
                    current directory and parents for .shapecheck.json

    Returns:
        ShapecheckConfig: Loaded and validated configuration

    Raises:
        ValueError: If the configuration file is invalid
    """
    if config_path is None:
        config_path = find_config_file()
    else:
        config_path = Path(config_path)

    if config_path and config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                config_data = json.load(f)
            return ShapecheckConfig(**config_data)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {config_path}: {e}") from e
        except ValidationError as e:
            raise ValueError(f"Invalid configuration in {config_path}: {e}") from e
        except TypeError as e:
            # top-level JSON value is not an object
            raise ValueError(f"Failed to load config from {config_path}: {e}") from e

    return ShapecheckConfig()


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find .shapecheck.json by searching up the directory tree.

    Args:
        start_dir: Directory to start search from (default: current directory)

    Returns:
        Path to config file if found, None otherwise
    """
    current = Path(start_dir or Path.cwd()).resolve()

    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate

    return None
