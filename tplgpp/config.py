"""Persistent configuration for tplgpp.

Settings live in a JSON file at $TPLGPP_CONFIG, or
~/.config/tplgpp/config.json when the variable is unset. Missing files
give the defaults.
"""

import json
import logging
import os
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator

from .core.models import ClassType


CONFIG_ENV_VAR = "TPLGPP_CONFIG"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class CompilerConfig(BaseModel):
    """Settings for the class define pass."""

    class_type: ClassType = ClassType.BASE


class LoggingConfig(BaseModel):
    """Settings for log output."""

    level: str = "WARNING"

    @field_validator("level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        v = v.upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"level must be one of {', '.join(LOG_LEVELS)}")
        return v


class Config(BaseModel):
    """Top-level configuration."""

    compiler: CompilerConfig = Field(default_factory=CompilerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def as_dict(self) -> dict[str, dict[str, str]]:
        return self.model_dump(mode="json")


def get_config_path() -> Path:
    """Return the path of the configuration file."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return Path.home() / ".config" / "tplgpp" / "config.json"


def load_config() -> Config:
    """Load the configuration, falling back to defaults if no file exists.

    Raises:
        ValueError: If the file is not valid JSON or holds invalid settings
    """
    path = get_config_path()
    if not path.exists():
        return Config()

    try:
        with open(path) as f:
            data = json.load(f)
        return Config.model_validate(data)
    except (json.JSONDecodeError, ValidationError) as e:
        raise ValueError(f"Invalid config file {path}") from e


def save_config(config: Config) -> Path:
    """Write the configuration file and return its path."""
    path = get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(config.as_dict(), f, indent=2)
    return path


def set_config_value(key: str, value: str) -> Config:
    """Set a dotted key such as "logging.level" and save the result.

    Raises:
        KeyError: If the key is not a known setting
        ValueError: If the value is not valid for the key
    """
    section, _, field = key.partition(".")
    data = load_config().as_dict()
    if section not in data or field not in data[section]:
        raise KeyError(key)

    data[section][field] = value
    try:
        config = Config.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid value for {key}: {value}") from e

    save_config(config)
    return config


def configure_logging(config: Config, debug: bool = False) -> None:
    """Set up root logging from the configuration."""
    level = logging.DEBUG if debug else getattr(logging, config.logging.level)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
