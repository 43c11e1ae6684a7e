"""Top-level postmore configuration."""

import json
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from ...constants import DEFAULT_FILTER_NAME, DEFAULT_LINK_TEXT
from .ConfigError import ConfigError
from .get_home_dir import get_home_dir

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class PostMoreConfig(BaseModel):
    """Configuration for filter registration and the CLI.

    Marker literals and link markup are fixed and not part of the config.
    """

    model_config = ConfigDict(extra="forbid")

    filter_name: str = DEFAULT_FILTER_NAME
    link_text: str = DEFAULT_LINK_TEXT
    log_level: str = "INFO"

    @field_validator("filter_name")
    @classmethod
    def _check_filter_name(cls, value: str) -> str:
        if not value.isidentifier():
            raise ValueError(f"filter_name must be a valid identifier, got {value!r}")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file based on POSTMORE_HOME or default to ~/.postmore."""
        return get_home_dir("config.json")

    @classmethod
    def load(cls) -> "PostMoreConfig":
        """Load and validate config from file.

        A missing config file yields the defaults.

        Raises:
            ConfigError: If the file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ConfigError(f"Config file {path} must contain a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first["loc"])
            detail = f"{field}: {first['msg']}" if field else first["msg"]
            raise ConfigError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary for serialization."""
        return self.model_dump()

    def save(self) -> None:
        """Save the configuration to its JSON file.

        Uses atomic write (write to temp file, then rename) to prevent corruption.
        """
        path = self.get_config_path()
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with temp_path.open("w", encoding="utf-8") as fh:
                json.dump(self.to_dict(), fh, indent=4)
            temp_path.replace(path)
        except Exception as e:
            with suppress(Exception):
                if temp_path.exists():
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save config: {e}") from e
