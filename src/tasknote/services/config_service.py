"""Configuration service for tasknote.

This module provides the ConfigService class, the single source of truth for
configuration. It handles:

- Loading and saving config.json
- Dotted-key access (``toggle.done_symbol``) for the ``config`` command
- Config file initialization with defaults on first run
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir
from pydantic import BaseModel, ValidationError

from tasknote.models.config_models import AppConfig
from tasknote.utils.logger import get_logger


class ConfigService:
    """Service for loading, saving and editing the application configuration."""

    def __init__(self):
        """Initialize the config service."""

        self.config_dir = Path(user_config_dir("tasknote"))
        self.config_path = self.config_dir / "config.json"

        self.config_dir.mkdir(parents=True, exist_ok=True)

        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> AppConfig:
        """Load configuration from storage."""
        if self._config is not None:
            return self._config  # Return cached config if already loaded

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            # Expected on first run
            self._config = AppConfig()
            self.save_config()
        except (OSError, ValidationError) as e:
            raise RuntimeError(f"Failed to load config: {e}") from e

        return self._config

    def save_config(self) -> None:
        """Save the current configuration to storage."""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self.config.model_dump_json(indent=4))
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}") from e

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key.

        Raises:
            KeyError: If the key does not exist
        """
        value: Any = self.config
        for k in key.split("."):
            if not isinstance(value, BaseModel) or k not in type(value).model_fields:
                raise KeyError(key)
            value = getattr(value, k)
        return value

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key.

        The whole configuration is validated again, so an invalid value
        (e.g. a tag marker with spaces) raises ``ValueError`` and leaves the
        stored configuration untouched.
        """
        self.get(key)  # raises KeyError for unknown keys

        keys = key.split(".")
        config_dict = self.config.model_dump()
        current = config_dict
        for k in keys[:-1]:
            current = current[k]
        current[keys[-1]] = value

        try:
            self._config = AppConfig.model_validate(config_dict)
        except ValidationError as e:
            raise ValueError(f"Invalid value for '{key}': {e.errors()[0]['msg']}") from e
        self.save_config()
        get_logger().info("config updated: %s", key)

    def reset(self, key: str | None = None) -> None:
        """Reset configuration (or one key) to defaults."""
        if key is None:
            self._config = AppConfig()
            self.save_config()
            return

        default_value: Any = AppConfig()
        for k in key.split("."):
            if (
                not isinstance(default_value, BaseModel)
                or k not in type(default_value).model_fields
            ):
                raise KeyError(key)
            default_value = getattr(default_value, k)
        if isinstance(default_value, BaseModel):
            default_value = default_value.model_dump()
        self.set(key, default_value)


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get a cached ConfigService instance."""
    config_service = ConfigService()
    config_service.load_config()
    return config_service
