"""Configuration management for Pomodoro CLI."""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

from platformdirs import user_config_dir
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

logger = logging.getLogger(__name__)


class UIConfig(BaseModel):
    """UI configuration."""

    title: str = Field(default="Pomodoro")
    show_key_hints: bool = Field(default=True)
    warning_threshold: int = Field(default=300, ge=0)
    critical_threshold: int = Field(default=60, ge=0)

    @model_validator(mode="after")
    def check_thresholds(self) -> "UIConfig":
        if self.critical_threshold > self.warning_threshold:
            raise ValueError("critical_threshold cannot exceed warning_threshold")
        return self


class LoggingConfig(BaseModel):
    """Logging configuration."""

    enabled: bool = Field(default=True)
    level: str = Field(default="INFO")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {v}")
        return level


class AppConfig(BaseModel):
    """Main configuration."""

    ui: UIConfig = Field(default_factory=UIConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class ConfigManager:
    """Manages Pomodoro CLI configuration."""

    def __init__(self, config_dir: Path | None = None):
        self.config_dir = config_dir or Path(user_config_dir("pomodoro_cli"))
        self.config_file = self.config_dir / "config.json"

        # Ensure directory exists
        self.config_dir.mkdir(parents=True, exist_ok=True)

        self._config: Optional[AppConfig] = None

    @property
    def config(self) -> AppConfig:
        """Get the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> AppConfig:
        """Load configuration from file, falling back to defaults."""
        if self.config_file.exists():
            try:
                with open(self.config_file, encoding="utf-8") as f:
                    data = json.load(f)
                return AppConfig(**data)
            except (json.JSONDecodeError, TypeError, ValidationError) as e:
                # If config is corrupted, return default
                logger.warning("ignoring invalid config %s: %s", self.config_file, e)
                return AppConfig()
        return AppConfig()

    def save_config(self, config: Optional[AppConfig] = None) -> None:
        """Save configuration to file."""
        if config is None:
            config = self.config

        with open(self.config_file, "w", encoding="utf-8") as f:
            json.dump(config.model_dump(), f, indent=2)

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key."""
        return self.get_from_config(self.config, key)

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key."""
        keys = key.split(".")
        if self.get(key) is None:
            raise KeyError(key)

        config_dict = self.config.model_dump()

        # Navigate to the nested dictionary
        current = config_dict
        for k in keys[:-1]:
            current = current[k]

        current[keys[-1]] = value

        # Revalidate before persisting
        self._config = AppConfig(**config_dict)
        self.save_config()

    def reset(self, key: Optional[str] = None) -> None:
        """Reset configuration to defaults."""
        if key is None:
            self._config = AppConfig()
        else:
            default_value = self.get_from_config(AppConfig(), key)
            if default_value is None:
                raise KeyError(key)
            self.set(key, default_value)
        self.save_config()

    @staticmethod
    def get_from_config(config: AppConfig, key: str) -> Any:
        """Get value from a config object using dot notation."""
        value: Any = config
        for k in key.split("."):
            if isinstance(value, BaseModel):
                value = getattr(value, k, None)
            else:
                return None
        return value


@lru_cache(maxsize=1)
def get_config_manager() -> ConfigManager:
    """Get or create the global config manager."""
    return ConfigManager()
