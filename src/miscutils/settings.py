"""
Settings Management Module

Provides pydantic-based configuration management with:
- YAML configuration file loading
- Environment variable overrides (MISCUTILS_*)
- Cached access through get_settings()
"""

import codecs
import os
from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


CONFIG_PATH_ENV = "MISCUTILS_CONFIG"


class MiscUtilsSettings(BaseSettings):
    """
    URL helper settings.

    Configuration hierarchy (lowest to highest precedence):
    1. Field defaults
    2. Environment variables (MISCUTILS_*)
    3. Values from a YAML file passed to load_from_yaml()

    Examples:
        >>> settings = get_settings()
        >>> settings.default_encoding
        'utf-8'
    """

    model_config = SettingsConfigDict(
        env_prefix="MISCUTILS_",
        case_sensitive=False,
        extra="ignore",
    )

    default_encoding: str = "utf-8"
    allowed_schemes: list[str] = Field(
        default_factory=lambda: ["http", "https", "ftp", "file"]
    )

    log_level: str = "INFO"
    json_logs: bool = False

    @field_validator("default_encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {value}") from e
        return value

    @field_validator("allowed_schemes")
    @classmethod
    def _lowercase_schemes(cls, value: list[str]) -> list[str]:
        return [scheme.lower() for scheme in value]

    @classmethod
    def load_from_yaml(cls, config_path: Path | None = None) -> "MiscUtilsSettings":
        """
        Load settings from a YAML configuration file.

        Args:
            config_path: Path to config file (default: $MISCUTILS_CONFIG)

        Returns:
            MiscUtilsSettings instance; defaults when no file is found
        """
        if config_path is None:
            env_path = os.getenv(CONFIG_PATH_ENV)
            if not env_path:
                return cls()
            config_path = Path(env_path)

        if not config_path.exists():
            return cls()

        with open(config_path) as f:
            config_data = yaml.safe_load(f) or {}

        return cls(**config_data)


@lru_cache
def get_settings(config_path: Path | None = None) -> MiscUtilsSettings:
    """
    Get cached settings instance.

    Args:
        config_path: Optional path to config file

    Returns:
        MiscUtilsSettings instance
    """
    return MiscUtilsSettings.load_from_yaml(config_path)


def reload_settings() -> MiscUtilsSettings:
    """Reload settings by clearing cache."""
    get_settings.cache_clear()
    return get_settings()


__all__ = [
    "MiscUtilsSettings",
    "get_settings",
    "reload_settings",
]
