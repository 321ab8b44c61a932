"""
Application settings loaded from environment variables.

Every field can be overridden with a ``LATE_FROST_`` prefixed variable or a
``.env`` file, e.g. ``LATE_FROST_TFROST=-3``.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from late_frost.gdd.compute import DEFAULT_BASE_TEMP_C, DEFAULT_EQUATION, DEFAULT_TFROST_C


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="LATE_FROST_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "late-frost"
    app_env: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Defaults for FrostOptions
    base: float = DEFAULT_BASE_TEMP_C
    tfrost: float = DEFAULT_TFROST_C
    equation: str = DEFAULT_EQUATION

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            msg = f"unknown log level {value!r}"
            raise ValueError(msg)
        return level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
