"""Package configuration module.

This module contains settings for the API versioning plugin,
loaded from environment variables with appropriate defaults.
"""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["Settings", "settings"]

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Plugin settings loaded from environment variables with defaults.

    Every variable is read with the ``APIV_`` prefix, e.g.
    ``APIV_DEFAULT_VERSION=v2``. A ``.env`` file is consulted when present.
    """
    model_config = SettingsConfigDict(
        env_prefix="APIV_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Defaults merged under user supplied plugin options
    DEFAULT_VERSION: str = Field(default="v1", max_length=255)
    DEFAULT_PREFIX: str = Field(default="api", max_length=255)

    # Metadata key carrying per-route overrides
    ROUTE_CONFIG_KEY: str = "apiv"

    # Logging configuration
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | {name} | {message}"
    LOG_JSON: bool = False

    @field_validator("DEFAULT_VERSION", "DEFAULT_PREFIX", mode="before")
    def strip_slashes(cls, v):
        """Accept ``/api`` or ``v1/`` in the environment and keep the bare segment."""
        if isinstance(v, str):
            return v.strip().strip("/")
        return v

    @field_validator("LOG_LEVEL")
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}:
            logger.warning("Unknown log level %s, falling back to INFO", v)
            return "INFO"
        return level


# Create a singleton instance of the settings
settings = Settings()
