#!/usr/bin/env python3
"""
Centralized Configuration Module using Pydantic Settings

This module provides type-safe, environment-based configuration for the queue
and cache clients. Only loading lives here; the transport turns these values
into an IronClientConfig at the point of use.

Architectural Decision: Pydantic Settings for type safety and validation
- Environment variable loading with .env support
- Type validation at startup (fail fast on misconfiguration)
- Easy testing with reload_settings()

Author: Platform Team
Date: 2026-10-02
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ironkit.core.config.constants import (
    DEFAULT_API_VERSION,
    DEFAULT_BACKOFF_FACTOR_MS,
    DEFAULT_CACHE_HOST,
    DEFAULT_MAX_RETRIES,
    DEFAULT_MQ_HOST,
    DEFAULT_PORT,
    DEFAULT_SCHEME,
    DEFAULT_TIMEOUT_SECONDS,
)


class IronSettings(BaseSettings):
    """
    Connection settings shared by the queue and cache services.

    STAGE-0.1: Service connection configuration

    Host is per service; project, token, version, scheme and port are shared.
    """

    IRON_PROJECT_ID: str | None = Field(default=None, description="Project ID")
    IRON_TOKEN: str | None = Field(default=None, description="OAuth token")
    IRON_MQ_HOST: str = Field(default=DEFAULT_MQ_HOST, description="Message queue host")
    IRON_CACHE_HOST: str = Field(default=DEFAULT_CACHE_HOST, description="Cache host")
    IRON_API_VERSION: int = Field(default=DEFAULT_API_VERSION, description="API version")
    IRON_SCHEME: Literal["http", "https"] = Field(default=DEFAULT_SCHEME, description="URL scheme")
    IRON_PORT: int = Field(default=DEFAULT_PORT, description="Service port")

    # Transport behaviour
    IRON_BACKOFF_FACTOR: int = Field(
        default=DEFAULT_BACKOFF_FACTOR_MS, ge=1, description="Backoff factor for 503 retries (ms)"
    )
    IRON_MAX_RETRIES: int = Field(
        default=DEFAULT_MAX_RETRIES, ge=1, le=20, description="Max attempts for retryable failures"
    )
    IRON_TIMEOUT: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS, gt=0, description="HTTP request timeout in seconds"
    )

    model_config = SettingsConfigDict(env_prefix="", case_sensitive=True)


class LoggingSettings(BaseSettings):
    """
    Logging configuration for structured logging.

    STAGE-L: Logging configuration
    """

    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: Literal["json", "console"] = Field(default="json", description="Log output format")

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"LOG_LEVEL must be one of {valid_levels}")
        return v.upper()

    model_config = SettingsConfigDict(env_prefix="", case_sensitive=True)


class Settings(BaseSettings):
    """
    Main settings class that aggregates all configuration sections.

    STAGE-0: Centralized configuration initialization

    Usage:
        from ironkit.core.config.settings import get_settings

        settings = get_settings()
        project_id = settings.iron.IRON_PROJECT_ID
        level = settings.logging.LOG_LEVEL
    """

    # Service settings
    IRON_PROJECT_ID: str | None = Field(default=None, description="Project ID")
    IRON_TOKEN: str | None = Field(default=None, description="OAuth token")
    IRON_MQ_HOST: str = Field(default=DEFAULT_MQ_HOST, description="Message queue host")
    IRON_CACHE_HOST: str = Field(default=DEFAULT_CACHE_HOST, description="Cache host")
    IRON_API_VERSION: int = Field(default=DEFAULT_API_VERSION, description="API version")
    IRON_SCHEME: Literal["http", "https"] = Field(default=DEFAULT_SCHEME, description="URL scheme")
    IRON_PORT: int = Field(default=DEFAULT_PORT, description="Service port")
    IRON_BACKOFF_FACTOR: int = Field(
        default=DEFAULT_BACKOFF_FACTOR_MS, ge=1, description="Backoff factor for 503 retries (ms)"
    )
    IRON_MAX_RETRIES: int = Field(
        default=DEFAULT_MAX_RETRIES, ge=1, le=20, description="Max attempts for retryable failures"
    )
    IRON_TIMEOUT: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS, gt=0, description="HTTP request timeout in seconds"
    )

    # Logging settings
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: Literal["json", "console"] = Field(default="json", description="Log output format")

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"LOG_LEVEL must be one of {valid_levels}")
        return v.upper()

    @property
    def iron(self) -> IronSettings:
        """Get service connection settings."""
        return IronSettings(
            IRON_PROJECT_ID=self.IRON_PROJECT_ID,
            IRON_TOKEN=self.IRON_TOKEN,
            IRON_MQ_HOST=self.IRON_MQ_HOST,
            IRON_CACHE_HOST=self.IRON_CACHE_HOST,
            IRON_API_VERSION=self.IRON_API_VERSION,
            IRON_SCHEME=self.IRON_SCHEME,
            IRON_PORT=self.IRON_PORT,
            IRON_BACKOFF_FACTOR=self.IRON_BACKOFF_FACTOR,
            IRON_MAX_RETRIES=self.IRON_MAX_RETRIES,
            IRON_TIMEOUT=self.IRON_TIMEOUT,
        )

    @property
    def logging(self) -> LoggingSettings:
        """Get logging settings."""
        return LoggingSettings(LOG_LEVEL=self.LOG_LEVEL, LOG_FORMAT=self.LOG_FORMAT)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # Ignore extra environment variables
    )


# Global settings instance (singleton pattern)
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get the global settings instance (singleton).

    STAGE-0.3: Settings initialization

    Returns:
        Settings: Global settings instance
    """
    global _settings

    if _settings is None:
        _settings = Settings()

    return _settings


def reload_settings() -> Settings:
    """
    Reload settings (useful for testing).

    Returns:
        Settings: New settings instance
    """
    global _settings
    _settings = Settings()
    return _settings
