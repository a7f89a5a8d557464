"""
Client Connection Configuration

Validated, immutable connection settings for one hosted service. The queue
client and the cache client each hold their own IronClientConfig; they differ
only in host.

Architectural Decision: Explicit construction of nested defaults
- IronSharpConfig is built by default_factory when the config is created
- Nothing is initialized on first access, so a config read from two tasks
  always sees the same retry settings

Author: Platform Team
Date: 2026-10-02
"""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from ironkit.core.config.constants import (
    DEFAULT_API_VERSION,
    DEFAULT_BACKOFF_FACTOR_MS,
    DEFAULT_MAX_RETRIES,
    DEFAULT_PORT,
    DEFAULT_SCHEME,
    DEFAULT_TIMEOUT_SECONDS,
)
from ironkit.core.config.settings import Settings
from ironkit.core.exceptions import ConfigurationError


class IronSharpConfig(BaseModel):
    """
    Transport behaviour shared by every request of one client.

    Attributes:
        backoff_factor: Base delay for 503 retries, in milliseconds
        max_retries: Total attempts for a retryable failure, the first try
            included (3 means one try and two retries)
        timeout: Per-request timeout in seconds
    """

    model_config = {"frozen": True}

    backoff_factor: int = Field(default=DEFAULT_BACKOFF_FACTOR_MS, ge=1)
    max_retries: int = Field(default=DEFAULT_MAX_RETRIES, ge=1, le=20)
    timeout: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)

    @property
    def backoff_seconds(self) -> float:
        return self.backoff_factor / 1000.0


class IronClientConfig(BaseModel):
    """
    Connection configuration for one hosted service.

    Example:
        config = IronClientConfig(
            host="mq-aws-us-east-1.iron.io",
            project_id="my-project",
            token="abc123",
        )
        config.base_url  # "https://mq-aws-us-east-1.iron.io:443/1"
    """

    model_config = {"frozen": True}

    host: str = Field(min_length=1, description="Service host name")
    project_id: str = Field(min_length=1, description="Project ID")
    token: str = Field(min_length=1, repr=False, description="OAuth token")
    api_version: int = Field(default=DEFAULT_API_VERSION, ge=1)
    scheme: Literal["http", "https"] = DEFAULT_SCHEME
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    sharp_config: IronSharpConfig = Field(default_factory=IronSharpConfig)

    @field_validator("host")
    @classmethod
    def strip_host(cls, v: str) -> str:
        """Accept hosts given with a scheme or trailing slash."""
        for prefix in ("https://", "http://"):
            if v.startswith(prefix):
                v = v[len(prefix):]
        return v.rstrip("/")

    @property
    def base_url(self) -> str:
        return f"{self.scheme}://{self.host}:{self.port}/{self.api_version}"

    @classmethod
    def from_settings(cls, settings: Settings, host: str) -> "IronClientConfig":
        """
        Build a config from environment-loaded settings.

        Args:
            settings: Loaded settings
            host: Service host (settings carry one host per service)

        Raises:
            ConfigurationError: If project id or token is not configured
        """
        iron = settings.iron
        missing = [
            name
            for name, value in (("IRON_PROJECT_ID", iron.IRON_PROJECT_ID), ("IRON_TOKEN", iron.IRON_TOKEN))
            if not value
        ]
        if missing:
            raise ConfigurationError(
                "Service credentials are not configured",
                details={"missing": missing},
            )

        return cls(
            host=host,
            project_id=iron.IRON_PROJECT_ID,
            token=iron.IRON_TOKEN,
            api_version=iron.IRON_API_VERSION,
            scheme=iron.IRON_SCHEME,
            port=iron.IRON_PORT,
            sharp_config=IronSharpConfig(
                backoff_factor=iron.IRON_BACKOFF_FACTOR,
                max_retries=iron.IRON_MAX_RETRIES,
                timeout=iron.IRON_TIMEOUT,
            ),
        )
