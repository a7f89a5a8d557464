"""
Cache Service Client

Entry point for the hosted key-value cache service. Owns the REST transport
and the value serializer, and hands out CacheClient handles.

Author: Platform Team
Date: 2026-10-02
"""

from __future__ import annotations

import httpx

from ironkit.core.config.constants import CACHES_ENDPOINT, DEFAULT_CACHE_HOST, Stage
from ironkit.core.config.settings import Settings, get_settings
from ironkit.core.interfaces import ValueSerializer
from ironkit.core.logging import get_logger
from ironkit.infrastructure.cache.cache_client import CacheClient
from ironkit.infrastructure.cache.models import CacheInfo
from ironkit.infrastructure.cache.serializer import JsonValueSerializer
from ironkit.infrastructure.transport import IronClientConfig, RestClient

logger = get_logger(__name__)


class IronCacheClient:
    """
    Client for the hosted cache service, scoped to one project.

    Attributes:
        config: Connection configuration
        rest: Shared REST transport for every cache handle
        serializer: Converts non-string values for storage
    """

    def __init__(
        self,
        config: IronClientConfig,
        serializer: ValueSerializer | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config = config
        self.rest = RestClient(config, transport=transport)
        self.serializer = serializer or JsonValueSerializer()
        self.endpoint = CACHES_ENDPOINT.format(project_id=config.project_id)

        logger.info(
            "Cache client initialized",
            stage=Stage.INITIALIZATION.value,
            host=config.host,
            project_id=config.project_id,
        )

    @classmethod
    def create(
        cls,
        project_id: str,
        token: str,
        host: str | None = None,
        serializer: ValueSerializer | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        **config_overrides,
    ) -> IronCacheClient:
        config = IronClientConfig(
            host=host or DEFAULT_CACHE_HOST,
            project_id=project_id,
            token=token,
            **config_overrides,
        )
        return cls(config, serializer=serializer, transport=transport)

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        serializer: ValueSerializer | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> IronCacheClient:
        settings = settings or get_settings()
        config = IronClientConfig.from_settings(settings, host=settings.iron.IRON_CACHE_HOST)
        return cls(config, serializer=serializer, transport=transport)

    async def __aenter__(self) -> IronCacheClient:
        await self.rest.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.rest.aclose()

    def cache(self, name: str) -> CacheClient:
        return CacheClient(self, name)

    async def caches(self, page: int | None = None) -> list[CacheInfo]:
        """List caches in the project."""
        body = await self.rest.get(self.endpoint, params={"page": page})
        return [CacheInfo.model_validate(raw) for raw in body or []]
