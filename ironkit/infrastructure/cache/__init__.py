"""
Cache Module

Async client for the hosted key-value cache service.

Components:
-----------
- **client.py**: IronCacheClient, the project-scoped service client
- **cache_client.py**: CacheClient, a handle on one named cache (cache-aside)
- **models.py**: CacheItem, CacheItemOptions, CacheIncrementResult, CacheInfo
- **serializer.py**: JsonValueSerializer (orjson + pydantic TypeAdapter)
"""

from ironkit.infrastructure.cache.cache_client import CacheClient
from ironkit.infrastructure.cache.client import IronCacheClient
from ironkit.infrastructure.cache.models import (
    CacheIncrementResult,
    CacheInfo,
    CacheItem,
    CacheItemOptions,
)
from ironkit.infrastructure.cache.serializer import JsonValueSerializer

__all__ = [
    "IronCacheClient",
    "CacheClient",
    "CacheItem",
    "CacheItemOptions",
    "CacheIncrementResult",
    "CacheInfo",
    "JsonValueSerializer",
]
