"""
Cache Handle

A CacheClient is bound to one named cache on the hosted key-value cache
service and implements the cache-aside protocol on top of it.

Cache-aside:
------------
``get_or_add`` reads the key and, only when it is absent, computes the value
with the caller's factory and stores it. The sequence is not atomic and takes
no lock: two callers racing on an absent key both run their factory and both
store, and the last write wins. Use ``increment`` when a race must not lose
updates; the service applies increments atomically.

Absent vs empty:
----------------
``get`` returns None only when the key does not exist. A key holding the
empty string comes back as a CacheItem with ``value == ""``.

Author: Platform Team
Date: 2026-10-02
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, TypeVar, Union
from urllib.parse import quote

from ironkit.core.config.constants import (
    HTTP_BAD_REQUEST,
    MSG_CACHE_DELETED,
    MSG_CACHE_STORED,
    Stage,
)
from ironkit.core.exceptions import NotFoundError, TransportError, TypeMismatchError
from ironkit.core.logging import get_correlation_id, get_logger
from ironkit.infrastructure.cache.models import (
    CacheIncrementResult,
    CacheInfo,
    CacheItem,
    CacheItemOptions,
)
from ironkit.infrastructure.transport.models import ResponseMsg

if TYPE_CHECKING:
    from ironkit.infrastructure.cache.client import IronCacheClient

logger = get_logger(__name__)

T = TypeVar("T")
ValueFactory = Callable[[], Union[T, Awaitable[T]]]


class CacheClient:
    """
    Handle on one named cache.

    Example:
        cache = iron_cache.cache("sessions")
        await cache.put("user:1", {"name": "Ada"})
        profile = await cache.get_value("user:1", dict)
        visits = await cache.increment("visits")
    """

    def __init__(self, client: IronCacheClient, name: str):
        if not name:
            raise ValueError("Cache name must not be empty")
        self._client = client
        self.name = name

    def __repr__(self) -> str:
        return f"CacheClient(name={self.name!r})"

    @property
    def endpoint(self) -> str:
        return f"{self._client.endpoint}/{quote(self.name, safe='')}"

    def _item_path(self, key: str) -> str:
        if not key:
            raise ValueError("Cache key must not be empty")
        return f"{self.endpoint}/items/{quote(key, safe='')}"

    # =========================================================================
    # Reads
    # =========================================================================

    async def info(self) -> CacheInfo:
        body = await self._client.rest.get(self.endpoint)
        return CacheInfo.model_validate(body)

    async def get(self, key: str) -> CacheItem | None:
        """
        Fetch an item.

        Returns:
            The item, or None if the key does not exist
        """
        try:
            body = await self._client.rest.get(self._item_path(key))
        except NotFoundError:
            logger.debug("Cache miss", stage=Stage.CACHE.value, cache=self.name, key=key)
            return None
        return CacheItem.model_validate(body)

    async def get_value(self, key: str, value_type: Any = None) -> Any:
        """
        Fetch an item's value, read as ``value_type``.

        Returns None when the key does not exist.

        Raises:
            CacheValueError: If the stored value cannot be read as value_type
        """
        item = await self.get(key)
        if item is None:
            return None
        return item.read_value_as(value_type, self._client.serializer)

    # =========================================================================
    # Writes
    # =========================================================================

    async def put(
        self,
        key: str,
        value: CacheItem | str | int | Any,
        options: CacheItemOptions | None = None,
    ) -> bool:
        """
        Store a value.

        Strings and integers are stored as-is; other objects go through the
        value serializer. A CacheItem carries its own options unless
        ``options`` is given.

        Returns:
            bool: True if the service confirmed the store
        """
        item = self._to_item(value, options)
        body = await self._client.rest.put(self._item_path(key), item.to_put_body())
        stored = ResponseMsg.model_validate(body).has_expected_message(MSG_CACHE_STORED)

        if not stored:
            logger.warning(
                "Cache store not confirmed",
                stage=Stage.CACHE.value,
                cache=self.name,
                key=key,
                msg=body.get("msg") if isinstance(body, dict) else None,
            )
        return stored

    async def delete(self, key: str) -> bool:
        """
        Delete an item. A key that does not exist is not an error.

        Returns:
            bool: True if the service confirmed the delete
        """
        try:
            body = await self._client.rest.delete(self._item_path(key))
        except NotFoundError:
            return False
        return ResponseMsg.model_validate(body).has_expected_message(MSG_CACHE_DELETED)

    async def clear(self) -> bool:
        body = await self._client.rest.post(f"{self.endpoint}/clear", {})
        return ResponseMsg.model_validate(body).has_expected_message(MSG_CACHE_DELETED)

    async def increment(self, key: str, amount: int = 1) -> CacheIncrementResult:
        """
        Atomically add ``amount`` (may be negative) to a numeric item.

        A missing key is created with value ``amount``.

        Raises:
            TypeMismatchError: If the stored value is not numeric
        """
        try:
            body = await self._client.rest.post(
                f"{self._item_path(key)}/increment", {"amount": amount}
            )
        except TransportError as e:
            if e.status_code == HTTP_BAD_REQUEST:
                raise TypeMismatchError(
                    f"Cannot increment non-numeric value at key {key!r}",
                    correlation_id=get_correlation_id(),
                    details={"cache": self.name, "key": key, "amount": amount},
                ) from e
            raise
        return CacheIncrementResult.model_validate(body)

    # =========================================================================
    # Cache-aside
    # =========================================================================

    async def get_or_add(
        self,
        key: str,
        value_factory: ValueFactory,
        options: CacheItemOptions | None = None,
        value_type: Any = None,
    ) -> Any:
        """
        Return the stored value, computing and storing it if absent.

        ``value_factory`` may be a plain callable or return an awaitable.
        It is called only when the key is absent; a stored empty value counts
        as present and is returned as read through ``value_type``.
        """
        existing = await self.get(key)
        if existing is not None:
            return existing.read_value_as(value_type, self._client.serializer)

        value = value_factory()
        if inspect.isawaitable(value):
            value = await value

        await self.put(key, value, options)
        return value

    async def get_or_add_item(
        self,
        key: str,
        item_factory: Callable[[], Union[CacheItem, Awaitable[CacheItem]]],
    ) -> CacheItem:
        """Same protocol as ``get_or_add``, over raw CacheItems."""
        existing = await self.get(key)
        if existing is not None:
            return existing

        item = item_factory()
        if inspect.isawaitable(item):
            item = await item

        await self.put(key, item)
        return item

    def _to_item(self, value: Any, options: CacheItemOptions | None) -> CacheItem:
        if isinstance(value, CacheItem):
            if options is None:
                return value
            return value.model_copy(update={"options": options})

        # bool is an int subclass but is not a numeric cache value
        if isinstance(value, (str, int)) and not isinstance(value, bool):
            stored = value
        else:
            stored = self._client.serializer.generate(value)
        return CacheItem(value=stored, options=options or CacheItemOptions())
