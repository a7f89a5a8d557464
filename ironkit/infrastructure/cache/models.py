"""
Cache Wire Models

Author: Platform Team
Date: 2026-10-02
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ironkit.core.interfaces import ValueSerializer


class CacheItemOptions(BaseModel):
    """
    Write options for a cache PUT.

    Attributes:
        expires_in: Seconds until the item expires
        replace: Only store if the key already exists
        add: Only store if the key does not exist
        cas: Only store if the item's cas value still matches
    """

    model_config = ConfigDict(extra="ignore")

    expires_in: int | None = Field(default=None, ge=0)
    replace: bool | None = None
    add: bool | None = None
    cas: int | None = None


class CacheItem(BaseModel):
    """A stored cache entry. ``value`` is a string or an integer."""

    model_config = ConfigDict(extra="ignore")

    cache: str | None = None
    key: str | None = None
    value: str | int | None = None
    cas: int | None = None
    options: CacheItemOptions = Field(default_factory=CacheItemOptions, exclude=True)

    def to_put_body(self) -> dict[str, Any]:
        body: dict[str, Any] = {"value": self.value}
        body.update(self.options.model_dump(exclude_none=True))
        return body

    def read_value_as(self, value_type: Any = None, serializer: ValueSerializer | None = None) -> Any:
        """
        Read the stored value as ``value_type``.

        Strings and integers are returned directly; any other type is parsed
        with the serializer. An empty value reads as None for every type
        except ``str``.
        """
        if self.value is None:
            return None
        if value_type is None:
            return self.value
        if value_type is str:
            return str(self.value)
        if self.value == "":
            return None
        if value_type is int:
            return int(self.value)
        if serializer is None:
            raise ValueError(f"A serializer is required to read {value_type!r}")
        return serializer.parse(str(self.value), value_type)


class CacheIncrementResult(BaseModel):
    """Result of an atomic increment: the new value and the confirmation."""

    model_config = ConfigDict(extra="ignore")

    value: int
    msg: str | None = None


class CacheInfo(BaseModel):
    """Cache metadata."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str | None = None
    name: str
    project_id: str | None = None
    size: int | None = None
