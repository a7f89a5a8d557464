"""
JSON Value Serializer

Converts cache values to and from their stored string form using orjson.
Reads are validated through pydantic's TypeAdapter, so any type pydantic
understands (models, dataclasses, list[int], ...) can be read back.

Author: Platform Team
Date: 2026-10-02
"""

from functools import lru_cache
from typing import Any

import orjson
from pydantic import BaseModel, TypeAdapter, ValidationError

from ironkit.core.exceptions import CacheValueError
from ironkit.core.logging import get_correlation_id


@lru_cache(maxsize=128)
def _adapter_for(value_type: Any) -> TypeAdapter:
    return TypeAdapter(value_type)


class JsonValueSerializer:
    """orjson-backed ValueSerializer."""

    def generate(self, value: Any) -> str:
        if isinstance(value, BaseModel):
            value = value.model_dump(mode="json")
        try:
            return orjson.dumps(value).decode("utf-8")
        except TypeError as e:
            raise CacheValueError.from_exception(
                e,
                message=f"Cannot serialize value of type {type(value).__name__}",
                correlation_id=get_correlation_id(),
            ) from e

    def parse(self, text: str, value_type: Any = None) -> Any:
        try:
            data = orjson.loads(text)
        except orjson.JSONDecodeError as e:
            raise CacheValueError.from_exception(
                e,
                message="Stored value is not valid JSON",
                correlation_id=get_correlation_id(),
            ) from e

        if value_type is None:
            return data

        try:
            return _adapter_for(value_type).validate_python(data)
        except ValidationError as e:
            raise CacheValueError.from_exception(
                e,
                message=f"Stored value does not match {getattr(value_type, '__name__', value_type)}",
                correlation_id=get_correlation_id(),
            ) from e
