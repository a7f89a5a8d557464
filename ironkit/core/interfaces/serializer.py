"""
Value Serializer Protocol

Cache values travel as strings; the serializer converts arbitrary objects
to and from that representation.

Author: Platform Team
Date: 2026-10-02
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ValueSerializer(Protocol):
    """
    Protocol for cache value serializers.

    Implementations:
    - JsonValueSerializer: orjson encoding with pydantic validation on read
    """

    def generate(self, value: Any) -> str:
        """Serialize a value to its stored string form."""
        ...

    def parse(self, text: str, value_type: Any = None) -> Any:
        """
        Deserialize a stored string.

        Args:
            text: Stored string
            value_type: Target type; None returns the decoded JSON as-is
        """
        ...
