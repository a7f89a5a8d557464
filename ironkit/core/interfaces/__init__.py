"""
Core Interfaces Module

This module provides protocols for the components the forwarder and the
cache handle depend on, enabling dependency injection and testability.

Components:
-----------
- **queue.py**: QueueBackend / QueueProvider protocols for queue handles
- **serializer.py**: ValueSerializer protocol for cache values

Architecture:
------------
Interfaces follow the Protocol pattern (PEP 544) for structural subtyping:
- Runtime type checking with @runtime_checkable
- No inheritance required
- Easy mocking for tests

Usage:
------
```python
from ironkit.core.interfaces import QueueBackend

async def depth(queue: QueueBackend) -> int:
    return (await queue.info()).size
```
"""

from ironkit.core.interfaces.queue import QueueBackend, QueueProvider
from ironkit.core.interfaces.serializer import ValueSerializer

__all__ = [
    # Queue interfaces
    "QueueBackend",
    "QueueProvider",
    # Cache interfaces
    "ValueSerializer",
]
