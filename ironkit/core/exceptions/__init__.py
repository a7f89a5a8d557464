"""
Exception Module

Structured exception hierarchy for the queue and cache clients.

Module Structure:
-----------------
- **base.py**: IronKitError base class + ConfigurationError
- **transport.py**: TransportError, NotFoundError, ConfirmationMismatchError
- **queue.py**: Message queue exceptions
- **cache.py**: Cache exceptions (TypeMismatchError, CacheValueError)

Usage:
------
```python
from ironkit.core.exceptions import NotFoundError, TransportError

try:
    info = await queue.info()
except NotFoundError:
    ...
```
"""

from ironkit.core.exceptions.base import ConfigurationError, IronKitError
from ironkit.core.exceptions.cache import CacheError, CacheValueError, TypeMismatchError
from ironkit.core.exceptions.queue import QueueError
from ironkit.core.exceptions.transport import (
    ConfirmationMismatchError,
    NotFoundError,
    TransportError,
)

__all__ = [
    # Base
    "IronKitError",
    "ConfigurationError",
    # Transport
    "TransportError",
    "NotFoundError",
    "ConfirmationMismatchError",
    # Queue
    "QueueError",
    # Cache
    "CacheError",
    "TypeMismatchError",
    "CacheValueError",
]
