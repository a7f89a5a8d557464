"""
ironkit

Async clients for a hosted message-queue service and a hosted key-value
cache service, with a forwarder that requeues failed messages.

Usage:
------
```python
from ironkit import FailedMessageRetrySender, IronCacheClient, IronMQClient

async with IronMQClient.from_settings() as mq:
    sender = FailedMessageRetrySender(mq, mq.queue("orders"))
    result = await sender.resend_failed_messages()

async with IronCacheClient.from_settings() as cache_client:
    sessions = cache_client.cache("sessions")
    profile = await sessions.get_or_add("user:1", load_profile)
```
"""

from ironkit.core.exceptions import (
    CacheError,
    ConfigurationError,
    IronKitError,
    NotFoundError,
    TransportError,
    TypeMismatchError,
)
from ironkit.infrastructure.cache import CacheClient, CacheItem, CacheItemOptions, IronCacheClient
from ironkit.infrastructure.message_queue import (
    IronMQClient,
    MessageIdCollection,
    QueueClient,
    QueueInfo,
    QueueMessage,
)
from ironkit.infrastructure.transport import IronClientConfig, IronSharpConfig
from ironkit.pushforward import FailedMessageRetrySender

__version__ = "0.1.0"

__all__ = [
    "IronClientConfig",
    "IronSharpConfig",
    "IronMQClient",
    "QueueClient",
    "QueueInfo",
    "QueueMessage",
    "MessageIdCollection",
    "IronCacheClient",
    "CacheClient",
    "CacheItem",
    "CacheItemOptions",
    "FailedMessageRetrySender",
    "IronKitError",
    "ConfigurationError",
    "TransportError",
    "NotFoundError",
    "CacheError",
    "TypeMismatchError",
]
