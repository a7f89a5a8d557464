"""
Message Queue Module

Async client for the hosted message-queue service.

Components:
-----------
- **client.py**: IronMQClient, the project-scoped service client
- **queue_client.py**: QueueClient, a handle on one named queue
- **models.py**: QueueInfo, QueueMessage, MessageIdCollection, ResponseMsg
"""

from ironkit.infrastructure.message_queue.client import IronMQClient
from ironkit.infrastructure.message_queue.models import (
    MessageIdCollection,
    QueueInfo,
    QueueMessage,
    ResponseMsg,
)
from ironkit.infrastructure.message_queue.queue_client import QueueClient

__all__ = [
    "IronMQClient",
    "QueueClient",
    "QueueInfo",
    "QueueMessage",
    "MessageIdCollection",
    "ResponseMsg",
]
