"""
Queue Backend Protocol

This module defines the protocol the push-forward retry sender depends on,
so the forwarder can run against any queue handle with the same shape.

Architectural Decision: Protocol-based abstraction
- The forwarder never imports the concrete HTTP queue client
- Tests inject AsyncMock doubles or the in-memory service fake
- Type-safe interface with runtime checking

Author: Platform Team
Date: 2026-10-02
"""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ironkit.infrastructure.message_queue.models import (
        MessageIdCollection,
        QueueInfo,
        QueueMessage,
    )


@runtime_checkable
class QueueBackend(Protocol):
    """
    Protocol for a handle bound to one named queue.

    Implementations:
    - QueueClient: HTTP-backed handle on the hosted queue service

    Usage:
        async def drain(queue: QueueBackend) -> int:
            count = 0
            while (message := await queue.read()) is not None:
                await queue.delete(message)
                count += 1
            return count
    """

    name: str

    async def info(self) -> "QueueInfo":
        """
        Fetch queue metadata, including the error queue name.

        Raises:
            NotFoundError: If the queue does not exist
            TransportError: On any other network or HTTP failure
        """
        ...

    async def read(self, timeout: int | None = None) -> "QueueMessage | None":
        """
        Reserve the next message.

        Returns:
            The message, or None when the queue is empty
        """
        ...

    async def post_messages(self, messages) -> "MessageIdCollection":
        """Enqueue one or more messages and return the service's confirmation."""
        ...

    async def delete(self, message) -> bool:
        """
        Delete a message by id.

        Returns:
            bool: True if the service confirmed the delete
        """
        ...


@runtime_checkable
class QueueProvider(Protocol):
    """Resolves queue names to handles."""

    def queue(self, name: str) -> QueueBackend:
        ...
