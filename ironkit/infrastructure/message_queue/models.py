"""
Message Queue Wire Models

Pydantic models for the queue service's JSON bodies.

Author: Platform Team
Date: 2026-10-02
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from ironkit.core.config.constants import MSG_MESSAGES_POSTED
from ironkit.core.exceptions import QueueError
from ironkit.infrastructure.transport.models import ResponseMsg

if TYPE_CHECKING:
    from ironkit.infrastructure.message_queue.queue_client import QueueClient


class QueueInfo(BaseModel):
    """Queue metadata. Fetched on demand and never cached."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str | None = None
    name: str
    project_id: str | None = None
    size: int = 0
    total_messages: int = 0
    retries: int | None = None
    retries_delay: int | None = None
    push_type: str | None = None
    error_queue: str | None = None

    @property
    def has_error_queue(self) -> bool:
        return bool(self.error_queue)


class QueueMessage(BaseModel):
    """
    A message on a queue.

    ``id`` is assigned by the service on post. A message returned by
    ``QueueClient.read`` remembers its queue and can delete itself.
    """

    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    body: str
    timeout: int | None = Field(default=None, ge=0, description="Reservation timeout (s)")
    delay: int | None = Field(default=None, ge=0, description="Seconds before first visible")
    expires_in: int | None = Field(default=None, ge=0, description="Seconds before expiry")
    reserved_count: int | None = None

    _queue: Any = PrivateAttr(default=None)

    def bind(self, queue: QueueClient) -> QueueMessage:
        self._queue = queue
        return self

    def to_post_body(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True, exclude={"id", "reserved_count"})

    async def delete(self) -> bool:
        """
        Delete this message from the queue it was read from.

        Raises:
            QueueError: If the message was not read through a queue handle
        """
        if self._queue is None or not self.id:
            raise QueueError(
                "Message is not bound to a queue",
                details={"message_id": self.id},
            )
        return await self._queue.delete(self.id)

    def __str__(self) -> str:
        return self.body


class MessageIdCollection(ResponseMsg):
    """
    Ids returned by one or more posts, plus the batch confirmation.

    Use ``is_success()``; the collection deliberately has no truthiness
    of its own.

    ``failed_ids`` holds error-queue ids of messages a fault-isolating
    forward run could not move.
    """

    model_config = ConfigDict(extra="ignore")

    ids: list[str] = Field(default_factory=list)
    failed_ids: list[str] = Field(default_factory=list)

    def is_success(self) -> bool:
        return self.has_expected_message(MSG_MESSAGES_POSTED)

    def add_ids(self, ids: list[str]) -> None:
        self.ids.extend(ids)
