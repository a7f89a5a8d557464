"""
Queue Handle

A QueueClient is bound to one named queue on the hosted queue service. It
reads, posts and deletes messages and fetches the queue's metadata.

Confirmation semantics:
-----------------------
The service signals success through the body's ``msg`` field. ``delete``
and ``clear`` return True only on an exact confirmation match; a 2xx with
any other body is reported as False, not raised.

Author: Platform Team
Date: 2026-10-02
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Union
from urllib.parse import quote

from ironkit.core.config.constants import MSG_MESSAGE_DELETED, MSG_QUEUE_CLEARED, Stage
from ironkit.core.exceptions import ConfirmationMismatchError
from ironkit.core.logging import get_correlation_id, get_logger
from ironkit.infrastructure.message_queue.models import (
    MessageIdCollection,
    QueueInfo,
    QueueMessage,
    ResponseMsg,
)

if TYPE_CHECKING:
    from ironkit.infrastructure.message_queue.client import IronMQClient

logger = get_logger(__name__)

MessageLike = Union[QueueMessage, str]


class QueueClient:
    """
    Handle on one named queue.

    Obtained from ``IronMQClient.queue(name)``; cheap to create, holds no
    connection of its own.

    Example:
        queue = mq.queue("orders")
        message_id = await queue.post("order-42")
        message = await queue.read()
        if message is not None:
            await message.delete()
    """

    def __init__(self, client: IronMQClient, name: str):
        if not name:
            raise ValueError("Queue name must not be empty")
        self._client = client
        self.name = name

    def __repr__(self) -> str:
        return f"QueueClient(name={self.name!r})"

    @property
    def endpoint(self) -> str:
        return f"{self._client.endpoint}/{quote(self.name, safe='')}"

    async def info(self) -> QueueInfo:
        """
        Fetch queue metadata.

        Raises:
            NotFoundError: If the queue does not exist
            TransportError: On any other failure
        """
        body = await self._client.rest.get(self.endpoint)
        return QueueInfo.model_validate(body)

    async def read(self, timeout: int | None = None) -> QueueMessage | None:
        """
        Reserve the next message on the queue.

        Args:
            timeout: Seconds the message stays reserved (service default if None)

        Returns:
            The message, or None if the queue is empty
        """
        messages = await self.get(n=1, timeout=timeout)
        return messages[0] if messages else None

    async def get(self, n: int = 1, timeout: int | None = None) -> list[QueueMessage]:
        """Reserve up to ``n`` messages."""
        if n < 1:
            raise ValueError("n must be at least 1")

        body = await self._client.rest.get(
            f"{self.endpoint}/messages", params={"n": n, "timeout": timeout}
        )
        raw_messages = body.get("messages") or []
        return [QueueMessage.model_validate(raw).bind(self) for raw in raw_messages]

    async def post(self, message: MessageLike) -> str:
        """
        Enqueue one message.

        Returns:
            The id assigned by the service

        Raises:
            ConfirmationMismatchError: If the service returned no id
        """
        result = await self.post_messages([message])
        if not result.ids:
            raise ConfirmationMismatchError(
                "Queue service returned no id for posted message",
                correlation_id=get_correlation_id(),
                details={"queue": self.name, "msg": result.msg},
            )
        return result.ids[0]

    async def post_messages(self, messages: Iterable[MessageLike]) -> MessageIdCollection:
        """
        Enqueue messages in one request.

        Returns:
            The service's response: assigned ids and its confirmation string
        """
        payload = [_to_message(m).to_post_body() for m in messages]
        if not payload:
            raise ValueError("At least one message is required")

        body = await self._client.rest.post(f"{self.endpoint}/messages", {"messages": payload})
        result = MessageIdCollection.model_validate(body)

        logger.debug(
            "Messages posted",
            stage=Stage.QUEUE.value,
            queue=self.name,
            count=len(result.ids),
            confirmed=result.is_success(),
        )
        return result

    async def delete(self, message: QueueMessage | str) -> bool:
        """
        Delete a message by id.

        Raises:
            NotFoundError: If no message with that id exists
        """
        message_id = message.id if isinstance(message, QueueMessage) else message
        if not message_id:
            raise ValueError("Message id is required for delete")

        path = f"{self.endpoint}/messages/{quote(message_id, safe='')}"
        body = await self._client.rest.delete(path)
        return ResponseMsg.model_validate(body).has_expected_message(MSG_MESSAGE_DELETED)

    async def clear(self) -> bool:
        """Remove all messages from the queue."""
        body = await self._client.rest.post(f"{self.endpoint}/clear", {})
        cleared = ResponseMsg.model_validate(body).has_expected_message(MSG_QUEUE_CLEARED)
        logger.info("Queue cleared", stage=Stage.QUEUE.value, queue=self.name, confirmed=cleared)
        return cleared


def _to_message(message: MessageLike) -> QueueMessage:
    if isinstance(message, QueueMessage):
        return message
    return QueueMessage(body=message)
