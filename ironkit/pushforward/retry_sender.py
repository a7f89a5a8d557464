"""
Failed Message Retry Sender

Drains a queue's error queue and republishes each failed message onto the
queue it came from.

Flow:
    1. Fetch the origin queue's info to find its error queue
    2. Read one message from the error queue
    3. Check cancellation and the count limit (after the read)
    4. Post the message body to the origin queue
    5. Delete it from the error queue only if that post was confirmed
    6. Repeat until the error queue reads empty

Delivery:
---------
At-least-once. A message read and then left behind (stop requested, post
unconfirmed, or a failure in isolation mode) stays reserved until its
visibility timeout expires and is picked up by a later run. A message is
never deleted from the error queue unless its own repost was confirmed.

Failure handling:
-----------------
By default a transport failure on post or delete propagates and aborts the
run; ids already forwarded are lost with the exception. With
``isolate_failures=True`` the failing message's id is recorded in
``failed_ids`` and the run moves on to the next message.

Author: Platform Team
Date: 2026-10-02
"""

import asyncio
import uuid

from ironkit.core.config.constants import MSG_MESSAGES_POSTED, Stage
from ironkit.core.exceptions import NotFoundError, TransportError
from ironkit.core.interfaces import QueueBackend, QueueProvider
from ironkit.core.logging import (
    clear_correlation_id,
    get_correlation_id,
    get_logger,
    log_stage,
    set_correlation_id,
)
from ironkit.infrastructure.message_queue.models import MessageIdCollection, QueueMessage

logger = get_logger(__name__)


class FailedMessageRetrySender:
    """
    Moves messages from a queue's error queue back onto the queue.

    Runs share no state, so several runs (even against the same queue) may
    proceed concurrently; the service's reservation keeps them from handling
    the same message at the same time.

    Example:
        sender = FailedMessageRetrySender(mq, mq.queue("orders"))
        result = await sender.resend_failed_messages(limit=100)
        assert result.is_success()
    """

    def __init__(self, mq_client: QueueProvider, queue_client: QueueBackend):
        self._mq = mq_client
        self._queue = queue_client

    async def resend_failed_messages(
        self,
        cancel_event: asyncio.Event | None = None,
        limit: int | None = None,
        isolate_failures: bool = False,
    ) -> MessageIdCollection:
        """
        Forward every message in the error queue back to the origin queue.

        Args:
            cancel_event: Set to stop the run before the next message
            limit: Maximum number of messages to process (None for no limit)
            isolate_failures: Record per-message transport failures in
                ``failed_ids`` and continue instead of aborting

        Returns:
            Ids assigned on the origin queue, with the batch confirmation set

        Raises:
            NotFoundError: If the origin queue does not exist
            TransportError: On a failure outside isolation mode
        """
        if limit is not None and limit < 0:
            raise ValueError("limit must not be negative")

        started_correlation = get_correlation_id() is None
        if started_correlation:
            set_correlation_id(f"fwd-{uuid.uuid4().hex[:12]}")

        try:
            return await self._run(cancel_event, limit, isolate_failures)
        finally:
            if started_correlation:
                clear_correlation_id()

    async def _run(
        self,
        cancel_event: asyncio.Event | None,
        limit: int | None,
        isolate_failures: bool,
    ) -> MessageIdCollection:
        result = MessageIdCollection()

        info = await self._queue.info()
        if not info.error_queue:
            log_stage(
                logger,
                Stage.FORWARD.value,
                "Queue has no error queue, nothing to forward",
                queue=self._queue.name,
            )
            result.msg = MSG_MESSAGES_POSTED
            return result

        error_queue = self._mq.queue(info.error_queue)
        log_stage(
            logger,
            Stage.FORWARD.value,
            "Forwarding failed messages",
            queue=self._queue.name,
            error_queue=info.error_queue,
            limit=limit,
        )

        count = 0
        while (message := await error_queue.read()) is not None:
            # Stop checked after the read; the message reappears after its timeout
            if _should_stop(cancel_event, limit, count):
                log_stage(
                    logger,
                    Stage.FORWARD.value,
                    "Forward run stopped",
                    cancelled=bool(cancel_event and cancel_event.is_set()),
                    forwarded=count,
                    left_reserved=message.id,
                )
                break

            try:
                await self._forward(message, error_queue, result)
            except TransportError as e:
                if not isolate_failures:
                    raise
                result.failed_ids.append(message.id)
                log_stage(
                    logger,
                    Stage.FORWARD.value,
                    "Message forward failed, continuing",
                    level="warning",
                    message_id=message.id,
                    error=e.to_dict(),
                )

            count += 1

        result.msg = MSG_MESSAGES_POSTED
        log_stage(
            logger,
            Stage.FORWARD.value,
            "Forward run complete",
            queue=self._queue.name,
            processed=count,
            forwarded=len(result.ids),
            failed=len(result.failed_ids),
        )
        return result

    async def _forward(
        self,
        message: QueueMessage,
        error_queue: QueueBackend,
        result: MessageIdCollection,
    ) -> None:
        posted = await self._queue.post_messages([message.body])
        result.add_ids(posted.ids)

        if not posted.is_success():
            log_stage(
                logger,
                Stage.FORWARD.value,
                "Repost not confirmed, leaving message in error queue",
                level="warning",
                message_id=message.id,
                msg=posted.msg,
            )
            return

        try:
            await error_queue.delete(message)
        except NotFoundError:
            log_stage(
                logger,
                Stage.FORWARD.value,
                "Message already removed from error queue",
                message_id=message.id,
            )


def _should_stop(cancel_event: asyncio.Event | None, limit: int | None, count: int) -> bool:
    if cancel_event is not None and cancel_event.is_set():
        return True
    return limit is not None and count >= limit
