"""
Push-Forward Module

Requeues messages that landed in a queue's error queue.
"""

from ironkit.pushforward.retry_sender import FailedMessageRetrySender

__all__ = ["FailedMessageRetrySender"]
