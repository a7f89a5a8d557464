"""
Test Fixtures Package

Shared test utilities and helpers for consistent testing across all modules.
"""

from .iron_service_fake import FakeIronService, FakeQueue
from .queue_factory import QueueTestFactory

__all__ = ["FakeIronService", "FakeQueue", "QueueTestFactory"]
