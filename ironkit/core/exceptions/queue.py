"""
Message Queue Exceptions

Author: Platform Team
Date: 2026-10-02
"""

from ironkit.core.exceptions.base import IronKitError


class QueueError(IronKitError):
    """Base exception for message queue client errors."""
    pass
