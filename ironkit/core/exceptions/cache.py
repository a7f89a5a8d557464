"""
Cache-Related Exceptions

All exceptions related to cache client operations.

Author: Platform Team
Date: 2026-10-02
"""

from ironkit.core.exceptions.base import IronKitError


class CacheError(IronKitError):
    """Base exception for cache-related errors."""
    pass


class TypeMismatchError(CacheError):
    """
    Raised when a numeric increment targets a non-numeric stored value.

    The service rejects the increment with HTTP 400; the stored value is
    left unchanged.
    """
    pass


class CacheValueError(CacheError):
    """
    Raised when a stored value cannot be read as the requested type.

    Common causes:
    - Value was written by another client in a different format
    - Requested type does not match the stored JSON shape
    """
    pass
