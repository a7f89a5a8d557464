"""
Base Exception Class

This module contains the base exception class that all other exceptions inherit from.
Specialized exceptions are in their respective themed modules.

Author: Platform Team
Date: 2026-10-02
"""

from typing import Any


class IronKitError(Exception):
    """
    Base exception for all queue and cache client errors.

    All custom exceptions inherit from this class to enable:
    - Consistent error handling
    - Correlation ID tagging
    - Structured error logging

    Attributes:
        message: Error message
        correlation_id: Correlation ID of the run that failed (if available)
        details: Additional error details (dict)

    Example:
        raise TransportError(
            "Service returned HTTP 500",
            correlation_id="fwd-123",
            details={"method": "POST", "path": "/projects/p/queues/orders/messages"}
        )
    """

    def __init__(
        self, message: str, correlation_id: str | None = None, details: dict[str, Any] | None = None
    ):
        self.message = message
        self.correlation_id = correlation_id
        self.details = (details or {}).copy()
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for logging.

        Returns:
            Dict with error_type, message, correlation_id, and details
        """
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "correlation_id": self.correlation_id,
            "details": self.details,
        }

    def with_context(self, **context) -> "IronKitError":
        """
        Add additional context to the error details.

        Args:
            **context: Key-value pairs to add to details

        Returns:
            Self (for method chaining)
        """
        self.details.update(context)
        return self

    def __repr__(self) -> str:
        details_str = f", details={self.details}" if self.details else ""
        correlation_str = f", correlation_id='{self.correlation_id}'" if self.correlation_id else ""
        return f"{self.__class__.__name__}(message='{self.message}'{correlation_str}{details_str})"

    @classmethod
    def from_exception(
        cls,
        exc: Exception,
        message: str | None = None,
        correlation_id: str | None = None,
        **details,
    ) -> "IronKitError":
        """
        Create an error from another exception.

        Useful for wrapping httpx exceptions with request context.

        Args:
            exc: Original exception to wrap
            message: Custom message (defaults to original exception message)
            correlation_id: Correlation ID of the current run
            **details: Additional context to include

        Returns:
            New instance with wrapped exception details

        Example:
            >>> try:
            ...     await http.get(url)
            ... except httpx.ConnectError as e:
            ...     raise TransportError.from_exception(e, path=url) from e
        """
        error_message = message or str(exc)
        error_details = {
            "original_error": exc.__class__.__name__,
            "original_message": str(exc),
            **details,
        }
        return cls(error_message, correlation_id=correlation_id, details=error_details)


class ConfigurationError(IronKitError):
    """Raised when client configuration is invalid or missing."""
    pass
