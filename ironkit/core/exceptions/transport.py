"""
Transport Exceptions

Exceptions raised by the REST transport shared by the queue and cache clients.

Author: Platform Team
Date: 2026-10-02
"""

from ironkit.core.exceptions.base import IronKitError


class TransportError(IronKitError):
    """
    Raised on a network or HTTP-layer failure.

    Not retried by the queue, cache or forwarder code; the transport's own
    503 retry is the only retry in the stack.

    Common causes:
    - Service unreachable or timing out
    - Non-2xx status other than 404
    - 503 still returned after all retry attempts
    """

    @property
    def status_code(self) -> int | None:
        """HTTP status code of the failed response, if there was one."""
        return self.details.get("status_code")


class NotFoundError(TransportError):
    """
    Raised when the addressed resource does not exist (HTTP 404).

    Surfaced as a typed failure for info/get calls. Delete callers may
    treat it as "already gone".
    """
    pass


class ConfirmationMismatchError(IronKitError):
    """
    Raised when a response lacks the expected confirmation string.

    The clients report a missing confirmation as a False result rather than
    raising; this exception is for callers that prefer a fault.
    """
    pass
