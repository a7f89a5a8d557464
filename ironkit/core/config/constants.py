"""
System Constants and Enumerations

This module defines the constants shared by the queue client, the cache client
and the push-forward retry sender: default service hosts, endpoint templates,
and the confirmation strings the services return to signal success.

Architectural Decision: Confirmation strings live in one place
- The services signal success through the body's "msg" field, not the HTTP status
- Every client compares against these exact literals
- Changing a literal here changes success detection everywhere

Author: Platform Team
Date: 2026-10-02
"""

from enum import Enum

# ============================================================================
# Stage Identifiers (for structured logging)
# ============================================================================


class Stage(str, Enum):
    """
    Processing stages used as the ``stage`` key in log entries.

    Each stage names the component that emitted the entry so a single
    forward run can be followed across transport, queue and cache logs.
    """

    INITIALIZATION = "0"
    TRANSPORT = "HTTP"
    QUEUE = "MQ"
    CACHE = "CACHE"
    FORWARD = "FWD"


# ============================================================================
# Service Hosts
# ============================================================================


class CloudHost(str, Enum):
    """
    Default public hosts for the hosted services.

    Used when a client is created without an explicit host.
    """

    MQ_AWS_US_EAST = "mq-aws-us-east-1.iron.io"
    CACHE_AWS_US_EAST = "cache-aws-us-east-1.iron.io"


DEFAULT_MQ_HOST = CloudHost.MQ_AWS_US_EAST.value
DEFAULT_CACHE_HOST = CloudHost.CACHE_AWS_US_EAST.value

# API defaults
DEFAULT_API_VERSION = 1
DEFAULT_SCHEME = "https"
DEFAULT_PORT = 443

# ============================================================================
# Endpoint Templates
# ============================================================================

QUEUES_ENDPOINT = "/projects/{project_id}/queues"
CACHES_ENDPOINT = "/projects/{project_id}/caches"

# ============================================================================
# Confirmation Strings
# ============================================================================
# Matched exactly against the response body's "msg" field.

MSG_MESSAGES_POSTED = "Messages put on queue."
MSG_MESSAGE_DELETED = "Deleted"
MSG_QUEUE_CLEARED = "Cleared"
MSG_CACHE_STORED = "Stored."
MSG_CACHE_DELETED = "Deleted."

# ============================================================================
# Transport / Retry Settings
# ============================================================================

DEFAULT_BACKOFF_FACTOR_MS = 25  # Base backoff for 503 retries (milliseconds)
DEFAULT_MAX_RETRIES = 5  # Total attempts, first try included
DEFAULT_TIMEOUT_SECONDS = 30.0  # Per-request httpx timeout
HTTP_SERVICE_UNAVAILABLE = 503
HTTP_NOT_FOUND = 404
HTTP_BAD_REQUEST = 400

# Auth header
HEADER_AUTHORIZATION = "Authorization"
AUTH_SCHEME = "OAuth"
