#!/usr/bin/env python3
"""
Structured Logging Module using structlog

This module provides structured logging for the queue and cache clients with:
- Correlation ID injection so one forward run can be traced end to end
- Stage keys naming the component that emitted each entry
- JSON formatting for log aggregation
- Automatic redaction of OAuth tokens

Architectural Decision: structlog for structured logging
- Context-aware logging with automatic field injection
- JSON output for log aggregation
- Context variables are async-safe, so concurrent forward runs stay separate

Author: Platform Team
Date: 2026-10-02
"""

import logging
import re
import sys
from contextvars import ContextVar
from datetime import datetime, timezone

import structlog
from structlog.types import EventDict, WrappedLogger

from ironkit.core.config.settings import get_settings

# Context variable for the correlation ID of the current run
correlation_id_ctx: ContextVar[str | None] = ContextVar("correlation_id", default=None)

_OAUTH_PATTERN = re.compile(r"\bOAuth\s+[A-Za-z0-9._~+/=-]+")
_SENSITIVE_KEYS = frozenset({"token", "authorization", "oauth_token"})


def add_correlation_id(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """
    Add correlation ID to log event from context variable.

    STAGE-L.1: Correlation ID injection
    """
    correlation_id = correlation_id_ctx.get()
    if correlation_id and "correlation_id" not in event_dict:
        event_dict["correlation_id"] = correlation_id
    return event_dict


def add_timestamp(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """
    Add ISO timestamp to log event.

    STAGE-L.2: Timestamp injection
    """
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
    return event_dict


def redact_tokens(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """
    Redact credentials from log entries.

    STAGE-L.3: Token redaction

    Patterns redacted:
    - "OAuth <token>" in any string field -> "OAuth [REDACTED]"
    - Values of token/authorization keys -> [REDACTED]
    """
    for key, value in list(event_dict.items()):
        if key.lower() in _SENSITIVE_KEYS and value:
            event_dict[key] = "[REDACTED]"
        elif isinstance(value, str):
            event_dict[key] = _OAUTH_PATTERN.sub("OAuth [REDACTED]", value)
    return event_dict


def add_log_level_name(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """
    Add log level name to event dict.

    STAGE-L.4: Log level injection
    """
    if "level" in event_dict:
        event_dict["level"] = event_dict["level"].upper()
    return event_dict


def setup_logging(log_level: str | None = None, log_format: str | None = None) -> None:
    """
    Setup structured logging with structlog.

    STAGE-L: Logging initialization

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Log format ('json' or 'console')

    The clients log through get_logger() whether or not this is called;
    without it structlog's defaults apply and nothing is redacted.
    """
    settings = get_settings()

    log_level = log_level or settings.logging.LOG_LEVEL
    log_format = log_format or settings.logging.LOG_FORMAT

    logging.basicConfig(
        format="%(message)s", stream=sys.stdout, level=getattr(logging, log_level.upper())
    )

    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            add_correlation_id,
            add_timestamp,
            structlog.stdlib.add_log_level,
            add_log_level_name,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            redact_tokens,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Usage:
        logger = get_logger(__name__)
        logger.info("message", key="value", stage=Stage.QUEUE.value)
    """
    return structlog.get_logger(name)


def set_correlation_id(correlation_id: str) -> None:
    """
    Set correlation ID in context for the current run.

    Every entry logged from this task (and tasks it spawns) carries it.
    """
    correlation_id_ctx.set(correlation_id)


def get_correlation_id() -> str | None:
    return correlation_id_ctx.get()


def clear_correlation_id() -> None:
    correlation_id_ctx.set(None)


def log_stage(
    logger: structlog.stdlib.BoundLogger, stage: str, message: str, level: str = "info", **kwargs
) -> None:
    """
    Log a message with stage information.

    Args:
        logger: Logger instance
        stage: Stage identifier (e.g., "MQ", "FWD")
        message: Log message
        level: Log level (debug, info, warning, error, critical)
        **kwargs: Additional fields to log

    Usage:
        log_stage(logger, Stage.FORWARD.value, "Message forwarded", message_id="m1")
    """
    log_func = getattr(logger, level.lower())
    log_func(message, stage=stage, **kwargs)
