"""
Unit Tests for Logging Module

Tests logger configuration, correlation context, and the log processors.
"""

import asyncio
from unittest.mock import MagicMock

import pytest

from ironkit.core.logging.logger import (
    add_correlation_id,
    add_log_level_name,
    clear_correlation_id,
    get_correlation_id,
    get_logger,
    log_stage,
    redact_tokens,
    set_correlation_id,
    setup_logging,
)


@pytest.mark.unit
class TestLoggerCreation:
    """Test logger creation and configuration."""

    def test_get_logger_returns_logger_instance(self):
        logger = get_logger(__name__)
        assert hasattr(logger, "info")

    def test_setup_logging_accepts_both_formats(self):
        setup_logging(log_level="DEBUG", log_format="console")
        setup_logging(log_level="INFO", log_format="json")


@pytest.mark.unit
class TestCorrelationContext:
    """Test correlation ID context management."""

    def test_set_and_get(self):
        set_correlation_id("fwd-1")
        assert get_correlation_id() == "fwd-1"

    def test_clear(self):
        set_correlation_id("fwd-1")
        clear_correlation_id()
        assert get_correlation_id() is None

    async def test_tasks_have_isolated_context(self):
        """Test that a correlation id set in one task does not leak to another."""
        seen = {}

        async def run(name):
            set_correlation_id(name)
            await asyncio.sleep(0)
            seen[name] = get_correlation_id()

        await asyncio.gather(run("a"), run("b"))

        assert seen == {"a": "a", "b": "b"}
        assert get_correlation_id() is None


@pytest.mark.unit
class TestProcessors:
    """Test the custom structlog processors."""

    def test_correlation_id_injected(self):
        set_correlation_id("fwd-9")
        event = add_correlation_id(None, "info", {"event": "x"})
        assert event["correlation_id"] == "fwd-9"

    def test_correlation_id_not_overwritten(self):
        set_correlation_id("fwd-9")
        event = add_correlation_id(None, "info", {"event": "x", "correlation_id": "explicit"})
        assert event["correlation_id"] == "explicit"

    def test_no_correlation_id_when_unset(self):
        event = add_correlation_id(None, "info", {"event": "x"})
        assert "correlation_id" not in event

    def test_oauth_header_redacted_in_strings(self):
        event = redact_tokens(
            None, "info", {"event": "sent Authorization: OAuth abc123.def", "path": "/q"}
        )
        assert event["event"] == "sent Authorization: OAuth [REDACTED]"
        assert event["path"] == "/q"

    def test_sensitive_keys_redacted(self):
        event = redact_tokens(None, "info", {"event": "x", "token": "abc", "Authorization": "y"})
        assert event["token"] == "[REDACTED]"
        assert event["Authorization"] == "[REDACTED]"

    def test_level_uppercased(self):
        assert add_log_level_name(None, "info", {"level": "info"})["level"] == "INFO"


@pytest.mark.unit
class TestLogStageFunction:
    """Test the log_stage utility function."""

    def test_log_stage_calls_logger(self):
        logger = MagicMock()
        log_stage(logger, "FWD", "Forward run complete", processed=3)
        logger.info.assert_called_once_with("Forward run complete", stage="FWD", processed=3)

    def test_log_stage_respects_level(self):
        logger = MagicMock()
        log_stage(logger, "FWD", "failed", level="WARNING")
        logger.warning.assert_called_once_with("failed", stage="FWD")
