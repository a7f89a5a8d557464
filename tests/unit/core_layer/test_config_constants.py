"""
Unit Tests for Configuration Constants

Tests the confirmation strings, endpoint templates and defaults.
"""

import pytest

from ironkit.core.config.constants import (
    CACHES_ENDPOINT,
    DEFAULT_BACKOFF_FACTOR_MS,
    DEFAULT_CACHE_HOST,
    DEFAULT_MQ_HOST,
    MSG_CACHE_DELETED,
    MSG_CACHE_STORED,
    MSG_MESSAGE_DELETED,
    MSG_MESSAGES_POSTED,
    MSG_QUEUE_CLEARED,
    QUEUES_ENDPOINT,
    CloudHost,
    Stage,
)


@pytest.mark.unit
class TestConfirmationStrings:
    """Test the exact confirmation literals the services return."""

    def test_queue_confirmations(self):
        assert MSG_MESSAGES_POSTED == "Messages put on queue."
        assert MSG_MESSAGE_DELETED == "Deleted"
        assert MSG_QUEUE_CLEARED == "Cleared"

    def test_cache_confirmations_carry_trailing_period(self):
        assert MSG_CACHE_STORED == "Stored."
        assert MSG_CACHE_DELETED == "Deleted."
        assert MSG_CACHE_DELETED != MSG_MESSAGE_DELETED


@pytest.mark.unit
class TestEndpoints:
    """Test endpoint templates and hosts."""

    def test_endpoints_are_project_scoped(self):
        assert QUEUES_ENDPOINT.format(project_id="p1") == "/projects/p1/queues"
        assert CACHES_ENDPOINT.format(project_id="p1") == "/projects/p1/caches"

    def test_default_hosts(self):
        assert DEFAULT_MQ_HOST == CloudHost.MQ_AWS_US_EAST.value
        assert DEFAULT_CACHE_HOST == CloudHost.CACHE_AWS_US_EAST.value

    def test_default_backoff_factor(self):
        assert DEFAULT_BACKOFF_FACTOR_MS == 25


@pytest.mark.unit
class TestStage:
    """Test stage identifiers."""

    def test_stage_values_are_unique(self):
        values = [stage.value for stage in Stage]
        assert len(set(values)) == len(values)

    def test_stage_is_str_enum(self):
        assert Stage.FORWARD == "FWD"

    def test_stage_members(self):
        assert {stage.name for stage in Stage} == {
            "INITIALIZATION",
            "TRANSPORT",
            "QUEUE",
            "CACHE",
            "FORWARD",
        }
