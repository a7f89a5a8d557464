"""
Pytest Configuration and Shared Test Fixtures

This module provides pytest configuration and reusable fixtures for all tests.
All fixtures defined here are automatically available to all test files.
"""

import os
import sys

import httpx
import pytest

# Add project root to sys.path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from ironkit.core.logging import clear_correlation_id  # noqa: E402
from ironkit.infrastructure.cache.client import IronCacheClient  # noqa: E402
from ironkit.infrastructure.message_queue.client import IronMQClient  # noqa: E402
from ironkit.infrastructure.transport import IronClientConfig, IronSharpConfig  # noqa: E402
from tests.test_fixtures.iron_service_fake import PROJECT_ID, TOKEN, FakeIronService  # noqa: E402

# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def sharp_config():
    """Fast retry settings so 503 tests do not sleep noticeably."""
    return IronSharpConfig(backoff_factor=1, max_retries=3, timeout=5.0)


@pytest.fixture
def mq_config(sharp_config):
    return IronClientConfig(
        host="mq.test",
        project_id=PROJECT_ID,
        token=TOKEN,
        sharp_config=sharp_config,
    )


@pytest.fixture
def cache_config(sharp_config):
    return IronClientConfig(
        host="cache.test",
        project_id=PROJECT_ID,
        token=TOKEN,
        sharp_config=sharp_config,
    )


@pytest.fixture(autouse=True)
def reset_correlation_id():
    """Keep correlation ids from leaking between tests."""
    clear_correlation_id()
    yield
    clear_correlation_id()


# ============================================================================
# In-Memory Service Fixtures
# ============================================================================


@pytest.fixture
def fake_service():
    """
    In-memory fake of both hosted services.

    Shared by the mq and cache clients below so one test can inspect all
    state through a single object.
    """
    return FakeIronService()


@pytest.fixture
def fake_transport(fake_service):
    return httpx.MockTransport(fake_service.handler)


@pytest.fixture
async def mq_client(mq_config, fake_transport):
    """IronMQClient wired to the in-memory fake."""
    async with IronMQClient(mq_config, transport=fake_transport) as client:
        yield client


@pytest.fixture
async def cache_client(cache_config, fake_transport):
    """IronCacheClient wired to the in-memory fake."""
    async with IronCacheClient(cache_config, transport=fake_transport) as client:
        yield client


@pytest.fixture
def sessions(cache_client):
    """Handle on the "sessions" cache."""
    return cache_client.cache("sessions")
