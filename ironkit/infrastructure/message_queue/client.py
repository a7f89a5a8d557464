"""
Queue Service Client

Entry point for the hosted message-queue service. Owns the REST transport
and hands out QueueClient handles bound to individual queues.

Usage:
------
```python
async with IronMQClient.create(project_id="p", token="t") as mq:
    orders = mq.queue("orders")
    info = await orders.info()
```

Author: Platform Team
Date: 2026-10-02
"""

from __future__ import annotations

import httpx

from ironkit.core.config.constants import DEFAULT_MQ_HOST, QUEUES_ENDPOINT, Stage
from ironkit.core.config.settings import Settings, get_settings
from ironkit.core.logging import get_logger
from ironkit.infrastructure.message_queue.models import QueueInfo
from ironkit.infrastructure.message_queue.queue_client import QueueClient
from ironkit.infrastructure.transport import IronClientConfig, RestClient

logger = get_logger(__name__)


class IronMQClient:
    """
    Client for the hosted queue service, scoped to one project.

    Attributes:
        config: Connection configuration
        rest: Shared REST transport for every queue handle
    """

    def __init__(self, config: IronClientConfig, transport: httpx.AsyncBaseTransport | None = None):
        self.config = config
        self.rest = RestClient(config, transport=transport)
        self.endpoint = QUEUES_ENDPOINT.format(project_id=config.project_id)

        logger.info(
            "Queue client initialized",
            stage=Stage.INITIALIZATION.value,
            host=config.host,
            project_id=config.project_id,
        )

    @classmethod
    def create(
        cls,
        project_id: str,
        token: str,
        host: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        **config_overrides,
    ) -> IronMQClient:
        """
        Build a client from explicit parameters.

        Missing host falls back to the default public queue host; api
        version, scheme and port take their defaults unless overridden.
        """
        config = IronClientConfig(
            host=host or DEFAULT_MQ_HOST,
            project_id=project_id,
            token=token,
            **config_overrides,
        )
        return cls(config, transport=transport)

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> IronMQClient:
        """Build a client from environment-loaded settings."""
        settings = settings or get_settings()
        config = IronClientConfig.from_settings(settings, host=settings.iron.IRON_MQ_HOST)
        return cls(config, transport=transport)

    async def __aenter__(self) -> IronMQClient:
        await self.rest.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.rest.aclose()

    def queue(self, name: str) -> QueueClient:
        return QueueClient(self, name)

    async def queues(self, page: int | None = None, per_page: int | None = None) -> list[QueueInfo]:
        """List queues in the project, one page at a time."""
        body = await self.rest.get(self.endpoint, params={"page": page, "per_page": per_page})
        return [QueueInfo.model_validate(raw) for raw in body or []]
