"""
Transport Module

HTTP transport shared by the queue and cache clients.

Components:
-----------
- **config.py**: IronClientConfig / IronSharpConfig (pydantic, frozen)
- **rest_client.py**: RestClient (httpx.AsyncClient + tenacity retries)
- **models.py**: ResponseMsg, the shared confirmation body
"""

from ironkit.infrastructure.transport.config import IronClientConfig, IronSharpConfig
from ironkit.infrastructure.transport.models import ResponseMsg
from ironkit.infrastructure.transport.rest_client import RestClient

__all__ = [
    "IronClientConfig",
    "IronSharpConfig",
    "RestClient",
    "ResponseMsg",
]
