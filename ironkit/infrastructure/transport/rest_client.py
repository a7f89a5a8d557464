"""
REST Transport for the Hosted Queue and Cache Services

This module owns the HTTP side of both clients: base URL assembly, OAuth
header auth, status-code mapping and the retry policy for a busy service.

RESILIENCE:
-----------
The services answer HTTP 503 when they are momentarily overloaded. Those
responses, along with failures where the request never left the client
(connect errors, connect and pool timeouts), are retried with exponential
backoff (tenacity). Read and write timeouts are not retried: the service may
already have applied the request, and a POST such as an increment must not
run twice. No caller above this module adds retries of its own.

ERROR MAPPING:
--------------
- 404           -> NotFoundError
- other non-2xx -> TransportError (status_code in details)
- network error -> TransportError (original httpx error chained)

Usage:
------
```python
async with RestClient(config) as rest:
    body = await rest.get("/projects/p/queues/orders")
```

Author: Platform Team
Date: 2026-10-02
"""

from __future__ import annotations

from typing import Any

import httpx
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
    wait_random,
)

from ironkit.core.config.constants import (
    AUTH_SCHEME,
    HEADER_AUTHORIZATION,
    HTTP_NOT_FOUND,
    HTTP_SERVICE_UNAVAILABLE,
    Stage,
)
from ironkit.core.exceptions import NotFoundError, TransportError
from ironkit.core.logging import get_correlation_id, get_logger
from ironkit.infrastructure.transport.config import IronClientConfig

logger = get_logger(__name__)


class ServiceBusyError(Exception):
    """Internal signal for a 503 response; converted before leaving this module."""

    def __init__(self, response: httpx.Response):
        self.response = response
        super().__init__(f"Service busy (HTTP {response.status_code})")


# A busy reply or a request that never left the client. Read and write
# timeouts are excluded: the service may already have applied the request.
_RETRYABLE_ERRORS = (
    ServiceBusyError,
    httpx.ConnectError,
    httpx.ConnectTimeout,
    httpx.PoolTimeout,
)


class RestClient:
    """
    Asynchronous HTTP client bound to one service host and project.

    LIFECYCLE:
    ----------
    Use as an async context manager to close pooled connections. A client
    used without ``async with`` opens its connection pool on first request
    and must be closed with ``aclose()``.

    Attributes:
        config: Validated connection configuration
    """

    def __init__(
        self,
        config: IronClientConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Args:
            config: Connection configuration
            transport: Optional httpx transport (tests pass httpx.MockTransport)
        """
        self.config = config
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> RestClient:
        self._ensure_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            logger.debug("HTTP client closed", stage=Stage.TRANSPORT.value, host=self.config.host)
        self._client = None

    def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.config.base_url,
                headers={
                    HEADER_AUTHORIZATION: f"{AUTH_SCHEME} {self.config.token}",
                    "Content-Type": "application/json",
                    "Accept": "application/json",
                },
                timeout=httpx.Timeout(self.config.sharp_config.timeout),
                transport=self._transport,
            )
            logger.debug(
                "HTTP client initialized",
                stage=Stage.TRANSPORT.value,
                base_url=self.config.base_url,
            )
        return self._client

    # =========================================================================
    # Verbs
    # =========================================================================

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return await self._request("GET", path, params=params)

    async def post(self, path: str, body: Any = None) -> Any:
        return await self._request("POST", path, body=body)

    async def put(self, path: str, body: Any) -> Any:
        return await self._request("PUT", path, body=body)

    async def delete(self, path: str) -> Any:
        return await self._request("DELETE", path)

    # =========================================================================
    # Request execution
    # =========================================================================

    async def _request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        body: Any = None,
    ) -> Any:
        """
        Execute one request with the busy-service retry policy.

        Returns:
            Decoded JSON body ({} for an empty body)

        Raises:
            NotFoundError: On HTTP 404
            TransportError: On any other failure
        """
        response = await self._execute_with_retry(method, path, params, body)
        return self._handle_response(method, path, response)

    async def _execute_with_retry(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None,
        body: Any,
    ) -> httpx.Response:
        """
        Send a request, retrying 503s and failures that never reached the service.

        Backoff starts at ``backoff_factor`` milliseconds and doubles per
        attempt (with jitter). ``max_retries`` is the total attempt count,
        the first try included.
        """
        client = self._ensure_client()
        sharp = self.config.sharp_config
        if params:
            params = {k: v for k, v in params.items() if v is not None}

        @retry(
            stop=stop_after_attempt(sharp.max_retries),
            wait=wait_exponential(
                multiplier=sharp.backoff_seconds,
                max=sharp.backoff_seconds * (2 ** sharp.max_retries),
            )
            + wait_random(0, sharp.backoff_seconds),
            retry=retry_if_exception_type(_RETRYABLE_ERRORS),
            reraise=True,
        )
        async def _do_request() -> httpx.Response:
            kwargs: dict[str, Any] = {}
            if params:
                kwargs["params"] = params
            if body is not None:
                kwargs["json"] = body
            response = await client.request(method, path, **kwargs)
            if response.status_code == HTTP_SERVICE_UNAVAILABLE:
                logger.debug(
                    "Service busy, backing off",
                    stage=Stage.TRANSPORT.value,
                    method=method,
                    path=path,
                )
                raise ServiceBusyError(response)
            return response

        try:
            return await _do_request()
        except ServiceBusyError as e:
            raise TransportError(
                f"Service still busy after {sharp.max_retries} attempts",
                correlation_id=get_correlation_id(),
                details={
                    "method": method,
                    "path": path,
                    "status_code": e.response.status_code,
                    "attempts": sharp.max_retries,
                },
            ) from e
        except httpx.TimeoutException as e:
            raise TransportError.from_exception(
                e,
                message=f"Request timed out after {sharp.timeout}s",
                correlation_id=get_correlation_id(),
                method=method,
                path=path,
            ) from e
        except httpx.HTTPError as e:
            raise TransportError.from_exception(
                e,
                message=f"Cannot reach {self.config.host}",
                correlation_id=get_correlation_id(),
                method=method,
                path=path,
            ) from e

    def _handle_response(self, method: str, path: str, response: httpx.Response) -> Any:
        if response.status_code == HTTP_NOT_FOUND:
            raise NotFoundError(
                f"Resource not found: {path}",
                correlation_id=get_correlation_id(),
                details={
                    "method": method,
                    "path": path,
                    "status_code": response.status_code,
                    "response_text": _body_excerpt(response),
                },
            )

        if response.is_error:
            logger.warning(
                "Service returned an error",
                stage=Stage.TRANSPORT.value,
                method=method,
                path=path,
                status_code=response.status_code,
            )
            raise TransportError(
                f"Service returned HTTP {response.status_code}",
                correlation_id=get_correlation_id(),
                details={
                    "method": method,
                    "path": path,
                    "status_code": response.status_code,
                    "response_text": _body_excerpt(response),
                },
            )

        if not response.content:
            return {}

        try:
            return response.json()
        except ValueError as e:
            raise TransportError.from_exception(
                e,
                message="Service returned a body that is not JSON",
                correlation_id=get_correlation_id(),
                method=method,
                path=path,
                status_code=response.status_code,
            ) from e


def _body_excerpt(response: httpx.Response) -> str | None:
    return response.text[:500] if response.content else None
