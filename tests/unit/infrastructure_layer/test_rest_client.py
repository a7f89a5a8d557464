"""
Unit Tests for the REST Transport

Tests URL assembly, auth headers, status-code mapping and the 503 retry
policy using httpx.MockTransport handlers.
"""

import json
import warnings

import httpx
import pytest

from ironkit.core.exceptions import NotFoundError, TransportError
from ironkit.core.logging import set_correlation_id
from ironkit.infrastructure.transport import IronClientConfig, IronSharpConfig, RestClient


def make_client(handler, max_retries: int = 3) -> RestClient:
    config = IronClientConfig(
        host="mq.test",
        project_id="p",
        token="secret",
        sharp_config=IronSharpConfig(backoff_factor=1, max_retries=max_retries),
    )
    return RestClient(config, transport=httpx.MockTransport(handler))


@pytest.mark.unit
class TestRequestShape:
    """Test what goes on the wire."""

    async def test_base_url_and_auth_header(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"ok": True})

        async with make_client(handler) as rest:
            body = await rest.get("/projects/p/queues/orders")

        assert body == {"ok": True}
        assert seen[0].url.scheme == "https"
        assert seen[0].url.host == "mq.test"
        assert seen[0].url.path == "/1/projects/p/queues/orders"
        assert seen[0].headers["Authorization"] == "OAuth secret"
        assert seen[0].headers["Content-Type"] == "application/json"

    async def test_none_params_are_dropped(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={})

        async with make_client(handler) as rest:
            await rest.get("/projects/p/queues", params={"page": 2, "per_page": None})

        assert dict(seen[0].url.params) == {"page": "2"}

    async def test_json_body_sent(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"msg": "Stored."})

        async with make_client(handler) as rest:
            await rest.put("/projects/p/caches/c/items/k", {"value": "v"})

        assert seen[0].method == "PUT"
        assert json.loads(seen[0].content) == {"value": "v"}

    async def test_empty_body_decodes_to_empty_dict(self):
        async with make_client(lambda request: httpx.Response(200)) as rest:
            assert await rest.delete("/projects/p/queues/q/messages/1") == {}


@pytest.mark.unit
class TestErrorMapping:
    """Test status-code to exception mapping."""

    async def test_404_raises_not_found(self):
        async with make_client(lambda r: httpx.Response(404, json={"msg": "Queue not found"})) as rest:
            with pytest.raises(NotFoundError) as exc_info:
                await rest.get("/projects/p/queues/missing")

        assert exc_info.value.status_code == 404
        assert exc_info.value.details["path"] == "/projects/p/queues/missing"

    async def test_500_raises_transport_error(self):
        async with make_client(lambda r: httpx.Response(500, text="boom")) as rest:
            with pytest.raises(TransportError) as exc_info:
                await rest.post("/projects/p/queues/q/messages", {"messages": []})

        assert not isinstance(exc_info.value, NotFoundError)
        assert exc_info.value.status_code == 500
        assert exc_info.value.details["response_text"] == "boom"

    async def test_400_is_not_retried(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(400, json={"msg": "bad"})

        async with make_client(handler) as rest:
            with pytest.raises(TransportError):
                await rest.post("/x", {})

        assert len(calls) == 1

    async def test_non_json_body_raises_transport_error(self):
        async with make_client(lambda r: httpx.Response(200, text="<html>")) as rest:
            with pytest.raises(TransportError):
                await rest.get("/x")

    async def test_correlation_id_attached(self):
        set_correlation_id("fwd-abc")
        async with make_client(lambda r: httpx.Response(500)) as rest:
            with pytest.raises(TransportError) as exc_info:
                await rest.get("/x")

        assert exc_info.value.correlation_id == "fwd-abc"


@pytest.mark.unit
class TestRetryPolicy:
    """Test the busy-service retry policy."""

    async def test_503_retried_until_success(self):
        responses = [httpx.Response(503), httpx.Response(503), httpx.Response(200, json={"msg": "ok"})]
        calls = []

        def handler(request):
            calls.append(request)
            return responses[len(calls) - 1]

        async with make_client(handler, max_retries=3) as rest:
            body = await rest.get("/x")

        assert body == {"msg": "ok"}
        assert len(calls) == 3

    async def test_503_exhausted_raises_transport_error(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(503)

        async with make_client(handler, max_retries=2) as rest:
            with pytest.raises(TransportError) as exc_info:
                await rest.get("/x")

        assert len(calls) == 2
        assert exc_info.value.status_code == 503

    async def test_connect_error_retried_then_wrapped(self):
        calls = []

        def handler(request):
            calls.append(request)
            raise httpx.ConnectError("refused", request=request)

        async with make_client(handler, max_retries=3) as rest:
            with pytest.raises(TransportError) as exc_info:
                await rest.get("/x")

        assert len(calls) == 3
        assert exc_info.value.details["original_error"] == "ConnectError"
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    async def test_max_retries_counts_the_first_attempt(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(503)

        async with make_client(handler, max_retries=1) as rest:
            with pytest.raises(TransportError):
                await rest.get("/x")

        assert len(calls) == 1

    async def test_backoff_raises_no_deprecation_warning(self):
        responses = [httpx.Response(503), httpx.Response(200, json={})]

        def handler(request):
            return responses.pop(0)

        with warnings.catch_warnings():
            warnings.simplefilter("error", DeprecationWarning)
            async with make_client(handler, max_retries=2) as rest:
                assert await rest.get("/x") == {}

    @pytest.mark.parametrize("error", [httpx.ConnectTimeout, httpx.PoolTimeout])
    async def test_request_that_never_left_is_retried(self, error):
        calls = []

        def handler(request):
            calls.append(request)
            if len(calls) == 1:
                raise error("no connection", request=request)
            return httpx.Response(200, json={"msg": "ok"})

        async with make_client(handler, max_retries=3) as rest:
            assert await rest.get("/x") == {"msg": "ok"}

        assert len(calls) == 2

    @pytest.mark.parametrize("error", [httpx.ReadTimeout, httpx.WriteTimeout])
    async def test_timeout_after_send_is_not_retried(self, error):
        calls = []

        def handler(request):
            calls.append(request)
            raise error("timed out", request=request)

        async with make_client(handler, max_retries=3) as rest:
            with pytest.raises(TransportError) as exc_info:
                await rest.post("/x/increment", {"amount": 1})

        assert len(calls) == 1
        assert isinstance(exc_info.value.__cause__, error)


@pytest.mark.unit
class TestLifecycle:
    """Test client lifecycle."""

    async def test_usable_without_context_manager(self):
        rest = make_client(lambda r: httpx.Response(200, json={}))
        try:
            assert await rest.get("/x") == {}
        finally:
            await rest.aclose()

    async def test_aclose_is_idempotent(self):
        rest = make_client(lambda r: httpx.Response(200, json={}))
        await rest.aclose()
        await rest.aclose()
