import json

import httpx
import pytest

from aioxhr.client import Client
from aioxhr.http.httpx import HTTPX, default_transport_factory, render_headers
from aioxhr.http.types import Request, RequestFailed


def handler(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/fail":
        raise httpx.ConnectError("connection refused", request=request)
    if request.url.path == "/empty":
        return httpx.Response(500)
    return httpx.Response(
        200,
        headers={"X-Echo-Method": request.method},
        json={"seen": request.content.decode() or None},
    )


@pytest.fixture
def mock_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def test_render_headers() -> None:
    headers = httpx.Headers([("A", "1"), ("B", "x: y")])
    assert render_headers(headers) == "A: 1\r\nB: x: y"


@pytest.mark.asyncio
async def test_adapter_returns_raw_response(mock_client: httpx.AsyncClient) -> None:
    adapter = HTTPX(mock_client)
    response = await adapter(
        Request(method="POST", url="https://example.com/echo", headers={}, body=b"hi")
    )
    assert response.status == 200
    assert response.status_text == "OK"
    assert "X-Echo-Method: POST" in response.headers.split("\r\n")
    assert json.loads(response.body) == {"seen": "hi"}


@pytest.mark.asyncio
async def test_adapter_wraps_network_errors(mock_client: httpx.AsyncClient) -> None:
    adapter = HTTPX(mock_client)
    with pytest.raises(RequestFailed) as excinfo:
        await adapter(
            Request(
                method="GET", url="https://example.com/fail", headers=None, body=None
            )
        )
    assert isinstance(excinfo.value.inner, httpx.ConnectError)


@pytest.mark.asyncio
async def test_client_over_httpx(mock_client: httpx.AsyncClient) -> None:
    client = Client(transport_factory=lambda: HTTPX(mock_client))
    err, resp = await client.put("https://example.com/echo", {"a": 1})
    assert err is None
    assert resp is not None
    assert resp.body == {"seen": '{"a": 1}'}
    assert resp.headers["X-Echo-Method"] == "PUT"

    err, resp = await client.get("https://example.com/empty")
    assert resp is None
    assert err is not None
    assert err.status == 500
    assert err.error == "Internal Server Error"

    err, resp = await client.get("https://example.com/fail")
    assert err is not None
    assert err.status == 0
    assert err.error == "connection refused"


def test_default_factory_builds_standalone_adapter() -> None:
    adapter = default_transport_factory(2.5)
    assert isinstance(adapter, HTTPX)
    assert adapter.client is None
    assert adapter.timeout == 2.5
