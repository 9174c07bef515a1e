from __future__ import annotations

import json

import httpx
import pytest

from kcadmin import (
    AuthenticationError,
    BadRequestError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ServerError,
    TransportError,
)
from kcadmin._http import HttpClient, segment


def _http(handler, token="t0k3n", base_url="http://kc.test/") -> HttpClient:
    return HttpClient(base_url, token, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_request_attaches_bearer_and_json_headers() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"ok": True})

    http = _http(handler)
    resp = await http.request("GET", "/admin/realms/master")

    assert resp.status_code == 200
    assert resp.body == {"ok": True}
    assert str(seen[0].url) == "http://kc.test/admin/realms/master"
    assert seen[0].headers["authorization"] == "Bearer t0k3n"
    assert seen[0].headers["accept"] == "application/json"
    await http.aclose()


@pytest.mark.asyncio
async def test_request_sends_json_body() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.headers["content-type"] == "application/json"
        assert json.loads(request.read()) == {"name": "x"}
        return httpx.Response(201, json={"_id": "1"})

    resp = await _http(handler).request("POST", "/things", json={"name": "x"}, expected_status=201)

    assert resp.body == {"_id": "1"}


@pytest.mark.asyncio
async def test_sync_token_provider_is_read_on_every_call() -> None:
    tokens = iter(["first", "second"])
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.headers["authorization"])
        return httpx.Response(200, json=[])

    http = _http(handler, token=lambda: next(tokens))
    await http.get("/a")
    await http.get("/b")

    assert seen == ["Bearer first", "Bearer second"]


@pytest.mark.asyncio
async def test_async_token_provider() -> None:
    async def provider() -> str:
        return "from-coroutine"

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"auth": request.headers["authorization"]})

    assert await _http(handler, token=provider).get("/a") == {"auth": "Bearer from-coroutine"}


@pytest.mark.asyncio
async def test_json_response_disabled_returns_text_without_accept_header() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.headers.get("accept") != "application/json"
        return httpx.Response(200, text="plain")

    resp = await _http(handler).request("GET", "/x", json_response=False)

    assert resp.body == "plain"


@pytest.mark.asyncio
async def test_empty_body_is_none() -> None:
    resp = await _http(lambda request: httpx.Response(204)).delete("/x")

    assert resp.status_code == 204
    assert resp.body is None


@pytest.mark.asyncio
async def test_transport_failure_raises_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(TransportError) as exc_info:
        await _http(handler).get("/x")

    assert isinstance(exc_info.value.cause, httpx.ConnectError)
    assert exc_info.value.__cause__ is exc_info.value.cause


@pytest.mark.asyncio
async def test_malformed_json_raises_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"{not json", headers={"content-type": "application/json"})

    with pytest.raises(TransportError):
        await _http(handler).get("/x")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "status, cls",
    [
        (400, BadRequestError),
        (401, AuthenticationError),
        (403, ForbiddenError),
        (404, NotFoundError),
        (409, ConflictError),
    ],
)
async def test_status_mismatch_maps_to_error_class(status, cls) -> None:
    body = {"errorMessage": "nope"}

    with pytest.raises(cls) as exc_info:
        await _http(lambda request: httpx.Response(status, json=body)).get("/x")

    assert exc_info.value.status_code == status
    assert exc_info.value.body == body
    assert exc_info.value.error_message == "nope"
    assert str(exc_info.value) == f"[{status}] nope"


@pytest.mark.asyncio
async def test_unmapped_status_raises_plain_server_error() -> None:
    with pytest.raises(ServerError) as exc_info:
        await _http(lambda request: httpx.Response(500, text="<html>boom</html>")).get("/x")

    assert type(exc_info.value) is ServerError
    assert exc_info.value.status_code == 500
    assert exc_info.value.body == "<html>boom</html>"


@pytest.mark.asyncio
async def test_unexpected_success_status_is_a_mismatch() -> None:
    with pytest.raises(ServerError) as exc_info:
        await _http(lambda request: httpx.Response(200, json={"id": "1"})).put("/x", json={})

    assert type(exc_info.value) is ServerError
    assert exc_info.value.status_code == 200
    assert exc_info.value.body == {"id": "1"}


@pytest.mark.asyncio
async def test_aclose_leaves_injected_client_open() -> None:
    injected = httpx.AsyncClient(transport=httpx.MockTransport(lambda request: httpx.Response(200, json={})))
    http = HttpClient("http://kc.test", "t", client=injected)

    await http.aclose()

    assert not injected.is_closed
    await injected.aclose()


def test_segment_encodes_reserved_characters() -> None:
    assert segment("Test Realm 1") == "Test%20Realm%201"
    assert segment("a/b") == "a%2Fb"
