from __future__ import annotations

import asyncio

import httpx
import pytest

from pos_admin.clients.pos_sdk.exceptions import (
    ApplicationError,
    RequestFailedError,
    TransportError,
    UnauthenticatedError,
)


def _envelope(data=None, *, success: bool = True, message: str | None = None) -> dict:
    return {"isSuccess": success, "message": message, "data": data}


def test_authenticated_request_without_session_makes_no_network_call(make_api) -> None:
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json=_envelope({"items": []}))

    api = make_api(handler)

    with pytest.raises(UnauthenticatedError):
        asyncio.run(api.http.request("GET", "/api/Items"))
    assert calls == []


def test_expired_session_is_cleared_before_request(make_api, store, clock) -> None:
    calls: list[httpx.Request] = []
    api = make_api(lambda request: calls.append(request) or httpx.Response(200, json=_envelope()))
    store.set_session("tkn", 100)
    clock.advance(100)

    with pytest.raises(UnauthenticatedError):
        asyncio.run(api.http.request("GET", "/api/Items"))
    assert calls == []
    assert store.get_session() is None


def test_bearer_header_attached_only_for_authenticated_calls(make_api, store) -> None:
    seen: list[str | None] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.headers.get("Authorization"))
        return httpx.Response(200, json=_envelope({"token": "t"}))

    api = make_api(handler)
    store.set_session("secret-token", 60_000)

    async def scenario() -> None:
        await api.http.request("GET", "/api/Items")
        await api.http.request("POST", "/api/Auth/Login", json_body={"username": "u"}, authenticated=False)

    asyncio.run(scenario())
    assert seen == ["Bearer secret-token", None]


def test_401_on_authenticated_call_clears_session(make_api, store) -> None:
    api = make_api(lambda request: httpx.Response(401, json={"message": "expired"}))
    store.set_session("tkn", 60_000)

    with pytest.raises(UnauthenticatedError) as exc_info:
        asyncio.run(api.http.request("DELETE", "/api/Items/1"))

    assert exc_info.value.status_code == 401
    assert store.get_session() is None


def test_401_on_auth_endpoint_is_request_failed_with_server_message(make_api) -> None:
    api = make_api(lambda request: httpx.Response(401, json={"message": "Invalid credentials"}))

    with pytest.raises(RequestFailedError) as exc_info:
        asyncio.run(api.http.request("POST", "/api/Auth/Login", json_body={}, authenticated=False))

    assert not isinstance(exc_info.value, UnauthenticatedError)
    assert exc_info.value.status_code == 401
    assert exc_info.value.message == "Invalid credentials"


def test_non_2xx_maps_to_request_failed(make_api, store) -> None:
    api = make_api(lambda request: httpx.Response(500, text="boom"))
    store.set_session("tkn", 60_000)

    with pytest.raises(RequestFailedError) as exc_info:
        asyncio.run(api.http.request("GET", "/api/Items"))

    assert exc_info.value.code == "HTTP_500"
    assert exc_info.value.message == "boom"
    assert store.get_session() is not None


def test_transport_failure_maps_to_transport_error(make_api, store) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    api = make_api(handler)
    store.set_session("tkn", 60_000)

    with pytest.raises(TransportError) as exc_info:
        asyncio.run(api.http.request("GET", "/api/Items"))

    assert isinstance(exc_info.value, RequestFailedError)
    assert exc_info.value.status_code is None
    assert api.http.last_operation.result == "transport_error"


def test_malformed_body_is_invalid_response(make_api, store) -> None:
    store.set_session("tkn", 60_000)
    api = make_api(lambda request: httpx.Response(200, text="<html>"))

    with pytest.raises(RequestFailedError) as exc_info:
        asyncio.run(api.http.request("GET", "/api/Items"))
    assert exc_info.value.code == "INVALID_RESPONSE"

    api = make_api(lambda request: httpx.Response(200, json={"data": []}))
    with pytest.raises(RequestFailedError) as exc_info:
        asyncio.run(api.http.request("GET", "/api/Items"))
    assert exc_info.value.code == "INVALID_RESPONSE"


def test_invalid_response_is_recorded_as_last_operation(make_api, store) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/api/Items":
            return httpx.Response(200, text="<html>")
        return httpx.Response(200, json=_envelope({"transactions": []}))

    store.set_session("tkn", 60_000)
    api = make_api(handler)

    async def scenario() -> None:
        await api.http.request("GET", "/api/POS/transactions")
        await api.http.request("GET", "/api/Items")

    with pytest.raises(RequestFailedError):
        asyncio.run(scenario())

    assert api.http.last_operation.path == "/api/Items"
    assert api.http.last_operation.status_code == 200
    assert api.http.last_operation.result == "invalid_response"


def test_is_success_false_raises_application_error(make_api, store) -> None:
    store.set_session("tkn", 60_000)
    api = make_api(lambda request: httpx.Response(200, json=_envelope(success=False, message="Duplicate item name")))

    with pytest.raises(ApplicationError) as exc_info:
        asyncio.run(api.http.request("POST", "/api/Items", form_fields={"name": "Pen"}))

    assert exc_info.value.message == "Duplicate item name"


def test_no_retry_on_failure(make_api, store) -> None:
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(503, json={"message": "unavailable"})

    store.set_session("tkn", 60_000)
    api = make_api(handler)

    with pytest.raises(RequestFailedError):
        asyncio.run(api.http.request("GET", "/api/Items"))
    assert len(calls) == 1
