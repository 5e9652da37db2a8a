import json

import httpx
import pytest
import respx
from httpx import Response
from relay_client.core.errors import ErrorKind, RelayError
from relay_client.core.http import HTTPClient

BASE = "https://api.relay.test"


@pytest.fixture
def client():
    return HTTPClient(base_url=BASE, api_key="relay_test_key")


@pytest.mark.asyncio
@respx.mock
async def test_get_request_success(client):
    route = respx.get(f"{BASE}/api/things").mock(
        return_value=Response(200, json={"data": [1, 2], "total": 2})
    )

    async with client:
        data = await client.get("/api/things")

    assert data == {"data": [1, 2], "total": 2}
    assert route.called


@pytest.mark.asyncio
@respx.mock
async def test_bearer_auth_and_default_headers_sent(client):
    route = respx.get(f"{BASE}/api/things").mock(return_value=Response(200, json={}))

    async with client:
        await client.get("/api/things")

    sent = route.calls[0].request.headers
    assert sent["Authorization"] == "Bearer relay_test_key"
    assert sent["Content-Type"] == "application/json"
    assert sent["User-Agent"] == "relay-api-client-python/1.0.0"


@pytest.mark.asyncio
@respx.mock
async def test_header_precedence_and_auth_cannot_be_overridden():
    route = respx.get(f"{BASE}/x").mock(return_value=Response(200, json={}))
    client = HTTPClient(
        base_url=BASE,
        api_key="real-key",
        headers={"X-Team": "default", "user-agent": "custom-agent"},
    )

    async with client:
        await client.get(
            "/x",
            headers={"X-Team": "per-call", "authorization": "Bearer stolen"},
        )

    sent = route.calls[0].request.headers
    assert sent["X-Team"] == "per-call"
    assert sent["User-Agent"] == "custom-agent"
    assert sent.get_list("Authorization") == ["Bearer real-key"]


@pytest.mark.asyncio
@respx.mock
async def test_single_trailing_slash_stripped():
    route = respx.get(f"{BASE}/v1/ping").mock(return_value=Response(200, json={}))
    client = HTTPClient(base_url=f"{BASE}/", api_key="k")

    assert client.base_url == BASE
    async with client:
        await client.get("/v1/ping")

    assert str(route.calls[0].request.url) == f"{BASE}/v1/ping"


@pytest.mark.asyncio
@respx.mock
async def test_query_params_appended(client):
    route = respx.get(f"{BASE}/items").mock(return_value=Response(200, json={}))

    async with client:
        await client.get(
            "/items", {"page": 1, "is_active": True, "tags": ["a", "b"], "q": None}
        )

    assert str(route.calls[0].request.url) == (
        f"{BASE}/items?page=1&is_active=true&tags=a&tags=b"
    )


@pytest.mark.asyncio
@respx.mock
async def test_query_appended_with_ampersand_when_path_has_query(client):
    route = respx.get(f"{BASE}/items").mock(return_value=Response(200, json={}))

    async with client:
        await client.get("/items?sort=name", {"page": 2})

    assert str(route.calls[0].request.url) == f"{BASE}/items?sort=name&page=2"


@pytest.mark.asyncio
@respx.mock
async def test_post_body_json_encoded(client):
    route = respx.post(f"{BASE}/items").mock(return_value=Response(201, json={"id": "1"}))

    async with client:
        data = await client.post("/items", {"name": "Widget", "tags": ["x"]})

    assert data == {"id": "1"}
    assert json.loads(route.calls[0].request.content) == {
        "name": "Widget",
        "tags": ["x"],
    }


@pytest.mark.asyncio
@respx.mock
async def test_string_body_passed_through(client):
    route = respx.put(f"{BASE}/raw").mock(return_value=Response(200, json={}))

    async with client:
        await client.put("/raw", '{"already": "encoded"}')

    assert route.calls[0].request.content == b'{"already": "encoded"}'


@pytest.mark.asyncio
@respx.mock
async def test_get_never_sends_body(client):
    route = respx.get(f"{BASE}/items").mock(return_value=Response(200, json={}))

    async with client:
        await client.request("/items", method="GET", body={"ignored": True})

    assert route.calls[0].request.content == b""


@pytest.mark.asyncio
@respx.mock
async def test_patch_and_delete_wrappers(client):
    patch_route = respx.patch(f"{BASE}/items/1").mock(
        return_value=Response(200, json={"ok": True})
    )
    delete_route = respx.delete(f"{BASE}/items/1").mock(
        return_value=Response(200, json={"message": "deleted"})
    )

    async with client:
        assert await client.patch("/items/1", {"name": "n"}) == {"ok": True}
        assert await client.delete("/items/1") == {"message": "deleted"}

    assert patch_route.called
    assert delete_route.called


@pytest.mark.asyncio
async def test_unsupported_method_rejected(client):
    with pytest.raises(ValueError):
        await client.request("/items", method="TRACE")


# --- Response parsing ------------------------------------------------------ #


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [200, 201, 202, 204])
@respx.mock
async def test_2xx_returns_parsed_body_unchanged(client, status):
    payload = {"anything": {"nested": [1, None]}} if status != 204 else None
    respx.get(f"{BASE}/ok").mock(
        return_value=Response(status, json=payload) if payload else Response(status)
    )

    async with client:
        data = await client.get("/ok")

    assert data == (payload or {})


@pytest.mark.asyncio
@respx.mock
async def test_json_array_returned_as_is(client):
    respx.get(f"{BASE}/types").mock(
        return_value=Response(200, json=[{"type": "HTTP"}, {"type": "SQL"}])
    )

    async with client:
        data = await client.get("/types")

    assert data == [{"type": "HTTP"}, {"type": "SQL"}]


@pytest.mark.asyncio
@respx.mock
async def test_malformed_json_on_2xx_yields_empty_dict(client):
    respx.get(f"{BASE}/broken").mock(
        return_value=Response(
            200,
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
    )

    async with client:
        data = await client.get("/broken")

    assert data == {}


@pytest.mark.asyncio
@respx.mock
async def test_text_body_wrapped_as_message(client):
    respx.get(f"{BASE}/text").mock(return_value=Response(200, text="pong"))

    async with client:
        data = await client.get("/text")

    assert data == {"message": "pong"}


# --- Error taxonomy -------------------------------------------------------- #

TAXONOMY = [
    (401, ErrorKind.AUTHENTICATION, "Authentication failed", "AUTHENTICATION_ERROR"),
    (403, ErrorKind.AUTHORIZATION, "Insufficient permissions", "AUTHORIZATION_ERROR"),
    (404, ErrorKind.NOT_FOUND, "Resource not found", "NOT_FOUND"),
    (400, ErrorKind.VALIDATION, "Validation failed", "VALIDATION_ERROR"),
    (422, ErrorKind.VALIDATION, "Validation failed", "VALIDATION_ERROR"),
    (429, ErrorKind.RATE_LIMIT, "Rate limit exceeded", "RATE_LIMIT_ERROR"),
    (500, ErrorKind.SERVER, "Internal server error", "SERVER_ERROR"),
    (502, ErrorKind.SERVER, "Internal server error", "SERVER_ERROR"),
    (503, ErrorKind.SERVER, "Internal server error", "SERVER_ERROR"),
    (504, ErrorKind.SERVER, "Internal server error", "SERVER_ERROR"),
]


@pytest.mark.asyncio
@pytest.mark.parametrize("status,kind,default_message,code", TAXONOMY)
@respx.mock
async def test_status_classified_with_default_message(
    client, status, kind, default_message, code
):
    respx.get(f"{BASE}/fail").mock(return_value=Response(status, json={}))

    async with client:
        with pytest.raises(RelayError) as exc:
            await client.get("/fail")

    assert exc.value.kind is kind
    assert exc.value.message == default_message
    assert exc.value.code == code
    assert exc.value.status == status


@pytest.mark.asyncio
@pytest.mark.parametrize("status,kind,default_message,code", TAXONOMY)
@respx.mock
async def test_status_classified_with_body_message(
    client, status, kind, default_message, code
):
    respx.get(f"{BASE}/fail").mock(
        return_value=Response(
            status, json={"message": "from server", "details": {"field": "name"}}
        )
    )

    async with client:
        with pytest.raises(RelayError) as exc:
            await client.get("/fail")

    assert exc.value.kind is kind
    assert str(exc.value) == "from server"
    assert exc.value.details == {"field": "name"}


@pytest.mark.asyncio
@respx.mock
async def test_error_field_used_when_message_missing(client):
    respx.get(f"{BASE}/fail").mock(
        return_value=Response(403, json={"error": "missing scope workflows:read"})
    )

    async with client:
        with pytest.raises(RelayError) as exc:
            await client.get("/fail")

    assert exc.value.kind is ErrorKind.AUTHORIZATION
    assert exc.value.message == "missing scope workflows:read"


@pytest.mark.asyncio
@respx.mock
async def test_unlisted_status_falls_back_to_generic(client):
    respx.get(f"{BASE}/teapot").mock(
        return_value=Response(
            418,
            json={"message": "I'm a teapot", "code": "TEAPOT", "details": {"a": 1}},
        )
    )

    async with client:
        with pytest.raises(RelayError) as exc:
            await client.get("/teapot")

    err = exc.value
    assert err.kind is ErrorKind.GENERIC
    assert err.status == 418
    assert err.message == "I'm a teapot"
    assert err.code == "TEAPOT"
    assert err.details == {"a": 1}


@pytest.mark.asyncio
@respx.mock
async def test_generic_default_message(client):
    respx.get(f"{BASE}/gone").mock(return_value=Response(410))

    async with client:
        with pytest.raises(RelayError) as exc:
            await client.get("/gone")

    assert exc.value.kind is ErrorKind.GENERIC
    assert exc.value.message == "An error occurred"


@pytest.mark.asyncio
@respx.mock
async def test_generic_list_details_passed_through(client):
    respx.get(f"{BASE}/teapot").mock(
        return_value=Response(418, json={"details": [{"field": "name"}, "a"]})
    )

    async with client:
        with pytest.raises(RelayError) as exc:
            await client.get("/teapot")

    assert exc.value.details == [{"field": "name"}, "a"]


@pytest.mark.asyncio
@respx.mock
async def test_redirects_followed_to_final_response(client):
    respx.get(f"{BASE}/old").mock(
        return_value=Response(302, headers={"Location": f"{BASE}/new"})
    )
    new = respx.get(f"{BASE}/new").mock(return_value=Response(200, json={"ok": True}))

    async with client:
        assert await client.get("/old") == {"ok": True}

    assert new.called
    assert new.calls.last.request.headers["Authorization"] == "Bearer relay_test_key"


@pytest.mark.asyncio
@respx.mock
async def test_rate_limit_carries_retry_after(client):
    respx.get(f"{BASE}/busy").mock(
        return_value=Response(429, json={"message": "slow down", "retry_after": 30})
    )

    async with client:
        with pytest.raises(RelayError) as exc:
            await client.get("/busy")

    assert exc.value.kind is ErrorKind.RATE_LIMIT
    assert exc.value.retry_after == 30
    assert exc.value.is_retryable


@pytest.mark.asyncio
@respx.mock
async def test_rate_limit_falls_back_to_retry_after_header(client):
    respx.get(f"{BASE}/busy").mock(
        return_value=Response(429, json={}, headers={"Retry-After": "12"})
    )

    async with client:
        with pytest.raises(RelayError) as exc:
            await client.get("/busy")

    assert exc.value.retry_after == 12


@pytest.mark.asyncio
@respx.mock
async def test_text_error_body_becomes_message(client):
    respx.get(f"{BASE}/down").mock(return_value=Response(503, text="upstream down"))

    async with client:
        with pytest.raises(RelayError) as exc:
            await client.get("/down")

    assert exc.value.kind is ErrorKind.SERVER
    assert exc.value.status == 503
    assert exc.value.message == "upstream down"


@pytest.mark.asyncio
@respx.mock
async def test_connect_error_is_network_kind(client):
    respx.get(f"{BASE}/x").mock(side_effect=httpx.ConnectError("dns failure"))

    async with client:
        with pytest.raises(RelayError) as exc:
            await client.get("/x")

    err = exc.value
    assert err.kind is ErrorKind.NETWORK
    assert err.message == "Network request failed. Please check your connection."
    assert err.code == "NETWORK_ERROR"
    assert err.status is None
    assert "dns failure" in err.details["original_error"]
    assert isinstance(err.__cause__, httpx.ConnectError)


@pytest.mark.asyncio
@respx.mock
async def test_no_retries_on_server_error(client):
    route = respx.get(f"{BASE}/x").mock(return_value=Response(503, json={}))

    async with client:
        with pytest.raises(RelayError):
            await client.get("/x")

    assert route.call_count == 1


@pytest.mark.asyncio
async def test_owned_http_client_closed_on_exit():
    client = HTTPClient(base_url=BASE, api_key="k")
    async with client:
        pass
    assert client.http.is_closed


@pytest.mark.asyncio
async def test_injected_http_client_left_open():
    shared = httpx.AsyncClient()
    client = HTTPClient(base_url=BASE, api_key="k", http=shared)
    async with client:
        pass
    assert not shared.is_closed
    await shared.aclose()
