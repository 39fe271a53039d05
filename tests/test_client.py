import logging
from typing import List

import httpx
import pytest
from pydantic import BaseModel

from conftest import API_KEY, BASE_URL, reply
from geoapify import (
    APIError,
    DecodeError,
    GeoapifyClient,
    RequestBuildError,
    RetryConfig,
    TransportError,
    as_api_error,
)


class Echo(BaseModel):
    ok: bool


# === URL building =============================================================


def test_build_url_puts_api_key_last(client):
    url = client.build_url("/v1/geocode/search", [("text", "Berlin"), ("limit", "5")])
    assert url == f"{BASE_URL}/v1/geocode/search?text=Berlin&limit=5&apiKey={API_KEY}"


def test_build_url_is_deterministic(client):
    params = [("text", "Rue de Rivoli"), ("lang", "fr")]
    assert client.build_url("/v1/x", params) == client.build_url("/v1/x", params)


def test_build_url_escapes_values(client):
    url = client.build_url("/v1/x", [("filter", "circle:1,2,3|countrycode:de")])
    assert httpx.URL(url).params.multi_items() == [
        ("filter", "circle:1,2,3|countrycode:de"),
        ("apiKey", API_KEY),
    ]


def test_build_url_overrides_caller_api_key(client):
    url = client.build_url("/v1/x", {"apiKey": "someone-else", "q": "x"})
    assert httpx.URL(url).params.multi_items() == [("q", "x"), ("apiKey", API_KEY)]


def test_build_url_without_params(client):
    assert client.build_url("/v1/ipinfo") == f"{BASE_URL}/v1/ipinfo?apiKey={API_KEY}"


def test_trailing_slash_stripped_from_base_url():
    client = GeoapifyClient(API_KEY, base_url="https://api.test///", http_client=httpx.AsyncClient())
    assert client.build_url("/v1/x").startswith("https://api.test/v1/x?")


# === Dispatch and decoding ====================================================


async def test_get_decodes_into_target(client, server):
    server.queue(reply(200, {"ok": True}))

    result = await client.execute_get("/v1/x", [("a", "1")], Echo)

    assert result == Echo(ok=True)
    assert server.last.method == "GET"
    assert server.last.url.path == "/v1/x"
    assert server.last_params() == [("a", "1"), ("apiKey", API_KEY)]


async def test_get_decodes_into_plain_types(client, server):
    server.queue(reply(200, [{"a": 1}, {"a": 2}]))
    assert await client.execute_get("/v1/x", target=List[dict]) == [{"a": 1}, {"a": 2}]


async def test_no_target_skips_decoding(client, server):
    server.queue(reply(200, text="not json at all"))
    assert await client.execute_get("/v1/x") is None


async def test_post_sends_json_body(client, server):
    server.queue(reply(200, {"ok": True}))

    result = await client.execute_post(
        "/v1/routematrix", None, {"mode": "drive", "sources": [[1.0, 2.0]]}, Echo
    )

    assert result.ok is True
    assert server.last.method == "POST"
    assert server.last.headers["Content-Type"] == "application/json"
    assert server.last_json() == {"mode": "drive", "sources": [[1.0, 2.0]]}
    assert server.last_params() == [("apiKey", API_KEY)]


async def test_post_with_unserializable_body_raises_build_error(client, server):
    with pytest.raises(RequestBuildError) as exc_info:
        await client.execute_post("/v1/x", body={"bad": object()})

    assert "building request" in str(exc_info.value)
    assert server.attempts == 0


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
async def test_post_with_non_finite_number_raises_build_error(client, server, value):
    with pytest.raises(RequestBuildError):
        await client.execute_post("/v1/x", body={"v": value})

    assert server.attempts == 0


async def test_malformed_body_raises_decode_error(client, server):
    server.queue(reply(200, text="<html>oops</html>"))

    with pytest.raises(DecodeError) as exc_info:
        await client.execute_get("/v1/x", target=Echo)

    assert "decoding response" in str(exc_info.value)


async def test_wrong_shape_raises_decode_error(client, server):
    server.queue(reply(200, {"ok": "not-a-bool"}))
    with pytest.raises(DecodeError):
        await client.execute_get("/v1/x", target=Echo)


# === Error classification =====================================================


@pytest.mark.parametrize(
    "answer, message",
    [
        (reply(400, {"message": "Bad input", "error": "Bad Request"}), "Bad input"),
        (reply(400, {"error": "Bad Request"}), "Bad Request"),
        (reply(400, {"message": "", "error": "Bad Request"}), "Bad Request"),
        (reply(400, text='{"message": 42}'), '{"message": 42}'),
        (reply(400, text='{"message": 5, "error": "x"}'), '{"message": 5, "error": "x"}'),
        (reply(400, text='{"message": "ok", "error": 7}'), '{"message": "ok", "error": 7}'),
        (reply(400, text='{"message": null, "error": "x"}'), "x"),
        (reply(400, text="upstream exploded"), "upstream exploded"),
        (reply(400, text='["not", "an"]'), '["not", "an"]'),
    ],
)
async def test_api_error_message(client, server, answer, message):
    server.queue(answer)

    with pytest.raises(APIError) as exc_info:
        await client.execute_get("/v1/x", target=Echo)

    error = exc_info.value
    assert error.status_code == 400
    assert error.message == message
    assert str(error) == f"geoapify: API error 400: {message}"


async def test_api_error_keeps_raw_body(client, server):
    server.queue(reply(404, text="missing"))

    with pytest.raises(APIError) as exc_info:
        await client.execute_get("/v1/x")

    assert exc_info.value.raw_body == b"missing"


async def test_api_error_with_empty_body(client, server):
    server.queue(reply(503))

    with pytest.raises(APIError) as exc_info:
        await client.execute_get("/v1/x")

    assert exc_info.value.message == ""
    assert str(exc_info.value) == "geoapify: API error 503"


async def test_retryable_status_without_retry_config_is_plain_api_error(client, server):
    server.queue(reply(429, {"message": "slow down"}, headers={"Retry-After": "1"}))

    with pytest.raises(APIError) as exc_info:
        await client.execute_get("/v1/x")

    assert exc_info.value.status_code == 429
    assert server.attempts == 1


async def test_transport_failure_is_wrapped(make_client, server):
    client = make_client(RetryConfig(max_retries=3, initial_delay=0.01, max_delay=0.1))
    server.always(httpx.ConnectError("connection refused"))

    with pytest.raises(TransportError) as exc_info:
        await client.execute_get("/v1/x")

    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
    assert str(exc_info.value).startswith("executing request: ")
    # transport failures are not retried
    assert server.attempts == 1


def test_as_api_error_follows_cause_chain():
    api_error = APIError(401, "Invalid key")
    try:
        try:
            raise api_error
        except APIError as e:
            raise RuntimeError("wrapped") from e
    except RuntimeError as outer:
        assert as_api_error(outer) is api_error

    assert as_api_error(ValueError("nothing here")) is None


async def test_api_key_not_logged(client, server, caplog):
    caplog.set_level(logging.DEBUG, logger="geoapify")
    server.queue(reply(200, {"ok": True}))

    await client.execute_get("/v1/x", [("text", "Berlin")], Echo)

    assert "/v1/x" in caplog.text
    assert API_KEY not in caplog.text
