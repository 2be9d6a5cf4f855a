"""Unit tests – HttpRequest values, RetryPolicy and HttpxTransport."""
from __future__ import annotations

import asyncio
import gzip
import json

import httpx
import pytest
import respx

from hms_push.errors import (
    InvalidSettingValueError,
    NetworkError,
    ProxyURLError,
    SerializationError,
    TransportError,
    UnsupportedMethodError,
)
from hms_push.resilience import CancellationToken
from hms_push.transport import (
    RESP_READ_LIMIT,
    HttpRequest,
    HttpResponse,
    HttpxTransport,
    RetryPolicy,
    Transporter,
    is_retryable_status,
    parse_proxy_url,
)

URL = "https://push.test/send"


# ---------------------------------------------------------------------------
# Request / response values
# ---------------------------------------------------------------------------

class TestHttpRequest:
    def test_post_encodes_str_body(self) -> None:
        req = HttpRequest.post(URL, "a=b", {"Content-Type": "text/plain"})
        assert req.method == "POST"
        assert req.body == b"a=b"

    def test_method_upper_cased(self) -> None:
        assert HttpRequest("get", URL).method == "GET"

    def test_headers_are_read_only(self) -> None:
        req = HttpRequest.post(URL, b"", {"X": "1"})
        with pytest.raises(TypeError):
            req.headers["X"] = "2"  # type: ignore[index]

    def test_with_header_returns_copy(self) -> None:
        req = HttpRequest.post(URL, b"", {"X": "1"})
        other = req.with_header("Authorization", "Bearer t")
        assert "Authorization" not in req.headers
        assert other.headers["Authorization"] == "Bearer t"

    def test_ensure_supported(self) -> None:
        HttpRequest("GET", URL).ensure_supported()
        with pytest.raises(UnsupportedMethodError):
            HttpRequest("PUT", URL).ensure_supported()


class TestHttpResponse:
    def test_json(self) -> None:
        assert HttpResponse(200, body=b'{"a": 1}').json() == {"a": 1}

    def test_invalid_json(self) -> None:
        with pytest.raises(SerializationError):
            HttpResponse(200, body=b"<html>").json()


# ---------------------------------------------------------------------------
# Retry policy
# ---------------------------------------------------------------------------

class TestRetryPolicy:
    @pytest.mark.parametrize("status", [0, 500, 502, 503, 599])
    def test_retryable(self, status: int) -> None:
        assert is_retryable_status(status)

    @pytest.mark.parametrize("status", [200, 301, 400, 401, 404, 499])
    def test_not_retryable(self, status: int) -> None:
        assert not is_retryable_status(status)

    def test_defaults(self) -> None:
        policy = RetryPolicy()
        assert policy.max_attempts == 5
        assert policy.retry_interval == 0.0

    def test_rejects_zero_attempts(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            RetryPolicy(max_attempts=0)

    def test_rejects_negative_interval(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            RetryPolicy(retry_interval=-1)


class TestParseProxyURL:
    def test_valid(self) -> None:
        assert parse_proxy_url("http://proxy.local:3128").host == "proxy.local"

    @pytest.mark.parametrize("raw", ["ftp://proxy:21", "http://", "not a url"])
    def test_invalid(self, raw: str) -> None:
        with pytest.raises(ProxyURLError):
            parse_proxy_url(raw)

    def test_transport_rejects_bad_proxy(self) -> None:
        with pytest.raises(ProxyURLError):
            HttpxTransport(proxy_url="ftp://proxy:21")


# ---------------------------------------------------------------------------
# HttpxTransport
# ---------------------------------------------------------------------------

class TestHttpxTransport:
    def test_is_transporter(self) -> None:
        assert isinstance(HttpxTransport(), Transporter)

    @respx.mock
    def test_success_first_attempt(self) -> None:
        route = respx.post(URL).mock(return_value=httpx.Response(200, json={"ok": True}))

        async def run() -> HttpResponse:
            async with HttpxTransport() as transport:
                return await transport.send(HttpRequest.post(URL, b"{}", {"Content-Type": "application/json"}))

        response = asyncio.run(run())
        assert response.status == 200
        assert response.json() == {"ok": True}
        assert route.call_count == 1
        sent = route.calls.last.request
        assert sent.content == b"{}"
        assert sent.headers["content-type"] == "application/json"

    @respx.mock
    def test_retries_5xx_then_succeeds(self) -> None:
        route = respx.post(URL).mock(
            side_effect=[httpx.Response(503), httpx.Response(502), httpx.Response(200, text="done")]
        )

        async def run() -> HttpResponse:
            async with HttpxTransport(RetryPolicy(max_attempts=5)) as transport:
                return await transport.send(HttpRequest.post(URL, b""))

        response = asyncio.run(run())
        assert response.status == 200
        assert response.text == "done"
        assert route.call_count == 3

    @respx.mock
    def test_persistent_5xx_returns_last_response(self) -> None:
        route = respx.post(URL).mock(return_value=httpx.Response(503, text="busy"))

        async def run() -> HttpResponse:
            async with HttpxTransport(RetryPolicy(max_attempts=3)) as transport:
                return await transport.send(HttpRequest.post(URL, b""))

        response = asyncio.run(run())
        assert response.status == 503
        assert route.call_count == 3

    @respx.mock
    def test_4xx_not_retried(self) -> None:
        route = respx.post(URL).mock(return_value=httpx.Response(400, text="bad"))

        async def run() -> HttpResponse:
            async with HttpxTransport() as transport:
                return await transport.send(HttpRequest.post(URL, b""))

        response = asyncio.run(run())
        assert response.status == 400
        assert response.text == "bad"
        assert route.call_count == 1

    @respx.mock
    def test_network_error_retried_then_raised(self) -> None:
        route = respx.post(URL).mock(side_effect=httpx.ConnectError("refused"))

        async def run() -> None:
            async with HttpxTransport(RetryPolicy(max_attempts=2)) as transport:
                await transport.send(HttpRequest.post(URL, b""))

        with pytest.raises(NetworkError):
            asyncio.run(run())
        assert route.call_count == 2

    @respx.mock
    def test_network_error_then_success(self) -> None:
        route = respx.post(URL).mock(side_effect=[httpx.ReadTimeout("slow"), httpx.Response(200)])

        async def run() -> HttpResponse:
            async with HttpxTransport() as transport:
                return await transport.send(HttpRequest.post(URL, b""))

        assert asyncio.run(run()).status == 200
        assert route.call_count == 2

    @respx.mock
    def test_retryable_body_is_capped(self) -> None:
        respx.post(URL).mock(return_value=httpx.Response(500, content=b"x" * (RESP_READ_LIMIT * 3)))

        async def run() -> HttpResponse:
            async with HttpxTransport(RetryPolicy(max_attempts=1)) as transport:
                return await transport.send(HttpRequest.post(URL, b""))

        response = asyncio.run(run())
        assert response.status == 500
        assert len(response.body) <= RESP_READ_LIMIT

    @respx.mock
    def test_cancelled_token_stops_retries(self) -> None:
        route = respx.post(URL).mock(return_value=httpx.Response(503))

        async def run() -> HttpResponse:
            cancel = CancellationToken()
            cancel.cancel()
            async with HttpxTransport(RetryPolicy(max_attempts=5)) as transport:
                return await transport.send(HttpRequest.post(URL, b""), cancel)

        assert asyncio.run(run()).status == 503
        assert route.call_count == 1

    def test_unsupported_method_never_sent(self) -> None:
        async def run() -> None:
            async with HttpxTransport() as transport:
                await transport.send(HttpRequest("DELETE", URL))

        with pytest.raises(UnsupportedMethodError):
            asyncio.run(run())

    @respx.mock
    def test_get_supported(self) -> None:
        route = respx.get(URL).mock(return_value=httpx.Response(204))

        async def run() -> HttpResponse:
            async with HttpxTransport() as transport:
                return await transport.send(HttpRequest("GET", URL))

        assert asyncio.run(run()).status == 204
        assert route.call_count == 1

    @respx.mock
    def test_undecodable_body_raises_serialization_error(self) -> None:
        route = respx.post(URL).mock(
            return_value=httpx.Response(
                200,
                headers={"content-encoding": "gzip"},
                stream=httpx.ByteStream(b"not-gzip"),
            )
        )

        async def run() -> None:
            async with HttpxTransport() as transport:
                await transport.send(HttpRequest.post(URL, b""))

        with pytest.raises(SerializationError) as exc_info:
            asyncio.run(run())
        assert exc_info.value.status == 200
        assert route.call_count == 1

    @respx.mock
    def test_other_httpx_errors_mapped_and_not_retried(self) -> None:
        route = respx.post(URL).mock(side_effect=httpx.TooManyRedirects("redirect loop"))

        async def run() -> None:
            async with HttpxTransport(RetryPolicy(max_attempts=3)) as transport:
                await transport.send(HttpRequest.post(URL, b""))

        with pytest.raises(TransportError) as exc_info:
            asyncio.run(run())
        assert not isinstance(exc_info.value, NetworkError)
        assert route.call_count == 1

    @respx.mock
    def test_exhausted_retry_body_is_content_decoded(self) -> None:
        envelope = {"code": "81000001", "msg": "internal error", "requestId": "r-5"}
        respx.post(URL).mock(
            return_value=httpx.Response(
                503,
                headers={"content-encoding": "gzip", "content-type": "application/json"},
                content=gzip.compress(json.dumps(envelope).encode()),
            )
        )

        async def run() -> HttpResponse:
            async with HttpxTransport(RetryPolicy(max_attempts=2)) as transport:
                return await transport.send(HttpRequest.post(URL, b""))

        response = asyncio.run(run())
        assert response.status == 503
        assert response.json() == envelope
