"""Transport – HttpxTransport.

Delivers :class:`HttpRequest` values through a pooled ``httpx.AsyncClient``
and retries transient failures according to a :class:`RetryPolicy`.
"""
from __future__ import annotations

from typing import Any

import httpx
from tenacity import RetryCallState, retry_if_exception_type, retry_if_result

from hms_push.config.settings import PushSettings
from hms_push.errors import BodyDrainError, NetworkError, ProxyURLError, SerializationError, TransportError
from hms_push.observability import get_logger
from hms_push.resilience import CancellationToken
from hms_push.transport.policy import RetryPolicy, is_retryable_status
from hms_push.transport.request import HttpRequest, HttpResponse

logger = get_logger(__name__)

# bytes read from a retryable response before its connection is released
RESP_READ_LIMIT = 4096

_PROXY_SCHEMES = frozenset({"http", "https", "socks5", "socks5h"})


def parse_proxy_url(proxy_url: str) -> httpx.URL:
    try:
        url = httpx.URL(proxy_url)
    except (httpx.InvalidURL, TypeError) as exc:
        raise ProxyURLError(proxy_url, cause=exc) from exc
    if url.scheme not in _PROXY_SCHEMES or not url.host:
        raise ProxyURLError(proxy_url)
    return url


def _is_retryable_response(response: HttpResponse) -> bool:
    return is_retryable_status(response.status)


class HttpxTransport:
    """Transporter backed by ``httpx`` with bounded fixed-interval retries."""

    def __init__(
        self,
        policy: RetryPolicy | None = None,
        *,
        timeout: float = 10.0,
        proxy_url: str = "",
        verify: bool = True,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._policy = policy or RetryPolicy()
        if client is None:
            proxy = parse_proxy_url(proxy_url) if proxy_url else None
            client = httpx.AsyncClient(timeout=timeout, proxy=proxy, verify=verify)
        self._client = client

    @classmethod
    def from_settings(cls, settings: PushSettings) -> "HttpxTransport":
        return cls(
            RetryPolicy(max_attempts=settings.max_retry_times, retry_interval=settings.retry_interval),
            timeout=settings.request_timeout,
            proxy_url=settings.proxy_url,
            verify=settings.verify_tls,
        )

    @property
    def policy(self) -> RetryPolicy:
        return self._policy

    async def __aenter__(self) -> "HttpxTransport":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def send(self, request: HttpRequest, cancel: CancellationToken | None = None) -> HttpResponse:
        """Send *request*, retrying network failures and status ``0`` / ``>= 500``.

        Raises:
            UnsupportedMethodError: the method is neither GET nor POST.
            NetworkError: every attempt failed without a response.
            BodyDrainError: a retryable response could not be drained.
            SerializationError: a response body could not be content-decoded.
            TransportError: any other httpx failure; never retried.
        """
        request.ensure_supported()
        cancel = cancel or CancellationToken.none()

        def log_retry(retry_state: RetryCallState) -> None:
            outcome = retry_state.outcome
            failed = outcome is not None and outcome.failed
            logger.debug(
                "transport.retry",
                method=request.method,
                url=request.url,
                attempt=retry_state.attempt_number,
                status=None if failed or outcome is None else outcome.result().status,
                error=repr(outcome.exception()) if failed else None,
            )

        retrying = self._policy.retrying(
            cancel,
            retry=retry_if_exception_type(NetworkError) | retry_if_result(_is_retryable_response),
            before_sleep=log_retry,
        )
        return await retrying(self._attempt, request)

    async def _attempt(self, request: HttpRequest) -> HttpResponse:
        http_request = self._client.build_request(
            request.method,
            request.url,
            headers=dict(request.headers),
            content=request.body or None,
        )
        try:
            response = await self._client.send(http_request, stream=True)
        except httpx.TransportError as exc:
            raise NetworkError(request.url, f"{type(exc).__name__}: {exc}", cause=exc) from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"{type(exc).__name__} calling '{request.url}': {exc}", cause=exc) from exc

        status = response.status_code
        if is_retryable_status(status):
            body = await self._drain(response)
        else:
            try:
                body = await response.aread()
            except httpx.DecodingError as exc:
                raise SerializationError(
                    f"undecodable response body from '{request.url}': {exc}",
                    payload_type=response.headers.get("content-encoding"),
                    status=status,
                    cause=exc,
                ) from exc
            except httpx.TransportError as exc:
                raise NetworkError(request.url, f"{type(exc).__name__}: {exc}", cause=exc) from exc
            except httpx.HTTPError as exc:
                raise TransportError(
                    f"failed to read response from '{request.url}': {exc}", status=status, cause=exc
                ) from exc
            finally:
                await response.aclose()
        return HttpResponse(status=status, headers=dict(response.headers.items()), body=body)

    async def _drain(self, response: httpx.Response) -> bytes:
        # decoded content: the last drained body is returned once retries run out
        drained = bytearray()
        try:
            async for chunk in response.aiter_bytes():
                drained.extend(chunk[: RESP_READ_LIMIT - len(drained)])
                if len(drained) >= RESP_READ_LIMIT:
                    break
        except httpx.HTTPError as exc:
            raise BodyDrainError(
                f"failed to drain response body: {exc}", status=response.status_code, cause=exc
            ) from exc
        finally:
            await response.aclose()
        return bytes(drained)


__all__ = ["RESP_READ_LIMIT", "HttpxTransport", "parse_proxy_url"]
