"""HuaweiPushClient – validated, authenticated message dispatch.

Usage::

    async with HuaweiPushClient("123", "s3cret") as client:
        response = await client.send_message(android_notification_request(["abc"]))
        if not response.ok:
            ...

A provider result code other than success is returned as data on the
:class:`PushResponse`; only configuration, validation, authentication,
transport and decoding failures raise.
"""
from __future__ import annotations

import asyncio
import dataclasses
from typing import Any

from hms_push.auth import AccessToken, TokenManager
from hms_push.config import PushSettings
from hms_push.errors import ConfigError, RefreshTokenError
from hms_push.messaging import PushRequest, PushResponse, dumps, validate_message
from hms_push.observability import get_logger
from hms_push.resilience import CancellationToken
from hms_push.transport import HttpRequest, HttpxTransport, Transporter

logger = get_logger(__name__)

JSON_CONTENT_TYPE = "application/json;charset=utf-8"


class HuaweiPushClient:
    """Send push messages through HUAWEI Push Kit."""

    def __init__(
        self,
        app_id: str,
        app_secret: str,
        *,
        transport: Transporter | None = None,
        settings: PushSettings | None = None,
    ) -> None:
        if not app_id:
            raise ConfigError("appId can't be empty", code="app_id_empty")
        if not app_secret:
            raise ConfigError("appSecret can't be empty", code="app_secret_empty")
        if settings is None:
            settings = PushSettings(app_id=app_id, app_secret=app_secret)
        elif (settings.app_id, settings.app_secret) != (app_id, app_secret):
            settings = dataclasses.replace(settings, app_id=app_id, app_secret=app_secret)
        self._settings = settings

        self._owns_transport = transport is None
        if transport is None:
            transport = HttpxTransport.from_settings(settings)
        elif not isinstance(transport, Transporter):
            raise ConfigError("passed empty transport", code="transport_invalid")
        self._transport = transport

        self._tokens = TokenManager(app_id, app_secret, transport, auth_url=settings.auth_url)
        self._auto_refresh_task: asyncio.Task[None] | None = None
        self._auto_refresh_cancel: CancellationToken | None = None

    @classmethod
    def from_settings(cls, settings: PushSettings, transport: Transporter | None = None) -> "HuaweiPushClient":
        return cls(settings.app_id, settings.app_secret, transport=transport, settings=settings)

    async def __aenter__(self) -> "HuaweiPushClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    @property
    def app_id(self) -> str:
        return self._settings.app_id

    @property
    def settings(self) -> PushSettings:
        return self._settings

    @property
    def tokens(self) -> TokenManager:
        return self._tokens

    def token(self) -> AccessToken | None:
        """Snapshot of the cached access token."""
        return self._tokens.current_token()

    async def request_token(self, cancel: CancellationToken | None = None) -> AccessToken:
        """Fetch a fresh token now and cache it."""
        return await self._tokens.refresh(cancel)

    async def send_message(
        self,
        request: PushRequest,
        cancel: CancellationToken | None = None,
    ) -> PushResponse:
        """Validate, authenticate and deliver *request*.

        When the provider rejects the bearer token the message is resent exactly
        once, with a fresh token. Concurrent senders that hit the same rejection
        share a single token exchange.

        Raises:
            ValidationError: the message is structurally invalid; nothing is sent.
            RefreshTokenError: no token could be obtained.
            TransportError: the push endpoint could not be reached.
            SerializationError: the request or the response could not be (de)serialised.
        """
        validate_message(request)
        body = dumps(request)
        cancel = cancel or CancellationToken.none()

        token = self._tokens.current_token()
        if token is None:
            token = await self._renew_bounded(None, cancel)

        response = await self._post(body, token, cancel)
        if response.token_expired:
            logger.info("push.token_rejected", app_id=self.app_id, code=response.code, request_id=response.request_id)
            token = await self._renew_bounded(token, cancel)
            response = await self._post(body, token, cancel)

        logger.info(
            "push.sent",
            app_id=self.app_id,
            code=response.code,
            request_id=response.request_id,
            ok=response.ok,
        )
        return response

    async def _renew_bounded(self, stale: AccessToken | None, cancel: CancellationToken) -> AccessToken:
        timeout = self._settings.token_request_timeout
        try:
            return await asyncio.wait_for(self._tokens.renew(stale, cancel.child(timeout)), timeout=timeout)
        except TimeoutError as exc:
            logger.warning("push.token_refresh_timeout", app_id=self.app_id, timeout=timeout)
            raise RefreshTokenError(detail={"timeout": timeout}, cause=exc) from exc

    async def _post(self, body: bytes, token: AccessToken, cancel: CancellationToken) -> PushResponse:
        request = HttpRequest.post(
            self._settings.push_url,
            body,
            headers={
                "Content-Type": JSON_CONTENT_TYPE,
                "Authorization": token.authorization,
            },
        )
        http_response = await self._transport.send(request, cancel)
        return PushResponse.from_http(http_response)

    # ------------------------------------------------------------------
    # Background refresh
    # ------------------------------------------------------------------

    def start_auto_refresh(self, cancel: CancellationToken | None = None) -> asyncio.Task[None]:
        """Keep the token fresh in the background until *cancel* or :meth:`aclose`."""
        if self._auto_refresh_task is not None and not self._auto_refresh_task.done():
            return self._auto_refresh_task
        self._auto_refresh_cancel = cancel.child() if cancel is not None else CancellationToken()
        self._auto_refresh_task = asyncio.create_task(
            self._tokens.auto_refresh(
                self._auto_refresh_cancel,
                interval=self._settings.token_refresh_interval,
                retry_delay=self._settings.token_retry_delay,
            ),
            name=f"hms-push-token-refresh-{self.app_id}",
        )
        return self._auto_refresh_task

    async def stop_auto_refresh(self) -> None:
        if self._auto_refresh_cancel is not None:
            self._auto_refresh_cancel.cancel()
        if self._auto_refresh_task is not None:
            await self._auto_refresh_task
        self._auto_refresh_task = None
        self._auto_refresh_cancel = None

    async def aclose(self) -> None:
        await self.stop_auto_refresh()
        if self._owns_transport and isinstance(self._transport, HttpxTransport):
            await self._transport.aclose()


__all__ = ["JSON_CONTENT_TYPE", "HuaweiPushClient"]
