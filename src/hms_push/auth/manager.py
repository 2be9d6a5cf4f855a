"""Auth – TokenManager.

Owns the cached bearer token for one set of credentials.

* ``current_token()`` copies the cached reference under a short mutex that
  is never held across an ``await``; readers therefore never wait on I/O.
* ``refresh()`` runs the OAuth2 client-credentials exchange outside that
  mutex and swaps in a new immutable :class:`AccessToken`. Exchanges are
  serialised by an ``asyncio.Lock``; the last completed refresh wins.
* ``renew(stale)`` is the single-flight variant used by senders: callers
  queued behind an exchange that already replaced *stale* get the new token
  without another round trip.
* ``auto_refresh()`` keeps the token fresh on a schedule until cancelled.
"""
from __future__ import annotations

import asyncio
import threading
from urllib.parse import urlencode

from hms_push.auth.token import AccessToken
from hms_push.config.settings import AUTH_URL
from hms_push.errors import RefreshTokenError, SerializationError, TransportError
from hms_push.observability import get_logger
from hms_push.resilience import CancellationToken
from hms_push.transport import HttpRequest, Transporter

logger = get_logger(__name__)

DEFAULT_REFRESH_INTERVAL = 30 * 60.0
DEFAULT_RETRY_DELAY = 10.0


class TokenManager:
    """Acquire, cache and refresh an OAuth2 client-credentials token."""

    def __init__(
        self,
        app_id: str,
        app_secret: str,
        transport: Transporter,
        auth_url: str = AUTH_URL,
    ) -> None:
        self._app_id = app_id
        self._app_secret = app_secret
        self._transport = transport
        self._auth_url = auth_url
        self._token: AccessToken | None = None
        self._swap_lock = threading.Lock()
        self._refresh_lock: asyncio.Lock | None = None
        self._auto_refreshing = False

    def current_token(self) -> AccessToken | None:
        """Return the last successfully issued token (``None`` before the first)."""
        with self._swap_lock:
            return self._token

    @property
    def is_auto_refreshing(self) -> bool:
        return self._auto_refreshing

    async def refresh(self, cancel: CancellationToken | None = None) -> AccessToken:
        """Exchange the client credentials for a new token and cache it.

        Raises:
            RefreshTokenError: the endpoint was unreachable, answered with a
                non-200 status, or returned an undecodable token envelope.
        """
        async with self._lock():
            return await self._exchange(cancel)

    async def renew(self, stale: AccessToken | None, cancel: CancellationToken | None = None) -> AccessToken:
        """Replace *stale* (the token the caller saw, or ``None``) at most once.

        When another caller already swapped in a different token while this
        one waited, that token is returned and no request is made.

        Raises:
            RefreshTokenError: as for :meth:`refresh`.
        """
        async with self._lock():
            current = self.current_token()
            if current is not None and current is not stale:
                return current
            return await self._exchange(cancel)

    def _lock(self) -> asyncio.Lock:
        if self._refresh_lock is None:
            self._refresh_lock = asyncio.Lock()
        return self._refresh_lock

    async def _exchange(self, cancel: CancellationToken | None) -> AccessToken:
        token = await self._request_token(cancel)
        with self._swap_lock:
            self._token = token
        logger.info("auth.token_refreshed", app_id=self._app_id, expires_in=token.expires_in)
        return token

    async def _request_token(self, cancel: CancellationToken | None) -> AccessToken:
        body = urlencode(
            [
                ("grant_type", "client_credentials"),
                ("client_secret", self._app_secret),
                ("client_id", self._app_id),
            ]
        )
        request = HttpRequest.post(
            self._auth_url,
            body,
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )
        try:
            response = await self._transport.send(request, cancel)
        except (TransportError, SerializationError) as exc:
            logger.warning("auth.token_request_failed", app_id=self._app_id, error=exc.code)
            raise RefreshTokenError(status=exc.status, cause=exc) from exc

        if response.status != 200:
            logger.warning("auth.token_rejected", app_id=self._app_id, status=response.status)
            raise RefreshTokenError(status=response.status)

        try:
            return AccessToken.from_payload(response.json())
        except SerializationError as exc:
            logger.warning("auth.token_undecodable", app_id=self._app_id, reason=exc.message)
            raise RefreshTokenError(status=response.status, cause=exc) from exc

    async def auto_refresh(
        self,
        cancel: CancellationToken,
        interval: float = DEFAULT_REFRESH_INTERVAL,
        retry_delay: float = DEFAULT_RETRY_DELAY,
    ) -> None:
        """Refresh now and then every *interval* seconds until *cancel* fires.

        A failed refresh is retried every *retry_delay* seconds.
        """
        self._auto_refreshing = True
        logger.info("auth.auto_refresh_started", app_id=self._app_id, interval=interval)
        try:
            while not cancel.is_cancelled:
                try:
                    await self.refresh(cancel)
                except RefreshTokenError:
                    logger.warning("auth.auto_refresh_retry", app_id=self._app_id, retry_delay=retry_delay)
                    if await cancel.wait(retry_delay):
                        break
                    continue
                if await cancel.wait(interval):
                    break
        finally:
            self._auto_refreshing = False
            logger.info("auth.auto_refresh_stopped", app_id=self._app_id)


__all__ = ["DEFAULT_REFRESH_INTERVAL", "DEFAULT_RETRY_DELAY", "TokenManager"]
