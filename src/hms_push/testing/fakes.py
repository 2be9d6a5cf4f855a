"""Testing fakes – FakeTransport and canned provider responses."""
from __future__ import annotations

import json
from collections import deque
from collections.abc import Awaitable, Callable, Iterable
from typing import Any

from hms_push.resilience import CancellationToken
from hms_push.transport import HttpRequest, HttpResponse

Scripted = HttpResponse | BaseException
Handler = Callable[[HttpRequest], Awaitable[Scripted]]


def json_response(status: int, payload: Any) -> HttpResponse:
    return HttpResponse(
        status=status,
        headers={"content-type": "application/json"},
        body=json.dumps(payload).encode("utf-8"),
    )


def token_response(access_token: str = "token-1", expires_in: int = 3600, scope: str = "") -> HttpResponse:
    """A 200 answer from the OAuth2 token endpoint."""
    return json_response(200, {"access_token": access_token, "expires_in": expires_in, "scope": scope})


def push_response(code: str = "80000000", msg: str = "Success", request_id: str = "req-1") -> HttpResponse:
    """A 200 answer from the ``messages:send`` endpoint."""
    return json_response(200, {"code": code, "msg": msg, "requestId": request_id})


class FakeTransport:
    """Transporter double that records requests and replays a script.

    Scripted items are returned in order; exceptions are raised. A *handler*
    coroutine, when given, answers every request instead of the script.
    """

    def __init__(self, responses: Iterable[Scripted] = (), handler: Handler | None = None) -> None:
        self._script: deque[Scripted] = deque(responses)
        self._handler = handler
        self.requests: list[HttpRequest] = []
        self.cancel_tokens: list[CancellationToken | None] = []

    def enqueue(self, *responses: Scripted) -> None:
        self._script.extend(responses)

    async def send(self, request: HttpRequest, cancel: CancellationToken | None = None) -> HttpResponse:
        self.requests.append(request)
        self.cancel_tokens.append(cancel)
        if self._handler is not None:
            item = await self._handler(request)
        elif self._script:
            item = self._script.popleft()
        else:
            raise AssertionError(f"FakeTransport has no scripted response for {request.method} {request.url}")
        if isinstance(item, BaseException):
            raise item
        return item

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def requests_to(self, url: str) -> list[HttpRequest]:
        return [r for r in self.requests if r.url == url]

    def reset(self) -> None:
        self._script.clear()
        self.requests.clear()
        self.cancel_tokens.clear()


__all__ = ["FakeTransport", "json_response", "push_response", "token_response"]
