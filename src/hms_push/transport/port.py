"""Transport – Transporter port."""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from hms_push.resilience import CancellationToken
from hms_push.transport.request import HttpRequest, HttpResponse


@runtime_checkable
class Transporter(Protocol):
    """Port: deliver an :class:`HttpRequest` and return its response."""

    async def send(
        self,
        request: HttpRequest,
        cancel: CancellationToken | None = None,
    ) -> HttpResponse: ...


__all__ = ["Transporter"]
