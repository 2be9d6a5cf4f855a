"""Resilience – CancellationToken.

A cooperative cancellation signal shared by the caller and the SDK. It is
signalled either explicitly via :meth:`CancellationToken.cancel` or implicitly
once its :class:`Deadline` passes. Child tokens observe their parent, so a
caller cancelling a send also stops the nested token refresh.

Usage::

    cancel = CancellationToken.with_timeout(5.0)
    response = await client.send_message(request, cancel)
"""
from __future__ import annotations

import asyncio
import weakref

from hms_push.resilience.deadline import Deadline


class CancellationToken:
    """Cooperative cancellation checked at retry and refresh boundaries."""

    def __init__(
        self,
        deadline: Deadline | None = None,
        parent: "CancellationToken | None" = None,
    ) -> None:
        self._deadline = deadline
        self._parent = parent
        self._cancelled = False
        self._event: asyncio.Event | None = None
        self._children: weakref.WeakSet[CancellationToken] = weakref.WeakSet()
        if parent is not None:
            parent._children.add(self)

    @classmethod
    def none(cls) -> "CancellationToken":
        """A token that is only ever signalled by an explicit ``cancel()``."""
        return cls()

    @classmethod
    def with_timeout(cls, seconds: float) -> "CancellationToken":
        return cls(deadline=Deadline.after(seconds))

    def child(self, timeout: float | None = None) -> "CancellationToken":
        """Derive a token cancelled with this one, optionally with a tighter deadline."""
        deadline = self._deadline
        if timeout is not None:
            deadline = Deadline.after(timeout).earliest(deadline)
        return CancellationToken(deadline=deadline, parent=self)

    @property
    def deadline(self) -> Deadline | None:
        return self._deadline

    @property
    def remaining_seconds(self) -> float | None:
        """Seconds left before the deadline, or ``None`` when unbounded."""
        if self._deadline is None:
            return None
        return self._deadline.remaining_seconds

    @property
    def is_cancelled(self) -> bool:
        if self._cancelled:
            return True
        if self._deadline is not None and self._deadline.is_expired:
            return True
        return self._parent is not None and self._parent.is_cancelled

    def cancel(self) -> None:
        self._cancelled = True
        if self._event is not None:
            self._event.set()
        for child in list(self._children):
            child.cancel()

    async def wait(self, timeout: float | None = None) -> bool:
        """Sleep until cancelled or *timeout* elapses; return ``is_cancelled``."""
        if self._event is None:
            self._event = asyncio.Event()
        loop = asyncio.get_running_loop()
        until = None if timeout is None else loop.time() + timeout
        while not self.is_cancelled:
            bounds: list[float] = []
            if until is not None:
                left = until - loop.time()
                if left <= 0:
                    break
                bounds.append(left)
            remaining = self.remaining_seconds
            if remaining is not None:
                bounds.append(remaining)
            try:
                await asyncio.wait_for(self._event.wait(), timeout=min(bounds) if bounds else None)
            except TimeoutError:
                continue
        return self.is_cancelled

    def __repr__(self) -> str:
        return f"CancellationToken(cancelled={self.is_cancelled}, remaining={self.remaining_seconds})"


__all__ = ["CancellationToken"]
