"""Errors – BaseError, the root of every exception raised by hms-push."""
from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """A failure of the push client.

    ``code`` is a stable slug to branch on. When the failure happened after
    a HUAWEI endpoint answered, ``status`` holds the HTTP status and
    ``request_id`` the provider's ``requestId``; both stay ``None`` for
    failures raised before anything reached the wire.
    """

    default_code: str = "hms_push_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        status: int | None = None,
        request_id: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.status = status
        self.request_id = request_id or None
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    @property
    def answered(self) -> bool:
        """The provider produced an HTTP response before this error."""
        return self.status is not None

    def to_dict(self) -> dict[str, Any]:
        """Plain ``dict`` for structured log events; unset context is left out."""
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.status is not None:
            payload["status"] = self.status
        if self.request_id:
            payload["request_id"] = self.request_id
        if self.detail:
            payload["detail"] = self.detail
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        context = "".join(
            f", {name}={value!r}"
            for name, value in (("status", self.status), ("request_id", self.request_id))
            if value is not None
        )
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r}{context})"


__all__ = ["BaseError"]
