"""Transport – immutable HTTP request and response values."""
from __future__ import annotations

import dataclasses
import json
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from hms_push.errors import SerializationError, UnsupportedMethodError

METHOD_GET = "GET"
METHOD_POST = "POST"
SUPPORTED_METHODS = frozenset({METHOD_GET, METHOD_POST})


def _freeze(headers: Mapping[str, str] | None) -> Mapping[str, str]:
    return MappingProxyType(dict(headers or {}))


@dataclasses.dataclass(frozen=True)
class HttpRequest:
    """A request descriptor; build a new one instead of mutating headers."""

    method: str
    url: str
    headers: Mapping[str, str] = dataclasses.field(default_factory=dict)
    body: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", self.method.upper())
        object.__setattr__(self, "headers", _freeze(self.headers))

    @classmethod
    def post(cls, url: str, body: bytes | str, headers: Mapping[str, str] | None = None) -> "HttpRequest":
        if isinstance(body, str):
            body = body.encode("utf-8")
        return cls(method=METHOD_POST, url=url, headers=headers or {}, body=body)

    def with_header(self, name: str, value: str) -> "HttpRequest":
        headers = dict(self.headers)
        headers[name] = value
        return dataclasses.replace(self, headers=headers)

    def ensure_supported(self) -> None:
        if self.method not in SUPPORTED_METHODS:
            raise UnsupportedMethodError(self.method)


@dataclasses.dataclass(frozen=True)
class HttpResponse:
    """Status, headers and fully-read body of one HTTP exchange."""

    status: int
    headers: Mapping[str, str] = dataclasses.field(default_factory=dict)
    body: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", _freeze(self.headers))

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    def json(self) -> Any:
        try:
            return json.loads(self.body)
        except ValueError as exc:
            raise SerializationError(
                f"Response body is not valid JSON (status {self.status})",
                payload_type="json",
                status=self.status,
                cause=exc,
            ) from exc


__all__ = ["METHOD_GET", "METHOD_POST", "SUPPORTED_METHODS", "HttpRequest", "HttpResponse"]
