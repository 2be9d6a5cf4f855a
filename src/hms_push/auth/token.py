"""Auth – AccessToken value."""
from __future__ import annotations

import dataclasses
from typing import Any

from hms_push.errors import SerializationError


@dataclasses.dataclass(frozen=True)
class AccessToken:
    """An OAuth2 bearer token as issued by the token endpoint.

    Instances are never mutated; a refresh swaps in a new one.
    """

    access_token: str
    expires_in: int = 0
    scope: str = ""
    error: str | None = None
    error_description: str | None = None

    @classmethod
    def from_payload(cls, payload: Any) -> "AccessToken":
        if not isinstance(payload, dict):
            raise SerializationError("token envelope must be a JSON object", payload_type="token")
        access_token = payload.get("access_token")
        if not isinstance(access_token, str) or not access_token.strip():
            raise SerializationError("token envelope has no access_token", payload_type="token")
        try:
            expires_in = int(payload.get("expires_in") or 0)
        except (TypeError, ValueError) as exc:
            raise SerializationError("token envelope has a malformed expires_in", payload_type="token", cause=exc) from exc
        return cls(
            access_token=access_token,
            expires_in=expires_in,
            scope=str(payload.get("scope") or ""),
            error=payload.get("error"),
            error_description=payload.get("error_description"),
        )

    @property
    def authorization(self) -> str:
        return f"Bearer {self.access_token}"

    def __repr__(self) -> str:
        return f"AccessToken(access_token='***', expires_in={self.expires_in}, scope={self.scope!r})"


__all__ = ["AccessToken"]
