"""Messaging – provider response envelope and result codes."""
from __future__ import annotations

import dataclasses
from typing import Any

from hms_push.errors import SerializationError
from hms_push.transport import HttpResponse


class ResponseCode:
    """Result codes returned in the ``code`` field of a send response."""

    SUCCESS = "80000000"
    # some tokens were accepted; the rest are listed as illegal_tokens
    PARTIAL_SUCCESS = "80100000"
    PARAMETER_ERROR = "80100001"
    SINGLE_TOKEN_SYNC_ERROR = "80100002"
    INCORRECT_MESSAGE = "80100003"
    EXPIRE_TIME_ERROR = "80100004"
    COLLAPSE_KEY_ERROR = "80100013"
    MESSAGE_INSECURE = "80100016"
    TOKEN_FAILED = "80200001"
    TOKEN_TIMEOUT = "80200003"
    NO_PUSH_PERMISSION = "80300002"
    ALL_TOKENS_INVALID = "80300007"
    BODY_TOO_BIG = "80300008"
    TOO_MANY_TOKENS = "80300010"
    NO_HIGH_PRIORITY_PERMISSION = "80300011"
    INTERNAL_ERROR = "81000001"


TOKEN_FAILURE_CODES = frozenset({ResponseCode.TOKEN_FAILED, ResponseCode.TOKEN_TIMEOUT})


@dataclasses.dataclass(frozen=True)
class PushResponse:
    """The ``{code, msg, requestId}`` envelope of one send attempt."""

    code: str
    msg: str = ""
    request_id: str = ""

    @classmethod
    def from_payload(cls, payload: Any, status: int | None = None) -> "PushResponse":
        if not isinstance(payload, dict) or "code" not in payload:
            raise SerializationError(
                "push response is not a {code, msg, requestId} envelope",
                payload_type="push_response",
                status=status,
                request_id=str(payload.get("requestId") or "") if isinstance(payload, dict) else None,
            )
        return cls(
            code=str(payload["code"]),
            msg=str(payload.get("msg") or ""),
            request_id=str(payload.get("requestId") or ""),
        )

    @classmethod
    def from_http(cls, response: HttpResponse) -> "PushResponse":
        return cls.from_payload(response.json(), status=response.status)

    @property
    def ok(self) -> bool:
        return self.code == ResponseCode.SUCCESS

    @property
    def token_expired(self) -> bool:
        """The provider rejected the bearer token; a refresh may fix it."""
        return self.code in TOKEN_FAILURE_CODES


__all__ = ["TOKEN_FAILURE_CODES", "PushResponse", "ResponseCode"]
