"""Domain errors – a push message breaks the provider's structural rules."""

from __future__ import annotations

from typing import Any

from hms_push.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a message rule is violated."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """A push message does not meet the provider's validation rules.

    ``field`` names the offending attribute path, e.g.
    ``message.android.notification.color``.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.field = field
        if field is not None:
            self.detail.setdefault("field", field)


__all__ = ["DomainError", "ValidationError"]
