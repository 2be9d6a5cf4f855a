"""Transport – RetryPolicy backed by ``tenacity``.

Attempts are bounded by ``max_attempts`` and separated by a fixed
``retry_interval``. When attempts run out, or the caller's
:class:`~hms_push.resilience.CancellationToken` is signalled before the
next sleep, the last outcome is surfaced as-is: a retryable response is
returned and a network error is re-raised.
"""
from __future__ import annotations

import dataclasses
from typing import Any

from tenacity import AsyncRetrying, RetryCallState, stop_after_attempt, stop_any, wait_fixed

from hms_push.config.settings import DEFAULT_RETRY_COUNT, DEFAULT_RETRY_INTERVAL
from hms_push.errors import InvalidSettingValueError
from hms_push.observability import get_logger
from hms_push.resilience import CancellationToken

logger = get_logger(__name__)


def is_retryable_status(status: int) -> bool:
    """No response (``0``) or a server-side failure."""
    return status == 0 or status >= 500


def _last_outcome(retry_state: RetryCallState) -> Any:
    logger.warning("transport.retries_exhausted", attempts=retry_state.attempt_number)
    return retry_state.outcome.result()  # type: ignore[union-attr]


@dataclasses.dataclass(frozen=True)
class RetryPolicy:
    """Immutable retry configuration shared by every send of a transport."""

    max_attempts: int = DEFAULT_RETRY_COUNT
    retry_interval: float = DEFAULT_RETRY_INTERVAL

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise InvalidSettingValueError("max_attempts", self.max_attempts, "must be >= 1")
        if self.retry_interval < 0:
            raise InvalidSettingValueError("retry_interval", self.retry_interval, "must be >= 0")

    def retrying(self, cancel: CancellationToken, retry: Any, before_sleep: Any = None) -> AsyncRetrying:
        def cancelled(retry_state: RetryCallState) -> bool:  # noqa: ARG001
            return cancel.is_cancelled

        return AsyncRetrying(
            stop=stop_any(stop_after_attempt(self.max_attempts), cancelled),
            wait=wait_fixed(self.retry_interval),
            retry=retry,
            before_sleep=before_sleep,
            retry_error_callback=_last_outcome,
        )


__all__ = ["RetryPolicy", "is_retryable_status"]
