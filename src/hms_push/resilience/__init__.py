"""Resilience – deadlines and cooperative cancellation."""

from hms_push.resilience.cancellation import CancellationToken
from hms_push.resilience.deadline import Deadline

__all__ = ["CancellationToken", "Deadline"]
