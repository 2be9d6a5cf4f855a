"""Messaging – provider enumerations."""
from __future__ import annotations

from enum import Enum, IntEnum


class Visibility(str, Enum):
    UNSPECIFIED = "VISIBILITY_UNSPECIFIED"
    PRIVATE = "PRIVATE"
    PUBLIC = "PUBLIC"
    SECRET = "SECRET"


class AndroidUrgency(str, Enum):
    """Delivery priority of an Android data message."""

    HIGH = "HIGH"
    NORMAL = "NORMAL"


class NotificationPriority(str, Enum):
    """Android notification importance."""

    HIGH = "HIGH"
    NORMAL = "NORMAL"
    LOW = "LOW"


class WebUrgency(str, Enum):
    VERY_LOW = "very-low"
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"


class TextDirection(str, Enum):
    AUTO = "auto"
    LTR = "ltr"
    RTL = "rtl"


class NotificationBarStyle(IntEnum):
    DEFAULT = 0
    BIG_TEXT = 1
    INBOX = 3


class ClickActionType(IntEnum):
    INTENT_OR_ACTION = 1
    URL = 2
    APP = 3
    RICH_RESOURCE = 4


class FastAppState(IntEnum):
    """Quick-app state targeted by a data message."""

    DEVELOP = 1
    PRODUCT = 2


def coerce_enum(value: object, enum_cls: type[Enum]) -> Enum | None:
    """Return the member of *enum_cls* matching *value*, or ``None``."""
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, bool):
        return None
    try:
        return enum_cls(value)
    except ValueError:
        return None


__all__ = [
    "AndroidUrgency",
    "ClickActionType",
    "FastAppState",
    "NotificationBarStyle",
    "NotificationPriority",
    "TextDirection",
    "Visibility",
    "WebUrgency",
    "coerce_enum",
]
