"""Messaging – Android push configuration."""
from __future__ import annotations

import dataclasses
from datetime import timedelta
from typing import Any

from hms_push.messaging.enums import (
    AndroidUrgency,
    ClickActionType,
    FastAppState,
    NotificationBarStyle,
    NotificationPriority,
    Visibility,
)

Duration = timedelta | float


@dataclasses.dataclass
class ClickAction:
    """Action performed when the user taps the notification.

    ``INTENT_OR_ACTION`` needs ``intent`` or ``action``; ``URL`` needs an
    HTTPS ``url``; ``RICH_RESOURCE`` needs ``rich_resource``.
    """

    type: ClickActionType | int
    intent: str = ""
    action: str = ""
    url: str = ""
    rich_resource: str = ""


@dataclasses.dataclass
class BadgeNotification:
    add_num: int | None = None
    set_num: int | None = None
    class_name: str = ""  # wire name "class"


@dataclasses.dataclass
class Color:
    """RGBA breath-light colour, each channel in ``[0, 1]``."""

    alpha: float = 1.0
    red: float = 0.0
    green: float = 0.0
    blue: float = 0.0


@dataclasses.dataclass
class LightSettings:
    color: Color | None = None
    light_on_duration: Duration | None = None
    light_off_duration: Duration | None = None


@dataclasses.dataclass
class AndroidNotification:
    title: str = ""
    body: str = ""
    icon: str = ""
    color: str = ""  # "#RRGGBB"
    sound: str = ""
    default_sound: bool = False
    tag: str = ""
    click_action: ClickAction | None = None
    body_loc_key: str = ""
    body_loc_args: list[str] = dataclasses.field(default_factory=list)
    title_loc_key: str = ""
    title_loc_args: list[str] = dataclasses.field(default_factory=list)
    multi_lang_key: dict[str, Any] = dataclasses.field(default_factory=dict)
    channel_id: str = ""
    notify_summary: str = ""
    image: str = ""
    style: NotificationBarStyle | int | None = None
    big_title: str = ""
    big_body: str = ""
    auto_clear: int | None = None  # milliseconds
    notify_id: int | None = None
    group: str = ""
    badge: BadgeNotification | None = None
    ticker: str = ""
    auto_cancel: bool = False
    when: str = ""
    importance: NotificationPriority | str | None = None
    use_default_vibrate: bool = False
    use_default_light: bool = False
    vibrate_config: list[Duration] = dataclasses.field(default_factory=list)
    visibility: Visibility | str | None = None
    light_settings: LightSettings | None = None
    foreground_show: bool = False


@dataclasses.dataclass
class AndroidConfig:
    collapse_key: int | None = None
    urgency: AndroidUrgency | str | None = None
    category: str = ""
    ttl: Duration | None = None
    bi_tag: str = ""
    fast_app_target: FastAppState | int | None = None
    data: str = ""
    notification: AndroidNotification | None = None


__all__ = [
    "AndroidConfig",
    "AndroidNotification",
    "BadgeNotification",
    "ClickAction",
    "Color",
    "Duration",
    "LightSettings",
]
