"""Messaging – Web push configuration."""
from __future__ import annotations

import dataclasses

from hms_push.messaging.android import Duration
from hms_push.messaging.enums import TextDirection, WebUrgency


@dataclasses.dataclass
class WebPushHeaders:
    ttl: Duration | None = None
    topic: str = ""  # wire name "topics"
    urgency: WebUrgency | str | None = None


@dataclasses.dataclass
class HmsWebPushOption:
    link: str = ""


@dataclasses.dataclass
class WebPushAction:
    action: str = ""
    icon: str = ""
    title: str = ""


@dataclasses.dataclass
class WebPushNotification:
    title: str = ""
    body: str = ""
    icon: str = ""
    image: str = ""
    lang: str = ""
    tag: str = ""
    badge: str = ""
    dir: TextDirection | str | None = None
    vibrate: list[int] = dataclasses.field(default_factory=list)
    renotify: bool = False
    require_interaction: bool = False
    silent: bool = False
    timestamp: int | None = None
    actions: list[WebPushAction] = dataclasses.field(default_factory=list)


@dataclasses.dataclass
class WebPushConfig:
    headers: WebPushHeaders | None = None
    notification: WebPushNotification | None = None
    hms_options: HmsWebPushOption | None = None


__all__ = [
    "HmsWebPushOption",
    "WebPushAction",
    "WebPushConfig",
    "WebPushHeaders",
    "WebPushNotification",
]
