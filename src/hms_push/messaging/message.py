"""Messaging – top-level push message."""
from __future__ import annotations

import dataclasses
from typing import Any

from hms_push.messaging.android import AndroidConfig
from hms_push.messaging.webpush import WebPushConfig


@dataclasses.dataclass
class Notification:
    title: str = ""
    body: str = ""
    image: str = ""


@dataclasses.dataclass
class Message:
    """One push message.

    Exactly one target must be set: a non-empty ``token`` list, a ``topic``
    or a ``condition`` expression such as
    ``"'TopicA' in topics && ('TopicB' in topics || 'TopicC' in topics)"``.
    ``apns`` is forwarded to the provider untouched.
    """

    data: str = ""
    notification: Notification | None = None
    android: AndroidConfig | None = None
    apns: dict[str, Any] | None = None
    webpush: WebPushConfig | None = None
    token: list[str] = dataclasses.field(default_factory=list)
    topic: str = ""
    condition: str = ""


@dataclasses.dataclass
class PushRequest:
    """Body of a ``messages:send`` call.

    With ``validate_only`` the provider checks the message without
    delivering it.
    """

    message: Message
    validate_only: bool = False


__all__ = ["Message", "Notification", "PushRequest"]
