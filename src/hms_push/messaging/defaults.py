"""Messaging – ready-made message skeletons."""
from __future__ import annotations

import time
from datetime import timedelta

from hms_push.messaging.android import AndroidConfig, AndroidNotification, ClickAction
from hms_push.messaging.enums import (
    AndroidUrgency,
    ClickActionType,
    NotificationPriority,
    TextDirection,
    Visibility,
)
from hms_push.messaging.message import Message, Notification, PushRequest
from hms_push.messaging.webpush import WebPushNotification

DEFAULT_TTL = timedelta(days=1)


def notification_request() -> PushRequest:
    """A notification request with placeholder content and no target yet."""
    return PushRequest(
        message=Message(
            data="This is a transparent message data",
            notification=Notification(
                title="notification title",
                body="This is a notification message body",
            ),
        ),
    )


def default_click_action() -> ClickAction:
    return ClickAction(type=ClickActionType.INTENT_OR_ACTION, action="Action")


def default_android_config() -> AndroidConfig:
    return AndroidConfig(urgency=AndroidUrgency.NORMAL, ttl=DEFAULT_TTL)


def default_android_notification() -> AndroidNotification:
    return AndroidNotification(
        default_sound=True,
        importance=NotificationPriority.NORMAL,
        click_action=default_click_action(),
        use_default_vibrate=True,
        use_default_light=True,
        visibility=Visibility.PRIVATE,
        foreground_show=True,
        auto_cancel=True,
    )


def default_web_notification() -> WebPushNotification:
    return WebPushNotification(dir=TextDirection.AUTO, silent=True, timestamp=int(time.time()))


def android_notification_request(tokens: list[str]) -> PushRequest:
    """A valid Android notification request addressed to *tokens*."""
    request = notification_request()
    request.message.token = list(tokens)
    request.message.android = default_android_config()
    request.message.android.notification = default_android_notification()
    request.message.android.notification.body = "Notification body text"
    return request


__all__ = [
    "DEFAULT_TTL",
    "android_notification_request",
    "default_android_config",
    "default_android_notification",
    "default_click_action",
    "default_web_notification",
    "notification_request",
]
