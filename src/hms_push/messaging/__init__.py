"""Messaging – push message model, validation, wire encoding and responses."""
from hms_push.messaging.android import (
    AndroidConfig,
    AndroidNotification,
    BadgeNotification,
    ClickAction,
    Color,
    LightSettings,
)
from hms_push.messaging.defaults import (
    android_notification_request,
    default_android_config,
    default_android_notification,
    default_web_notification,
    notification_request,
)
from hms_push.messaging.encoding import MAX_TTL_SECONDS, dumps, encode, encode_request, format_duration
from hms_push.messaging.enums import (
    AndroidUrgency,
    ClickActionType,
    FastAppState,
    NotificationBarStyle,
    NotificationPriority,
    TextDirection,
    Visibility,
    WebUrgency,
)
from hms_push.messaging.message import Message, Notification, PushRequest
from hms_push.messaging.response import TOKEN_FAILURE_CODES, PushResponse, ResponseCode
from hms_push.messaging.validation import check_message, validate_message
from hms_push.messaging.webpush import (
    HmsWebPushOption,
    WebPushAction,
    WebPushConfig,
    WebPushHeaders,
    WebPushNotification,
)

__all__ = [
    "MAX_TTL_SECONDS",
    "TOKEN_FAILURE_CODES",
    "AndroidConfig",
    "AndroidNotification",
    "AndroidUrgency",
    "BadgeNotification",
    "ClickAction",
    "ClickActionType",
    "Color",
    "FastAppState",
    "HmsWebPushOption",
    "LightSettings",
    "Message",
    "Notification",
    "NotificationBarStyle",
    "NotificationPriority",
    "PushRequest",
    "PushResponse",
    "ResponseCode",
    "TextDirection",
    "Visibility",
    "WebPushAction",
    "WebPushConfig",
    "WebPushHeaders",
    "WebPushNotification",
    "WebUrgency",
    "android_notification_request",
    "check_message",
    "default_android_config",
    "default_android_notification",
    "default_web_notification",
    "dumps",
    "encode",
    "encode_request",
    "format_duration",
    "notification_request",
    "validate_message",
]
