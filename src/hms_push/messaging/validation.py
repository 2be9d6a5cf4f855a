"""Messaging – structural validation of a push message.

``check_message`` walks the message in a fixed order and returns the first
violated rule as a :class:`~hms_push.errors.ValidationError` (or ``None``).
The walk never mutates the message: an unset ``visibility`` or ``dir`` stays
unset, and an unknown value is rejected rather than replaced.
"""
from __future__ import annotations

import math
import re
from collections.abc import Callable, Iterable
from datetime import timedelta
from enum import Enum

from hms_push.errors import ValidationError
from hms_push.messaging.android import AndroidConfig, AndroidNotification, ClickAction, Duration, LightSettings
from hms_push.messaging.enums import (
    AndroidUrgency,
    ClickActionType,
    FastAppState,
    NotificationBarStyle,
    NotificationPriority,
    TextDirection,
    Visibility,
    WebUrgency,
    coerce_enum,
)
from hms_push.messaging.message import Message, PushRequest
from hms_push.messaging.webpush import WebPushConfig

COLOR_PATTERN = re.compile(r"^#[0-9a-fA-F]{6}$")
COLLAPSE_KEY_MIN = -1
COLLAPSE_KEY_MAX = 100
MAX_VIBRATE_ENTRIES = 10
MAX_VIBRATE_SECONDS = 60.0

Check = Callable[[], "ValidationError | None"]


def _violation(code: str, message: str, field: str) -> ValidationError:
    return ValidationError(message, code=code, field=field)


def _first(checks: Iterable[Check]) -> ValidationError | None:
    for check in checks:
        error = check()
        if error is not None:
            return error
    return None


def _seconds(value: Duration) -> float:
    if isinstance(value, timedelta):
        return value.total_seconds()
    return float(value)


def _negative_or_nan(value: Duration) -> bool:
    seconds = _seconds(value)
    return not math.isfinite(seconds) or seconds < 0


def _unknown(value: object, enum_cls: type[Enum]) -> bool:
    return value is not None and coerce_enum(value, enum_cls) is None


def check_message(request: PushRequest | Message) -> ValidationError | None:
    """Return the first structural violation in *request*, or ``None``."""
    message = request.message if isinstance(request, PushRequest) else request
    return _first((
        lambda: _check_target(message),
        lambda: _check_android(message.android),
        lambda: _check_webpush(message.webpush),
    ))


def validate_message(request: PushRequest | Message) -> None:
    """Raise the first violation found by :func:`check_message`."""
    error = check_message(request)
    if error is not None:
        raise error


# ---------------------------------------------------------------------------
# Target selector
# ---------------------------------------------------------------------------

def _check_target(message: Message) -> ValidationError | None:
    selected = sum((bool(message.token), bool(message.topic), bool(message.condition)))
    if selected != 1:
        return _violation(
            "invalid_target_selection",
            "token, topic or condition must be choice one",
            "message.token|topic|condition",
        )
    return None


# ---------------------------------------------------------------------------
# Android
# ---------------------------------------------------------------------------

def _check_android(config: AndroidConfig | None) -> ValidationError | None:
    if config is None:
        return None
    field = "message.android"

    if config.collapse_key is not None and not COLLAPSE_KEY_MIN <= config.collapse_key <= COLLAPSE_KEY_MAX:
        return _violation(
            "collapse_key_out_of_range",
            "collapse_key must be in interval [-1 - 100]",
            f"{field}.collapse_key",
        )
    if _unknown(config.urgency, AndroidUrgency):
        return _violation(
            "invalid_android_urgency",
            "delivery_priority must be 'HIGH' or 'NORMAL'",
            f"{field}.urgency",
        )
    if config.ttl is not None and _negative_or_nan(config.ttl):
        return _violation("invalid_ttl", "ttl must be a finite, non-negative duration", f"{field}.ttl")
    if _unknown(config.fast_app_target, FastAppState):
        return _violation(
            "invalid_fast_app_target",
            "fast_app_target must be 1 (develop) or 2 (product)",
            f"{field}.fast_app_target",
        )
    return _check_android_notification(config.notification)


def _check_android_notification(notification: AndroidNotification | None) -> ValidationError | None:
    if notification is None:
        return None
    field = "message.android.notification"
    return _first((
        lambda: _check_sound(notification, field),
        lambda: _check_style(notification, field),
        lambda: _check_importance(notification, field),
        lambda: _check_vibrate_config(notification.vibrate_config, f"{field}.vibrate_config"),
        lambda: _check_visibility(notification, field),
        lambda: _check_color(notification, field),
        lambda: _check_light_settings(notification.light_settings, f"{field}.light_settings"),
        lambda: _check_click_action(notification.click_action, f"{field}.click_action"),
    ))


def _check_sound(notification: AndroidNotification, field: str) -> ValidationError | None:
    if not notification.sound and not notification.default_sound:
        return _violation(
            "sound_empty",
            "sound must not be empty when default_sound is false",
            f"{field}.sound",
        )
    return None


def _check_style(notification: AndroidNotification, field: str) -> ValidationError | None:
    if notification.style is None:
        return None
    style = coerce_enum(notification.style, NotificationBarStyle)
    if style is None:
        return _violation("invalid_notification_bar_style", "invalid notification bar style type", f"{field}.style")
    if style is NotificationBarStyle.BIG_TEXT:
        if not notification.big_title:
            return _violation("big_title_empty", "big_title must not be empty when style is 1", f"{field}.big_title")
        if not notification.big_body:
            return _violation("big_body_empty", "big_body must not be empty when style is 1", f"{field}.big_body")
    return None


def _check_importance(notification: AndroidNotification, field: str) -> ValidationError | None:
    if _unknown(notification.importance, NotificationPriority):
        return _violation(
            "invalid_importance",
            "importance must be 'HIGH', 'NORMAL' or 'LOW'",
            f"{field}.importance",
        )
    return None


def _check_vibrate_config(timings: list[Duration], field: str) -> ValidationError | None:
    if len(timings) > MAX_VIBRATE_ENTRIES:
        return _violation("vibrate_config_overflow", "vibrate_timings can't be more than 10 elements", field)
    for timing in timings:
        if not 0 <= _seconds(timing) <= MAX_VIBRATE_SECONDS:
            return _violation("vibrate_config_duration", "vibrate_timings are more 60 seconds", field)
    return None


def _check_visibility(notification: AndroidNotification, field: str) -> ValidationError | None:
    if _unknown(notification.visibility, Visibility):
        return _violation(
            "invalid_visibility",
            "visibility must be VISIBILITY_UNSPECIFIED, PRIVATE, PUBLIC or SECRET",
            f"{field}.visibility",
        )
    return None


def _check_color(notification: AndroidNotification, field: str) -> ValidationError | None:
    if notification.color and not COLOR_PATTERN.match(notification.color):
        return _violation("invalid_color_format", "color must be in the form #RRGGBB", f"{field}.color")
    return None


def _check_light_settings(settings: LightSettings | None, field: str) -> ValidationError | None:
    if settings is None:
        return None
    if settings.color is None:
        return _violation("light_settings_color_missing", "light_settings.color can't be nil", f"{field}.color")
    for name in ("light_on_duration", "light_off_duration"):
        value = getattr(settings, name)
        if value is None or _negative_or_nan(value):
            return _violation(
                "light_settings_duration_invalid",
                f"light_settings.{name} is empty or malformed",
                f"{field}.{name}",
            )
    return None


def _check_click_action(action: ClickAction | None, field: str) -> ValidationError | None:
    if action is None:
        return _violation("click_action_missing", "click_action object must not be null", field)

    action_type = coerce_enum(action.type, ClickActionType)
    if action_type is ClickActionType.INTENT_OR_ACTION:
        if not action.intent and not action.action:
            return _violation(
                "intent_and_action_empty",
                "at least one of intent and action is not empty when type is 1",
                f"{field}.intent",
            )
    elif action_type is ClickActionType.URL:
        if not action.url:
            return _violation("click_action_url_empty", "url must not be empty when type is 2", f"{field}.url")
    elif action_type is ClickActionType.RICH_RESOURCE:
        if not action.rich_resource:
            return _violation(
                "rich_resource_empty",
                "rich_resource must not be empty when type is 4",
                f"{field}.rich_resource",
            )
    elif action_type is not ClickActionType.APP:
        return _violation(
            "invalid_click_action_type",
            "click_action type must be in the interval [1 - 4]",
            f"{field}.type",
        )
    return None


# ---------------------------------------------------------------------------
# Web push
# ---------------------------------------------------------------------------

def _check_webpush(config: WebPushConfig | None) -> ValidationError | None:
    if config is None:
        return None
    field = "message.webpush"

    headers = config.headers
    if headers is not None:
        if _unknown(headers.urgency, WebUrgency):
            return _violation(
                "invalid_web_urgency",
                "urgency must be very-low, low, normal or high",
                f"{field}.headers.urgency",
            )
        if headers.ttl is not None and _negative_or_nan(headers.ttl):
            return _violation("invalid_ttl", "ttl must be a finite, non-negative duration", f"{field}.headers.ttl")

    notification = config.notification
    if notification is None:
        return None
    for action in notification.actions:
        if not action.action:
            return _violation("web_action_empty", "web common action can't be empty", f"{field}.notification.actions")
    if _unknown(notification.dir, TextDirection):
        return _violation(
            "invalid_text_direction",
            "dir must be auto, ltr or rtl",
            f"{field}.notification.dir",
        )
    return None


__all__ = ["COLOR_PATTERN", "check_message", "validate_message"]
