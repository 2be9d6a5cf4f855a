"""Messaging – wire encoding of a push request.

Each model type maps to a table of ``_Field`` rows ``(wire name, attribute,
encoder)``. Unset values (``None``, empty strings and collections, ``False``)
are left out, except rows marked ``always``. Durations become ``"<n>S"``
strings capped at fifteen days; enum fields accept members or raw values and
reject anything else.
"""
from __future__ import annotations

import json
import math
from collections.abc import Callable
from datetime import timedelta
from enum import Enum
from typing import Any, NamedTuple

from hms_push.errors import SerializationError
from hms_push.messaging.android import (
    AndroidConfig,
    AndroidNotification,
    BadgeNotification,
    ClickAction,
    Color,
    Duration,
    LightSettings,
)
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
from hms_push.messaging.message import Message, Notification, PushRequest
from hms_push.messaging.webpush import (
    HmsWebPushOption,
    WebPushAction,
    WebPushConfig,
    WebPushHeaders,
    WebPushNotification,
)

MAX_TTL_SECONDS = 15 * 24 * 60 * 60

Encoder = Callable[[Any], Any]


class _Field(NamedTuple):
    wire: str
    attr: str
    encode: Encoder = lambda value: value
    always: bool = False


def format_duration(value: Duration) -> str:
    """Render a duration as ``"<seconds>S"``, capped at :data:`MAX_TTL_SECONDS`."""
    seconds = value.total_seconds() if isinstance(value, timedelta) else float(value)
    if not math.isfinite(seconds) or seconds < 0:
        raise SerializationError(f"duration must be finite and non-negative: {seconds}", payload_type="duration")
    seconds = min(seconds, MAX_TTL_SECONDS)
    if seconds.is_integer():
        return f"{int(seconds)}S"
    return f"{seconds:.9f}".rstrip("0").rstrip(".") + "S"


def _enum(enum_cls: type[Enum], error: str) -> Encoder:
    def encode(value: Any) -> Any:
        member = coerce_enum(value, enum_cls)
        if member is None:
            raise SerializationError(f"{error}: {value!r}", payload_type=enum_cls.__name__)
        return member.value

    return encode


def _nested(table: tuple[_Field, ...]) -> Encoder:
    return lambda value: _encode(value, table)


def _each(encode: Encoder) -> Encoder:
    return lambda values: [encode(v) for v in values]


def _is_unset(value: Any) -> bool:
    if value is None or value is False:
        return True
    return isinstance(value, (str, list, tuple, dict)) and not value


def _encode(obj: Any, table: tuple[_Field, ...]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for row in table:
        value = getattr(obj, row.attr)
        if not row.always and _is_unset(value):
            continue
        out[row.wire] = row.encode(value)
    return out


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------

_CLICK_ACTION = (
    _Field("type", "type", _enum(ClickActionType, "invalid click action type"), always=True),
    _Field("intent", "intent"),
    _Field("action", "action"),
    _Field("url", "url"),
    _Field("rich_resource", "rich_resource"),
)

_BADGE = (
    _Field("add_num", "add_num"),
    _Field("set_num", "set_num"),
    _Field("class", "class_name"),
)

_COLOR = (
    _Field("alpha", "alpha", float, always=True),
    _Field("red", "red", float, always=True),
    _Field("green", "green", float, always=True),
    _Field("blue", "blue", float, always=True),
)

_LIGHT_SETTINGS = (
    _Field("color", "color", _nested(_COLOR), always=True),
    _Field("light_on_duration", "light_on_duration", format_duration),
    _Field("light_off_duration", "light_off_duration", format_duration),
)

_ANDROID_NOTIFICATION = (
    _Field("title", "title"),
    _Field("body", "body"),
    _Field("icon", "icon"),
    _Field("color", "color"),
    _Field("sound", "sound"),
    _Field("default_sound", "default_sound"),
    _Field("tag", "tag"),
    _Field("click_action", "click_action", _nested(_CLICK_ACTION)),
    _Field("body_loc_key", "body_loc_key"),
    _Field("body_loc_args", "body_loc_args", list),
    _Field("title_loc_key", "title_loc_key"),
    _Field("title_loc_args", "title_loc_args", list),
    _Field("multi_lang_key", "multi_lang_key", dict),
    _Field("channel_id", "channel_id"),
    _Field("notify_summary", "notify_summary"),
    _Field("image", "image"),
    _Field("style", "style", _enum(NotificationBarStyle, "invalid notification bar style type")),
    _Field("big_title", "big_title"),
    _Field("big_body", "big_body"),
    _Field("auto_clear", "auto_clear"),
    _Field("notify_id", "notify_id"),
    _Field("group", "group"),
    _Field("badge", "badge", _nested(_BADGE)),
    _Field("ticker", "ticker"),
    _Field("auto_cancel", "auto_cancel"),
    _Field("when", "when"),
    _Field("importance", "importance", _enum(NotificationPriority, "invalid notification priority type")),
    _Field("use_default_vibrate", "use_default_vibrate"),
    _Field("use_default_light", "use_default_light"),
    _Field("vibrate_config", "vibrate_config", _each(format_duration)),
    _Field("visibility", "visibility", _enum(Visibility, "invalid visibility type")),
    _Field("light_settings", "light_settings", _nested(_LIGHT_SETTINGS)),
    _Field("foreground_show", "foreground_show"),
)

_ANDROID_CONFIG = (
    _Field("collapse_key", "collapse_key"),
    _Field("urgency", "urgency", _enum(AndroidUrgency, "invalid delivery priority type")),
    _Field("category", "category"),
    _Field("ttl", "ttl", format_duration),
    _Field("bi_tag", "bi_tag"),
    _Field("fast_app_target", "fast_app_target", _enum(FastAppState, "invalid fast app state type")),
    _Field("data", "data"),
    _Field("notification", "notification", _nested(_ANDROID_NOTIFICATION)),
)

_WEB_HEADERS = (
    _Field("ttl", "ttl", format_duration),
    _Field("topics", "topic"),
    _Field("urgency", "urgency", _enum(WebUrgency, "invalid urgency type")),
)

_WEB_ACTION = (
    _Field("action", "action"),
    _Field("icon", "icon"),
    _Field("title", "title"),
)

_WEB_NOTIFICATION = (
    _Field("title", "title"),
    _Field("body", "body"),
    _Field("icon", "icon"),
    _Field("image", "image"),
    _Field("lang", "lang"),
    _Field("tag", "tag"),
    _Field("badge", "badge"),
    _Field("dir", "dir", _enum(TextDirection, "invalid text direction type")),
    _Field("vibrate", "vibrate", list),
    _Field("renotify", "renotify"),
    _Field("require_interaction", "require_interaction"),
    _Field("silent", "silent"),
    _Field("timestamp", "timestamp"),
    _Field("actions", "actions", _each(_nested(_WEB_ACTION))),
)

_WEB_OPTIONS = (_Field("link", "link"),)

_WEBPUSH = (
    _Field("headers", "headers", _nested(_WEB_HEADERS)),
    _Field("notification", "notification", _nested(_WEB_NOTIFICATION)),
    _Field("hms_options", "hms_options", _nested(_WEB_OPTIONS)),
)

_NOTIFICATION = (
    _Field("title", "title"),
    _Field("body", "body"),
    _Field("image", "image"),
)

_MESSAGE = (
    _Field("data", "data"),
    _Field("notification", "notification", _nested(_NOTIFICATION)),
    _Field("android", "android", _nested(_ANDROID_CONFIG)),
    _Field("apns", "apns", dict),
    _Field("webpush", "webpush", _nested(_WEBPUSH)),
    _Field("token", "token", list),
    _Field("topic", "topic"),
    _Field("condition", "condition"),
)

_REQUEST = (
    _Field("validate_only", "validate_only", bool, always=True),
    _Field("message", "message", _nested(_MESSAGE), always=True),
)

_TABLES: dict[type, tuple[_Field, ...]] = {
    PushRequest: _REQUEST,
    Message: _MESSAGE,
    Notification: _NOTIFICATION,
    AndroidConfig: _ANDROID_CONFIG,
    AndroidNotification: _ANDROID_NOTIFICATION,
    ClickAction: _CLICK_ACTION,
    BadgeNotification: _BADGE,
    LightSettings: _LIGHT_SETTINGS,
    Color: _COLOR,
    WebPushConfig: _WEBPUSH,
    WebPushHeaders: _WEB_HEADERS,
    WebPushNotification: _WEB_NOTIFICATION,
    WebPushAction: _WEB_ACTION,
    HmsWebPushOption: _WEB_OPTIONS,
}


def encode(obj: Any) -> dict[str, Any]:
    """Encode any message model to its wire ``dict``."""
    table = _TABLES.get(type(obj))
    if table is None:
        raise SerializationError(f"no wire encoding for {type(obj).__name__}", payload_type=type(obj).__name__)
    return _encode(obj, table)


def encode_request(request: PushRequest) -> dict[str, Any]:
    return _encode(request, _REQUEST)


def dumps(request: PushRequest) -> bytes:
    """Serialise *request* to the UTF-8 JSON body of a ``messages:send`` call."""
    return json.dumps(encode_request(request), ensure_ascii=False, separators=(",", ":")).encode("utf-8")


__all__ = ["MAX_TTL_SECONDS", "dumps", "encode", "encode_request", "format_duration"]
