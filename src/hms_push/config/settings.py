"""Config settings – PushSettings for the HUAWEI Push Kit client."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from hms_push.errors import InvalidSettingValueError, MissingRequiredSettingError

AUTH_URL = "https://oauth-login.cloud.huawei.com/oauth2/v3/token"
PUSH_URL_TEMPLATE = "https://api.push.hicloud.com/v1/{app_id}/messages:send"

DEFAULT_RETRY_COUNT = 5
DEFAULT_RETRY_INTERVAL = 0.0


@dataclasses.dataclass
class PushSettings:
    """Client configuration; environment keys are ``HMS_PUSH_<FIELD>``."""

    _prefix: ClassVar[str] = "HMS_PUSH"

    app_id: str
    app_secret: str
    max_retry_times: int = DEFAULT_RETRY_COUNT
    retry_interval: float = DEFAULT_RETRY_INTERVAL  # seconds between attempts
    proxy_url: str = ""
    verify_tls: bool = True
    request_timeout: float = 10.0
    token_request_timeout: float = 3.0
    token_refresh_interval: float = 1800.0
    token_retry_delay: float = 10.0
    auth_url: str = AUTH_URL
    push_url_template: str = PUSH_URL_TEMPLATE

    def __post_init__(self) -> None:
        if not self.app_id:
            raise MissingRequiredSettingError("app_id")
        if not self.app_secret:
            raise MissingRequiredSettingError("app_secret")
        if self.max_retry_times < 1:
            raise InvalidSettingValueError("max_retry_times", self.max_retry_times, "must be >= 1")
        if self.retry_interval < 0:
            raise InvalidSettingValueError("retry_interval", self.retry_interval, "must be >= 0")
        for name in ("request_timeout", "token_request_timeout", "token_refresh_interval"):
            value = getattr(self, name)
            if value <= 0:
                raise InvalidSettingValueError(name, value, "must be > 0")
        if self.token_retry_delay < 0:
            raise InvalidSettingValueError("token_retry_delay", self.token_retry_delay, "must be >= 0")
        if "{app_id}" not in self.push_url_template:
            raise InvalidSettingValueError(
                "push_url_template", self.push_url_template, "must contain '{app_id}'"
            )

    @property
    def push_url(self) -> str:
        return self.push_url_template.format(app_id=self.app_id)

    def __repr__(self) -> str:
        return f"PushSettings(app_id={self.app_id!r}, app_secret='***', auth_url={self.auth_url!r})"


__all__ = ["AUTH_URL", "DEFAULT_RETRY_COUNT", "DEFAULT_RETRY_INTERVAL", "PUSH_URL_TEMPLATE", "PushSettings"]
