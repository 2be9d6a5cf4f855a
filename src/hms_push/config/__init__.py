"""Config – 12-factor settings and loaders."""

from hms_push.config.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from hms_push.config.settings import AUTH_URL, PUSH_URL_TEMPLATE, PushSettings

__all__ = [
    "AUTH_URL",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "PUSH_URL_TEMPLATE",
    "PushSettings",
    "SettingsLoader",
]
