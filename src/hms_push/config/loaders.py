"""Config – EnvSettingsLoader, DotenvSettingsLoader.

Each field of a settings dataclass maps to ``<_prefix>_<FIELD>`` in the
environment, e.g. ``HMS_PUSH_APP_SECRET`` or ``HMS_PUSH_MAX_RETRY_TIMES``.
"""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, TypeVar

from dotenv import load_dotenv

from hms_push.config.settings import PushSettings
from hms_push.errors import ConfigError, MissingRequiredSettingError

T = TypeVar("T")

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off", ""})


class SettingsLoader(abc.ABC):
    """Port: build a settings dataclass from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T] = PushSettings) -> T: ...  # type: ignore[assignment]


class EnvSettingsLoader(SettingsLoader):
    """Read settings from OS environment variables."""

    def load(self, settings_class: type[T] = PushSettings) -> T:  # type: ignore[assignment]
        if not dataclasses.is_dataclass(settings_class):
            raise ConfigError(f"{settings_class!r} is not a settings dataclass")
        prefix = getattr(settings_class, "_prefix", "")
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):
            env_key = f"{prefix}_{field.name}".upper().lstrip("_")
            raw = os.environ.get(env_key)
            if raw is None:
                if field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING:
                    raise MissingRequiredSettingError(env_key)
                continue
            kwargs[field.name] = _coerce(env_key, raw.strip(), field.type)

        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Failed to load {settings_class.__name__}: {exc}", cause=exc) from exc


def _coerce(env_key: str, value: str, type_hint: Any) -> Any:
    # string annotations under ``from __future__ import annotations``
    name = type_hint if isinstance(type_hint, str) else getattr(type_hint, "__name__", "")
    if name == "bool":
        lowered = value.lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
        raise ConfigError(f"{env_key}={value!r} is not a boolean", detail={"setting": env_key})
    try:
        if name == "int":
            return int(value)
        if name == "float":
            return float(value)
    except ValueError as exc:
        raise ConfigError(f"{env_key}={value!r} is not a {name}", detail={"setting": env_key}, cause=exc) from exc
    return value


class DotenvSettingsLoader(SettingsLoader):
    """Load a ``.env`` file into the environment, then read it like :class:`EnvSettingsLoader`.

    Variables already set in the process win unless ``override`` is true.
    """

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[T] = PushSettings) -> T:  # type: ignore[assignment]
        load_dotenv(self._env_file, override=self._override)
        return EnvSettingsLoader().load(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader"]
