"""Config settings – SettingsLoader port and EnvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
import types
from typing import Any, TypeVar, Union, get_args, get_origin

from relaylog.config.settings.base import Settings
from relaylog.config.validation import (
    ConfigurationError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)

_NONE_NAMES = ("None", "NoneType")


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Load settings from OS environment variables named ``<PREFIX>_<FIELD>``."""

    def load(self, settings_class: type[T]) -> T:
        prefix = getattr(settings_class, "_prefix", "").upper()
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = f"{prefix}_{field.name}".upper().lstrip("_")
            raw = os.environ.get(env_key)

            if raw is None:
                if (
                    field.default is dataclasses.MISSING
                    and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
                ):
                    raise MissingRequiredSettingError(env_key)
                continue

            try:
                kwargs[field.name] = self._coerce(raw, field.type)
            except ValueError as exc:
                raise InvalidSettingValueError(env_key, raw, str(exc)) from exc

        try:
            return settings_class(**kwargs)
        except ConfigurationError:
            raise
        except Exception as exc:
            raise ConfigurationError(f"Failed to load settings: {exc}") from exc

    def _coerce(self, value: str, type_hint: Any) -> Any:  # noqa: PLR0911
        type_hint, optional = _unwrap_optional(type_hint)
        if optional and value.strip() == "":
            return None
        origin = getattr(type_hint, "__origin__", None)
        if type_hint is bool or type_hint == "bool":
            return value.lower() in ("1", "true", "yes", "on")
        if type_hint is int or type_hint == "int":
            return int(value)
        if type_hint is float or type_hint == "float":
            return float(value)
        if origin is list or (isinstance(type_hint, str) and type_hint.startswith("list")):
            return [v.strip() for v in value.split(",") if v.strip()]
        return value


def _unwrap_optional(type_hint: Any) -> tuple[Any, bool]:
    """Strip ``None`` from ``X | None`` hints, real or stringified."""
    if isinstance(type_hint, str):
        parts = [p.strip() for p in type_hint.split("|")]
        rest = [p for p in parts if p not in _NONE_NAMES]
        if len(rest) == 1 and len(parts) > 1:
            return rest[0], True
        return type_hint, False
    if get_origin(type_hint) in (Union, types.UnionType):
        rest = [a for a in get_args(type_hint) if a is not type(None)]
        if len(rest) == 1:
            return rest[0], True
    return type_hint, False


__all__ = ["EnvSettingsLoader", "SettingsLoader"]
