"""Config settings – SettingsLoader port and EnvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, TypeVar

from storefront_security.config.settings.base import Settings
from storefront_security.config.validation import (
    ConfigurationError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Load settings from OS environment variables.

    A field ``jwt_secret`` on a class with ``_prefix = "STOREFRONT"`` is read
    from ``STOREFRONT_JWT_SECRET``.
    """

    def __init__(self, environ: dict[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        prefix = getattr(settings_class, "_prefix", "").upper()
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = f"{prefix}_{field.name}".upper().lstrip("_")
            raw = environ.get(env_key)

            if raw is None:
                if (
                    field.default is dataclasses.MISSING
                    and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
                ):
                    raise MissingRequiredSettingError(env_key)
                continue

            kwargs[field.name] = self._coerce(env_key, raw, field.type)

        try:
            return settings_class(**kwargs)
        except ConfigurationError:
            raise
        except Exception as exc:
            raise ConfigurationError(f"Failed to load settings: {exc}") from exc

    def _coerce(self, name: str, value: str, type_hint: Any) -> Any:  # noqa: PLR0911
        origin = getattr(type_hint, "__origin__", None)
        try:
            if type_hint is bool or type_hint == "bool":
                return value.lower() in ("1", "true", "yes", "on")
            if type_hint is int or type_hint == "int":
                return int(value)
            if type_hint is float or type_hint == "float":
                return float(value)
        except ValueError as exc:
            raise InvalidSettingValueError(name, f"expected {type_hint}") from exc
        if origin is list or (isinstance(type_hint, str) and type_hint.startswith("list")):
            return [v.strip() for v in value.split(",") if v.strip()]
        return value


__all__ = ["EnvSettingsLoader", "SettingsLoader"]
