"""Config settings – SettingsFactory."""
from __future__ import annotations

import dataclasses
from typing import Any, Sequence, TypeVar

from storefront_security.config.settings.base import Settings
from storefront_security.config.settings.loaders import SettingsLoader
from storefront_security.config.validation.errors import (
    ConfigurationError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)


class SettingsFactory:
    """Merge outputs from multiple loaders, apply overrides, and construct
    a settings dataclass in one step.

    Loaders are applied in order; later loaders override earlier ones for
    overlapping fields.  *overrides* (if provided) take the highest priority.
    A loader that fails with :class:`ConfigurationError` is skipped so that the
    remaining sources may still contribute values; required fields are then
    checked on the merged result.
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> T:
        """
        Parameters
        ----------
        settings_cls:
            The :class:`~storefront_security.config.settings.base.Settings`
            subclass to construct.
        loaders:
            Ordered sequence of loaders.  Later loaders win on field conflicts.
        overrides:
            Explicit key-value pairs applied after all loaders, useful for
            tests and local development.

        Raises
        ------
        MissingRequiredSettingError
            When a required field (no default) is absent after all sources
            have been merged.
        ConfigurationError
            On any other construction failure, including empty secrets.
        """
        merged: dict[str, Any] = {}

        for loader in loaders or []:
            try:
                instance = loader.load(settings_cls)
            except ConfigurationError:
                continue
            for field in dataclasses.fields(instance):  # type: ignore[arg-type]
                merged[field.name] = getattr(instance, field.name)

        if overrides:
            merged.update(overrides)

        for field in dataclasses.fields(settings_cls):  # type: ignore[arg-type]
            if field.name in merged:
                continue
            if (
                field.default is dataclasses.MISSING
                and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
            ):
                raise MissingRequiredSettingError(field.name)

        try:
            return settings_cls(**merged)
        except ConfigurationError:
            raise
        except Exception as exc:
            raise ConfigurationError(f"Failed to construct {settings_cls.__name__}: {exc}") from exc


__all__ = ["SettingsFactory"]
