"""Config – 12-factor settings, loaders, and configuration errors."""

from storefront_security.config.settings import (
    EnvSettingsLoader,
    SecuritySettings,
    Settings,
    SettingsFactory,
    SettingsLoader,
)
from storefront_security.config.validation import (
    ConfigurationError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigurationError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "SecuritySettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
