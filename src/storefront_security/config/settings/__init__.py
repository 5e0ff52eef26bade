"""Config settings – 12-factor env-based configuration."""
from storefront_security.config.settings.base import Settings
from storefront_security.config.settings.factory import SettingsFactory
from storefront_security.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from storefront_security.config.settings.security import SecuritySettings

__all__ = ["EnvSettingsLoader", "SecuritySettings", "Settings", "SettingsFactory", "SettingsLoader"]
