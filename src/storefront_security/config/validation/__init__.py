"""Config validation errors."""
from storefront_security.config.validation.errors import (
    ConfigurationError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = ["ConfigurationError", "InvalidSettingValueError", "MissingRequiredSettingError"]
