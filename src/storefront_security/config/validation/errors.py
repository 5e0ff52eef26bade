"""Config validation errors."""
from storefront_security.kernel.errors import ApplicationError


class ConfigurationError(ApplicationError):
    """Raised when configuration is invalid, missing or failed to load."""
    default_code = "configuration_error"


class MissingRequiredSettingError(ConfigurationError):
    """A required environment variable / setting is absent or empty."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Required setting '{setting_name}' is missing")
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigurationError):
    """A setting's value is present but semantically invalid."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, reason: str) -> None:
        # The offending value is never echoed: settings hold secrets.
        super().__init__(f"Setting '{setting_name}' is invalid: {reason}")
        self.setting_name = setting_name
        self.reason = reason


__all__ = ["ConfigurationError", "InvalidSettingValueError", "MissingRequiredSettingError"]
