"""Config validation errors."""
from relaylog.config.validation.errors import (
    ConfigurationError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = ["ConfigurationError", "InvalidSettingValueError", "MissingRequiredSettingError"]
