"""Config – 12-factor settings and loaders."""

from relaylog.config.settings import EnvSettingsLoader, RelaySettings, Settings, SettingsLoader
from relaylog.config.validation import (
    ConfigurationError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigurationError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "RelaySettings",
    "Settings",
    "SettingsLoader",
]
