"""Config settings – 12-factor env-based configuration."""
from relaylog.config.settings.base import Settings
from relaylog.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from relaylog.config.settings.relay import RelaySettings

__all__ = ["EnvSettingsLoader", "RelaySettings", "Settings", "SettingsLoader"]
