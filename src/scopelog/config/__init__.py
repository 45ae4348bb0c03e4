"""Config – 12-factor settings and loaders."""

from scopelog.config.settings import EnvSettingsLoader, Settings, SettingsLoader
from scopelog.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
