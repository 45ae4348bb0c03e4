"""Config settings – 12-factor env-based configuration."""
from scopelog.config.settings.base import Settings
from scopelog.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "Settings", "SettingsLoader"]
