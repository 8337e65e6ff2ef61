"""Config settings – 12-factor env-based configuration."""
from mobilepay.config.settings.base import Settings
from mobilepay.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from mobilepay.config.settings.mobilepay import AppSwitchSettings, MobilePaySettings

__all__ = [
    "AppSwitchSettings",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "MobilePaySettings",
    "Settings",
    "SettingsLoader",
]
