"""Config – 12-factor settings and loaders."""

from mobilepay.config.settings import (
    AppSwitchSettings,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    MobilePaySettings,
    Settings,
    SettingsLoader,
)
from mobilepay.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "AppSwitchSettings",
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "MobilePaySettings",
    "Settings",
    "SettingsLoader",
]
