"""Config – 12-factor settings, loaders, and validation errors."""

from slugsmith.config.settings import EnvSettingsLoader, Settings, SettingsLoader, SlugSettings
from slugsmith.config.validation import (
    ConfigError,
    ConfigurationError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "ConfigurationError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
    "SlugSettings",
]
