"""Config settings – 12-factor env-based configuration."""
from slugsmith.config.settings.base import Settings
from slugsmith.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from slugsmith.config.settings.slugs import DEFAULT_MAX_ATTEMPTS, SlugSettings

__all__ = ["DEFAULT_MAX_ATTEMPTS", "EnvSettingsLoader", "Settings", "SettingsLoader", "SlugSettings"]
