"""Config settings – 12-factor env-based configuration."""
from mdc_transaction.config.settings.base import Settings
from mdc_transaction.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from mdc_transaction.config.settings.mdc import MDCSettings

__all__ = ["EnvSettingsLoader", "MDCSettings", "Settings", "SettingsLoader"]
