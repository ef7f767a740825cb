"""Config – settings and configuration errors."""
from mdc_transaction.config.settings import EnvSettingsLoader, MDCSettings, Settings, SettingsLoader
from mdc_transaction.kernel.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MDCSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
