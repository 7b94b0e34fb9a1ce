"""Config – 12-factor settings and loaders."""

from datatables_query.config.settings import DatatablesSettings, EnvSettingsLoader, Settings, SettingsLoader
from datatables_query.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DatatablesSettings",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
