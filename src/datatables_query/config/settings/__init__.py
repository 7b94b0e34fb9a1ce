"""Config settings – env-based configuration."""
from datatables_query.config.settings.base import DatatablesSettings, Settings
from datatables_query.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["DatatablesSettings", "EnvSettingsLoader", "Settings", "SettingsLoader"]
