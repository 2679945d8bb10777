"""Config settings – 12-factor env-based configuration."""
from actiongate.config.settings.base import DispatchSettings, Settings
from actiongate.config.settings.factory import SettingsFactory
from actiongate.config.settings.loaders import EnvSettingsLoader, MappingSettingsLoader, SettingsLoader

__all__ = [
    "DispatchSettings",
    "EnvSettingsLoader",
    "MappingSettingsLoader",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
