"""Config – 12-factor settings and the worker context handle."""

from actiongate.config.context import Context, ContextProvider, SettingsContextProvider
from actiongate.config.settings import (
    DispatchSettings,
    EnvSettingsLoader,
    MappingSettingsLoader,
    Settings,
    SettingsFactory,
    SettingsLoader,
)
from actiongate.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "Context",
    "ContextProvider",
    "DispatchSettings",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MappingSettingsLoader",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsContextProvider",
    "SettingsFactory",
    "SettingsLoader",
]
