"""Config – 12-factor settings and loaders."""

from mp_query.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    QuerySettings,
    Settings,
    SettingsLoader,
)
from mp_query.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "QuerySettings",
    "Settings",
    "SettingsLoader",
]
