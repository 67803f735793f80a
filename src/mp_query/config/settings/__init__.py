"""Config settings – env-based configuration for the query engine."""
from mp_query.config.settings.base import Settings
from mp_query.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from mp_query.config.settings.query import QuerySettings

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "QuerySettings", "Settings", "SettingsLoader"]
