"""Config – 12-factor settings and their validation errors."""

from search_state.config.settings import (
    EnvSettingsLoader,
    SearchStateSettings,
    Settings,
    SettingsLoader,
)
from search_state.config.validation import ConfigError, InvalidSettingValueError

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "SearchStateSettings",
    "Settings",
    "SettingsLoader",
]
