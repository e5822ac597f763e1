"""Config settings – 12-factor env-based configuration."""
from search_state.config.settings.base import (
    DEFAULT_FACET_PAGINATOR_REQUEST_KEYS,
    DEFAULT_SANITIZE_EXCLUDE_KEYS,
    LOG_LEVELS,
    SearchStateSettings,
    Settings,
)
from search_state.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = [
    "DEFAULT_FACET_PAGINATOR_REQUEST_KEYS",
    "DEFAULT_SANITIZE_EXCLUDE_KEYS",
    "EnvSettingsLoader",
    "LOG_LEVELS",
    "SearchStateSettings",
    "Settings",
    "SettingsLoader",
]
