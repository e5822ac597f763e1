"""Config settings – Settings base class and SearchStateSettings."""
from __future__ import annotations

import dataclasses
import logging

from search_state.config.validation import InvalidSettingValueError

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

# Routing and form-submission keys that are never forwarded into links.
DEFAULT_SANITIZE_EXCLUDE_KEYS = ("action", "controller", "id", "commit", "utf8")
DEFAULT_FACET_PAGINATOR_REQUEST_KEYS = ("facet.page", "facet.sort", "facet.prefix")


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class SearchStateSettings(Settings):
    """Tunables for parameter sanitizing, facet redirects and logging.

    Read from ``SEARCH_STATE_*`` environment variables by
    :class:`~search_state.config.settings.loaders.EnvSettingsLoader`; list
    values are comma separated.
    """

    _prefix: dataclasses.ClassVar[str] = "SEARCH_STATE"

    sanitize_exclude_keys: list[str] = dataclasses.field(
        default_factory=lambda: list(DEFAULT_SANITIZE_EXCLUDE_KEYS)
    )
    sanitize_allow_keys: list[str] = dataclasses.field(default_factory=list)
    facet_paginator_request_keys: list[str] = dataclasses.field(
        default_factory=lambda: list(DEFAULT_FACET_PAGINATOR_REQUEST_KEYS)
    )
    log_level: str = "INFO"
    log_json: bool = True
    log_redact_keys: list[str] = dataclasses.field(default_factory=list)

    def _validate(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise InvalidSettingValueError("log_level", self.log_level, LOG_LEVELS)

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


__all__ = [
    "DEFAULT_FACET_PAGINATOR_REQUEST_KEYS",
    "DEFAULT_SANITIZE_EXCLUDE_KEYS",
    "LOG_LEVELS",
    "SearchStateSettings",
    "Settings",
]
