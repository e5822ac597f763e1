"""Application parameters – sanitizing policy for forwarded parameters."""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Protocol, runtime_checkable

from search_state.config.settings import DEFAULT_SANITIZE_EXCLUDE_KEYS, SearchStateSettings

DEFAULT_EXCLUDED_KEYS = frozenset(DEFAULT_SANITIZE_EXCLUDE_KEYS)


@runtime_checkable
class Sanitizer(Protocol):
    """Filter a parameter map down to the keys that may be forwarded.

    Implementations must return a new dict and leave their input untouched.
    """

    def __call__(self, params: Mapping[str, Any]) -> dict[str, Any]: ...


class ParameterSanitizer:
    """Default policy: drop ``None`` values, deny-listed keys and, when an
    allow list is configured, everything not on it."""

    def __init__(
        self,
        exclude_keys: Iterable[str] = DEFAULT_EXCLUDED_KEYS,
        allow_keys: Iterable[str] | None = None,
    ) -> None:
        self._exclude = frozenset(exclude_keys)
        self._allow = frozenset(allow_keys) if allow_keys else None

    @classmethod
    def from_settings(cls, settings: SearchStateSettings) -> "ParameterSanitizer":
        return cls(
            exclude_keys=settings.sanitize_exclude_keys,
            allow_keys=settings.sanitize_allow_keys or None,
        )

    def _keep(self, key: str, value: Any) -> bool:
        if value is None or key in self._exclude:
            return False
        return self._allow is None or key in self._allow

    def __call__(self, params: Mapping[str, Any]) -> dict[str, Any]:
        return {k: v for k, v in params.items() if self._keep(k, v)}

    def __repr__(self) -> str:
        allow = sorted(self._allow) if self._allow is not None else None
        return f"ParameterSanitizer(exclude_keys={sorted(self._exclude)!r}, allow_keys={allow!r})"


__all__ = ["DEFAULT_EXCLUDED_KEYS", "ParameterSanitizer", "Sanitizer"]
