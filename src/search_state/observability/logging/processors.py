"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import structlog


class ParamsRedactor:
    """structlog processor that hides the values of selected parameter keys.

    Search parameters are logged as nested dicts (``params={"q": ..., "f": {...}}``),
    so the walk recurses into mappings and lists.  Key matching is
    case-insensitive.

    Usage::

        structlog.configure(processors=[ParamsRedactor({"q"}), ...])
    """

    REDACTED = "[REDACTED]"

    def __init__(self, keys: Iterable[str]) -> None:
        self._keys = frozenset(k.lower() for k in keys)

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        return {k: self._redact(k, v) for k, v in event_dict.items()}

    def _redact(self, key: Any, value: Any) -> Any:
        if isinstance(key, str) and key.lower() in self._keys:
            return self.REDACTED
        if isinstance(value, Mapping):
            return {k: self._redact(k, v) for k, v in value.items()}
        if isinstance(value, list):
            return [self._redact(None, v) for v in value]
        return value


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["ParamsRedactor", "get_logger"]
