"""Application-layer errors — cross-cutting concerns at use-case level."""

from __future__ import annotations

from search_state.kernel.errors.base import SearchStateError


class ApplicationError(SearchStateError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
