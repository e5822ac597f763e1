"""Domain errors — search parameters the search state cannot work with."""

from __future__ import annotations

from search_state.kernel.errors.base import SearchStateError


class DomainError(SearchStateError):
    """Raised when a search-state rule is violated."""

    default_code = "domain_error"


class ParameterError(DomainError):
    """Request parameters arrived in a shape that cannot become a mapping.

    Raised for caller bugs (an ``int``, a bare query string, pairs of the
    wrong length), never for malformed but repairable user input.
    """

    default_code = "invalid_parameters"

    def __init__(self, received: object) -> None:
        self.received_type = type(received).__name__
        super().__init__(
            f"Cannot build search parameters from {self.received_type}",
            detail={"type": self.received_type},
        )


class UnknownFacetFieldError(DomainError):
    """A facet field was referenced that the search configuration does not define."""

    default_code = "unknown_facet_field"

    def __init__(self, field: str) -> None:
        super().__init__(f"Facet field '{field}' is not configured", detail={"field": field})
        self.field = field


__all__ = ["DomainError", "ParameterError", "UnknownFacetFieldError"]
