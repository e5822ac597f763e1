"""Application facets – facet field configuration and the search configuration."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any, Protocol, runtime_checkable

from search_state.config.settings import DEFAULT_FACET_PAGINATOR_REQUEST_KEYS, SearchStateSettings
from search_state.kernel.errors import UnknownFacetFieldError


class Controller(Enum):
    """Placeholder controller values for the document show route."""

    CURRENT = "current"


@dataclasses.dataclass(frozen=True)
class FacetFieldConfig:
    """How one facet field appears in request parameters.

    ``key`` is the name used under ``f`` and defaults to ``field``; a
    ``single`` field holds at most one selected value.
    """

    field: str
    key: str = ""
    single: bool = False
    label: str | None = None

    def __post_init__(self) -> None:
        if not self.key:
            object.__setattr__(self, "key", self.field)


@runtime_checkable
class FacetConfigurationLookup(Protocol):
    def facet_configuration_for_field(self, field: str) -> FacetFieldConfig: ...


def _default_show_route() -> dict[str, Any]:
    return {"controller": Controller.CURRENT}


@dataclasses.dataclass
class SearchConfiguration:
    """Facet fields, redirect keys and document routing for one search view."""

    facet_fields: dict[str, FacetFieldConfig] = dataclasses.field(default_factory=dict)
    facet_paginator_request_keys: tuple[str, ...] = DEFAULT_FACET_PAGINATOR_REQUEST_KEYS
    show_route: dict[str, Any] | None = dataclasses.field(default_factory=_default_show_route)
    document_class: type | None = None

    @classmethod
    def from_settings(cls, settings: SearchStateSettings, **kwargs: Any) -> "SearchConfiguration":
        kwargs.setdefault(
            "facet_paginator_request_keys", tuple(settings.facet_paginator_request_keys)
        )
        return cls(**kwargs)

    def add_facet_field(
        self,
        field: str,
        *,
        key: str | None = None,
        single: bool = False,
        label: str | None = None,
    ) -> FacetFieldConfig:
        config = FacetFieldConfig(field=field, key=key or field, single=single, label=label)
        self.facet_fields[field] = config
        return config

    def facet_configuration_for_field(self, field: str) -> FacetFieldConfig:
        """Return the configuration for *field*, matched by name, then by key.

        Raises:
            UnknownFacetFieldError: no facet is configured under *field*.
        """
        config = self.facet_fields.get(field)
        if config is not None:
            return config
        for candidate in self.facet_fields.values():
            if candidate.key == field:
                return candidate
        raise UnknownFacetFieldError(field)

    def facet_paginator_keys(self) -> tuple[str, ...]:
        return tuple(self.facet_paginator_request_keys)


__all__ = [
    "Controller",
    "FacetConfigurationLookup",
    "FacetFieldConfig",
    "SearchConfiguration",
]
