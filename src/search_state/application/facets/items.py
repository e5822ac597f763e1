"""Application facets – facet items and their resolution against a configuration."""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from search_state.application.facets.config import FacetConfigurationLookup, FacetFieldConfig


@dataclass(frozen=True)
class FacetItem:
    """A selectable facet value.

    ``field`` overrides the field the item is added under; ``fq`` lists
    further ``(field, value)`` constraints selected together with it (pivot
    facets, for instance).  Anything that is not a ``FacetItem`` is treated
    as a bare value.
    """

    value: Any
    field: str | None = None
    fq: Sequence[tuple[str, Any]] | Mapping[str, Any] = ()

    def pairs(self) -> list[tuple[str, Any]]:
        if isinstance(self.fq, Mapping):
            return list(self.fq.items())
        return [(f, v) for f, v in self.fq]


def facet_value(item: Any) -> Any:
    return item.value if isinstance(item, FacetItem) else item


def resolve_facet_item(
    field: str, item: Any, lookup: FacetConfigurationLookup
) -> tuple[FacetFieldConfig, Any]:
    """Return the field configuration and the value *item* stands for."""
    if isinstance(item, FacetItem) and item.field is not None:
        field = item.field
    return lookup.facet_configuration_for_field(field), facet_value(item)


__all__ = ["FacetItem", "facet_value", "resolve_facet_item"]
