"""Application facets – field configuration and facet items."""
from search_state.application.facets.config import (
    Controller,
    FacetConfigurationLookup,
    FacetFieldConfig,
    SearchConfiguration,
)
from search_state.application.facets.items import FacetItem, facet_value, resolve_facet_item

__all__ = [
    "Controller",
    "FacetConfigurationLookup",
    "FacetFieldConfig",
    "FacetItem",
    "SearchConfiguration",
    "facet_value",
    "resolve_facet_item",
]
