"""Application state – SearchState.

A ``SearchState`` wraps the canonical parameters of one request (``q``, ``f``,
``page``, ``per_page``, ``sort`` and whatever else the application passes
along) and derives new parameter sets for follow-up links.  The wrapped map
is never mutated; every derived map is a fresh copy down to the per-field
facet lists, so a derived link can be edited without touching the state it
came from (or a copy of it stored in the session).
"""
from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from search_state.application.facets import (
    FacetConfigurationLookup,
    FacetFieldConfig,
    FacetItem,
    SearchConfiguration,
    resolve_facet_item,
)
from search_state.application.parameters import (
    RESET_KEYS,
    CanonicalParams,
    Param,
    ParameterSanitizer,
    Sanitizer,
    copy_params,
    facet_values,
    normalize_params,
)
from search_state.application.state.routing import url_for_document
from search_state.kernel.errors import UnknownFacetFieldError
from search_state.observability.logging import get_logger

logger = get_logger(__name__)


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if hasattr(value, "__len__"):
        return len(value) == 0
    return False


def _is_set(value: Any) -> bool:
    return value is not None and value is not False


def _facet_map(params: Mapping[str, Any]) -> dict[str, Any]:
    facets = params.get(Param.F)
    return dict(facets) if isinstance(facets, Mapping) else {}


class SearchState:
    """Immutable search parameters plus the derivations used to build links.

    Args:
        params: Untrusted request parameters; see :func:`normalize_params`.
        config: Facet fields, facet-paginator keys and the show route.
        sanitizer: Policy applied to every derived parameter map.
    """

    __slots__ = ("_params", "_config", "_sanitizer")

    normalize_params = staticmethod(normalize_params)

    def __init__(
        self,
        params: Any = None,
        config: SearchConfiguration | None = None,
        *,
        sanitizer: Sanitizer | None = None,
    ) -> None:
        self._params = normalize_params(params)
        self._config = config if config is not None else SearchConfiguration()
        self._sanitizer: Sanitizer = sanitizer if sanitizer is not None else ParameterSanitizer()

    @property
    def config(self) -> SearchConfiguration:
        return self._config

    @property
    def sanitizer(self) -> Sanitizer:
        return self._sanitizer

    @property
    def params(self) -> CanonicalParams:
        return self.to_dict()

    def to_dict(self) -> CanonicalParams:
        """Return a deep copy of the canonical parameter map."""
        return copy_params(self._params)

    to_map = to_dict

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SearchState):
            return NotImplemented
        return self._params == other._params

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SearchState({self._params!r})"

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def has_constraints(self) -> bool:
        return not (_is_blank(self.query_param) and _is_blank(self._params.get(Param.F)))

    @property
    def query_param(self) -> Any:
        return self._params.get(Param.Q)

    @property
    def filter_params(self) -> dict[str, Any]:
        facets = self._params.get(Param.F)
        if not isinstance(facets, Mapping):
            return {}
        return copy_params(facets)

    def has_facet(self, config: FacetFieldConfig, value: Any = None) -> bool:
        """Whether *config*'s field is constrained (to *value*, when given)."""
        facets = self._params.get(Param.F)
        facet = facets.get(config.key) if isinstance(facets, Mapping) else None
        if value is not None:
            return value in facet_values(facet)
        return not _is_blank(facet)

    # ------------------------------------------------------------------
    # Derived parameter maps
    # ------------------------------------------------------------------

    def reset(self, params: Any = None) -> "SearchState":
        """Start a fresh search from *params* alone, keeping configuration."""
        return SearchState(params, self._config, sanitizer=self._sanitizer)

    def reset_search_params(self) -> CanonicalParams:
        """Sanitized parameters without the keys tied to the current result set."""
        params = copy_params(self._sanitizer(self._params))
        for key in RESET_KEYS:
            params.pop(key, None)
        return params

    def remove_query_params(self) -> CanonicalParams:
        params = self.reset_search_params()
        params.pop(Param.Q, None)
        return params

    def _facet_config(self, field: str, item: Any) -> tuple[FacetFieldConfig, Any]:
        lookup: FacetConfigurationLookup = self._config
        try:
            return resolve_facet_item(field, item, lookup)
        except UnknownFacetFieldError as exc:
            logger.warning("search_state.unknown_facet_field", field=exc.field)
            raise

    def add_facet_param(self, params: CanonicalParams, field: str, item: Any) -> CanonicalParams:
        """Add *item* under ``params["f"]`` and return *params*.

        *params* is updated in place, but ``f`` and the field's value list are
        replaced by copies first, so anything they were shared with is left
        alone.  Single-valued fields keep only the newest value; other fields
        append, duplicates included.
        """
        facet_config, value = self._facet_config(field, item)
        url_field = facet_config.key

        facets = _facet_map(params)
        values = facet_values(facets.get(url_field))
        if facet_config.single and values:
            values = []
        values.append(value)
        facets[url_field] = values
        params[Param.F] = facets

        logger.debug("search_state.facet_added", field=url_field, value=value)
        return params

    def add_facet_params(self, field: str, item: Any) -> CanonicalParams:
        """Reset parameters with *item* (and any ``fq`` companions) added.

        Request keys are not removed; see :meth:`add_facet_params_and_redirect`.
        """
        params = self.reset_search_params()
        self.add_facet_param(params, field, item)
        if isinstance(item, FacetItem):
            for fq_field, fq_value in item.pairs():
                self.add_facet_param(params, fq_field, fq_value)
        return params

    def add_facet_params_and_redirect(self, field: str, item: Any) -> CanonicalParams:
        """Like :meth:`add_facet_params`, minus facet-paginator request keys.

        Used when a value is picked on a facet-detail page and the user goes
        back to the main search results.
        """
        params = self.add_facet_params(field, item)
        for key in self._config.facet_paginator_keys():
            params.pop(key, None)
        return params

    def remove_facet_params(self, field: str, item: Any) -> CanonicalParams:
        """Reset parameters with every occurrence of *item* removed.

        An emptied field is dropped from ``f``, and an emptied ``f`` from the
        result.
        """
        facet_config, value = self._facet_config(field, item)
        url_field = facet_config.key

        params = self.reset_search_params()
        facets = _facet_map(params)
        values = [v for v in facet_values(facets.get(url_field)) if v != value]
        if values:
            facets[url_field] = values
        else:
            facets.pop(url_field, None)
        if facets:
            params[Param.F] = facets
        else:
            params.pop(Param.F, None)

        logger.debug("search_state.facet_removed", field=url_field, value=value)
        return params

    def params_for_search(
        self,
        params_to_merge: Any = None,
        transform: Callable[[CanonicalParams], Any] | None = None,
    ) -> CanonicalParams:
        """Merge *params_to_merge* over the current parameters and sanitize.

        The merge is shallow: a given ``f`` replaces the current one.
        *transform* may edit the merged map in place before the page is
        reset (when ``per_page`` or ``sort`` changed) and the result
        sanitized; its return value is ignored.
        """
        params = self.to_dict()
        params.update(normalize_params(params_to_merge))

        if transform is not None:
            transform(params)

        if _is_set(params.get(Param.PAGE)) and (
            params.get(Param.PER_PAGE) != self._params.get(Param.PER_PAGE)
            or params.get(Param.SORT) != self._params.get(Param.SORT)
        ):
            logger.debug("search_state.page_reset", page=params[Param.PAGE])
            params[Param.PAGE] = 1

        return self._sanitizer(params)

    def url_for_document(self, doc: Any, options: Mapping[str, Any] | None = None) -> Any:
        """Route parameters for *doc*'s show page; see :func:`url_for_document`."""
        return url_for_document(
            doc,
            options,
            show_route=self._config.show_route,
            document_class=self._config.document_class,
            current_controller=self._params.get(Param.CONTROLLER),
        )


__all__ = ["SearchState"]
