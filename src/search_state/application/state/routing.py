"""Application state – show-route parameters for a document link."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from search_state.application.facets.config import Controller


@runtime_checkable
class SupportsToModel(Protocol):
    """Documents that expose the model object used for routing."""

    def to_model(self) -> Any: ...


def _routable(doc: Any, document_class: type | None) -> bool:
    if document_class is None or not isinstance(doc, SupportsToModel):
        return True
    return isinstance(doc.to_model(), document_class)


def url_for_document(
    doc: Any,
    options: Mapping[str, Any] | None = None,
    *,
    show_route: Mapping[str, Any] | None,
    document_class: type | None = None,
    current_controller: Any = None,
) -> Any:
    """Return route parameters for showing *doc*, or *doc* itself.

    The route is ``show_route`` merged with ``action="show"``, ``id=doc`` and
    *options* (later wins).  A ``Controller.CURRENT`` controller becomes
    *current_controller*.  With ``show_route=None`` (an empty route still counts
    as configured), or for a document whose model is not a ``document_class``,
    *doc* is returned unchanged so the caller can fall back to its own routing.
    """
    if show_route is None or not _routable(doc, document_class):
        return doc
    route: dict[str, Any] = {**show_route, "action": "show", "id": doc, **(options or {})}
    if route.get("controller") is Controller.CURRENT:
        route["controller"] = current_controller
    return route


__all__ = ["SupportsToModel", "url_for_document"]
