"""Application parameters – coercion of untrusted input into a canonical map.

The canonical map is a plain ``dict[str, Any]`` whose nested containers are
all freshly allocated ``dict``/``list`` objects, so nothing reachable from it
is shared with the caller's input.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any, Protocol, runtime_checkable

from search_state.application.parameters.keys import Param
from search_state.kernel.errors import ParameterError
from search_state.observability.logging import get_logger

logger = get_logger(__name__)

CanonicalParams = dict[str, Any]


@runtime_checkable
class SupportsToDict(Protocol):
    """Request-parameter objects that can hand out a plain mapping."""

    def to_dict(self) -> Mapping[Any, Any]: ...


def normalize_key(key: Any) -> str:
    if isinstance(key, str):
        return key
    if isinstance(key, Enum):
        return normalize_key(key.value)
    if isinstance(key, bytes):
        return key.decode("utf-8")
    return str(key)


def copy_value(value: Any) -> Any:
    """Deep-copy the container parts of *value*; scalars are returned as is.

    Mappings become fresh dicts and every other non-string iterable (lists,
    tuples, sets) a fresh list.
    """
    if isinstance(value, Mapping):
        return {normalize_key(k): copy_value(v) for k, v in value.items()}
    if isinstance(value, (str, bytes)):
        return value
    if isinstance(value, Iterable):
        return [copy_value(v) for v in value]
    return value


def copy_params(params: Mapping[Any, Any]) -> CanonicalParams:
    return {normalize_key(k): copy_value(v) for k, v in params.items()}


def _to_mapping(untrusted: Any) -> Mapping[Any, Any]:
    # Imported lazily: the state module depends on this one.
    from search_state.application.state.search_state import SearchState

    if untrusted is None:
        return {}
    if isinstance(untrusted, SearchState):
        return untrusted.to_dict()
    if isinstance(untrusted, Mapping):
        return untrusted
    if isinstance(untrusted, SupportsToDict):
        return untrusted.to_dict()
    if isinstance(untrusted, Iterable) and not isinstance(untrusted, (str, bytes)):
        try:
            return dict(untrusted)
        except (TypeError, ValueError) as exc:
            raise ParameterError(untrusted) from exc
    raise ParameterError(untrusted)


def facet_values(collection: Any) -> list[Any]:
    """Coerce whatever sits at ``f[field]`` into a fresh list of values.

    Links are built as ``f[field][]=value``, but some PHP-based clients
    rewrite them as ``f[field][0]=value``, which arrives as a mapping.
    """
    if collection is None:
        return []
    if isinstance(collection, Mapping):
        return [copy_value(v) for v in collection.values()]
    if isinstance(collection, (str, bytes)):
        return [collection]
    if isinstance(collection, Iterable):
        return [copy_value(v) for v in collection]
    return [collection]


def repair_facet_params(params: CanonicalParams) -> CanonicalParams:
    """Turn mangled ``f[field][0]=value`` mappings back into lists, in place."""
    facets = params.get(Param.F)
    if not isinstance(facets, dict):
        return params
    mangled = [field for field, value in facets.items() if isinstance(value, dict)]
    if mangled:
        params[Param.F] = {
            field: list(value.values()) if isinstance(value, dict) else value
            for field, value in facets.items()
        }
        logger.debug("search_state.facet_params_repaired", fields=mangled)
    return params


def normalize_params(untrusted: Any = None) -> CanonicalParams:
    """Build a canonical parameter map from *untrusted* request parameters.

    Accepts ``None``, a :class:`SearchState`, any mapping, an object with a
    ``to_dict()`` method, or an iterable of ``(key, value)`` pairs.  The input
    is never mutated.

    Raises:
        ParameterError: *untrusted* cannot be converted to a mapping.
    """
    params = copy_params(_to_mapping(untrusted))
    return repair_facet_params(params)


__all__ = [
    "CanonicalParams",
    "SupportsToDict",
    "copy_params",
    "copy_value",
    "facet_values",
    "normalize_key",
    "normalize_params",
    "repair_facet_params",
]
