"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    SearchStateError
    ├── DomainError                (domain.py)
    │   ├── ParameterError
    │   └── UnknownFacetFieldError
    └── ApplicationError           (application.py)
        └── ConfigError            (search_state.config.validation)
"""

from search_state.kernel.errors.application import ApplicationError
from search_state.kernel.errors.base import SearchStateError
from search_state.kernel.errors.domain import DomainError, ParameterError, UnknownFacetFieldError

__all__ = [
    "ApplicationError",
    "DomainError",
    "ParameterError",
    "SearchStateError",
    "UnknownFacetFieldError",
]
