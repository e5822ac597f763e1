"""Application parameters – normalization and sanitizing of request parameters."""
from search_state.application.parameters.keys import RESET_KEYS, Param
from search_state.application.parameters.normalizer import (
    CanonicalParams,
    SupportsToDict,
    copy_params,
    facet_values,
    normalize_params,
    repair_facet_params,
)
from search_state.application.parameters.sanitizer import (
    DEFAULT_EXCLUDED_KEYS,
    ParameterSanitizer,
    Sanitizer,
)

__all__ = [
    "CanonicalParams",
    "DEFAULT_EXCLUDED_KEYS",
    "Param",
    "ParameterSanitizer",
    "RESET_KEYS",
    "Sanitizer",
    "SupportsToDict",
    "copy_params",
    "facet_values",
    "normalize_params",
    "repair_facet_params",
]
