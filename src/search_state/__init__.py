"""
search_state – search-state normalization and facet-mutation library.

Import path convention::

    from search_state.application.state import SearchState
    from search_state.application.facets import FacetItem, SearchConfiguration
    from search_state.application.parameters import ParameterSanitizer, normalize_params
    from search_state.kernel.errors import UnknownFacetFieldError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
