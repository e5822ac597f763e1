"""Application state – the search state and document routing."""
from search_state.application.facets import Controller
from search_state.application.state.routing import SupportsToModel, url_for_document
from search_state.application.state.search_state import SearchState

__all__ = ["Controller", "SearchState", "SupportsToModel", "url_for_document"]
