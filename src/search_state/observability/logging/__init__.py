"""Observability – structured logging helpers."""
from search_state.observability.logging.factory import JsonLoggerFactory
from search_state.observability.logging.processors import ParamsRedactor, get_logger

__all__ = [
    "JsonLoggerFactory",
    "ParamsRedactor",
    "get_logger",
]
