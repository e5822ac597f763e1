"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

import structlog

from search_state.config.settings import SearchStateSettings
from search_state.observability.logging.processors import ParamsRedactor


class JsonLoggerFactory:
    """Configure structlog output (JSON by default) through the stdlib root logger."""

    @staticmethod
    def configure(
        level: int = logging.INFO,
        redact_keys: Iterable[str] | None = None,
        render_json: bool = True,
    ) -> None:
        """Route structlog events through the root logger.

        Events are rendered as JSON lines, or with structlog's console
        renderer when *render_json* is false.  Values under *redact_keys*
        are replaced before rendering.
        """
        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]
        if redact_keys:
            shared_processors.insert(0, ParamsRedactor(redact_keys))

        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        renderer: Any = (
            structlog.processors.JSONRenderer() if render_json else structlog.dev.ConsoleRenderer(colors=False)
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)

    @classmethod
    def configure_from_settings(
        cls, settings: SearchStateSettings, redact_keys: Iterable[str] | None = None
    ) -> None:
        cls.configure(
            level=settings.log_level_number,
            redact_keys=redact_keys if redact_keys is not None else settings.log_redact_keys,
            render_json=settings.log_json,
        )


__all__ = ["JsonLoggerFactory"]
