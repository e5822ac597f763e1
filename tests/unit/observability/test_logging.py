"""Unit tests for observability logging."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from search_state.config import SearchStateSettings
from search_state.observability.logging import JsonLoggerFactory, ParamsRedactor, get_logger


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


class TestParamsRedactor:
    def test_top_level_key(self) -> None:
        out = ParamsRedactor({"q"})(None, "info", {"event": "e", "q": "secret"})
        assert out == {"event": "e", "q": "[REDACTED]"}

    def test_nested_params(self) -> None:
        event = {"event": "e", "params": {"q": "secret", "f": {"genre": ["drama"]}}}
        out = ParamsRedactor({"q"})(None, "info", event)
        assert out["params"] == {"q": "[REDACTED]", "f": {"genre": ["drama"]}}

    def test_case_insensitive(self) -> None:
        out = ParamsRedactor({"Q"})(None, "info", {"q": "x"})
        assert out["q"] == "[REDACTED]"

    def test_inside_lists(self) -> None:
        out = ParamsRedactor({"q"})(None, "info", {"items": [{"q": "x"}, "plain"]})
        assert out["items"] == [{"q": "[REDACTED]"}, "plain"]

    def test_input_not_mutated(self) -> None:
        event = {"params": {"q": "x"}}
        ParamsRedactor({"q"})(None, "info", event)
        assert event == {"params": {"q": "x"}}


class TestGetLogger:
    def test_returns_logger_with_methods(self) -> None:
        logger = get_logger("search_state.test")
        for level in ("debug", "info", "warning", "error"):
            assert callable(getattr(logger, level))

    def test_bind_initial_values(self) -> None:
        with structlog.testing.capture_logs() as logs:
            get_logger("x", request_id="r-1").info("hello")
        assert logs[0]["request_id"] == "r-1"
        assert logs[0]["event"] == "hello"


class TestJsonLoggerFactory:
    def test_configure_sets_root_level(self) -> None:
        JsonLoggerFactory.configure(level=logging.WARNING)
        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1

    def test_emits_json_with_redaction(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(level=logging.INFO, redact_keys={"q"})
        get_logger("search_state.json").info("searched", params={"q": "cats", "page": 2})
        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "searched"
        assert payload["params"] == {"q": "[REDACTED]", "page": 2}

    def test_configure_from_settings(self) -> None:
        JsonLoggerFactory.configure_from_settings(SearchStateSettings(log_level="debug"))
        assert logging.getLogger().level == logging.DEBUG

    def test_console_rendering_from_settings(self, capsys: pytest.CaptureFixture[str]) -> None:
        settings = SearchStateSettings(log_json=False, log_redact_keys=["q"])
        JsonLoggerFactory.configure_from_settings(settings)
        get_logger("search_state.console").info("searched", q="cats")
        line = capsys.readouterr().err.strip().splitlines()[-1]
        assert "searched" in line
        assert "[REDACTED]" in line
        assert "cats" not in line
        with pytest.raises(json.JSONDecodeError):
            json.loads(line)

    def test_explicit_redact_keys_win(self, capsys: pytest.CaptureFixture[str]) -> None:
        settings = SearchStateSettings(log_redact_keys=["q"])
        JsonLoggerFactory.configure_from_settings(settings, redact_keys=["sort"])
        get_logger("search_state.override").info("searched", q="cats", sort="title")
        payload = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert payload["q"] == "cats"
        assert payload["sort"] == "[REDACTED]"
