"""Unit tests for observability logging helpers."""

from __future__ import annotations

import importlib
import logging

import pytest
import structlog

from relaylog.observability.logging import (
    DEFAULT_SENSITIVE_FIELDS,
    JsonLoggerFactory,
    RedactionProcessor,
    SensitiveFieldsFilter,
    get_logger,
)


# ---------------------------------------------------------------------------
# SensitiveFieldsFilter
# ---------------------------------------------------------------------------


class TestSensitiveFieldsFilter:
    def test_redacts_endpoint_address(self) -> None:
        f = SensitiveFieldsFilter()
        result = f.redact({"endpoint_address": "https://api/botX/send", "chat_id": 42})
        assert result["endpoint_address"] == SensitiveFieldsFilter.REDACTED
        assert result["chat_id"] == 42

    def test_redacts_all_default_sensitive_fields(self) -> None:
        data = {name: "value" for name in DEFAULT_SENSITIVE_FIELDS}
        result = SensitiveFieldsFilter().redact(data)
        assert set(result.values()) == {SensitiveFieldsFilter.REDACTED}

    def test_case_insensitive_key_matching(self) -> None:
        result = SensitiveFieldsFilter().redact({"requestUri": "u", "Token": "t", "normal": "ok"})
        assert result["requestUri"] == SensitiveFieldsFilter.REDACTED
        assert result["Token"] == SensitiveFieldsFilter.REDACTED
        assert result["normal"] == "ok"

    def test_custom_sensitive_fields(self) -> None:
        f = SensitiveFieldsFilter(sensitive_fields=frozenset({"chat_id"}))
        result = f.redact({"chat_id": 1, "token": "keep"})
        assert result == {"chat_id": SensitiveFieldsFilter.REDACTED, "token": "keep"}

    def test_redact_deep_nested(self) -> None:
        data = {"i": {"requestUri": "https://api/botX/send", "chatId": 7}, "minLevel": 1}
        result = SensitiveFieldsFilter().redact_deep(data)
        assert result == {"i": {"requestUri": SensitiveFieldsFilter.REDACTED, "chatId": 7}, "minLevel": 1}


class TestRedactionProcessor:
    def test_processor_redacts_event_dict(self) -> None:
        processor = RedactionProcessor()
        event = processor(None, "info", {"event": "x", "token": "abc"})
        assert event == {"event": "x", "token": SensitiveFieldsFilter.REDACTED}


# ---------------------------------------------------------------------------
# get_logger / JsonLoggerFactory
# ---------------------------------------------------------------------------


class TestGetLogger:
    def test_bound_values_are_emitted(self) -> None:
        with structlog.testing.capture_logs() as logs:
            get_logger("relaylog.test", component="relay").info("hello")
        assert logs == [{"event": "hello", "log_level": "info", "component": "relay"}]


class TestJsonLoggerFactory:
    @pytest.fixture(autouse=True)
    def _restore_logging(self):
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        yield
        structlog.reset_defaults()
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_configure_installs_single_root_handler(self) -> None:
        JsonLoggerFactory.configure(level=logging.WARNING)
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.level == logging.WARNING

    def test_json_output_is_redacted(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(level=logging.INFO)
        structlog.get_logger("relaylog.factory_test").info("configured", token="abc")
        captured = capsys.readouterr()
        assert '"token": "[REDACTED]"' in captured.err
        assert "abc" not in captured.err


class TestPublicReExports:
    def test_all_symbols_importable(self) -> None:
        mod = importlib.import_module("relaylog.observability.logging")
        for name in mod.__all__:
            assert hasattr(mod, name)
