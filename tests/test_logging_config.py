from __future__ import annotations

import json
import logging
import sys

import marketplace.core.logging_config as logging_config


def test_json_formatter_includes_extra_fields():
    record = logging.LogRecord("marketplace.test", logging.WARNING, __file__, 10, "status.transition.rejected", (), None)
    record.event = "status.transition.rejected"
    record.entity = "goal"

    payload = json.loads(logging_config.JsonFormatter().format(record))
    assert payload["level"] == "WARNING"
    assert payload["logger"] == "marketplace.test"
    assert payload["message"] == "status.transition.rejected"
    assert payload["event"] == "status.transition.rejected"
    assert payload["entity"] == "goal"
    assert "exception" not in payload


def test_json_formatter_serializes_exceptions():
    try:
        raise ValueError("boom")
    except ValueError:
        exc_info = sys.exc_info()

    record = logging.LogRecord("marketplace.test", logging.ERROR, __file__, 20, "failed", (), exc_info)
    payload = json.loads(logging_config.JsonFormatter().format(record))
    assert "ValueError: boom" in payload["exception"]


def test_configure_logging_installs_handler_once(monkeypatch):
    monkeypatch.delenv("ENV", raising=False)
    monkeypatch.setenv("LOG_JSON", "true")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.delenv("LOG_FILE", raising=False)

    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers.clear()
    try:
        logging_config.configure_logging()
        handlers = root.handlers[:]
        logging_config.configure_logging()

        assert len(handlers) == 1
        assert isinstance(handlers[0].formatter, logging_config.JsonFormatter)
        assert root.handlers == handlers
        assert root.level == logging.DEBUG
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_production_logging_is_json_at_info_or_above(monkeypatch):
    monkeypatch.setenv("ENV", "production")
    monkeypatch.setenv("LOG_JSON", "false")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.delenv("LOG_FILE", raising=False)

    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers.clear()
    try:
        logging_config.configure_logging()

        assert isinstance(root.handlers[0].formatter, logging_config.JsonFormatter)
        assert root.level == logging.INFO
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
