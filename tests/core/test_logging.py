"""Tests for the logging helpers with correlation ids."""

import json
import logging

from pythonjsonlogger import jsonlogger

from duck_curiosities.core.logging import (
    CorrelationIdFilter,
    LOG_SCHEMA_VERSION,
    VersionedJsonFormatter,
    bind_correlation_id,
    correlation_id_context,
    get_correlation_id,
    get_logger,
    reset_correlation_id,
)


def _record(msg: str = "hello") -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg=msg,
        args=None,
        exc_info=None,
    )


def test_correlation_filter_attaches_context():
    """Filter should attach the current correlation id onto log records."""
    token = bind_correlation_id("abc123")
    try:
        record = _record()
        assert CorrelationIdFilter().filter(record) is True
        assert record.__dict__["correlation_id"] == "abc123"
    finally:
        reset_correlation_id(token)


def test_correlation_filter_uses_placeholder_when_unbound():
    record = _record()
    CorrelationIdFilter().filter(record)
    assert record.__dict__["correlation_id"] == "-"


def test_correlation_context_manager_restores_state():
    """Nested contexts restore the original correlation id."""
    with correlation_id_context("outer"):
        with correlation_id_context("inner"):
            assert get_correlation_id() == "inner"
        assert get_correlation_id() == "outer"
    assert get_correlation_id() is None


def test_formatter_adds_schema_version():
    formatter = VersionedJsonFormatter("%(message)s", schema_version="9.9.9")
    payload = json.loads(formatter.format(_record("structured")))

    assert payload["message"] == "structured"
    assert payload["schema_version"] == "9.9.9"


def test_get_logger_installs_json_handlers_once():
    first = get_logger("duck_curiosities.tests.logging")
    handler_count = len(first.handlers)
    second = get_logger("duck_curiosities.tests.logging")

    assert first is second
    assert handler_count >= 1
    assert len(second.handlers) == handler_count
    assert all(isinstance(h.formatter, jsonlogger.JsonFormatter) for h in second.handlers)
    assert all(
        any(isinstance(flt, CorrelationIdFilter) for flt in h.filters) for h in second.handlers
    )
    assert LOG_SCHEMA_VERSION
