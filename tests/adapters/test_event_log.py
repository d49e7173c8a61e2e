"""Tests for the JSON event log adapter."""

import logging

import pytest

from duck_curiosities.adapters.event_log import JsonEventLogAdapter
from duck_curiosities.core.ports import EventLogPort

LOGGER_NAME = "duck_curiosities.tests.events"


@pytest.fixture
def adapter() -> JsonEventLogAdapter:
    return JsonEventLogAdapter(logging.getLogger(LOGGER_NAME))


def test_log_request_records_payload(adapter, caplog):
    caplog.set_level(logging.INFO, logger=LOGGER_NAME)

    adapter.log_request({"type": "LaunchRequest", "locale": "en-US"})

    record = caplog.records[-1]
    assert record.getMessage() == "Incoming request"
    assert record.__dict__["event"] == "skill_request"
    assert record.__dict__["request"] == {"type": "LaunchRequest", "locale": "en-US"}


def test_log_response_records_payload(adapter, caplog):
    caplog.set_level(logging.INFO, logger=LOGGER_NAME)

    adapter.log_response({"speech": "Goodbye!"})

    record = caplog.records[-1]
    assert record.getMessage() == "Outgoing response"
    assert record.__dict__["response"] == {"speech": "Goodbye!"}


def test_log_error_records_exception(adapter, caplog):
    caplog.set_level(logging.INFO, logger=LOGGER_NAME)
    try:
        raise RuntimeError("boom")
    except RuntimeError as exc:
        adapter.log_error(exc, {"type": "IntentRequest"})

    record = caplog.records[-1]
    assert record.levelno == logging.ERROR
    assert record.__dict__["error_type"] == "RuntimeError"
    assert record.__dict__["error"] == "boom"
    assert record.exc_info is not None


def test_default_logger_is_configured():
    adapter: EventLogPort = JsonEventLogAdapter()
    adapter.log_request({"type": "LaunchRequest"})
