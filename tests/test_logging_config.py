"""Structured logging, redaction and instrumentation checks."""

import contextvars
import json
import logging

import pytest

from stylist_app.logging_config import (
    CORRELATION_ID,
    JsonFormatter,
    log_event,
    operation_context,
    scrub,
)
from tools.observability import instrument_tool


class _ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__()
        self.records = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture()
def captured() -> _ListHandler:
    handler = _ListHandler()
    for name in ("test.structured", "tools.observability"):
        logger = logging.getLogger(name)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    yield handler
    for name in ("test.structured", "tools.observability"):
        logging.getLogger(name).removeHandler(handler)


def test_scrub_masks_owner_and_item_text() -> None:
    payload = {
        "user_id": "abc",
        "location": "Paris,FR",
        "contact": "me@example.com",
        "request_params": {"occasion": "party", "season": "summer"},
        "items": [{"item_id": "t1", "name": "Grandma's cardigan", "brand": "Acme"}, 3],
        "colors": ("red", "blue"),
    }

    scrubbed = scrub(payload)

    assert scrubbed["user_id"] == "[redacted]"
    assert scrubbed["location"] == "[redacted]"
    assert scrubbed["contact"] == "[redacted-email]"
    assert scrubbed["request_params"] == {"occasion": "party", "season": "summer"}
    assert scrubbed["items"] == [{"item_id": "t1", "name": "[redacted]", "brand": "[redacted]"}, 3]
    assert scrubbed["colors"] == ["red", "blue"]


def test_json_formatter_includes_operation_and_scrubbed_extras() -> None:
    record = logging.LogRecord("test", logging.INFO, __file__, 1, "hello", None, None)
    record.event = "greeting"
    record.candidate_count = 7
    record.user_id = "abc"
    record.request_params = {"occasion": "casual", "location": "Oslo"}

    with operation_context("engine:test", correlation_id="corr-1"):
        payload = json.loads(JsonFormatter().format(record))

    assert payload["event"] == "greeting"
    assert payload["correlation_id"] == "corr-1"
    assert payload["operation"] == "engine:test"
    assert payload["candidate_count"] == 7
    assert payload["user_id"] == "[redacted]"
    assert payload["request_params"] == {"occasion": "casual", "location": "[redacted]"}


def test_log_event_attaches_structured_fields(captured: _ListHandler) -> None:
    log_event(
        logging.getLogger("test.structured"),
        logging.INFO,
        "recommendations_generated",
        correlation_id="abc123",
        returned_count=3,
        location="Paris",
    )

    record = captured.records[-1]
    assert record.event == "recommendations_generated"
    assert record.correlation_id == "abc123"
    assert record.returned_count == 3
    assert record.location == "[redacted]"


def test_log_event_outside_an_operation_leaves_no_correlation_id(captured: _ListHandler) -> None:
    def emit() -> None:
        log_event(logging.getLogger("test.structured"), logging.INFO, "loose_event")
        assert CORRELATION_ID.get() is None

    contextvars.Context().run(emit)

    assert captured.records[-1].correlation_id is None


def test_operation_context_restores_previous_id() -> None:
    def run() -> list:
        seen = []
        with operation_context("outer") as outer_id:
            with operation_context("inner") as inner_id:
                seen.append(inner_id == outer_id)
            seen.append(CORRELATION_ID.get() == outer_id)
        with operation_context("next") as next_id:
            seen.append(next_id != outer_id)
        seen.append(CORRELATION_ID.get() is None)
        return seen

    assert contextvars.Context().run(run) == [True, True, True, True]


def test_instrument_tool_logs_success_and_failure(captured: _ListHandler) -> None:
    @instrument_tool("double")
    def double(value: int) -> int:
        return value * 2

    @instrument_tool("explode")
    def explode() -> None:
        raise RuntimeError("boom")

    def run() -> None:
        assert double(value=4) == 8
        with pytest.raises(RuntimeError):
            explode()
        assert CORRELATION_ID.get() is None

    contextvars.Context().run(run)

    events = [(record.event, record.tool) for record in captured.records]
    assert ("tool_call_started", "double") in events
    assert ("tool_call_completed", "double") in events
    assert ("tool_call_failed", "explode") in events
    ids = {record.tool: record.correlation_id for record in captured.records}
    assert ids["double"] and ids["explode"] and ids["double"] != ids["explode"]
