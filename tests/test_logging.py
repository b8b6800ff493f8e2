"""Structured logging: JSON records and request context."""

import json
import logging

from app.shared.utils.logging import JSONFormatter, get_logger, log_context, request_id_var


def make_record(message="Plant watered", extra_fields=None):
    record = logging.LogRecord("app.test", logging.INFO, __file__, 10, message, None, None)
    if extra_fields:
        record.extra_fields = extra_fields
    return record


def test_json_formatter_adds_service_and_context():
    with log_context(request_id="req-42"):
        line = JSONFormatter().format(make_record(extra_fields={"event_type": "business_event"}))

    payload = json.loads(line)
    assert payload["message"] == "Plant watered"
    assert payload["level"] == "INFO"
    assert payload["service"] == "plant-care-api"
    assert payload["request_id"] == "req-42"
    assert payload["extra"] == {"event_type": "business_event"}


def test_log_context_resets_after_exit():
    with log_context() as context:
        assert request_id_var.get() == context["request_id"]

    assert request_id_var.get() == ""


def test_get_logger_is_cached():
    assert get_logger("app.plants") is get_logger("app.plants")


def test_business_event_fields(caplog):
    events = get_logger("app.events.test")

    with caplog.at_level(logging.INFO, logger="app.events.test"):
        events.log_business_event("plant_created", "Plant added: Fern", entity_id=3, entity_type="plant")

    [record] = caplog.records
    assert record.extra_fields["business_event_type"] == "plant_created"
    assert record.extra_fields["entity_id"] == 3
