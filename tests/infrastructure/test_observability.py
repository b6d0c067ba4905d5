"""Structured Logging — JSONFormatter output and setup_logging wiring."""

import json
import logging
import sys

import pytest

from hotel_booking.infrastructure.observability import JSONFormatter, setup_logging


def _record(msg="Booking created", **extra):
    record = logging.LogRecord(
        "hotel_booking.services.booking_manager", logging.INFO,
        __file__, 1, msg, None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_base_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "hotel_booking.services.booking_manager"
    assert payload["message"] == "Booking created"
    assert "timestamp" in payload


def test_json_formatter_surfaces_booking_extras():
    payload = json.loads(JSONFormatter().format(
        _record(room_id=2, booking_id=10, start_date="2025-05-05"),
    ))
    assert payload["room_id"] == 2
    assert payload["booking_id"] == 10
    assert payload["start_date"] == "2025-05-05"
    assert "end_date" not in payload


def test_json_formatter_includes_exception():
    try:
        raise ValueError("bad range")
    except ValueError:
        record = _record()
        record.exc_info = sys.exc_info()
    payload = json.loads(JSONFormatter().format(record))
    assert "ValueError: bad range" in payload["exception"]


@pytest.mark.parametrize("fmt,formatter_type", [
    ("json", JSONFormatter),
    ("text", logging.Formatter),
])
def test_setup_logging_installs_handler(fmt, formatter_type):
    previous_level = logging.root.level
    handler = setup_logging("debug", fmt)
    try:
        assert handler in logging.root.handlers
        assert isinstance(handler.formatter, formatter_type)
        assert logging.root.level == logging.DEBUG
    finally:
        logging.root.removeHandler(handler)
        logging.root.setLevel(previous_level)
