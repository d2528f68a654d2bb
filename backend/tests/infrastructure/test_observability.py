"""Structured Logging — tests for the JSON formatter's extra fields."""

import json
import logging

from app.infrastructure.observability import JSONFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "app.test", logging.INFO, __file__, 1, "Order created", None, None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_core_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "app.test"
    assert log["message"] == "Order created"
    assert "timestamp" in log


def test_json_formatter_includes_known_extras_only():
    log = json.loads(JSONFormatter().format(
        _record(resource="order", resource_id="abc", unrelated="x"),
    ))
    assert log["resource"] == "order"
    assert log["resource_id"] == "abc"
    assert "unrelated" not in log
