"""Structured Logging — JSONFormatter output and setup_logging idempotence."""

import json
import logging

from exercise_tracker.infrastructure.observability import (
    JSONFormatter, setup_logging,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "exercise_tracker.test", logging.WARNING, __file__, 1,
        "User %s not found", ("abc",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_includes_core_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "WARNING"
    assert log["logger"] == "exercise_tracker.test"
    assert log["message"] == "User abc not found"
    assert "timestamp" in log


def test_json_formatter_surfaces_known_extras_only():
    log = json.loads(JSONFormatter().format(
        _record(user_id="abc", status_code=404, unrelated="x"),
    ))
    assert log["user_id"] == "abc"
    assert log["status_code"] == 404
    assert "unrelated" not in log


def test_setup_logging_does_not_stack_handlers():
    setup_logging("DEBUG", "text")
    before = len(logging.root.handlers)
    setup_logging("INFO", "json")
    assert len(logging.root.handlers) == before
    assert logging.root.level == logging.INFO
