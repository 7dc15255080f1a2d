"""Structured Logging — JSONFormatter output shape."""

import json
import logging

from user_service.infrastructure.observability import JSONFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "user_service.test", logging.WARNING, __file__, 1, "hello %s", ("world",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_base_fields():
    log = json.loads(JSONFormatter().format(_record()))

    assert log["level"] == "WARNING"
    assert log["logger"] == "user_service.test"
    assert log["message"] == "hello world"
    assert "timestamp" in log


def test_json_formatter_surfaces_known_extras_only():
    log = json.loads(JSONFormatter().format(
        _record(error_code="DUPLICATE_EMAIL", path="/users", unrelated="x"),
    ))

    assert log["error_code"] == "DUPLICATE_EMAIL"
    assert log["path"] == "/users"
    assert "unrelated" not in log
