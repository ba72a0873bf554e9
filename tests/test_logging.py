"""JSON log formatting."""

import json
import logging

from app.core.logging import JSONFormatter


def make_record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("app.routers.projects", logging.INFO, __file__, 1, "Project created", None, None)
    record.__dict__.update(extra)
    return record


def test_json_formatter_includes_known_extras():
    line = JSONFormatter().format(make_record(project_id="p-1", user_id="u-1", unrelated="x"))
    log = json.loads(line)
    assert log["message"] == "Project created"
    assert log["level"] == "INFO"
    assert log["project_id"] == "p-1"
    assert log["user_id"] == "u-1"
    assert "unrelated" not in log
