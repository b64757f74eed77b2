"""
Unit tests for observability features.

Tests cover:
- Structured logging with JSON format
- Run correlation ID generation and propagation
"""

import json
import logging
import re
import sys

from tenant_reset.core.observability import (
    StructuredFormatter,
    configure_structured_logging,
    generate_run_id,
    get_logger,
    get_run_id,
    set_run_id,
)


def _record(msg: str = "hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="tenant_reset.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg=msg,
        args=(),
        exc_info=None,
        func="test_fn",
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestRunId:
    def test_generate_run_id_returns_uuid_format(self):
        uuid_pattern = re.compile(
            r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$"
        )
        assert uuid_pattern.match(generate_run_id())

    def test_set_and_get(self):
        set_run_id("run-1")
        assert get_run_id() == "run-1"
        set_run_id("run-2")
        assert get_run_id() == "run-2"


class TestStructuredFormatter:
    def test_outputs_json_with_standard_fields(self):
        set_run_id("run-42")
        entry = json.loads(StructuredFormatter().format(_record("Scaffold created")))

        assert entry["level"] == "INFO"
        assert entry["logger"] == "tenant_reset.test"
        assert entry["message"] == "Scaffold created"
        assert entry["run_id"] == "run-42"
        assert entry["function"] == "test_fn"
        assert entry["line"] == 10
        assert "timestamp" in entry

    def test_extra_fields_are_nested(self):
        entry = json.loads(StructuredFormatter().format(_record(path="/tmp/tenant", count=2)))
        assert entry["extra"] == {"path": "/tmp/tenant", "count": 2}

    def test_exception_info(self):
        try:
            raise ValueError("bad json")
        except ValueError:
            record = _record()
            record.exc_info = sys.exc_info()

        entry = json.loads(StructuredFormatter().format(record))
        assert entry["exception"] == {"type": "ValueError", "message": "bad json"}


class TestConfigureLogging:
    def test_single_stderr_handler_with_level(self, restore_root_logger):
        configure_structured_logging("DEBUG")
        root = restore_root_logger

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        handler = root.handlers[0]
        assert isinstance(handler.formatter, StructuredFormatter)
        assert handler.stream is sys.stderr

    def test_get_logger(self):
        assert get_logger("tenant_reset.x").name == "tenant_reset.x"
