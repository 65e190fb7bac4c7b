"""Unit tests for log correlation and request id handling."""

import contextvars
import json
import logging

import pytest

from blog_api.api.middleware.request_id import MAX_REQUEST_ID_LENGTH, resolve_request_id
from blog_api.logging_config import (
    CorrelationFilter,
    JsonFormatter,
    bind_caller,
    configure_logging,
    request_id_var,
)


def _record(msg: str = "Post created", **extra) -> logging.LogRecord:
    record = logging.LogRecord("blog_api.test", logging.INFO, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def _filtered(record: logging.LogRecord, request_id=None, caller_id=None) -> logging.LogRecord:
    def run():
        if request_id is not None:
            request_id_var.set(request_id)
        if caller_id is not None:
            bind_caller(caller_id)
        CorrelationFilter().filter(record)
        return record

    return contextvars.copy_context().run(run)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)


class TestCorrelationFilter:
    """Tests for CorrelationFilter."""

    def test_defaults_outside_a_request(self):
        record = _filtered(_record())

        assert record.request_id == "-"
        assert record.caller_id == "anon"

    def test_copies_context(self):
        record = _filtered(_record(), request_id="req-1", caller_id=42)

        assert record.request_id == "req-1"
        assert record.caller_id == 42

    def test_explicit_request_id_wins(self):
        record = _filtered(_record(request_id="from-extra"), request_id="from-context")

        assert record.request_id == "from-extra"


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def test_includes_correlation_and_extra_fields(self):
        record = _filtered(_record(post_id=7), request_id="req-1", caller_id=3)

        entry = json.loads(JsonFormatter().format(record))

        assert entry["message"] == "Post created"
        assert entry["level"] == "INFO"
        assert entry["request_id"] == "req-1"
        assert entry["caller_id"] == 3
        assert entry["post_id"] == 7
        assert "lineno" not in entry

    def test_non_serializable_extra_is_stringified(self):
        record = _filtered(_record(kind=object))

        entry = json.loads(JsonFormatter().format(record))

        assert entry["kind"] == str(object)


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_production_uses_json(self, restore_root_logger):
        configure_logging(log_level="warning", environment="production")

        assert restore_root_logger.level == logging.WARNING
        assert len(restore_root_logger.handlers) == 1
        assert isinstance(restore_root_logger.handlers[0].formatter, JsonFormatter)

    def test_unknown_level_falls_back_to_info(self, restore_root_logger):
        configure_logging(log_level="chatty")

        assert restore_root_logger.level == logging.INFO


class TestResolveRequestId:
    """Tests for resolve_request_id."""

    def test_keeps_client_id(self):
        assert resolve_request_id("abc-123") == "abc-123"

    @pytest.mark.parametrize(
        "incoming",
        [None, "", "x" * (MAX_REQUEST_ID_LENGTH + 1), "bad\nid"],
    )
    def test_replaces_missing_or_unsafe_id(self, incoming):
        request_id = resolve_request_id(incoming)

        assert request_id != incoming
        assert len(request_id) == 36
