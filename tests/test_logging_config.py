"""Tests for structured logging helpers."""

import json
import logging

from fridgebud.logging_config import (
    ContextualFormatter,
    LoggingContext,
    StructuredJsonFormatter,
    clear_context,
    get_logger,
    household_code_ctx,
    request_id_ctx,
    set_context,
)


def _record(message: str = "hello") -> logging.LogRecord:
    return logging.LogRecord("fridgebud.test", logging.INFO, __file__, 10, message, None, None)


class TestContext:
    """Tests for request/household context variables."""

    def test_set_and_clear(self):
        """Test context can be set and cleared."""
        set_context(request_id="req-1", household_code="ABC123")
        assert request_id_ctx.get() == "req-1"
        assert household_code_ctx.get() == "ABC123"

        clear_context()
        assert request_id_ctx.get() is None
        assert household_code_ctx.get() is None

    def test_logging_context_restores(self):
        """Test the context manager restores previous values."""
        clear_context()
        with LoggingContext(request_id="inner", household_code="HOUSE1"):
            assert request_id_ctx.get() == "inner"
            assert household_code_ctx.get() == "HOUSE1"
        assert request_id_ctx.get() is None
        assert household_code_ctx.get() is None


class TestFormatters:
    """Tests for log output formats."""

    def test_json_formatter_includes_context(self):
        """Test JSON output carries the context fields."""
        with LoggingContext(request_id="req-42", household_code="FAMILY"):
            output = json.loads(StructuredJsonFormatter().format(_record()))

        assert output["message"] == "hello"
        assert output["level"] == "INFO"
        assert output["logger"] == "fridgebud.test"
        assert output["request_id"] == "req-42"
        assert output["household_code"] == "FAMILY"

    def test_json_formatter_without_context(self):
        """Test context fields are omitted when unset."""
        clear_context()
        output = json.loads(StructuredJsonFormatter().format(_record()))
        assert "request_id" not in output

    def test_contextual_formatter(self):
        """Test the development format shows the context."""
        with LoggingContext(request_id="abcdefghijkl", household_code="FAMILY"):
            output = ContextualFormatter().format(_record("parsed"))

        assert "fridgebud.test [req=abcdefgh, household=FAMILY] | parsed" in output

    def test_get_logger_adds_context(self, caplog):
        """Test the adapter attaches context to records."""
        logger = get_logger("fridgebud.test")
        with caplog.at_level(logging.INFO, logger="fridgebud.test"):
            with LoggingContext(request_id="req-7"):
                logger.info("inside")

        (record,) = [r for r in caplog.records if r.getMessage() == "inside"]
        assert record.request_id == "req-7"
