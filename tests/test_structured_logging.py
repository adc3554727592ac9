"""Tests for structured logging functionality."""

import json
import logging
import os
import tempfile
from pathlib import Path
from unittest.mock import patch

from auth0mgmt.utils.logging_utils import (
    ColoredFormatter,
    DetailedFormatter,
    StructuredFormatter,
    configure_from_env,
    get_logger,
    setup_logging,
)


def make_record(**extra):
    record = logging.LogRecord(
        name="test.logger",
        level=logging.INFO,
        pathname="test.py",
        lineno=42,
        msg="Test message",
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestStructuredFormatter:
    """Test structured JSON formatter."""

    def test_basic_formatting(self):
        log_data = json.loads(StructuredFormatter().format(make_record()))

        assert log_data["level"] == "INFO"
        assert log_data["logger"] == "test.logger"
        assert log_data["message"] == "Test message"
        assert log_data["line"] == 42
        assert "timestamp" in log_data

    def test_context_fields(self):
        record = make_record(
            method="GET",
            api_endpoint="https://t.auth0.com/api/v2/connections",
            status_code=200,
            duration=0.25,
        )

        log_data = json.loads(StructuredFormatter().format(record))

        assert log_data["method"] == "GET"
        assert log_data["api_endpoint"].endswith("/connections")
        assert log_data["status_code"] == 200
        assert log_data["duration"] == 0.25


class TestDetailedFormatter:
    def test_context_suffix(self):
        formatter = DetailedFormatter(fmt="%(message)s")
        record = make_record(method="PATCH", status_code=200, duration=0.5)

        assert formatter.format(record) == (
            "Test message [method=PATCH, status=200, duration=0.500s]"
        )

    def test_no_context(self):
        formatter = DetailedFormatter(fmt="%(message)s")

        assert formatter.format(make_record()) == "Test message"


class TestColoredFormatter:
    def test_disabled_colors(self):
        formatter = ColoredFormatter(fmt="%(levelname)s", disable_colors=True)

        assert formatter.format(make_record()) == "INFO"


class TestSetup:
    def test_get_logger_namespaces(self):
        assert get_logger("auth0mgmt.core.client").name == "auth0mgmt.core.client"
        assert get_logger("scripts").name == "auth0mgmt.scripts"

    def test_setup_logging_json(self):
        logger = setup_logging(level="DEBUG", log_format="json")

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, StructuredFormatter)

    def test_setup_logging_with_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            log_file = Path(tmp) / "logs" / "auth0mgmt.log"
            logger = setup_logging(level="INFO", log_file=str(log_file))

            get_logger("tests").info("written", extra={"operation": "test"})
            for handler in logger.handlers:
                handler.flush()

            entry = json.loads(log_file.read_text().strip())
            assert entry["message"] == "written"
            assert entry["operation"] == "test"

            for handler in logger.handlers:
                handler.close()
            logger.handlers.clear()

    def test_configure_from_env(self):
        with patch.dict(
            os.environ,
            {"AUTH0MGMT_LOG_LEVEL": "ERROR", "AUTH0MGMT_LOG_FORMAT": "detailed"},
        ):
            logger = configure_from_env()

        assert logger.level == logging.ERROR
        assert isinstance(logger.handlers[0].formatter, DetailedFormatter)
