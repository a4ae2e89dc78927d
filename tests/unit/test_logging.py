"""
Tests for structlog configuration.
"""

import json
import logging

import pytest
import structlog
from scrapecore.config.config import MonitoringConfig
from scrapecore.observability import configure_logging
from scrapecore.observability.logging import add_request_url
from structlog.contextvars import bound_contextvars


@pytest.fixture
def restore_logging():
    root_logger = logging.getLogger()
    handlers, level = root_logger.handlers[:], root_logger.level
    yield
    for handler in root_logger.handlers:
        handler.close()
    root_logger.handlers = handlers
    root_logger.setLevel(level)
    structlog.reset_defaults()


class TestLogging:
    @pytest.mark.unit
    def test_add_request_url_from_context(self):
        with bound_contextvars(request_url="https://example.com/a"):
            event = add_request_url(None, "info", {"event": "x"})
        assert event["request_url"] == "https://example.com/a"

    @pytest.mark.unit
    def test_add_request_url_keeps_explicit_value(self):
        with bound_contextvars(request_url="https://example.com/a"):
            event = add_request_url(None, "info", {"event": "x", "request_url": "other"})
        assert event["request_url"] == "other"

    @pytest.mark.unit
    def test_file_logs_are_json(self, tmp_path, restore_logging):
        log_file = tmp_path / "logs" / "scrapecore.log"
        configure_logging(MonitoringConfig(log_level="DEBUG", log_file=str(log_file)))

        with bound_contextvars(request_url="https://example.com/a"):
            structlog.get_logger("scrapecore.test").info("Extraction done", strategy="selector")
        for handler in logging.getLogger().handlers:
            handler.flush()

        records = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
        record = records[-1]
        assert record["event"] == "Extraction done"
        assert record["strategy"] == "selector"
        assert record["request_url"] == "https://example.com/a"
        assert record["level"] == "info"
        assert "timestamp" in record
