"""Tests for logging configuration."""

from __future__ import annotations

import logging

import pytest
import structlog

from phoneguard.logging import configure_logging


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    # pytest's own capture handlers come and go per test phase
    handlers = [h for h in root.handlers if not type(h).__module__.startswith("_pytest")]
    level = root.level
    quiet_levels = {name: logging.getLogger(name).level for name in ("httpx", "httpcore")}
    yield
    structlog.reset_defaults()
    for handler in root.handlers[:]:
        if not type(handler).__module__.startswith("_pytest"):
            root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
    for name, quiet_level in quiet_levels.items():
        logging.getLogger(name).setLevel(quiet_level)


class TestConfigureLogging:
    def test_json_format_renders_json_with_structured_tracebacks(self):
        """JSON output keeps tracebacks as data instead of formatted text."""
        configure_logging("INFO", "json")
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert structlog.processors.dict_tracebacks in processors
        assert structlog.processors.format_exc_info not in processors

    def test_console_format(self):
        """Console output formats exceptions as text."""
        configure_logging("INFO", "console")
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
        assert structlog.processors.format_exc_info in processors

    def test_root_logger_gets_single_handler(self):
        """Repeated configuration does not stack handlers."""
        configure_logging("WARNING")
        configure_logging("WARNING")
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.level == logging.WARNING

    def test_http_client_loggers_quieted(self):
        """httpx request lines stay hidden even at DEBUG."""
        configure_logging("DEBUG")
        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING

    def test_http_client_loggers_follow_stricter_level(self):
        """A level above WARNING applies to the http client loggers too."""
        configure_logging("ERROR")
        assert logging.getLogger("httpx").level == logging.ERROR

    def test_unknown_level_falls_back_to_info(self):
        """A misspelled level name does not break startup."""
        configure_logging("LOUD")
        assert logging.getLogger().level == logging.INFO
