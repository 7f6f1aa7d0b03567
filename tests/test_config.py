"""Tests for configuration loading."""
import logging
import pytest
import structlog
from dateutil import tz
from config import Config, configure_logging


class TestConfig:
    """Test suite for Config."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("DATETASKS_NAIVE_TZ", raising=False)
        monkeypatch.delenv("DATETASKS_LOG_LEVEL", raising=False)
        loaded = Config.load()
        assert loaded.naive_timezone == "UTC"
        assert loaded.log_level == "WARNING"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("DATETASKS_NAIVE_TZ", "Europe/Paris")
        monkeypatch.setenv("DATETASKS_LOG_LEVEL", "debug")
        loaded = Config.load()
        assert loaded.naive_timezone == "Europe/Paris"
        assert loaded.log_level == "DEBUG"
        assert loaded.naive_tzinfo is not None

    def test_unknown_zone_falls_back_to_utc(self):
        loaded = Config(naive_timezone="Not/AZone")
        assert loaded.naive_tzinfo == tz.UTC


class TestConfigureLogging:
    """Test structlog setup."""

    def test_unknown_level_falls_back_to_warning(self):
        try:
            configure_logging("bogus")
            assert logging.getLogger("business_logic").level == logging.WARNING
        finally:
            configure_logging()

    def test_debug_level(self):
        try:
            configure_logging("DEBUG")
            assert structlog.is_configured()
            assert logging.getLogger("business_logic").level == logging.DEBUG
        finally:
            configure_logging()

    def test_package_loggers_have_null_handler(self):
        configure_logging()
        configure_logging()
        handlers = logging.getLogger("business_logic").handlers
        assert sum(isinstance(handler, logging.NullHandler) for handler in handlers) == 1

    def test_library_calls_print_nothing(self, capsys):
        """Failed parses and format fallthrough stay off stdout and stderr."""
        import date_tasks
        from business_logic.date_parser import DateParser

        assert date_tasks.parse_date_from_rfc2822("invalid") is None
        assert DateParser.detect("Tue, 26 Jan 2016 13:48:02 GMT") is not None
        assert date_tasks.time_span_to_string(None, None) == "--:--:--.---"

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_events_reach_stdlib_logging(self, caplog):
        """A host application can still collect the debug events."""
        from business_logic.date_parser import DateParser

        caplog.set_level(logging.DEBUG, logger="business_logic.date_parser")
        DateParser.parse_iso8601("invalid")
        assert any("date_parse_failed" in record.getMessage() for record in caplog.records)
