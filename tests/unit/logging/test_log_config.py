"""Tests for structured logging setup and emitted events."""

import pytest
import structlog
from structlog.testing import capture_logs

from miscutils.address import validate_address
from miscutils.events import UrlEvents
from miscutils.exceptions import InvalidAddress, InvalidParameters, MalformedResult
from miscutils.log_config import configure_logging, get_context_logger
from miscutils.url_builder import build_url


class TestConfigureLogging:
    """Test suite for configure_logging."""

    def test_configures_structlog(self, reset_structlog):
        """Test structlog is configured with the requested renderer."""
        configure_logging("DEBUG", json_logs=True)

        assert structlog.is_configured()
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_console_renderer_from_settings(self, reset_structlog):
        """Test defaults come from settings."""
        configure_logging()

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_json_logs_from_environment(self, reset_structlog, monkeypatch):
        """Test MISCUTILS_JSON_LOGS selects the JSON renderer."""
        monkeypatch.setenv("MISCUTILS_JSON_LOGS", "1")
        configure_logging()

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_unknown_level(self, reset_structlog):
        """Test an unknown level name is rejected."""
        with pytest.raises(ValueError):
            configure_logging("LOUD")

    def test_get_context_logger(self):
        """Test a logger is returned for a name."""
        logger = get_context_logger("miscutils.test")
        assert logger is not None


class TestEmittedEvents:
    """Test the events logged by the URL helpers."""

    def test_address_validated(self):
        """Test successful validation logs at debug."""
        with capture_logs() as logs:
            validate_address("http://example.com/a/../b")

        assert logs == [
            {
                "event": UrlEvents.ADDRESS_VALIDATED,
                "log_level": "debug",
                "address": "http://example.com/b",
            }
        ]

    def test_address_rejected(self):
        """Test rejection logs a warning before raising."""
        with capture_logs() as logs:
            with pytest.raises(InvalidAddress):
                validate_address("example.com")

        assert logs[-1]["event"] == UrlEvents.ADDRESS_REJECTED
        assert logs[-1]["log_level"] == "warning"
        assert logs[-1]["reason"] == "missing scheme"

    def test_build_completed(self):
        """Test a successful build logs the URL."""
        with capture_logs() as logs:
            build_url("http://example.com/p", {"a": ["1"]})

        completed = [entry for entry in logs if entry["event"] == UrlEvents.BUILD_COMPLETED]
        assert completed[0]["url"] == "http://example.com/p?a=1"
        assert completed[0]["param_count"] == 1

    def test_params_rejected(self):
        """Test missing params log a warning."""
        with capture_logs() as logs:
            with pytest.raises(InvalidParameters):
                build_url("http://example.com/p", None)

        assert logs[-1]["event"] == UrlEvents.PARAMS_REJECTED

    def test_build_failed(self):
        """Test a malformed result logs the readable parameters."""
        with capture_logs() as logs:
            with pytest.raises(MalformedResult):
                build_url("http://example.com/p", {"a b": ["1"]})

        assert logs[-1]["event"] == UrlEvents.BUILD_FAILED
        assert logs[-1]["params"] == "a b=1"

    def test_events_are_strings(self):
        """Test event names compare equal to their dotted string values."""
        assert UrlEvents.BUILD_COMPLETED == "url.build.completed"

    def test_logged_event_is_plain_dotted_string(self):
        """Test the logged event is the dotted name, not the enum member."""
        with capture_logs() as logs:
            build_url("http://example.com/p", {"a": ["1"]})

        event = logs[-1]["event"]
        assert type(event) is str
        assert str(event) == "url.build.completed"
