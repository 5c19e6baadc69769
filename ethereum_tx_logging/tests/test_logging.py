"""
Tests for the logging module.

These tests verify the functionality of the custom logging system,
including both the standalone configuration and the pytest integration.
"""

import io
import logging
import re
from unittest.mock import patch

import pytest

from ..logging import (
    VERBOSE_LEVEL,
    LogLevel,
    TxTypeLogger,
    UTCFormatter,
    configure_logging,
    get_logger,
)


@pytest.fixture
def restore_root_logger():
    """Restore the handlers and level of the root logger after `configure_logging`."""
    root_logger = logging.getLogger()
    original_handlers = root_logger.handlers[:]
    original_level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        if handler not in original_handlers:
            handler.close()
    for handler in original_handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(original_level)


class TestLoggerSetup:
    """Test the basic setup of loggers and custom levels."""

    def test_custom_levels_registered(self):
        """Test that custom log levels are properly registered."""
        assert logging.getLevelName(VERBOSE_LEVEL) == "VERBOSE"
        assert logging.getLevelName("VERBOSE") == VERBOSE_LEVEL

    def test_get_logger(self):
        """Test that get_logger returns a properly typed logger."""
        logger = get_logger("test_logger")
        assert isinstance(logger, TxTypeLogger)
        assert logger.name == "test_logger"
        assert hasattr(logger, "verbose")


class TestTxTypeLogger:
    """Test the custom logger methods."""

    def setup_method(self):
        """Set up a logger and string stream for capturing log output."""
        self.log_output = io.StringIO()
        self.logger = get_logger("test_txtype_logger")

        for handler in self.logger.handlers[:]:
            self.logger.removeHandler(handler)

        handler = logging.StreamHandler(self.log_output)
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        self.logger.addHandler(handler)
        self.logger.setLevel(logging.DEBUG)

    def test_verbose_method(self):
        """Test the verbose() method logs at the expected level."""
        self.logger.verbose("This is a verbose message")
        assert "VERBOSE: This is a verbose message" in self.log_output.getvalue()

    def test_verbose_method_args(self):
        """Test the verbose() method formats its arguments."""
        self.logger.verbose("Rule %s matched", "legacy-fees", stacklevel=2)
        assert "VERBOSE: Rule legacy-fees matched" in self.log_output.getvalue()

    def test_verbose_method_filtered(self):
        """Test the verbose() method respects the logger level."""
        self.logger.setLevel(logging.INFO)
        self.logger.verbose("This is a verbose message")
        assert self.log_output.getvalue() == ""

    def test_standard_methods(self):
        """Test that standard log methods still work."""
        self.logger.debug("Debug message")
        self.logger.info("Info message")
        self.logger.warning("Warning message")

        log_output = self.log_output.getvalue()
        assert "DEBUG: Debug message" in log_output
        assert "INFO: Info message" in log_output
        assert "WARNING: Warning message" in log_output


class TestFormatters:
    """Test the custom log formatters."""

    def test_utc_formatter(self):
        """Test that UTCFormatter formats timestamps correctly."""
        formatter = UTCFormatter(fmt="%(asctime)s: %(message)s")
        record = logging.makeLogRecord(
            {
                "msg": "Test message",
                "created": 1609459200.0,  # 2021-01-01 00:00:00 UTC
            }
        )

        formatted = formatter.format(record)
        assert re.match(r"2021-01-01 00:00:00\.\d{3}\+00:00: Test message", formatted)


class TestLogLevel:
    """Test parsing of log levels given on the command line."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("DEBUG", logging.DEBUG),
            ("info", logging.INFO),
            ("verbose", VERBOSE_LEVEL),
            ("15", VERBOSE_LEVEL),
            ("40", logging.ERROR),
        ],
    )
    def test_from_cli(self, value: str, expected: int):
        """Test valid level names and numbers."""
        assert LogLevel.from_cli(value) == expected

    def test_from_cli_invalid(self):
        """Test that unknown level names are rejected."""
        with pytest.raises(ValueError, match="Invalid log level"):
            LogLevel.from_cli("chatty")


class TestStandaloneConfiguration:
    """Test the standalone logging configuration function."""

    def test_configure_logging_defaults(self, restore_root_logger):
        """Test that configure_logging without outputs only sets the level."""
        restore_root_logger.addHandler(logging.StreamHandler(io.StringIO()))
        handler = configure_logging()

        assert restore_root_logger.handlers == []
        assert restore_root_logger.level == logging.INFO
        assert handler is None

    def test_configure_logging_with_stream(self, restore_root_logger):
        """Test configure_logging writing to a given stream."""
        stream = io.StringIO()
        configure_logging(log_level="VERBOSE", stream=stream)
        get_logger("test_stream").verbose("Rule matched")
        assert "[VERBOSE] test_stream: Rule matched" in stream.getvalue()

    def test_configure_logging_with_file(self, restore_root_logger, tmp_path):
        """Test configure_logging with file output."""
        log_file = tmp_path / "logs" / "test.log"

        handler = configure_logging(log_file=log_file)

        assert isinstance(handler, logging.FileHandler)
        assert log_file.exists()

        get_logger("test_config").info("Test log message")
        handler.flush()

        assert "Test log message" in log_file.read_text()

    def test_configure_logging_with_level(self, restore_root_logger):
        """Test configure_logging with custom log level."""
        configure_logging(log_level="DEBUG")
        assert restore_root_logger.level == logging.DEBUG

        configure_logging(log_level=VERBOSE_LEVEL)
        assert restore_root_logger.level == VERBOSE_LEVEL


class TestPytestIntegration:
    """Test the pytest integration of the logging module."""

    class MockConfig:
        """Minimal stand-in for `pytest.Config`."""

        def __init__(self, **options):
            self.options = options

        def getoption(self, name):
            return self.options.get(name)

    def test_pytest_configure_without_level(self, restore_root_logger):
        """Test that logging is left alone when no level is requested."""
        from ..plugin import pytest_configure

        handlers = restore_root_logger.handlers.copy()
        pytest_configure(self.MockConfig(txtype_log_level=None))
        assert restore_root_logger.handlers == handlers

    def test_pytest_configure_with_file(self, restore_root_logger, tmp_path):
        """Test that pytest_configure sets up file logging."""
        from ..plugin import pytest_configure, pytest_report_header

        log_file = tmp_path / "session.log"
        config = self.MockConfig(txtype_log_level=logging.DEBUG, txtype_log_file=log_file)
        with patch("sys.stdout", new=io.StringIO()):
            pytest_configure(config)

        file_handlers = [
            h for h in restore_root_logger.handlers if isinstance(h, logging.FileHandler)
        ]
        assert len(file_handlers) == 1
        assert log_file.exists()
        assert restore_root_logger.level == logging.DEBUG
        assert pytest_report_header(config) == [f"Log file: {log_file}"]
