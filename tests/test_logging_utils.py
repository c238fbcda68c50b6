"""Tests for the logging utilities module."""

import logging
import tempfile
import time
import unittest
from pathlib import Path
from unittest.mock import patch

from stringlist.logging_utils import LOGGER_NAME, ConsoleFormatter, FileFormatter, setup_logging


def _make_record(msg: str, level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name="stringlist.string_list",
        level=level,
        pathname="string_list.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=None,
        func="match_filter",
    )


class TestConsoleFormatter(unittest.TestCase):
    """Test suite for ConsoleFormatter class."""

    def test_console_formatter_initialization(self) -> None:
        """1. Initialization: Creates formatter with UTC converter and version in every line."""
        formatter = ConsoleFormatter("1.0.0")

        assert formatter.datefmt == "%Y-%m-%dT%H:%M:%S"
        assert formatter.converter == time.gmtime
        assert "StringList - 1.0.0" in formatter.format(_make_record("Test"))

    def test_console_formatter_format_time_with_microseconds(self) -> None:
        """2. Time Format: Formats time with 6-digit microseconds and 'Z' suffix."""
        formatter = ConsoleFormatter("1.0.0")
        record = _make_record("Test message")
        record.created = 1234567890.123456

        formatted_time = formatter.formatTime(record, formatter.datefmt)

        assert formatted_time.startswith("2009-02-13T23:31:30.")
        assert formatted_time.endswith("Z")
        microseconds_part = formatted_time.split(".")[-1].rstrip("Z")
        assert len(microseconds_part) == 6
        assert microseconds_part == "123456"

    def test_console_formatter_message_format(self) -> None:
        """3. Message Format: Formats complete log line with level and message."""
        formatter = ConsoleFormatter("2.0.0")
        record = _make_record("Invalid regex pattern", level=logging.WARNING)

        formatted = formatter.format(record)

        assert "StringList - 2.0.0" in formatted
        assert "WARNING" in formatted
        assert formatted.endswith("Invalid regex pattern")


class TestFileFormatter(unittest.TestCase):
    """Test suite for FileFormatter class."""

    def test_file_formatter_includes_location(self) -> None:
        """1. Detail: Includes logger name, function name, line number and level."""
        formatter = FileFormatter()
        record = _make_record("Detailed log", level=logging.DEBUG)

        formatted = formatter.format(record)

        assert "stringlist.string_list" in formatted
        assert "match_filter" in formatted
        assert "42" in formatted
        assert "DEBUG" in formatted
        assert "Detailed log" in formatted

    def test_file_formatter_time_is_utc(self) -> None:
        """2. Time Format: Uses the same UTC microsecond format as the console."""
        formatter = FileFormatter()
        record = _make_record("x")
        record.created = 0.5

        assert formatter.formatTime(record, formatter.datefmt) == "1970-01-01T00:00:00.500000Z"


class TestSetupLogging(unittest.TestCase):
    """Test suite for setup_logging function."""

    def tearDown(self) -> None:
        """Clean up logging state after each test."""
        logger = logging.getLogger(LOGGER_NAME)
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)
        logger.propagate = True

    def test_setup_logging_default_mode(self) -> None:
        """1. Default Mode: Sets up WARNING level console logging only."""
        logger = setup_logging("1.0.0")

        assert logger is logging.getLogger(LOGGER_NAME)
        assert logger.level == logging.WARNING
        assert logger.propagate is False
        assert len(logger.handlers) == 1
        handler = logger.handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert handler.level == logging.WARNING
        assert isinstance(handler.formatter, ConsoleFormatter)

    def test_setup_logging_debug_without_file(self) -> None:
        """2. Debug Mode: Lowers console level to DEBUG without adding a file handler."""
        logger = setup_logging("1.0.0", debug=True)

        assert logger.level == logging.DEBUG
        assert not any(isinstance(h, logging.FileHandler) for h in logger.handlers)
        assert logger.handlers[0].level == logging.DEBUG

    def test_setup_logging_debug_with_file(self) -> None:
        """3. Debug File: Writes detailed records to the requested file."""
        with tempfile.TemporaryDirectory() as tmp:
            log_file = Path(tmp) / "logs" / "debug.log"

            logger = setup_logging("1.0.0", debug=True, log_file=log_file)
            logging.getLogger("stringlist.patterns").debug("Compiling pattern '%s'", "a+")
            for handler in logger.handlers:
                handler.flush()

            file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
            assert len(file_handlers) == 1
            assert isinstance(file_handlers[0].formatter, FileFormatter)
            content = log_file.read_text(encoding="utf-8")
            assert "Compiling pattern 'a+'" in content
            assert "stringlist.patterns" in content

            for handler in file_handlers:
                handler.close()

    def test_setup_logging_file_ignored_without_debug(self) -> None:
        """4. File Ignored: A log file path has no effect unless debug is enabled."""
        with tempfile.TemporaryDirectory() as tmp:
            log_file = Path(tmp) / "debug.log"

            logger = setup_logging("1.0.0", log_file=log_file)

            assert not any(isinstance(h, logging.FileHandler) for h in logger.handlers)
            assert not log_file.exists()

    def test_setup_logging_debug_file_handler_failure(self) -> None:
        """5. File Handler Failure: Continues with console logging if file creation fails."""
        with tempfile.TemporaryDirectory() as tmp, patch("stringlist.logging_utils.FileHandler", side_effect=OSError("Permission denied")):
            logger = setup_logging("1.0.0", debug=True, log_file=Path(tmp) / "debug.log")

        console_handlers = [h for h in logger.handlers if isinstance(h, logging.StreamHandler)]
        assert len(console_handlers) == 1

    def test_setup_logging_multiple_calls_idempotent(self) -> None:
        """6. Idempotency: Multiple calls clear old handlers and set up fresh ones."""
        setup_logging("1.0.0")
        first_handler_count = len(logging.getLogger(LOGGER_NAME).handlers)

        setup_logging("1.0.0")
        second_handler_count = len(logging.getLogger(LOGGER_NAME).handlers)

        assert first_handler_count == 1
        assert second_handler_count == 1

    def test_import_does_not_configure_logging(self) -> None:
        """7. Library Etiquette: Importing the package adds no handlers."""
        import stringlist  # noqa: F401, PLC0415

        assert logging.getLogger(LOGGER_NAME).handlers == []


if __name__ == "__main__":
    unittest.main()
