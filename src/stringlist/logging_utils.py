"""Logging setup helpers for applications that use StringList."""
# src/stringlist/logging_utils.py

import logging
import sys
import time
from logging import FileHandler
from pathlib import Path

LOGGER_NAME = "stringlist"


class _UtcMicrosecondFormatter(logging.Formatter):
    """A formatter whose timestamps are UTC with 6-digit microseconds and a 'Z' suffix."""

    def __init__(self, fmt: str) -> None:
        super().__init__(fmt=fmt, datefmt="%Y-%m-%dT%H:%M:%S")
        self.converter = time.gmtime

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: N802
        """Format the time with 6-digit microseconds and a 'Z' for UTC."""
        ct = self.converter(record.created)
        s = time.strftime(datefmt, ct) if datefmt else time.strftime(self.default_time_format, ct)
        # Calculate microseconds from the fractional part of `created`
        microseconds = int((record.created - int(record.created)) * 1_000_000)
        return f"{s}.{microseconds:06d}Z"


# Console Log Formatter
class ConsoleFormatter(_UtcMicrosecondFormatter):
    """A compact formatter for console output."""

    def __init__(self, version: str) -> None:
        """
        Initialize the formatter with the library version.

        Args:
            version: The StringList version shown on every line.

        """
        super().__init__(f"%(asctime)s | StringList - {version} | %(levelname)s | %(message)s")


# File Log Formatter
class FileFormatter(_UtcMicrosecondFormatter):
    """A detailed formatter for debug log files."""

    def __init__(self) -> None:
        """Initialize the detailed file formatter."""
        super().__init__("%(asctime)s | %(name)-24s | %(funcName)-20s:%(lineno)-4d | %(levelname)-8s | %(message)s")


def setup_logging(version: str, *, debug: bool = False, log_file: Path | None = None) -> logging.Logger:
    """
    Configure the 'stringlist' logger.

    The library itself never calls this; importing stringlist leaves logging
    untouched. Applications that want to see the library's records call it once.

    1.  Console: Level is WARNING by default, DEBUG if debug=True.
    2.  File (DEBUG): Detailed records written to `log_file` when debug=True
        and a path is given.

    Args:
        version: The library version, included in console lines.
        debug: If True, lowers the console level to DEBUG and enables file logging.
        log_file: Where to write the debug log. Ignored unless debug is True.

    Returns:
        The configured 'stringlist' logger.

    """
    logger = logging.getLogger(LOGGER_NAME)
    # Clear handlers from previous setups to avoid duplicate lines
    if logger.hasHandlers():
        logger.handlers.clear()

    level = logging.DEBUG if debug else logging.WARNING
    logger.setLevel(level)
    logger.propagate = False

    # --- Console Handler ---
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(ConsoleFormatter(version))
    logger.addHandler(console_handler)

    if debug and log_file is not None:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)

            # --- File Handler (DEBUG) ---
            file_handler = FileHandler(log_file, mode="w", encoding="utf-8")
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(FileFormatter())
            logger.addHandler(file_handler)

            logger.info("Debug mode enabled. Detailed logs will be written to %s", log_file)
        except OSError:
            # Console logging keeps working without the file
            logger.exception("Failed to create debug log file. Continuing with console logging only.")

    return logger
