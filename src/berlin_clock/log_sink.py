"""
Logging capability injected into the converter.

The converter only needs two fire-and-forget operations, ``debug`` and
``error``. Any object providing them satisfies ``LogSink``; the default wraps a
stdlib logger so output follows whatever ``setup_logging`` configured.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol

DEFAULT_LOGGER_NAME = "berlin_clock.converter"


class LogSink(Protocol):
    """Protocol for the converter's instrumentation."""

    def debug(self, message: str) -> None:
        """Record a diagnostic message."""
        ...

    def error(self, message: str) -> None:
        """Record a failure."""
        ...


class LoggerLogSink:
    """Forwards messages to a stdlib ``logging.Logger``. Safe for concurrent use."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger if logger is not None else logging.getLogger(DEFAULT_LOGGER_NAME)

    def debug(self, message: str) -> None:
        # Messages may contain newlines or percent signs; pass them as an argument
        self.logger.debug("%s", message)

    def error(self, message: str) -> None:
        self.logger.error("%s", message)


class ConsoleLogSink:
    """Prints every message to stdout regardless of severity.

    Concurrent callers may interleave their output.
    """

    def debug(self, message: str) -> None:
        print(message)

    def error(self, message: str) -> None:
        print(message)


class NullLogSink:
    """Discards all messages."""

    def debug(self, message: str) -> None:
        return None

    def error(self, message: str) -> None:
        return None


__all__ = ["DEFAULT_LOGGER_NAME", "ConsoleLogSink", "LogSink", "LoggerLogSink", "NullLogSink"]
