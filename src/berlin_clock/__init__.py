"""Berlin Clock conversion of wall-clock time strings."""

from .converter import TimeConverter, TimeConverterProtocol, convert_time
from .exceptions import InvalidTimeFormatError
from .lamps import BerlinClockState, Lamp, TimeParts
from .log_sink import ConsoleLogSink, LoggerLogSink, LogSink, NullLogSink

__version__ = "1.0.0"

__all__ = [
    "BerlinClockState",
    "ConsoleLogSink",
    "InvalidTimeFormatError",
    "Lamp",
    "LogSink",
    "LoggerLogSink",
    "NullLogSink",
    "TimeConverter",
    "TimeConverterProtocol",
    "TimeParts",
    "convert_time",
]
