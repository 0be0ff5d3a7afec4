"""
Conversion of wall-clock time strings to the Berlin Clock representation.

The clock shows time on five stripes of lamps, top to bottom:
- seconds: one yellow lamp, lit on odd seconds
- hours main: four red lamps of five hours each
- hours sub: four red lamps of one hour each
- minutes main: eleven lamps of five minutes each, every third one red
- minutes sub: four yellow lamps of one minute each

Example:
    >>> print(convert_time("13:17:01"))
    Y
    RROO
    RRRO
    YYROOOOOOOO
    YYOO
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from .converter_helpers import BERLIN_CLOCK_STRIPES, is_supported_time_format, parse_time_parts
from .exceptions import INVALID_TIME_FORMAT_MESSAGE, InvalidTimeFormatError
from .lamps import BerlinClockState
from .log_sink import LoggerLogSink, LogSink

logger = logging.getLogger(__name__)


class TimeConverterProtocol(Protocol):
    """Anything able to convert a time string to its Berlin Clock representation."""

    def convert_time(self, time_to_convert: str) -> str: ...


class TimeConverter:
    """Converts ``H:MM:SS`` / ``HH:MM:SS`` strings to Berlin Clock lamp rows.

    Holds no state besides the injected log sink, so one instance may serve
    concurrent callers as long as the sink does.
    """

    def __init__(self, log_sink: Optional[LogSink] = None) -> None:
        self.log_sink: LogSink = log_sink if log_sink is not None else LoggerLogSink(logger)

    def convert_time(self, time_to_convert: str) -> str:
        """
        Convert a time string to the five-line Berlin Clock representation.

        Args:
            time_to_convert: Time between 0:00:00 (or 00:00:00) and 24:59:59

        Returns:
            Five lines of lamp symbols joined by ``\\n``, widths 1, 4, 4, 11 and 4

        Raises:
            InvalidTimeFormatError: If the string is not in the supported format
        """
        return self.convert_state(time_to_convert).render()

    def convert_state(self, time_to_convert: str) -> BerlinClockState:
        """Same as ``convert_time`` but returns the individual stripes."""
        if not is_supported_time_format(time_to_convert):
            self.log_sink.error(INVALID_TIME_FORMAT_MESSAGE)
            raise InvalidTimeFormatError(value=time_to_convert)

        time_parts = parse_time_parts(time_to_convert)
        stripes = {stripe.name: stripe.render(time_parts) for stripe in BERLIN_CLOCK_STRIPES}
        state = BerlinClockState(time=time_parts, **stripes)
        self.log_sink.debug(f"Result: {state.render()}")
        return state


_DEFAULT_CONVERTER = TimeConverter()


def convert_time(time_to_convert: str) -> str:
    """Convert with a converter logging to the ``berlin_clock.converter`` logger."""
    return _DEFAULT_CONVERTER.convert_time(time_to_convert)


__all__ = ["TimeConverter", "TimeConverterProtocol", "convert_time"]
