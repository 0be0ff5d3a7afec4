"""
Validation and parsing of the supported time grammar.

Accepted strings are ``H:MM:SS`` or ``HH:MM:SS`` with hours in 0..24 and
minutes/seconds in 0..59. The upper bound is 24:59:59 so that midnight can be
written as 24:00:00; other 24-hour values are not rejected.
"""

from __future__ import annotations

import re

from ..exceptions import TimeFormatInvariantError
from ..lamps import TimeParts

SUPPORTED_TIME_PATTERN = re.compile(r"(?:0?[0-9]|1[0-9]|2[0-4]):[0-5][0-9]:[0-5][0-9]")
TIME_SEPARATOR = ":"
TIME_PART_COUNT = 3


def is_supported_time_format(value: object) -> bool:
    """Return True when *value* is a string in the supported time grammar."""
    if not isinstance(value, str):
        return False
    return SUPPORTED_TIME_PATTERN.fullmatch(value) is not None


def parse_time_parts(value: str) -> TimeParts:
    """
    Split a validated time string into its integer components.

    Args:
        value: Time string already accepted by ``is_supported_time_format``

    Returns:
        TimeParts with hours, minutes and seconds

    Raises:
        TimeFormatInvariantError: If *value* cannot be parsed. This indicates the
            caller skipped validation, not bad user input.
    """
    parts = value.split(TIME_SEPARATOR)
    if len(parts) != TIME_PART_COUNT:
        raise TimeFormatInvariantError(f"Expected {TIME_PART_COUNT} time components in {value!r}", value=value)

    try:
        hours, minutes, seconds = (int(part) for part in parts)
    except ValueError as exc:
        raise TimeFormatInvariantError(f"Non-numeric time component in {value!r}", value=value) from exc

    return TimeParts(hours=hours, minutes=minutes, seconds=seconds)


__all__ = ["SUPPORTED_TIME_PATTERN", "is_supported_time_format", "parse_time_parts"]
