"""Lamp symbol policies, each a function of the lamp index within its stripe."""

from ..lamps import Lamp

QUARTER_HIGHLIGHT_INTERVAL = 3


def inactive_indicator(lamp_index: int) -> str:
    """Dark lamp, identical for every stripe."""
    return Lamp.OFF.value


def hour_indicator(lamp_index: int) -> str:
    """Hour lamps are always red."""
    return Lamp.RED.value


def minute_and_second_indicator(lamp_index: int) -> str:
    """Seconds lamp and single-minute lamps are always yellow."""
    return Lamp.YELLOW.value


def minute_main_indicator(lamp_index: int) -> str:
    """Five-minute lamps are yellow, except every third one which marks a quarter hour in red."""
    if (lamp_index + 1) % QUARTER_HIGHLIGHT_INTERVAL == 0:
        return Lamp.RED.value
    return Lamp.YELLOW.value


__all__ = [
    "hour_indicator",
    "inactive_indicator",
    "minute_and_second_indicator",
    "minute_main_indicator",
]
