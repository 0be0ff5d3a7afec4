"""JSON rendering of Berlin Clock states."""

from __future__ import annotations

from typing import Any

import orjson

from .lamps import BerlinClockState


def state_to_dict(state: BerlinClockState, time_string: str) -> dict[str, Any]:
    """Build the JSON-ready payload for *state* as converted from *time_string*."""
    return {
        "time": time_string,
        "hours": state.time.hours,
        "minutes": state.time.minutes,
        "seconds": state.time.seconds,
        "rows": {
            "seconds": state.seconds,
            "hours_main": state.hours_main,
            "hours_sub": state.hours_sub,
            "minutes_main": state.minutes_main,
            "minutes_sub": state.minutes_sub,
        },
        "clock": state.render(),
    }


def state_to_json(state: BerlinClockState, time_string: str, *, indent: bool = False) -> str:
    option = orjson.OPT_INDENT_2 if indent else 0
    return orjson.dumps(state_to_dict(state, time_string), option=option).decode("utf-8")


__all__ = ["state_to_dict", "state_to_json"]
