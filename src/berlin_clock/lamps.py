"""Value types shared by the converter and its renderers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

ROW_SEPARATOR = "\n"


class Lamp(Enum):
    """Single-character symbols for the state of one lamp"""

    YELLOW = "Y"
    RED = "R"
    OFF = "O"


@dataclass(frozen=True)
class TimeParts:
    """Hour, minute and second components of a validated time string"""

    hours: int
    minutes: int
    seconds: int


@dataclass(frozen=True)
class BerlinClockState:
    """Rendered stripes for one point in time, top row first"""

    time: TimeParts
    seconds: str
    hours_main: str
    hours_sub: str
    minutes_main: str
    minutes_sub: str

    @property
    def rows(self) -> tuple[str, str, str, str, str]:
        return (self.seconds, self.hours_main, self.hours_sub, self.minutes_main, self.minutes_sub)

    def render(self) -> str:
        """Join the stripes into the multi-line clock representation (no trailing newline)."""
        return ROW_SEPARATOR.join(self.rows)


__all__ = ["ROW_SEPARATOR", "BerlinClockState", "Lamp", "TimeParts"]
