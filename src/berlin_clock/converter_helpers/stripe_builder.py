"""Generic stripe rendering and the Berlin Clock stripe layout."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from ..lamps import TimeParts
from .lamp_indicators import (
    hour_indicator,
    inactive_indicator,
    minute_and_second_indicator,
    minute_main_indicator,
)

LampIndicator = Callable[[int], str]


def count_active_lamps(unit_per_lamp: int, value: int, is_sub_stripe: bool) -> int:
    """Quotient for main stripes, remainder for sub stripes."""
    if is_sub_stripe:
        return value % unit_per_lamp
    return value // unit_per_lamp


def build_stripe(
    lamp_count: int,
    unit_per_lamp: int,
    value: int,
    is_sub_stripe: bool,
    active_indicator: LampIndicator,
    inactive: LampIndicator,
) -> str:
    """
    Render one stripe of lamps.

    The first ``count_active_lamps(...)`` lamps, in index order, are rendered with
    *active_indicator*; the rest with *inactive*.

    Args:
        lamp_count: Number of lamps in the stripe
        unit_per_lamp: Time units represented by one lamp
        value: Time component shown on the stripe
        is_sub_stripe: True to display the remainder instead of the quotient
        active_indicator: Symbol for a lit lamp at a given index
        inactive: Symbol for a dark lamp at a given index

    Returns:
        String of exactly *lamp_count* symbols

    Raises:
        ValueError: If the stripe geometry is not positive
    """
    if lamp_count < 1 or unit_per_lamp < 1:
        raise ValueError(f"Stripe needs at least one lamp and one unit per lamp (got {lamp_count}, {unit_per_lamp})")

    active_lamps = count_active_lamps(unit_per_lamp, value, is_sub_stripe)
    return "".join(
        active_indicator(lamp_index) if lamp_index < active_lamps else inactive(lamp_index)
        for lamp_index in range(lamp_count)
    )


@dataclass(frozen=True)
class StripeLayout:
    """Parameters of one stripe of the clock"""

    name: str
    component: str  # attribute of TimeParts shown on this stripe
    lamp_count: int
    unit_per_lamp: int
    is_sub_stripe: bool
    active_indicator: LampIndicator
    inactive_indicator: LampIndicator = inactive_indicator

    def render(self, time_parts: TimeParts) -> str:
        return build_stripe(
            self.lamp_count,
            self.unit_per_lamp,
            getattr(time_parts, self.component),
            self.is_sub_stripe,
            self.active_indicator,
            self.inactive_indicator,
        )


# Output order: seconds, hours main, hours sub, minutes main, minutes sub
BERLIN_CLOCK_STRIPES: tuple[StripeLayout, ...] = (
    StripeLayout("seconds", "seconds", 1, 2, True, minute_and_second_indicator),
    StripeLayout("hours_main", "hours", 4, 5, False, hour_indicator),
    StripeLayout("hours_sub", "hours", 4, 5, True, hour_indicator),
    StripeLayout("minutes_main", "minutes", 11, 5, False, minute_main_indicator),
    StripeLayout("minutes_sub", "minutes", 4, 5, True, minute_and_second_indicator),
)


__all__ = ["BERLIN_CLOCK_STRIPES", "LampIndicator", "StripeLayout", "build_stripe", "count_active_lamps"]
