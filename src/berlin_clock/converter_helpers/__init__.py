"""Helper modules for the time converter."""

from .stripe_builder import BERLIN_CLOCK_STRIPES, StripeLayout, build_stripe, count_active_lamps
from .time_format import is_supported_time_format, parse_time_parts

__all__ = [
    "BERLIN_CLOCK_STRIPES",
    "StripeLayout",
    "build_stripe",
    "count_active_lamps",
    "is_supported_time_format",
    "parse_time_parts",
]
