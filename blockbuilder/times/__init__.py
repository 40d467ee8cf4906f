"""Date and time helpers for picker elements."""

from .lib import get_zone, next_five_minute_boundary, parse_clock_time, require_iso_date

__all__ = [
    "get_zone",
    "next_five_minute_boundary",
    "parse_clock_time",
    "require_iso_date",
]
