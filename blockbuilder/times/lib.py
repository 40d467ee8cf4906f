"""Date and time helpers used by date and time pickers."""

import re
from datetime import datetime, timedelta
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from blockbuilder.constraints import ShapeViolation

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_CLOCK_FORMATS = ("%I:%M %p", "%I:%M%p", "%H:%M")


def get_zone(name: str) -> ZoneInfo:
    """Look up an IANA zone, raising ShapeViolation for unknown names."""
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ShapeViolation(
            f"Expected timezone to be a known IANA zone. Received: {name}",
            field="timezone",
        ) from e


def next_five_minute_boundary(
    zone: str | None = None, now: datetime | None = None
) -> str:
    """Round the current time up to the next 5-minute mark, as ``HH:MM``.

    A time already on a boundary moves to the following one, and seconds
    are ignored.

    Args:
        zone: IANA zone name; local time when None.
        now: Reference instant, defaulting to the current time.
    """
    tz = get_zone(zone) if zone else None
    if now is None:
        current = datetime.now(tz) if tz else datetime.now().astimezone()
    else:
        current = now.astimezone(tz) if tz else now
    step = 5 - current.minute % 5
    return (current + timedelta(minutes=step)).strftime("%H:%M")


def parse_clock_time(value: str) -> str:
    """Parse an ``hh:mm a`` clock string into 24-hour ``HH:MM``.

    Plain 24-hour ``HH:MM`` input is accepted as well.

    Raises:
        ShapeViolation: The string matches none of the accepted formats.
    """
    text = value.strip()
    for fmt in _CLOCK_FORMATS:
        try:
            return datetime.strptime(text, fmt).strftime("%H:%M")
        except ValueError:
            continue
    raise ShapeViolation(
        f"Expected initial_time to be a time in hh:mm a format. Received: {value}",
        field="initial_time",
    )


def require_iso_date(value: str, field: str = "initial_date") -> None:
    """Require a real calendar date written strictly as ``YYYY-MM-DD``."""
    if not isinstance(value, str) or not _ISO_DATE.match(value):
        raise ShapeViolation(
            f"Expected {field} to be a valid date in format YYYY-MM-DD."
            f" Received: {value}",
            field=field,
        )
    try:
        datetime.strptime(value, "%Y-%m-%d")
    except ValueError as e:
        raise ShapeViolation(
            f"Expected {field} to be a valid date in format YYYY-MM-DD."
            f" Received: {value}",
            field=field,
        ) from e


__all__ = [
    "get_zone",
    "next_five_minute_boundary",
    "parse_clock_time",
    "require_iso_date",
]
