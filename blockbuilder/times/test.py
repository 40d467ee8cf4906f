"""Unit tests for time helpers."""

import re
from datetime import UTC, datetime

import pytest

from blockbuilder.constraints import ShapeViolation
from blockbuilder.times import (
    get_zone,
    next_five_minute_boundary,
    parse_clock_time,
    require_iso_date,
)


class TestNextFiveMinuteBoundary:
    """Tests for next_five_minute_boundary."""

    @pytest.mark.unit
    def test_rounds_up(self):
        """Times between boundaries round up."""
        now = datetime(2024, 3, 1, 9, 12, 40, tzinfo=UTC)
        assert next_five_minute_boundary("UTC", now=now) == "09:15"

    @pytest.mark.unit
    def test_on_boundary_moves_to_next(self):
        """A time already on a boundary advances a full step."""
        now = datetime(2024, 3, 1, 9, 15, tzinfo=UTC)
        assert next_five_minute_boundary("UTC", now=now) == "09:20"

    @pytest.mark.unit
    def test_crosses_hour(self):
        """Rounding may roll over into the next hour."""
        now = datetime(2024, 3, 1, 23, 58, tzinfo=UTC)
        assert next_five_minute_boundary("UTC", now=now) == "00:00"

    @pytest.mark.unit
    def test_zone_conversion(self):
        """The reference instant is shown in the requested zone."""
        now = datetime(2024, 1, 15, 12, 1, tzinfo=UTC)
        assert next_five_minute_boundary("Asia/Kolkata", now=now) == "17:35"

    @pytest.mark.unit
    def test_local_time_format(self):
        """Without a zone the local time is used."""
        assert re.fullmatch(r"\d{2}:\d{2}", next_five_minute_boundary())

    @pytest.mark.unit
    def test_unknown_zone(self):
        """Unknown zones raise ShapeViolation."""
        with pytest.raises(ShapeViolation):
            get_zone("Mars/Olympus_Mons")


class TestParseClockTime:
    """Tests for parse_clock_time."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("02:30 PM", "14:30"),
            ("12:05 am", "00:05"),
            ("9:00 AM", "09:00"),
            ("07:45pm", "19:45"),
            ("18:20", "18:20"),
        ],
    )
    def test_parses(self, value, expected):
        """Clock strings are converted to 24-hour time."""
        assert parse_clock_time(value) == expected

    @pytest.mark.unit
    def test_invalid(self):
        """Unparseable strings raise ShapeViolation."""
        with pytest.raises(ShapeViolation):
            parse_clock_time("half past nine")


class TestRequireIsoDate:
    """Tests for require_iso_date."""

    @pytest.mark.unit
    def test_valid(self):
        """Well-formed real dates pass."""
        require_iso_date("2024-02-29")

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["2024-2-9", "2023-02-29", "29/02/2024", "tomorrow"])
    def test_invalid(self, value):
        """Loose formats and impossible dates are rejected."""
        with pytest.raises(ShapeViolation):
            require_iso_date(value)
