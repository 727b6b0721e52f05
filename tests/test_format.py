"""Tests for duration rendering and parsing."""

import pytest

from caldelta import Duration, WallClock, WallClockFormat, duration
from caldelta.errors import InvalidArgumentError, ParseError
from caldelta.format import format_duration, format_wallclock, parse_duration

HMS = duration(hours=1, minutes=3, seconds=4)
YMD = duration(years=1, months=3, days=4)


def test_long_style_lists_every_unit():
    """Long style names every nonzero unit, pluralized."""
    assert HMS.to_s() == "1 hour, 3 minutes, 4 seconds"
    assert YMD.to_s("long") == "1 year, 3 months, 4 days"
    assert str(HMS) == "1 hour, 3 minutes, 4 seconds"
    assert Duration.of(1, "week").to_s() == "1 week"
    assert duration(weeks=2, minutes=1).to_s() == "2 weeks, 1 minute"


def test_micro_style_keeps_largest_unit():
    """Micro style shows the largest unit with a single letter."""
    assert HMS.to_s("micro") == "1h"
    assert YMD.to_s("micro") == "1y"
    assert Duration.of(2, "months").to_s("micro") == "2M"
    assert Duration.of(2, "minutes").to_s("micro") == "2m"
    assert Duration.of(3, "weeks").to_s("micro") == "3w"
    assert Duration.of(6, "days").to_s("micro") == "6d"
    assert Duration.of(9, "seconds").to_s("micro") == "9s"


def test_short_style_keeps_two_largest_units():
    """Short style shows two units with fixed abbreviations."""
    assert HMS.to_s("short") == "1hr 3min"
    assert YMD.to_s("short") == "1yr 3mn"
    assert duration(weeks=1, seconds=5).to_s("short") == "1wk 5sec"
    assert duration(days=2).to_s("short") == "2dy"


def test_families_decompose_independently():
    """Calendar and fixed counters cascade separately, calendar first."""
    d = Duration(fixed_seconds=694861, calendar_months=14)
    assert d.components() == [
        ("year", 1),
        ("month", 2),
        ("week", 1),
        ("day", 1),
        ("hour", 1),
        ("minute", 1),
        ("second", 1),
    ]
    assert d.to_s() == (
        "1 year, 2 months, 1 week, 1 day, 1 hour, 1 minute, 1 second"
    )


def test_zero_duration_renders_zero_seconds():
    assert Duration().to_s() == "0 seconds"
    assert Duration().to_s("short") == "0sec"
    assert Duration().to_s("micro") == "0s"


def test_unknown_style_raises():
    with pytest.raises(InvalidArgumentError):
        format_duration(HMS, "medium")  # type: ignore[arg-type]


def test_parse_each_style():
    """Renderings in every style parse back."""
    assert parse_duration("1 hour, 3 minutes, 4 seconds") == HMS
    assert parse_duration("1 year, 3 months, 4 days") == YMD
    assert parse_duration("1hr 3min") == duration(hours=1, minutes=3)
    assert parse_duration("1yr 3mn") == duration(years=1, months=3)
    assert parse_duration("1h") == Duration.of(1, "hour")
    assert parse_duration("2M 5m") == duration(months=2, minutes=5)
    assert Duration.parse("0 seconds") == Duration()


def test_parse_is_lenient_about_separators_and_case():
    assert parse_duration("1 Hour,3 MINUTES") == duration(hours=1, minutes=3)
    assert parse_duration("1h3m4s") == HMS
    assert parse_duration("1h 1h") == Duration.of(2, "hours")


def test_long_rendering_round_trips():
    d = Duration(fixed_seconds=694861, calendar_months=14)
    assert parse_duration(d.to_s()) == d


def test_parse_rejects_malformed_text():
    for text in ("", "   ", "five minutes", "1 fortnight", "1h,,x", "h1", "1.5h"):
        with pytest.raises(ParseError):
            parse_duration(text)


def test_format_wallclock_rejects_unknown_clock():
    with pytest.raises(InvalidArgumentError):
        format_wallclock(WallClock(9), WallClockFormat(clock="metric"))  # type: ignore[arg-type]


def test_wallclock_format_defaults():
    fmt = WallClockFormat()
    assert fmt.clock == "twelve_hour"
    assert fmt.use_seconds is True
    assert fmt.include_meridiem is True
    assert format_wallclock(WallClock(13, 5), fmt) == "1:05:00 PM"
