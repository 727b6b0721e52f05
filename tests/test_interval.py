"""Tests for until/since/between."""

from datetime import date, datetime, timedelta, timezone

import pytest

from caldelta import Duration, between, since, tomorrow, until, yesterday
from caldelta.errors import TimeIsInTheFutureError, TimeIsInThePastError

NOW = datetime(2000, 1, 1, 12, 0, 0)


def test_until_a_future_moment():
    assert until(NOW + timedelta(minutes=1), now=NOW).in_seconds() == 60
    assert until(date(2000, 1, 2), now=NOW) == Duration.of(12, "hours")


def test_since_a_past_moment():
    assert since(NOW - timedelta(hours=1), now=NOW).in_seconds() == 3600
    assert since(date(2000, 1, 1), now=NOW) == Duration.of(12, "hours")


def test_until_rejects_the_past():
    """until() needs a moment strictly after now."""
    with pytest.raises(TimeIsInThePastError):
        until(NOW - timedelta(minutes=1), now=NOW)

    with pytest.raises(TimeIsInThePastError):
        until(NOW, now=NOW)


def test_since_rejects_the_future():
    """since() needs a moment strictly before now."""
    with pytest.raises(TimeIsInTheFutureError):
        since(NOW + timedelta(minutes=1), now=NOW)

    with pytest.raises(TimeIsInTheFutureError):
        since(NOW, now=NOW)


def test_between_is_symmetric():
    a = datetime(2000, 1, 1, 0, 1, 0)
    b = datetime(2000, 1, 1, 0, 2, 0)
    assert between(a, b) == between(b, a) == Duration.of(1, "minute")
    assert between(a, a) == Duration()
    assert between(date(1999, 12, 31), date(2000, 1, 2)).in_seconds() == (
        Duration.of(2, "days").in_seconds()
    )


def test_results_hold_fixed_seconds_only():
    """Long spans are not split into calendar months until averaged."""
    span = between(datetime(2000, 1, 1), datetime(2000, 3, 1))
    assert span.calendar_months == 0
    assert span == Duration.of(60, "days")
    assert span.average().get("months") == 1


def test_sub_second_differences_truncate():
    assert between(NOW, NOW + timedelta(seconds=1, microseconds=500000)) == (
        Duration.of(1, "second")
    )


def test_against_the_system_clock():
    """Without an injected now, the current moment is used."""
    remaining = until(Duration.of(1, "minute").from_now())
    assert 58 <= remaining.in_seconds() <= 60

    elapsed = since(Duration.of(1, "hour").ago())
    assert 3600 <= elapsed.in_seconds() <= 3602

    today = date.today()
    assert between(yesterday(today), tomorrow(today)).in_seconds() == 2 * 86400

    with pytest.raises(TimeIsInThePastError):
        until(Duration.of(1, "minute").ago())

    with pytest.raises(TimeIsInTheFutureError):
        since(tomorrow())


def test_timezone_aware_targets():
    """Aware targets are compared against an aware now."""
    future = datetime.now(timezone.utc) + timedelta(hours=2)
    assert 7190 <= until(future).in_seconds() <= 7200
