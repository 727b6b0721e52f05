"""Calendar arithmetic for applying Durations to absolute times.

Calendar months are applied to the month/day fields, clamping the day
down to the end of a shorter month. Fixed seconds are then applied as
plain elapsed time. Month shifting is delegated to python-dateutil's
relativedelta, which implements exactly that clamp-down rule.
"""

import logging
from datetime import date, datetime, time, timedelta
from typing import TYPE_CHECKING, Literal, TypeAlias

from dateutil.relativedelta import relativedelta

from caldelta.duration import Duration
from caldelta.errors import InvalidArgumentError

if TYPE_CHECKING:
    from caldelta.wallclock import WallClock

logger = logging.getLogger(__name__)

Direction: TypeAlias = Literal["before", "after"]

_SIGNS: dict[str, int] = {"before": -1, "after": 1}

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in ``month`` of ``year`` (Gregorian).

    Raises:
        InvalidArgumentError: If month is outside 1-12
    """
    if not (1 <= month <= 12):
        raise InvalidArgumentError(f"month must be between 1 and 12, got {month}")
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def to_time(day: date) -> datetime:
    """Return midnight at the start of ``day``; datetimes pass through."""
    if isinstance(day, datetime):
        return day
    return datetime.combine(day, time.min)


def to_date(moment: datetime) -> date:
    return moment.date()


def yesterday(today: date | None = None) -> date:
    return (today if today is not None else date.today()) - timedelta(days=1)


def tomorrow(today: date | None = None) -> date:
    return (today if today is not None else date.today()) + timedelta(days=1)


def at(day: date, wall: "WallClock") -> datetime:
    """Return the moment ``wall`` o'clock on ``day``."""
    return wall.on(day)


def shift_months(origin: date, months: int) -> datetime:
    """Move ``origin`` by a signed number of calendar months.

    The time of day is kept. When the origin day does not exist in the
    target month it is clamped down to that month's last day, never
    rolled into the following month.
    """
    origin = to_time(origin)
    shifted = origin + relativedelta(months=months)
    if shifted.day != origin.day:
        logger.debug(
            "Clamped day %d to %d shifting %s by %d months",
            origin.day,
            shifted.day,
            origin.isoformat(),
            months,
        )
    return shifted


def apply(origin: date, duration: Duration, direction: Direction) -> datetime:
    """Apply ``duration`` to ``origin`` in the given direction.

    Calendar months are applied first (see shift_months), then fixed
    seconds as an exact offset, which may carry across day, month and
    year boundaries.

    Args:
        origin: Starting moment; a plain date means midnight on that date
        duration: Amount of time to move
        direction: "before" or "after"

    Returns:
        The resulting datetime, with origin's tzinfo preserved

    Example:
        >>> apply(datetime(2000, 3, 31, 3, 45), Duration.of(1, "month"), "before")
        datetime.datetime(2000, 2, 29, 3, 45)
    """
    if direction not in _SIGNS:
        raise InvalidArgumentError(
            f"direction must be 'before' or 'after', got {direction!r}"
        )
    sign = _SIGNS[direction]
    shifted = shift_months(origin, sign * duration.calendar_months)
    return shifted + timedelta(seconds=sign * duration.fixed_seconds)
