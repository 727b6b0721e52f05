"""Calendar-aware durations.

A Duration keeps fixed-length units (seconds through weeks) and
variable-length calendar units (months, years) in two separate counters,
so that a month can be applied to a date as "the same day next month"
rather than as some number of seconds.
"""

from dataclasses import dataclass
from datetime import date, datetime
from functools import reduce
from typing import TYPE_CHECKING, Any

from typing_extensions import override

from caldelta.errors import InvalidArgumentError, TimeOutOfBoundsError
from caldelta.util import (
    CALENDAR_UNITS,
    DAY,
    FIXED_UNITS,
    HOUR,
    MINUTE,
    SECONDS_PER_MONTH,
    UNIT_ORDER,
    WEEK,
    normalize_unit,
)

if TYPE_CHECKING:
    from caldelta.format import DurationStyle
    from caldelta.wallclock import WallClock


def _check_count(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"{name} must be an integer, got {type(value).__name__}: {value!r}"
        )
    if value < 0:
        raise InvalidArgumentError(
            f"{name} must be >= 0, got {value}.\n"
            f"Hint: Durations carry no sign. Use before()/ago() for the past:\n"
            f"  Duration.of(5, 'minute').before(moment)"
        )


@dataclass(frozen=True, kw_only=True)
class Duration:
    """An amount of elapsed time split into fixed seconds and calendar months.

    Example:
        >>> d = duration(hours=5, minutes=30)
        >>> d.get("minutes")
        330
        >>> Duration.of(1, "month").after(datetime(2000, 1, 31))
        datetime.datetime(2000, 2, 29, 0, 0)
    """

    fixed_seconds: int = 0
    calendar_months: int = 0

    def __post_init__(self) -> None:
        _check_count("fixed_seconds", self.fixed_seconds)
        _check_count("calendar_months", self.calendar_months)

    @classmethod
    def of(cls, amount: int, unit: str) -> "Duration":
        """Build a Duration from a single unit-tagged amount.

        Args:
            amount: Non-negative number of units
            unit: Unit tag, singular or plural ("minute", "minutes", ...)

        Raises:
            InvalidArgumentError: If the unit is unknown or amount is negative
        """
        tag = normalize_unit(unit)
        _check_count(tag, amount)
        if tag in CALENDAR_UNITS:
            return cls(calendar_months=amount * CALENDAR_UNITS[tag])
        return cls(fixed_seconds=amount * FIXED_UNITS[tag])

    @classmethod
    def parse(cls, text: str) -> "Duration":
        """Parse a rendering produced by to_s() in any style."""
        from caldelta.format import parse_duration

        return parse_duration(text)

    def get(self, unit: str) -> int:
        """Return whole units of ``unit`` held in that unit's own counter.

        Fixed units read fixed_seconds and calendar units read
        calendar_months; nothing is converted between the two. Call
        average() or unaverage() first to move time across.
        """
        tag = normalize_unit(unit)
        if tag in CALENDAR_UNITS:
            return self.calendar_months // CALENDAR_UNITS[tag]
        return self.fixed_seconds // FIXED_UNITS[tag]

    def average(self) -> "Duration":
        """Move as many whole mean months as fit from seconds into months."""
        months, seconds = divmod(self.fixed_seconds, SECONDS_PER_MONTH)
        return Duration(
            fixed_seconds=seconds, calendar_months=self.calendar_months + months
        )

    def unaverage(self) -> "Duration":
        """Move all calendar months into seconds at the mean month length."""
        return Duration(
            fixed_seconds=self.fixed_seconds
            + self.calendar_months * SECONDS_PER_MONTH
        )

    def total_seconds(self) -> int:
        return self.unaverage().fixed_seconds

    def in_seconds(self) -> int:
        return self.total_seconds()

    def in_minutes(self) -> int:
        return self.total_seconds() // MINUTE

    def in_hours(self) -> int:
        return self.total_seconds() // HOUR

    def in_days(self) -> int:
        return self.total_seconds() // DAY

    def in_weeks(self) -> int:
        return self.total_seconds() // WEEK

    def is_zero(self) -> bool:
        return self.fixed_seconds == 0 and self.calendar_months == 0

    def __bool__(self) -> bool:
        return not self.is_zero()

    def components(self) -> list[tuple[str, int]]:
        """Decompose into nonzero (unit, count) pairs, largest unit first.

        Each family cascades its own remainder: years then months for
        calendar_months, weeks down to seconds for fixed_seconds.
        """
        counts: dict[str, int] = {}
        remaining = self.calendar_months
        for unit, size in CALENDAR_UNITS.items():
            counts[unit], remaining = divmod(remaining, size)
        remaining = self.fixed_seconds
        for unit, size in FIXED_UNITS.items():
            counts[unit], remaining = divmod(remaining, size)
        return [(unit, counts[unit]) for unit in UNIT_ORDER if counts[unit]]

    def before(self, origin: date) -> datetime:
        """Return the moment this duration before ``origin``."""
        from caldelta.calendar import apply

        return apply(origin, self, "before")

    def after(self, origin: date) -> datetime:
        """Return the moment this duration after ``origin``."""
        from caldelta.calendar import apply

        return apply(origin, self, "after")

    def ago(self, now: datetime | None = None) -> datetime:
        return self.before(now if now is not None else datetime.now())

    def from_now(self, now: datetime | None = None) -> datetime:
        return self.after(now if now is not None else datetime.now())

    def to_wall(self) -> "WallClock":
        """Read this duration as elapsed time since midnight.

        Raises:
            TimeOutOfBoundsError: If the duration holds calendar months or
                is a whole day or longer
        """
        from caldelta.wallclock import WallClock

        if self.calendar_months != 0:
            raise TimeOutOfBoundsError(
                f"Cannot convert {self} to a wall clock time: calendar months "
                f"have no fixed length.\n"
                f"Hint: unaverage() first if an approximation is acceptable"
            )
        if self.fixed_seconds >= DAY:
            raise TimeOutOfBoundsError(
                f"Cannot convert {self} to a wall clock time: "
                f"{self.fixed_seconds}s is not within a single day (< {DAY}s)"
            )
        return WallClock.from_seconds(self.fixed_seconds)

    def to_s(self, style: "DurationStyle" = "long") -> str:
        """Render as text; see caldelta.format.format_duration."""
        from caldelta.format import format_duration

        return format_duration(self, style)

    @override
    def __str__(self) -> str:
        return self.to_s()

    def __add__(self, other: Any) -> Any:
        if isinstance(other, Duration):
            return combine(self, other)
        if isinstance(other, date):
            return self.after(other)
        return NotImplemented

    def __radd__(self, other: Any) -> Any:
        # 0 is sum()'s start value
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        if isinstance(other, date):
            return self.after(other)
        return NotImplemented

    def __rsub__(self, other: Any) -> Any:
        if isinstance(other, date):
            return self.before(other)
        return NotImplemented


def combine(*durations: Duration) -> Duration:
    """Sum durations counter by counter (equivalent to chaining ``+``).

    Order has no effect; combine() with no arguments is the zero duration.
    """

    def reducer(acc: Duration, nxt: Duration) -> Duration:
        return Duration(
            fixed_seconds=acc.fixed_seconds + nxt.fixed_seconds,
            calendar_months=acc.calendar_months + nxt.calendar_months,
        )

    return reduce(reducer, durations, Duration())


def duration(**units: int) -> Duration:
    """Build a Duration from keyword unit amounts.

    Example:
        >>> duration(hours=1, minutes=3, seconds=4).to_s()
        '1 hour, 3 minutes, 4 seconds'
        >>> duration(years=1, months=3, days=4).to_s("short")
        '1yr 3mn'
    """
    return combine(*(Duration.of(amount, unit) for unit, amount in units.items()))
