"""Time of day with no date attached.

A WallClock stores seconds since midnight in a single slot. It can be
built from 12- or 24-hour fields, a raw second count, a field mapping or
a string, and combined with a date to produce a datetime.
"""

import logging
import re
from collections.abc import Mapping
from datetime import date, datetime
from functools import total_ordering
from typing import Any, Literal, TypeAlias

from typing_extensions import override

from caldelta.duration import Duration
from caldelta.errors import InvalidArgumentError, ParseError, TimeOutOfBoundsError
from caldelta.format import ClockFormat, WallClockFormat, format_wallclock
from caldelta.util import DAY, HOUR, MINUTE

logger = logging.getLogger(__name__)

Meridiem: TypeAlias = Literal["am", "pm"]

_PATTERN = re.compile(
    r"^\s*(?P<hour>\d{1,2}):(?P<minute>\d{2})(?::(?P<second>\d{2}))?"
    r"(?:\s*(?P<meridiem>[ap]m))?\s*$",
    re.IGNORECASE,
)

_FIELDS = {"hour": HOUR, "minute": MINUTE, "second": 1}


def _check_int(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"{name} must be an integer, got {type(value).__name__}: {value!r}"
        )


def _check_range(name: str, value: int, low: int, high: int) -> None:
    _check_int(name, value)
    if not (low <= value <= high):
        raise TimeOutOfBoundsError(
            f"{name} must be between {low} and {high}, got {value}"
        )


@total_ordering
class WallClock:
    """A time of day, from 0:00:00 up to 23:59:59.

    Example:
        >>> WallClock(5, 30, meridiem="pm").hour()
        17
        >>> WallClock.from_string("9:00 PM") == WallClock(21, 0)
        True
        >>> WallClock(9, 0, meridiem="pm").on(date(2000, 1, 1))
        datetime.datetime(2000, 1, 1, 21, 0)
    """

    __slots__ = ("_seconds",)

    def __init__(
        self,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        meridiem: str | None = None,
    ) -> None:
        """Create a WallClock from clock fields.

        Args:
            hour: 0-23, or 1-12 when meridiem is given
            minute: 0-59
            second: 0-59
            meridiem: "am" or "pm" (case-insensitive) for 12-hour input

        Raises:
            TimeOutOfBoundsError: If any field is out of range
            InvalidArgumentError: If a field is not an integer or meridiem
                is not "am" or "pm"
        """
        if meridiem is None:
            _check_range("hour", hour, 0, 23)
        else:
            tag = meridiem.lower() if isinstance(meridiem, str) else meridiem
            if tag not in ("am", "pm"):
                raise InvalidArgumentError(
                    f"meridiem must be 'am' or 'pm', got {meridiem!r}"
                )
            _check_range("12-hour hour", hour, 1, 12)
            hour = hour % 12 + (12 if tag == "pm" else 0)
        _check_range("minute", minute, 0, 59)
        _check_range("second", second, 0, 59)
        object.__setattr__(self, "_seconds", hour * HOUR + minute * MINUTE + second)

    @classmethod
    def from_seconds(cls, seconds: int) -> "WallClock":
        """Create a WallClock from seconds since midnight."""
        _check_int("seconds", seconds)
        if not (0 <= seconds < DAY):
            raise TimeOutOfBoundsError(
                f"Seconds since midnight must be in [0, {DAY}), got {seconds}"
            )
        wall = cls.__new__(cls)
        object.__setattr__(wall, "_seconds", seconds)
        return wall

    @classmethod
    def from_fields(
        cls, fields: Mapping[str, int] | None = None, **kwargs: int
    ) -> "WallClock":
        """Create a WallClock from any of hour/minute/second.

        Missing fields count as zero. Fields are not capped individually,
        so ``from_fields(second=1800)`` is 0:30:00; only the combined time
        must fall within one day.

        Example:
            >>> WallClock.from_fields({"hour": 9, "minute": 15}).to_s()
            '9:15:00 AM'
        """
        merged: dict[str, int] = {**(fields or {}), **kwargs}
        unknown = set(merged) - set(_FIELDS)
        if unknown:
            raise InvalidArgumentError(
                f"Unknown wall clock field(s): {', '.join(sorted(unknown))}\n"
                f"Valid fields: hour, minute, second"
            )
        total = 0
        for name, value in merged.items():
            _check_int(name, value)
            if value < 0:
                raise TimeOutOfBoundsError(f"{name} must be >= 0, got {value}")
            total += value * _FIELDS[name]
        return cls.from_seconds(total)

    @classmethod
    def from_string(cls, text: str) -> "WallClock":
        """Parse ``H:MM[:SS] AM|PM`` or ``H:MM[:SS]`` (24-hour).

        Raises:
            ParseError: If text matches neither form
            TimeOutOfBoundsError: If a field is out of range for its form
        """
        match = _PATTERN.match(text) if isinstance(text, str) else None
        if match is None:
            logger.debug("Rejected wall clock string %r", text)
            raise ParseError(
                f"Cannot parse {text!r} as a wall clock time.\n"
                f"Expected 'H:MM[:SS] AM|PM' or 'HH:MM[:SS]', e.g. '9:00 PM', '21:00:30'"
            )
        return cls(
            int(match["hour"]),
            int(match["minute"]),
            int(match["second"] or 0),
            match["meridiem"],
        )

    @classmethod
    def from_datetime(cls, moment: datetime) -> "WallClock":
        return cls(moment.hour, moment.minute, moment.second)

    @classmethod
    def now(cls) -> "WallClock":
        return cls.from_datetime(datetime.now())

    def hour(self, clock: ClockFormat = "twenty_four_hour") -> int:
        """Return the hour on a 24-hour (0-23) or 12-hour (1-12) clock."""
        hour = self._seconds // HOUR
        if clock == "twenty_four_hour":
            return hour
        if clock == "twelve_hour":
            return hour % 12 or 12
        raise InvalidArgumentError(
            f"clock must be 'twelve_hour' or 'twenty_four_hour', got {clock!r}"
        )

    def minute(self) -> int:
        return self._seconds % HOUR // MINUTE

    def second(self) -> int:
        return self._seconds % MINUTE

    def meridiem(self) -> Meridiem:
        return "am" if self.hour() < 12 else "pm"

    def in_seconds(self) -> int:
        return self._seconds

    def in_minutes(self) -> int:
        return self._seconds // MINUTE

    def in_hours(self) -> int:
        return self._seconds // HOUR

    def to_int(self) -> int:
        return self._seconds

    def __int__(self) -> int:
        return self._seconds

    @override
    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"WallClock is immutable; cannot set {name!r}")

    @override
    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"WallClock is immutable; cannot delete {name!r}")

    def on(self, day: date) -> datetime:
        """Return the datetime at this time of day on ``day``."""
        return datetime(
            day.year, day.month, day.day, self.hour(), self.minute(), self.second()
        )

    def to_relative(self) -> Duration:
        """Return the time elapsed since midnight."""
        return Duration(fixed_seconds=self._seconds)

    def to_s(self, fmt: WallClockFormat | None = None) -> str:
        """Render as text; see caldelta.format.format_wallclock."""
        return format_wallclock(self, fmt if fmt is not None else WallClockFormat())

    @override
    def __str__(self) -> str:
        return self.to_s()

    @override
    def __repr__(self) -> str:
        return f"WallClock({self.hour()}, {self.minute()}, {self.second()})"

    @override
    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, WallClock):
            return NotImplemented
        return self._seconds == other._seconds

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, WallClock):
            return NotImplemented
        return self._seconds < other._seconds

    @override
    def __hash__(self) -> int:
        return hash(self._seconds)
