from .calendar import (
    apply,
    at,
    days_in_month,
    is_leap_year,
    shift_months,
    to_date,
    to_time,
    tomorrow,
    yesterday,
)
from .duration import Duration, combine, duration
from .errors import (
    CaldeltaError,
    InvalidArgumentError,
    ParseError,
    TimeIsInTheFutureError,
    TimeIsInThePastError,
    TimeOutOfBoundsError,
)
from .format import WallClockFormat, format_duration, format_wallclock, parse_duration
from .interval import between, since, until
from .util import SECONDS_PER_MONTH
from .wallclock import WallClock

__all__ = [
    "Duration",
    "WallClock",
    "WallClockFormat",
    "duration",
    "combine",
    "apply",
    "shift_months",
    "days_in_month",
    "is_leap_year",
    "to_time",
    "to_date",
    "yesterday",
    "tomorrow",
    "at",
    "format_duration",
    "format_wallclock",
    "parse_duration",
    "until",
    "since",
    "between",
    "SECONDS_PER_MONTH",
    "CaldeltaError",
    "TimeOutOfBoundsError",
    "InvalidArgumentError",
    "ParseError",
    "TimeIsInThePastError",
    "TimeIsInTheFutureError",
]
