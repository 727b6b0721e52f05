"""caldelta exception hierarchy.

Every exception derives from CaldeltaError and from ValueError, so callers
may catch either.
"""


class CaldeltaError(Exception):
    """Base exception for all caldelta errors."""


class TimeOutOfBoundsError(CaldeltaError, ValueError):
    """A time of day falls outside [00:00:00, 24:00:00).

    Also raised when a Duration cannot be read as a time of day, i.e. it
    carries calendar months or spans a whole day or more.
    """


class InvalidArgumentError(CaldeltaError, ValueError):
    """An unrecognized unit, style, clock format or direction tag."""


class ParseError(CaldeltaError, ValueError):
    """A string does not match any recognized time or duration pattern."""


class TimeIsInThePastError(CaldeltaError, ValueError):
    """until() was asked for a moment that has already passed."""


class TimeIsInTheFutureError(CaldeltaError, ValueError):
    """since() was asked for a moment that has not happened yet."""


__all__ = [
    "CaldeltaError",
    "TimeOutOfBoundsError",
    "InvalidArgumentError",
    "ParseError",
    "TimeIsInThePastError",
    "TimeIsInTheFutureError",
]
