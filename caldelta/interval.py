"""Elapsed time between two moments, or between a moment and now.

All helpers return whole fixed seconds only; call average() on the
result to express it in calendar months.
"""

import logging
from datetime import date, datetime

from caldelta.calendar import to_time
from caldelta.duration import Duration
from caldelta.errors import TimeIsInTheFutureError, TimeIsInThePastError
from caldelta.util import DAY

logger = logging.getLogger(__name__)


def _now_for(target: datetime, now: datetime | None) -> datetime:
    if now is not None:
        return to_time(now)
    now = datetime.now(target.tzinfo)
    logger.debug("Read current moment %s", now.isoformat())
    return now


def _elapsed(start: datetime, end: datetime) -> Duration:
    delta = end - start
    return Duration(fixed_seconds=delta.days * DAY + delta.seconds)


def until(target: date, now: datetime | None = None) -> Duration:
    """Return the time remaining from now until ``target``.

    Args:
        target: Future moment; a plain date means midnight on that date
        now: Current moment (defaults to the system clock)

    Raises:
        TimeIsInThePastError: If target is not strictly after now
    """
    target = to_time(target)
    now = _now_for(target, now)
    if target <= now:
        raise TimeIsInThePastError(
            f"until() needs a future moment, got {target.isoformat()} "
            f"(now is {now.isoformat()}).\n"
            f"Hint: Use since() for moments in the past"
        )
    return _elapsed(now, target)


def since(target: date, now: datetime | None = None) -> Duration:
    """Return the time elapsed from ``target`` until now.

    Args:
        target: Past moment; a plain date means midnight on that date
        now: Current moment (defaults to the system clock)

    Raises:
        TimeIsInTheFutureError: If target is not strictly before now
    """
    target = to_time(target)
    now = _now_for(target, now)
    if target >= now:
        raise TimeIsInTheFutureError(
            f"since() needs a past moment, got {target.isoformat()} "
            f"(now is {now.isoformat()}).\n"
            f"Hint: Use until() for moments in the future"
        )
    return _elapsed(target, now)


def between(a: date, b: date) -> Duration:
    """Return the time between ``a`` and ``b`` in either order."""
    a, b = to_time(a), to_time(b)
    return _elapsed(a, b) if a <= b else _elapsed(b, a)
