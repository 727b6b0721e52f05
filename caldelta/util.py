"""Unit constants and the unit-tag vocabulary for caldelta.

Fixed units are measured in seconds, calendar units in months. The two
families only meet through SECONDS_PER_MONTH.
"""

from typing import Literal, TypeAlias

from caldelta.errors import InvalidArgumentError

# Fixed units (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 604800

# Calendar units (all values in months)
MONTH = 1
YEAR = 12

# Mean Gregorian month: 365.2425 days / 12
SECONDS_PER_MONTH = 2_629_746

Unit: TypeAlias = Literal[
    "second", "minute", "hour", "day", "week", "month", "year"
]

FIXED_UNITS: dict[str, int] = {
    "week": WEEK,
    "day": DAY,
    "hour": HOUR,
    "minute": MINUTE,
    "second": SECOND,
}

CALENDAR_UNITS: dict[str, int] = {
    "year": YEAR,
    "month": MONTH,
}

# Largest first, calendar family before fixed family
UNIT_ORDER: tuple[str, ...] = (*CALENDAR_UNITS, *FIXED_UNITS)


def normalize_unit(unit: str) -> str:
    """Return the singular unit tag for ``unit``, accepting plurals.

    Raises:
        InvalidArgumentError: If ``unit`` is not a known unit tag
    """
    if isinstance(unit, str):
        tag = unit.lower()
        if tag in FIXED_UNITS or tag in CALENDAR_UNITS:
            return tag
        singular = tag[:-1] if tag.endswith("s") else tag
        if singular in FIXED_UNITS or singular in CALENDAR_UNITS:
            return singular
    valid = ", ".join(reversed(UNIT_ORDER))
    raise InvalidArgumentError(
        f"Unknown unit {unit!r}.\n"
        f"Valid units: {valid} (plurals accepted)"
    )
