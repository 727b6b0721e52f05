"""Text rendering for Durations and WallClocks, and parsing of durations.

Duration styles:

    long   "1 year, 3 months, 4 days"   every nonzero unit, pluralized
    short  "1yr 3mn"                    two largest nonzero units
    micro  "1y"                         largest nonzero unit only

Micro letters are case-sensitive: M is month, m is minute.
"""

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal, TypeAlias

from caldelta.duration import Duration, combine
from caldelta.errors import InvalidArgumentError, ParseError
from caldelta.util import UNIT_ORDER

if TYPE_CHECKING:
    from caldelta.wallclock import WallClock

DurationStyle: TypeAlias = Literal["long", "short", "micro"]
ClockFormat: TypeAlias = Literal["twelve_hour", "twenty_four_hour"]

SHORT_NAMES: dict[str, str] = {
    "year": "yr",
    "month": "mn",
    "week": "wk",
    "day": "dy",
    "hour": "hr",
    "minute": "min",
    "second": "sec",
}

MICRO_NAMES: dict[str, str] = {
    "year": "y",
    "month": "M",
    "week": "w",
    "day": "d",
    "hour": "h",
    "minute": "m",
    "second": "s",
}

_STYLES: tuple[str, ...] = ("long", "short", "micro")


@dataclass(frozen=True, kw_only=True)
class WallClockFormat:
    """Options for rendering a WallClock.

    Attributes:
        clock: "twelve_hour" (default) or "twenty_four_hour"
        use_seconds: Include ":SS" (default True)
        include_meridiem: Append " AM"/" PM" on the 12-hour clock
            (default True; ignored on the 24-hour clock)
    """

    clock: ClockFormat = "twelve_hour"
    use_seconds: bool = True
    include_meridiem: bool = True


def _long(unit: str, count: int) -> str:
    return f"{count} {unit}" + ("" if count == 1 else "s")


def format_duration(duration: Duration, style: DurationStyle = "long") -> str:
    """Render ``duration`` in the given style.

    A zero duration renders as zero seconds ("0 seconds", "0sec", "0s").

    Raises:
        InvalidArgumentError: If style is not long, short or micro
    """
    if style not in _STYLES:
        raise InvalidArgumentError(
            f"Unknown duration style {style!r}.\n"
            f"Valid styles: {', '.join(_STYLES)}"
        )
    parts = duration.components() or [("second", 0)]
    if style == "long":
        return ", ".join(_long(unit, count) for unit, count in parts)
    if style == "short":
        return " ".join(f"{count}{SHORT_NAMES[unit]}" for unit, count in parts[:2])
    unit, count = parts[0]
    return f"{count}{MICRO_NAMES[unit]}"


def format_wallclock(wall: "WallClock", fmt: WallClockFormat) -> str:
    """Render ``wall`` as "H:MM[:SS][ AM|PM]" per ``fmt``.

    The hour is never padded; minutes and seconds always are.
    """
    text = f"{wall.hour(fmt.clock)}:{wall.minute():02d}"
    if fmt.use_seconds:
        text += f":{wall.second():02d}"
    if fmt.clock == "twelve_hour" and fmt.include_meridiem:
        text += f" {wall.meridiem().upper()}"
    return text


# Case-insensitive unit words; micro letters are matched separately.
_WORDS: dict[str, str] = {}
for _unit in UNIT_ORDER:
    _WORDS[_unit] = _unit
    _WORDS[_unit + "s"] = _unit
    _WORDS[SHORT_NAMES[_unit]] = _unit
_LETTERS: dict[str, str] = {letter: unit for unit, letter in MICRO_NAMES.items()}

_TOKEN = re.compile(r"(\d+)\s*([A-Za-z]+)")
_SEPARATOR = re.compile(r"[\s,]*")


def _lookup(word: str) -> str | None:
    if word in _LETTERS:
        return _LETTERS[word]
    return _WORDS.get(word.lower())


def parse_duration(text: str) -> Duration:
    """Parse a duration rendered in long, short or micro style.

    Tokens are "<n><unit>" or "<n> <unit>" separated by spaces and/or
    commas; repeated units add up.

    Example:
        >>> parse_duration("1 hour, 3 minutes, 4 seconds") == parse_duration("1h 3m 4s")
        True

    Raises:
        ParseError: If text is empty or contains anything else
    """
    if not isinstance(text, str):
        raise ParseError(f"Expected a string, got {type(text).__name__}")
    pieces: list[Duration] = []
    pos = _SEPARATOR.match(text).end()
    while pos < len(text):
        match = _TOKEN.match(text, pos)
        unit = _lookup(match.group(2)) if match else None
        if match is None or unit is None:
            raise ParseError(
                f"Cannot parse duration {text!r} at position {pos}.\n"
                f"Expected e.g. '1 hour, 3 minutes', '1hr 3min' or '1h'"
            )
        pieces.append(Duration.of(int(match.group(1)), unit))
        pos = _SEPARATOR.match(text, match.end()).end()
    if not pieces:
        raise ParseError(f"Cannot parse an empty duration string: {text!r}")
    return combine(*pieces)
