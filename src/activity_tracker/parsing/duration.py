"""Duration strings in the ``1h30m`` / ``45m0s`` notation.

Accepts the grammar of Go's ``time.ParseDuration``: an optional sign
followed by one or more decimal numbers, each with an optional fraction
and a mandatory unit suffix. Valid units are ``ns``, ``us`` (or ``µs``),
``ms``, ``s``, ``m`` and ``h``. The bare string ``"0"`` needs no unit.

Results are ``datetime.timedelta``; a remainder below one microsecond is
rounded up to the next microsecond.
"""

from __future__ import annotations

import re
from datetime import timedelta

from activity_tracker.exceptions import ParseError

_NANOSECOND = 1
_MICROSECOND = 1000 * _NANOSECOND
_MILLISECOND = 1000 * _MICROSECOND
_SECOND = 1000 * _MILLISECOND
_MINUTE = 60 * _SECOND
_HOUR = 60 * _MINUTE

_UNITS: dict[str, int] = {
    "ns": _NANOSECOND,
    "us": _MICROSECOND,
    "µs": _MICROSECOND,  # U+00B5 micro sign
    "μs": _MICROSECOND,  # U+03BC Greek mu
    "ms": _MILLISECOND,
    "s": _SECOND,
    "m": _MINUTE,
    "h": _HOUR,
}

# Largest magnitude representable as signed 64-bit nanoseconds
_MAX_NANOSECONDS = 2**63
_MAX_INT_DIGITS = len(str(_MAX_NANOSECONDS))

# Beyond this many fraction digits the result no longer changes at
# nanosecond resolution, even for hours
_MAX_FRACTION_DIGITS = 18

# <digits>[.<digits>]<unit>, where the unit is everything up to the next
# digit or dot and is looked up afterwards.
_COMPONENT = re.compile(r"([0-9]*)(\.([0-9]*))?([^0-9.]*)")


def _leading_int(digits: str) -> int | None:
    """Value of a digit run, or None if it exceeds the nanosecond range."""
    significant = digits.lstrip("0")
    if len(significant) > _MAX_INT_DIGITS:
        return None
    value = int(significant or "0")
    if value > _MAX_NANOSECONDS:
        return None
    return value


def _leading_fraction(digits: str) -> tuple[int, int]:
    """Numerator and power-of-ten scale of a fraction.

    Digits past the point where they can no longer change a nanosecond
    result are dropped.
    """
    kept = digits[:_MAX_FRACTION_DIGITS]
    return int(kept), 10 ** len(kept)


def parse_duration(text: str, field: str = "duration") -> timedelta:
    """Parse a compound duration string into a timedelta.

    Args:
        text: Duration such as ``"1h30m"``, ``"45m0s"`` or ``"1.5h"``.
        field: Field name used in error messages.

    Returns:
        The parsed duration. May be zero or negative; positivity is the
        caller's concern. A non-zero remainder below one microsecond is
        rounded away from zero, so a positive duration never becomes zero.

    Raises:
        ParseError: If *text* does not follow the duration grammar or
            overflows the 64-bit nanosecond range.
    """
    rest = text
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]

    if rest == "0":
        return timedelta(0)
    if not rest:
        raise ParseError(field, text, "invalid duration")

    total_ns = 0
    pos = 0
    while pos < len(rest):
        match = _COMPONENT.match(rest, pos)
        whole, dot, fraction, unit = match.groups()
        if not whole and not fraction:
            raise ParseError(field, text, "invalid duration")
        if not unit:
            raise ParseError(field, text, "missing unit in duration")
        if unit not in _UNITS:
            raise ParseError(field, text, f"unknown unit {unit!r} in duration")

        value = _leading_int(whole)
        if value is None:
            raise ParseError(field, text, "duration out of range")
        scale = _UNITS[unit]
        component_ns = value * scale
        if dot and fraction:
            numerator, denominator = _leading_fraction(fraction)
            component_ns += numerator * scale // denominator
        total_ns += component_ns
        if total_ns > _MAX_NANOSECONDS:
            raise ParseError(field, text, "duration out of range")
        pos = match.end()

    if total_ns == _MAX_NANOSECONDS and not negative:
        raise ParseError(field, text, "duration out of range")

    micros = -(-total_ns // _MICROSECOND)
    delta = timedelta(microseconds=micros)
    return -delta if negative else delta
