"""Record parser — splits and validates delimited activity records.

Two record shapes are accepted:

    "<steps>,<duration>"              daily step records
    "<steps>,<activity>,<duration>"   training records

Every function either returns fully typed values or raises a subclass of
ActivityTrackerError; nothing is partially populated.
"""

from __future__ import annotations

import re
from datetime import timedelta

from activity_tracker.exceptions import (
    EmptyFieldError,
    FormatError,
    InvalidCharacterError,
    NonPositiveError,
    ParseError,
)
from activity_tracker.models.enums import (
    DAY_RECORD_FIELDS,
    FIELD_DELIMITER,
    TRAINING_RECORD_FIELDS,
)
from activity_tracker.models.record import ActivityRecord
from activity_tracker.parsing.duration import parse_duration

_INTEGER = re.compile(r"[+-]?[0-9]+")

# Step counts follow the signed 64-bit integer range
_MAX_STEPS = 2**63 - 1
_MIN_STEPS = -(2**63)
_MAX_STEPS_DIGITS = len(str(_MAX_STEPS))


def split_fields(data: str, expected: int) -> list[str]:
    """Split *data* on the field delimiter and trim each field.

    Raises:
        FormatError: If the number of fields differs from *expected*.
    """
    parts = data.split(FIELD_DELIMITER)
    if len(parts) != expected:
        raise FormatError(expected, len(parts))
    return [part.strip() for part in parts]


def _require_token(text: str, field: str) -> str:
    """Check a numeric field is present and a single whitespace-free token."""
    if not text:
        raise EmptyFieldError(field)
    if any(ch.isspace() for ch in text):
        raise InvalidCharacterError(field)
    return text


def parse_steps(text: str) -> int:
    """Parse a step count: a positive decimal integer in the signed 64-bit range."""
    _require_token(text, "steps")
    if not _INTEGER.fullmatch(text):
        raise ParseError("steps", text, "not an integer")
    sign = -1 if text.startswith("-") else 1
    significant = text.lstrip("+-").lstrip("0")
    if len(significant) > _MAX_STEPS_DIGITS:
        raise ParseError("steps", text, "out of range")
    steps = sign * int(significant or "0")
    if not _MIN_STEPS <= steps <= _MAX_STEPS:
        raise ParseError("steps", text, "out of range")
    if steps <= 0:
        raise NonPositiveError("steps")
    return steps


def parse_positive_duration(text: str) -> timedelta:
    """Parse a duration field and require it to be strictly positive."""
    _require_token(text, "duration")
    duration = parse_duration(text)
    if duration <= timedelta(0):
        raise NonPositiveError("duration")
    return duration


def parse_day_record(data: str) -> ActivityRecord:
    """Parse a ``"<steps>,<duration>"`` record."""
    steps_str, duration_str = split_fields(data, DAY_RECORD_FIELDS)
    steps = parse_steps(steps_str)
    duration = parse_positive_duration(duration_str)
    return ActivityRecord(steps=steps, duration=duration)


def parse_training_record(data: str) -> ActivityRecord:
    """Parse a ``"<steps>,<activity>,<duration>"`` record.

    The activity label only has to be non-empty; whether it names a known
    activity is decided by the training report.
    """
    steps_str, activity, duration_str = split_fields(data, TRAINING_RECORD_FIELDS)
    steps = parse_steps(steps_str)
    if not activity:
        raise EmptyFieldError("activity")
    duration = parse_positive_duration(duration_str)
    return ActivityRecord(steps=steps, duration=duration, activity=activity)
