"""Custom exception hierarchy for activity record processing."""

from __future__ import annotations


class ActivityTrackerError(Exception):
    """Base exception for all activity_tracker errors."""


class FormatError(ActivityTrackerError):
    """The record does not split into the expected number of fields."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            f"invalid record format: expected {expected} fields, got {actual}"
        )
        self.expected = expected
        self.actual = actual


class EmptyFieldError(ActivityTrackerError):
    """A required field is blank after trimming."""

    def __init__(self, field: str) -> None:
        super().__init__(f"{field} must not be empty")
        self.field = field


class InvalidCharacterError(ActivityTrackerError):
    """A numeric field contains embedded whitespace."""

    def __init__(self, field: str) -> None:
        super().__init__(f"{field} contains whitespace")
        self.field = field


class ParseError(ActivityTrackerError):
    """A field cannot be interpreted as an integer or a duration."""

    def __init__(self, field: str, value: str, reason: str = "") -> None:
        message = f"cannot parse {field} {value!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.field = field
        self.value = value


class NonPositiveError(ActivityTrackerError):
    """Steps, weight, height or duration is zero or negative."""

    def __init__(self, field: str) -> None:
        super().__init__(f"{field} must be positive")
        self.field = field


class UnknownActivityError(ActivityTrackerError):
    """The activity label is not one of the recognised kinds."""

    def __init__(self, label: str) -> None:
        super().__init__(f"unknown activity type: {label!r}")
        self.label = label
