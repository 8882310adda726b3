"""Calorie and distance reports from textual step records."""

from activity_tracker.exceptions import (
    ActivityTrackerError,
    EmptyFieldError,
    FormatError,
    InvalidCharacterError,
    NonPositiveError,
    ParseError,
    UnknownActivityError,
)
from activity_tracker.reports import day_action_info, training_info

__all__ = [
    "ActivityTrackerError",
    "EmptyFieldError",
    "FormatError",
    "InvalidCharacterError",
    "NonPositiveError",
    "ParseError",
    "UnknownActivityError",
    "day_action_info",
    "training_info",
]
