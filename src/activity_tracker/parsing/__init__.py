"""Parsing of raw activity record strings."""

from activity_tracker.parsing.duration import parse_duration
from activity_tracker.parsing.records import (
    parse_day_record,
    parse_positive_duration,
    parse_steps,
    parse_training_record,
    split_fields,
)

__all__ = [
    "parse_day_record",
    "parse_duration",
    "parse_positive_duration",
    "parse_steps",
    "parse_training_record",
    "split_fields",
]
