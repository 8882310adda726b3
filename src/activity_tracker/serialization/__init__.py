"""Serialization module — export computed summaries as JSON."""

from activity_tracker.serialization.summary import to_summary_json, to_summary_json_string

__all__ = ["to_summary_json", "to_summary_json_string"]
