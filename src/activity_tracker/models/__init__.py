"""Data models for activity records and their derived metrics."""

from activity_tracker.models.enums import ActivityKind
from activity_tracker.models.metrics import DerivedMetrics
from activity_tracker.models.profile import PhysicalProfile
from activity_tracker.models.record import ActivityRecord

__all__ = [
    "ActivityKind",
    "ActivityRecord",
    "DerivedMetrics",
    "PhysicalProfile",
]
