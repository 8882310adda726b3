"""JSON serialization of a parsed record and its derived metrics.

All functions are pure (no I/O).
"""

from __future__ import annotations

import json

from activity_tracker.models.metrics import DerivedMetrics
from activity_tracker.models.record import ActivityRecord

_PRECISION = 2


def to_summary_json(record: ActivityRecord, metrics: DerivedMetrics) -> dict:
    """Convert a record and its metrics to a JSON-compatible dict."""
    return {
        "steps": record.steps,
        "activity": record.activity,
        "duration_hours": round(record.duration_hours, _PRECISION),
        "distance_km": round(metrics.distance_km, _PRECISION),
        "mean_speed_kmh": round(metrics.mean_speed_kmh, _PRECISION),
        "calories": round(metrics.calories, _PRECISION),
    }


def to_summary_json_string(
    record: ActivityRecord, metrics: DerivedMetrics, indent: int = 2
) -> str:
    """Serialize a record and its metrics to a JSON string."""
    return json.dumps(to_summary_json(record, metrics), indent=indent, ensure_ascii=False)
