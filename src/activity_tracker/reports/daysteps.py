"""Daily steps report — best-effort, empty on failure.

Unlike the training report, errors never reach the caller here: they are
logged and an empty string is returned.
"""

from __future__ import annotations

import logging

from activity_tracker.exceptions import ActivityTrackerError
from activity_tracker.math.metrics import day_distance, mean_speed, walking_spent_calories
from activity_tracker.models.metrics import DerivedMetrics
from activity_tracker.models.profile import PhysicalProfile
from activity_tracker.models.record import ActivityRecord
from activity_tracker.parsing.records import parse_day_record

logger = logging.getLogger(__name__)

_TEMPLATE = (
    "Количество шагов: {steps}.\n"
    "Дистанция составила {distance:.2f} км.\n"
    "Вы сожгли {calories:.2f} ккал.\n"
)


def compute_day_metrics(
    data: str, profile: PhysicalProfile
) -> tuple[ActivityRecord, DerivedMetrics]:
    """Parse a daily step record and compute its metrics.

    Distance uses the fixed daily stride; calories are always computed as
    walking. The reported mean speed is the one the walking formula uses.

    Raises:
        ActivityTrackerError: On any parsing or validation failure.
    """
    record = parse_day_record(data)
    calories = walking_spent_calories(
        record.steps, profile.weight_kg, profile.height_m, record.duration
    )
    metrics = DerivedMetrics(
        distance_km=day_distance(record.steps),
        mean_speed_kmh=mean_speed(record.steps, profile.height_m, record.duration),
        calories=calories,
    )
    return record, metrics


def format_day_report(record: ActivityRecord, metrics: DerivedMetrics) -> str:
    """Render the three-line daily summary."""
    return _TEMPLATE.format(
        steps=record.steps,
        distance=metrics.distance_km,
        calories=metrics.calories,
    )


def day_action_info(data: str, weight_kg: float, height_m: float) -> str:
    """Build the daily steps report, or ``""`` if anything goes wrong."""
    try:
        record, metrics = compute_day_metrics(data, PhysicalProfile(weight_kg, height_m))
    except ActivityTrackerError as exc:
        logger.warning("Skipping day record %r: %s", data, exc)
        return ""
    return format_day_report(record, metrics)
