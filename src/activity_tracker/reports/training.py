"""Training report — labelled activity records, errors propagate.

Renders a five-line summary for ``"<steps>,<activity>,<duration>"``
records. Any parsing or calculation error reaches the caller unchanged.
"""

from __future__ import annotations

import logging

from activity_tracker.exceptions import ActivityTrackerError
from activity_tracker.math.metrics import SPENT_CALORIES, distance, mean_speed
from activity_tracker.models.enums import ActivityKind
from activity_tracker.models.metrics import DerivedMetrics
from activity_tracker.models.profile import PhysicalProfile
from activity_tracker.models.record import ActivityRecord
from activity_tracker.parsing.records import parse_training_record

logger = logging.getLogger(__name__)

_TEMPLATE = (
    "Тип тренировки: {activity}\n"
    "Длительность: {hours:.2f} ч.\n"
    "Дистанция: {distance:.2f} км.\n"
    "Скорость: {speed:.2f} км/ч\n"
    "Сожгли калорий: {calories:.2f}\n"
)


def compute_training_metrics(
    data: str, profile: PhysicalProfile
) -> tuple[ActivityRecord, DerivedMetrics]:
    """Parse a training record and compute its metrics.

    Args:
        data: Record string, e.g. ``"3456,Бег,45m0s"``.
        profile: Weight and height of the athlete.

    Returns:
        The parsed record and its derived metrics.

    Raises:
        ActivityTrackerError: On the first parsing, validation or
            activity-resolution failure.
    """
    try:
        record = parse_training_record(data)
    except ActivityTrackerError as exc:
        logger.warning("Rejected training record %r: %s", data, exc)
        raise

    kind = ActivityKind.from_label(record.activity)
    calories = SPENT_CALORIES[kind](
        record.steps, profile.weight_kg, profile.height_m, record.duration
    )
    metrics = DerivedMetrics(
        distance_km=distance(record.steps, profile.height_m),
        mean_speed_kmh=mean_speed(record.steps, profile.height_m, record.duration),
        calories=calories,
    )
    return record, metrics


def format_training_report(record: ActivityRecord, metrics: DerivedMetrics) -> str:
    """Render the five-line training summary."""
    return _TEMPLATE.format(
        activity=record.activity,
        hours=record.duration_hours,
        distance=metrics.distance_km,
        speed=metrics.mean_speed_kmh,
        calories=metrics.calories,
    )


def training_info(data: str, weight_kg: float, height_m: float) -> str:
    """Build the training report for one record.

    Raises:
        ActivityTrackerError: If the record is malformed, names an unknown
            activity, or the profile has a non-positive value.
    """
    record, metrics = compute_training_metrics(data, PhysicalProfile(weight_kg, height_m))
    return format_training_report(record, metrics)
