"""Distance, speed and calorie formulas for step-based activities.

Two stride models coexist on purpose:
    - training records derive stride from height (height * 0.45);
    - daily step records use a fixed 0.65 m stride.
They are kept as separate functions so neither call path changes the other.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Callable

from activity_tracker.exceptions import NonPositiveError
from activity_tracker.models.enums import (
    DAY_STEP_LENGTH_M,
    M_IN_KM,
    MIN_IN_H,
    STEP_LENGTH_COEFFICIENT,
    WALKING_CALORIES_COEFFICIENT,
    ActivityKind,
)

_HOUR = timedelta(hours=1)
_MINUTE = timedelta(minutes=1)


def distance(steps: int, height_m: float) -> float:
    """Distance in km using a height-derived stride length.

    Args:
        steps: Number of steps.
        height_m: Athlete height in metres.

    Returns:
        Distance covered in kilometres.
    """
    step_length = height_m * STEP_LENGTH_COEFFICIENT
    return steps * step_length / M_IN_KM


def day_distance(steps: int) -> float:
    """Distance in km for a daily step count, using the fixed stride."""
    return steps * DAY_STEP_LENGTH_M / M_IN_KM


def mean_speed(steps: int, height_m: float, duration: timedelta) -> float:
    """Mean speed in km/h over *duration*.

    Returns 0.0 for a zero or negative duration instead of raising.
    """
    if duration <= timedelta(0):
        return 0.0
    hours = duration / _HOUR
    if hours == 0:
        return 0.0
    return distance(steps, height_m) / hours


def _validate(steps: int, weight_kg: float, height_m: float, duration: timedelta) -> None:
    """Raise NonPositiveError for the first argument that is not > 0."""
    if steps <= 0:
        raise NonPositiveError("steps")
    if weight_kg <= 0:
        raise NonPositiveError("weight")
    if height_m <= 0:
        raise NonPositiveError("height")
    if duration <= timedelta(0):
        raise NonPositiveError("duration")


def running_spent_calories(
    steps: int,
    weight_kg: float,
    height_m: float,
    duration: timedelta,
) -> float:
    """Calories burned running.

    calories = weight * mean_speed * duration_min / 60

    Raises:
        NonPositiveError: If steps, weight, height or duration is <= 0.
    """
    _validate(steps, weight_kg, height_m, duration)
    speed = mean_speed(steps, height_m, duration)
    duration_min = duration / _MINUTE
    return weight_kg * speed * duration_min / MIN_IN_H


def walking_spent_calories(
    steps: int,
    weight_kg: float,
    height_m: float,
    duration: timedelta,
) -> float:
    """Calories burned walking: the running formula scaled by 0.5.

    Raises:
        NonPositiveError: If steps, weight, height or duration is <= 0.
    """
    _validate(steps, weight_kg, height_m, duration)
    speed = mean_speed(steps, height_m, duration)
    duration_min = duration / _MINUTE
    calories = weight_kg * speed * duration_min / MIN_IN_H
    return calories * WALKING_CALORIES_COEFFICIENT


CaloriesFn = Callable[[int, float, float, timedelta], float]

# Calorie formula per recognised activity
SPENT_CALORIES: dict[ActivityKind, CaloriesFn] = {
    ActivityKind.WALKING: walking_spent_calories,
    ActivityKind.RUNNING: running_spent_calories,
}
