"""Enumerations and physical constants for activity metrics.

Step-length and calorie coefficients are empirical averages, not
per-athlete measurements.
"""

from __future__ import annotations

from enum import Enum

from activity_tracker.exceptions import UnknownActivityError


class ActivityKind(Enum):
    """Recognised training types, keyed by their record label.

    The set is closed: a label outside it is rejected rather than mapped
    to a default.
    """

    WALKING = "Ходьба"
    RUNNING = "Бег"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def from_label(cls, label: str) -> ActivityKind:
        """Resolve a record label to an ActivityKind.

        Raises:
            UnknownActivityError: If *label* is not a recognised kind.
        """
        try:
            return cls(label)
        except ValueError:
            raise UnknownActivityError(label) from None


# ---------------------------------------------------------------------------
# Record format
# ---------------------------------------------------------------------------
FIELD_DELIMITER = ","
DAY_RECORD_FIELDS = 2  # "<steps>,<duration>"
TRAINING_RECORD_FIELDS = 3  # "<steps>,<activity>,<duration>"

# ---------------------------------------------------------------------------
# Unit conversions
# ---------------------------------------------------------------------------
M_IN_KM = 1000
MIN_IN_H = 60

# ---------------------------------------------------------------------------
# Stride length
# ---------------------------------------------------------------------------
# Daily step counts use a fixed average stride
DAY_STEP_LENGTH_M = 0.65

# Training distance derives stride from height
STEP_LENGTH_COEFFICIENT = 0.45

# ---------------------------------------------------------------------------
# Calories
# ---------------------------------------------------------------------------
# Walking burns half of what running does at the same speed and duration
WALKING_CALORIES_COEFFICIENT = 0.5
