"""Human-readable reports for daily step and training records."""

from activity_tracker.reports.daysteps import compute_day_metrics, day_action_info
from activity_tracker.reports.training import compute_training_metrics, training_info

__all__ = [
    "compute_day_metrics",
    "compute_training_metrics",
    "day_action_info",
    "training_info",
]
