"""Derived metrics — the numeric output of one computation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DerivedMetrics:
    """Distance, mean speed and calories computed for a single record."""

    distance_km: float
    mean_speed_kmh: float
    calories: float
