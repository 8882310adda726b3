"""Shared test fixtures: athlete profiles and reference records."""

from __future__ import annotations

from datetime import timedelta

import pytest

from activity_tracker.models.profile import PhysicalProfile
from activity_tracker.models.record import ActivityRecord


@pytest.fixture
def average_profile() -> PhysicalProfile:
    """75 kg, 1.75 m — the reference athlete used throughout."""
    return PhysicalProfile(weight_kg=75.0, height_m=1.75)


@pytest.fixture
def light_profile() -> PhysicalProfile:
    """52 kg, 1.60 m."""
    return PhysicalProfile(weight_kg=52.0, height_m=1.60)


@pytest.fixture
def run_record() -> ActivityRecord:
    """3456 steps of running over 45 minutes."""
    return ActivityRecord(steps=3456, duration=timedelta(minutes=45), activity="Бег")


@pytest.fixture
def day_record() -> ActivityRecord:
    """1000 steps over 30 minutes, no activity label."""
    return ActivityRecord(steps=1000, duration=timedelta(minutes=30))
