"""Tests for JSON export of computed summaries."""

from __future__ import annotations

import json

from activity_tracker.models.metrics import DerivedMetrics
from activity_tracker.serialization import to_summary_json, to_summary_json_string


class TestToSummaryJson:
    def test_training_record(self, run_record) -> None:
        metrics = DerivedMetrics(distance_km=2.7216, mean_speed_kmh=3.6288, calories=204.12)
        result = to_summary_json(run_record, metrics)
        assert result == {
            "steps": 3456,
            "activity": "Бег",
            "duration_hours": 0.75,
            "distance_km": 2.72,
            "mean_speed_kmh": 3.63,
            "calories": 204.12,
        }

    def test_day_record_has_null_activity(self, day_record) -> None:
        metrics = DerivedMetrics(distance_km=0.65, mean_speed_kmh=1.575, calories=29.53125)
        result = to_summary_json(day_record, metrics)
        assert result["activity"] is None
        assert result["duration_hours"] == 0.5


class TestToSummaryJsonString:
    def test_round_trips_through_json(self, run_record) -> None:
        metrics = DerivedMetrics(distance_km=1.0, mean_speed_kmh=2.0, calories=3.0)
        text = to_summary_json_string(run_record, metrics)
        assert json.loads(text) == to_summary_json(run_record, metrics)

    def test_keeps_cyrillic_readable(self, run_record) -> None:
        metrics = DerivedMetrics(distance_km=1.0, mean_speed_kmh=2.0, calories=3.0)
        assert "Бег" in to_summary_json_string(run_record, metrics)
