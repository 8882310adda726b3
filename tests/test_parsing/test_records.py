"""Tests for the record parser."""

from __future__ import annotations

from datetime import timedelta

import pytest

from activity_tracker.exceptions import (
    EmptyFieldError,
    FormatError,
    InvalidCharacterError,
    NonPositiveError,
    ParseError,
)
from activity_tracker.models.record import ActivityRecord
from activity_tracker.parsing.records import (
    parse_day_record,
    parse_steps,
    parse_training_record,
    split_fields,
)


class TestSplitFields:
    def test_trims_fields(self) -> None:
        assert split_fields(" 1000 ,  30m ", 2) == ["1000", "30m"]

    def test_keeps_empty_fields(self) -> None:
        assert split_fields(",", 2) == ["", ""]

    def test_count_mismatch(self) -> None:
        with pytest.raises(FormatError) as exc_info:
            split_fields("1000,Бег,30m", 2)
        assert exc_info.value.expected == 2
        assert exc_info.value.actual == 3
        assert "expected 2" in str(exc_info.value)


class TestParseSteps:
    def test_valid(self) -> None:
        assert parse_steps("1000") == 1000

    def test_explicit_plus_sign(self) -> None:
        assert parse_steps("+12") == 12

    def test_empty(self) -> None:
        with pytest.raises(EmptyFieldError):
            parse_steps("")

    def test_embedded_whitespace(self) -> None:
        with pytest.raises(InvalidCharacterError):
            parse_steps("10 00")

    @pytest.mark.parametrize("text", ["abc", "12.5", "1_000", "0x10", "١٢"])
    def test_not_an_integer(self, text: str) -> None:
        with pytest.raises(ParseError):
            parse_steps(text)

    @pytest.mark.parametrize("text", ["0", "-5"])
    def test_non_positive(self, text: str) -> None:
        with pytest.raises(NonPositiveError):
            parse_steps(text)

    def test_upper_bound_accepted(self) -> None:
        assert parse_steps("9223372036854775807") == 2**63 - 1

    def test_leading_zeros_accepted(self) -> None:
        assert parse_steps("0" * 5000 + "1000") == 1000

    @pytest.mark.parametrize(
        "text",
        ["9223372036854775808", "-9223372036854775809", "9" * 400, "1" * 5000],
    )
    def test_out_of_range(self, text: str) -> None:
        with pytest.raises(ParseError, match="out of range"):
            parse_steps(text)

    def test_lower_bound_is_non_positive(self) -> None:
        with pytest.raises(NonPositiveError):
            parse_steps("-9223372036854775808")


class TestParseDayRecord:
    def test_valid(self) -> None:
        assert parse_day_record("1000,30m") == ActivityRecord(
            steps=1000, duration=timedelta(minutes=30)
        )

    def test_whitespace_around_fields(self) -> None:
        record = parse_day_record(" 678 , 1h10m ")
        assert record.steps == 678
        assert record.duration == timedelta(hours=1, minutes=10)
        assert record.activity is None

    def test_wrong_field_count(self) -> None:
        with pytest.raises(FormatError):
            parse_day_record("1000")

    def test_empty_duration(self) -> None:
        with pytest.raises(EmptyFieldError):
            parse_day_record("1000, ")

    def test_bad_duration(self) -> None:
        with pytest.raises(ParseError):
            parse_day_record("1000,thirty")

    def test_zero_duration(self) -> None:
        with pytest.raises(NonPositiveError, match="duration"):
            parse_day_record("1000,0s")

    def test_negative_duration(self) -> None:
        with pytest.raises(NonPositiveError):
            parse_day_record("1000,-10m")


class TestParseTrainingRecord:
    def test_valid(self) -> None:
        record = parse_training_record("3456,Бег,45m0s")
        assert record.steps == 3456
        assert record.activity == "Бег"
        assert record.duration == timedelta(minutes=45)

    def test_unknown_label_is_not_rejected_here(self) -> None:
        record = parse_training_record("1000,Плавание,10m")
        assert record.activity == "Плавание"

    def test_empty_activity(self) -> None:
        with pytest.raises(EmptyFieldError) as exc_info:
            parse_training_record("1000, ,10m")
        assert exc_info.value.field == "activity"

    def test_steps_checked_before_activity(self) -> None:
        with pytest.raises(NonPositiveError):
            parse_training_record("-5,,10m")

    def test_duration_with_inner_space(self) -> None:
        with pytest.raises(InvalidCharacterError):
            parse_training_record("1000,Бег,1h 30m")

    def test_wrong_field_count(self) -> None:
        with pytest.raises(FormatError, match="expected 3 fields, got 2"):
            parse_training_record("1000,10m")
