"""Tests for entry validation."""

from __future__ import annotations

import pytest

from tdeetrack.tracking.units import Unit
from tdeetrack.tracking.validation import (
    parse_entry_form,
    validate_calories,
    validate_date_key,
    validate_positive_number,
    validate_weight,
)


class TestValidatePositiveNumber:
    """Tests for validate_positive_number."""

    def test_positive(self) -> None:
        assert validate_positive_number(1.0, "Value")

    def test_nan(self) -> None:
        result = validate_positive_number(float("nan"), "Weight")
        assert not result
        assert result.error == "Weight must be a valid number"

    def test_negative(self) -> None:
        assert validate_positive_number(-1, "Weight").error == "Weight cannot be negative"

    def test_zero(self) -> None:
        assert not validate_positive_number(0, "Weight")
        assert validate_positive_number(0, "Calories", allow_zero=True)


class TestValidateWeight:
    """Tests for validate_weight."""

    def test_typical(self) -> None:
        assert validate_weight(180.0)
        assert validate_weight(80.0, Unit.KILOGRAM)

    def test_too_heavy(self) -> None:
        assert validate_weight(1001.0).error == "Weight cannot exceed 1000 lbs"
        assert validate_weight(451.0, Unit.KILOGRAM).error == "Weight cannot exceed 450 kg"

    def test_too_light(self) -> None:
        assert not validate_weight(49.0)
        assert not validate_weight(21.0, Unit.KILOGRAM)


class TestValidateCalories:
    """Tests for validate_calories."""

    def test_zero_allowed(self) -> None:
        """A fasting day is a real entry."""
        assert validate_calories(0)

    def test_maximum(self) -> None:
        assert validate_calories(15000)
        assert validate_calories(15001).error == "Calories cannot exceed 15,000"

    def test_negative(self) -> None:
        assert not validate_calories(-1)


class TestValidateDateKey:
    """Tests for validate_date_key."""

    def test_valid(self) -> None:
        assert validate_date_key("2024-01-05", today="2024-01-10")

    @pytest.mark.parametrize("bad", ["2024-1-5", "01/05/2024", "", "2024-01-05T00:00"])
    def test_bad_format(self, bad: str) -> None:
        assert "YYYY-MM-DD" in validate_date_key(bad, today="2024-01-10").error

    def test_impossible_date(self) -> None:
        result = validate_date_key("2024-02-30", today="2024-03-10")
        assert "not a valid calendar date" in result.error

    def test_future(self) -> None:
        assert not validate_date_key("2024-01-11", today="2024-01-10")
        assert validate_date_key("2024-01-11", today="2024-01-10", allow_future=True)


class TestParseEntryForm:
    """Tests for parse_entry_form."""

    def test_valid_strings(self) -> None:
        entry, error = parse_entry_form("180.5", "2000.7", "2024-01-05", today="2024-01-10")
        assert error is None
        assert entry.weight == 180.5
        assert entry.calories == 2000
        assert entry.date == "2024-01-05"

    def test_bad_weight(self) -> None:
        entry, error = parse_entry_form("abc", "2000", "2024-01-05", today="2024-01-10")
        assert entry is None
        assert error == "Weight must be a valid number"

    def test_bad_calories(self) -> None:
        entry, error = parse_entry_form("180", None, "2024-01-05", today="2024-01-10")
        assert entry is None
        assert error == "Calories must be a valid number"

    def test_future_date(self) -> None:
        entry, error = parse_entry_form("180", "2000", "2024-01-11", today="2024-01-10")
        assert entry is None
        assert "future" in error

    def test_out_of_range_weight(self) -> None:
        _, error = parse_entry_form("1200", "2000", "2024-01-05", today="2024-01-10")
        assert error == "Weight cannot exceed 1000 lbs"

    def test_kilograms(self) -> None:
        entry, _ = parse_entry_form(80, 2000, "2024-01-05", unit=Unit.KILOGRAM, today="2024-01-10")
        assert entry.weight == 80.0
