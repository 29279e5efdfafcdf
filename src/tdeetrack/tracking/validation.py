"""Input validation for log entries.

The estimators assume clean input; these checks run at the edge (file loading,
CLI arguments) before data reaches them.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Optional, Union

from tdeetrack.tracking.dates import DateLike, is_future_date, parse_date_key
from tdeetrack.tracking.models import DailyLogEntry
from tdeetrack.tracking.units import Unit

DATE_KEY_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

# Reasonable bounds per unit (~22 kg = ~50 lbs, ~450 kg = ~1000 lbs)
WEIGHT_BOUNDS = {
    Unit.POUND: (50.0, 1000.0),
    Unit.KILOGRAM: (22.0, 450.0),
}
MAX_CALORIES = 15000


@dataclass
class ValidationResult:
    """Outcome of a single check."""

    is_valid: bool
    error: Optional[str] = None

    def __bool__(self) -> bool:
        return self.is_valid


VALID = ValidationResult(True)


def validate_positive_number(
    value: float, field_name: str, allow_zero: bool = False
) -> ValidationResult:
    """Check that ``value`` is a real, non-negative (or positive) number."""
    if value is None or math.isnan(value):
        return ValidationResult(False, f"{field_name} must be a valid number")
    if value < 0:
        return ValidationResult(False, f"{field_name} cannot be negative")
    if not allow_zero and value == 0:
        return ValidationResult(False, f"{field_name} must be greater than zero")
    return VALID


def validate_weight(weight: float, unit: Unit = Unit.POUND) -> ValidationResult:
    """Positive and within plausible bounds for the unit."""
    check = validate_positive_number(weight, "Weight")
    if not check:
        return check

    min_weight, max_weight = WEIGHT_BOUNDS[unit]
    if weight > max_weight:
        return ValidationResult(False, f"Weight cannot exceed {max_weight:g} {unit.short}")
    if weight < min_weight:
        return ValidationResult(False, f"Weight must be at least {min_weight:g} {unit.short}")
    return VALID


def validate_calories(calories: float) -> ValidationResult:
    """Zero (fasting) up to a generous daily maximum."""
    check = validate_positive_number(calories, "Calories", allow_zero=True)
    if not check:
        return check
    if calories > MAX_CALORIES:
        return ValidationResult(False, f"Calories cannot exceed {MAX_CALORIES:,}")
    return VALID


def validate_date_key(
    date_key: str,
    today: Optional[DateLike] = None,
    allow_future: bool = False,
) -> ValidationResult:
    """Strict ``YYYY-MM-DD`` that names a real calendar day."""
    if not isinstance(date_key, str) or not DATE_KEY_PATTERN.match(date_key):
        return ValidationResult(False, f"Date must be YYYY-MM-DD, got '{date_key}'")
    try:
        parse_date_key(date_key)
    except ValueError:
        return ValidationResult(False, f"'{date_key}' is not a valid calendar date")
    if not allow_future and is_future_date(date_key, today):
        return ValidationResult(False, f"Date {date_key} is in the future")
    return VALID


def parse_entry_form(
    weight: Union[str, float],
    calories: Union[str, int],
    date: str,
    unit: Unit = Unit.POUND,
    today: Optional[DateLike] = None,
) -> tuple[Optional[DailyLogEntry], Optional[str]]:
    """Parse raw field values into an entry.

    Args:
        weight: Weight as entered (string or number)
        calories: Calories as entered; fractional values are truncated
        date: Date key
        unit: Unit the weight is expressed in
        today: Reference date for the future-date check

    Returns:
        (entry, None) on success, (None, error message) on failure
    """
    try:
        weight_value = float(weight)
    except (TypeError, ValueError):
        return None, "Weight must be a valid number"
    try:
        calorie_value = int(float(calories))
    except (TypeError, ValueError, OverflowError):
        return None, "Calories must be a valid number"

    for check in (
        validate_weight(weight_value, unit),
        validate_calories(calorie_value),
        validate_date_key(date, today),
    ):
        if not check:
            return None, check.error

    return DailyLogEntry(date=date, weight=weight_value, calories=calorie_value), None
