"""Formula-based BMR and TDEE estimates.

Uses the Mifflin-St Jeor equation for BMR, scaled by a Harris-Benedict
activity multiplier. This is the estimator of record whenever adaptive data is
missing or the user is still inside the setup phase.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from tdeetrack.tracking.models import GoalSettings
from tdeetrack.tracking.units import Unit, to_kg, to_pounds

logger = logging.getLogger(__name__)

# Rough kcal per pound of body weight when nothing better is known
FALLBACK_TDEE_MULTIPLIER = 14


class Sex(Enum):
    """Biological sex for BMR calculation."""
    MALE = "male"
    FEMALE = "female"


class ActivityLevel(Enum):
    """Named activity levels."""
    SEDENTARY = "sedentary"          # Little or no exercise
    LIGHT = "light"                  # Light exercise 1-3 days/week
    MODERATE = "moderate"            # Moderate exercise 3-5 days/week
    ACTIVE = "active"                # Hard exercise 6-7 days/week
    VERY_ACTIVE = "very_active"      # Very hard exercise, physical job


# Activity level multipliers (Harris-Benedict activity factors)
ACTIVITY_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}


def activity_multiplier_for(level: str) -> float:
    """Look up the multiplier for a named activity level."""
    return ACTIVITY_MULTIPLIERS[ActivityLevel(level.lower())]


def calculate_bmr(
    age: int,
    sex: Sex,
    height_cm: float,
    weight_kg: float,
) -> float:
    """Calculate Basal Metabolic Rate using Mifflin-St Jeor equation.

    Args:
        age: Age in years
        sex: Biological sex
        height_cm: Height in centimeters
        weight_kg: Weight in kilograms

    Returns:
        BMR in calories per day
    """
    if sex == Sex.MALE:
        bmr = (10 * weight_kg) + (6.25 * height_cm) - (5 * age) + 5
    else:
        bmr = (10 * weight_kg) + (6.25 * height_cm) - (5 * age) - 161

    return bmr


def calculate_tdee(bmr: float, activity_multiplier: float) -> float:
    """Scale BMR by an activity multiplier."""
    return bmr * activity_multiplier


def formula_tdee(
    settings: Optional[GoalSettings],
    current_weight: Optional[float] = None,
) -> Optional[int]:
    """Estimate TDEE from body stats.

    All four of sex, age, height and activity multiplier must be set; a
    partial profile counts as no profile.

    Args:
        settings: Goal settings holding the body stats (may be None)
        current_weight: Weight in the settings unit; defaults to the
            starting weight

    Returns:
        Rounded TDEE in kcal/day, or None if body stats are incomplete
    """
    if settings is None or not settings.has_body_stats:
        return None

    weight = current_weight if current_weight is not None else settings.starting_weight
    weight_kg = to_kg(weight, settings.unit)

    bmr = calculate_bmr(
        settings.age,  # type: ignore[arg-type]
        Sex(settings.sex),
        settings.height_cm,  # type: ignore[arg-type]
        weight_kg,
    )
    return round(calculate_tdee(bmr, settings.activity_multiplier))  # type: ignore[arg-type]


def fallback_tdee(
    weight: float,
    unit: Unit = Unit.POUND,
    multiplier: float = FALLBACK_TDEE_MULTIPLIER,
) -> int:
    """Last-resort estimate of bodyweight (in pounds) times a flat multiplier."""
    estimate = round(to_pounds(weight, unit) * multiplier)
    logger.debug("Using fallback TDEE %d for weight %.1f %s", estimate, weight, unit.short)
    return estimate
