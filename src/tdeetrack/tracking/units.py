"""Weight units and energy-balance constants.

The regression and smoothing primitives are unit-agnostic; conversion between
pounds and kilograms only happens here, at the edges of the engine.
"""

from __future__ import annotations

from enum import Enum

# Energy stored in one unit of body weight (standard approximation)
CALORIES_PER_POUND = 3500.0
CALORIES_PER_KG = 7700.0

KG_PER_POUND = 0.453592
DAYS_PER_WEEK = 7


class Unit(Enum):
    """Display unit for every weight field of a user."""

    POUND = "pound"
    KILOGRAM = "kilogram"

    @classmethod
    def parse(cls, value: str) -> "Unit":
        """Accept the long names plus the usual short forms (lb, lbs, kg)."""
        aliases = {
            "lb": cls.POUND,
            "lbs": cls.POUND,
            "pound": cls.POUND,
            "pounds": cls.POUND,
            "kg": cls.KILOGRAM,
            "kgs": cls.KILOGRAM,
            "kilogram": cls.KILOGRAM,
            "kilograms": cls.KILOGRAM,
        }
        key = value.strip().lower()
        if key not in aliases:
            raise ValueError(f"unit must be 'pound' or 'kilogram', got '{value}'")
        return aliases[key]

    @property
    def short(self) -> str:
        return "lbs" if self is Unit.POUND else "kg"


def calories_per_unit(unit: Unit) -> float:
    """Calories per pound or per kilogram of body weight change."""
    return CALORIES_PER_POUND if unit is Unit.POUND else CALORIES_PER_KG


def to_kg(weight: float, unit: Unit) -> float:
    if unit is Unit.KILOGRAM:
        return weight
    return weight * KG_PER_POUND


def to_pounds(weight: float, unit: Unit) -> float:
    if unit is Unit.POUND:
        return weight
    return weight / KG_PER_POUND
