"""Tests for formula-based BMR and TDEE."""

from __future__ import annotations

from dataclasses import replace

import pytest

from tdeetrack.profiles.body_calc import (
    Sex,
    activity_multiplier_for,
    calculate_bmr,
    calculate_tdee,
    fallback_tdee,
    formula_tdee,
)
from tdeetrack.tracking.models import GoalSettings
from tdeetrack.tracking.units import KG_PER_POUND, Unit


class TestCalculateBMR:
    """Tests for the Mifflin-St Jeor equation."""

    def test_male(self) -> None:
        # 10*80 + 6.25*180 - 5*35 + 5
        assert calculate_bmr(35, Sex.MALE, 180, 80) == pytest.approx(1755.0)

    def test_female(self) -> None:
        # 10*80 + 6.25*180 - 5*35 - 161
        assert calculate_bmr(35, Sex.FEMALE, 180, 80) == pytest.approx(1589.0)

    def test_tdee_scales_bmr(self) -> None:
        assert calculate_tdee(1755.0, 1.55) == pytest.approx(2720.25)


class TestActivityLevels:
    """Tests for named activity levels."""

    def test_lookup(self) -> None:
        assert activity_multiplier_for("moderate") == 1.55
        assert activity_multiplier_for("SEDENTARY") == 1.2

    def test_unknown_level(self) -> None:
        with pytest.raises(ValueError):
            activity_multiplier_for("couch")


class TestFormulaTDEE:
    """Tests for formula_tdee."""

    def test_full_profile(self, goal_with_stats: GoalSettings) -> None:
        weight_kg = 200 * KG_PER_POUND
        expected = round((10 * weight_kg + 6.25 * 180 - 5 * 35 + 5) * 1.55)
        assert formula_tdee(goal_with_stats) == expected

    def test_uses_current_weight(self, goal_with_stats: GoalSettings) -> None:
        lighter = formula_tdee(goal_with_stats, 180.0)
        heavier = formula_tdee(goal_with_stats, 220.0)
        assert lighter < heavier

    @pytest.mark.parametrize("field", ["sex", "age", "height_cm", "activity_multiplier"])
    def test_missing_stat_returns_none(self, goal_with_stats: GoalSettings, field: str) -> None:
        """A partial profile counts as no profile."""
        partial = replace(goal_with_stats, **{field: None})
        assert formula_tdee(partial) is None

    def test_no_settings(self) -> None:
        assert formula_tdee(None) is None

    def test_scales_with_multiplier(self, goal_with_stats: GoalSettings) -> None:
        """Same BMR, so TDEE ratio equals multiplier ratio."""
        low = formula_tdee(replace(goal_with_stats, activity_multiplier=1.2))
        high = formula_tdee(replace(goal_with_stats, activity_multiplier=1.9))
        assert high / low == pytest.approx(1.9 / 1.2, rel=1e-3)

    def test_kilogram_settings(self) -> None:
        settings = GoalSettings(
            starting_weight=80.0,
            goal_weight=75.0,
            weekly_rate_goal=-0.5,
            unit=Unit.KILOGRAM,
            sex="female",
            age=35,
            height_cm=180.0,
            activity_multiplier=1.2,
        )
        assert formula_tdee(settings) == round(1589.0 * 1.2)


class TestFallbackTDEE:
    """Tests for the flat bodyweight estimate."""

    def test_pounds(self) -> None:
        assert fallback_tdee(200.0) == 2800

    def test_kilograms_converted_to_pounds(self) -> None:
        assert fallback_tdee(100.0, Unit.KILOGRAM) == round(100.0 / KG_PER_POUND * 14)

    def test_custom_multiplier(self) -> None:
        assert fallback_tdee(200.0, multiplier=15) == 3000
