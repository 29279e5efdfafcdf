"""Tests for goal projection and on-track checks."""

from __future__ import annotations

from datetime import date

import pytest

from tdeetrack.tracking.goals import (
    classify_strategy,
    compute_daily_calorie_delta,
    compute_goal_date,
    compute_target_calories,
    compute_weekly_rate_from_history,
    compute_weeks_to_goal,
    format_goal_date,
    is_on_track,
)
from tdeetrack.tracking.models import Strategy
from tdeetrack.tracking.units import Unit


class TestCalorieTargets:
    """Tests for daily delta and target calories."""

    def test_deficit(self) -> None:
        assert compute_daily_calorie_delta(-1.0) == -500

    def test_surplus(self) -> None:
        assert compute_daily_calorie_delta(0.5) == 250

    def test_kilograms(self) -> None:
        assert compute_daily_calorie_delta(-0.5, Unit.KILOGRAM) == -550

    def test_target_calories(self) -> None:
        assert compute_target_calories(2350, -1.0) == 1850

    def test_maintenance(self) -> None:
        assert compute_target_calories(2350, 0.0) == 2350


class TestWeeksToGoal:
    """Tests for compute_weeks_to_goal."""

    def test_cut(self) -> None:
        assert compute_weeks_to_goal(200.0, 180.0, -1.0) == pytest.approx(20.0)

    def test_bulk(self) -> None:
        assert compute_weeks_to_goal(150.0, 160.0, 0.5) == pytest.approx(20.0)

    def test_reached(self) -> None:
        assert compute_weeks_to_goal(180.0, 180.0, -1.0) == 0

    def test_overshot(self) -> None:
        assert compute_weeks_to_goal(178.0, 180.0, -1.0) == 0
        assert compute_weeks_to_goal(162.0, 160.0, 0.5) == 0

    def test_maintenance(self) -> None:
        assert compute_weeks_to_goal(180.0, 175.0, 0.0) == 0


class TestGoalDate:
    """Tests for goal date projection."""

    def test_two_weeks(self) -> None:
        assert compute_goal_date(date(2024, 1, 1), 2.0) == date(2024, 1, 15)

    def test_rounds_to_nearest_day(self) -> None:
        # 18.7 weeks = 130.9 days
        assert compute_goal_date(date(2024, 2, 14), 18.7) == date(2024, 6, 24)

    def test_near_zero_rate_caps_at_calendar_end(self) -> None:
        weeks = compute_weeks_to_goal(200.0, 100.0, -0.00001)
        assert compute_goal_date(date(2024, 2, 14), weeks) == date.max

    def test_infinite_weeks(self) -> None:
        assert compute_goal_date(date(2024, 2, 14), float("inf")) == date.max

    def test_format(self) -> None:
        assert format_goal_date(date(2025, 3, 3)) == "Mar 3, 2025"


class TestWeeklyRateFromHistory:
    """Tests for compute_weekly_rate_from_history."""

    def test_losing(self, losing_entries) -> None:
        rate = compute_weekly_rate_from_history(losing_entries)
        assert rate is not None
        assert rate.actual_rate == pytest.approx(-0.7)
        assert rate.days_tracked == 14

    def test_too_few_entries(self, make_entries) -> None:
        assert compute_weekly_rate_from_history(make_entries([200.0] * 6)) is None

    def test_days_tracked_is_calendar_span(self, make_entries) -> None:
        entries = make_entries([200.0 - 0.2 * i for i in range(7)], step=2)
        rate = compute_weekly_rate_from_history(entries)
        assert rate.days_tracked == 13
        assert rate.actual_rate == pytest.approx(-0.7)


class TestIsOnTrack:
    """Tests for is_on_track."""

    def test_slower_than_target(self) -> None:
        assert is_on_track(-0.8, -1.0) is True

    def test_at_tolerance_limit(self) -> None:
        assert is_on_track(-1.5, -1.0) is True

    def test_too_fast(self) -> None:
        assert is_on_track(-1.6, -1.0) is False

    def test_wrong_direction(self) -> None:
        assert is_on_track(0.2, -1.0) is False

    def test_maintenance(self) -> None:
        assert is_on_track(0.0, 0.0) is True
        assert is_on_track(0.1, 0.0) is False

    def test_custom_tolerance(self) -> None:
        assert is_on_track(-1.6, -1.0, tolerance=2.0) is True


class TestStrategy:
    """Tests for classify_strategy."""

    def test_classification(self) -> None:
        assert classify_strategy(-0.5) is Strategy.CUT
        assert classify_strategy(0.5) is Strategy.BULK
        assert classify_strategy(0.0) is Strategy.MAINTAIN
