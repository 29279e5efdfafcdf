"""Goal projection: calorie targets, time to goal and on-track checks.

The sign of the weekly rate goal carries the direction. A negative rate turns
into a daily deficit and a positive one into a surplus through plain
arithmetic, so no cut/bulk branching is needed.
"""

from __future__ import annotations

import math
from datetime import date, timedelta
from typing import Optional

from tdeetrack.tracking.dates import days_between, format_display_date
from tdeetrack.tracking.models import (
    DailyLogEntry,
    Strategy,
    WeeklyRate,
    sort_entries,
    strategy_for_rate,
)
from tdeetrack.tracking.regression import linear_regression
from tdeetrack.tracking.units import DAYS_PER_WEEK, Unit, calories_per_unit

MIN_ENTRIES_FOR_RATE = 7

# Actual rate may run up to 1.5x the target and still count as on track
ON_TRACK_TOLERANCE = 1.5


def compute_daily_calorie_delta(weekly_rate_goal: float, unit: Unit = Unit.POUND) -> int:
    """Daily surplus (+) or deficit (-) needed for the weekly rate.

    Example:
        >>> compute_daily_calorie_delta(-1.0)
        -500
    """
    return round(weekly_rate_goal * calories_per_unit(unit) / DAYS_PER_WEEK)


def compute_target_calories(
    tdee: float, weekly_rate_goal: float, unit: Unit = Unit.POUND
) -> int:
    """Daily calorie target to hit the weekly rate.

    Example:
        >>> compute_target_calories(2350, -1.0)
        1850
    """
    return round(tdee + weekly_rate_goal * calories_per_unit(unit) / DAYS_PER_WEEK)


def compute_weeks_to_goal(
    current_weight: float, goal_weight: float, weekly_rate_goal: float
) -> float:
    """
    Weeks needed to reach the goal at the target rate.

    Returns 0 for maintenance (nothing to arrive at), and 0 when the goal is
    already reached or lies in the opposite direction of the rate, rather than
    reporting a negative count.

    Args:
        current_weight: Current weight
        goal_weight: Goal weight, same unit
        weekly_rate_goal: Signed rate per week

    Returns:
        Non-negative number of weeks
    """
    if weekly_rate_goal == 0:
        return 0.0

    gap = goal_weight - current_weight
    if _sign(gap) != _sign(weekly_rate_goal):
        return 0.0

    return gap / weekly_rate_goal


def compute_goal_date(today: date, weeks_to_goal: float) -> date:
    """Projected arrival date, rounded to the nearest day.

    A projection past the end of the calendar (a near-zero rate) gives
    ``date.max``.
    """
    days = weeks_to_goal * DAYS_PER_WEEK
    max_days = (date.max - today).days
    if not math.isfinite(days) or days >= max_days:
        return date.max
    return today + timedelta(days=round(days))


def format_goal_date(goal_date: date) -> str:
    """Display form of the goal date, e.g. "Mar 3, 2025"."""
    return format_display_date(goal_date, with_year=True)


def compute_weekly_rate_from_history(
    entries: list[DailyLogEntry],
    min_entries: int = MIN_ENTRIES_FOR_RATE,
) -> Optional[WeeklyRate]:
    """
    Observed weekly rate of change across the full history.

    Args:
        entries: Daily log entries in any order
        min_entries: Minimum number of entries required

    Returns:
        WeeklyRate with the regression slope × 7 and the inclusive number of
        calendar days covered, or None with too little or degenerate data
    """
    if len(entries) < min_entries:
        return None

    ordered = sort_entries(entries)
    first_date = ordered[0].date
    points = [(days_between(first_date, e.date), e.weight) for e in ordered]
    regression = linear_regression(points)
    if regression is None:
        return None

    return WeeklyRate(
        actual_rate=round(regression.slope * DAYS_PER_WEEK, 2),
        days_tracked=days_between(first_date, ordered[-1].date) + 1,
    )


def is_on_track(
    actual_rate: float,
    target_rate: float,
    tolerance: float = ON_TRACK_TOLERANCE,
) -> bool:
    """
    Whether the observed rate is consistent with the goal rate.

    On track means moving in the same direction as the target and no faster
    than ``tolerance`` times the target magnitude.
    """
    return _sign(actual_rate) == _sign(target_rate) and abs(actual_rate) <= tolerance * abs(
        target_rate
    )


def classify_strategy(weekly_rate_goal: float) -> Strategy:
    """Cut, bulk or maintain from the sign of the rate."""
    return strategy_for_rate(weekly_rate_goal)


def _sign(value: float) -> int:
    if value == 0 or math.isnan(value):
        return 0
    return 1 if value > 0 else -1
