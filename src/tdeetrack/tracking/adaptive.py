"""Adaptive TDEE estimation from observed intake and weight drift.

Energy balance says that over a window

    weight_change × calories_per_unit = calories_in − calories_out

so with average intake known and the daily weight slope fitted by regression,
the unknown burn rate is

    TDEE = avg_calories − slope × calories_per_unit

The slope comes from a least-squares fit over the whole window. The x axis is
days since the first entry in the window, so skipped days are handled correctly.
"""

from __future__ import annotations

import logging
from typing import Optional

from tdeetrack.profiles.body_calc import (
    FALLBACK_TDEE_MULTIPLIER,
    fallback_tdee,
    formula_tdee,
)
from tdeetrack.tracking.dates import days_between, is_in_setup_phase, parse_date_key
from tdeetrack.tracking.models import (
    DailyLogEntry,
    GoalSettings,
    TDEEResult,
    sort_entries,
)
from tdeetrack.tracking.regression import average, linear_regression
from tdeetrack.tracking.units import DAYS_PER_WEEK, Unit, calories_per_unit

logger = logging.getLogger(__name__)

MIN_ENTRIES_FOR_TDEE = 7
ANALYSIS_WINDOW_DAYS = 21
ROLLING_WINDOW_DAYS = 14
SETUP_PHASE_DAYS = 14

# Soft bounds so a tiny noisy window cannot produce an absurd number
TDEE_MIN = 800
TDEE_MAX = 6000


def trailing_window(
    sorted_entries: list[DailyLogEntry], window_days: int
) -> list[DailyLogEntry]:
    """Entries dated within ``window_days`` calendar days of the newest one.

    Args:
        sorted_entries: Entries in ascending date order
        window_days: Window length in days

    Returns:
        The trailing slice (may be empty)
    """
    if not sorted_entries:
        return []
    newest = sorted_entries[-1].date
    return [e for e in sorted_entries if days_between(e.date, newest) < window_days]


def adaptive_tdee(
    entries: list[DailyLogEntry],
    window_days: int = ANALYSIS_WINDOW_DAYS,
    unit: Unit = Unit.POUND,
    min_entries: int = MIN_ENTRIES_FOR_TDEE,
    tdee_bounds: tuple[float, float] = (TDEE_MIN, TDEE_MAX),
) -> Optional[TDEEResult]:
    """
    Estimate TDEE from the most recent window of logs.

    Args:
        entries: Daily log entries in any order
        window_days: Trailing window size in calendar days
        unit: Weight unit of the entries (selects 3500 kcal/lb or 7700 kcal/kg)
        min_entries: Minimum entries required inside the window
        tdee_bounds: (min, max) clamp applied to the estimate

    Returns:
        TDEEResult, or None if there is too little data or the weights
        cannot be regressed (e.g. all entries share one date)

    Example:
        14 days eating 2000 kcal while losing 0.1 lb/day gives
        TDEE ≈ 2000 + 0.1 × 3500 = 2350 and a trend of -0.7 lb/week.
    """
    window = trailing_window(sort_entries(entries), window_days)
    if len(window) < min_entries:
        logger.debug(
            "Adaptive TDEE needs %d entries in window, have %d", min_entries, len(window)
        )
        return None

    avg_calories = average([e.calories for e in window])

    first_date = window[0].date
    points = [(days_between(first_date, e.date), e.weight) for e in window]
    regression = linear_regression(points)
    if regression is None:
        logger.debug("Weight regression is degenerate for window starting %s", first_date)
        return None

    daily_balance = regression.slope * calories_per_unit(unit)
    raw_tdee = avg_calories - daily_balance

    low, high = tdee_bounds
    tdee = min(max(raw_tdee, low), high)
    if tdee != raw_tdee:
        logger.debug("Clamped adaptive TDEE %.0f into [%s, %s]", raw_tdee, low, high)

    return TDEEResult(
        tdee=round(tdee),
        weight_trend_per_week=round(regression.slope * DAYS_PER_WEEK, 2),
    )


def setup_phase_estimate(
    settings: Optional[GoalSettings],
    weight: float,
    fallback_multiplier: float = FALLBACK_TDEE_MULTIPLIER,
) -> int:
    """Formula estimate at ``weight``, or the flat fallback without body stats."""
    estimate = formula_tdee(settings, weight)
    if estimate is not None:
        return estimate
    unit = settings.unit if settings else Unit.POUND
    return fallback_tdee(weight, unit, fallback_multiplier)


def rolling_tdee_series(
    entries: list[DailyLogEntry],
    settings: Optional[GoalSettings] = None,
    window_days: int = ROLLING_WINDOW_DAYS,
    setup_days: int = SETUP_PHASE_DAYS,
    min_entries: int = MIN_ENTRIES_FOR_TDEE,
    tdee_bounds: tuple[float, float] = (TDEE_MIN, TDEE_MAX),
    fallback_multiplier: float = FALLBACK_TDEE_MULTIPLIER,
) -> list[Optional[int]]:
    """
    History of TDEE estimates, one per entry in ascending date order.

    Each point is computed from scratch over its own trailing window of the
    entries up to and including that date. Points whose date falls inside the
    user's setup phase get the formula estimate (at that day's weight)
    instead.

    Args:
        entries: Daily log entries in any order
        settings: Goal settings (unit, start date, body stats); optional
        window_days: Trailing window per point
        setup_days: Length of the setup phase
        min_entries: Minimum entries per window
        tdee_bounds: Clamp for the adaptive estimate
        fallback_multiplier: kcal per lb used when no formula is available

    Returns:
        List aligned with ``sort_entries(entries)``; None where a point has
        neither enough history nor a setup-phase substitute
    """
    ordered = sort_entries(entries)
    dates = [parse_date_key(e.date) for e in ordered]
    unit = settings.unit if settings else Unit.POUND
    start_date = settings.start_date if settings else None

    series: list[Optional[int]] = []
    window_start = 0
    for i, entry in enumerate(ordered):
        while window_start < i and (dates[i] - dates[window_start]).days >= window_days:
            window_start += 1

        if is_in_setup_phase(start_date, setup_days, today=dates[i]):
            series.append(setup_phase_estimate(settings, entry.weight, fallback_multiplier))
            continue

        result = adaptive_tdee(
            ordered[window_start : i + 1],
            window_days=window_days,
            unit=unit,
            min_entries=min_entries,
            tdee_bounds=tdee_bounds,
        )
        series.append(result.tdee if result else None)

    return series
