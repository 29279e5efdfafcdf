"""Summary statistics, chart series and text reports.

Combines the estimators into the numbers a dashboard shows: the TDEE figure of
record, calorie target, goal projection and per-entry chart rows.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from tdeetrack.config.settings import AnalysisConfig
from tdeetrack.profiles.body_calc import fallback_tdee, formula_tdee
from tdeetrack.tracking.adaptive import adaptive_tdee, rolling_tdee_series
from tdeetrack.tracking.aggregation import percent_change
from tdeetrack.tracking.dates import (
    DateLike,
    days_between,
    is_in_setup_phase,
    resolve_today,
)
from tdeetrack.tracking.ema import estimate_weekly_change, exponential_moving_average
from tdeetrack.tracking.goals import (
    compute_daily_calorie_delta,
    compute_goal_date,
    compute_target_calories,
    compute_weeks_to_goal,
    format_goal_date,
)
from tdeetrack.tracking.models import (
    AveragesSnapshot,
    DailyLogEntry,
    GoalSettings,
    PeriodAverage,
    SeriesPoint,
    TDEESource,
    TDEEStats,
    sort_entries,
)
from tdeetrack.tracking.regression import target_trajectory, trend_line
from tdeetrack.tracking.units import Unit

logger = logging.getLogger(__name__)


@dataclass
class WeightReport:
    """Summary of the smoothed weight trend."""

    current_weight: float
    current_trend: float
    trend_change: float  # vs period start
    weekly_rate: float  # per week (negative = losing)
    period_days: int
    start_weight: float
    start_trend: float


def select_tdee(
    entries: list[DailyLogEntry],
    settings: Optional[GoalSettings],
    current_weight: float,
    today: Optional[DateLike] = None,
    analysis: Optional[AnalysisConfig] = None,
) -> tuple[int, TDEESource]:
    """
    Pick the TDEE figure of record.

    The adaptive estimate is used unless it is unavailable or the user is
    still in the setup phase. Then the Mifflin-St Jeor estimate at the current
    weight is used, and without body stats a flat bodyweight multiple.

    Returns:
        (tdee, source)
    """
    analysis = analysis or AnalysisConfig()
    unit = settings.unit if settings else Unit.POUND
    start_date = settings.start_date if settings else None

    in_setup = is_in_setup_phase(start_date, analysis.setup_phase_days, today)
    adaptive = adaptive_tdee(
        entries,
        window_days=analysis.adaptive_window_days,
        unit=unit,
        min_entries=analysis.min_entries,
        tdee_bounds=analysis.tdee_bounds,
    )
    if adaptive is not None and not in_setup:
        return adaptive.tdee, TDEESource.ADAPTIVE

    if in_setup:
        logger.debug("In setup phase since %s, using formula estimate", start_date)

    estimate = formula_tdee(settings, current_weight)
    if estimate is not None:
        return estimate, TDEESource.FORMULA

    return (
        fallback_tdee(current_weight, unit, analysis.fallback_multiplier),
        TDEESource.FALLBACK,
    )


def calculate_stats(
    entries: list[DailyLogEntry],
    settings: Optional[GoalSettings],
    today: Optional[DateLike] = None,
    analysis: Optional[AnalysisConfig] = None,
) -> Optional[TDEEStats]:
    """
    Headline stats against the user's goal.

    Args:
        entries: Daily log entries in any order
        settings: Goal settings; without them there is no goal to project
        today: Reference date for the setup phase and goal date
        analysis: Estimator tuning (defaults used when omitted)

    Returns:
        TDEEStats, or None when settings are missing
    """
    if settings is None:
        return None

    ref = resolve_today(today)
    ordered = sort_entries(entries)
    current_weight = ordered[-1].weight if ordered else settings.starting_weight

    tdee, source = select_tdee(ordered, settings, current_weight, ref, analysis)

    rate = settings.weekly_rate_goal
    weeks_to_goal = compute_weeks_to_goal(current_weight, settings.goal_weight, rate)
    goal_date = compute_goal_date(ref, weeks_to_goal)

    return TDEEStats(
        current_weight=current_weight,
        total_change_so_far=round(current_weight - settings.starting_weight, 1),
        tdee=tdee,
        target_daily_calorie_delta=compute_daily_calorie_delta(rate, settings.unit),
        target_calories=compute_target_calories(tdee, rate, settings.unit),
        weeks_to_goal=round(weeks_to_goal, 1),
        goal_date=format_goal_date(goal_date),
        tdee_source=source,
    )


def build_chart_series(
    entries: list[DailyLogEntry],
    settings: Optional[GoalSettings] = None,
    analysis: Optional[AnalysisConfig] = None,
) -> list[SeriesPoint]:
    """
    Per-entry chart rows, in the same order as ``entries``.

    Trend lines regress on days since the first entry. The target line runs
    from the starting weight at the start date (or the first entry) at the
    goal rate; it is None without settings or before the start date.
    """
    if not entries:
        return []

    analysis = analysis or AnalysisConfig()

    # Sort while remembering each entry's position in the caller's list
    indexed = sorted(enumerate(entries), key=lambda pair: pair[1].date)
    ordered = [entry for _, entry in indexed]
    first_date = ordered[0].date
    offsets = [days_between(first_date, e.date) for e in ordered]

    weights = [e.weight for e in ordered]
    calories = [e.calories for e in ordered]

    smoothed = exponential_moving_average(weights, analysis.ema_smoothing)
    weight_trend = trend_line(list(zip(offsets, weights)))
    calorie_trend = trend_line(list(zip(offsets, calories)))
    rolling = rolling_tdee_series(
        ordered,
        settings,
        window_days=analysis.rolling_window_days,
        setup_days=analysis.setup_phase_days,
        min_entries=analysis.min_entries,
        tdee_bounds=analysis.tdee_bounds,
        fallback_multiplier=analysis.fallback_multiplier,
    )
    targets = _target_values(ordered, settings)

    points: list[Optional[SeriesPoint]] = [None] * len(entries)
    for i, (original_index, entry) in enumerate(indexed):
        points[original_index] = SeriesPoint(
            date=entry.date,
            weight=entry.weight,
            smoothed_weight=round(smoothed[i], 2),
            trend_value=round(weight_trend[i], 2),
            target_value=round(targets[i], 2) if targets[i] is not None else None,
            calories=entry.calories,
            calories_trend=round(calorie_trend[i], 1),
            rolling_tdee=rolling[i],
        )
    return [p for p in points if p is not None]


def _target_values(
    ordered: list[DailyLogEntry], settings: Optional[GoalSettings]
) -> list[Optional[float]]:
    if settings is None:
        return [None] * len(ordered)

    base_date = settings.start_date or ordered[0].date
    span = days_between(base_date, ordered[-1].date) + 1
    trajectory = target_trajectory(settings.starting_weight, settings.weekly_rate_goal, span)

    values: list[Optional[float]] = []
    for entry in ordered:
        offset = days_between(base_date, entry.date)
        values.append(trajectory[offset] if 0 <= offset < len(trajectory) else None)
    return values


def generate_weight_report(
    entries: list[DailyLogEntry],
    smoothing: float = 0.1,
) -> Optional[WeightReport]:
    """Smoothed-trend summary over the given entries."""
    if len(entries) < 2:
        return None

    ordered = sort_entries(entries)
    trends = exponential_moving_average([e.weight for e in ordered], smoothing)

    period_days = days_between(ordered[0].date, ordered[-1].date)
    if period_days == 0:
        period_days = 1  # Avoid division by zero

    return WeightReport(
        current_weight=ordered[-1].weight,
        current_trend=trends[-1],
        trend_change=trends[-1] - trends[0],
        weekly_rate=estimate_weekly_change(trends[0], trends[-1], period_days),
        period_days=period_days,
        start_weight=ordered[0].weight,
        start_trend=trends[0],
    )


def format_weight_report(report: WeightReport, unit: Unit = Unit.POUND) -> str:
    """Format weight report as text."""
    direction = "lost" if report.trend_change < 0 else "gained"
    rate_dir = "losing" if report.weekly_rate < 0 else "gaining"
    u = unit.short

    lines = [
        f"Weight Trend Report ({report.period_days} days)",
        "=" * 45,
        f"Current weight: {report.current_weight:.1f} {u}",
        f"Current trend:  {report.current_trend:.1f} {u} (EMA)",
        f"Trend change:   {abs(report.trend_change):.1f} {u} {direction} (from {report.start_trend:.1f})",
        f"Rate:           {abs(report.weekly_rate):.1f} {u}/week ({rate_dir})",
    ]

    return "\n".join(lines)


def format_stats_report(stats: TDEEStats, settings: GoalSettings) -> str:
    """Format headline stats as text."""
    u = settings.unit.short
    change_dir = "lost" if stats.total_change_so_far < 0 else "gained"

    lines = [
        "Total Daily Energy Expenditure (TDEE) Summary",
        "=" * 50,
        f"Current weight:   {stats.current_weight:.1f} {u}",
        f"Change so far:    {abs(stats.total_change_so_far):.1f} {u} {change_dir}",
        f"Estimated TDEE:   {stats.tdee} kcal/day ({stats.tdee_source.value})",
        f"Daily adjustment: {stats.target_daily_calorie_delta:+d} kcal/day "
        f"for {settings.weekly_rate_goal:+.2f} {u}/week",
        f"Target calories:  {stats.target_calories} kcal/day",
    ]

    if settings.weekly_rate_goal != 0:
        lines.append("")
        lines.append(f"Progress toward goal ({settings.goal_weight:.1f} {u})")
        lines.append("-" * 45)
        if stats.weeks_to_goal > 0:
            lines.append(f"  At target rate: ~{stats.weeks_to_goal:.1f} weeks ({stats.goal_date})")
        else:
            lines.append("  Goal reached")

    return "\n".join(lines)


def _format_period(label: str, period: PeriodAverage, previous: PeriodAverage) -> str:
    if period.entry_count == 0:
        return f"{label:<11} no data"

    text = (
        f"{label:<11} {period.weight:6.1f} avg weight, "
        f"{period.calories:6.0f} kcal/day ({period.entry_count} entries)"
    )
    if previous.entry_count:
        change = percent_change(period.calories, previous.calories)
        if change is not None:
            text += f", calories {change:+.1f}%"
    return text


def format_averages_report(snapshot: AveragesSnapshot) -> str:
    """Format period averages as text, with change vs the prior period."""
    lines = [
        "Period Averages",
        "=" * 45,
        _format_period("This week", snapshot.this_week, snapshot.last_week),
        _format_period("Last week", snapshot.last_week, PeriodAverage()),
        _format_period("This month", snapshot.this_month, snapshot.last_month),
        _format_period("Last month", snapshot.last_month, PeriodAverage()),
    ]
    return "\n".join(lines)
