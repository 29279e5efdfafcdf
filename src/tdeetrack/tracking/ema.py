"""Exponentially smoothed moving average for weight tracking.

This implements the Hacker's Diet trend calculation:
    T_n = T_{n-1} + smoothing × (W_n - T_{n-1})

which is the same recurrence as
    ema[i] = α·w[i] + (1 - α)·ema[i-1]

With smoothing=0.1 (10%), 90% of each value comes from history. The trend
reacts slowly, but day-to-day water and gut-content swings barely move it, and
a single outlier weigh-in is damped to a fraction of its deviation before the
trend relaxes back toward the baseline.

Reference: https://www.fourmilab.ch/hackdiet/
"""

from __future__ import annotations

from typing import Sequence

from tdeetrack.tracking.units import DAYS_PER_WEEK

# Default smoothing factor (10% = 0.1)
# Classic Hacker's Diet value: ~10 day time constant
DEFAULT_SMOOTHING = 0.1


def update_trend(
    prev_trend: float,
    today_value: float,
    smoothing: float = DEFAULT_SMOOTHING,
) -> float:
    """
    Calculate the next trend value.

    Args:
        prev_trend: Previous trend value (T_{n-1})
        today_value: Today's observation (W_n)
        smoothing: Smoothing factor, default 0.1 (10%)
                   Higher values = more responsive, more noise
                   Lower values = smoother, more lag

    Returns:
        Today's trend value (T_n)

    Example:
        >>> update_trend(173.2, 171.5)
        173.03
    """
    return prev_trend + smoothing * (today_value - prev_trend)


def exponential_moving_average(
    series: Sequence[float],
    alpha: float = DEFAULT_SMOOTHING,
) -> list[float]:
    """
    Smooth a series with an exponential moving average.

    The first value seeds the average. Empty input gives an empty list and a
    single value is returned unchanged.

    Args:
        series: Observations in chronological order
        alpha: Smoothing factor, default 0.1

    Returns:
        List of smoothed values, same length as ``series``

    Example:
        >>> exponential_moving_average([180, 180, 185, 180, 180])
        [180, 180.0, 180.5, 180.45, 180.405]
    """
    if len(series) == 0:
        return []

    trends = [series[0]]
    for value in series[1:]:
        trends.append(update_trend(trends[-1], value, alpha))
    return trends


def estimate_weekly_change(trend_start: float, trend_end: float, days: int = 7) -> float:
    """
    Estimate weekly weight change from two trend values.

    Args:
        trend_start: Trend value at start of period
        trend_end: Trend value at end of period
        days: Number of days between the two values (default 7)

    Returns:
        Estimated weekly change (negative = losing)
    """
    if days <= 0:
        days = 1
    daily_change = (trend_end - trend_start) / days
    return daily_change * DAYS_PER_WEEK
