"""Least-squares regression and simple series helpers.

These functions are unit-agnostic: they operate on whatever numbers they are
given. Callers build ``(x, y)`` points from date offsets (``days_between``),
never from list positions, so that skipped days do not distort slopes.
"""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from tdeetrack.tracking.models import RegressionResult
from tdeetrack.tracking.units import DAYS_PER_WEEK

Point = tuple[float, float]


def linear_regression(points: Sequence[Point]) -> Optional[RegressionResult]:
    """Ordinary least squares fit of y = slope * x + intercept.

    Args:
        points: ``(x, y)`` pairs

    Returns:
        RegressionResult, or None with fewer than two points or when every
        x value is identical (zero variance in x)

    Example:
        >>> linear_regression([(0, 0), (1, 1), (2, 2)])
        RegressionResult(slope=1.0, intercept=0.0)
    """
    n = len(points)
    if n < 2:
        return None

    data = np.asarray(points, dtype=float)
    xs = data[:, 0]
    ys = data[:, 1]

    if np.all(xs == xs[0]):
        return None

    sum_x = xs.sum()
    sum_y = ys.sum()
    sum_xy = (xs * ys).sum()
    sum_xx = (xs * xs).sum()

    denominator = n * sum_xx - sum_x * sum_x
    if denominator == 0:
        return None

    slope = (n * sum_xy - sum_x * sum_y) / denominator
    intercept = (sum_y - slope * sum_x) / n

    return RegressionResult(slope=float(slope), intercept=float(intercept))


def calculate_slope(
    x_values: Sequence[float], y_values: Sequence[float]
) -> Optional[float]:
    """Slope of the regression line, or None if it cannot be computed."""
    if len(x_values) != len(y_values) or len(x_values) < 2:
        return None
    result = linear_regression(list(zip(x_values, y_values)))
    return result.slope if result else None


def trend_line(points: Sequence[Point]) -> list[float]:
    """Evaluate the fitted line at each input x.

    If the regression fails, the y values are returned unchanged.
    """
    result = linear_regression(points)
    if result is None:
        return [float(y) for _, y in points]

    xs = np.asarray([x for x, _ in points], dtype=float)
    return (result.slope * xs + result.intercept).tolist()


def target_trajectory(
    start_value: float, weekly_rate: float, num_days: int
) -> list[float]:
    """Straight-line projected path starting at ``start_value``.

    Example:
        >>> target_trajectory(200, -0.7, 4)
        [200.0, 199.9, 199.8, 199.7]
    """
    if num_days <= 0:
        return []
    daily_rate = weekly_rate / DAYS_PER_WEEK
    return (start_value + daily_rate * np.arange(num_days, dtype=float)).tolist()


def average(values: Sequence[float]) -> float:
    """Arithmetic mean; 0 for an empty sequence."""
    if len(values) == 0:
        return 0.0
    return float(np.mean(values))
