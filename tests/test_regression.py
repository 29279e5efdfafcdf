"""Tests for regression and series helpers."""

from __future__ import annotations

import pytest

from tdeetrack.tracking.regression import (
    average,
    calculate_slope,
    linear_regression,
    target_trajectory,
    trend_line,
)


class TestLinearRegression:
    """Tests for linear_regression."""

    def test_perfect_line(self) -> None:
        result = linear_regression([(0, 0), (1, 1), (2, 2)])
        assert result is not None
        assert result.slope == pytest.approx(1.0)
        assert result.intercept == pytest.approx(0.0)

    def test_negative_slope_with_offset(self) -> None:
        result = linear_regression([(0, 200), (7, 199.3), (14, 198.6)])
        assert result is not None
        assert result.slope == pytest.approx(-0.1)
        assert result.intercept == pytest.approx(200.0)

    def test_too_few_points(self) -> None:
        assert linear_regression([]) is None
        assert linear_regression([(0, 1)]) is None

    def test_shared_x_is_degenerate(self) -> None:
        """All points on the same day cannot define a slope."""
        assert linear_regression([(3, 180), (3, 181), (3, 179)]) is None

    def test_returns_plain_floats(self) -> None:
        result = linear_regression([(0, 1), (1, 3)])
        assert type(result.slope) is float
        assert type(result.intercept) is float


class TestCalculateSlope:
    """Tests for calculate_slope."""

    def test_slope(self) -> None:
        assert calculate_slope([0, 1, 2], [1, 3, 5]) == pytest.approx(2.0)

    def test_length_mismatch(self) -> None:
        assert calculate_slope([0, 1, 2], [1, 3]) is None

    def test_too_short(self) -> None:
        assert calculate_slope([1], [1]) is None


class TestTrendLine:
    """Tests for trend_line."""

    def test_evaluates_fit_at_each_x(self) -> None:
        values = trend_line([(0, 1.0), (1, 2.0), (3, 4.0)])
        assert values == pytest.approx([1.0, 2.0, 4.0])

    def test_degenerate_returns_original_values(self) -> None:
        assert trend_line([(0, 180.0)]) == [180.0]
        assert trend_line([(2, 180.0), (2, 182.0)]) == [180.0, 182.0]

    def test_smooths_noise(self) -> None:
        values = trend_line([(0, 200.0), (1, 202.0), (2, 200.0), (3, 202.0)])
        assert len(values) == 4
        assert max(values) - min(values) < 2.0


class TestTargetTrajectory:
    """Tests for target_trajectory."""

    def test_example(self) -> None:
        assert target_trajectory(200, -0.7, 4) == pytest.approx([200, 199.9, 199.8, 199.7])

    def test_gain(self) -> None:
        assert target_trajectory(150, 0.7, 2) == pytest.approx([150, 150.1])

    def test_no_days(self) -> None:
        assert target_trajectory(200, -0.7, 0) == []
        assert target_trajectory(200, -0.7, -3) == []


class TestAverage:
    """Tests for average."""

    def test_empty(self) -> None:
        assert average([]) == 0

    def test_mean(self) -> None:
        assert average([1, 2, 3, 4, 5]) == pytest.approx(3.0)
