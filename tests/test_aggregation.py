"""Tests for period averages, percent change and streaks."""

from __future__ import annotations

import pytest

from tdeetrack.tracking.aggregation import logging_streak, percent_change, period_averages
from tdeetrack.tracking.models import DailyLogEntry, PeriodAverage


def entry(date_key: str, weight: float = 200.0, calories: int = 2000) -> DailyLogEntry:
    return DailyLogEntry(date=date_key, weight=weight, calories=calories)


class TestPeriodAverages:
    """Tests for period_averages around Wednesday 2024-01-10."""

    @pytest.fixture
    def entries(self) -> list[DailyLogEntry]:
        return [
            entry("2023-12-20", 203.0, 2500),
            entry("2023-12-31", 202.0, 2100),
            entry("2024-01-02", 201.0, 2200),
            entry("2024-01-08", 200.0, 2000),
            entry("2024-01-09", 199.0, 1800),
        ]

    def test_this_week(self, entries) -> None:
        snapshot = period_averages(entries, now="2024-01-10")
        assert snapshot.this_week.weight == pytest.approx(199.5)
        assert snapshot.this_week.calories == pytest.approx(1900)
        assert snapshot.this_week.entry_count == 2

    def test_last_week_spans_year_boundary(self, entries) -> None:
        """Sunday Dec 31 through Saturday Jan 6."""
        snapshot = period_averages(entries, now="2024-01-10")
        assert snapshot.last_week.weight == pytest.approx(201.5)
        assert snapshot.last_week.calories == pytest.approx(2150)
        assert snapshot.last_week.entry_count == 2

    def test_months(self, entries) -> None:
        snapshot = period_averages(entries, now="2024-01-10")
        assert snapshot.this_month.weight == pytest.approx(200.0)
        assert snapshot.this_month.calories == pytest.approx(2000)
        assert snapshot.this_month.entry_count == 3
        assert snapshot.last_month.weight == pytest.approx(202.5)
        assert snapshot.last_month.calories == pytest.approx(2300)
        assert snapshot.last_month.entry_count == 2

    def test_empty_buckets_are_zero(self) -> None:
        snapshot = period_averages([], now="2024-01-10")
        assert snapshot.this_week == PeriodAverage()
        assert snapshot.last_month.entry_count == 0

    def test_input_order_irrelevant(self, entries) -> None:
        assert period_averages(entries[::-1], now="2024-01-10") == period_averages(
            entries, now="2024-01-10"
        )


class TestPercentChange:
    """Tests for percent_change."""

    def test_increase(self) -> None:
        assert percent_change(110, 100) == pytest.approx(10.0)

    def test_decrease(self) -> None:
        assert percent_change(90, 100) == pytest.approx(-10.0)

    def test_zero_baseline(self) -> None:
        assert percent_change(5, 0) is None

    def test_missing_values(self) -> None:
        assert percent_change(None, 100) is None
        assert percent_change(100, None) is None


class TestLoggingStreak:
    """Tests for logging_streak with today = 2024-01-10."""

    def test_ending_today(self) -> None:
        entries = [entry("2024-01-08"), entry("2024-01-09"), entry("2024-01-10")]
        assert logging_streak(entries, today="2024-01-10") == 3

    def test_ending_yesterday_still_counts(self) -> None:
        entries = [entry("2024-01-07"), entry("2024-01-08"), entry("2024-01-09")]
        assert logging_streak(entries, today="2024-01-10") == 3

    def test_broken_streak(self) -> None:
        entries = [entry("2024-01-05"), entry("2024-01-06")]
        assert logging_streak(entries, today="2024-01-10") == 0

    def test_gap_stops_count(self) -> None:
        entries = [entry(d) for d in ("2024-01-06", "2024-01-08", "2024-01-09", "2024-01-10")]
        assert logging_streak(entries, today="2024-01-10") == 3

    def test_future_entries_ignored(self) -> None:
        entries = [entry("2024-01-09"), entry("2024-01-10"), entry("2024-01-11")]
        assert logging_streak(entries, today="2024-01-10") == 2

    def test_unsorted_input(self) -> None:
        entries = [entry("2024-01-10"), entry("2024-01-08"), entry("2024-01-09")]
        assert logging_streak(entries, today="2024-01-10") == 3

    def test_empty(self) -> None:
        assert logging_streak([], today="2024-01-10") == 0
