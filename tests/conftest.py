"""Pytest fixtures for tdeetrack tests."""

from __future__ import annotations

from datetime import timedelta
from pathlib import Path

import pytest

from tdeetrack.tracking.dates import format_date_key, parse_date_key
from tdeetrack.tracking.models import DailyLogEntry, GoalSettings


@pytest.fixture
def make_entries():
    """Factory for daily entries starting at a given date.

    ``calories`` may be a single value or one per weight; ``step`` spaces
    entries that many days apart.
    """

    def _make(weights, calories=2000, start="2024-02-01", step=1):
        first = parse_date_key(start)
        if not isinstance(calories, list):
            calories = [calories] * len(weights)
        return [
            DailyLogEntry(
                date=format_date_key(first + timedelta(days=i * step)),
                weight=weight,
                calories=cal,
            )
            for i, (weight, cal) in enumerate(zip(weights, calories))
        ]

    return _make


@pytest.fixture
def losing_entries(make_entries):
    """14 days at 2000 kcal losing 0.1 lb/day: 200.0 down to 198.7."""
    return make_entries([round(200 - 0.1 * i, 1) for i in range(14)])


@pytest.fixture
def flat_entries(make_entries):
    """14 days at 2000 kcal holding 180 lb."""
    return make_entries([180.0] * 14)


@pytest.fixture
def goal() -> GoalSettings:
    """Cut from 200 to 180 at 1 lb/week, started well before the sample data."""
    return GoalSettings(
        starting_weight=200.0,
        goal_weight=180.0,
        weekly_rate_goal=-1.0,
        start_date="2024-01-01",
    )


@pytest.fixture
def goal_with_stats() -> GoalSettings:
    """Same goal with a full body-stat profile."""
    return GoalSettings(
        starting_weight=200.0,
        goal_weight=180.0,
        weekly_rate_goal=-1.0,
        start_date="2024-01-01",
        sex="male",
        age=35,
        height_cm=180.0,
        activity_multiplier=1.55,
    )


@pytest.fixture
def entries_csv(tmp_path: Path, losing_entries) -> Path:
    """CSV file holding the losing_entries sample."""
    path = tmp_path / "entries.csv"
    lines = ["date,weight,calories,notes"]
    lines += [f"{e.date},{e.weight},{e.calories}," for e in losing_entries]
    path.write_text("\n".join(lines) + "\n")
    return path


@pytest.fixture
def goal_yaml(tmp_path: Path) -> Path:
    """Goal settings YAML matching the ``goal`` fixture."""
    path = tmp_path / "goal.yaml"
    path.write_text(
        "unit: pound\n"
        "start_date: 2024-01-01\n"
        "starting_weight: 200\n"
        "goal_weight: 180\n"
        "weekly_rate_goal: -1.0\n"
    )
    return path
