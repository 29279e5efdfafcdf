"""Data models for daily logs, goal settings and derived statistics."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional

from tdeetrack.tracking.dates import parse_date_key
from tdeetrack.tracking.units import Unit

# Fixed activity multipliers accepted for the formula estimator
VALID_ACTIVITY_MULTIPLIERS = (1.2, 1.375, 1.55, 1.725, 1.9)
VALID_SEXES = ("male", "female")


class Strategy(Enum):
    """Direction of the user's goal."""

    CUT = "cut"
    BULK = "bulk"
    MAINTAIN = "maintain"


class TDEESource(Enum):
    """Which estimator produced a TDEE figure."""

    ADAPTIVE = "adaptive"
    FORMULA = "formula"
    FALLBACK = "fallback"


@dataclass
class DailyLogEntry:
    """A single day's weigh-in and calorie intake.

    The date key is unique per user; logging the same date again replaces the
    previous entry.
    """

    date: str  # YYYY-MM-DD
    weight: float
    calories: int
    notes: Optional[str] = None


@dataclass
class GoalSettings:
    """Per-user goal configuration.

    ``sex``, ``age``, ``height_cm`` and ``activity_multiplier`` are only used by
    the formula estimator and must all be present for it to run.
    """

    starting_weight: float
    goal_weight: float
    weekly_rate_goal: float  # negative = loss, positive = gain
    unit: Unit = Unit.POUND
    start_date: Optional[str] = None  # YYYY-MM-DD
    strategy: Optional[Strategy] = None
    sex: Optional[str] = None  # 'male' or 'female'
    age: Optional[int] = None
    height_cm: Optional[float] = None
    activity_multiplier: Optional[float] = None

    def __post_init__(self) -> None:
        if isinstance(self.unit, str):
            self.unit = Unit.parse(self.unit)
        if isinstance(self.strategy, str):
            self.strategy = Strategy(self.strategy.lower())
        if self.strategy is None:
            self.strategy = strategy_for_rate(self.weekly_rate_goal)
        if self.sex is not None:
            self.sex = self.sex.lower()
            if self.sex not in VALID_SEXES:
                raise ValueError(f"sex must be 'male' or 'female', got '{self.sex}'")
        if (
            self.activity_multiplier is not None
            and self.activity_multiplier not in VALID_ACTIVITY_MULTIPLIERS
        ):
            raise ValueError(
                f"activity_multiplier must be one of {VALID_ACTIVITY_MULTIPLIERS}, "
                f"got {self.activity_multiplier}"
            )
        if self.age is not None and self.age <= 0:
            raise ValueError(f"age must be positive, got {self.age}")
        if self.height_cm is not None and self.height_cm <= 0:
            raise ValueError(f"height_cm must be positive, got {self.height_cm}")

    @property
    def has_body_stats(self) -> bool:
        """True only when every field the formula estimator needs is set."""
        return all(
            value is not None
            for value in (self.sex, self.age, self.height_cm, self.activity_multiplier)
        )


def strategy_for_rate(weekly_rate_goal: float) -> Strategy:
    """Derive the goal strategy from the sign of the weekly rate."""
    if weekly_rate_goal < 0:
        return Strategy.CUT
    if weekly_rate_goal > 0:
        return Strategy.BULK
    return Strategy.MAINTAIN


@dataclass
class RegressionResult:
    """Least-squares line y = slope * x + intercept."""

    slope: float
    intercept: float


@dataclass
class TDEEResult:
    """Adaptive TDEE estimate for one analysis window."""

    tdee: int
    weight_trend_per_week: float  # in the user's unit, negative = losing


@dataclass
class WeeklyRate:
    """Observed rate of change across the whole history."""

    actual_rate: float
    days_tracked: int


@dataclass
class TDEEStats:
    """Headline numbers for the summary display."""

    current_weight: float
    total_change_so_far: float  # current - starting, negative = lost
    tdee: int
    target_daily_calorie_delta: int
    target_calories: int
    weeks_to_goal: float
    goal_date: str
    tdee_source: TDEESource = TDEESource.ADAPTIVE


@dataclass
class PeriodAverage:
    """Averages for one calendar bucket.

    An empty bucket is all zeros; ``entry_count`` tells it apart from a real
    zero-calorie average.
    """

    weight: float = 0.0
    calories: float = 0.0
    entry_count: int = 0


@dataclass
class AveragesSnapshot:
    """Week and month averages relative to a reference date."""

    this_week: PeriodAverage = field(default_factory=PeriodAverage)
    last_week: PeriodAverage = field(default_factory=PeriodAverage)
    this_month: PeriodAverage = field(default_factory=PeriodAverage)
    last_month: PeriodAverage = field(default_factory=PeriodAverage)


@dataclass
class SeriesPoint:
    """One row of chart data, aligned with an input entry."""

    date: str
    weight: float
    smoothed_weight: float
    trend_value: float
    target_value: Optional[float]
    calories: int
    calories_trend: float
    rolling_tdee: Optional[int]


def entry_date(entry: DailyLogEntry) -> date:
    """Parsed calendar date of an entry."""
    return parse_date_key(entry.date)


def sort_entries(entries: list[DailyLogEntry]) -> list[DailyLogEntry]:
    """Return a new list ordered by date ascending."""
    return sorted(entries, key=lambda e: e.date)
