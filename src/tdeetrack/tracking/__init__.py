"""Weight tracking and adaptive TDEE estimation.

This module turns daily weigh-ins and calorie intake into a smoothed weight
trend, an energy-balance TDEE estimate and goal projections.

Key components:
- Least-squares regression over calendar-day offsets
- Hacker's Diet EMA trend (10% smoothing)
- Adaptive TDEE with setup-phase fallback to Mifflin-St Jeor
- Calorie targets, time to goal, period averages and logging streaks
"""

from __future__ import annotations

from tdeetrack.tracking.ema import exponential_moving_average, update_trend
from tdeetrack.tracking.entry_log import EntryLog
from tdeetrack.tracking.models import (
    DailyLogEntry,
    GoalSettings,
    TDEEResult,
    TDEEStats,
)
from tdeetrack.tracking.units import Unit

__all__ = [
    "DailyLogEntry",
    "EntryLog",
    "GoalSettings",
    "TDEEResult",
    "TDEEStats",
    "Unit",
    "exponential_moving_average",
    "update_trend",
]
