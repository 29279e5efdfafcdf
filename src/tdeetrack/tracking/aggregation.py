"""Period averages, percent change and logging streaks for summary display."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Optional

from tdeetrack.tracking.dates import (
    DateLike,
    days_between,
    get_month_start,
    get_week_start,
    resolve_today,
)
from tdeetrack.tracking.models import (
    AveragesSnapshot,
    DailyLogEntry,
    PeriodAverage,
    entry_date,
)
from tdeetrack.tracking.regression import average


def _average_between(
    entries: list[DailyLogEntry], start: date, end: date
) -> PeriodAverage:
    """Average weight and calories for entries dated in [start, end]."""
    bucket = [e for e in entries if start <= entry_date(e) <= end]
    if not bucket:
        return PeriodAverage()
    return PeriodAverage(
        weight=average([e.weight for e in bucket]),
        calories=average([e.calories for e in bucket]),
        entry_count=len(bucket),
    )


def period_averages(
    entries: list[DailyLogEntry], now: Optional[DateLike] = None
) -> AveragesSnapshot:
    """
    Bucket entries into calendar weeks and months around ``now``.

    Weeks start on Sunday. Empty buckets come back as ``PeriodAverage()``
    (all zeros, ``entry_count == 0``).

    Args:
        entries: Daily log entries in any order
        now: Reference date (defaults to today)

    Returns:
        AveragesSnapshot for this/last week and this/last month
    """
    ref = resolve_today(now)

    this_week_start = get_week_start(ref)
    last_week_start = this_week_start - timedelta(days=7)

    this_month_start = get_month_start(ref)
    last_month_start = get_month_start(this_month_start - timedelta(days=1))
    next_month_start = get_month_start(this_month_start + timedelta(days=31))

    return AveragesSnapshot(
        this_week=_average_between(
            entries, this_week_start, this_week_start + timedelta(days=6)
        ),
        last_week=_average_between(
            entries, last_week_start, this_week_start - timedelta(days=1)
        ),
        this_month=_average_between(
            entries, this_month_start, next_month_start - timedelta(days=1)
        ),
        last_month=_average_between(
            entries, last_month_start, this_month_start - timedelta(days=1)
        ),
    )


def percent_change(
    current: Optional[float], previous: Optional[float]
) -> Optional[float]:
    """Percentage change from ``previous`` to ``current``.

    None when either value is missing or the baseline is zero.
    """
    if current is None or previous is None or previous == 0:
        return None
    return ((current - previous) / previous) * 100.0


def logging_streak(
    entries: list[DailyLogEntry], today: Optional[DateLike] = None
) -> int:
    """
    Count consecutive logged days ending at the most recent entry.

    Entries dated after today are ignored. If the most recent entry is older
    than yesterday the streak is already broken and 0 is returned.

    Args:
        entries: Daily log entries in any order
        today: Reference date (defaults to today)

    Returns:
        Length of the current streak in days
    """
    ref = resolve_today(today)

    logged = {entry_date(e) for e in entries}
    logged = {d for d in logged if d <= ref}
    if not logged:
        return 0

    latest = max(logged)
    if days_between(latest, ref) > 1:
        return 0

    streak = 0
    day = latest
    while day in logged:
        streak += 1
        day -= timedelta(days=1)
    return streak
