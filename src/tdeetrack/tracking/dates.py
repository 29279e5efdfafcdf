"""Calendar-safe date handling for daily log keys.

Entries are keyed by ``YYYY-MM-DD`` strings. Everything here works on
``datetime.date`` values, which carry no time of day or zone, so day offsets
cannot be skewed by DST transitions or UTC/local boundaries.

Functions that need "today" accept it as an argument and only fall back to the
system clock when it is omitted.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional, Union

DATE_KEY_FORMAT = "%Y-%m-%d"

DateLike = Union[str, date]

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def parse_date_key(date_key: str) -> date:
    """Parse a ``YYYY-MM-DD`` key into a calendar date.

    Args:
        date_key: Date string, e.g. "2024-01-05"

    Returns:
        The calendar date

    Raises:
        ValueError: If the key is not a valid ``YYYY-MM-DD`` date
    """
    if len(date_key) != 10:
        raise ValueError(f"Invalid date key: '{date_key}' (expected YYYY-MM-DD)")
    return datetime.strptime(date_key, DATE_KEY_FORMAT).date()


def format_date_key(value: date) -> str:
    """Format a date as a zero-padded ``YYYY-MM-DD`` key."""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def _as_date(value: DateLike) -> date:
    if isinstance(value, str):
        return parse_date_key(value)
    if isinstance(value, datetime):
        return value.date()
    return value


def resolve_today(today: Optional[DateLike] = None) -> date:
    """The given date, or the system date when omitted."""
    if today is None:
        return date.today()
    return _as_date(today)


def today_key(today: Optional[DateLike] = None) -> str:
    """Today's date as a ``YYYY-MM-DD`` key."""
    return format_date_key(resolve_today(today))


def days_between(start: DateLike, end: DateLike) -> int:
    """Signed number of days from ``start`` to ``end``.

    Example:
        >>> days_between("2024-01-01", "2024-01-08")
        7
        >>> days_between("2024-01-08", "2024-01-01")
        -7
    """
    return (_as_date(end) - _as_date(start)).days


def is_future_date(date_key: DateLike, today: Optional[DateLike] = None) -> bool:
    """True if the date is strictly after today."""
    return _as_date(date_key) > resolve_today(today)


def days_since_start(
    start_date: Optional[DateLike], today: Optional[DateLike] = None
) -> int:
    """Days elapsed since tracking started.

    A missing start date gives 0, and a start date in the future is clamped
    to 0 rather than going negative.
    """
    if not start_date:
        return 0
    return max(0, days_between(start_date, resolve_today(today)))


def is_in_setup_phase(
    start_date: Optional[DateLike],
    setup_days: int,
    today: Optional[DateLike] = None,
) -> bool:
    """Check whether the user is still in the initial setup phase.

    During the first ``setup_days`` days, water and glycogen shifts make
    trend-derived TDEE estimates unreliable. Day ``setup_days`` itself is
    already outside the phase.

    Args:
        start_date: Tracking start date (None means no phase)
        setup_days: Length of the setup phase in days
        today: Reference date (defaults to the system date)

    Returns:
        True while days since start is below ``setup_days``
    """
    if not start_date:
        return False
    return days_since_start(start_date, today) < setup_days


def get_week_start(value: DateLike) -> date:
    """Sunday on or before the given date."""
    d = _as_date(value)
    # weekday(): Monday=0 ... Sunday=6
    offset = (d.weekday() + 1) % 7
    return d - timedelta(days=offset)


def get_month_start(value: DateLike) -> date:
    """First day of the month containing the given date."""
    d = _as_date(value)
    return d.replace(day=1)


def add_days(value: DateLike, days: int) -> date:
    return _as_date(value) + timedelta(days=days)


def format_display_date(value: DateLike, with_year: bool = False) -> str:
    """Short human-readable date such as "Jan 5" or "Jan 5, 2024"."""
    d = _as_date(value)
    text = f"{MONTH_ABBREVIATIONS[d.month - 1]} {d.day}"
    if with_year:
        text += f", {d.year}"
    return text
