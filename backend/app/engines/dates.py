"""
Calendar helpers shared by the aggregation engines.

Trade dates arrive as date objects, datetimes or strings. They are normalized
once into a plain `date` before any bucketing happens. A timestamp is bucketed
on the wall-clock date it carries; no timezone conversion is applied.
"""

import logging
from datetime import date, datetime, timedelta

import pandas as pd

from app.config import settings

logger = logging.getLogger(__name__)


def normalize_trade_date(value) -> date | None:
    """Return the calendar date of `value`, or None if it cannot be parsed."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        ts = pd.Timestamp(value)
    except (ValueError, TypeError, OverflowError):
        return None
    if pd.isna(ts):
        return None
    return ts.date()


def day_key(d: date) -> str:
    return d.strftime("%Y-%m-%d")


def month_key(d: date) -> str:
    return d.strftime("%Y-%m")


def month_prefix(year: int, month: int) -> str:
    return f"{year:04d}-{month:02d}"


def week_bounds(d: date, week_start: int | None = None) -> tuple[date, date]:
    """Return (first, last) day of the calendar week containing `d`.

    `week_start` uses Python weekday numbering (Monday = 0, Sunday = 6) and
    defaults to the configured `week_start_day`.
    """
    if week_start is None:
        week_start = settings.week_start_day
    if not 0 <= week_start <= 6:
        raise ValueError(f"week_start must be 0-6, got {week_start}")
    start = d - timedelta(days=(d.weekday() - week_start) % 7)
    return start, start + timedelta(days=6)


def win_rate_pct(wins: int, total: int) -> int:
    """Integer win percentage, rounded half up. Zero trades gives 0."""
    if total <= 0:
        return 0
    # round() would round 12.5 down to 12
    return int((wins * 100 * 2 + total) // (total * 2))
