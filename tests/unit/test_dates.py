from datetime import date, datetime

import pytest

from app.config import settings
from app.engines.dates import (
    day_key,
    month_key,
    month_prefix,
    normalize_trade_date,
    week_bounds,
    win_rate_pct,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (datetime(2024, 1, 5, 23, 59), date(2024, 1, 5)),
        (date(2024, 1, 5), date(2024, 1, 5)),
        ("2024-01-05", date(2024, 1, 5)),
        ("2024-01-05T10:00:00Z", date(2024, 1, 5)),
        ("2024-01-05T23:30:00+05:00", date(2024, 1, 5)),
    ],
)
def test_normalize_accepts_dates_and_strings(value, expected):
    assert normalize_trade_date(value) == expected


@pytest.mark.parametrize("value", [None, "not-a-date", "2024-13-45"])
def test_normalize_rejects_malformed(value):
    assert normalize_trade_date(value) is None


def test_keys():
    d = date(2024, 3, 7)
    assert day_key(d) == "2024-03-07"
    assert month_key(d) == "2024-03"
    assert month_prefix(2024, 3) == "2024-03"
    assert day_key(d).startswith(month_prefix(2024, 3))


def test_week_bounds_sunday_start():
    # Wednesday 10 Jan 2024
    assert week_bounds(date(2024, 1, 10), 6) == (date(2024, 1, 7), date(2024, 1, 13))
    # A Sunday starts its own week
    assert week_bounds(date(2024, 1, 7), 6) == (date(2024, 1, 7), date(2024, 1, 13))


def test_week_bounds_monday_start():
    assert week_bounds(date(2024, 1, 10), 0) == (date(2024, 1, 8), date(2024, 1, 14))
    assert week_bounds(date(2024, 1, 7), 0) == (date(2024, 1, 1), date(2024, 1, 7))


def test_week_bounds_uses_configured_start(monkeypatch):
    monkeypatch.setattr(settings, "week_start_day", 0)
    assert week_bounds(date(2024, 1, 10)) == (date(2024, 1, 8), date(2024, 1, 14))


def test_week_bounds_rejects_bad_weekday():
    with pytest.raises(ValueError):
        week_bounds(date(2024, 1, 10), 7)


@pytest.mark.parametrize(
    "wins, total, expected",
    [
        (0, 0, 0),
        (0, 4, 0),
        (1, 2, 50),
        (1, 3, 33),
        (2, 3, 67),
        (1, 8, 13),  # 12.5 rounds up
        (5, 5, 100),
    ],
)
def test_win_rate_pct(wins, total, expected):
    result = win_rate_pct(wins, total)
    assert result == expected
    assert isinstance(result, int)
