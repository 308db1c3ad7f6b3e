"""
P/L Calendar Engine

Folds a collection of trades into calendar buckets:
  - Daily summaries keyed by YYYY-MM-DD
  - Weekly rollup of the day summaries inside one month
  - Monthly stats for one year
  - Headline period stats (month or year view)

Every call builds fresh buckets. Rates are always recomputed from raw
win/trade counts, never averaged from bucket rates.
"""

import logging
from collections.abc import Iterable
from datetime import date

from app.engines.dates import (
    day_key,
    month_prefix,
    normalize_trade_date,
    week_bounds,
    win_rate_pct,
)
from app.schemas.calendar import DaySummary, MonthStats, PeriodStats, WeekSummary
from app.schemas.trades import DailyTrade, TradeRecord

logger = logging.getLogger(__name__)


def _new_bucket(d: date) -> dict:
    return {
        "date": d,
        "net_pl": 0.0,
        "trade_count": 0,
        "win_count": 0,
        "max_margin": 0.0,
        "trades": [],
    }


def aggregate_daily(trades: Iterable[TradeRecord]) -> dict[str, DaySummary]:
    """Bucket trades by calendar day. Trades with unparseable dates are skipped."""
    buckets: dict[str, dict] = {}
    skipped = 0

    for trade in trades:
        d = normalize_trade_date(trade.date_opened)
        if d is None:
            skipped += 1
            logger.warning("Skipping trade with unparseable date_opened=%r", trade.date_opened)
            continue

        key = day_key(d)
        if key not in buckets:
            buckets[key] = _new_bucket(d)

        b = buckets[key]
        b["trade_count"] += 1
        b["net_pl"] += trade.pl
        if trade.pl > 0:
            b["win_count"] += 1
        b["max_margin"] = max(b["max_margin"], trade.margin_req)
        b["trades"].append(DailyTrade.from_trade(trade))

    logger.debug("Daily aggregation: %d days, %d trades skipped", len(buckets), skipped)
    return {
        key: DaySummary(
            **b,
            win_rate=win_rate_pct(b["win_count"], b["trade_count"]),
        )
        for key, b in sorted(buckets.items())
    }


def rollup_weekly(
    daily: dict[str, DaySummary],
    year: int,
    month: int,
    week_start: int | None = None,
) -> list[WeekSummary]:
    """Group the day summaries of one month into calendar weeks.

    Only days inside the month contribute, so weeks that cross the month
    boundary carry partial totals.
    """
    prefix = month_prefix(year, month)
    weeks: dict[date, dict] = {}

    for key in sorted(daily):
        if not key.startswith(prefix):
            continue
        day = daily[key]
        start, end = week_bounds(day.date, week_start)

        if start not in weeks:
            weeks[start] = _new_bucket(start)
            weeks[start]["end_date"] = end

        w = weeks[start]
        w["net_pl"] += day.net_pl
        w["trade_count"] += day.trade_count
        w["win_count"] += day.win_count
        w["max_margin"] = max(w["max_margin"], day.max_margin)
        w["trades"].extend(day.trades)

    return [
        WeekSummary(**w, win_rate=win_rate_pct(w["win_count"], w["trade_count"]))
        for _, w in sorted(weeks.items())
    ]


def rollup_monthly(trades: Iterable[TradeRecord], year: int) -> dict[int, MonthStats]:
    """Bucket one year's trades by month index (0 = January)."""
    months: dict[int, dict] = {}

    for trade in trades:
        d = normalize_trade_date(trade.date_opened)
        if d is None or d.year != year:
            continue

        idx = d.month - 1
        if idx not in months:
            months[idx] = {
                "month_index": idx,
                "net_pl": 0.0,
                "trade_count": 0,
                "win_count": 0,
                "loss_count": 0,
                "total_premium": 0.0,
            }

        m = months[idx]
        m["net_pl"] += trade.pl
        m["trade_count"] += 1
        if trade.pl > 0:
            m["win_count"] += 1
        elif trade.pl < 0:
            m["loss_count"] += 1
        m["total_premium"] += trade.premium

    return {idx: MonthStats(**m) for idx, m in sorted(months.items())}


def reduce_period_stats(
    view: str,
    reference: date,
    daily: dict[str, DaySummary],
    monthly: dict[int, MonthStats],
) -> PeriodStats:
    """Headline stats for the active view.

    "month" folds the reference month's day buckets, "year" folds every
    monthly bucket (which the caller built for the reference year).
    """
    if view == "month":
        prefix = month_prefix(reference.year, reference.month)
        buckets = [s for key, s in daily.items() if key.startswith(prefix)]
    elif view == "year":
        buckets = list(monthly.values())
    else:
        raise ValueError(f"view must be 'month' or 'year', got {view!r}")

    net_pl = 0.0
    trade_count = 0
    win_count = 0
    for s in buckets:
        net_pl += s.net_pl
        trade_count += s.trade_count
        win_count += s.win_count

    return PeriodStats(
        net_pl=net_pl,
        trade_count=trade_count,
        win_rate=win_rate_pct(win_count, trade_count),
    )


def max_margin_for_month(daily: dict[str, DaySummary], year: int, month: int) -> float:
    """Peak daily margin within one month (0 if the month has no trades)."""
    prefix = month_prefix(year, month)
    return max(
        (s.max_margin for key, s in daily.items() if key.startswith(prefix)),
        default=0.0,
    )


def available_years(trades: Iterable[TradeRecord], today: date | None = None) -> list[int]:
    """Years present in the trades plus the current year, most recent first."""
    years = {(today or date.today()).year}
    for trade in trades:
        d = normalize_trade_date(trade.date_opened)
        if d is not None:
            years.add(d.year)
    return sorted(years, reverse=True)
