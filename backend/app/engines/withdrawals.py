"""
Withdrawal Simulator

Replays a monthly P/L series against a starting balance, withdrawing a
fixed share of each month's P/L. With the profitability gate on (default),
only winning months pay out; losses always hit the balance in full.
"""

import logging
from collections.abc import Iterable
from decimal import Decimal

import pandas as pd

from app.engines.dates import month_key, normalize_trade_date
from app.schemas.trades import TradeRecord
from app.schemas.withdrawals import (
    MonthlyPL,
    WithdrawalOptions,
    WithdrawalResult,
    WithdrawalRow,
)

logger = logging.getLogger(__name__)


def monthly_pl_series(trades: Iterable[TradeRecord]) -> list[MonthlyPL]:
    """Sum trade P/L per YYYY-MM period, oldest first."""
    rows = []
    for trade in trades:
        d = normalize_trade_date(trade.date_opened)
        if d is None:
            logger.warning("Skipping trade with unparseable date_opened=%r", trade.date_opened)
            continue
        rows.append({"period": month_key(d), "pl": trade.pl})

    if not rows:
        return []

    df = pd.DataFrame(rows, columns=["period", "pl"])
    monthly = df.groupby("period", sort=True).agg(
        total_pl=("pl", "sum"),
        trade_count=("pl", "size"),
    ).reset_index()

    return [
        MonthlyPL(
            period=r.period,
            total_pl=float(r.total_pl),
            trade_count=int(r.trade_count),
        )
        for r in monthly.itertuples(index=False)
    ]


def simulate_withdrawals(
    series: Iterable[MonthlyPL],
    options: WithdrawalOptions | None = None,
) -> WithdrawalResult:
    """Fold the monthly series into a running-balance ledger.

    The series is sorted by period first; each row's balance depends on
    every earlier row.
    """
    opts = options or WithdrawalOptions()
    # Ledger arithmetic is exact decimal; floats only on emitted rows
    pct = Decimal(str(opts.withdrawal_pct))
    balance = Decimal(str(opts.starting_balance))

    rows: list[WithdrawalRow] = []
    for m in sorted(series, key=lambda m: m.period):
        month_pl = Decimal(str(m.total_pl))
        can_withdraw = not opts.withdraw_only_if_profitable or month_pl > 0
        withdrawal = month_pl * pct if can_withdraw else Decimal(0)
        balance = balance + month_pl - withdrawal

        rows.append(
            WithdrawalRow(
                month=m.period,
                month_pl=float(month_pl),
                withdrawal=float(withdrawal),
                ending_balance=float(balance),
            )
        )

    logger.debug(
        "Withdrawal simulation: %d months, start=%.2f final=%.2f",
        len(rows), opts.starting_balance, float(balance),
    )
    return WithdrawalResult(rows=rows, final_balance=float(balance))


def simulate_withdrawals_for_trades(
    trades: Iterable[TradeRecord],
    options: WithdrawalOptions | None = None,
) -> WithdrawalResult:
    return simulate_withdrawals(monthly_pl_series(trades), options)
