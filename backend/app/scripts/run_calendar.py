"""
Standalone script to print P/L calendar stats and a withdrawal ledger
for a trade export.

Usage:
    cd /opt/plcalendar/backend
    source venv/bin/activate
    python -m app.scripts.run_calendar trades.csv --year 2024 --month 3
"""

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

import pandas as pd

from app.engines.calendar import (
    aggregate_daily,
    reduce_period_stats,
    rollup_monthly,
    rollup_weekly,
)
from app.engines.withdrawals import simulate_withdrawals_for_trades
from app.logging_config import setup_logging
from app.schemas.trades import TradeRecord
from app.schemas.withdrawals import WithdrawalOptions

logger = logging.getLogger(__name__)

_TEXT_COLUMNS = {"legs", "strategy"}


def load_trades(path: Path) -> list[TradeRecord]:
    """Read trades from a CSV or JSON export (camelCase or snake_case columns)."""
    if path.suffix.lower() == ".json":
        df = pd.read_json(path, orient="records", convert_dates=False)
    else:
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
        # Empty text cells stay "", empty numeric or date cells become missing
        for col in df.columns:
            if col not in _TEXT_COLUMNS:
                df[col] = df[col].mask(df[col] == "")

    # Missing cells are left out so field defaults apply
    df = df.astype(object).where(df.notna(), None)
    return [
        TradeRecord(**{k: v for k, v in row.items() if v is not None})
        for row in df.to_dict(orient="records")
    ]


def parse_args(argv=None) -> argparse.Namespace:
    today = date.today()
    parser = argparse.ArgumentParser(description="P/L calendar summary")
    parser.add_argument("trades_file", type=Path)
    parser.add_argument("--year", type=int, default=today.year)
    parser.add_argument("--month", type=int, default=today.month, choices=range(1, 13))
    parser.add_argument("--view", choices=["month", "year"], default="month")
    parser.add_argument("--starting-balance", type=float, default=None)
    parser.add_argument("--withdrawal-pct", type=float, default=None)
    parser.add_argument(
        "--always-withdraw",
        action="store_true",
        help="Withdraw from losing months too (disables the profitability gate)",
    )
    parser.add_argument("--verbose", action="store_true", help="Log at DEBUG level")
    return parser.parse_args(argv)


def build_options(args: argparse.Namespace) -> WithdrawalOptions:
    overrides = {}
    if args.starting_balance is not None:
        overrides["starting_balance"] = args.starting_balance
    if args.withdrawal_pct is not None:
        overrides["withdrawal_pct"] = args.withdrawal_pct
    if args.always_withdraw:
        overrides["withdraw_only_if_profitable"] = False
    return WithdrawalOptions(**overrides)


def main(argv=None) -> int:
    args = parse_args(argv)

    try:
        trades = load_trades(args.trades_file)
    except Exception:
        logger.exception("Failed to load trades from %s", args.trades_file)
        return 2

    reference = date(args.year, args.month, 1)
    daily = aggregate_daily(trades)
    monthly = rollup_monthly(trades, args.year)
    weekly = rollup_weekly(daily, args.year, args.month)
    period = reduce_period_stats(args.view, reference, daily, monthly)
    ledger = simulate_withdrawals_for_trades(trades, build_options(args))

    label = reference.strftime("%B %Y") if args.view == "month" else str(args.year)
    print(f"\nP/L Summary: {label}")
    print(f"  Net P/L:  {period.net_pl:+,.2f}")
    print(f"  Trades:   {period.trade_count}")
    print(f"  Win rate: {period.win_rate}%")

    if args.view == "month" and weekly:
        print("\nWeekly breakdown:")
        for w in weekly:
            print(
                f"  {w.date:%b %d} - {w.end_date:%b %d}: "
                f"{w.net_pl:+,.2f}  trades={w.trade_count}  "
                f"win={w.win_rate}%  max margin={w.max_margin:,.0f}"
            )

    if ledger.rows:
        print("\nWithdrawal ledger:")
        for r in ledger.rows:
            print(
                f"  {r.month}: P/L {r.month_pl:+,.2f}  "
                f"withdraw {r.withdrawal:,.2f}  balance {r.ending_balance:,.2f}"
            )
    print(f"\nFinal balance: {ledger.final_balance:,.2f}\n")
    return 0


def cli() -> int:
    """Console entry point: configures logging, then runs main()."""
    argv = sys.argv[1:]
    setup_logging("DEBUG" if parse_args(argv).verbose else None)
    return main(argv)


if __name__ == "__main__":
    sys.exit(cli())
