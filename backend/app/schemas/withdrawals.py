from typing import Optional

from pydantic import BaseModel, Field

from app.config import settings
from app.schemas.trades import TradeRecord


class MonthlyPL(BaseModel):
    """Net P/L of one calendar month; `period` is a sortable YYYY-MM label."""
    period: str = Field(..., pattern=r"^\d{4}-\d{2}$")
    total_pl: float = Field(default=0.0, alias="totalPL")
    trade_count: int = 0

    model_config = {"populate_by_name": True, "frozen": True}


class WithdrawalOptions(BaseModel):
    starting_balance: float = Field(
        default_factory=lambda: settings.default_starting_balance,
        alias="startingBalance",
    )
    withdrawal_pct: float = Field(
        default_factory=lambda: settings.default_withdrawal_pct,
        ge=0.0,
        le=1.0,
        alias="withdrawalPct",
    )
    withdraw_only_if_profitable: bool = Field(
        default_factory=lambda: settings.default_withdraw_only_if_profitable,
        alias="withdrawOnlyIfProfitable",
    )

    model_config = {"populate_by_name": True, "frozen": True}


class WithdrawalRow(BaseModel):
    month: str
    month_pl: float
    withdrawal: float
    ending_balance: float


class WithdrawalResult(BaseModel):
    rows: list[WithdrawalRow]
    final_balance: float


class WithdrawalRequest(BaseModel):
    """Either a ready monthly series or raw trades to derive it from."""
    trades: Optional[list[TradeRecord]] = None
    monthly: Optional[list[MonthlyPL]] = None
    options: WithdrawalOptions = Field(default_factory=WithdrawalOptions)
