from datetime import date
from typing import Literal, Optional

from pydantic import BaseModel, Field

from app.schemas.trades import DailyTrade, TradeRecord


class DaySummary(BaseModel):
    date: date
    net_pl: float = 0.0
    trade_count: int = 0
    win_count: int = 0
    win_rate: int = 0
    max_margin: float = 0.0
    trades: list[DailyTrade] = []

    model_config = {"frozen": True}


class WeekSummary(DaySummary):
    """A DaySummary spanning one calendar week; `date` is the week start."""
    end_date: date


class MonthStats(BaseModel):
    month_index: int = Field(..., ge=0, le=11)
    net_pl: float = 0.0
    trade_count: int = 0
    win_count: int = 0
    loss_count: int = 0
    total_premium: float = 0.0

    model_config = {"frozen": True}


class PeriodStats(BaseModel):
    net_pl: float = 0.0
    trade_count: int = 0
    win_rate: int = 0

    model_config = {"frozen": True}


class CalendarRequest(BaseModel):
    trades: list[TradeRecord] = []
    view: Literal["month", "year"] = "month"
    reference_date: Optional[date] = Field(default=None, alias="referenceDate")

    model_config = {"populate_by_name": True}


class CalendarResponse(BaseModel):
    view: str
    reference_date: date
    daily: dict[str, DaySummary]
    weekly: list[WeekSummary]
    monthly: list[MonthStats]
    period: PeriodStats
    max_margin_for_month: float
    years: list[int]
