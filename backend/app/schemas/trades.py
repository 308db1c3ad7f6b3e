from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field, computed_field, field_validator


class TradeRecord(BaseModel):
    """A single trade as supplied by the trade store. Never mutated here."""
    date_opened: datetime | date | str | None = Field(default=None, alias="dateOpened")
    premium: float = 0.0
    margin_req: float = Field(default=0.0, alias="marginReq")
    pl: float = 0.0
    legs: str = ""
    strategy: Optional[str] = None

    model_config = {"populate_by_name": True, "frozen": True}

    @field_validator("premium", "margin_req", "pl", mode="before")
    @classmethod
    def _absent_is_zero(cls, v):
        return 0.0 if v is None else v

    @field_validator("legs", mode="before")
    @classmethod
    def _absent_legs(cls, v):
        return "" if v is None else v


class DailyTrade(BaseModel):
    """Trade view stored inside a day/week bucket."""
    date_opened: Optional[str] = None
    strategy: str = ""  # raw value; empty stays empty
    legs: str = ""
    premium: float = 0.0
    margin: float = 0.0
    pl: float = 0.0

    model_config = {"frozen": True}

    @computed_field
    @property
    def display_strategy(self) -> str:
        return self.strategy or "Custom"

    @classmethod
    def from_trade(cls, trade: TradeRecord) -> "DailyTrade":
        opened = trade.date_opened
        if isinstance(opened, (datetime, date)):
            opened = opened.isoformat()
        return cls(
            date_opened=opened,
            strategy=trade.strategy if trade.strategy is not None else trade.legs,
            legs=trade.legs,
            premium=trade.premium,
            margin=trade.margin_req,
            pl=trade.pl,
        )
