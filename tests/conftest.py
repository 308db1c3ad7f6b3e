import pytest

from app.schemas.trades import TradeRecord


def _make_trade(date_opened, pl=0.0, margin=0.0, premium=0.0, legs="", strategy=None) -> TradeRecord:
    return TradeRecord(
        dateOpened=date_opened,
        pl=pl,
        marginReq=margin,
        premium=premium,
        legs=legs,
        strategy=strategy,
    )


@pytest.fixture()
def january_trades() -> list[TradeRecord]:
    """Trades around January 2024 (Jan 1 is a Monday)."""
    return [
        _make_trade("2023-12-31T09:30:00", pl=500, margin=9000, legs="SPX IC"),
        _make_trade("2024-01-02T10:00:00", pl=100, margin=1000, premium=2.5, legs="PUT 4700"),
        _make_trade("2024-01-02T11:00:00", pl=-40, margin=1500, premium=1.5, legs="CALL 4800"),
        _make_trade("2024-01-02T12:00:00", pl=0, margin=800, premium=1.0),
        _make_trade("2024-01-05T15:00:00", pl=60, margin=2000, premium=3.0, strategy="Iron Fly"),
        _make_trade("2024-01-08T10:00:00", pl=-25, margin=700, premium=0.5),
        _make_trade("2024-02-01T10:00:00", pl=80, margin=600, premium=2.0),
    ]


@pytest.fixture()
def make_trade():
    return _make_trade
