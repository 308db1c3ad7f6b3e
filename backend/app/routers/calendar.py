import logging
from datetime import date

from fastapi import APIRouter, Depends

from app.auth import require_api_key
from app.engines.calendar import (
    aggregate_daily,
    available_years,
    max_margin_for_month,
    reduce_period_stats,
    rollup_monthly,
    rollup_weekly,
)
from app.schemas.calendar import CalendarRequest, CalendarResponse

router = APIRouter(tags=["calendar"])
logger = logging.getLogger(__name__)


@router.post("/pl-calendar", response_model=CalendarResponse)
async def build_calendar(
    payload: CalendarRequest,
    api_key: str = Depends(require_api_key),
):
    """
    Build every calendar view for the supplied trades.

    Weekly and period stats are scoped to the reference month (month view)
    or reference year (year view). Reference date defaults to today.
    """
    reference = payload.reference_date or date.today()

    daily = aggregate_daily(payload.trades)
    monthly = rollup_monthly(payload.trades, reference.year)
    weekly = rollup_weekly(daily, reference.year, reference.month)
    period = reduce_period_stats(payload.view, reference, daily, monthly)

    logger.info(
        "pl_calendar: trades=%d days=%d weeks=%d months=%d view=%s",
        len(payload.trades), len(daily), len(weekly), len(monthly), payload.view,
    )
    return CalendarResponse(
        view=payload.view,
        reference_date=reference,
        daily=daily,
        weekly=weekly,
        monthly=list(monthly.values()),
        period=period,
        max_margin_for_month=max_margin_for_month(daily, reference.year, reference.month),
        years=available_years(payload.trades),
    )
