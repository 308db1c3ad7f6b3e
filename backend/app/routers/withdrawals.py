import logging

from fastapi import APIRouter, Depends

from app.auth import require_api_key
from app.engines.withdrawals import monthly_pl_series, simulate_withdrawals
from app.schemas.withdrawals import WithdrawalRequest, WithdrawalResult

router = APIRouter(tags=["withdrawals"])
logger = logging.getLogger(__name__)


@router.post("/withdrawals/simulate", response_model=WithdrawalResult)
async def simulate(
    payload: WithdrawalRequest,
    api_key: str = Depends(require_api_key),
):
    """Run the withdrawal simulator over a monthly series or raw trades.

    An explicit `monthly` series wins over `trades` when both are sent.
    """
    if payload.monthly is not None:
        series = payload.monthly
    else:
        series = monthly_pl_series(payload.trades or [])

    result = simulate_withdrawals(series, payload.options)
    logger.info(
        "withdrawal_sim: months=%d final_balance=%.2f",
        len(result.rows), result.final_balance,
    )
    return result
