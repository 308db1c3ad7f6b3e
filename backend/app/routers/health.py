import logging

from fastapi import APIRouter

from app.config import settings

router = APIRouter(tags=["health"])
logger = logging.getLogger(__name__)

_WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]


@router.get("/health")
async def health_check():
    """Liveness check plus the calendar settings that shape bucket keys."""
    return {
        "status": "ok",
        "checks": {
            "week_start": _WEEKDAYS[settings.week_start_day],
            "auth": bool(settings.api_key_hash),
        },
    }
