import logging

from fastapi import HTTPException, Request, Security
from fastapi.security import APIKeyHeader

from app.config import settings

logger = logging.getLogger(__name__)

_api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


async def require_api_key(
    request: Request,
    api_key: str | None = Security(_api_key_header),
) -> str:
    """Guard for the calendar and simulator endpoints.

    Open when PLC_API_KEY_HASH is unset, so a local dashboard can post trades
    without credentials.
    """
    if not settings.api_key_hash:
        return "no-auth"
    if api_key is None or not settings.verify_api_key(api_key):
        logger.warning(
            "Rejected request to %s (%s API key)",
            request.url.path,
            "missing" if api_key is None else "invalid",
        )
        detail = "Missing X-API-Key header" if api_key is None else "Invalid API key"
        raise HTTPException(status_code=401, detail=detail)
    return api_key
