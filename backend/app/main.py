import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app.logging_config import setup_logging
from app.routers import calendar, health, withdrawals

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="P/L Calendar API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Tighten in production
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    response = await call_next(request)
    duration_ms = (time.time() - start) * 1000
    logger.info(
        "request",
        extra={
            "method": request.method,
            "path": request.url.path,
            "status": response.status_code,
            "duration_ms": round(duration_ms, 1),
        },
    )
    return response


@app.on_event("startup")
async def startup():
    logger.info("Starting P/L Calendar API")


@app.on_event("shutdown")
async def shutdown():
    logger.info("Shutting down")


app.include_router(health.router, prefix="/api")
app.include_router(calendar.router, prefix="/api")
app.include_router(withdrawals.router, prefix="/api")
