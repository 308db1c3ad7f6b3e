import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from pythonjsonlogger.json import JsonFormatter

from app.config import settings

_HANDLER_NAME = "plcalendar"


def setup_logging(level: str | None = None) -> None:
    """Install JSON logging on the root logger.

    Safe to call more than once (API startup and CLI share it); handlers are
    only added the first time. `level` overrides the configured log level.
    """
    root = logging.getLogger()
    root.setLevel(level or settings.log_level)

    if any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        return

    formatter = JsonFormatter(
        fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
        rename_fields={"asctime": "timestamp", "levelname": "level"},
        static_fields={"service": "plcalendar"},
    )

    console = logging.StreamHandler(sys.stdout)
    console.set_name(_HANDLER_NAME)
    console.setFormatter(formatter)
    root.addHandler(console)

    log_dir = Path(settings.log_dir)
    if log_dir.exists():
        file_handler = TimedRotatingFileHandler(
            log_dir / "plcalendar.log",
            when="midnight",
            backupCount=30,
        )
        file_handler.set_name(f"{_HANDLER_NAME}-file")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
