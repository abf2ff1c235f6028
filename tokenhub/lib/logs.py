"""Structured logging utilities."""
from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

import orjson

from tokenhub.lib import config

_HANDLER_TAG = "_tokenhub_handler"


class JsonFormatter(logging.Formatter):
    """Render log records as JSON."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "level": record.levelname,
            "message": record.getMessage(),
            "name": record.name,
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S%z"),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        for key, value in record.__dict__.items():
            if key.startswith("_extra_"):
                payload[key[7:]] = value
        return orjson.dumps(payload, default=str).decode()


def configure_logging(log_path: Optional[Path] = None, level: Optional[str] = None) -> None:
    """Attach JSON handlers to the ``tokenhub`` logger once per process."""

    logger = logging.getLogger("tokenhub")
    logger.setLevel(level or config.log_level())
    if any(getattr(handler, _HANDLER_TAG, False) for handler in logger.handlers):
        return

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    path = log_path or (Path(config.log_path()) if config.log_path() else None)
    if path is not None:
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(RotatingFileHandler(path, maxBytes=5_000_000, backupCount=3))

    for handler in handlers:
        handler.setFormatter(JsonFormatter())
        setattr(handler, _HANDLER_TAG, True)
        logger.addHandler(handler)
