import json
import logging
import sys
import time
from typing import Any

from .config import config


class JsonLogFormatter(logging.Formatter):
    """One JSON object per line; fields from log_context() are merged in."""

    def format(self, record):
        payload = {
            "ts": time.time(),
            "level": record.levelname,
            "logger": record.name,
            "env": config.ENV,
            "event": record.getMessage(),
        }
        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict):
            payload.update(ctx)
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def log_context(**fields: Any) -> dict[str, Any]:
    """Build the `extra=` argument for a structured log call."""
    return {"context": fields}


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(JsonLogFormatter())
        logger.addHandler(handler)
        logger.setLevel(config.LOG_LEVEL)
        logger.propagate = False
    return logger
