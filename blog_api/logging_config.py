"""
Central logging configuration for the blog API.

Every record carries two correlation fields taken from context variables:
``request_id`` (set by RequestIdMiddleware) and ``caller_id`` (set when a
bearer token resolves to a user). Development output is a single readable
line; production output is one JSON object per record.

Usage:
    from blog_api.logging_config import get_logger
    logger = get_logger(__name__)
    logger.info("Post created", extra={"post_id": post.id})
"""

import json
import logging
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Optional

request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)
caller_id_var: ContextVar[Optional[int]] = ContextVar("caller_id", default=None)

# Attributes every LogRecord has; anything else came in through extra=
_STANDARD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__
) | {"message", "asctime", "request_id", "caller_id"}

_NOISY_LOGGERS = ("uvicorn.access", "sqlalchemy.engine")


def bind_caller(caller_id: Optional[int]) -> None:
    """Attach the authenticated user id to log records for the rest of the request."""
    caller_id_var.set(caller_id)


class CorrelationFilter(logging.Filter):
    """Copy request and caller ids from context onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "request_id", None):
            record.request_id = request_id_var.get() or "-"
        caller_id = caller_id_var.get()
        record.caller_id = "anon" if caller_id is None else caller_id
        return True


class JsonFormatter(logging.Formatter):
    """One JSON object per record, stamped with the record's own creation time."""

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", "-"),
            "caller_id": getattr(record, "caller_id", "anon"),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key in _STANDARD_ATTRS or value is None:
                continue
            entry[key] = value

        return json.dumps(entry, default=str)


DEV_FORMAT = "%(asctime)s %(levelname)-5s [%(name)s] req=%(request_id)s caller=%(caller_id)s %(message)s"


def configure_logging(*, log_level: str = "INFO", environment: str = "development") -> None:
    """
    Install a single stderr handler on the root logger.

    Args:
        log_level: Level name (DEBUG, INFO, WARNING, ERROR); unknown names fall back to INFO
        environment: 'production' selects JSON output
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stderr)
    handler.addFilter(CorrelationFilter())
    if environment == "production":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(DEV_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
