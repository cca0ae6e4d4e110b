"""JSON logging and correlation ids for the wardrobe planner."""

from __future__ import annotations

import contextlib
import contextvars
import json
import logging
import os
import uuid
from typing import Any, Dict, Iterator, Optional

CORRELATION_ID: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar("correlation_id", default=None)

# Attributes every LogRecord carries; anything else arrived through ``extra``.
_RECORD_ATTRIBUTES = frozenset(vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))) | {
    "message",
    "asctime",
}
_SENSITIVE_FIELDS = frozenset({"user_id", "location", "notes", "brand", "image_url"})


class JsonFormatter(logging.Formatter):
    """Render each record as a single JSON object.

    Fields passed through ``extra`` become top-level keys after redaction.
    """

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        message = record.getMessage()
        payload: Dict[str, Any] = {
            "timestamp": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S%z"),
            "level": record.levelname,
            "logger": record.name,
            "event": getattr(record, "event", message),
            "message": message,
            "correlation_id": getattr(record, "correlation_id", None) or CORRELATION_ID.get(),
        }
        for key, value in vars(record).items():
            if key not in _RECORD_ATTRIBUTES and key not in payload:
                payload[key] = redact_for_log(value)
        if record.exc_info:
            payload["traceback"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def configure_logging(level: int | str | None = None) -> None:
    """Send root logging to stderr as JSON, at ``level`` or ``LOG_LEVEL``."""

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    logging.basicConfig(level=level or os.getenv("LOG_LEVEL", "INFO"), handlers=[handler], force=True)


def redact_for_log(payload: Any) -> Any:
    """Mask user-identifying fields (location, notes, brand) in nested payloads."""

    if payload is None or isinstance(payload, (str, int, float, bool)):
        return payload
    if isinstance(payload, (list, tuple)):
        return [redact_for_log(item) for item in payload]
    if isinstance(payload, dict):
        return {
            key: "[redacted]" if key in _SENSITIVE_FIELDS else redact_for_log(value) for key, value in payload.items()
        }
    return str(payload)


def get_logger(name: str) -> logging.Logger:
    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name)


@contextlib.contextmanager
def correlation_context(correlation_id: str | None = None) -> Iterator[str]:
    """Bind a correlation id for the duration of the block.

    Without an explicit id the enclosing one is reused, or a fresh one is
    minted when none is bound. The previous binding is restored on exit.
    """

    scoped_id = correlation_id or CORRELATION_ID.get() or uuid.uuid4().hex
    token = CORRELATION_ID.set(scoped_id)
    try:
        yield scoped_id
    finally:
        CORRELATION_ID.reset(token)


def log_event(logger: logging.Logger, level: int, event: str, **fields: Any) -> None:
    """Log ``event`` with redacted ``fields`` and the active correlation id."""

    correlation_id = fields.pop("correlation_id", None) or CORRELATION_ID.get()
    exc_info = fields.pop("exc_info", None)
    logger.log(
        level,
        event,
        exc_info=exc_info,
        extra={"event": event, "correlation_id": correlation_id, **redact_for_log(fields)},
    )


@contextlib.contextmanager
def operation_context(name: str, correlation_id: str | None = None) -> Iterator[str]:
    """Scope one planner operation under a correlation id."""

    with correlation_context(correlation_id) as scoped_id:
        logging.getLogger(__name__).debug("operation %s started", name, extra={"correlation_id": scoped_id})
        yield scoped_id


__all__ = [
    "CORRELATION_ID",
    "JsonFormatter",
    "configure_logging",
    "correlation_context",
    "get_logger",
    "log_event",
    "operation_context",
    "redact_for_log",
]
