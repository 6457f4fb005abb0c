"""JSON logging for the stylist service.

Every engine call runs inside ``operation_context``, which scopes a
correlation id and the operation name to that call. ``log_event`` attaches
both to its record, so the events of one recommendation request can be
grouped without the id outliving the request.

Wardrobe owners and their free text never reach the log output: user ids,
locations and item text fields are masked wherever they appear, including
inside nested payloads such as ``request_params``.
"""

from __future__ import annotations

import contextlib
import contextvars
import json
import logging
import os
import re
import uuid
from typing import Any, Dict, Iterator, Optional

CORRELATION_ID: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "correlation_id", default=None
)
OPERATION: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar("operation", default=None)

MASK = "[redacted]"
# Owner identity and item free text (names, notes, brands).
MASKED_FIELDS = frozenset({"user_id", "location", "name", "description", "brand"})

_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message"}
_EMAIL = re.compile(r"[\w.\-]+@[\w.\-]+")


def scrub(value: Any) -> Any:
    """Return a JSON-safe copy of ``value`` with wardrobe PII masked."""

    if isinstance(value, dict):
        return {key: MASK if key in MASKED_FIELDS else scrub(inner) for key, inner in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [scrub(inner) for inner in value]
    if isinstance(value, str):
        return _EMAIL.sub("[redacted-email]", value)
    if value is None or isinstance(value, (bool, int, float)):
        return value
    return str(value)


class JsonFormatter(logging.Formatter):
    """One JSON object per line; record extras become top-level keys."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        message = record.getMessage()
        payload: Dict[str, Any] = {
            "timestamp": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S%z"),
            "level": record.levelname,
            "logger": record.name,
            "event": getattr(record, "event", message),
            "message": message,
            "correlation_id": getattr(record, "correlation_id", None) or CORRELATION_ID.get(),
            "operation": getattr(record, "operation", None) or OPERATION.get(),
        }
        extras = {key: value for key, value in vars(record).items() if key not in _RECORD_ATTRS}
        for key, value in scrub(extras).items():
            payload.setdefault(key, value)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def configure_logging(level: int | str | None = None) -> None:
    """Send root logging through ``JsonFormatter`` at ``LOG_LEVEL`` (default INFO)."""

    root = logging.getLogger()
    root.setLevel(level or os.getenv("LOG_LEVEL", "INFO"))
    if any(isinstance(handler.formatter, JsonFormatter) for handler in root.handlers):
        return
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name)


@contextlib.contextmanager
def operation_context(name: str, correlation_id: str | None = None) -> Iterator[str]:
    """Scope a correlation id and operation name to the ``with`` block.

    Nested operations inherit the enclosing id unless one is passed in. Both
    values are restored on exit, so consecutive calls never share an id.
    """

    scoped_id = correlation_id or CORRELATION_ID.get() or uuid.uuid4().hex
    id_token = CORRELATION_ID.set(scoped_id)
    name_token = OPERATION.set(name)
    try:
        yield scoped_id
    finally:
        OPERATION.reset(name_token)
        CORRELATION_ID.reset(id_token)


def log_event(logger: logging.Logger, level: int, event: str, **fields: Any) -> None:
    """Log ``event`` with scrubbed ``fields`` as record attributes."""

    exc_info = fields.pop("exc_info", None)
    correlation_id = fields.pop("correlation_id", None) or CORRELATION_ID.get()
    extra = scrub(fields)
    extra.update(event=event, correlation_id=correlation_id, operation=OPERATION.get())
    logger.log(level, event, exc_info=exc_info, extra=extra)


__all__ = [
    "CORRELATION_ID",
    "JsonFormatter",
    "MASK",
    "MASKED_FIELDS",
    "configure_logging",
    "get_logger",
    "log_event",
    "operation_context",
    "scrub",
]
