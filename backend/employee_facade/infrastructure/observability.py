"""Structured Logging — JSON formatter and setup for the facade process.

Invariants:
    - Every line carries timestamp (from the record), level, logger name, message
    - Upstream context (employee_id, url, status_code, attempt, backoff_ms, kind)
      is surfaced as top-level keys when passed via `extra`
    - setup_logging is idempotent: re-running it replaces, never duplicates, its handler

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - httpx/httpcore loggers pinned to WARNING: the client logs its own
      attempts with richer context, per-request INFO lines would be noise
"""

import logging
import json
from datetime import datetime, timezone

EXTRA_FIELDS = (
    "employee_id", "url", "method", "status_code", "kind", "attempt",
    "max_attempts", "backoff_ms", "error_code", "path", "count",
)

_NOISY_LOGGERS = ("httpx", "httpcore")
_HANDLER_NAME = "employee_facade"


class JSONFormatter(logging.Formatter):
    """One JSON object per log record."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val.value if hasattr(val, "value") else val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the facade handler on the root logger and return it."""
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    for existing in list(logging.root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logging.root.removeHandler(existing)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return handler
