"""Request-scoped log context for the form service.

Invariants:
    - Every record carries timestamp, level, logger name and message
    - Tenant, form, error code and request path travel as `extra=` fields and
      are rendered by both formats: JSON keys, or a `key=value` suffix in text
    - setup_logging is idempotent: reconfiguring replaces the service handler
      instead of stacking a second one on the root logger

Design Decisions:
    - SQL echo and per-request access lines are capped at WARNING unless the
      service itself logs at DEBUG
"""

import json
import logging
from datetime import datetime, timezone

CONTEXT_KEYS = ("tenant_id", "form_id", "error_code", "path")
NOISY_LOGGERS = ("sqlalchemy.engine", "uvicorn.access")
_HANDLER_NAME = "formservice"


def log_context(record: logging.LogRecord) -> dict:
    """Context fields set on the record via `extra=`, skipping unset ones."""
    return {
        key: record.__dict__[key]
        for key in CONTEXT_KEYS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **log_context(record),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class ContextTextFormatter(logging.Formatter):
    """Human-readable line with the context fields appended as key=value."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = log_context(record)
        if not context:
            return line
        suffix = " ".join(f"{key}={value}" for key, value in context.items())
        head, sep, tail = line.partition("\n")
        return f"{head} [{suffix}]{sep}{tail}"


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the service handler on the root logger and return it."""
    numeric = getattr(logging, level.upper(), logging.INFO)
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(JSONFormatter() if fmt == "json" else ContextTextFormatter())

    for existing in list(logging.root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logging.root.removeHandler(existing)
    logging.root.addHandler(handler)
    logging.root.setLevel(numeric)

    quiet = numeric if numeric <= logging.DEBUG else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(quiet)
    return handler
