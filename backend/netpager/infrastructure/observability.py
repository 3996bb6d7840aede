"""Structured Logging: JSON and text formatters, one-shot setup.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (capture_id, tool_name, error_code, ...) surfaced when present,
      in both formats
    - setup_logging installs exactly one netpager handler on the root logger,
      however many times it is called

Design Decisions:
    - stdlib logging with a small JSONFormatter: no extra dependency
    - setup_logging called from the FastAPI lifespan; tests may re-enter it
"""

import logging
import json
from datetime import datetime, timezone

EXTRA_FIELDS = (
    "capture_id", "tool_name", "error_code", "path", "page_token", "total",
)


def _extras(record: logging.LogRecord) -> dict:
    return {
        key: record.__dict__[key]
        for key in EXTRA_FIELDS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_extras(record),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    """Human-readable lines with extras appended as key=value."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = " ".join(f"{k}={v}" for k, v in _extras(record).items())
        return f"{line} [{extras}]" if extras else line


class _NetPagerHandler(logging.StreamHandler):
    pass


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application."""
    for existing in list(logging.root.handlers):
        if isinstance(existing, _NetPagerHandler):
            logging.root.removeHandler(existing)

    handler = _NetPagerHandler()
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
