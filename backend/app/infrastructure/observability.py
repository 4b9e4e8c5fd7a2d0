"""Structured Logging: request-scoped fields for Tutorial operations.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Tutorial fields (tutorial_id, operation, path, count, error_code) surfaced
      in both formats whenever a log call passes them as extra
    - JSON format in production, key=value text in development

Design Decisions:
    - Plain logging formatters, no third-party logging library
    - setup_logging called once on startup via lifespan
"""

import json
import logging
from datetime import datetime, timezone

EXTRA_FIELDS = (
    "tutorial_id", "operation", "path", "count", "error_code",
)


def tutorial_fields(record: logging.LogRecord) -> dict:
    """Extra fields set on the record by log calls, in EXTRA_FIELDS order."""
    return {
        key: record.__dict__[key] for key in EXTRA_FIELDS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **tutorial_fields(record),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable line with the tutorial fields appended as key=value."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = tutorial_fields(record)
        if not fields:
            return line
        head, sep, tail = line.partition("\n")
        suffix = " ".join(f"{key}={value}" for key, value in fields.items())
        return f"{head} [{suffix}]{sep}{tail}"


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application."""
    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
