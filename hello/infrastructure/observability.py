"""Structured Logging - JSON formatter and setup for the hello process.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (error_code, property_name, text_id, exit_code) surfaced when present
    - JSON format when configured, human-readable otherwise

Design Decisions:
    - JSONFormatter on stdlib logging: no extra dependency for structured output
    - setup_logging called once by the composition root before anything logs
"""

import json
import logging
from datetime import datetime, timezone

_EXTRA_KEYS = ("error_code", "property_name", "text_id", "exit_code", "text_count")


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "text") -> logging.Handler:
    """Configure root logging. Returns the installed handler."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
