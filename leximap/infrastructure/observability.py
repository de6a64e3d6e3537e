"""Structured Logging — JSON formatter and setup for production observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (word, relation, status_code, error_code, path, sense_count)
      surfaced when present
    - JSON format in production, human-readable in development

Design Decisions:
    - JSONFormatter on stdlib logging: no extra dependency, full control
    - setup_logging called once on startup via lifespan; repeated calls
      replace the handler instead of stacking duplicates
"""

import logging
import json
from datetime import datetime, timezone

_EXTRA_FIELDS = (
    "word", "relation", "status_code", "error_code", "path", "sense_count",
)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


_handler: logging.Handler | None = None


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure root logging for the application."""
    global _handler
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s — %(message)s",
        ))
    if _handler is not None:
        logging.root.removeHandler(_handler)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    _handler = handler
    return handler
