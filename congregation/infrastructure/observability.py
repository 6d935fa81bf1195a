"""Structured Logging — JSON lines for request, persistence and service events.

Invariants:
    - Every line carries timestamp, level, logger and message
    - Request fields (method, path, status_code, duration_ms) and persistence fields
      (operation, entity, entity_id, error_code) appear only when the record sets them
    - setup_logging is idempotent: calling it again replaces its own handler

Design Decisions:
    - "json" for deployed processes, "text" for local runs
    - SQLAlchemy engine echo stays off; statement logging is opt-in via log level
"""

import logging
import json
from datetime import datetime, timezone

_EXTRA_KEYS = (
    "method", "path", "status_code", "duration_ms",
    "error_code", "operation", "entity", "entity_id",
)

_HANDLER_NAME = "congregation"


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (key, record.__dict__[key])
            for key in _EXTRA_KEYS
            if record.__dict__.get(key) is not None
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)-7s %(name)s: %(message)s",
        ))

    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    # uvicorn's access log duplicates the request-logging middleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
