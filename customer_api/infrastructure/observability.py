"""Structured Logging — JSON log lines for every request outcome and storage fault.

Invariants:
    - Every line carries timestamp, level, logger, service and message
    - customer_id / operation / error_code / category / path appear only when
      passed via extra=
    - setup_logging is idempotent: calling it twice leaves one handler on the root
    - Driver chatter (pymongo) is capped at WARNING regardless of the app level
"""

import logging
import json
from datetime import datetime, timezone

SERVICE_NAME = "customer-api"
EXTRA_FIELDS = ("customer_id", "operation", "error_code", "category", "path")

_HANDLER_NAME = "customer_api"


class JSONFormatter(logging.Formatter):
    """Render a LogRecord as one JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "service": SERVICE_NAME,
            "message": record.getMessage(),
        }
        log.update(
            (key, record.__dict__[key]) for key in EXTRA_FIELDS
            if record.__dict__.get(key) is not None
        )
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the application handler on the root logger."""
    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
        ))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    logging.getLogger("pymongo").setLevel(logging.WARNING)
    return handler
