"""Structured Logging: one-line JSON records carrying adapter context.

Invariants:
    - timestamp is when the record was created, not when it was formatted
    - Only the configured context fields are copied from `extra`; None is dropped
    - setup_logging replaces the handler it installed earlier instead of stacking
"""

import json
import logging
from datetime import datetime, timezone


CONTEXT_FIELDS = ("adapter", "operation", "object_id", "error_kind")
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """Render a LogRecord as a JSON object."""

    def __init__(self, fields: tuple[str, ...] = CONTEXT_FIELDS):
        super().__init__()
        self.fields = fields

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update(
            (key, record.__dict__[key])
            for key in self.fields
            if record.__dict__.get(key) is not None
        )
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class _PackageHandler(logging.StreamHandler):
    """Marker type so setup_logging can find the handler it installed."""


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install (or reinstall) the package handler on the root logger."""
    for old in [h for h in logging.root.handlers if isinstance(h, _PackageHandler)]:
        logging.root.removeHandler(old)

    handler = _PackageHandler()
    handler.setFormatter(JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT))
    logging.root.addHandler(handler)
    logging.root.setLevel(logging.getLevelNamesMapping().get(level.upper(), logging.INFO))
    return handler
