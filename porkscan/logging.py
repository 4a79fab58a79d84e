"""
Logging setup for PorkScan.

Everything logs under the "porkscan" namespace. In production each record
is one JSON object per line; in development a plain text line is easier to
read. Analysis metrics (bill id, item counts, confidence, timings) travel
as `extra=` fields and show up as keys in either format.

    from porkscan.logging import get_logger
    logger = get_logger("analyzer")
    logger.info("Bill analyzed", extra={"bill_id": "118-hr-42", "items_count": 3})
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone


LOG_LEVEL = os.getenv("PORKSCAN_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.getenv("PORKSCAN_LOG_FORMAT", "json")  # "json" or "text"

NAMESPACE = "porkscan"

# `extra=` keys copied into the output when present on a record
_EXTRA_FIELDS = (
    "bill_id", "items_count", "indicator_count", "confidence",
    "total_value", "has_pork", "duration_ms", "status_code", "method",
    "path", "error", "error_type", "version",
)

# Third-party loggers kept at WARNING
_QUIET_LOGGERS = ("uvicorn.access", "httpcore")


def _record_extras(record: logging.LogRecord) -> dict:
    return {
        key: getattr(record, key)
        for key in _EXTRA_FIELDS
        if getattr(record, key, None) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per record, timestamped in UTC."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_record_extras(record),
        }
        if record.exc_info and record.exc_info[0]:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """Single-line output for a terminal, extras appended as key=value."""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s %(levelname)-7s %(name)s | %(message)s",
            datefmt="%H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = _record_extras(record)
        if not extras:
            return line
        pairs = " ".join(f"{key}={value}" for key, value in extras.items())
        head, newline, rest = line.partition("\n")
        return f"{head} [{pairs}]{newline}{rest}"


def setup_logging(level: str = LOG_LEVEL, fmt: str = LOG_FORMAT) -> logging.Logger:
    """
    Point the porkscan logger at stdout with the chosen formatter.

    Safe to call more than once: earlier handlers are replaced, not stacked.
    """
    logger = logging.getLogger(NAMESPACE)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    logger.addHandler(handler)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Child logger of the porkscan namespace, e.g. "api" -> "porkscan.api"."""
    return logging.getLogger(f"{NAMESPACE}.{name}")
