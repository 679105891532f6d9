"""
Structured Logging

The API logs JSON lines to stdout; the CLI logs plain text to stderr so
that stdout stays free for results. Both render the same classification
context (verdict, scores, counts) from the `extra` fields of a record.

Usage:
    from jobscreen.logging import get_logger
    logger = get_logger("api")
    logger.info("Prediction complete", extra={"verdict": "FAKE", "duration_ms": 3})
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone

from jobscreen.config import settings

# Only these extras are rendered; anything else on a record is ignored
CONTEXT_FIELDS = (
    "verdict", "confidence", "signal_score", "adjusted_score",
    "company_score", "red_flag_count", "word_count", "items",
    "duration_ms", "method", "path", "error", "error_type",
)

QUIET_LOGGERS = ("uvicorn.access",)


def record_context(record: logging.LogRecord) -> dict:
    """Classification context attached to a record, scores rounded."""
    context = {}
    for key in CONTEXT_FIELDS:
        val = getattr(record, key, None)
        if val is None:
            continue
        context[key] = round(val, 3) if isinstance(val, float) else val
    return context


class JSONFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **record_context(record),
        }
        if record.exc_info and record.exc_info[0]:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """`LEVEL name: message key=value ...` for terminals."""

    def __init__(self):
        super().__init__(fmt="%(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = record_context(record)
        if not context:
            return line
        pairs = " ".join(f"{k}={v}" for k, v in context.items())
        # Traceback, if any, stays on the lines after the message
        head, sep, tail = line.partition("\n")
        return f"{head} {pairs}{sep}{tail}"


_FORMATTERS = {"json": JSONFormatter, "text": TextFormatter}


def setup_logging(
    level: str | None = None,
    fmt: str | None = None,
    stream=None,
) -> logging.Logger:
    """
    Configure the `jobscreen` logger. Call once at app or CLI startup.

    Level and format default to JOBSCREEN_LOG_LEVEL / JOBSCREEN_LOG_FORMAT.
    Calling again replaces the previous handler.

    Raises:
        ValueError: unknown format name.
    """
    fmt = fmt or settings.LOG_FORMAT
    if fmt not in _FORMATTERS:
        raise ValueError(f"Unknown log format {fmt!r}; expected one of {sorted(_FORMATTERS)}")

    root = logging.getLogger("jobscreen")
    root.setLevel(getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO))
    root.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(_FORMATTERS[fmt]())
    root.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return root


def get_logger(name: str) -> logging.Logger:
    """Named logger under the jobscreen namespace."""
    return logging.getLogger(f"jobscreen.{name}")
