"""Logger naming, base configuration and per-call tracing for flagparse.

The library never configures logging on import. Applications opt in with
`flagparse.configure_logging` (or `setup_base_logger` directly); until then
records go wherever the host application's root logger sends them.

Tracing
-------
`trace` emits one DEBUG record per extraction when ``FLAGPARSE_TRACE=1``.
The keyword context is attached to the record as ``context`` so that the
JSON formatter can render it under ``ctx``.
"""
from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Optional, TextIO

BASE_LOGGER_NAME = "flagparse"
TRACE_ENV = "FLAGPARSE_TRACE"
PLAIN_FORMAT = "%(levelname)s: %(message)s"


class JsonLogFormatter(logging.Formatter):
    """One JSON object per record: ts, level, logger, msg, version, ctx."""

    def format(self, record: logging.LogRecord) -> str:
        from flagparse import __version__

        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload = {
            "ts": ts.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
            "version": __version__,
        }
        ctx = getattr(record, "context", None)
        if ctx:
            payload["ctx"] = ctx
        return json.dumps(payload, ensure_ascii=False)


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None
) -> logging.Logger:
    """(Re)configure the 'flagparse' logger with a single stream handler.

    Every call replaces the handler, so switching between plain and JSON
    output takes effect immediately.
    """
    base = logging.getLogger(BASE_LOGGER_NAME)
    for old in list(base.handlers):
        base.removeHandler(old)
    base.setLevel(level)
    base.propagate = False

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(JsonLogFormatter() if json_logs else logging.Formatter(PLAIN_FORMAT))
    base.addHandler(handler)
    return base


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a namespaced logger under 'flagparse'."""
    if not name or name == BASE_LOGGER_NAME:
        return logging.getLogger(BASE_LOGGER_NAME)
    if name.startswith(BASE_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{BASE_LOGGER_NAME}.{name}")


def is_trace_enabled() -> bool:
    return os.getenv(TRACE_ENV) == "1"


def trace(logger: logging.Logger, message: str, **ctx) -> None:
    if not is_trace_enabled():
        return
    logger.debug("%s %r", message, ctx, extra={"context": ctx})
