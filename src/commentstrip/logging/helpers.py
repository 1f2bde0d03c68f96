from __future__ import annotations

"""Logging helpers that standardize commentstrip logger names and output.

This module provides:
    - JsonLogFormatter: JSON lines with a fixed schema and optional context.
    - setup_base_logger: one-time configuration of the 'commentstrip' logger.
    - get_logger: namespaced logger factory ('commentstrip.*').
    - trace_io utilities gated by COMMENTSTRIP_TRACE_IO.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Optional, TextIO

BASE_LOGGER = "commentstrip"
TRACE_IO_ENV = "COMMENTSTRIP_TRACE_IO"


class JsonLogFormatter(logging.Formatter):
    """Emit logs as compact JSON.

    Fields:
        - ts: ISO-8601 timestamp in UTC with millisecond precision.
        - level: Log level name.
        - module: Logger name (e.g., 'commentstrip.runner').
        - msg: Formatted message string.
        - version: commentstrip.__version__, resolved once per formatter.
        - ctx: Optional dictionary attached to the record as 'context'.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        # Imported lazily: the package root imports this module.
        from commentstrip import __version__

        return str(__version__)

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        ts_str = ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")

        payload = {
            "ts": ts_str,
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
            "version": self._version,
        }

        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict) and ctx:
            payload["ctx"] = ctx

        return json.dumps(payload, ensure_ascii=False)


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Configure the base 'commentstrip' logger and return it.

    Calling it again replaces the handler, so a later call may switch
    between plain and JSON output or point logs at another stream.
    """
    base = logging.getLogger(BASE_LOGGER)
    for h in list(base.handlers):
        base.removeHandler(h)
    base.setLevel(level)
    base.propagate = False

    handler = logging.StreamHandler(stream or sys.stderr)
    if json_logs:
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    base.addHandler(handler)

    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under 'commentstrip'."""
    if not name or name == BASE_LOGGER:
        return logging.getLogger(BASE_LOGGER)
    if name.startswith(f"{BASE_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{BASE_LOGGER}.{name}")


def is_trace_io_enabled() -> bool:
    return os.getenv(TRACE_IO_ENV) == "1"


def trace_io(logger: logging.Logger, message: str, **ctx) -> None:
    """Emit a debug IO trace, only when COMMENTSTRIP_TRACE_IO=1."""
    if not is_trace_io_enabled():
        return
    if ctx:
        logger.debug("%s | ctx=%r", message, ctx, extra={"context": ctx})
    else:
        logger.debug("%s", message)
