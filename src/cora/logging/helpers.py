from __future__ import annotations

"""Small logging helpers to standardize cora logger names and configuration.

This module provides:
    - JsonLogFormatter: JSON log formatter with stable fields and optional context.
    - setup_base_logger: Root logger configuration for the 'cora' logger.
    - get_logger: Namespaced logger factory ('cora.*').
    - is_debug_enabled: CORA_DEBUG environment switch.

Design notes:
    - The version is resolved lazily to avoid circular imports.
    - Fallback to 'unknown' if the version cannot be imported.
"""

import logging
import os
import sys
from typing import Optional, TextIO


class JsonLogFormatter(logging.Formatter):
    """Emit logs as compact JSON with a fixed schema.

    Fields:
        - ts: ISO-8601 timestamp in UTC with millisecond precision.
        - level: Log level name.
        - module: Logger name (e.g., 'cora.io.walker').
        - msg: Formatted message string.
        - version: cora.__version__ (fixed per formatter instance).
        - ctx: Optional dictionary attached to the record as 'context'.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        try:
            from cora import __version__ as _v
            return str(_v)
        except ImportError:
            return os.getenv("CORA_VERSION", "unknown")

    def format(self, record: logging.LogRecord) -> str:
        from datetime import datetime, timezone
        import json

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
    """Configure the base 'cora' logger and return it.

    The first call fixes the handler: its stream and its format (JSON or
    plain text). Later calls only adjust the level and ignore `json_logs`
    and `stream`; use `reset_base_logger` to reconfigure from scratch.

    Args:
        json_logs: If True, configure a JSON formatter, else plain text.
        level: Logging level for the base logger.
        stream: Optional stream (stderr by default).
    """
    base = logging.getLogger("cora")
    if base.handlers:
        base.setLevel(level)
        return base

    base.setLevel(level)
    base.propagate = False

    handler = logging.StreamHandler(stream or sys.stderr)
    if json_logs:
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    base.addHandler(handler)

    return base


def reset_base_logger() -> None:
    """Drop handlers installed by :func:`setup_base_logger`."""
    base = logging.getLogger("cora")
    for handler in list(base.handlers):
        base.removeHandler(handler)
    base.propagate = True


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under 'cora'."""
    if not name or name == "cora":
        return logging.getLogger("cora")
    if name.startswith("cora."):
        return logging.getLogger(name)
    return logging.getLogger(f"cora.{name}")


def is_debug_enabled() -> bool:
    """Check if decision tracing is forced on via env flag."""
    return os.getenv("CORA_DEBUG") == "1"
