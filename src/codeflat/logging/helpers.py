from __future__ import annotations

"""Small logging helpers to standardize codeflat logger names and configuration.

This module provides:
    - JsonLogFormatter: JSON log formatter with stable fields and optional context.
    - setup_base_logger: Root logger configuration for the 'codeflat' logger.
    - get_logger: Namespaced logger factory ('codeflat.*').

Diagnostics always go to a stream (stderr by default), never to the
flattened output document.
"""

import logging
from typing import Optional, TextIO


class JsonLogFormatter(logging.Formatter):
    """Emit logs as compact JSON with a fixed schema.

    Fields:
        - ts: ISO-8601 timestamp in UTC with millisecond precision.
        - level: Log level name.
        - module: Logger name (e.g., 'codeflat.io.walker').
        - msg: Formatted message string.
        - version: codeflat.__version__ (fixed per formatter instance).
        - ctx: Optional dictionary attached to the record as 'context'.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        # Lazy import to avoid a cycle with the package __init__.
        try:
            from codeflat import __version__ as _v
            return str(_v)
        except ImportError:
            return "unknown"

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
    """Configure the base 'codeflat' logger and return it.

    Re-configuration replaces the previous handler so a new stream or
    format takes effect (the CLI may run several times in one process).

    Args:
        json_logs: If True, configure a JSON formatter, else plain text.
        level: Logging level for the base logger.
        stream: Optional stream (stderr by default).

    Returns:
        The configured base logger.
    """
    import sys as _sys

    base = logging.getLogger("codeflat")
    for old in list(base.handlers):
        base.removeHandler(old)
    base.setLevel(level)
    base.propagate = False

    handler = logging.StreamHandler(stream or _sys.stderr)
    if json_logs:
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    base.addHandler(handler)

    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under 'codeflat'."""
    if not name or name == "codeflat":
        return logging.getLogger("codeflat")
    if name.startswith("codeflat"):
        return logging.getLogger(name)
    return logging.getLogger(f"codeflat.{name}")
