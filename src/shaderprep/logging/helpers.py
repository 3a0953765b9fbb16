from __future__ import annotations

"""Small logging helpers to standardize shaderprep logger names, configuration and tracing.

This module provides:
    - JsonLogFormatter: JSON log formatter with stable fields and optional context.
    - setup_base_logger: Root logger configuration for the 'shaderprep' logger.
    - get_logger: Namespaced logger factory ('shaderprep.*').
    - trace_io utilities gated by SHADERPREP_TRACE_IO.

Library modules only ask for loggers through `get_logger`; handlers are
installed exclusively by `setup_base_logger`, which applications call once.
"""

import logging
import os
from typing import Optional, TextIO

from shaderprep.constants import ENV_TRACE_IO, ENV_VERSION

BASE_LOGGER_NAME = "shaderprep"


class JsonLogFormatter(logging.Formatter):
    """Emit logs as compact JSON with a fixed schema.

    Fields:
        - ts: ISO-8601 timestamp in UTC with millisecond precision.
        - level: Log level name.
        - module: Logger name (e.g., 'shaderprep.resolver').
        - msg: Formatted message string.
        - version: shaderprep.__version__ (fixed per formatter instance).
        - ctx: Optional dictionary attached to the record as 'context'.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        """Resolve the package version lazily to avoid import cycles.

        Returns:
            str: Version string or 'unknown' if it cannot be determined.
        """
        try:
            from shaderprep import __version__ as _v
            return str(_v)
        except ImportError:
            return os.getenv(ENV_VERSION, "unknown")

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
    """Configure the base 'shaderprep' logger once and return it.

    Args:
        json_logs: If True, configure a JSON formatter, else plain text.
        level: Logging level for the base logger.
        stream: Optional stream (stderr by default).

    Returns:
        The configured base logger.
    """
    base = logging.getLogger(BASE_LOGGER_NAME)
    if base.handlers:
        base.setLevel(level)
        return base

    import sys as _sys

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
    """Return a namespaced logger under 'shaderprep'."""
    if not name or name == BASE_LOGGER_NAME:
        return logging.getLogger(BASE_LOGGER_NAME)
    if name.startswith(BASE_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{BASE_LOGGER_NAME}.{name}")


def is_trace_io_enabled() -> bool:
    """Check if IO tracing is enabled via env flag."""
    return os.getenv(ENV_TRACE_IO) == "1"


def trace_io(logger: logging.Logger, message: str, **ctx) -> None:
    """Emit debug-verbosity IO trace messages only when enabled.

    Args:
        logger: Target logger.
        message: Human-readable description.
        **ctx: Optional structured context, attached to the record as 'context'.
    """
    if not is_trace_io_enabled():
        return
    if ctx:
        logger.debug("%s | ctx=%r", message, ctx, extra={"context": ctx})
    else:
        logger.debug("%s", message)
