"""Logging configuration shared by the library and the command line tool."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, TextIO

__all__ = ["JsonFormatter", "setup_logging"]


_MANAGED_LOGGERS = ("tsreduce", "tsreduce_core")
_HANDLER_MARKER = "_tsreduce_handler"

# Attributes present on every LogRecord; anything else came from ``extra``.
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__
) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Render records as single-line JSON objects including ``extra`` fields."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key in _RESERVED_ATTRS or key.startswith("_"):
                continue
            payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, sort_keys=True)


def _resolve_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown logging level: {level!r}")
    return resolved


def _build_handler(output: str | Path) -> logging.Handler:
    target = str(output)
    stream: TextIO
    if target.lower() == "stdout":
        stream = sys.stdout
    elif target.lower() == "stderr":
        stream = sys.stderr
    else:
        path = Path(target).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        return logging.FileHandler(path, encoding="utf-8")
    return logging.StreamHandler(stream)


def setup_logging(
    level: str | int = "info",
    output: str | Path = "stderr",
    fmt: str = "json",
) -> logging.Logger:
    """Configure the package loggers and return the ``tsreduce`` logger.

    Calling this repeatedly replaces the handler installed by the previous
    call instead of stacking a new one.
    """

    if fmt not in {"json", "text"}:
        raise ValueError(f"Unknown logging format: {fmt!r}")

    resolved_level = _resolve_level(level)
    handler = _build_handler(output)
    if fmt == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
    setattr(handler, _HANDLER_MARKER, True)

    for name in _MANAGED_LOGGERS:
        target = logging.getLogger(name)
        for existing in list(target.handlers):
            if getattr(existing, _HANDLER_MARKER, False):
                target.removeHandler(existing)
                existing.close()
        target.addHandler(handler)
        target.setLevel(resolved_level)
        target.propagate = False

    return logging.getLogger(_MANAGED_LOGGERS[0])
