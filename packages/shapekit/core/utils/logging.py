"""Logging setup for shapekit tools.

Library modules only create module loggers and log at DEBUG. Applications
(the CLI, or anything loading a presets file) call configure_logging once
to choose the level, the destination and plain or JSON-lines output.
"""

from __future__ import annotations

from datetime import UTC, datetime
import json
import logging
import sys
from typing import Any

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Attributes every LogRecord carries; anything else came in through `extra`
_RECORD_ATTRS = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}


class StructuredJSONFormatter(logging.Formatter):
    """Render each record as a single JSON line.

    Output shape::

        {
            "time": "2026-01-29T12:00:00.000000+00:00",
            "level": "DEBUG",
            "logger": "shapekit.core.shapers.registry",
            "message": "Constructing cubic_bezier shaper with {...}",
            "location": {"module": "registry", "function": "create", "line": 88},
            "extra": {"preset": "soft_seat"},
            "error": {"type": "ValueError", "message": "...", "traceback": "..."}
        }

    ``extra`` holds fields passed via ``extra=`` or a LoggerAdapter and is
    omitted when empty. ``error`` is present only when exc_info is set.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "time": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": {
                "module": record.module,
                "function": record.funcName,
                "line": record.lineno,
            },
        }

        extra = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        }
        if extra:
            entry["extra"] = extra

        if record.exc_info and record.exc_info[0] is not None:
            exc_type, exc_value, _ = record.exc_info
            entry["error"] = {
                "type": exc_type.__name__,
                "message": str(exc_value),
                "traceback": record.exc_text or self.formatException(record.exc_info),
            }

        return json.dumps(entry, default=str)


def _build_handler(filename: str | None) -> logging.Handler:
    if filename:
        return logging.FileHandler(filename, encoding="utf-8")
    return logging.StreamHandler(sys.stdout)


def _build_formatter(structured: bool, format_string: str | None) -> logging.Formatter:
    if structured:
        return StructuredJSONFormatter()
    return logging.Formatter(format_string or DEFAULT_FORMAT)


def configure_logging(
    level: str = "INFO",
    format_string: str | None = None,
    filename: str | None = None,
    structured: bool = False,
) -> None:
    """Install a single root handler, replacing any existing ones.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL), any case.
        format_string: Format for plain-text output. Defaults to
            DEFAULT_FORMAT; ignored when ``structured`` is set.
        filename: Write to this file instead of stdout.
        structured: Emit one JSON object per line.

    Example:
        >>> configure_logging(level="DEBUG", structured=True)  # doctest: +SKIP
    """
    handler = _build_handler(filename)
    handler.setFormatter(_build_formatter(structured, format_string))
    logging.basicConfig(level=level.upper(), handlers=[handler], force=True)


def get_logger(name: str, **context: Any) -> logging.Logger | logging.LoggerAdapter:
    """Return the named logger, bound to ``context`` when any is given.

    Example:
        >>> log = get_logger("shapekit.presets", preset="soft_seat")
        >>> log.extra
        {'preset': 'soft_seat'}
    """
    logger = logging.getLogger(name)
    if not context:
        return logger
    return logging.LoggerAdapter(logger, context)
