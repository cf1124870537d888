"""Logging configuration shared by the CLI, stores, and sorter.

Standard library logging with a concise human formatter by default and
an optional JSON formatter (one object per line) for scripted use.
Handlers write to stderr so that command output on stdout stays clean.

Usage::

    from grocno.utils.logging import configure_logging, get_logger

    configure_logging(level="INFO", json_logs=False)
    log = get_logger(__name__)
    log.info("Added product", extra={"product_id": 10})
"""

from __future__ import annotations

import json
import logging
import logging.config
from typing import Any

from grocno.exceptions import ValidationError

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Attributes every LogRecord carries; anything else came from ``extra=``.
_RESERVED_ATTRS: frozenset[str] = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime", "taskName"}


def _json_formatter(record: logging.LogRecord) -> str:
    """Render a log record as a JSON string."""
    payload: dict[str, Any] = {
        "level": record.levelname,
        "logger": record.name,
        "message": record.getMessage(),
    }
    for attr, value in vars(record).items():
        if attr not in _RESERVED_ATTRS:
            payload[attr] = value
    if record.exc_info:
        payload["exc_info"] = logging.Formatter().formatException(record.exc_info)
    if record.stack_info:
        payload["stack_info"] = record.stack_info
    return json.dumps(payload, default=str)


class JsonFormatter(logging.Formatter):
    """Minimal JSON formatter for structured logs."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        return _json_formatter(record)


def configure_logging(
    level: str = "WARNING",
    json_logs: bool = False,
) -> None:
    """Configure root logging.

    Parameters
    ----------
    level:
        Logging level name (``"DEBUG"``, ``"INFO"``, ``"WARNING"``...).
    json_logs:
        Emit JSON lines instead of the human formatter.

    Raises
    ------
    ValidationError
        If *level* is not one of :data:`LOG_LEVELS` (case-insensitive).
    """
    level = level.upper()
    if level not in LOG_LEVELS:
        raise ValidationError(
            f"Unknown log level: {level!r}",
            hint=f"Use one of {', '.join(LOG_LEVELS)}.",
        )
    formatter_name = "json" if json_logs else "console"

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "console": {
                    "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
                "json": {
                    "()": JsonFormatter,
                },
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": formatter_name,
                    "level": level,
                    "stream": "ext://sys.stderr",
                }
            },
            "root": {
                "handlers": ["default"],
                "level": level,
            },
        }
    )


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the logger called *name* (the root logger when ``None``)."""
    return logging.getLogger(name)


__all__ = ["JsonFormatter", "configure_logging", "get_logger"]
