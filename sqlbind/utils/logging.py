"""Logging setup for sqlbind.

Library modules log through :func:`get_logger` at DEBUG only and never attach
handlers. The CLI calls :func:`configure_logging` to send the ``sqlbind``
logger to stderr as plain text or one JSON object per line.
"""

import logging
import sys
from typing import Any, Final, Optional

from sqlbind._serialization import encode_json

__all__ = ("LOG_FORMATS", "ROOT_LOGGER_NAME", "StructuredFormatter", "configure_logging", "get_logger")

ROOT_LOGGER_NAME: Final = "sqlbind"
LOG_FORMATS: Final = ("simple", "structured")
SIMPLE_FORMAT: Final = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class StructuredFormatter(logging.Formatter):
    """Render a record as a compact JSON object.

    Fields passed as ``extra={"extra_fields": {...}}`` are merged into the object.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        extra_fields = getattr(record, "extra_fields", None)
        if extra_fields:
            entry.update(extra_fields)
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return encode_json(entry)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger under the ``sqlbind`` namespace."""
    if name is None:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if not name.startswith(ROOT_LOGGER_NAME):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(level: str = "WARNING", format_style: str = "simple") -> logging.Logger:
    """Send ``sqlbind`` log records to stderr.

    Replaces handlers left by an earlier call and stops propagation to the
    root logger.

    Args:
        level: Level name, case-insensitive.
        format_style: ``"simple"`` for text lines, ``"structured"`` for JSON lines.

    Raises:
        ValueError: If ``format_style`` is unknown.

    Returns:
        The configured ``sqlbind`` logger.
    """
    if format_style not in LOG_FORMATS:
        msg = f"Unknown log format {format_style!r}, expected one of {LOG_FORMATS}"
        raise ValueError(msg)

    handler = logging.StreamHandler(sys.stderr)
    if format_style == "structured":
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(logging.Formatter(SIMPLE_FORMAT))

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level.upper())
    logger.handlers[:] = [handler]
    logger.propagate = False
    logger.debug("Logging configured", extra={"extra_fields": {"level": level.upper(), "format": format_style}})
    return logger
