"""Logging configuration.

Console logging in either a human-readable or a JSON layout, selected by
``LOG_JSON``. JSON output carries one object per record so that logs can be
collected by an aggregator.
"""
import logging
import json
import sys
from datetime import datetime, timezone
from typing import Any, Dict
import traceback

from edulog.core.config import settings


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Includes timestamp, level, message, module, function and any custom
    fields passed through ``extra``.
    """

    # Attributes every LogRecord carries; anything else came from ``extra``
    RESERVED_ATTRS = frozenset(
        logging.LogRecord("", 0, "", 0, "", (), None).__dict__
    ) | {"message", "asctime"}

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON string.

        Args:
            record: LogRecord to format

        Returns:
            JSON string with log data
        """
        log_obj: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        # Add exception info if present
        if record.exc_info:
            log_obj["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": traceback.format_exception(*record.exc_info)
            }

        # Add custom fields from 'extra' parameter
        for key, value in record.__dict__.items():
            if key not in self.RESERVED_ATTRS and not key.startswith("_"):
                log_obj[key] = value

        return json.dumps(log_obj, default=str)


def setup_logging(
    level: str = "INFO",
    json_format: bool = False
) -> logging.Logger:
    """Configure application-wide logging on the root logger.

    Only one console handler is kept, so records are never printed twice.
    An unknown level falls back to INFO.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: Whether to use the JSON formatter

    Returns:
        Configured root logger

    Example:
        >>> logger = setup_logging(level="DEBUG", json_format=True)
        >>> logger.debug("Parser ready")
    """
    log_level = getattr(logging, level.upper(), None)
    if not isinstance(log_level, int):
        log_level = logging.INFO
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)

    if json_format:
        formatter = JSONFormatter()
    else:
        fmt = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        formatter = logging.Formatter(fmt)

    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a module logger.

    Args:
        name: Logger name (typically __name__ of module)

    Returns:
        Logger
    """
    return logging.getLogger(name)


# Initialize logging on module import (can be reconfigured later)
setup_logging(level=settings.log_level, json_format=settings.log_json)
