"""
Centralized Logging Framework
Structured (JSON) and human-readable formatters for the docstore logger.
"""
import sys
import json
import logging
import traceback
from typing import Optional
from datetime import datetime, timezone
from enum import Enum

from .config import StoreSettings, LogFormat, get_settings

ROOT_LOGGER_NAME = "docstore"


class LogCategory(str, Enum):
    """Log categories for filtering and routing"""
    STORAGE = "storage"
    SEARCH = "search"
    CONFIG = "config"


class StructuredFormatter(logging.Formatter):
    """JSON structured log formatter for production"""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno
        }

        # Add extra fields
        if hasattr(record, "category"):
            log_data["category"] = record.category
        if hasattr(record, "extra_data"):
            log_data["data"] = record.extra_data

        if record.exc_info:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "traceback": traceback.format_exception(*record.exc_info)
            }

        return json.dumps(log_data, ensure_ascii=False, default=str)


class DevelopFormatter(logging.Formatter):
    """Human-readable formatter for development"""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S.%f")[:-3]
        parts = [f"{timestamp} {record.levelname:<8} [{record.name}]"]

        if hasattr(record, "category"):
            parts.append(f"[{record.category}]")

        parts.append(record.getMessage())

        if hasattr(record, "extra_data"):
            parts.append(json.dumps(record.extra_data, ensure_ascii=False, default=str))

        line = " ".join(parts)
        if record.exc_info:
            line += "\n" + "".join(traceback.format_exception(*record.exc_info))
        return line


def configure_logging(settings: Optional[StoreSettings] = None) -> logging.Logger:
    """
    Install a stdout handler on the docstore logger.

    Calling it again replaces the handler installed by a previous call,
    so level or format changes take effect without stacking handlers.
    The root logger is left untouched.
    """
    settings = settings or get_settings()
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    level = getattr(logging, settings.LOG_LEVEL)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if getattr(handler, "_docstore_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    if settings.LOG_FORMAT == LogFormat.JSON:
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(DevelopFormatter())
    handler._docstore_handler = True

    logger.addHandler(handler)
    logger.debug(
        "Logging configured",
        extra={
            "category": LogCategory.CONFIG.value,
            "extra_data": {"level": settings.LOG_LEVEL, "format": settings.LOG_FORMAT.value}
        }
    )
    return logger
