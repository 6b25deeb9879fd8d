"""
Logging configuration.

Provides consistent logging for the storage layer and the command line.
The value types themselves never log.
"""

import sys
import logging
from typing import Any, Dict, Optional
from datetime import datetime, timezone
import json
from pathlib import Path

from .config import settings


class StructuredFormatter(logging.Formatter):
    """JSON structured log formatter"""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON"""
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "extra_data"):
            log_data.update(record.extra_data)

        return json.dumps(log_data, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable text log formatter"""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )


def setup_logging(level: Optional[str] = None) -> None:
    """Configure application logging.

    Args:
        level: Level name overriding ``settings.LOG_LEVEL``. When omitted,
            ``settings.DEBUG`` selects DEBUG.
    """
    if level is None and settings.DEBUG:
        level = "DEBUG"
    level_name = (level or settings.LOG_LEVEL).upper()
    log_level = getattr(logging, level_name, logging.WARNING)

    if settings.LOG_FORMAT == "json":
        formatter = StructuredFormatter()
    else:
        formatter = TextFormatter()

    # stdout carries command results
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)

    handlers = [console_handler]

    if settings.LOG_FILE:
        log_path = Path(settings.LOG_FILE)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(log_level)
        handlers.append(file_handler)

    logging.basicConfig(
        level=log_level,
        handlers=handlers,
        force=True
    )


def get_logger(name: str) -> logging.Logger:
    """Get logger instance"""
    return logging.getLogger(name)


class LoggerAdapter(logging.LoggerAdapter):
    """Logger that attaches structured context to every record"""

    def process(self, msg: str, kwargs: Dict[str, Any]) -> tuple:
        """Merge the call's ``extra_data`` with the adapter context"""
        extra_data = kwargs.pop("extra_data", {})

        if "extra" not in kwargs:
            kwargs["extra"] = {}

        kwargs["extra"]["extra_data"] = {
            **self.extra,
            **extra_data
        }

        return msg, kwargs


def get_context_logger(name: str, **context) -> LoggerAdapter:
    """Get logger with permanent context"""
    return LoggerAdapter(get_logger(name), context)
