"""
Logging for the converter.

Log output goes to stderr (stdout carries converted text). Records may carry
an ``extra_data`` dict of context such as the pass name or the failing input;
both formatters render it, the text formatter as trailing ``key=value`` pairs
and the JSON formatter as top-level fields.
"""

import sys
import logging
from typing import Any, Dict, List, Optional
from datetime import datetime, timezone
import json
from pathlib import Path

from .config import Settings, get_settings

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def record_context(record: logging.LogRecord) -> Dict[str, Any]:
    """Context attached to a record through ``extra_data``."""
    return dict(getattr(record, "extra_data", None) or {})


class TextFormatter(logging.Formatter):
    """One line per record: ``time - logger - LEVEL - message [key=value ...]``"""

    def __init__(self):
        super().__init__(fmt=TEXT_FORMAT, datefmt=DATE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = record_context(record)
        if not context:
            return line
        pairs = " ".join(f"{key}={value!r}" for key, value in context.items())
        # Keep a traceback, if any, below the context
        head, sep, tail = line.partition("\n")
        return f"{head} [{pairs}]{sep}{tail}"


class StructuredFormatter(logging.Formatter):
    """One JSON object per record, context merged in at the top level"""

    def format(self, record: logging.LogRecord) -> str:
        data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "function": record.funcName,
            "line": record.lineno,
        }
        for key, value in record_context(record).items():
            data.setdefault(key, value)
        if record.exc_info:
            data["exception"] = self.formatException(record.exc_info)
        return json.dumps(data, default=str)


FORMATTERS = {
    "text": TextFormatter,
    "json": StructuredFormatter,
}


def _handlers(settings: Settings, formatter: logging.Formatter, level: int) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if settings.LOG_FILE:
        log_path = Path(settings.LOG_FILE)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(level)
    return handlers


def setup_logging(settings: Optional[Settings] = None, level: Optional[str] = None) -> None:
    """
    Configure the root logger from settings.

    Args:
        settings: Source of LOG_FORMAT, LOG_FILE and the default level.
        level: Level name overriding ``settings.LOG_LEVEL`` (the CLI flag).
    """
    settings = settings or get_settings()
    log_level = getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO)
    formatter = FORMATTERS.get(settings.LOG_FORMAT, TextFormatter)()

    logging.basicConfig(
        level=log_level,
        handlers=_handlers(settings, formatter, log_level),
        force=True
    )


def get_logger(name: str) -> logging.Logger:
    """Get logger instance"""
    return logging.getLogger(name)


class ContextLogger(logging.LoggerAdapter):
    """Logger whose records carry permanent context plus per-call ``extra_data``"""

    def process(self, msg: str, kwargs: Dict[str, Any]) -> tuple:
        extra = kwargs.setdefault("extra", {})
        extra["extra_data"] = {**self.extra, **kwargs.pop("extra_data", {})}
        return msg, kwargs


def get_context_logger(name: str, **context) -> ContextLogger:
    """Get logger with permanent context, e.g. ``component="pipeline"``"""
    return ContextLogger(get_logger(name), context)
