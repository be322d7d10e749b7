"""Structured logging configuration for events."""

import json
import logging
import logging.config
import logging.handlers
import reprlib
from dataclasses import fields, is_dataclass
from datetime import date, datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .config import resolve_log_level, resolve_log_path

if TYPE_CHECKING:
    from .models import Event


def _json_default(value: Any) -> Any:
    """Render values json cannot encode natively.

    Dataclasses such as Event and Arg become objects of their fields, so an
    Args list renders as [{"name": ..., "value": ...}, ...] with duplicates
    and order kept. Anything else unknown falls back to repr().
    """
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: getattr(value, f.name) for f in fields(value)}
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (set, frozenset)):
        return list(value)
    return repr(value)


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data = {
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

        if hasattr(record, "context"):
            log_data["context"] = record.context

        try:
            return json.dumps(log_data, default=_json_default)
        except ValueError:
            # Circular argument values
            log_data["context"] = reprlib.repr(record.context)
            return json.dumps(log_data, default=_json_default)


def log_event(logger: logging.Logger, event: "Event") -> None:
    """
    Log an event through a standard logger.

    Debug events are logged at DEBUG level, others at INFO. The event's
    source, time and arguments are attached as the record context.
    """
    level = logging.DEBUG if event.debug else logging.INFO
    if not logger.isEnabledFor(level):
        return

    context = {
        "source": event.source,
        "time": event.time,
        "args": event.args,
    }
    logger.log(level, "%s", event.message, extra={"context": context})


def build_logging_config(log_level: str, log_path: Path) -> dict:
    """Build the dictConfig mapping for a level and log file."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": "events.logging_config.JSONFormatter",
            },
        },
        "handlers": {
            "file": {
                "class": "logging.handlers.RotatingFileHandler",
                "filename": str(log_path),
                "maxBytes": 10 * 1024 * 1024,  # 10 MB
                "backupCount": 5,
                "formatter": "json",
                "encoding": "utf-8",
            },
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json",
                "stream": "ext://sys.stdout",
            },
        },
        "root": {
            "level": log_level,
            "handlers": ["file", "console"],
        },
    }


def setup_logging(
    log_level: str | None = None,
    log_file: str | None = None,
) -> None:
    """
    Setup structured logging for applications embedding events.

    Args:
        log_level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
                   Defaults to EVENTS_LOG_LEVEL / LOG_LEVEL env vars or INFO.
        log_file: Path to log file. Defaults to EVENTS_LOG_FILE or
                  04_logs/events.log.
    """
    log_path = resolve_log_path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(
        build_logging_config(resolve_log_level(log_level), log_path)
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name (typically __name__ of the module)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
