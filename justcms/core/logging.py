"""Logging setup: JSON lines for aggregation, coloured text for local use."""

import json
import logging
import sys
from datetime import UTC, datetime

from .config import Config

# Extra record attributes the client attaches to request logs
_CONTEXT_FIELDS = ("endpoint", "status_code", "duration_ms")


class JSONFormatter(logging.Formatter):
    """Format log records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(UTC).isoformat(),
            "severity": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for field in _CONTEXT_FIELDS:
            if hasattr(record, field):
                log_entry[field] = getattr(record, field)

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry)


class DevelopmentFormatter(logging.Formatter):
    """Human-readable format for local development."""

    def format(self, record: logging.LogRecord) -> str:
        colors = {
            "DEBUG": "\033[36m",  # Cyan
            "INFO": "\033[32m",  # Green
            "WARNING": "\033[33m",  # Yellow
            "ERROR": "\033[31m",  # Red
            "CRITICAL": "\033[35m",  # Magenta
        }
        reset = "\033[0m"

        level_color = colors.get(record.levelname, "")
        prefix = f"{level_color}[{record.levelname}]{reset}"

        context_parts = []
        if hasattr(record, "endpoint"):
            context_parts.append(f"endpoint={record.endpoint or '/'}")
        if hasattr(record, "status_code"):
            context_parts.append(f"status={record.status_code}")
        if hasattr(record, "duration_ms"):
            context_parts.append(f"{record.duration_ms}ms")

        context = f" ({', '.join(context_parts)})" if context_parts else ""

        return f"{prefix} {record.name}{context}: {record.getMessage()}"


def setup_logging(level: int | str | None = None, json_format: bool | None = None) -> None:
    """Configure root logging for applications and the CLI.

    The library itself never calls this; it only logs through get_logger().
    Level and format default to JUSTCMS_LOG_LEVEL and JUSTCMS_LOG_JSON.
    """
    if level is None:
        level = Config.log_level()
    if json_format is None:
        json_format = Config.json_logging()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)

    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(DevelopmentFormatter())

    root_logger.addHandler(handler)

    # Reduce noise from the transport
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name."""
    return logging.getLogger(name)
