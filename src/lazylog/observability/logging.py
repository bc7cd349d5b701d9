"""Centralized logging setup for lazylog's own diagnostics.

The library reports on itself through the standard ``logging`` module. The
``StdlibSink`` also routes user messages here, so ``setup_logging`` is the
one place that decides how everything ends up on stdout.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Optional

from lazylog.models.enums import Severity


class JsonFormatter(logging.Formatter):
    """Custom logging formatter that outputs JSONL."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # Dynamically identify standard LogRecord attributes to exclude them from 'extra' fields
        dummy_record = logging.LogRecord("name", logging.INFO, "path", 1, "msg", None, None)
        self._reserved_attrs = set(dummy_record.__dict__.keys())
        self._reserved_attrs.update({"message", "asctime", "stack_info"})

    def format(self, record: logging.LogRecord) -> str:
        """Formats a log record as a JSON string."""
        log_entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "component": record.name,
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        # Flatten a designated 'extra_fields' dict, keep any other custom attribute as-is.
        for key, value in record.__dict__.items():
            if key not in self._reserved_attrs:
                if key == "extra_fields" and isinstance(value, dict):
                    log_entry.update(value)
                else:
                    log_entry[key] = value

        return json.dumps(log_entry, default=str)


def resolve_level(level: Optional[str] = None) -> int:
    """Turns a level name into a stdlib level number.

    Understands every ``Severity`` name (including ``TRACE`` and ``WARN``)
    as well as ``WARNING``. Defaults to the LOG_LEVEL env var or INFO.
    """
    name = level or os.environ.get("LOG_LEVEL", "INFO")
    return Severity.parse(name).to_stdlib()


def setup_logging(level: Optional[str] = None, stream=None):
    """Initializes the logging system.

    Args:
        level: Optional log level override. Defaults to LOG_LEVEL env var or INFO.
        stream: Output stream. Defaults to stdout.
    """
    logger = logging.getLogger()
    logger.setLevel(resolve_level(level))

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(JsonFormatter())

    # Remove existing handlers to avoid duplicates
    for h in logger.handlers[:]:
        logger.removeHandler(h)

    logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Retrieves a logger with the given name.

    Args:
        name: The name of the logger (typically __name__).

    Returns:
        A logging.Logger instance.
    """
    return logging.getLogger(name)
