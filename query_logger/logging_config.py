"""
Logging configuration for query-logger.

Every record is written to stdout as a single JSON object so the output can
be consumed by log processors line by line.
"""

import json
import logging
import math
import sys
from datetime import date, datetime, time, timezone
from typing import Any, Dict, Optional, TextIO

LOGGER_NAME = "query_logger"

# Python level names mapped to the lowercase names used in the JSON output
LEVEL_NAMES = {
    logging.DEBUG: "debug",
    logging.INFO: "info",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "fatal",
}

RESERVED_KEYS = ("time", "level", "msg")


def _json_default(value: Any) -> Any:
    """Render values the json module cannot serialize on its own."""
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


def _finite(value: Any) -> Any:
    """Replace NaN and infinities, which JSON cannot represent, with strings."""
    if isinstance(value, float) and not math.isfinite(value):
        if math.isnan(value):
            return "NaN"
        return "+Inf" if value > 0 else "-Inf"
    if isinstance(value, dict):
        return {key: _finite(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_finite(item) for item in value]
    return value


class JsonFormatter(logging.Formatter):
    """
    Format log records as JSON objects with ``time``, ``level`` and ``msg`` keys.

    Structured fields are attached with ``extra={"fields": {...}}`` and are
    merged into the top level of the object. A field whose name clashes with
    one of the record keys is kept under ``fields.<name>``.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {}

        fields = getattr(record, "fields", None) or {}
        for key, value in fields.items():
            if key in RESERVED_KEYS:
                key = f"fields.{key}"
            entry[key] = value

        entry["time"] = (
            datetime.fromtimestamp(record.created, tz=timezone.utc)
            .astimezone()
            .isoformat(timespec="seconds")
        )
        entry["level"] = LEVEL_NAMES.get(record.levelno, record.levelname.lower())
        entry["msg"] = record.getMessage()

        if record.exc_info:
            entry["error"] = self.formatException(record.exc_info)

        return json.dumps(_finite(entry), default=_json_default, allow_nan=False)


def setup_logger(
    name: str = LOGGER_NAME,
    level: int = logging.INFO,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Configure and return the JSON logger shared by all components.

    Args:
        name: Logger name
        level: Logging level (default: INFO)
        stream: Output stream (default: the current sys.stdout)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicate records
    logger.handlers.clear()

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)

    logger.propagate = False

    return logger
