from __future__ import annotations

import json
import logging
import sys
from typing import Any, Dict, Optional, TextIO

from .config import ObservabilityConfig, get_config

logger = logging.getLogger("city_route_planner")

# Attributes every LogRecord carries; anything else came from ``extra=``
_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Formats a record as one JSON object per line, ``extra`` fields included."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "time": self.formatTime(record),
            "logger": record.name,
            "level": record.levelname,
            "message": record.getMessage(),
        }
        for key, value in vars(record).items():
            if key not in _RECORD_ATTRS:
                payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(
    config: Optional[ObservabilityConfig] = None,
    stream: Optional[TextIO] = None,
) -> logging.Handler:
    """Attach a single stderr handler to the package logger.

    Calling it again replaces the handler installed by the previous call.
    """
    config = config or get_config().observability

    for handler in list(logger.handlers):
        if getattr(handler, "_city_route_planner", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    if config.structured:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(config.format))
    setattr(handler, "_city_route_planner", True)

    logger.addHandler(handler)
    logger.setLevel(config.level.upper())
    return handler
