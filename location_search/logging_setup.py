"""Logging setup driven by ObservabilityConfig.

Modules log through ``logging.getLogger(__name__)`` and attach context
with ``extra={...}``. With ``structured=True`` each record is written
as one JSON object carrying those extra fields; otherwise the plain
format string from the config is used.

Usage:
    from location_search.logging_setup import setup_logging

    setup_logging()  # once, at application start-up
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .config import ObservabilityConfig, get_config
from .domain.errors import ConfigurationError

# Attributes every LogRecord has; anything else came from ``extra``
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """Format log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc)
            .isoformat()
            .replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                payload[key] = value

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_logging(config: Optional[ObservabilityConfig] = None) -> logging.Handler:
    """Configure the root logger from configuration.

    Replaces any handlers previously installed on the root logger, so
    calling it twice does not duplicate output.

    Args:
        config: Logging configuration (defaults to get_config()).

    Returns:
        The installed handler.

    Raises:
        ConfigurationError: If the configured level is not a logging level.
    """
    config = config or get_config().observability

    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level: {config.level}",
            setting_name="level",
        )

    handler = logging.StreamHandler(sys.stderr)
    if config.structured:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(config.format))

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)
    return handler
