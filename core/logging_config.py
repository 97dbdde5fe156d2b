"""Logging configuration for the web application."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from datetime import datetime, timezone
from typing import Any, Dict, Optional, TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from flask import Flask


_CONSOLE_HANDLER_ATTR = "_is_app_console_handler"

_SENSITIVE_KEYWORDS = {
    "password",
    "passwd",
    "secret",
    "token",
    "code",
    "otp",
}

# Attributes present on every LogRecord; anything else came in via ``extra``.
_RESERVED_RECORD_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__.keys()
) | {"message", "asctime"}


def _is_sensitive_key(key: Any) -> bool:
    if not isinstance(key, str):
        return False
    key_lower = key.lower()
    return any(keyword in key_lower for keyword in _SENSITIVE_KEYWORDS)


def mask_sensitive_data(data: Any) -> Any:
    """再帰的に辞書やリスト内の機密情報をマスクする。"""

    if isinstance(data, Mapping):
        return {
            key: "***" if _is_sensitive_key(key) else mask_sensitive_data(value)
            for key, value in data.items()
        }
    if isinstance(data, Sequence) and not isinstance(data, (str, bytes, bytearray)):
        return [mask_sensitive_data(item) for item in data]
    return data


class JsonLogFormatter(logging.Formatter):
    """Render records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc)
            .isoformat()
            .replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        extras = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RESERVED_RECORD_ATTRS and not key.startswith("_")
        }
        payload.update(mask_sensitive_data(extras))
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def ensure_console_logging(logger: logging.Logger, level: int = logging.INFO) -> None:
    """Attach the JSON console handler to *logger* if missing."""

    for handler in logger.handlers:
        if getattr(handler, _CONSOLE_HANDLER_ATTR, False):
            break
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(JsonLogFormatter())
        setattr(handler, _CONSOLE_HANDLER_ATTR, True)
        logger.addHandler(handler)

    if logger.level == logging.NOTSET or logger.level > level:
        logger.setLevel(level)


def configure_app_logging(app: "Flask", level_name: Optional[str] = None) -> logging.Logger:
    """Route the Flask app logger and the layer loggers through JSON output."""

    level = logging.getLevelName(str(level_name or "INFO").upper())
    if not isinstance(level, int):
        level = logging.INFO

    ensure_console_logging(app.logger, level)
    for name in ("application", "infrastructure", "webapp"):
        ensure_console_logging(logging.getLogger(name), level)
    return app.logger


def log_event_error(logger: logging.Logger, message: str, event: str, exc_info: bool = True, **extra_attrs):
    """Log an error with an ``event`` identifier for categorization.

    Args:
        logger: Logger instance to use.
        message: Error message.
        event: Event identifier for categorization.
        exc_info: Whether to include exception information.
        **extra_attrs: Additional attributes to include in log record.
    """
    extra = {
        'event': event,
        **extra_attrs
    }

    logger.error(message, exc_info=exc_info, extra=extra)


def log_event_info(logger: logging.Logger, message: str, event: str, **extra_attrs):
    """Log an informational record with an ``event`` identifier.

    Args:
        logger: Logger instance to use.
        message: Info message.
        event: Event identifier for categorization.
        **extra_attrs: Additional attributes to include in log record.
    """
    extra = {
        'event': event,
        **extra_attrs
    }

    logger.info(message, extra=extra)


__all__ = [
    "JsonLogFormatter",
    "configure_app_logging",
    "ensure_console_logging",
    "log_event_error",
    "log_event_info",
    "mask_sensitive_data",
]
