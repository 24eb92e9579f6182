"""Application-wide structured console logging."""

from __future__ import annotations

import enum
import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any


class Kind(str, enum.Enum):
    EVENT = "event"
    SYSTEM = "system"


class EventType(str, enum.Enum):
    SYSTEM_START = "system_start"
    SYSTEM_SHUTDOWN = "system_shutdown"
    USER_LOGIN = "user_login"
    USER_LOGOUT = "user_logout"


class Level(enum.IntEnum):
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR
    FATAL = logging.CRITICAL
    PANIC = logging.CRITICAL + 10


_ABBREVIATIONS = {
    Level.DEBUG: "DBG",
    Level.INFO: "INF",
    Level.WARN: "WRN",
    Level.ERROR: "ERR",
    Level.FATAL: "FTL",
    Level.PANIC: "PNC",
}

_logger = logging.getLogger("scaffoldkit.app")
_logger.propagate = False
_logger.addHandler(logging.NullHandler())


def _render(value: Any) -> str:
    if isinstance(value, enum.Enum):
        value = value.value
    if isinstance(value, str):
        return value
    return json.dumps(value, default=str, sort_keys=True)


class _ConsoleFormatter(logging.Formatter):
    def __init__(self, app_name: str) -> None:
        super().__init__()
        self.app_name = app_name

    def format(self, record: logging.LogRecord) -> str:
        stamp = datetime.fromtimestamp(record.created, timezone.utc).astimezone().isoformat()
        try:
            level = _ABBREVIATIONS[Level(record.levelno)]
        except ValueError:
            level = record.levelname[:3].upper()
        fields = {"app": self.app_name, **getattr(record, "fields", {})}
        parts = [stamp, level]
        message = record.getMessage()
        if message:
            parts.append(message)
        parts.extend(f"{key}={_render(fields[key])}" for key in sorted(fields))
        return " ".join(parts)


def init(app_name: str, level: Level = Level.INFO) -> logging.Logger:
    """Configure the application logger to write to standard error."""
    for handler in list(_logger.handlers):
        _logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_ConsoleFormatter(app_name))
    _logger.addHandler(handler)
    _logger.setLevel(int(level))
    return _logger


def get_logger() -> logging.Logger:
    return _logger


def write(kind: Kind, event_type: EventType, level: Level = Level.INFO, **kwargs: Any) -> None:
    """Emit an event tagged with its kind and type plus extra fields."""
    fields = dict(kwargs)
    fields["kind"] = Kind(kind).value
    fields["type"] = EventType(event_type).value
    _logger.log(int(level), "", extra={"fields": fields})


def system_start(config: Any) -> None:
    write(Kind.SYSTEM, EventType.SYSTEM_START, Level.INFO, config=config)


def system_shutdown(cause: str) -> None:
    write(Kind.SYSTEM, EventType.SYSTEM_SHUTDOWN, Level.INFO, cause=cause)