"""
Log entries as seen by the formatter
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict

from .levels import Level, LevelLike, to_level

ERROR_KEY = "error"


@dataclass
class LogEntry:
    """A single log entry: message, level, time and arbitrary fields"""

    message: str
    level: LevelLike = Level.INFO
    time: datetime = field(default_factory=datetime.now)
    fields: Dict[str, Any] = field(default_factory=dict)


def entry_from_record(record: logging.LogRecord) -> LogEntry:
    """Build a LogEntry from a logging record, taking ctx_ attributes as fields"""
    entry_fields: Dict[str, Any] = {}
    for key, value in record.__dict__.items():
        if key.startswith("ctx_"):
            entry_fields[key[4:]] = value

    if record.exc_info and record.exc_info[1] is not None:
        entry_fields.setdefault(ERROR_KEY, record.exc_info[1])

    return LogEntry(
        message=record.getMessage(),
        level=to_level(record.levelno),
        time=datetime.fromtimestamp(record.created),
        fields=entry_fields,
    )
