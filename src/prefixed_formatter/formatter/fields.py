"""
Field handling for the text formatter: clash resolution, prefix extraction
and key=value rendering
"""

import json
import re
from datetime import datetime
from typing import Any, Dict, Mapping, Optional, Tuple

RESERVED_KEYS = ("time", "msg", "level")
PREFIX_KEY = "prefix"
CLASH_PREFIX = "fields."

_PREFIX_PATTERN = re.compile(r"^\[(.*?)\]")


def resolve_field_clashes(fields: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Return a copy of fields with reserved keys moved out of the way

    A field named "time", "msg" or "level" is renamed to "fields.<name>" so
    that the formatter's own value is rendered under the reserved key. When
    the new name is taken too, "fields." is prepended again until it is free.
    The given mapping is not modified.
    """
    resolved = dict(fields)
    for key in RESERVED_KEYS:
        if key not in resolved:
            continue
        target = CLASH_PREFIX + key
        while target in resolved:
            target = CLASH_PREFIX + target
        resolved[target] = resolved.pop(key)
    return resolved


def needs_quoting(text: str) -> bool:
    """
    Check whether text can be written bare

    Despite the name, returns True when every character is an ASCII letter,
    digit, '-' or '.', i.e. when the value does NOT need quotes.
    """
    for ch in text:
        if not (
            ("a" <= ch <= "z")
            or ("A" <= ch <= "Z")
            or ("0" <= ch <= "9")
            or ch == "-"
            or ch == "."
        ):
            return False
    return True


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


def safe_str(value: Any) -> str:
    """str() of a value, or a marker naming its type when str() raises"""
    try:
        return str(value)
    except Exception:
        return f"<unprintable {type(value).__name__}>"


def single_line(text: str) -> str:
    """Escape carriage returns and newlines so text stays on one line"""
    return text.replace("\r", "\\r").replace("\n", "\\n")


def format_time(time: datetime, timestamp_format: Optional[str]) -> str:
    """
    Format a timestamp with a strftime format

    Without a format the time is rendered as a stamp with a space-padded
    day, e.g. "Mar  5 14:07:09".
    """
    if timestamp_format:
        return time.strftime(timestamp_format)
    return f"{time:%b} {time.day:>2} {time:%H:%M:%S}"


def format_value(value: Any) -> str:
    """Render a field value for plain output, quoting text when needed"""
    if isinstance(value, str):
        text = value
    elif isinstance(value, BaseException):
        text = safe_str(value)
    else:
        return single_line(safe_str(value))

    if needs_quoting(text):
        return text
    return _quote(text)


def format_key_value(key: str, value: Any) -> str:
    """Render one key=value pair followed by a single space"""
    return f"{single_line(key)}={format_value(value)} "


def extract_prefix(message: str) -> Tuple[str, str]:
    """
    Split a leading "[prefix]" off a message

    Returns:
        Tuple of (prefix, message). The prefix is empty and the message
        unchanged when the message does not start with a bracketed token.
    """
    match = _PREFIX_PATTERN.match(message)
    if not match:
        return "", message
    return match.group(1), message[match.end():].strip()
