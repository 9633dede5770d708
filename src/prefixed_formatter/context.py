import sys
import time
from dataclasses import dataclass
from typing import Optional, TextIO


@dataclass(frozen=True)
class FormatterContext:
    """Process-wide state captured once before any formatting"""

    base_time: float
    is_terminal: bool


def _stream_is_terminal(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def initialize(stream: Optional[TextIO] = None) -> FormatterContext:
    """Capture the reference instant and whether the stream is a terminal"""
    return FormatterContext(
        base_time=time.monotonic(),
        is_terminal=_stream_is_terminal(stream or sys.stderr),
    )


def elapsed_seconds(context: FormatterContext) -> int:
    """Whole seconds passed since the context was initialized"""
    return int(time.monotonic() - context.base_time)


_default_context: Optional[FormatterContext] = None


def get_default_context() -> FormatterContext:
    """Get the process-wide context, initializing it on first use"""
    global _default_context
    if _default_context is None:
        _default_context = initialize()
    return _default_context


def set_default_context(context: FormatterContext) -> None:
    """Set the process-wide context"""
    global _default_context
    _default_context = context
