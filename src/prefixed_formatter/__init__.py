"""
Prefixed Formatter

A text formatter for structured logging: key=value lines for machines and
colored lines with prefixes for humans.
"""

__version__ = "0.1.0"

from .colors import ColorStyleError, color_code
from .config import (
    ColorPalette,
    FormatterConfig,
    get_default_config,
    set_default_config,
)
from .context import (
    FormatterContext,
    elapsed_seconds,
    get_default_context,
    initialize,
    set_default_context,
)
from .entry import LogEntry, entry_from_record
from .formatter import TextFormatter
from .levels import Level
from .logger import get_logger, log_with_context

__all__ = [
    "ColorPalette",
    "ColorStyleError",
    "FormatterConfig",
    "FormatterContext",
    "Level",
    "LogEntry",
    "TextFormatter",
    "color_code",
    "elapsed_seconds",
    "entry_from_record",
    "get_default_config",
    "get_default_context",
    "get_logger",
    "initialize",
    "log_with_context",
    "set_default_config",
    "set_default_context",
]
