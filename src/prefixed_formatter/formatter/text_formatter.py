"""
Text formatter producing key=value lines or colored, prefixed lines
"""

import logging
import sys
from typing import Any, Dict, List, Optional

from .. import colors
from ..config import FormatterConfig, get_default_config
from ..context import FormatterContext, elapsed_seconds, get_default_context
from ..entry import LogEntry, entry_from_record
from ..levels import Level, LevelLike, level_name
from .fields import (
    PREFIX_KEY,
    extract_prefix,
    format_key_value,
    format_time,
    resolve_field_clashes,
    safe_str,
    single_line,
)

# (palette role, built-in color) per level
_LEVEL_COLORS = {
    Level.DEBUG: ("debug", colors.WHITE),
    Level.INFO: ("info", colors.BLUE),
    Level.WARN: ("warn", colors.YELLOW),
    Level.ERROR: ("error", colors.RED),
    Level.FATAL: ("error", colors.RED),
    Level.PANIC: ("error", colors.RED),
}
_DEFAULT_COLOR = ("default", colors.WHITE)


class TextFormatter(logging.Formatter):
    """Formatter rendering entries as key=value text or colored prefixed lines"""

    def __init__(
        self,
        config: Optional[FormatterConfig] = None,
        context: Optional[FormatterContext] = None,
    ):
        super().__init__()
        self.config = config or get_default_config()
        self.context = context or get_default_context()

    def format(self, record: logging.LogRecord) -> str:
        # Handlers append their own terminator
        line = self.format_entry(entry_from_record(record))
        return line.decode("utf-8")[:-1]

    def format_entry(self, entry: LogEntry) -> bytes:
        """
        Render an entry as one newline-terminated line

        The entry's fields are copied before clash resolution, so the
        caller's mapping is left untouched.

        Args:
            entry: Log entry to render

        Returns:
            UTF-8 encoded line ending with a single newline; characters
            that cannot be encoded are written as backslash escapes
        """
        data = resolve_field_clashes(entry.fields)

        keys = [key for key in data if key != PREFIX_KEY]
        if not self.config.disable_sorting:
            keys.sort()

        timestamp_format = self.config.timestamp_format

        if self.is_colored():
            line = self._format_colored(entry, data, keys, timestamp_format)
        else:
            line = self._format_plain(entry, data, keys, timestamp_format)

        return (line + "\n").encode("utf-8", errors="backslashreplace")

    def is_colored(self) -> bool:
        """Whether output is colorized with the current config and context"""
        is_color_terminal = self.context.is_terminal and sys.platform != "win32"
        return (
            self.config.force_colors or is_color_terminal
        ) and not self.config.disable_colors

    def _format_plain(
        self,
        entry: LogEntry,
        data: Dict[str, Any],
        keys: List[str],
        timestamp_format: Optional[str],
    ) -> str:
        parts = []
        if not self.config.disable_timestamp:
            parts.append(format_key_value("time", format_time(entry.time, timestamp_format)))
        parts.append(format_key_value("level", level_name(entry.level)))
        if entry.message:
            parts.append(format_key_value("msg", entry.message))
        for key in keys:
            parts.append(format_key_value(key, data[key]))
        return "".join(parts)

    def _format_colored(
        self,
        entry: LogEntry,
        data: Dict[str, Any],
        keys: List[str],
        timestamp_format: Optional[str],
    ) -> str:
        level_color = self.level_color(entry.level)
        level_text = self.level_text(entry.level)
        prefix_color = self._palette_color("prefix", colors.LIGHT_BLACK)
        reset = colors.RESET

        message = entry.message
        prefix = ""
        if PREFIX_KEY in data:
            prefix_value = single_line(safe_str(data[PREFIX_KEY]))
            prefix = f"{prefix_color} {prefix_value}:{reset}"
        else:
            prefix_value, trimmed = extract_prefix(message)
            if prefix_value:
                prefix = f"{prefix_color} {single_line(prefix_value)}:{reset}"
                message = trimmed

        if self.config.short_timestamp:
            stamp = f"{elapsed_seconds(self.context):04d}"
        else:
            stamp = single_line(format_time(entry.time, timestamp_format))

        parts = [
            f"{prefix_color}[{stamp}]{reset} "
            f"{level_color}{level_text:>5}{reset}{prefix} {single_line(message)}"
        ]
        for key in keys:
            value = single_line(safe_str(data[key]))
            parts.append(f" {level_color}{single_line(key)}{reset}={value}")
        return "".join(parts)

    def level_color(self, level: LevelLike) -> str:
        """Escape sequence for a level, honoring the configured palette"""
        role, fallback = _LEVEL_COLORS.get(level, _DEFAULT_COLOR)
        return self._palette_color(role, fallback)

    @staticmethod
    def level_text(level: LevelLike) -> str:
        """Upper-case label for a level; WARN is always exactly "WARN" """
        if level == Level.WARN:
            return "WARN"
        return level_name(level).upper()

    def _palette_color(self, role: str, fallback: str) -> str:
        palette = self.config.colors
        style = getattr(palette, role, None) if palette else None
        if style:
            return colors.color_code(style)
        return fallback
