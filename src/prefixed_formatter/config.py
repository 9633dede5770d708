import logging
import os
from dataclasses import dataclass, fields
from typing import Dict, Optional

from .colors import ColorStyleError, color_code

logger = logging.getLogger(__name__)


@dataclass
class ColorPalette:
    """Custom color styles for colored output, see colors.color_code"""

    debug: Optional[str] = None
    info: Optional[str] = None
    warn: Optional[str] = None
    error: Optional[str] = None
    prefix: Optional[str] = None
    default: Optional[str] = None

    def __post_init__(self) -> None:
        # Fail on construction rather than while formatting
        for role in fields(self):
            style = getattr(self, role.name)
            if style:
                color_code(style)

    @classmethod
    def from_env(cls) -> Optional["ColorPalette"]:
        """Create a palette from PREFIXED_LOG_COLOR_* environment variables"""
        styles: Dict[str, str] = {}
        for role in fields(cls):
            key = f"PREFIXED_LOG_COLOR_{role.name.upper()}"
            style = os.getenv(key)
            if not style:
                continue
            try:
                color_code(style)
            except ColorStyleError as e:
                logger.warning("Ignoring %s: %s", key, e)
                continue
            styles[role.name] = style

        if not styles:
            return None
        return cls(**styles)


@dataclass
class FormatterConfig:
    """Configuration for the text formatter"""

    # Bypass checking for a TTY before outputting colors
    force_colors: bool = False
    # Overrides force_colors
    disable_colors: bool = False
    # Useful when output is redirected to a system that adds timestamps itself
    disable_timestamp: bool = False
    # Show whole seconds since start instead of the wall clock
    short_timestamp: bool = False
    # strftime format, None for a "Jan  2 15:04:05" stamp
    timestamp_format: Optional[str] = None
    # Fields are sorted by default for a consistent output
    disable_sorting: bool = False
    colors: Optional[ColorPalette] = None
    log_level: str = "INFO"

    @classmethod
    def _parse_bool_env(cls, key: str, default: str = "false") -> bool:
        """Parse boolean from environment variable"""
        return os.getenv(key, default).lower() == "true"

    @classmethod
    def from_env(cls) -> "FormatterConfig":
        """Create configuration from environment variables"""
        return cls(
            force_colors=cls._parse_bool_env("PREFIXED_LOG_FORCE_COLORS"),
            disable_colors=cls._parse_bool_env("PREFIXED_LOG_DISABLE_COLORS"),
            disable_timestamp=cls._parse_bool_env("PREFIXED_LOG_DISABLE_TIMESTAMP"),
            short_timestamp=cls._parse_bool_env("PREFIXED_LOG_SHORT_TIMESTAMP"),
            timestamp_format=os.getenv("PREFIXED_LOG_TIMESTAMP_FORMAT"),
            disable_sorting=cls._parse_bool_env("PREFIXED_LOG_DISABLE_SORTING"),
            colors=ColorPalette.from_env(),
            log_level=os.getenv("PREFIXED_LOG_LEVEL", "INFO"),
        )


_default_config: Optional[FormatterConfig] = None


def get_default_config() -> FormatterConfig:
    """Get the default configuration instance"""
    global _default_config
    if _default_config is None:
        _default_config = FormatterConfig.from_env()
    return _default_config


def set_default_config(config: FormatterConfig) -> None:
    """Set the default configuration instance"""
    global _default_config
    _default_config = config
