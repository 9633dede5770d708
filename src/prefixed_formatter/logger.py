import logging
import sys
from dataclasses import astuple
from typing import Any, Dict, Optional, Tuple

from .config import FormatterConfig, get_default_config
from .formatter import TextFormatter

# Formatter instances are shared between loggers using equal configs
_formatter_cache: Dict[Tuple[Any, ...], TextFormatter] = {}


def _get_formatter_cache_key(config: FormatterConfig) -> Tuple[Any, ...]:
    """Generate cache key for formatter from the config's values"""
    return astuple(config)


def _get_or_create_formatter(config: FormatterConfig) -> TextFormatter:
    """Get formatter from cache or create new one"""
    cache_key = _get_formatter_cache_key(config)
    if cache_key not in _formatter_cache:
        _formatter_cache[cache_key] = TextFormatter(config)
    return _formatter_cache[cache_key]


def get_logger(name: str, config: Optional[FormatterConfig] = None) -> logging.Logger:
    """Create a logger with the given name writing prefixed text to stderr"""
    logger = logging.getLogger(name)

    if not logger.handlers:
        config = config or get_default_config()
        logger.setLevel(getattr(logging, config.log_level.upper()))

        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(_get_or_create_formatter(config))
        logger.addHandler(handler)

    return logger


def log_with_context(
    logger: logging.Logger,
    level: str,
    message: str,
    **fields: Any,
) -> None:
    """Log a message with fields rendered by TextFormatter; None values are dropped"""
    extra = {f"ctx_{k}": v for k, v in fields.items() if v is not None}
    getattr(logger, level)(message, extra=extra)
