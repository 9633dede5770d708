"""
Formatters for prefixed text output
"""

from .fields import extract_prefix, needs_quoting, resolve_field_clashes
from .text_formatter import TextFormatter

__all__ = [
    "TextFormatter",
    "extract_prefix",
    "needs_quoting",
    "resolve_field_clashes",
]
