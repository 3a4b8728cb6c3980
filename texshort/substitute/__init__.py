"""
Context-free substitution passes and the named pattern table they read.
"""

from .patterns import DEFAULT_PATTERNS_FILE, REQUIRED_KEYS, PatternTable, default_patterns
from .passes import (
    BRACKET_TABLE,
    SHAPE_TABLE,
    SYMBOL_TABLE,
    prefix_backslash,
    replace_font,
    replace_parenthesis,
    replace_pipe,
    replace_shape,
    replace_symbol,
    replace_text,
)

__all__ = [
    "DEFAULT_PATTERNS_FILE",
    "REQUIRED_KEYS",
    "PatternTable",
    "default_patterns",
    "BRACKET_TABLE",
    "SHAPE_TABLE",
    "SYMBOL_TABLE",
    "prefix_backslash",
    "replace_font",
    "replace_parenthesis",
    "replace_pipe",
    "replace_shape",
    "replace_symbol",
    "replace_text",
]
