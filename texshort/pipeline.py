"""
Conversion pipeline.

Applies every pass in a fixed order. The order is part of the contract:
fractions are resolved before literal parentheses are sized, and blocks are
rewritten last so their separators survive the symbol table.
"""

from __future__ import annotations

from functools import lru_cache, partial
from typing import Callable, Optional

from .core.config import Settings, get_settings
from .core.logging import get_context_logger
from .rewrite.blocks import CASES, MATRIX
from .rewrite.fractions import FractionRewriter
from .substitute.patterns import PatternTable, default_patterns
from .substitute.passes import (
    prefix_backslash,
    replace_font,
    replace_parenthesis,
    replace_pipe,
    replace_shape,
    replace_symbol,
    replace_text,
)

logger = get_context_logger(__name__, component="pipeline")

Pass = Callable[[str], str]


class Converter:
    """
    Shorthand-to-markup converter.

    Args:
        patterns: Pattern table for the substitution passes (defaults to the
            shared table).
        settings: Bounds for the fraction rewriter (defaults to the cached
            settings).

    Any structural error raised by a pass aborts the conversion; no partial
    output is returned.
    """

    def __init__(self, patterns: Optional[PatternTable] = None, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.patterns = patterns or default_patterns()
        self.fractions = FractionRewriter(
            max_iterations=self.settings.MAX_FRACTION_ITERATIONS,
            max_root_steps=self.settings.MAX_ROOT_STEPS,
        )
        self.passes: list[tuple[str, Pass]] = [
            ("font", partial(replace_font, patterns=self.patterns)),
            ("backslash", partial(prefix_backslash, patterns=self.patterns)),
            ("fraction", self.fractions.rewrite),
            ("parenthesis", partial(replace_parenthesis, patterns=self.patterns)),
            ("pipe", partial(replace_pipe, patterns=self.patterns)),
            ("shape", partial(replace_shape, patterns=self.patterns)),
            ("symbol", partial(replace_symbol, patterns=self.patterns)),
            ("text", partial(replace_text, patterns=self.patterns)),
            ("matrix", MATRIX.rewrite),
            ("cases", CASES.rewrite),
        ]

    @property
    def pass_names(self) -> list[str]:
        return [name for name, _ in self.passes]

    def convert(self, text: str) -> str:
        """Convert shorthand ``text`` to markup."""
        for name, apply in self.passes:
            result = apply(text)
            if result != text:
                logger.debug("Pass %s applied", name, extra_data={"stage": name, "output": result})
            text = result
        return text


@lru_cache()
def get_converter() -> Converter:
    """Shared converter built from the default settings and pattern table."""
    return Converter()


def convert(text: str) -> str:
    """Convert ``text`` with the shared converter."""
    return get_converter().convert(text)
