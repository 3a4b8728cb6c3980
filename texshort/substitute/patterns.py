"""
Named pattern table for the substitution passes.

The table maps a symbolic name to a compiled regular expression. It is built
once, never mutated, and handed explicitly to every pass that needs it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

import yaml

from ..core.config import get_settings
from ..core.errors import PatternTableError
from ..core.logging import get_logger

logger = get_logger(__name__)

DEFAULT_PATTERNS_FILE = Path(__file__).with_name("patterns.yaml")

REQUIRED_KEYS = (
    "MathbbRegexp",
    "MathcalRegexp",
    "FunctionRegexp",
    "LogicRegexp",
    "LetterRegexp",
    "TextRegexp",
    "ShapeRegexp",
)


@dataclass(frozen=True)
class PatternTable:
    """Read-only mapping of pattern name to compiled regex."""

    patterns: Mapping[str, re.Pattern] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "patterns", MappingProxyType(dict(self.patterns)))

    def __getitem__(self, key: str) -> re.Pattern:
        try:
            return self.patterns[key]
        except KeyError:
            raise PatternTableError(f"Unknown pattern '{key}'", key=key) from None

    def __contains__(self, key: object) -> bool:
        return key in self.patterns

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "PatternTable":
        """
        Compile a table from raw pattern strings.

        Raises:
            PatternTableError: a required key is missing or a pattern does not
                compile.
        """
        if not isinstance(data, Mapping):
            raise PatternTableError("Pattern table must be a mapping of name to regex")

        missing = [key for key in REQUIRED_KEYS if key not in data]
        if missing:
            raise PatternTableError(
                f"Pattern table is missing: {', '.join(missing)}", key=missing[0]
            )

        compiled = {}
        for key, source in data.items():
            if not isinstance(source, str):
                raise PatternTableError(f"Pattern '{key}' must be a string", key=key)
            try:
                compiled[key] = re.compile(source)
            except re.error as exc:
                raise PatternTableError(f"Pattern '{key}' does not compile: {exc}", key=key) from exc
        return cls(compiled)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "PatternTable":
        """Load a table from a YAML file of ``name: regex`` entries."""
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as exc:
            raise PatternTableError(f"Cannot read pattern file {path}: {exc}") from exc
        except yaml.YAMLError as exc:
            raise PatternTableError(f"Invalid YAML in pattern file {path}: {exc}") from exc

        logger.debug("Loaded pattern table from %s", path)
        return cls.from_mapping(data or {})


@lru_cache()
def default_patterns() -> PatternTable:
    """Build the shared pattern table (once per process)."""
    override = get_settings().PATTERNS_FILE
    return PatternTable.from_yaml(override or DEFAULT_PATTERNS_FILE)
