"""texshort - ASCII math shorthand to LaTeX markup.

Subpackages:
- texshort.rewrite: structural rewriters (brackets, fractions, blocks)
- texshort.substitute: table-driven substitution passes
- texshort.core: configuration, logging and errors
"""

__version__ = "0.1.0"

from .core.errors import (
    BoundaryBracketError,
    ConversionError,
    InternalInvariantError,
    IterationLimitError,
    PatternTableError,
    UnbalancedBracketError,
)
from .pipeline import Converter, convert

__all__ = [
    "Converter",
    "convert",
    "ConversionError",
    "BoundaryBracketError",
    "UnbalancedBracketError",
    "InternalInvariantError",
    "IterationLimitError",
    "PatternTableError",
]
