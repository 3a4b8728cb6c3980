"""
Structural rewriters.

These passes reason about brace nesting and operand boundaries:
- match_bracket: find the structural partner of a brace
- FractionRewriter: ``a/b`` -> ``\\frac{a}{b}``, to a fixpoint
- BlockRewriter: ``&{1,2;3,4}`` -> matrix / cases environments
"""

from .spans import BlockRegion, BracketPair, Direction, OperandKind, OperandSpan
from .brackets import bracket_pair, is_single_group, match_bracket
from .fractions import FractionRewriter, find_fraction, find_root, rewrite_fractions
from .blocks import CASES, MATRIX, BlockRewriter

__all__ = [
    "BlockRegion",
    "BracketPair",
    "Direction",
    "OperandKind",
    "OperandSpan",
    "bracket_pair",
    "is_single_group",
    "match_bracket",
    "FractionRewriter",
    "find_fraction",
    "find_root",
    "rewrite_fractions",
    "BlockRewriter",
    "MATRIX",
    "CASES",
]
