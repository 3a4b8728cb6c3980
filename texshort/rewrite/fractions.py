"""
Fraction restructuring.

Rewrites shorthand divisions such as ``a/b`` or ``{a+1}/{b}`` into
``\\frac{a}{b}`` commands. The rewrite runs to a fixpoint: each step turns
exactly one division operator into a ``\\frac``, always the outermost one of
its nesting chain, so inner divisions are picked up by later steps.

Operands are either bracketed (the neighbour of ``/`` is a brace and the
operand is the whole brace group) or bare (the operand runs up to the next
whitespace or enclosing brace).
"""

from __future__ import annotations

from typing import Optional

from ..core.errors import InternalInvariantError, IterationLimitError
from ..core.logging import get_logger
from .brackets import CLOSE_BRACE, OPEN_BRACE, bracket_pair, is_single_group, match_bracket
from .spans import Direction, OperandKind, OperandSpan

logger = get_logger(__name__)

DIVIDE = "/"
FRAC = "\\frac"


def is_candidate(text: str, i: int) -> bool:
    """A ``/`` strictly inside the buffer with non-whitespace on both sides."""
    return (
        0 < i < len(text) - 1
        and text[i] == DIVIDE
        and not text[i - 1].isspace()
        and not text[i + 1].isspace()
    )


def find_fraction(text: str) -> Optional[int]:
    """Index of the first division candidate, or None."""
    for i in range(1, len(text) - 1):
        if is_candidate(text, i):
            return i
    return None


def find_root(text: str, loc: int, max_steps: Optional[int] = None) -> int:
    """
    Walk outward from the division at ``loc`` to the outermost division
    whose operand contains it.

    A division ``}/`` to the right encloses ``loc`` when the group closing at
    ``}`` opened before ``loc``; a division ``/{`` to the left encloses it
    when the group opening at ``{`` closes after ``loc``. Only division
    candidates can enclose; a spaced ``/`` is literal text.
    """
    limit = max_steps if max_steps is not None else text.count(DIVIDE)
    steps = 0

    found_parent = True
    while found_parent:
        found_parent = False

        # loc inside the left operand of a later division
        for j in range(loc + 1, len(text) - 1):
            if text[j] == CLOSE_BRACE and is_candidate(text, j + 1):
                opened = match_bracket(text, j, Direction.LEFT)
                if opened < loc < j:
                    loc = j + 1
                    found_parent = True
                    steps += 1

        # loc inside the right operand of an earlier division
        for j in range(loc - 1, 0, -1):
            if text[j] == OPEN_BRACE and is_candidate(text, j - 1):
                closed = match_bracket(text, j, Direction.RIGHT)
                if j < loc < closed:
                    loc = j - 1
                    found_parent = True
                    steps += 1

        if steps > limit:
            raise IterationLimitError("fraction root resolution", limit)

    return loc


def _char_at(text: str, index: int) -> str:
    if 0 <= index < len(text):
        return text[index]
    return ""


def right_operand(text: str, root: int) -> OperandSpan:
    """Operand to the right of the division at ``root``."""
    char = _char_at(text, root + 1)
    if char == OPEN_BRACE:
        end = min(bracket_pair(text, root + 1).close, len(text) - 1)
        return OperandSpan(start=root + 1, end=end, kind=OperandKind.BRACKETED)
    if not char or char.isspace() or char == CLOSE_BRACE:
        raise InternalInvariantError(root + 1, char, "right")

    i = root + 1
    while i < len(text) and not text[i].isspace() and text[i] != CLOSE_BRACE:
        i += 1
    return OperandSpan(start=root + 1, end=i - 1, kind=OperandKind.BARE)


def left_operand(text: str, root: int) -> OperandSpan:
    """Operand to the left of the division at ``root``."""
    char = _char_at(text, root - 1)
    if char == CLOSE_BRACE:
        start = match_bracket(text, root - 1, Direction.LEFT)
        return OperandSpan(start=start, end=root - 1, kind=OperandKind.BRACKETED)
    if not char or char.isspace() or char == OPEN_BRACE:
        raise InternalInvariantError(root - 1, char, "left")

    i = root - 1
    while i >= 0 and not text[i].isspace() and text[i] != OPEN_BRACE:
        i -= 1
    return OperandSpan(start=i + 1, end=root - 1, kind=OperandKind.BARE)


def _as_argument(operand: str) -> str:
    if is_single_group(operand):
        return operand
    return OPEN_BRACE + operand + CLOSE_BRACE


def splice_fraction(text: str, left: OperandSpan, right: OperandSpan) -> str:
    """Replace ``left / right`` with ``\\frac{left}{right}``."""
    return "".join((
        text[:left.start],
        FRAC,
        _as_argument(left.text_of(text)),
        _as_argument(right.text_of(text)),
        text[right.end + 1:],
    ))


class FractionRewriter:
    """
    Fixpoint rewriter for division operators.

    Args:
        max_iterations: Hard cap on rewrite steps. Defaults to the number of
            ``/`` characters in the input, since every step consumes one.
        max_root_steps: Hard cap on outward moves while resolving the root
            of a nesting chain. Defaults to the number of ``/`` characters.
    """

    def __init__(self, max_iterations: Optional[int] = None, max_root_steps: Optional[int] = None):
        self.max_iterations = max_iterations
        self.max_root_steps = max_root_steps

    def step(self, text: str, loc: int) -> str:
        """Rewrite the division chain containing ``loc`` once."""
        root = find_root(text, loc, self.max_root_steps)
        right = right_operand(text, root)
        left = left_operand(text, root)
        logger.debug(
            "Fraction at %d (root %d): %r / %r",
            loc, root, left.text_of(text), right.text_of(text),
        )
        return splice_fraction(text, left, right)

    def rewrite(self, text: str) -> str:
        limit = self.max_iterations if self.max_iterations is not None else text.count(DIVIDE)
        iterations = 0

        loc = find_fraction(text)
        while loc is not None:
            if iterations >= limit:
                raise IterationLimitError("fraction rewrite", limit)
            text = self.step(text, loc)
            iterations += 1
            loc = find_fraction(text)

        return text


def rewrite_fractions(text: str) -> str:
    """Rewrite every division in ``text`` with default bounds."""
    return FractionRewriter().rewrite(text)
