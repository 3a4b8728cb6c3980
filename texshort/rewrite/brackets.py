"""
Brace matching for the structural rewriters.

``match_bracket`` walks from a brace to its structural partner, counting
nesting depth relative to the scan direction.
"""

from __future__ import annotations

from ..core.errors import BoundaryBracketError, UnbalancedBracketError
from .spans import BracketPair, Direction

OPEN_BRACE = "{"
CLOSE_BRACE = "}"


def match_bracket(text: str, position: int, direction: Direction) -> int:
    """
    Return the index of the brace matching the one at ``position``.

    The scan starts at depth 1 one step beyond ``position`` and moves in
    ``direction``. A brace that opens relative to the direction (``{`` going
    right, ``}`` going left) deepens the scan; the other kind closes it.

    Raises:
        BoundaryBracketError: ``position`` leaves no room to scan.
        UnbalancedBracketError: the buffer ends before depth returns to 0.
    """
    last = len(text) - 1
    if direction is Direction.RIGHT:
        step, opening, closing = 1, OPEN_BRACE, CLOSE_BRACE
        if position >= last:
            raise BoundaryBracketError(position, direction.value)
    else:
        step, opening, closing = -1, CLOSE_BRACE, OPEN_BRACE
        if position <= 0:
            raise BoundaryBracketError(position, direction.value)

    depth = 1
    i = position
    while depth != 0:
        i += step
        if i < 0 or i > last:
            raise UnbalancedBracketError(position, direction.value, depth)
        char = text[i]
        if char == opening:
            depth += 1
        elif char == closing:
            depth -= 1
    return i


def bracket_pair(text: str, open_index: int) -> BracketPair:
    """Pair the ``{`` at ``open_index`` with its closing brace."""
    return BracketPair(open=open_index, close=match_bracket(text, open_index, Direction.RIGHT))


def is_single_group(text: str) -> bool:
    """True if ``text`` is exactly one ``{...}`` group end to end."""
    if len(text) < 2 or text[0] != OPEN_BRACE or text[-1] != CLOSE_BRACE:
        return False
    return match_bracket(text, 0, Direction.RIGHT) == len(text) - 1
