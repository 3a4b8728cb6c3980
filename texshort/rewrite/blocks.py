"""
Delimited block restructuring.

A block is a one-character prefix followed by a brace group, e.g.
``&{1,2;3,4}``. Inside it ``,`` separates columns and ``;`` separates rows;
the block is rewritten into a named environment::

    &{1,2;3,4}  ->  \\begin{matrix} 1 & 2\\\\ 3 & 4 \\end{matrix}

Blocks of the same prefix may nest; inner blocks are rewritten first.
"""

from __future__ import annotations

from ..core.logging import get_logger
from .brackets import OPEN_BRACE, bracket_pair
from .spans import BlockRegion

logger = get_logger(__name__)

COLUMN_SEPARATOR = " & "
ROW_SEPARATOR = "\\\\ "


class BlockRewriter:
    """
    Rewrites ``prefix{...}`` regions into ``\\begin{title} ... \\end{title}``.

    Args:
        title: Environment name, e.g. ``"matrix"``.
        prefix: Single character introducing the block, e.g. ``"&"``.
    """

    def __init__(self, title: str, prefix: str):
        if len(prefix) != 1:
            raise ValueError(f"Block prefix must be a single character, got {prefix!r}")
        self.title = title
        self.prefix = prefix

    def __repr__(self) -> str:
        return f"BlockRewriter(title={self.title!r}, prefix={self.prefix!r})"

    def find_starts(self, text: str) -> list[int]:
        """Every index where the prefix is immediately followed by ``{``."""
        opener = self.prefix + OPEN_BRACE
        return [i for i in range(len(text) - 1) if text[i:i + 2] == opener]

    def find_regions(self, text: str) -> list[BlockRegion]:
        """
        Outermost block regions, left to right.

        Starts falling inside an earlier region belong to that region and are
        handled when its interior is rewritten.
        """
        regions: list[BlockRegion] = []
        for start in self.find_starts(text):
            if regions and start < regions[-1].end:
                continue
            pair = bracket_pair(text, start + 1)
            regions.append(BlockRegion(start=start, end=pair.close))
        return regions

    def render(self, interior: str) -> str:
        """Wrap a block interior in the environment."""
        body = self.rewrite(interior)
        body = body.replace(",", COLUMN_SEPARATOR).replace(";", ROW_SEPARATOR)
        return f"\\begin{{{self.title}}} {body} \\end{{{self.title}}}"

    def rewrite(self, text: str) -> str:
        regions = self.find_regions(text)
        if not regions:
            return text

        logger.debug("Rewriting %d %s block(s)", len(regions), self.title)

        parts = [text[:regions[0].start]]
        for current, following in zip(regions, regions[1:] + [None]):
            parts.append(self.render(current.interior(text)))
            if following is not None:
                parts.append(text[current.end + 1:following.start])
        parts.append(text[regions[-1].end + 1:])
        return "".join(parts)


MATRIX = BlockRewriter("matrix", "&")
CASES = BlockRewriter("cases", "@")
