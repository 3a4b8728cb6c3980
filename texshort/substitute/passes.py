"""
Table-driven substitution passes.

Every pass takes the current text and the shared pattern table and returns
new text. None of them can fail: a pattern that does not match leaves the
text as it was.
"""

from __future__ import annotations

import re

from .patterns import PatternTable

# Order matters: longer tokens must be replaced before their prefixes.
SYMBOL_TABLE: tuple[tuple[str, str], ...] = (
    ("<=>", "\\iff"),
    ("=>", "\\implies"),
    ("|->", "\\mapsto"),
    ("->", "\\to"),
    (">=", "\\ge"),
    ("<=", "\\le"),
    ("!=", "\\neq"),
    ("~=", "\\approx"),
    ("-=", "\\equiv"),
    ("xx", "\\times"),
    ("+-", "\\pm"),
    ("...", "\\cdots"),
    (".", "\\cdot"),
)

BRACKET_TABLE: tuple[tuple[str, str], ...] = (
    ("(", "\\left("),
    (")", "\\right)"),
    ("[", "\\left["),
    ("]", "\\right]"),
    ("\\{", "\\left\\{"),
    ("\\}", "\\right\\}"),
)

SHAPE_TABLE: tuple[tuple[str, str], ...] = (
    ("(_)", "overline"),
    ("(->)", "overrightarrow"),
    ("(\\to)", "overrightarrow"),
    ("(^)", "hat"),
    ("(~)", "tilde"),
    ("(.)", "dot"),
)

_DOUBLE_PIPE_OPEN = re.compile(r"(\s|^)\|\|(\S)")
_DOUBLE_PIPE_CLOSE = re.compile(r"(\S)\|\|(\s|$)")
_PIPE_OPEN = re.compile(r"(\s|^)\|(\S)")
_PIPE_CLOSE = re.compile(r"(\S)\|(\s|$)")


def _replace_all(text: str, table: tuple[tuple[str, str], ...]) -> str:
    for search, repl in table:
        text = text.replace(search, repl)
    return text


def replace_font(text: str, patterns: PatternTable) -> str:
    """``RR`` -> ``\\mathbb{R}``, ``ccA`` -> ``\\mathcal{A}``."""
    text = patterns["MathbbRegexp"].sub(r"\\mathbb{\1}", text)
    return patterns["MathcalRegexp"].sub(r"\\mathcal{\1}", text)


def prefix_backslash(text: str, patterns: PatternTable) -> str:
    """Turn known names into commands: ``sin`` -> ``\\sin``, ``alpha`` -> ``\\alpha``."""
    for key in ("FunctionRegexp", "LogicRegexp", "LetterRegexp"):
        text = patterns[key].sub(r"\\\1", text)
    return text.replace("inf", "\\infty")


def replace_parenthesis(text: str, patterns: PatternTable) -> str:
    """Size literal brackets: ``(`` -> ``\\left(`` and ``]`` -> ``\\right]``."""
    return _replace_all(text, BRACKET_TABLE)


def replace_pipe(text: str, patterns: PatternTable) -> str:
    """
    Size absolute value and norm bars.

    A bar at the start of a word opens (``\\left|``), one at the end of a
    word closes (``\\right|``). Doubles are handled first; the single-bar pass
    then re-matches the last ``|`` of ``\\right|\\right| `` and leaves a
    stray ``\\right\\right| `` that is collapsed at the end.
    """
    text = _DOUBLE_PIPE_OPEN.sub(r" \\left|\\left|\2", text)
    text = _DOUBLE_PIPE_CLOSE.sub(r"\1\\right|\\right| ", text)
    text = _PIPE_OPEN.sub(r" \\left|\2", text)
    text = _PIPE_CLOSE.sub(r"\1\\right| ", text)
    return text.replace("\\right\\right| ", "\\right| ")


def replace_shape(text: str, patterns: PatternTable) -> str:
    """Decorations: ``x`_`` -> ``\\overline{x}``, ``v`->`` -> ``\\overrightarrow{v}``."""
    regex = patterns["ShapeRegexp"]
    if not regex.search(text):
        return text
    text = regex.sub(r"\\(\2){\1}", text)
    return _replace_all(text, SHAPE_TABLE)


def replace_symbol(text: str, patterns: PatternTable) -> str:
    """Literal symbol tokens: ``=>`` -> ``\\implies``, ``+-`` -> ``\\pm``."""
    return _replace_all(text, SYMBOL_TABLE)


def replace_text(text: str, patterns: PatternTable) -> str:
    """Quoted spans become upright text: ``"if"`` -> ``\\text{if}``."""
    return patterns["TextRegexp"].sub(r"\\text{\1}", text)
