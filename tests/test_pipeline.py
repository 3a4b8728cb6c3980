"""Tests for the conversion pipeline."""

import pytest

from texshort import convert
from texshort.core.config import Settings
from texshort.core.errors import (
    ConversionError,
    InternalInvariantError,
    IterationLimitError,
    UnbalancedBracketError,
)
from texshort.pipeline import Converter, get_converter


class TestPassOrder:
    """The fixed order of passes."""

    def test_order(self, converter):
        """Test the pass sequence."""
        assert converter.pass_names == [
            "font",
            "backslash",
            "fraction",
            "parenthesis",
            "pipe",
            "shape",
            "symbol",
            "text",
            "matrix",
            "cases",
        ]

    def test_fraction_sees_raw_parentheses(self, converter):
        """Test that operands are resolved before brackets are sized."""
        assert converter.convert("sin(x)/2") == r"\frac{\sin\left(x\right)}{2}"


class TestConvert:
    """End-to-end conversions."""

    @pytest.mark.parametrize("source,expected", [
        ("a/b", r"\frac{a}{b}"),
        ("{a}/{b}", r"\frac{a}{b}"),
        ("a/{b/c}", r"\frac{a}{\frac{b}{c}}"),
        ("a/b/c", r"\frac{a}{\frac{b}{c}}"),
        ("alpha/2", r"\frac{\alpha}{2}"),
        ("&{1,2;3,4}", r"\begin{matrix} 1 & 2\\ 3 & 4 \end{matrix}"),
        ("&{1,2} x &{3,4}", r"\begin{matrix} 1 & 2 \end{matrix} x \begin{matrix} 3 & 4 \end{matrix}"),
        ("x in RR", r"x \in \mathbb{R}"),
        ("|x| <= 1", r" \left|x\right| \le 1"),
        ("x`_ + y", r"\overline{x} + y"),
        ("α/β", r"\frac{α}{β}"),
    ])
    def test_examples(self, converter, source, expected):
        """Test representative shorthand."""
        assert converter.convert(source) == expected

    def test_cases(self, converter):
        """Test a piecewise definition with text."""
        assert converter.convert('f(x) = @{1, x >= 0; -1, "else"}') == (
            r"f\left(x\right) = \begin{cases} 1 &  x \ge 0\\  -1 &  \text{else} \end{cases}"
        )

    def test_empty(self, converter):
        """Test the empty string."""
        assert converter.convert("") == ""

    def test_module_shortcut(self):
        """Test the shared converter."""
        assert convert("a/b") == r"\frac{a}{b}"
        assert get_converter() is get_converter()


class TestAbort:
    """Structural errors abort the whole conversion."""

    def test_unbalanced(self, converter):
        """Test an unmatched brace in a fraction."""
        with pytest.raises(UnbalancedBracketError):
            converter.convert("a/{b")

    def test_unbalanced_block(self, converter):
        """Test an unmatched brace in a block."""
        with pytest.raises(UnbalancedBracketError):
            converter.convert("&{1,2")

    def test_invariant(self, converter):
        """Test a division whose operand faces the wrong brace."""
        with pytest.raises(InternalInvariantError):
            converter.convert("{a/}x")

    def test_errors_share_base(self, converter):
        """Test that callers can catch one base class."""
        with pytest.raises(ConversionError) as exc_info:
            converter.convert("a/{b")
        payload = exc_info.value.to_dict()
        assert payload["error"]["type"] == "UnbalancedBracketError"
        assert payload["error"]["details"]["position"] == 2

    def test_iteration_cap_from_settings(self, patterns):
        """Test that settings bound the fraction rewriter."""
        converter = Converter(patterns=patterns, settings=Settings(_env_file=None, MAX_FRACTION_ITERATIONS=1))
        with pytest.raises(IterationLimitError):
            converter.convert("a/b c/d")
