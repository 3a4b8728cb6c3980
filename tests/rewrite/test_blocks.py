"""Tests for block restructuring."""

import pytest

from texshort.core.errors import BoundaryBracketError, UnbalancedBracketError
from texshort.rewrite.blocks import CASES, MATRIX, BlockRewriter
from texshort.rewrite.brackets import bracket_pair


class TestFindRegions:
    """Locating prefix{...} regions."""

    def test_starts(self):
        """Test collecting every prefix followed by a brace."""
        assert MATRIX.find_starts("&{1} & {2} &{3}") == [0, 11]

    def test_regions_left_to_right(self):
        """Test that regions are disjoint and ordered."""
        regions = MATRIX.find_regions("&{1,2} x &{3,4}")
        assert [(r.start, r.end) for r in regions] == [(0, 5), (9, 14)]

    def test_nested_region_is_folded_into_parent(self):
        """Test that only outermost regions are returned."""
        regions = MATRIX.find_regions("&{&{1,2},3}")
        assert [(r.start, r.end) for r in regions] == [(0, 10)]

    def test_interior(self):
        """Test the text strictly inside the braces."""
        text = "a &{1;2} b"
        (region,) = MATRIX.find_regions(text)
        assert region.interior(text) == "1;2"

    def test_region_end_is_matching_brace(self):
        """Test that a region closes at the partner of its opening brace."""
        text = "&{{1},2}"
        (region,) = MATRIX.find_regions(text)
        assert region.end == bracket_pair(text, 1).close == 7


class TestRewrite:
    """Rewriting blocks into environments."""

    def test_matrix(self):
        """Test a two by two matrix."""
        assert MATRIX.rewrite("&{1,2;3,4}") == r"\begin{matrix} 1 & 2\\ 3 & 4 \end{matrix}"

    def test_cases(self):
        """Test a cases block."""
        assert CASES.rewrite("@{a,b;c,d}") == r"\begin{cases} a & b\\ c & d \end{cases}"

    def test_multiple_regions(self):
        """Test that text between regions is preserved."""
        assert MATRIX.rewrite("&{1,2} x &{3,4}") == (
            r"\begin{matrix} 1 & 2 \end{matrix} x \begin{matrix} 3 & 4 \end{matrix}"
        )

    def test_leading_and_trailing_text(self):
        """Test that text around a single region is preserved."""
        assert MATRIX.rewrite("A = &{1;2}.") == r"A = \begin{matrix} 1\\ 2 \end{matrix}."

    def test_inner_braces_are_kept(self):
        """Test that groups inside a region survive."""
        assert MATRIX.rewrite(r"&{\frac{a}{b},1}") == r"\begin{matrix} \frac{a}{b} & 1 \end{matrix}"

    def test_nested_same_prefix(self):
        """Test that nested blocks are rewritten inside out."""
        assert MATRIX.rewrite("&{&{1,2},3}") == (
            r"\begin{matrix} \begin{matrix} 1 & 2 \end{matrix} & 3 \end{matrix}"
        )

    def test_other_prefix_untouched(self):
        """Test that a rewriter ignores other prefixes."""
        assert MATRIX.rewrite("@{1,2}") == "@{1,2}"

    @pytest.mark.parametrize("text", ["", "abc", "a & b", "&", "{1,2}", "& {1}"])
    @pytest.mark.parametrize("rewriter", [MATRIX, CASES, BlockRewriter("pmatrix", "%")])
    def test_no_region_is_identity(self, rewriter, text):
        """Test that text without prefix{ is returned unchanged."""
        assert rewriter.rewrite(text) == text


class TestErrors:
    """Malformed blocks abort the rewrite."""

    def test_unclosed_block(self):
        """Test that an unclosed block raises."""
        with pytest.raises(UnbalancedBracketError):
            MATRIX.rewrite("&{1,2;3,4")

    def test_block_opener_at_end(self):
        """Test that a trailing opener has no room to scan."""
        with pytest.raises(BoundaryBracketError):
            MATRIX.rewrite("x &{")

    def test_prefix_must_be_one_character(self):
        """Test constructor validation."""
        with pytest.raises(ValueError):
            BlockRewriter("matrix", "&&")
