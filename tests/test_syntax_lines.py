"""Tests for syntax.lines: physical line splitting with exact terminators.

Per EBNF-style contract:
    line ::= content ("\\r\\n" | "\\n" | "\\r" | EOF)

Tests that the splitter:
- Records each terminator verbatim (LF, CRLF, CR)
- Treats CRLF as a single terminator
- Yields "" for a final unterminated line
- Yields nothing for empty input
"""

from __future__ import annotations

from hypothesis import event, given
from hypothesis import strategies as st

from proplexengine.syntax.lines import PhysicalLine, iter_lines, split_lines


class TestSplitLinesBasic:
    """Test terminator recognition."""

    def test_empty_input_yields_no_lines(self) -> None:
        assert split_lines("") == ()

    def test_single_unterminated_line(self) -> None:
        assert split_lines("key=value") == (PhysicalLine("key=value", ""),)

    def test_lf(self) -> None:
        assert split_lines("a\nb\n") == (PhysicalLine("a", "\n"), PhysicalLine("b", "\n"))

    def test_crlf_is_one_terminator(self) -> None:
        assert split_lines("a\r\nb") == (PhysicalLine("a", "\r\n"), PhysicalLine("b", ""))

    def test_cr_only(self) -> None:
        assert split_lines("a\rb\r") == (PhysicalLine("a", "\r"), PhysicalLine("b", "\r"))

    def test_lf_cr_is_two_terminators(self) -> None:
        # "\n\r" is LF followed by CR, not a reversed CRLF
        assert split_lines("a\n\rb") == (
            PhysicalLine("a", "\n"),
            PhysicalLine("", "\r"),
            PhysicalLine("b", ""),
        )

    def test_mixed_terminators(self) -> None:
        lines = split_lines("a\r\nb\nc\rd")
        assert [line.newline for line in lines] == ["\r\n", "\n", "\r", ""]
        assert [line.content for line in lines] == ["a", "b", "c", "d"]

    def test_blank_lines_are_kept(self) -> None:
        assert split_lines("\n\n") == (PhysicalLine("", "\n"), PhysicalLine("", "\n"))

    def test_unicode_line_separators_are_content(self) -> None:
        # Only CR and LF terminate lines; U+2028 and NEL stay in content
        assert split_lines("a\u2028b\x85c\n") == (PhysicalLine("a\u2028b\x85c", "\n"),)


class TestIterLines:
    """Test the lazy generator form."""

    def test_iter_lines_is_lazy(self) -> None:
        lines = iter_lines("a\nb\n")
        assert next(lines) == PhysicalLine("a", "\n")
        assert next(lines) == PhysicalLine("b", "\n")
        assert next(lines, None) is None

    def test_iter_matches_split(self) -> None:
        source = "# c\r\nk = v\\\n  w\r"
        assert tuple(iter_lines(source)) == split_lines(source)


class TestSplitLinesProperties:
    """Property-based tests for the concatenation law."""

    @given(text=st.text(alphabet="ab \\\r\n", max_size=40))
    def test_concatenation_reproduces_input(self, text: str) -> None:
        """content + newline over all lines reproduces the input exactly."""
        lines = split_lines(text)
        event(f"line_count={min(len(lines), 5)}")
        assert "".join(line.content + line.newline for line in lines) == text

    @given(text=st.text(max_size=40))
    def test_only_last_line_may_be_unterminated(self, text: str) -> None:
        lines = split_lines(text)
        for line in lines[:-1]:
            assert line.newline in ("\n", "\r\n", "\r")
        for line in lines:
            assert "\n" not in line.content
            assert "\r" not in line.content
