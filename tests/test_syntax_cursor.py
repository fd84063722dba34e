"""Tests for syntax.cursor: Cursor, LineCursor, ParseResult."""

from __future__ import annotations

import pytest

from proplexengine.constants import KEY_VALUE_SEPARATORS
from proplexengine.syntax.cursor import Cursor, LineCursor, ParseResult
from proplexengine.syntax.lines import split_lines

# ============================================================================
# CURSOR
# ============================================================================


class TestCursorBasic:
    """Test basic cursor functionality."""

    def test_cursor_immutability(self) -> None:
        cursor = Cursor("hello", 0)

        with pytest.raises(AttributeError):
            cursor.pos = 5  # type: ignore[misc]

    def test_advance_returns_new_cursor(self) -> None:
        cursor = Cursor("hello", 0)
        advanced = cursor.advance(2)

        assert cursor.pos == 0
        assert advanced.current == "l"

    def test_advance_clamps_to_eof(self) -> None:
        assert Cursor("hi", 0).advance(10).pos == 2

    def test_current_at_eof_raises(self) -> None:
        with pytest.raises(EOFError):
            _ = Cursor("hi", 2).current

    def test_peek_backwards(self) -> None:
        cursor = Cursor("a\\=", 2)

        assert cursor.peek(-1) == "\\"
        assert Cursor("abc", 0).peek(-1) is None
        assert Cursor("abc", 2).peek(1) is None

    def test_rest_and_slice(self) -> None:
        cursor = Cursor("key=value", 4)

        assert cursor.rest() == "value"
        assert Cursor("key=value", 0).slice_to(3) == "key"


class TestCursorScanning:
    """Test whitespace, separator and line-end scanning."""

    def test_skip_inline_whitespace_stops_at_form_feed(self) -> None:
        cursor = Cursor(" \t\fx", 0).skip_inline_whitespace()

        assert cursor.current == "\f"

    def test_expect_any(self) -> None:
        assert Cursor("=v", 0).expect_any(KEY_VALUE_SEPARATORS) == Cursor("=v", 1)
        assert Cursor("v", 0).expect_any(KEY_VALUE_SEPARATORS) is None
        assert Cursor("", 0).expect_any(KEY_VALUE_SEPARATORS) is None

    @pytest.mark.parametrize(
        ("source", "expected"),
        [("a\nb", 2), ("a\r\nb", 3), ("a\rb", 2), ("ab", 1)],
    )
    def test_skip_line_end(self, source: str, expected: int) -> None:
        assert Cursor(source, 1).skip_line_end().pos == expected

    def test_skip_to_line_end(self) -> None:
        assert Cursor("abc\r\n", 0).skip_to_line_end().pos == 3
        assert Cursor("abc", 0).skip_to_line_end().is_eof


# ============================================================================
# LINE CURSOR
# ============================================================================


class TestLineCursor:
    """Test the line-level cursor used by the parser."""

    def test_walks_lines(self) -> None:
        cursor = LineCursor(split_lines("a\nb"), 0)

        assert cursor.current.content == "a"
        assert cursor.advance().current.content == "b"
        assert cursor.advance(2).is_eof

    def test_current_at_eof_raises(self) -> None:
        with pytest.raises(EOFError):
            _ = LineCursor((), 0).current

    def test_parse_result_carries_cursor(self) -> None:
        cursor = LineCursor(split_lines("a\n"), 0)
        result = ParseResult("a", cursor.advance())

        assert result.value == "a"
        assert result.cursor.is_eof
