"""Immutable cursor infrastructure for line-level scanning.

Implements the immutable cursor pattern: Cursor walks characters (line
splitter, key/separator scanner), LineCursor walks physical lines (parser).
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)

Line Ending Support:
    - LF (Unix, \\n)
    - CRLF (Windows, \\r\\n), consumed as a single unit
    - CR-only (Classic Mac, \\r)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from proplexengine.constants import INLINE_WHITESPACE

if TYPE_CHECKING:
    from .lines import PhysicalLine

__all__ = ["Cursor", "LineCursor", "ParseResult"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("key=value", 0)
        >>> cursor.current
        'k'
        >>> cursor.advance(3).current
        '='
        >>> cursor.current  # Original unchanged (immutability)
        'k'
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Returns None when peeking outside the source, in either direction.
        Use peek(-1) to look at the previous character.
        """
        target_pos = self.pos + offset
        if target_pos < 0 or target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped to EOF)."""
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos (exclusive)."""
        return self.source[self.pos : end_pos]

    def rest(self) -> str:
        """Return everything from the current position to EOF."""
        return self.source[self.pos :]

    def skip_inline_whitespace(self) -> "Cursor":
        """Skip spaces and tabs.

        Example:
            >>> Cursor(" \\t = v", 0).skip_inline_whitespace().current
            '='
        """
        c = self
        while not c.is_eof and c.current in INLINE_WHITESPACE:
            c = c.advance()
        return c

    def expect_any(self, chars: frozenset[str]) -> "Cursor | None":
        """Consume one character if it is in chars, return None otherwise."""
        if not self.is_eof and self.current in chars:
            return self.advance()
        return None

    def skip_line_end(self) -> "Cursor":
        """Skip LF, CR, or CRLF line ending.

        Returns:
            New cursor advanced past the line ending, or unchanged if not at line end.

        Example:
            >>> Cursor("a\\r\\nb", 1).skip_line_end().pos
            3
            >>> Cursor("a\\rb", 1).skip_line_end().pos
            2
        """
        if self.is_eof:
            return self
        if self.current == "\r":
            cursor = self.advance()
            if not cursor.is_eof and cursor.current == "\n":
                return cursor.advance()
            return cursor
        if self.current == "\n":
            return self.advance()
        return self

    def skip_to_line_end(self) -> "Cursor":
        """Advance to the next line ending character (not consumed) or EOF."""
        cursor = self
        while not cursor.is_eof and cursor.current not in ("\n", "\r"):
            cursor = cursor.advance()
        return cursor


@dataclass(frozen=True, slots=True)
class LineCursor:
    """Immutable position in a sequence of physical lines.

    The line-level counterpart of Cursor, used by the parser to walk a
    document one physical line (or continuation group) at a time.
    """

    lines: tuple[PhysicalLine, ...]
    index: int

    @property
    def is_eof(self) -> bool:
        """Check if every line has been consumed."""
        return self.index >= len(self.lines)

    @property
    def current(self) -> PhysicalLine:
        """Get the line at the cursor.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected end of lines at line index {self.index}"
            raise EOFError(msg)
        return self.lines[self.index]

    def advance(self, count: int = 1) -> "LineCursor":
        """Return new cursor advanced by count lines (clamped to EOF)."""
        return LineCursor(self.lines, min(self.index + count, len(self.lines)))


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parser result containing parsed value and new cursor position.

    Type Parameters:
        T: The type of the parsed value

    Pattern:
        Every line rule has signature:
            def parse_foo(cursor: LineCursor) -> ParseResult[Foo]:
                ...
                return ParseResult(node, cursor.advance())
    """

    value: T
    cursor: LineCursor
