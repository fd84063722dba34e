"""Line splitter: raw text to physical lines with their exact terminators.

This is the only place line terminators are detected. Concatenating
content + newline over every produced line reproduces the input exactly.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from .cursor import Cursor

__all__ = ["PhysicalLine", "iter_lines", "split_lines"]


@dataclass(frozen=True, slots=True)
class PhysicalLine:
    """One physical line of source text.

    Attributes:
        content: Line text without its terminator
        newline: "\\n", "\\r\\n", "\\r", or "" for a final unterminated line
    """

    content: str
    newline: str


def iter_lines(text: str) -> Iterator[PhysicalLine]:
    """Lazily yield the physical lines of text.

    Empty input yields nothing (not one empty line).

    Example:
        >>> [(l.content, l.newline) for l in iter_lines("a\\r\\nb")]
        [('a', '\\r\\n'), ('b', '')]
    """
    cursor = Cursor(text, 0)
    while not cursor.is_eof:
        line_end = cursor.skip_to_line_end()
        next_line = line_end.skip_line_end()
        yield PhysicalLine(
            content=cursor.slice_to(line_end.pos),
            newline=line_end.slice_to(next_line.pos),
        )
        cursor = next_line


def split_lines(text: str) -> tuple[PhysicalLine, ...]:
    """Split text into physical lines (eager form of iter_lines)."""
    return tuple(iter_lines(text))
