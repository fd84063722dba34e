"""Line rules for the .properties parser.

Each rule takes a LineCursor positioned at the line it handles and returns
a ParseResult with the produced node and the cursor after the consumed
line(s). Rules never fail: every line is a blank line, a comment, or the
start of a property entry.

Key scanning:
    A key ends at the first "=", ":", space or tab whose immediately
    preceding character is not a backslash. Only the single preceding
    character is checked, not the parity of the whole backslash run, so
    "a\\\\\\\\:b" (escaped backslash, then a real colon) stays one key.
    Continuation detection, by contrast, counts the full run.
"""

import logging
import re

from proplexengine.constants import (
    COMMENT_MARKERS,
    CONTINUATION_MARKER,
    INLINE_WHITESPACE,
    KEY_VALUE_SEPARATORS,
)
from proplexengine.syntax.ast import BlankLine, CommentLine, PropertyEntry, ValueSegment
from proplexengine.syntax.cursor import Cursor, LineCursor, ParseResult
from proplexengine.syntax.lines import PhysicalLine
from proplexengine.syntax.parser.whitespace import (
    ends_with_continuation,
    is_blank,
    split_indent,
)

__all__ = [
    "is_comment_start",
    "parse_blank_line",
    "parse_comment",
    "parse_entry",
]

logger = logging.getLogger(__name__)

_COMMENT_PATTERN = re.compile(r"(\s*)([#!])(.*)", re.DOTALL)

_KEY_TERMINATORS: frozenset[str] = KEY_VALUE_SEPARATORS | INLINE_WHITESPACE


def is_comment_start(content: str) -> bool:
    """True if the first non-whitespace character is "#" or "!"."""
    stripped = content.lstrip()
    return bool(stripped) and stripped[0] in COMMENT_MARKERS


def parse_blank_line(cursor: LineCursor) -> ParseResult[BlankLine]:
    """Parse an empty or whitespace-only line."""
    line = cursor.current
    return ParseResult(BlankLine(text=line.content, newline=line.newline), cursor.advance())


def parse_comment(cursor: LineCursor) -> ParseResult[CommentLine]:
    """Parse a comment line into indent, marker and verbatim text.

    If the line cannot be split, the whole content becomes the text with an
    empty indent and marker.
    """
    line = cursor.current
    match = _COMMENT_PATTERN.fullmatch(line.content)
    if match is None:
        logger.debug("Comment line did not split, keeping it verbatim: %r", line.content)
        node = CommentLine(indent="", marker="", text=line.content, newline=line.newline)
    else:
        indent, marker, text = match.groups()
        node = CommentLine(indent=indent, marker=marker, text=text, newline=line.newline)
    return ParseResult(node, cursor.advance())


def _collect_entry_lines(cursor: LineCursor) -> ParseResult[tuple[PhysicalLine, ...]]:
    """Collect the physical lines of one entry.

    Takes the current line, then keeps taking lines while the last one
    taken ends with an unescaped continuation marker.
    """
    group: list[PhysicalLine] = []
    while not cursor.is_eof:
        line = cursor.current
        group.append(line)
        cursor = cursor.advance()
        if not ends_with_continuation(line.content):
            break
    return ParseResult(tuple(group), cursor)


def _scan_key(cursor: Cursor) -> Cursor:
    """Advance to the first unescaped key terminator (or EOF)."""
    while not cursor.is_eof:
        if cursor.current in _KEY_TERMINATORS and cursor.peek(-1) != CONTINUATION_MARKER:
            break
        cursor = cursor.advance()
    return cursor


def _scan_separator(cursor: Cursor) -> Cursor:
    """Skip whitespace, at most one "=" or ":", then whitespace again."""
    cursor = cursor.skip_inline_whitespace()
    after_separator = cursor.expect_any(KEY_VALUE_SEPARATORS)
    if after_separator is not None:
        cursor = after_separator.skip_inline_whitespace()
    return cursor


def _segment(indent: str, text: str, line: PhysicalLine, continued: bool) -> ValueSegment:
    if continued:
        return ValueSegment(indent=indent, text=text, newline=CONTINUATION_MARKER + line.newline)
    return ValueSegment(indent=indent, text=text, newline=line.newline)


def parse_entry(cursor: LineCursor) -> ParseResult[PropertyEntry]:
    """Parse a property entry and all of its continuation lines.

    The first line is decomposed into indent, key, separator and the first
    value segment; each further line becomes one more segment. The
    continuation backslash is removed from segment text and kept in the
    segment's newline instead.

    Example:
        "  key = a \\\\\\n    b\\n" produces
        PropertyEntry("  ", "key", " = ", [
            ValueSegment("", "a ", "\\\\\\n"),
            ValueSegment("    ", "b", "\\n"),
        ])
    """
    collected = _collect_entry_lines(cursor)
    group = collected.value
    last = len(group) - 1

    first = group[0]
    indent, rest = split_indent(first.content)
    if last > 0:
        # The marker is never part of the key or separator.
        rest = rest[: -len(CONTINUATION_MARKER)]

    line = Cursor(rest, 0)
    key_end = _scan_key(line)
    value_start = _scan_separator(key_end)

    segments = [_segment("", value_start.rest(), first, continued=last > 0)]
    for index, physical in enumerate(group[1:], start=1):
        segment_indent, text = split_indent(physical.content)
        continued = index < last
        if continued:
            text = text[: -len(CONTINUATION_MARKER)]
        segments.append(_segment(segment_indent, text, physical, continued))

    entry = PropertyEntry(
        indent=indent,
        key=line.slice_to(key_end.pos),
        separator=key_end.slice_to(value_start.pos),
        value_segments=segments,
    )
    return ParseResult(entry, collected.cursor)
