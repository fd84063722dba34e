"""Document model for lossless .properties editing.

A document is an ordered list of nodes. Every node keeps the exact source
text it was parsed from (indentation, separator spacing, comment marker,
line terminator), so serializing an unmodified document reproduces the
input byte for byte.

Unlike a typical AST, nodes are mutable: callers edit fields in place and
add or remove nodes from PropertiesDocument.nodes. Nodes carry no line
numbers; position is implied by order.

Includes type guards as static methods (eliminates circular imports).

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeIs

from proplexengine.constants import DEFAULT_NEWLINE

from .escape import escape, escape_key, unescape

if TYPE_CHECKING:
    from .style import HouseStyle

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Value parts
    "ValueSegment",
    # Nodes
    "BlankLine",
    "CommentLine",
    "PropertyEntry",
    # Container
    "PropertiesDocument",
    # Type aliases
    "Node",
]

# ============================================================================
# VALUE PARTS
# ============================================================================


@dataclass(slots=True)
class ValueSegment:
    """One physical line's share of a property value.

    Attributes:
        indent: Leading whitespace of a continuation line ("" for the first)
        text: Escaped value text, continuation backslash excluded
        newline: "\\\\" + terminator for all but the last segment, else the
                 bare terminator ("" at end of file)

    Example:
        Source: "k = one \\\\\\n    two\\n"
        Segments: ValueSegment("", "one ", "\\\\\\n"),
                  ValueSegment("    ", "two", "\\n")
    """

    indent: str
    text: str
    newline: str


# ============================================================================
# NODES
# ============================================================================


@dataclass(slots=True)
class BlankLine:
    """Empty or whitespace-only line.

    Attributes:
        text: The whitespace content of the line (may be empty)
        newline: Terminator ("" only for a final unterminated line)
    """

    text: str
    newline: str

    @staticmethod
    def guard(node: object) -> TypeIs["BlankLine"]:
        """Type guard for BlankLine (used in node filtering)."""
        return isinstance(node, BlankLine)


@dataclass(slots=True)
class CommentLine:
    """Comment line opened by "#" or "!".

    Attributes:
        indent: Whitespace before the marker
        marker: "#", "!", or "" when the line could not be split
        text: Everything after the marker, verbatim
        newline: Terminator

    Example:
        Source: "  ! note\\n"
        CommentLine(indent="  ", marker="!", text=" note", newline="\\n")
    """

    indent: str
    marker: str
    text: str
    newline: str

    @staticmethod
    def guard(node: object) -> TypeIs["CommentLine"]:
        """Type guard for CommentLine (used in node filtering)."""
        return isinstance(node, CommentLine)


@dataclass(slots=True)
class PropertyEntry:
    """Key/value pair, possibly spanning several physical lines.

    Key and value text are stored escaped, exactly as in the source. Use
    get_key() / get_text() for the logical strings.

    Attributes:
        indent: Whitespace before the key
        key: Escaped key
        separator: Exact span between key and value, e.g. " = ", ":", " ", ""
        value_segments: One segment per physical line of the value; may be
                        empty, in which case the entry ends after separator

    Example:
        Source: "username = alice\\n"
        PropertyEntry(indent="", key="username", separator=" = ",
                      value_segments=[ValueSegment("", "alice", "\\n")])
    """

    indent: str
    key: str
    separator: str
    value_segments: list[ValueSegment] = field(default_factory=list)

    @staticmethod
    def guard(node: object) -> TypeIs["PropertyEntry"]:
        """Type guard for PropertyEntry (used in node filtering)."""
        return isinstance(node, PropertyEntry)

    @classmethod
    def create(
        cls,
        key: str,
        text: str,
        *,
        style: "HouseStyle | None" = None,
    ) -> "PropertyEntry":
        """Build a new single-line entry from a logical key and value.

        Args:
            key: Logical (unescaped) key
            text: Logical (unescaped) value
            style: Separator, newline and escaping to use. Pass
                   document.guess_defaults() to match an existing file.

        Example:
            >>> from proplexengine.syntax import parse
            >>> doc = parse("a=1\\r\\nb=2\\r\\n")
            >>> doc.nodes.append(PropertyEntry.create("c", "3", style=doc.guess_defaults()))
            >>> doc.serialize()
            'a=1\\r\\nb=2\\r\\nc=3\\r\\n'
        """
        from .style import HouseStyle  # noqa: PLC0415 - circular

        if style is None:
            style = HouseStyle()
        entry = cls(
            indent="",
            key=escape_key(key, style.unicode_escaped),
            separator=style.separator,
        )
        entry.set_text(text, style.unicode_escaped, style.newline)
        return entry

    @property
    def newline(self) -> str | None:
        """Final terminator of the entry, None when it has no value segments."""
        if not self.value_segments:
            return None
        return self.value_segments[-1].newline

    def get_key(self) -> str:
        """Return the unescaped key."""
        return unescape(self.key)

    def set_key(self, key: str, escape_unicode: bool) -> None:
        """Replace the key with the escaped form of a logical key."""
        self.key = escape_key(key, escape_unicode)

    def get_text(self) -> str:
        """Return the logical value.

        Joins the text of every segment (continuation indent and
        terminators are not part of the value), then unescapes the result.
        """
        return unescape("".join(segment.text for segment in self.value_segments))

    def set_text(self, text: str, escape_unicode: bool, newline: str = DEFAULT_NEWLINE) -> None:
        """Replace the value with a single segment holding escaped text.

        Any previous multi-line layout collapses into one line.

        Args:
            text: Logical (unescaped) value
            escape_unicode: Write characters >= U+0080 as \\uXXXX
            newline: Terminator for the new segment
        """
        self.value_segments = [
            ValueSegment(indent="", text=escape(text, escape_unicode), newline=newline)
        ]


# ============================================================================
# CONTAINER
# ============================================================================


@dataclass(slots=True)
class PropertiesDocument:
    """Ordered sequence of nodes in on-disk order.

    Owned by the caller; mutate nodes in place or edit the list directly.
    Not thread-safe; share across threads only under external locking.
    """

    nodes: list["Node"] = field(default_factory=list)

    def entries(self) -> Iterator[PropertyEntry]:
        """Yield the property entries in document order."""
        for node in self.nodes:
            if PropertyEntry.guard(node):
                yield node

    def serialize(self, *, validate: bool = False) -> str:
        """Serialize back to .properties text.

        See :func:`proplexengine.syntax.serializer.serialize`.
        """
        from .serializer import serialize  # noqa: PLC0415 - circular

        return serialize(self, validate=validate)

    def guess_defaults(self) -> "HouseStyle":
        """Infer the document's dominant separator, newline and escaping.

        See :func:`proplexengine.syntax.style.guess_defaults`.
        """
        from .style import guess_defaults  # noqa: PLC0415 - circular

        return guess_defaults(self.nodes)

    def __str__(self) -> str:
        return self.serialize()


# ============================================================================
# TYPE ALIASES
# ============================================================================

type Node = BlankLine | CommentLine | PropertyEntry
"""Closed union of document nodes. Dispatch on it with match/case."""
