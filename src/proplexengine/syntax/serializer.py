"""Serialize a PropertiesDocument back to .properties text.

Each node writes back exactly the text it holds. The only rewrite is the
newline repair rule: a node with an empty final terminator that is not the
last node gets the document's guessed newline appended, so nodes edited or
inserted without a terminator do not run into the next line.

Useful for:
- Editors and config-management tools (lossless round-trip)
- Property-based testing (roundtrip: serialize(parse(text)) == text)

Python 3.13+.
"""

import logging

from proplexengine.constants import CONTINUATION_MARKER
from proplexengine.enums import CommentMarker, LineEnding
from proplexengine.errors import SerializationValidationError

from .ast import BlankLine, CommentLine, Node, PropertiesDocument, PropertyEntry
from .style import guess_defaults, node_newline

__all__ = ["PropertiesSerializer", "SerializationValidationError", "serialize"]

logger = logging.getLogger(__name__)

_NODE_TERMINATORS: frozenset[str] = frozenset({"", *LineEnding})
_CONTINUATIONS: frozenset[str] = frozenset(
    CONTINUATION_MARKER + terminator for terminator in LineEnding
)
_MARKERS: frozenset[str] = frozenset({"", *CommentMarker})


def _validate_terminator(newline: str, context: str) -> None:
    if newline not in _NODE_TERMINATORS:
        msg = f"{context} has invalid line terminator {newline!r}"
        raise SerializationValidationError(msg)


def _validate_entry(entry: PropertyEntry, context: str, is_last: bool) -> None:
    """Validate continuation markers and terminators of a PropertyEntry.

    Raises:
        SerializationValidationError: If validation fails
    """
    if not entry.value_segments:
        if not is_last:
            msg = f"{context} has no value segments but is followed by another node"
            raise SerializationValidationError(msg)
        return

    *continued, last = entry.value_segments
    for index, segment in enumerate(continued):
        if segment.newline not in _CONTINUATIONS:
            msg = (
                f"{context} segment {index} is followed by another segment "
                f"but ends with {segment.newline!r} instead of a continuation"
            )
            raise SerializationValidationError(msg)
    _validate_terminator(last.newline, f"{context} last segment")


def _validate_document(document: PropertiesDocument) -> None:
    """Validate a PropertiesDocument for serialization.

    Checks that the model still obeys the parser's construction invariants,
    so the serialized text parses back into the same node structure.

    Args:
        document: PropertiesDocument to validate

    Raises:
        SerializationValidationError: If validation fails
    """
    last_index = len(document.nodes) - 1
    for index, node in enumerate(document.nodes):
        context = f"node {index}"
        match node:
            case BlankLine():
                _validate_terminator(node.newline, f"{context} (blank line)")
            case CommentLine():
                if node.marker not in _MARKERS:
                    msg = f"{context} (comment) has invalid marker {node.marker!r}"
                    raise SerializationValidationError(msg)
                _validate_terminator(node.newline, f"{context} (comment)")
            case PropertyEntry():
                _validate_entry(node, f"{context} (entry {node.key!r})", index == last_index)


class PropertiesSerializer:
    """Converts a PropertiesDocument back to source text.

    Thread-safe serializer with no mutable instance state.
    All serialization state is local to the serialize() call.

    Usage:
        >>> from proplexengine.syntax import parse
        >>> serializer = PropertiesSerializer()
        >>> serializer.serialize(parse("key = value\\n"))
        'key = value\\n'
    """

    def serialize(self, document: PropertiesDocument, *, validate: bool = False) -> str:
        """Serialize PropertiesDocument to .properties text.

        Pure function - builds output locally without mutating the document.

        Args:
            document: Document to serialize
            validate: If True, check construction invariants first (default: False)

        Returns:
            .properties source text

        Raises:
            SerializationValidationError: If validate=True and the document is invalid
        """
        if validate:
            _validate_document(document)

        output: list[str] = []
        repair_newline: str | None = None
        last_index = len(document.nodes) - 1

        for index, node in enumerate(document.nodes):
            self._serialize_node(node, output)
            if index < last_index and node_newline(node) == "":
                if repair_newline is None:
                    repair_newline = guess_defaults(document.nodes).newline
                logger.debug(
                    "Node %d has no line terminator, inserting %r", index, repair_newline
                )
                output.append(repair_newline)

        return "".join(output)

    def _serialize_node(self, node: Node, output: list[str]) -> None:
        """Serialize a single node."""
        match node:
            case BlankLine():
                self._serialize_blank_line(node, output)
            case CommentLine():
                self._serialize_comment(node, output)
            case PropertyEntry():
                self._serialize_entry(node, output)

    def _serialize_blank_line(self, node: BlankLine, output: list[str]) -> None:
        output.append(node.text)
        output.append(node.newline)

    def _serialize_comment(self, node: CommentLine, output: list[str]) -> None:
        output.append(node.indent)
        output.append(node.marker)
        output.append(node.text)
        output.append(node.newline)

    def _serialize_entry(self, node: PropertyEntry, output: list[str]) -> None:
        """Serialize PropertyEntry: key line, then one chunk per value segment."""
        output.append(node.indent)
        output.append(node.key)
        output.append(node.separator)
        for segment in node.value_segments:
            output.append(segment.indent)
            output.append(segment.text)
            output.append(segment.newline)


def serialize(document: PropertiesDocument, *, validate: bool = False) -> str:
    """Serialize PropertiesDocument to .properties text.

    Convenience function for PropertiesSerializer.serialize().

    Args:
        document: Document to serialize
        validate: If True, check construction invariants first (default: False).

    Returns:
        .properties source text

    Raises:
        SerializationValidationError: If validate=True and the document is invalid

    Example:
        >>> from proplexengine.syntax import parse, serialize
        >>> source = "# settings\\nport: 8080"
        >>> assert serialize(parse(source)) == source
    """
    serializer = PropertiesSerializer()
    return serializer.serialize(document, validate=validate)
