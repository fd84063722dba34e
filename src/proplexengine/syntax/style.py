"""House style inference for .properties documents.

Scans a node sequence and reports the dominant separator, line terminator
and unicode-escaping convention, so new content can be written the way the
rest of the file is written.

Pure read-only scan, recomputed on every call.

Python 3.13+. Zero external dependencies.
"""

import logging
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from proplexengine.constants import (
    DEFAULT_NEWLINE,
    DEFAULT_SEPARATOR,
    DEFAULT_UNICODE_ESCAPED,
)

from .ast import BlankLine, CommentLine, Node, PropertyEntry
from .escape import UNICODE_ESCAPE_PATTERN

__all__ = ["HouseStyle", "guess_defaults", "node_newline"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class HouseStyle:
    """Formatting conventions of a document.

    Attributes:
        separator: Text written between key and value, e.g. ": " or "="
        newline: Line terminator, e.g. "\\n" or "\\r\\n"
        unicode_escaped: Whether non-ASCII characters are written as \\uXXXX
    """

    separator: str = DEFAULT_SEPARATOR
    newline: str = DEFAULT_NEWLINE
    unicode_escaped: bool = DEFAULT_UNICODE_ESCAPED


def node_newline(node: Node) -> str | None:
    """Return the final terminator of a node.

    None for a PropertyEntry without value segments (it has no terminator).
    """
    match node:
        case BlankLine() | CommentLine():
            return node.newline
        case PropertyEntry():
            return node.newline


def _most_common(values: Iterable[str], default: str) -> str:
    """Most frequent value, ties going to the first one encountered."""
    # Counter preserves insertion order and most_common() sorts stably.
    ranked = Counter(values).most_common(1)
    return ranked[0][0] if ranked else default


def _is_unicode_escaped(entries: Sequence[PropertyEntry]) -> bool:
    escapes = 0
    raw_non_ascii = 0
    for entry in entries:
        for segment in entry.value_segments:
            escapes += len(UNICODE_ESCAPE_PATTERN.findall(segment.text))
            if any(ord(char) > 0x7F for char in segment.text):
                raw_non_ascii += 1
    return escapes >= raw_non_ascii


def guess_defaults(nodes: Sequence[Node]) -> HouseStyle:
    """Infer the dominant house style of a node sequence.

    - separator: most frequent entry separator, default ": "
    - newline: most frequent non-empty final terminator, default "\\n"
    - unicode_escaped: True when \\uXXXX escapes in value text are at least
      as many as value segments holding raw non-ASCII characters (so an
      empty document counts as escaped)

    Ties go to the value seen first in document order.

    Example:
        >>> guess_defaults([])
        HouseStyle(separator=': ', newline='\\n', unicode_escaped=True)
    """
    entries = [node for node in nodes if PropertyEntry.guard(node)]

    separator = _most_common((entry.separator for entry in entries), DEFAULT_SEPARATOR)
    newlines = (node_newline(node) for node in nodes)
    newline = _most_common((nl for nl in newlines if nl), DEFAULT_NEWLINE)

    style = HouseStyle(
        separator=separator,
        newline=newline,
        unicode_escaped=_is_unicode_escaped(entries),
    )
    logger.debug("Guessed house style from %d nodes: %r", len(nodes), style)
    return style
