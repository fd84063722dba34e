"""Core .properties parser implementation.

This module provides the PropertiesParser class that turns .properties
source text into the node model defined in :mod:`proplexengine.syntax.ast`.

Architecture:
    The text is split into physical lines (:mod:`~proplexengine.syntax.lines`),
    then an immutable :class:`~proplexengine.syntax.cursor.LineCursor` walks
    them. At each position exactly one rule from
    :mod:`~proplexengine.syntax.parser.rules` applies:

    - whitespace-only line  -> :class:`~proplexengine.syntax.ast.BlankLine`
    - first non-blank "#"/"!" -> :class:`~proplexengine.syntax.ast.CommentLine`
    - anything else          -> :class:`~proplexengine.syntax.ast.PropertyEntry`,
      consuming its continuation lines

Robustness:
    The parser accepts any input and never raises. Malformed content still
    becomes nodes that serialize back to the original text.
"""

import logging
from collections import Counter

from proplexengine.syntax.ast import Node, PropertiesDocument
from proplexengine.syntax.cursor import LineCursor
from proplexengine.syntax.lines import split_lines
from proplexengine.syntax.parser.rules import (
    is_comment_start,
    parse_blank_line,
    parse_comment,
    parse_entry,
)
from proplexengine.syntax.parser.whitespace import is_blank

__all__ = ["PropertiesParser"]

logger = logging.getLogger(__name__)


class PropertiesParser:
    """Lossless .properties parser using the immutable cursor pattern.

    Stateless and reusable; parse() may be called concurrently.

    Example:
        >>> parser = PropertiesParser()
        >>> document = parser.parse("username = alice\\n")
        >>> document.nodes[0].key
        'username'
    """

    __slots__ = ()

    def parse(self, source: str) -> PropertiesDocument:
        """Parse .properties source into a PropertiesDocument.

        Args:
            source: Decoded file content

        Returns:
            Document whose serialization reproduces source exactly
        """
        cursor = LineCursor(split_lines(source), 0)
        nodes: list[Node] = []

        while not cursor.is_eof:
            content = cursor.current.content
            if is_blank(content):
                result = parse_blank_line(cursor)
            elif is_comment_start(content):
                result = parse_comment(cursor)
            else:
                result = parse_entry(cursor)
            nodes.append(result.value)
            cursor = result.cursor

        if logger.isEnabledFor(logging.DEBUG):
            kinds = Counter(type(node).__name__ for node in nodes)
            logger.debug(
                "Parsed %d physical lines into %d nodes: %s",
                len(cursor.lines),
                len(nodes),
                dict(kinds),
            )
        return PropertiesDocument(nodes)
