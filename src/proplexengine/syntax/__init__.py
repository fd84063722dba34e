""".properties syntax package.

Provides the line splitter, escape codec, document model, parser,
serializer and house-style inference. Operates on decoded text only;
reading and writing files is left to the caller.

Python 3.13+.
"""

from .ast import (
    BlankLine,
    CommentLine,
    Node,
    PropertiesDocument,
    PropertyEntry,
    ValueSegment,
)
from .cursor import Cursor, LineCursor, ParseResult
from .escape import escape, escape_key, unescape
from .lines import PhysicalLine, iter_lines, split_lines
from .parser import PropertiesParser
from .serializer import SerializationValidationError, serialize
from .style import HouseStyle, guess_defaults

# Note: PropertiesSerializer is intentionally NOT exported.
# Users should use the serialize() function or PropertiesDocument.serialize().

__all__ = [
    "BlankLine",
    "CommentLine",
    "Cursor",
    "HouseStyle",
    "LineCursor",
    "Node",
    "ParseResult",
    "PhysicalLine",
    "PropertiesDocument",
    "PropertiesParser",
    "PropertyEntry",
    "SerializationValidationError",
    "ValueSegment",
    "escape",
    "escape_key",
    "guess_defaults",
    "iter_lines",
    "parse",
    "serialize",
    "split_lines",
    "unescape",
]


def parse(source: str) -> PropertiesDocument:
    """Parse .properties source into a PropertiesDocument.

    Convenience function for PropertiesParser.parse(). Never raises.

    Args:
        source: Decoded .properties text

    Returns:
        PropertiesDocument whose serialize() reproduces source exactly

    Example:
        >>> from proplexengine.syntax import parse
        >>> document = parse("username = alice\\n")
        >>> document.nodes[0].get_text()
        'alice'
    """
    parser = PropertiesParser()
    return parser.parse(source)
