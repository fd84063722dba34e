"""Enumerations for PropLexEngine type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so they compare equal to the raw
text stored on document nodes.

Python 3.13+.
"""

from enum import StrEnum


class LineEnding(StrEnum):
    """Physical line terminator recognized by the line splitter.

    StrEnum provides automatic string conversion: str(LineEnding.CRLF) == "\\r\\n"
    """

    LF = "\n"
    """Unix line ending"""

    CRLF = "\r\n"
    """Windows line ending"""

    CR = "\r"
    """Classic Mac line ending"""


class CommentMarker(StrEnum):
    """Character that opens a comment line.

    StrEnum provides automatic string conversion: str(CommentMarker.HASH) == "#"
    """

    HASH = "#"
    """Comment: # This is a comment"""

    BANG = "!"
    """Comment: ! This is a comment"""


__all__ = [
    "CommentMarker",
    "LineEnding",
]
