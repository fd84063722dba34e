"""Whitespace and continuation helpers for the .properties parser."""

from proplexengine.constants import CONTINUATION_MARKER


def split_indent(content: str) -> tuple[str, str]:
    """Split a line into (leading whitespace, remainder).

    Example:
        >>> split_indent("  key = value")
        ('  ', 'key = value')
    """
    remainder = content.lstrip()
    return content[: len(content) - len(remainder)], remainder


def is_blank(content: str) -> bool:
    """True for an empty or whitespace-only line."""
    return not content.strip()


def count_trailing_backslashes(content: str) -> int:
    """Count consecutive backslashes at the end of content."""
    return len(content) - len(content.rstrip(CONTINUATION_MARKER))


def ends_with_continuation(content: str) -> bool:
    """Check whether a line continues onto the next physical line.

    An odd run of trailing backslashes ends in an unescaped continuation
    marker. An even run is a sequence of escaped, literal backslashes.

    Example:
        >>> ends_with_continuation("a = b \\\\")
        True
        >>> ends_with_continuation("path = C:\\\\\\\\")
        False
    """
    return count_trailing_backslashes(content) % 2 == 1
