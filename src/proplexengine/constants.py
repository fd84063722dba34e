"""Shared constants for PropLexEngine.

This module provides centralized constants used across the syntax package.
Placing constants here avoids circular imports and provides a single source
of truth.

Constants are grouped by domain:
- House style defaults: Used when a document offers no evidence of its own
- Syntax characters: Markers recognized by the parser and escape codec

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # House style defaults
    "DEFAULT_SEPARATOR",
    "DEFAULT_NEWLINE",
    "DEFAULT_UNICODE_ESCAPED",
    # Syntax characters
    "CONTINUATION_MARKER",
    "COMMENT_MARKERS",
    "KEY_VALUE_SEPARATORS",
    "INLINE_WHITESPACE",
]

# ============================================================================
# HOUSE STYLE DEFAULTS
# ============================================================================

# Separator written between key and value when the document has no entries.
DEFAULT_SEPARATOR: str = ": "

# Line terminator used when no node carries a non-empty terminator.
DEFAULT_NEWLINE: str = "\n"

# With no evidence either way, \uXXXX escaping is the safe round-trip choice.
DEFAULT_UNICODE_ESCAPED: bool = True

# ============================================================================
# SYNTAX CHARACTERS
# ============================================================================

# Trailing backslash that joins a physical line to the next one.
CONTINUATION_MARKER: str = "\\"

COMMENT_MARKERS: frozenset[str] = frozenset({"#", "!"})

KEY_VALUE_SEPARATORS: frozenset[str] = frozenset({"=", ":"})

# Space and tab only; form feed is left inside keys and values.
INLINE_WHITESPACE: frozenset[str] = frozenset({" ", "\t"})

