"""Error types for PropLexEngine.

The parser is total and never raises. Errors exist only for opt-in checks
on programmatically constructed or mutated documents.

Python 3.13+.
"""

__all__ = ["PropertiesError", "SerializationValidationError"]


class PropertiesError(Exception):
    """Base class for all PropLexEngine errors."""


class SerializationValidationError(PropertiesError, ValueError):
    """Raised when a document would serialize to text that does not parse back.

    Only raised by serialize(..., validate=True). Common causes:
    - A non-final value segment without a continuation terminator
    - A terminator that is not "", "\\n", "\\r\\n" or "\\r"
    - A comment marker other than "#", "!" or ""
    """
