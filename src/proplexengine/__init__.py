"""PropLexEngine - lossless, format-preserving .properties reader/writer.

Parses Java-style .properties text into an editable node model and writes
it back so that every untouched byte (indentation, separator spacing,
comment markers, line endings, continuation layout) is reproduced exactly.

Public API:
    parse_properties - Parse .properties source to a PropertiesDocument
    serialize_properties - Serialize a PropertiesDocument to source
    PropertiesDocument - Ordered, mutable node container
    PropertyEntry - Key/value node with get_text()/set_text()/get_key()
    HouseStyle - Inferred separator/newline/escaping of a document

Exceptions:
    PropertiesError - Base exception class
    SerializationValidationError - Opt-in serialization checks

Submodules:
    proplexengine.syntax.ast - Node types (BlankLine, CommentLine, PropertyEntry, ...)
    proplexengine.syntax.escape - Escape codec (escape, unescape, escape_key)
    proplexengine.syntax.lines - Line splitter
    proplexengine.syntax.style - House-style inference
"""

# Essential Public API - Minimal exports for clean namespace
from .errors import PropertiesError, SerializationValidationError
from .syntax import HouseStyle, PropertiesDocument, PropertyEntry
from .syntax import parse as parse_properties
from .syntax import serialize as serialize_properties

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("proplexengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "HouseStyle",
    "PropertiesDocument",
    "PropertiesError",
    "PropertyEntry",
    "SerializationValidationError",
    "__version__",
    "parse_properties",
    "serialize_properties",
]
