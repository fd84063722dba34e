"""Hypothesis strategies for PropLexEngine property-based testing.

Strategies are organized by domain:

- properties: .properties source text, logical strings, and document nodes

Usage:
    from tests.strategies import properties_sources, logical_values
    from tests.strategies.properties import house_styles

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - properties_lines, properties_chaos_source
"""

from .properties import (
    INTERESTING_CHARS,
    NEWLINES,
    SEPARATORS,
    house_styles,
    logical_keys,
    logical_values,
    properties_chaos_source,
    properties_lines,
    properties_sources,
)

__all__ = [
    "INTERESTING_CHARS",
    "NEWLINES",
    "SEPARATORS",
    "house_styles",
    "logical_keys",
    "logical_values",
    "properties_chaos_source",
    "properties_lines",
    "properties_sources",
]
