""".properties parser module.

Module Organization:
- core.py: PropertiesParser class and parse() entry point
- rules.py: Per-line rules (blank lines, comments, property entries)
- whitespace.py: Indent splitting and continuation detection

Public API:
    PropertiesParser: Main parser class
"""

from proplexengine.syntax.parser.core import PropertiesParser

__all__ = ["PropertiesParser"]
