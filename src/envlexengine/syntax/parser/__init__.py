""".env parser module.

This module provides the main EnvParser class and related parsing
utilities organized into focused submodules.

Module Organization:
- core.py: EnvParser document assembler
- primitives.py: Identifier grammar
- whitespace.py: Blank, comment, and line-tail handling
- rules.py: Line classifier, value grammar, interpolation tagger

Public API:
    EnvParser: Main parser class
"""

from envlexengine.syntax.parser.core import EnvParser

__all__ = ["EnvParser"]
