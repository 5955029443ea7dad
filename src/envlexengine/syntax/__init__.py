""".env syntax parsing package.

Provides parser, AST definitions, and error reporting.
Separate from runtime to enable tooling (linters, editors) that only
needs the document structure.

Python 3.13+.
"""

from .ast import (
    Document,
    Entry,
    Literal,
    ParseFailure,
    ParseOutcome,
    ParseSuccess,
    Reference,
    Span,
    ValuePart,
)
from .cursor import Cursor, LineOffsetCache, ParseError, ParseResult, Position
from .parser import EnvParser
from .reporter import format_outcome_error, outcome_to_error

__all__ = [
    "Cursor",
    "Document",
    "Entry",
    "EnvParser",
    "LineOffsetCache",
    "Literal",
    "ParseError",
    "ParseFailure",
    "ParseOutcome",
    "ParseResult",
    "ParseSuccess",
    "Position",
    "Reference",
    "Span",
    "ValuePart",
    "format_outcome_error",
    "outcome_to_error",
    "parse",
]


def parse(source: str) -> ParseOutcome:
    """Parse .env source into a ParseOutcome.

    Convenience function for EnvParser().parse(). References are not
    resolved; see :func:`envlexengine.parse` for the resolved mapping.

    Args:
        source: .env source text

    Returns:
        ParseSuccess (document may carry a remainder) or ParseFailure

    Example:
        >>> from envlexengine.syntax import parse
        >>> outcome = parse("A=foo")
        >>> outcome.document.entries[0].key
        'A'
    """
    parser = EnvParser()
    return parser.parse(source)
