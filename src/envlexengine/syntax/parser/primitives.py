"""Primitive parsing utilities for the .env parser.

Identifiers are ASCII-only: [A-Za-z_][A-Za-z0-9_]*. Case is significant
and never normalized.
"""

from envlexengine.diagnostics import ErrorTemplate
from envlexengine.syntax.cursor import Cursor, ParseError, ParseResult

__all__ = [
    "is_identifier_char",
    "is_identifier_start",
    "parse_identifier",
]

# str.isalpha()/isalnum() accept Unicode letters and digits; keys must not.
_IDENTIFIER_START: frozenset[str] = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz_"
)
_IDENTIFIER_CHARS: frozenset[str] = _IDENTIFIER_START | frozenset("0123456789")


def is_identifier_start(ch: str) -> bool:
    """Check if character can start an identifier ([A-Za-z_])."""
    return ch in _IDENTIFIER_START


def is_identifier_char(ch: str) -> bool:
    """Check if character can continue an identifier ([A-Za-z0-9_])."""
    return ch in _IDENTIFIER_CHARS


def parse_identifier(cursor: Cursor) -> ParseResult[str] | ParseError:
    """Parse identifier: [A-Za-z_][A-Za-z0-9_]*

    Consumes the longest match.

    Examples:
        PORT → "PORT"
        _private → "_private"
        db_url2 → "db_url2"

    Args:
        cursor: Current position in source

    Returns:
        ParseResult(identifier, new_cursor) on success,
        ParseError if no identifier starts here
    """
    if cursor.is_eof or not is_identifier_start(cursor.current):
        return ParseError.from_diagnostic(
            ErrorTemplate.expected_identifier(), cursor, expected=("A-Z", "a-z", "_")
        )

    start = cursor
    cursor = cursor.advance()
    while not cursor.is_eof and is_identifier_char(cursor.current):
        cursor = cursor.advance()

    return ParseResult(start.slice_to(cursor.pos), cursor)
