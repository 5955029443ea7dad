"""Whitespace and comment handling for the .env parser.

blank_inline ::= (" " | "\\t")+
line_end     ::= "\\r\\n" | "\\n" | EOF
comment      ::= "#" (not line_end)*
"""

from envlexengine.diagnostics import ErrorTemplate
from envlexengine.syntax.cursor import Cursor, ParseError, ParseResult

__all__ = [
    "is_comment_start",
    "skip_blank",
    "skip_blank_inline",
    "skip_comment",
    "skip_line_tail",
]


def skip_blank_inline(cursor: Cursor) -> Cursor:
    """Skip spaces and tabs without crossing a line end."""
    return cursor.skip_inline_whitespace()


def skip_blank(cursor: Cursor) -> Cursor:
    """Skip blank lines and leading whitespace (spaces, tabs, CR, LF).

    Design:
        Immutable cursor ensures termination.
    """
    return cursor.skip_whitespace()


def is_comment_start(cursor: Cursor) -> bool:
    """True if the cursor sits on '#'."""
    return not cursor.is_eof and cursor.current == "#"


def skip_comment(cursor: Cursor) -> Cursor:
    """Skip a '#' comment up to (not including) the line end.

    No-op if the cursor is not at '#'.
    """
    if not is_comment_start(cursor):
        return cursor
    return cursor.skip_to_line_end()


def skip_line_tail(cursor: Cursor) -> ParseResult[None] | ParseError:
    """Consume what may follow a value: blanks, optional comment, line end.

    tail ::= blank_inline? comment? line_end

    Args:
        cursor: Position right after a value

    Returns:
        ParseResult(None, cursor past the line end) on success,
        ParseError if anything else follows the value on this line
    """
    cursor = skip_comment(skip_blank_inline(cursor))
    if not cursor.is_line_end:
        return ParseError.from_diagnostic(ErrorTemplate.unexpected_trailing_content(), cursor)
    return ParseResult(None, cursor.skip_line_end())
