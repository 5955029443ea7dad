"""Core .env parser implementation (document assembler).

This module provides the EnvParser class that strings classified lines
into a :class:`~envlexengine.syntax.ast.Document`.

Architecture:
    The parser uses an immutable cursor pattern (:class:`~envlexengine.syntax.cursor.Cursor`)
    to traverse source text. Each grammar rule in :mod:`~envlexengine.syntax.parser.rules`
    returns either a :class:`~envlexengine.syntax.cursor.ParseResult` or a
    :class:`~envlexengine.syntax.cursor.ParseError`.

Failure Model:
    Parsing stops at the first line that does not parse. The document then
    carries the entries parsed so far, the unconsumed remainder (starting
    at the first non-whitespace character of the failing line), the
    position of that character, and the ParseError that stopped it.
    A document with a non-empty remainder is not a successful parse; the
    public API in :mod:`envlexengine` reports it as an error.

Security:
    Includes configurable input size limit to prevent unbounded memory
    allocation from extremely large inputs.
"""

import logging

from envlexengine.constants import MAX_SOURCE_SIZE
from envlexengine.diagnostics import ErrorTemplate
from envlexengine.syntax.ast import Document, Entry, ParseFailure, ParseOutcome, ParseSuccess
from envlexengine.syntax.cursor import Cursor, ParseError
from envlexengine.syntax.parser.rules import parse_assignment
from envlexengine.syntax.parser.whitespace import is_comment_start, skip_blank, skip_comment

__all__ = ["EnvParser"]

logger = logging.getLogger(__name__)


class EnvParser:
    """.env parser using immutable cursor pattern.

    Design:
    - Immutable cursor prevents infinite loops (no manual guards needed)
    - Grammar failures are values, never exceptions
    - Stateless between calls: safe to share across threads

    Attributes:
        max_source_size: Maximum allowed source size in characters (default: 10 MiB)
    """

    __slots__ = ("_max_source_size",)

    def __init__(self, *, max_source_size: int | None = None) -> None:
        """Initialize parser with optional size limit.

        Args:
            max_source_size: Maximum source size in characters (default: 10 MiB).
                            Set to 0 to disable the size limit (not recommended).
        """
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )

    @property
    def max_source_size(self) -> int:
        """Maximum allowed source size in characters."""
        return self._max_source_size

    def parse(self, source: str) -> ParseOutcome:
        """Parse .env source into a Document.

        Args:
            source: .env file content

        Returns:
            ParseSuccess wrapping the Document (check ``document.is_complete``),
            or ParseFailure when the source exceeds max_source_size

        Raises:
            TypeError: If source is not a str

        Example:
            >>> outcome = EnvParser().parse("export PORT=3000")
            >>> outcome.document.entries[0].key
            'PORT'
            >>> outcome.document.is_complete
            True
        """
        if not isinstance(source, str):
            msg = f"source must be str, not {type(source).__name__}"
            raise TypeError(msg)

        if self._max_source_size > 0 and len(source) > self._max_source_size:
            diagnostic = ErrorTemplate.source_too_large(len(source), self._max_source_size)
            logger.warning("Refusing to parse .env source: %s", diagnostic.message)
            return ParseFailure(
                message=diagnostic.message,
                line=1,
                column=0,
                code=diagnostic.code,
                hint=diagnostic.hint,
            )

        cursor = Cursor(source, 0)
        entries: list[Entry] = []

        while True:
            # Blank lines and indentation
            cursor = skip_blank(cursor)
            if cursor.is_eof:
                break

            # Full-line comment
            if is_comment_start(cursor):
                cursor = skip_comment(cursor).skip_line_end()
                continue

            result = parse_assignment(cursor)
            if isinstance(result, ParseError):
                return ParseSuccess(self._stopped(entries, cursor, result))

            entries.append(result.value)
            cursor = result.cursor

        logger.debug("Parsed %d .env entries", len(entries))
        return ParseSuccess(
            Document(entries=tuple(entries), position=cursor.compute_position())
        )

    @staticmethod
    def _stopped(entries: list[Entry], line_start: Cursor, error: ParseError) -> Document:
        """Build the partial document for a line that failed to parse."""
        position = line_start.compute_position()
        logger.debug(
            "Stopped parsing at line %d, column %d: %s",
            position.line,
            position.column,
            error.format_error(),
        )
        return Document(
            entries=tuple(entries),
            position=position,
            remainder=line_start.remainder,
            stop=error,
        )
