"""Immutable cursor infrastructure for type-safe parsing.

Implements the immutable cursor pattern for zero-`None` parsing.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Line:column computed on-demand (O(n) only for errors and spans)

Position Convention:
    - Lines are 1-indexed
    - Columns are 0-indexed (offset from the start of the line)
    - Offsets are 0-indexed character positions in the source

    Every error message produced by this package uses this convention.

Line Ending Support:
    - LF (Unix, \\n): Fully supported
    - CRLF (Windows, \\r\\n): Supported (\\n is the line delimiter)
    - CR-only (Classic Mac, \\r): NOT a line delimiter; a lone CR is an
      ordinary character and never starts a new line, so positions and
      line splitting always agree
"""

from dataclasses import dataclass, field

from envlexengine.diagnostics import Diagnostic, DiagnosticCode, ErrorTemplate, SourceSpan

__all__ = ["Cursor", "LineOffsetCache", "ParseError", "ParseResult", "Position"]

# Inline whitespace inside a line: space and tab.
_INLINE_WHITESPACE: tuple[str, ...] = (" ", "\t")

# Whitespace skipped between lines and before a key.
_BLANK: tuple[str, ...] = (" ", "\t", "\n", "\r")


@dataclass(frozen=True, slots=True)
class Position:
    """Resolved source position.

    Attributes:
        line: Line number (1-indexed)
        column: Column number (0-indexed, offset from the line start)
        offset: Character offset in the source (0-indexed)
    """

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> cursor.current
        'h'
        >>> new_cursor = cursor.advance()
        >>> new_cursor.current
        'e'
        >>> cursor.current  # Original unchanged (immutability)
        'h'
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input.

        Use this in while loops: `while not cursor.is_eof:`
        """
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Returns:
            Current character at position

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            diagnostic = ErrorTemplate.unexpected_eof(self.pos)
            raise EOFError(diagnostic.message)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Returns None ONLY when peeking beyond EOF.
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped at EOF).

        Example:
            >>> cursor = Cursor("hello", 0)
            >>> cursor.advance(2).pos
            2
            >>> cursor.advance(10).pos
            5
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos (exclusive).

        Store the start cursor, advance, then slice:

            >>> start = Cursor("hello world", 0)
            >>> end = start.advance(5)
            >>> start.slice_to(end.pos)
            'hello'
        """
        return self.source[self.pos : end_pos]

    @property
    def remainder(self) -> str:
        """All source text from the current position to EOF."""
        return self.source[self.pos :]

    @property
    def is_line_end(self) -> bool:
        """True at EOF, at LF, or at the CR of a CRLF pair.

        A lone CR is an ordinary character.
        """
        if self.is_eof:
            return True
        ch = self.source[self.pos]
        return ch == "\n" or (ch == "\r" and self.peek(1) == "\n")

    def skip_inline_whitespace(self) -> "Cursor":
        """Skip spaces and tabs on the current line.

        Example:
            >>> Cursor(" \\t x", 0).skip_inline_whitespace().pos
            3
        """
        c = self
        while not c.is_eof and c.current in _INLINE_WHITESPACE:
            c = c.advance()
        return c

    def skip_whitespace(self) -> "Cursor":
        """Skip whitespace characters (space, tab, newline, carriage return).

        Example:
            >>> cursor = Cursor("  \\n\\r\\t hello", 0)
            >>> cursor.skip_whitespace().current
            'h'
        """
        c = self
        while not c.is_eof and c.current in _BLANK:
            c = c.advance()
        return c

    def skip_to_line_end(self) -> "Cursor":
        """Advance to the next line ending (not consumed).

        Example:
            >>> cursor = Cursor("hello\\r\\nworld", 0)
            >>> cursor.skip_to_line_end().pos
            5
        """
        cursor = self
        while not cursor.is_line_end:
            cursor = cursor.advance()
        return cursor

    def skip_line_end(self) -> "Cursor":
        """Skip an LF or CRLF line ending.

        Returns:
            New cursor advanced past the line ending, or unchanged if not at line end.
        """
        if self.is_eof:
            return self
        if self.current == "\n":
            return self.advance()
        if self.current == "\r" and self.peek(1) == "\n":
            return self.advance(2)
        return self

    def compute_position(self) -> Position:
        """Compute line, column, and offset for current position.

        Performance:
            O(n) where n = current position.
            Use LineOffsetCache when many positions are needed.

        Example:
            >>> source = "line1\\nline2\\nline3"
            >>> Cursor(source, 0).compute_position()
            Position(line=1, column=0, offset=0)
            >>> Cursor(source, 8).compute_position()  # Middle of line2
            Position(line=2, column=2, offset=8)
        """
        line = self.source.count("\n", 0, self.pos) + 1
        last_newline = self.source.rfind("\n", 0, self.pos)
        col = self.pos - last_newline - 1 if last_newline >= 0 else self.pos
        return Position(line=line, column=col, offset=self.pos)


class LineOffsetCache:
    """Cached line offset computation for efficient position lookups.

    Precomputes line start offsets in O(n) single pass, then provides
    O(log n) lookups using binary search. Use this when you need
    positions for many offsets in the same source (e.g. every reference
    in a document).

    Example:
        >>> cache = LineOffsetCache("line1\\nline2\\nline3")
        >>> cache.get_position(0)
        Position(line=1, column=0, offset=0)
        >>> cache.get_position(8)
        Position(line=2, column=2, offset=8)

    Thread Safety:
        Thread-safe. Internal state is only set during __init__.
    """

    __slots__ = ("_offsets", "_source_len")

    def __init__(self, source: str) -> None:
        """Build line offset cache from source in O(n)."""
        offsets = [0]
        for i, char in enumerate(source):
            if char == "\n":
                offsets.append(i + 1)
        self._offsets: tuple[int, ...] = tuple(offsets)
        self._source_len = len(source)

    def get_position(self, pos: int) -> Position:
        """Get position for a character offset using binary search.

        Offsets outside the source are clamped to [0, len(source)].
        """
        if pos < 0:
            pos = 0
        elif pos > self._source_len:
            pos = self._source_len

        # Line index = index of largest offset <= pos
        left, right = 0, len(self._offsets) - 1
        while left < right:
            mid = (left + right + 1) // 2
            if self._offsets[mid] <= pos:
                left = mid
            else:
                right = mid - 1

        return Position(line=left + 1, column=pos - self._offsets[left], offset=pos)

    def source_span(self, start: int, end: int) -> SourceSpan:
        """Build a diagnostics SourceSpan for [start, end)."""
        position = self.get_position(start)
        return SourceSpan(start=start, end=end, line=position.line, column=position.column)


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parser result containing parsed value and new cursor position.

    Pattern:
        Every grammar rule has signature:
            def parse_foo(cursor: Cursor) -> ParseResult[Foo] | ParseError

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> result = ParseResult("h", cursor.advance())
        >>> result.value
        'h'
        >>> result.cursor.pos
        1
    """

    value: T
    cursor: Cursor


@dataclass(frozen=True, slots=True)
class ParseError:
    """Parse error with location and cause.

    Design:
        - Stores cursor at error point (for line:column)
        - Diagnostic code naming the failed grammar rule
        - Expected tokens tuple (immutable for better errors)

    Example:
        >>> cursor = Cursor('KEY="value', 4)
        >>> error = ParseError(
        ...     "Unterminated double-quoted value",
        ...     cursor,
        ...     DiagnosticCode.UNTERMINATED_QUOTE,
        ...     expected=('"',),
        ... )
        >>> error.format_error()
        '1:4: Unterminated double-quoted value (expected: \\'"\\')'
    """

    message: str
    cursor: Cursor
    code: DiagnosticCode
    expected: tuple[str, ...] = field(default_factory=tuple)
    hint: str | None = None

    @property
    def position(self) -> Position:
        """Resolved position of the error."""
        return self.cursor.compute_position()

    @classmethod
    def from_diagnostic(
        cls, diagnostic: Diagnostic, cursor: Cursor, expected: tuple[str, ...] = ()
    ) -> "ParseError":
        """Build a ParseError from an ErrorTemplate diagnostic."""
        return cls(
            message=diagnostic.message,
            cursor=cursor,
            code=diagnostic.code,
            expected=expected,
            hint=diagnostic.hint,
        )

    def to_diagnostic(self) -> Diagnostic:
        """Convert to a structured Diagnostic with a resolved span."""
        position = self.position
        span = SourceSpan(
            start=position.offset,
            end=position.offset,
            line=position.line,
            column=position.column,
        )
        return Diagnostic(code=self.code, message=self.message, span=span, hint=self.hint)

    def format_error(self) -> str:
        """Format error with line:column.

        Example:
            >>> cursor = Cursor("A=1\\nB=${", 6)
            >>> error = ParseError("Malformed", cursor, DiagnosticCode.MALFORMED_REFERENCE)
            >>> error.format_error()
            '2:2: Malformed'
        """
        position = self.position
        error_msg = f"{position.line}:{position.column}: {self.message}"

        if self.expected:
            expected_str = ", ".join(f"'{e}'" for e in self.expected)
            error_msg += f" (expected: {expected_str})"

        return error_msg
