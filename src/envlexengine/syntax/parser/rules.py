"""Grammar rules for .env assignments.

Grammar:
    assignment  ::= ("export" blank_inline)? identifier "=" value tail
    value       ::= unquoted | "'" single_body "'" | '"' double_body '"'
    unquoted    ::= (char - (blank_inline | "#" | line_end) | reference)*
    single_body ::= (char - ("'" | line_end))*
    double_body ::= (char - ('"' | line_end) | reference)*
    reference   ::= "$" identifier | "${" identifier "}"
    tail        ::= blank_inline? ("#" comment_text)? line_end

Every rule takes an immutable Cursor and returns either
ParseResult[T] (value plus the cursor after it) or ParseError.
Rules never raise on malformed input.
"""

from envlexengine.diagnostics import ErrorTemplate
from envlexengine.enums import QuoteStyle
from envlexengine.syntax.ast import Entry, Literal, Reference, Span, ValuePart
from envlexengine.syntax.cursor import Cursor, ParseError, ParseResult
from envlexengine.syntax.parser.primitives import is_identifier_start, parse_identifier
from envlexengine.syntax.parser.whitespace import skip_blank_inline, skip_line_tail

__all__ = [
    "parse_assignment",
    "parse_double_quoted",
    "parse_export_prefix",
    "parse_reference",
    "parse_single_quoted",
    "parse_unquoted",
    "parse_value",
]

_EXPORT_KEYWORD: str = "export"

# Characters that end an unquoted value (line ends are checked separately).
# A lone CR is not a line end, so it ends the value and fails the line tail.
_UNQUOTED_TERMINATORS: tuple[str, ...] = (" ", "\t", "#", "\r")

_QUOTE_STYLES: dict[str, QuoteStyle] = {
    "'": QuoteStyle.SINGLE,
    '"': QuoteStyle.DOUBLE,
}


class _PartsBuilder:
    """Accumulates value parts, coalescing adjacent literal text."""

    __slots__ = ("_parts", "_text")

    def __init__(self) -> None:
        self._parts: list[ValuePart] = []
        self._text: list[str] = []

    def add_text(self, text: str) -> None:
        self._text.append(text)

    def add_reference(self, reference: Reference) -> None:
        self._flush()
        self._parts.append(reference)

    def build(self) -> tuple[ValuePart, ...]:
        self._flush()
        return tuple(self._parts)

    def _flush(self) -> None:
        if self._text:
            self._parts.append(Literal("".join(self._text)))
            self._text.clear()


# ============================================================================
# LINE CLASSIFIER
# ============================================================================


def parse_export_prefix(cursor: Cursor) -> ParseResult[bool]:
    """Strip an optional 'export' keyword followed by spaces or tabs.

    'export' is only a keyword when whitespace follows it, so
    ``export=1`` and ``exported=1`` assign ordinary keys.

    Returns:
        ParseResult(True, cursor after the whitespace) if stripped,
        ParseResult(False, cursor) unchanged otherwise
    """
    keyword_end = cursor.advance(len(_EXPORT_KEYWORD))
    if cursor.slice_to(keyword_end.pos) == _EXPORT_KEYWORD and keyword_end.peek() in (" ", "\t"):
        return ParseResult(True, skip_blank_inline(keyword_end))
    return ParseResult(False, cursor)


# ============================================================================
# INTERPOLATION TAGGER
# ============================================================================


def parse_reference(cursor: Cursor) -> ParseResult[Reference | None] | ParseError:
    """Parse $NAME or ${NAME} at a '$'.

    A '$' followed by neither '{' nor an identifier start is plain text:
    the result value is None and the cursor is unchanged.

    Args:
        cursor: Position of the '$'

    Returns:
        ParseResult(Reference, cursor after it) for a reference,
        ParseResult(None, cursor) for a literal '$',
        ParseError (MALFORMED_REFERENCE, at the '$') for a bad ${...}
    """
    start = cursor
    after_dollar = cursor.advance()

    if after_dollar.is_eof:
        return ParseResult(None, start)

    if after_dollar.current == "{":
        ident = parse_identifier(after_dollar.advance())
        if isinstance(ident, ParseError):
            return ParseError.from_diagnostic(
                ErrorTemplate.malformed_reference("expected identifier after '${'"),
                start,
                expected=("A-Z", "a-z", "_"),
            )
        closing = ident.cursor
        if closing.is_eof or closing.current != "}":
            return ParseError.from_diagnostic(
                ErrorTemplate.malformed_reference(f"missing '}}' after '${{{ident.value}'"),
                start,
                expected=("}",),
            )
        end = closing.advance()
        return ParseResult(
            Reference(ident.value, braced=True, span=Span(start.pos, end.pos)), end
        )

    if is_identifier_start(after_dollar.current):
        ident = parse_identifier(after_dollar)
        if isinstance(ident, ParseError):  # pragma: no cover - start char already checked
            return ident
        return ParseResult(
            Reference(ident.value, span=Span(start.pos, ident.cursor.pos)), ident.cursor
        )

    return ParseResult(None, start)


def _consume_dollar(
    cursor: Cursor, builder: _PartsBuilder
) -> Cursor | ParseError:
    """Handle a '$' inside an interpolating value."""
    result = parse_reference(cursor)
    if isinstance(result, ParseError):
        return result
    if result.value is None:
        builder.add_text("$")
        return cursor.advance()
    builder.add_reference(result.value)
    return result.cursor


# ============================================================================
# VALUE GRAMMAR
# ============================================================================


def parse_unquoted(cursor: Cursor) -> ParseResult[tuple[ValuePart, ...]] | ParseError:
    """Parse an unquoted value up to whitespace, '#', or line end.

    References are recognized. An empty value is allowed (``KEY=``).
    """
    builder = _PartsBuilder()
    while not cursor.is_line_end and cursor.current not in _UNQUOTED_TERMINATORS:
        if cursor.current == "$":
            step = _consume_dollar(cursor, builder)
            if isinstance(step, ParseError):
                return step
            cursor = step
        else:
            builder.add_text(cursor.current)
            cursor = cursor.advance()
    return ParseResult(builder.build(), cursor)


def parse_single_quoted(cursor: Cursor) -> ParseResult[tuple[ValuePart, ...]] | ParseError:
    """Parse '...' with every character literal.

    Args:
        cursor: Position of the opening quote

    Returns:
        ParseResult(parts, cursor after closing quote), or
        ParseError (UNTERMINATED_QUOTE, at the opening quote)
    """
    opening = cursor
    body = cursor.advance()
    end = body
    while not end.is_line_end and end.current != "'":
        end = end.advance()

    if end.is_line_end:
        return ParseError.from_diagnostic(
            ErrorTemplate.unterminated_quote("'"), opening, expected=("'",)
        )

    text = body.slice_to(end.pos)
    parts: tuple[ValuePart, ...] = (Literal(text),) if text else ()
    return ParseResult(parts, end.advance())


def parse_double_quoted(cursor: Cursor) -> ParseResult[tuple[ValuePart, ...]] | ParseError:
    """Parse "..." with reference recognition.

    Args:
        cursor: Position of the opening quote

    Returns:
        ParseResult(parts, cursor after closing quote), or
        ParseError (UNTERMINATED_QUOTE at the opening quote,
        MALFORMED_REFERENCE at the offending '$')
    """
    opening = cursor
    builder = _PartsBuilder()
    cursor = cursor.advance()
    while not cursor.is_line_end:
        ch = cursor.current
        if ch == '"':
            return ParseResult(builder.build(), cursor.advance())
        if ch == "$":
            step = _consume_dollar(cursor, builder)
            if isinstance(step, ParseError):
                return step
            cursor = step
        else:
            builder.add_text(ch)
            cursor = cursor.advance()

    return ParseError.from_diagnostic(
        ErrorTemplate.unterminated_quote('"'), opening, expected=('"',)
    )


def parse_value(
    cursor: Cursor,
) -> ParseResult[tuple[tuple[ValuePart, ...], QuoteStyle]] | ParseError:
    """Select the value mode from the character after '=' and parse it."""
    if not cursor.is_eof and cursor.current in _QUOTE_STYLES:
        style = _QUOTE_STYLES[cursor.current]
        if style is QuoteStyle.SINGLE:
            result = parse_single_quoted(cursor)
        else:
            result = parse_double_quoted(cursor)
    else:
        style = QuoteStyle.NONE
        result = parse_unquoted(cursor)

    if isinstance(result, ParseError):
        return result
    return ParseResult((result.value, style), result.cursor)


# ============================================================================
# ASSIGNMENT
# ============================================================================


def parse_assignment(cursor: Cursor) -> ParseResult[Entry] | ParseError:
    """Parse one assignment line, consuming its trailing comment and line end.

    Args:
        cursor: First non-whitespace character of the line

    Returns:
        ParseResult(Entry, cursor at the start of the next line), or
        ParseError describing the first rule that failed
    """
    start = cursor
    export = parse_export_prefix(cursor)

    ident = parse_identifier(export.cursor)
    if isinstance(ident, ParseError):
        return ident

    equals = ident.cursor
    if equals.is_eof or equals.current != "=":
        return ParseError.from_diagnostic(
            ErrorTemplate.expected_equals(ident.value), equals, expected=("=",)
        )

    value = parse_value(equals.advance())
    if isinstance(value, ParseError):
        return value
    parts, style = value.value

    tail = skip_line_tail(value.cursor)
    if isinstance(tail, ParseError):
        return tail

    entry = Entry(
        key=ident.value,
        value=parts,
        quote=style,
        exported=export.value,
        span=Span(start.pos, value.cursor.pos),
    )
    return ParseResult(entry, tail.cursor)
