"""Error reporter: turns parse outcomes into user-facing messages.

Message shapes:
    Parse error at line L, column C: could not parse remaining input starting with: "<preview>"
    Parse error at line L, column C: <grammar failure message>

Lines are 1-based, columns 0-based (offset from the line start), matching
:class:`~envlexengine.syntax.cursor.Position`.

The preview is the first ERROR_PREVIEW_LENGTH characters of the remainder,
stripped of surrounding whitespace, with "..." appended when it is shorter
than the remainder. It is double-quoted with backslash escapes so that
quotes and line breaks in the input stay visible.
"""

from envlexengine.constants import ERROR_PREVIEW_ELLIPSIS, ERROR_PREVIEW_LENGTH
from envlexengine.diagnostics import Diagnostic, EnvSyntaxError, ErrorTemplate, SourceSpan
from envlexengine.syntax.ast import Document, ParseFailure, ParseOutcome

__all__ = [
    "format_outcome_error",
    "outcome_to_error",
    "preview_remainder",
    "quote_preview",
]

_ESCAPES: dict[str, str] = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def quote_preview(text: str) -> str:
    """Double-quote text, escaping backslashes, quotes, and control characters.

    Example:
        >>> print(quote_preview('KEY="unclosed'))
        "KEY=\\"unclosed"
    """
    chars: list[str] = []
    for ch in text:
        if ch in _ESCAPES:
            chars.append(_ESCAPES[ch])
        elif ord(ch) < 0x20 or ord(ch) == 0x7F:
            chars.append(f"\\x{ord(ch):02X}")
        else:
            chars.append(ch)
    return '"' + "".join(chars) + '"'


def preview_remainder(remainder: str, length: int = ERROR_PREVIEW_LENGTH) -> str:
    """Truncated, stripped preview of unconsumed input (unquoted).

    Example:
        >>> preview_remainder("INVALID")
        'INVALID'
        >>> preview_remainder("THIS LINE IS NOT AN ASSIGNMENT")
        'THIS LINE IS NOT AN...'
    """
    preview = remainder[:length].strip()
    if len(preview) < len(remainder):
        return preview + ERROR_PREVIEW_ELLIPSIS
    return preview


def _remainder_message(document: Document) -> str:
    position = document.position
    preview = quote_preview(preview_remainder(document.remainder))
    return (
        f"Parse error at line {position.line}, column {position.column}: "
        f"{ErrorTemplate.unrecognized_line().message} starting with: {preview}"
    )


def format_outcome_error(outcome: ParseOutcome) -> str | None:
    """Return the error message for an outcome, or None if it is a success.

    A success whose document has a non-empty remainder is an error.
    """
    error = outcome_to_error(outcome)
    return error.message if error is not None else None


def outcome_to_error(outcome: ParseOutcome) -> EnvSyntaxError | None:
    """Return an EnvSyntaxError for a failed outcome, or None if it is a success.

    The error's diagnostic names the grammar rule that stopped the parser
    (UNTERMINATED_QUOTE, MALFORMED_REFERENCE, ...); for lines that match no
    rule at all it is UNRECOGNIZED_LINE.
    """
    if isinstance(outcome, ParseFailure):
        message = f"Parse error at line {outcome.line}, column {outcome.column}: {outcome.message}"
        diagnostic = None
        if outcome.code is not None:
            diagnostic = Diagnostic(
                code=outcome.code,
                message=outcome.message,
                span=SourceSpan(start=0, end=0, line=outcome.line, column=outcome.column),
                hint=outcome.hint,
            )
        return EnvSyntaxError(
            message, line=outcome.line, column=outcome.column, diagnostic=diagnostic
        )

    document = outcome.document
    if document.is_complete:
        return None

    if document.stop is not None:
        diagnostic = document.stop.to_diagnostic()
    else:
        diagnostic = ErrorTemplate.unrecognized_line()
    return EnvSyntaxError(
        _remainder_message(document),
        line=document.position.line,
        column=document.position.column,
        diagnostic=diagnostic,
    )
