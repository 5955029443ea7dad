""".env AST (Abstract Syntax Tree) node definitions.

A parsed value is a tuple of ValueParts: Literal text and Reference
placeholders. References are typed nodes from the moment they are parsed;
resolution walks the tuple and never re-scans strings.

Includes type guards as static methods (eliminates circular imports).

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import TypeIs

from envlexengine.diagnostics import DiagnosticCode
from envlexengine.enums import QuoteStyle
from envlexengine.syntax.cursor import ParseError, Position

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Base types
    "Span",
    # Value parts
    "Literal",
    "Reference",
    "ValuePart",
    # Document structure
    "Entry",
    "Document",
    # Parse outcomes
    "ParseSuccess",
    "ParseFailure",
    "ParseOutcome",
]

# ============================================================================
# BASE TYPES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Span:
    """Source position span.

    Tracks character offsets in source text for error reporting and tooling.

    Attributes:
        start: Starting offset (inclusive)
        end: Ending offset (exclusive)

    Example:
        Source: "PORT=3000"
        Entry span: Span(start=0, end=9)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate span invariants."""
        if self.start < 0:
            msg = f"Span start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"Span end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)


# ============================================================================
# VALUE PARTS
# ============================================================================


@dataclass(frozen=True, slots=True)
class Literal:
    """Plain text segment of a value."""

    text: str

    @staticmethod
    def guard(part: object) -> TypeIs["Literal"]:
        """Type guard for Literal.

        Example:
            if Literal.guard(part):
                part.text  # Type-safe! mypy knows part is Literal
        """
        return isinstance(part, Literal)


@dataclass(frozen=True, slots=True)
class Reference:
    """Interpolation reference: $NAME or ${NAME}

    Attributes:
        name: Referenced key
        braced: True for the ${NAME} form
        span: Location of the whole reference, '$' included (optional)
    """

    name: str
    braced: bool = False
    span: Span | None = None

    @staticmethod
    def guard(part: object) -> TypeIs["Reference"]:
        """Type guard for Reference."""
        return isinstance(part, Reference)


type ValuePart = Literal | Reference


# ============================================================================
# DOCUMENT STRUCTURE
# ============================================================================


@dataclass(frozen=True, slots=True)
class Entry:
    """One KEY=value assignment, prior to interpolation.

    Attributes:
        key: Assigned key
        value: Ordered value parts
        quote: Quoting discipline the value was written in
        exported: True if the line carried the (inert) 'export' prefix
        span: Location of the assignment, trailing comment excluded (optional)
    """

    key: str
    value: tuple[ValuePart, ...] = ()
    quote: QuoteStyle = QuoteStyle.NONE
    exported: bool = False
    span: Span | None = None

    @property
    def references(self) -> tuple[Reference, ...]:
        """Reference parts of the value, in order."""
        return tuple(part for part in self.value if Reference.guard(part))

    @property
    def raw_text(self) -> str:
        """Value text with references left unresolved as ${NAME}."""
        return "".join(
            part.text if Literal.guard(part) else f"${{{part.name}}}" for part in self.value
        )


@dataclass(frozen=True, slots=True)
class Document:
    """Ordered entries plus how far the parser got.

    Attributes:
        entries: Parsed entries in source order (duplicates kept)
        position: Position of the first unconsumed character
        remainder: Unconsumed input (empty when everything parsed)
        stop: Grammar error that halted parsing, if any
    """

    entries: tuple[Entry, ...]
    position: Position
    remainder: str = ""
    stop: ParseError | None = None

    @property
    def is_complete(self) -> bool:
        """True when all input was consumed."""
        return not self.remainder

    @property
    def keys(self) -> tuple[str, ...]:
        """Distinct keys in first-definition order."""
        return tuple(dict.fromkeys(entry.key for entry in self.entries))


# ============================================================================
# PARSE OUTCOMES
# ============================================================================


@dataclass(frozen=True, slots=True)
class ParseSuccess:
    """Assembler ran; the document may still carry a remainder."""

    document: Document

    @staticmethod
    def guard(outcome: object) -> TypeIs["ParseSuccess"]:
        """Type guard for ParseSuccess."""
        return isinstance(outcome, ParseSuccess)


@dataclass(frozen=True, slots=True)
class ParseFailure:
    """Parsing could not start or was aborted outright.

    Attributes:
        message: Grammar failure message
        line: 1-based line
        column: 0-based column
        code: Diagnostic code of the failure (optional)
        hint: Suggestion for fixing the failure (optional)
    """

    message: str
    line: int
    column: int
    code: DiagnosticCode | None = None
    hint: str | None = None

    @staticmethod
    def guard(outcome: object) -> TypeIs["ParseFailure"]:
        """Type guard for ParseFailure."""
        return isinstance(outcome, ParseFailure)


type ParseOutcome = ParseSuccess | ParseFailure
