"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Syntax errors (parser failures)
        2000-2999: Input errors (limits enforced before parsing)
        3000-3999: Resolution notes (interpolation)
        4000-4999: Environment accessor errors
    """

    # Syntax errors (1000-1999)
    UNEXPECTED_EOF = 1001
    UNTERMINATED_QUOTE = 1002
    MALFORMED_REFERENCE = 1003
    UNRECOGNIZED_LINE = 1004
    EXPECTED_IDENTIFIER = 1005
    EXPECTED_EQUALS = 1006
    UNEXPECTED_TRAILING_CONTENT = 1007

    # Input errors (2000-2999)
    SOURCE_TOO_LARGE = 2001

    # Resolution notes (3000-3999)
    UNDEFINED_REFERENCE = 3001

    # Environment accessor errors (4000-4999)
    ENV_VAR_MISSING = 4001
    ENV_VAR_INVALID_INTEGER = 4002
    ENV_VAR_INVALID_FLOAT = 4003
    ENV_VAR_INVALID_BOOLEAN = 4004


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source code location for error reporting.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (0-indexed, offset from the line start)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, line is
                less than 1 (lines are 1-indexed), or column is negative
                (columns are 0-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 0:
            msg = f"SourceSpan.column must be >= 0 (0-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Provides rich error information for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None for non-syntax errors)
        hint: Suggestion for fixing the error
        variable_name: Environment variable involved (accessor errors)
        expected_type: Expected type for a converted value (accessor errors)
        received_value: Raw value that failed conversion (accessor errors)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    variable_name: str | None = None
    expected_type: str | None = None
    received_value: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[UNTERMINATED_QUOTE]: Unterminated double-quoted value
              --> line 3, column 4
              = help: Add the closing '"' before the end of the line

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
