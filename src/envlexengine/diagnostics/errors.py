"""EnvLexEngine exception hierarchy with structured diagnostics.

All exceptions can store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class EnvError(Exception):
    """Base exception for all EnvLexEngine errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize EnvError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class EnvSyntaxError(EnvError):
    """.env syntax error.

    Returned (not raised) by ``parse()``; raised by ``parse_or_raise()``.
    ``str(error)`` is always the formatted ``Parse error at line L, column C: ...``
    message, while ``diagnostic`` says which grammar rule stopped the parser.

    Attributes:
        message: Formatted parse error message
        line: 1-based line where parsing stopped
        column: 0-based column where parsing stopped
        diagnostic: Structured cause (UNTERMINATED_QUOTE, MALFORMED_REFERENCE, ...)
    """

    def __init__(
        self,
        message: str,
        *,
        line: int,
        column: int,
        diagnostic: Diagnostic | None = None,
    ) -> None:
        """Initialize EnvSyntaxError.

        Args:
            message: Formatted parse error message
            line: 1-based line number
            column: 0-based column number
            diagnostic: Optional structured cause
        """
        super().__init__(message)
        self.diagnostic = diagnostic
        self.message = message
        self.line = line
        self.column = column

    @property
    def code(self) -> DiagnosticCode | None:
        """Diagnostic code of the underlying cause, if known."""
        return self.diagnostic.code if self.diagnostic is not None else None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EnvSyntaxError):
            return NotImplemented
        return (self.message, self.line, self.column, self.diagnostic) == (
            other.message,
            other.line,
            other.column,
            other.diagnostic,
        )

    def __hash__(self) -> int:
        return hash((self.message, self.line, self.column))


class EnvVarError(EnvError):
    """Error reading a value through the environment accessor helpers.

    Attributes:
        name: Environment variable name
    """

    def __init__(self, message: str | Diagnostic, *, name: str) -> None:
        """Initialize EnvVarError.

        Args:
            message: Error message string OR Diagnostic object
            name: Environment variable name
        """
        super().__init__(message)
        self.name = name


class EnvVarMissingError(EnvVarError, KeyError):
    """Required environment variable is not set.

    Also a KeyError so mapping-style callers can catch it naturally.
    """

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0]) if self.args else ""


class EnvVarTypeError(EnvVarError, ValueError):
    """Environment variable is set but cannot be converted.

    Attributes:
        value: The raw string value that failed conversion
    """

    def __init__(self, message: str | Diagnostic, *, name: str, value: str) -> None:
        """Initialize EnvVarTypeError.

        Args:
            message: Error message string OR Diagnostic object
            name: Environment variable name
            value: Raw value that failed conversion
        """
        super().__init__(message, name=name)
        self.value = value
