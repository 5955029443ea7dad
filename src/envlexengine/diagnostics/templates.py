"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    # =========================================================================
    # SYNTAX ERRORS (1000-1999)
    # =========================================================================

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Unexpected end of input.

        Args:
            position: The position where EOF was encountered

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = f"Unexpected EOF at position {position}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=msg,
            span=None,
            hint="Check for unclosed quotes or an incomplete assignment",
        )

    @staticmethod
    def unterminated_quote(quote: str, span: SourceSpan | None = None) -> Diagnostic:
        """Quoted value has no closing quote on its line.

        Args:
            quote: The opening quote character (' or ")
            span: Location of the opening quote

        Returns:
            Diagnostic for UNTERMINATED_QUOTE
        """
        kind = "single" if quote == "'" else "double"
        msg = f"Unterminated {kind}-quoted value"
        return Diagnostic(
            code=DiagnosticCode.UNTERMINATED_QUOTE,
            message=msg,
            span=span,
            hint=f"Add the closing {quote} before the end of the line",
        )

    @staticmethod
    def malformed_reference(detail: str, span: SourceSpan | None = None) -> Diagnostic:
        """Braced reference ${...} is not well formed.

        Args:
            detail: What was wrong with the reference
            span: Location of the '$' that opened the reference

        Returns:
            Diagnostic for MALFORMED_REFERENCE
        """
        msg = f"Malformed variable reference: {detail}"
        return Diagnostic(
            code=DiagnosticCode.MALFORMED_REFERENCE,
            message=msg,
            span=span,
            hint="Use ${NAME} where NAME matches [A-Za-z_][A-Za-z0-9_]*",
        )

    @staticmethod
    def expected_identifier(span: SourceSpan | None = None) -> Diagnostic:
        """Line does not start with a valid key.

        Args:
            span: Location where the key was expected

        Returns:
            Diagnostic for EXPECTED_IDENTIFIER
        """
        return Diagnostic(
            code=DiagnosticCode.EXPECTED_IDENTIFIER,
            message="Expected key (must start with a letter or '_')",
            span=span,
            hint="Keys match [A-Za-z_][A-Za-z0-9_]*",
        )

    @staticmethod
    def expected_equals(key: str, span: SourceSpan | None = None) -> Diagnostic:
        """Key is not followed by '='.

        Args:
            key: The key that was parsed
            span: Location where '=' was expected

        Returns:
            Diagnostic for EXPECTED_EQUALS
        """
        msg = f"Expected '=' after key '{key}'"
        return Diagnostic(
            code=DiagnosticCode.EXPECTED_EQUALS,
            message=msg,
            span=span,
            hint="Assignments have the form KEY=value with no space before '='",
        )

    @staticmethod
    def unexpected_trailing_content(span: SourceSpan | None = None) -> Diagnostic:
        """Value is followed by something other than a comment.

        Args:
            span: Location of the unexpected content

        Returns:
            Diagnostic for UNEXPECTED_TRAILING_CONTENT
        """
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_TRAILING_CONTENT,
            message="Unexpected content after value",
            span=span,
            hint="Quote values that contain whitespace",
        )

    @staticmethod
    def unrecognized_line(span: SourceSpan | None = None) -> Diagnostic:
        """Line matches no rule of the grammar.

        Args:
            span: Location of the line

        Returns:
            Diagnostic for UNRECOGNIZED_LINE
        """
        return Diagnostic(
            code=DiagnosticCode.UNRECOGNIZED_LINE,
            message="could not parse remaining input",
            span=span,
            hint="Lines must be blank, a # comment, or KEY=value",
        )

    # =========================================================================
    # INPUT ERRORS (2000-2999)
    # =========================================================================

    @staticmethod
    def source_too_large(size: int, max_size: int) -> Diagnostic:
        """Source exceeds the configured size limit.

        Args:
            size: Actual source size in characters
            max_size: Configured maximum

        Returns:
            Diagnostic for SOURCE_TOO_LARGE
        """
        msg = f"source size ({size:,} characters) exceeds maximum ({max_size:,} characters)"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_TOO_LARGE,
            message=msg,
            span=None,
            hint="Configure max_source_size in EnvParser to increase the limit",
        )

    # =========================================================================
    # RESOLUTION NOTES (3000-3999)
    # =========================================================================

    @staticmethod
    def undefined_reference(name: str, key: str, span: SourceSpan | None = None) -> Diagnostic:
        """Reference to a name with no earlier definition.

        Args:
            name: Referenced name
            key: Key of the entry containing the reference
            span: Location of the reference

        Returns:
            Diagnostic for UNDEFINED_REFERENCE (warning severity)
        """
        msg = f"'{key}' references '${name}' before it is defined; it resolves to ''"
        return Diagnostic(
            code=DiagnosticCode.UNDEFINED_REFERENCE,
            message=msg,
            span=span,
            hint=f"Define '{name}' on an earlier line",
            severity="warning",
        )

    # =========================================================================
    # ENVIRONMENT ACCESSOR ERRORS (4000-4999)
    # =========================================================================

    @staticmethod
    def env_var_missing(name: str) -> Diagnostic:
        """Required environment variable not set.

        Args:
            name: Environment variable name

        Returns:
            Diagnostic for ENV_VAR_MISSING
        """
        msg = f"Environment variable '{name}' is not set"
        return Diagnostic(
            code=DiagnosticCode.ENV_VAR_MISSING,
            message=msg,
            hint=f"Set '{name}' or pass a default",
            variable_name=name,
        )

    @staticmethod
    def env_var_invalid(name: str, value: str, expected_type: str) -> Diagnostic:
        """Environment variable cannot be converted.

        Args:
            name: Environment variable name
            value: Raw value that failed conversion
            expected_type: One of "integer", "float", "boolean"

        Returns:
            Diagnostic for ENV_VAR_INVALID_INTEGER / _FLOAT / _BOOLEAN
        """
        code = {
            "integer": DiagnosticCode.ENV_VAR_INVALID_INTEGER,
            "float": DiagnosticCode.ENV_VAR_INVALID_FLOAT,
            "boolean": DiagnosticCode.ENV_VAR_INVALID_BOOLEAN,
        }[expected_type]
        msg = f"Environment variable '{name}' is not a valid {expected_type}: {value!r}"
        return Diagnostic(
            code=code,
            message=msg,
            variable_name=name,
            expected_type=expected_type,
            received_value=value,
        )
