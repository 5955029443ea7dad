"""EnvLexEngine - .env parser with top-down variable interpolation.

Parses .env-style text into a flat key/value mapping. Pure: no file I/O,
no environment mutation, no process-wide state.

Public API:
    parse - Parse and resolve; returns (mapping, error)
    parse_or_raise - Parse and resolve; raises EnvSyntaxError on failure
    parse_or_fail - Alias of parse_or_raise
    parse_document - Parse only; returns the raw ParseOutcome for tooling

Exceptions:
    EnvError - Base exception class
    EnvSyntaxError - Parse errors (line, column, diagnostic)
    EnvVarError - Environment accessor errors (see envlexengine.env)

Submodules:
    envlexengine.syntax - Cursor, AST node types, EnvParser, error reporter
    envlexengine.runtime - Interpolation resolver
    envlexengine.introspection - Reference extraction and undefined-reference analysis
    envlexengine.env - os.environ accessor helpers (independent of parsing)
    envlexengine.diagnostics - Error codes, templates, and formatting
"""

import logging
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import (
    EnvError,
    EnvSyntaxError,
    EnvVarError,
    EnvVarMissingError,
    EnvVarTypeError,
)
from .runtime import resolve_entries
from .syntax import EnvParser, ParseOutcome, ParseSuccess, outcome_to_error

# Version information - Auto-populated from package metadata
try:
    __version__ = _get_version("envlexengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

logger = logging.getLogger(__name__)

__all__ = [
    "EnvError",
    "EnvSyntaxError",
    "EnvVarError",
    "EnvVarMissingError",
    "EnvVarTypeError",
    "__version__",
    "parse",
    "parse_document",
    "parse_or_fail",
    "parse_or_raise",
]


def parse_document(source: str) -> ParseOutcome:
    """Parse .env source without resolving references.

    Returns:
        ParseSuccess (check ``document.is_complete``) or ParseFailure
    """
    return EnvParser().parse(source)


def parse(source: str) -> tuple[dict[str, str] | None, EnvSyntaxError | None]:
    """Parse a .env string into a resolved mapping.

    Variable interpolation uses ``$VAR`` or ``${VAR}`` in unquoted and
    double-quoted values, resolved against previously defined keys
    (top-down). Undefined names resolve to "".

    Args:
        source: .env file content

    Returns:
        Tuple of (mapping, error):
        - (dict, None) on success
        - (None, EnvSyntaxError) on failure; ``str(error)`` is the message

    Raises:
        TypeError: If source is not a str

    Examples:
        >>> parse("PORT=3000")
        ({'PORT': '3000'}, None)
        >>> parse("A=foo\\nB=$A-bar")
        ({'A': 'foo', 'B': 'foo-bar'}, None)
        >>> _, error = parse("INVALID")
        >>> str(error)
        'Parse error at line 1, column 0: could not parse remaining input starting with: "INVALID"'
    """
    outcome = parse_document(source)
    error = outcome_to_error(outcome)
    if error is None and ParseSuccess.guard(outcome):
        return (resolve_entries(outcome.document.entries), None)
    logger.debug("Parse failed: %s", error)
    return (None, error)


def parse_or_raise(source: str) -> dict[str, str]:
    """Parse a .env string into a resolved mapping, raising on error.

    Same as :func:`parse` but raises the error instead of returning it.

    Raises:
        EnvSyntaxError: With the exact message :func:`parse` would return

    Example:
        >>> parse_or_raise("export API_KEY=secret\\nDATABASE_URL=postgres://localhost")
        {'API_KEY': 'secret', 'DATABASE_URL': 'postgres://localhost'}
    """
    result, error = parse(source)
    if error is not None:
        raise error
    assert result is not None  # noqa: S101 - parse() returns exactly one of the two
    return result


parse_or_fail = parse_or_raise
