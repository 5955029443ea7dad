"""Shared constants for EnvLexEngine.

This module provides centralized configuration constants used across
syntax, runtime, and diagnostics packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Input limits: DoS prevention via size constraints
- Error reporting: Preview sizing for unconsumed-input messages
- Accessor helpers: Accepted spellings for boolean values

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Input limits
    "MAX_SOURCE_SIZE",
    # Error reporting
    "ERROR_PREVIEW_LENGTH",
    "ERROR_PREVIEW_ELLIPSIS",
    # Accessor helpers
    "TRUTHY_VALUES",
    "FALSY_VALUES",
    "DEFAULT_LIST_SEPARATOR",
]

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum source size in characters (10 MiB).
# Prevents unbounded memory allocation from absurdly large .env inputs.
# Real .env files are a few kilobytes; anything near this is not configuration.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# ERROR REPORTING
# ============================================================================

# Number of characters of unconsumed input shown in parse error messages.
# The slice is taken first and stripped afterwards.
ERROR_PREVIEW_LENGTH: int = 20

# Appended to the preview when it is shorter than the full remainder.
ERROR_PREVIEW_ELLIPSIS: str = "..."

# ============================================================================
# ACCESSOR HELPERS
# ============================================================================

# Case-insensitive spellings accepted by envlexengine.env.get_bool().
TRUTHY_VALUES: frozenset[str] = frozenset({"1", "true", "yes", "on"})
FALSY_VALUES: frozenset[str] = frozenset({"0", "false", "no", "off"})

# Separator used by envlexengine.env.get_list() when none is given.
DEFAULT_LIST_SEPARATOR: str = ","
