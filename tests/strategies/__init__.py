"""Hypothesis strategies for EnvLexEngine property-based testing.

Strategies are organized by domain:

- env: identifiers, values, assignment lines, and whole .env documents

Usage:
    from tests.strategies import env_documents, env_identifiers
    from tests.strategies.env import literal_assignments
"""

from .env import (
    # Constants
    DOUBLE_QUOTED_SAFE_CHARS,
    IDENTIFIER_FIRST_CHARS,
    IDENTIFIER_REST_CHARS,
    SINGLE_QUOTED_SAFE_CHARS,
    UNQUOTED_SAFE_CHARS,
    # Strategies
    double_quoted_bodies,
    env_documents,
    env_identifiers,
    literal_assignments,
    single_quoted_bodies,
    unquoted_values,
)

__all__ = [
    "DOUBLE_QUOTED_SAFE_CHARS",
    "IDENTIFIER_FIRST_CHARS",
    "IDENTIFIER_REST_CHARS",
    "SINGLE_QUOTED_SAFE_CHARS",
    "UNQUOTED_SAFE_CHARS",
    "double_quoted_bodies",
    "env_documents",
    "env_identifiers",
    "literal_assignments",
    "single_quoted_bodies",
    "unquoted_values",
]
