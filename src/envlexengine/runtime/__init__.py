""".env runtime package.

Provides interpolation resolution of parsed documents.
Depends on syntax package for parsing.

Python 3.13+.
"""

from .resolver import EnvResolver, resolve_entries, resolve_value

__all__ = [
    "EnvResolver",
    "resolve_entries",
    "resolve_value",
]
