"""Enumerations for EnvLexEngine type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class QuoteStyle(StrEnum):
    """Quoting discipline of an assignment value.

    StrEnum provides automatic string conversion: str(QuoteStyle.SINGLE) == "single"
    """

    NONE = "none"
    """Unquoted value: KEY=value (references recognized)"""

    SINGLE = "single"
    """Single-quoted value: KEY='value' (everything literal)"""

    DOUBLE = "double"
    """Double-quoted value: KEY="value" (references recognized)"""

    @property
    def interpolates(self) -> bool:
        """True if $NAME and ${NAME} are references in this quoting mode."""
        return self is not QuoteStyle.SINGLE


class UndefinedReason(StrEnum):
    """Why a reference resolves to the empty string.

    StrEnum provides automatic string conversion: str(UndefinedReason.FORWARD) == "forward"
    """

    FORWARD = "forward"
    """Name is defined, but only on a later line: B=$A then A=1"""

    SELF = "self"
    """Entry references its own key before any definition: A=$A"""

    UNKNOWN = "unknown"
    """Name is never defined in the document"""


__all__ = [
    "QuoteStyle",
    "UndefinedReason",
]
