"""Reference introspection for parsed .env documents.

Answers questions tooling asks before (or instead of) resolving:
- Which names does an entry reference?
- Which references will silently resolve to "" and why?

Python 3.13+.
"""

from dataclasses import dataclass

from .diagnostics import Diagnostic, ErrorTemplate
from .enums import UndefinedReason
from .syntax.ast import Document, Entry, Reference
from .syntax.cursor import LineOffsetCache

__all__ = [
    "UndefinedReference",
    "extract_references",
    "find_undefined_references",
    "undefined_reference_diagnostics",
]


@dataclass(frozen=True, slots=True)
class UndefinedReference:
    """A reference with no strictly earlier definition."""

    key: str
    """Key of the entry containing the reference."""

    reference: Reference
    """The reference node (carries name and span)."""

    reason: UndefinedReason
    """Forward, self, or unknown."""

    @property
    def name(self) -> str:
        """Referenced name."""
        return self.reference.name


def extract_references(entry: Entry) -> tuple[str, ...]:
    """Names referenced by an entry, in order of first appearance.

    Example:
        >>> from envlexengine.syntax import parse
        >>> entry = parse('C="$A $B ${A}"').document.entries[0]
        >>> extract_references(entry)
        ('A', 'B')
    """
    return tuple(dict.fromkeys(ref.name for ref in entry.references))


def find_undefined_references(document: Document) -> tuple[UndefinedReference, ...]:
    """Find every reference that resolves to "" in this document.

    Mirrors the resolver's visibility rule: a reference sees only keys
    assigned by strictly earlier entries.

    Args:
        document: Parsed document

    Returns:
        Undefined references in source order
    """
    # Index of the last assignment of each key
    last_index = {entry.key: index for index, entry in enumerate(document.entries)}
    defined: set[str] = set()
    found: list[UndefinedReference] = []

    for index, entry in enumerate(document.entries):
        for reference in entry.references:
            if reference.name in defined:
                continue
            if reference.name == entry.key:
                reason = UndefinedReason.SELF
            elif last_index.get(reference.name, -1) > index:
                reason = UndefinedReason.FORWARD
            else:
                reason = UndefinedReason.UNKNOWN
            found.append(UndefinedReference(key=entry.key, reference=reference, reason=reason))
        defined.add(entry.key)

    return tuple(found)


def undefined_reference_diagnostics(source: str, document: Document) -> tuple[Diagnostic, ...]:
    """Warning diagnostics (with line/column spans) for undefined references.

    Args:
        source: The text the document was parsed from
        document: Parsed document

    Returns:
        One UNDEFINED_REFERENCE warning per undefined reference
    """
    cache = LineOffsetCache(source)
    diagnostics: list[Diagnostic] = []
    for undefined in find_undefined_references(document):
        span = undefined.reference.span
        source_span = cache.source_span(span.start, span.end) if span is not None else None
        diagnostics.append(
            ErrorTemplate.undefined_reference(undefined.name, undefined.key, source_span)
        )
    return tuple(diagnostics)
