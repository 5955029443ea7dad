"""Tests for reference introspection."""

from __future__ import annotations

from envlexengine.diagnostics import DiagnosticCode
from envlexengine.enums import UndefinedReason
from envlexengine.introspection import (
    extract_references,
    find_undefined_references,
    undefined_reference_diagnostics,
)
from envlexengine.syntax import Document, ParseSuccess, parse


def _document(source: str) -> Document:
    outcome = parse(source)
    assert isinstance(outcome, ParseSuccess)
    return outcome.document


class TestExtractReferences:
    """extract_references() lists names in first-appearance order."""

    def test_deduplicates(self) -> None:
        """Repeated names appear once."""
        entry = _document('C="$A $B ${A}"').entries[0]

        assert extract_references(entry) == ("A", "B")

    def test_single_quoted_has_none(self) -> None:
        """Single-quoted values never reference anything."""
        entry = _document("C='$A ${B}'").entries[0]

        assert extract_references(entry) == ()


class TestFindUndefinedReferences:
    """find_undefined_references() mirrors the resolver's visibility rule."""

    def test_all_defined(self) -> None:
        """Backward references are fine."""
        assert find_undefined_references(_document("A=1\nB=$A\nC=${B}$A")) == ()

    def test_reasons(self) -> None:
        """Forward, self, and unknown references are classified."""
        document = _document("B=$A\nA=$A\nC=$NOPE")
        found = find_undefined_references(document)

        assert [(u.key, u.name, u.reason) for u in found] == [
            ("B", "A", UndefinedReason.FORWARD),
            ("A", "A", UndefinedReason.SELF),
            ("C", "NOPE", UndefinedReason.UNKNOWN),
        ]

    def test_forward_chain_in_large_document(self) -> None:
        """Each entry referencing the next is forward; the last is unknown."""
        count = 5000
        source = "\n".join(f"K{i}=$K{i + 1}" for i in range(count))
        found = find_undefined_references(_document(source))

        assert len(found) == count
        assert all(u.reason is UndefinedReason.FORWARD for u in found[:-1])
        assert found[-1].reason is UndefinedReason.UNKNOWN

    def test_forward_to_repeated_key(self) -> None:
        """Forward and self classification hold when a key is assigned twice."""
        found = find_undefined_references(_document("A=$B\nB=$B\nB=2"))

        assert [(u.key, u.name, u.reason) for u in found] == [
            ("A", "B", UndefinedReason.FORWARD),
            ("B", "B", UndefinedReason.SELF),
        ]

    def test_redefinition_is_defined(self) -> None:
        """A=$A after an earlier A is not undefined."""
        assert find_undefined_references(_document("A=1\nA=$A:2")) == ()

    def test_each_occurrence_reported(self) -> None:
        """Every undefined occurrence is reported with its span."""
        found = find_undefined_references(_document("X=$U$U"))

        assert len(found) == 2
        spans = [u.reference.span for u in found]
        assert [(s.start, s.end) for s in spans if s is not None] == [(2, 4), (4, 6)]


class TestUndefinedReferenceDiagnostics:
    """Warnings with resolved line/column spans."""

    def test_diagnostics(self) -> None:
        """One warning per undefined reference, positioned at the '$'."""
        source = "A=1\nB=\"x ${LATER}\"\nLATER=2"
        diagnostics = undefined_reference_diagnostics(source, _document(source))

        assert len(diagnostics) == 1
        diagnostic = diagnostics[0]
        assert diagnostic.code is DiagnosticCode.UNDEFINED_REFERENCE
        assert diagnostic.severity == "warning"
        assert diagnostic.span is not None
        assert (diagnostic.span.line, diagnostic.span.column) == (2, 5)
        assert "'B' references '$LATER'" in diagnostic.message
