"""Tests for the interpolation resolver."""

from __future__ import annotations

import logging

import pytest

from envlexengine.enums import QuoteStyle
from envlexengine.runtime import EnvResolver, resolve_entries, resolve_value
from envlexengine.syntax import Entry, Literal, Reference


def _entry(key: str, *parts: Literal | Reference) -> Entry:
    return Entry(key=key, value=parts, quote=QuoteStyle.NONE)


class TestResolveValue:
    """resolve_value() concatenates parts."""

    def test_literals_only(self) -> None:
        """Literals are copied verbatim."""
        assert resolve_value((Literal("a"), Literal("b")), {}) == "ab"

    def test_reference_lookup(self) -> None:
        """References read from the given mapping."""
        parts = (Literal("x="), Reference("X"), Literal(";"))

        assert resolve_value(parts, {"X": "1"}) == "x=1;"

    def test_missing_reference(self) -> None:
        """Absent names contribute the empty string."""
        assert resolve_value((Reference("NOPE"),), {}) == ""

    def test_empty_parts(self) -> None:
        """No parts is the empty string."""
        assert resolve_value((), {"A": "1"}) == ""

    def test_value_containing_dollar_is_not_rescanned(self) -> None:
        """Substituted text is final."""
        assert resolve_value((Reference("A"),), {"A": "$B", "B": "x"}) == "$B"


class TestEnvResolver:
    """EnvResolver.resolve() folds entries top-down."""

    def test_chained(self) -> None:
        """Each entry sees all strictly earlier entries."""
        entries = [
            _entry("A", Literal("foo")),
            _entry("B", Reference("A"), Literal("-bar")),
            _entry("C", Reference("B"), Literal("-baz")),
        ]

        assert EnvResolver().resolve(entries) == {
            "A": "foo",
            "B": "foo-bar",
            "C": "foo-bar-baz",
        }

    def test_forward_and_self_references(self) -> None:
        """Forward and self references resolve to ''."""
        entries = [
            _entry("B", Reference("A")),
            _entry("A", Literal("x"), Reference("A")),
        ]

        assert resolve_entries(entries) == {"B": "", "A": "x"}

    def test_last_write_wins(self) -> None:
        """Later entries overwrite; intermediate references see the old value."""
        entries = [
            _entry("A", Literal("1")),
            _entry("B", Reference("A")),
            _entry("A", Literal("2")),
        ]

        assert resolve_entries(entries) == {"A": "2", "B": "1"}

    def test_fresh_mapping_per_call(self) -> None:
        """The resolver holds no state between calls."""
        resolver = EnvResolver()
        first = resolver.resolve([_entry("A", Literal("1"))])
        second = resolver.resolve([_entry("B", Reference("A"))])

        assert first == {"A": "1"}
        assert second == {"B": ""}
        assert first is not second

    def test_accepts_generator(self) -> None:
        """Any iterable of entries works."""
        entries = (_entry(key, Literal(key.lower())) for key in ("X", "Y"))

        assert resolve_entries(entries) == {"X": "x", "Y": "y"}

    def test_logs_undefined_and_redefined(self, caplog: pytest.LogCaptureFixture) -> None:
        """Undefined references and redefinitions are debug-logged."""
        entries = [_entry("A", Reference("MISSING")), _entry("A", Literal("2"))]

        with caplog.at_level(logging.DEBUG, logger="envlexengine.runtime"):
            resolve_entries(entries)

        assert "Reference '$MISSING' in 'A' is undefined" in caplog.text
        assert "Key 'A' redefined" in caplog.text
