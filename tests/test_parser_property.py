"""Property-based tests for parse().

Generated documents are reference-free, so the expected mapping is known
up front; interpolation properties use generated literal values.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given, settings
from hypothesis import strategies as st

from envlexengine import parse
from envlexengine.syntax import EnvParser, ParseSuccess
from tests.strategies import (
    env_documents,
    env_identifiers,
    literal_assignments,
    single_quoted_bodies,
    unquoted_values,
)


class TestParseProperties:
    """Invariants over generated input."""

    @given(env_documents())
    def test_documents_parse_to_expected_mapping(self, case: tuple[str, dict[str, str]]) -> None:
        """Reference-free documents resolve to their literal values."""
        source, expected = case
        event(f"entries={len(expected)}")

        assert parse(source) == (expected, None)

    @given(literal_assignments())
    def test_single_assignment(self, case: tuple[str, str, str]) -> None:
        """One generated line yields one key."""
        line, key, value = case
        event(f"exported={line.lstrip().startswith('export')}")

        assert parse(line) == ({key: value}, None)

    @given(st.text(max_size=60))
    def test_idempotent(self, source: str) -> None:
        """parse() is a pure function of its input."""
        first = parse(source)
        second = parse(source)
        event(f"ok={first[1] is None}")

        assert first == second

    @given(st.text(max_size=60))
    def test_exactly_one_of_mapping_or_error(self, source: str) -> None:
        """Results are (dict, None) or (None, error), never both."""
        result, error = parse(source)

        assert (result is None) != (error is None)
        if error is not None:
            assert str(error).startswith(f"Parse error at line {error.line}, column {error.column}: ")

    @given(st.text(max_size=60))
    def test_remainder_is_suffix_of_source(self, source: str) -> None:
        """The remainder is always the unconsumed tail of the input."""
        outcome = EnvParser().parse(source)

        assert isinstance(outcome, ParseSuccess)
        document = outcome.document
        assert source.endswith(document.remainder)
        if document.remainder:
            assert document.position.offset == len(source) - len(document.remainder)

    @given(env_identifiers(), unquoted_values)
    def test_reference_copies_value(self, key: str, value: str) -> None:
        """$KEY and ${KEY} reproduce an earlier unquoted value."""
        other = key + "_COPY"
        source = f"{key}={value}\n{other}=$" + "{" + key + "}\n"

        assert parse(source) == ({key: value, other: value}, None)

    @given(env_identifiers(), single_quoted_bodies)
    def test_single_quotes_are_verbatim(self, key: str, body: str) -> None:
        """Single-quoted bodies survive unchanged, '$' included."""
        assert parse(f"{key}='{body}'") == ({key: body}, None)


@pytest.mark.fuzz
class TestParseFuzz:
    """Intensive runs over arbitrary text (run with: pytest -m fuzz)."""

    @settings(max_examples=5000)
    @given(st.text())
    def test_never_raises(self, source: str) -> None:
        """Any str input returns a result instead of raising."""
        result, error = parse(source)

        assert (result is None) != (error is None)
