"""Tests for environment variable accessor helpers."""

from __future__ import annotations

import pytest

from envlexengine import EnvVarError, parse_or_raise
from envlexengine.diagnostics import DiagnosticCode, EnvVarMissingError, EnvVarTypeError
from envlexengine.env import (
    get_bool,
    get_float,
    get_int,
    get_list,
    get_optional,
    get_required,
)

ENV = {
    "NAME": "app",
    "EMPTY": "",
    "PORT": " 8080 ",
    "RATIO": "0.25",
    "DEBUG": "Yes",
    "OFF": "off",
    "HOSTS": "a, b,,c ",
    "BAD": "eleven",
}


class TestGetOptionalRequired:
    """String accessors."""

    def test_optional_present(self) -> None:
        """Set variables are returned as-is."""
        assert get_optional("NAME", environ=ENV) == "app"

    def test_optional_empty_counts_as_set(self) -> None:
        """An empty string is a value."""
        assert get_optional("EMPTY", "fallback", environ=ENV) == ""

    def test_optional_default(self) -> None:
        """Missing variables return the default."""
        assert get_optional("MISSING", environ=ENV) is None
        assert get_optional("MISSING", "x", environ=ENV) == "x"

    def test_required_present(self) -> None:
        """Set variables are returned."""
        assert get_required("NAME", environ=ENV) == "app"

    def test_required_missing(self) -> None:
        """Missing variables raise EnvVarMissingError."""
        with pytest.raises(EnvVarMissingError) as exc_info:
            get_required("MISSING", environ=ENV)

        error = exc_info.value
        assert error.name == "MISSING"
        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.ENV_VAR_MISSING
        assert "Environment variable 'MISSING' is not set" in str(error)

    def test_missing_is_key_error(self) -> None:
        """Mapping-style callers can catch KeyError."""
        with pytest.raises(KeyError):
            get_required("MISSING", environ=ENV)

    def test_reads_os_environ_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without environ=, os.environ is used."""
        monkeypatch.setenv("ENVLEX_TEST_VALUE", "from-os")
        monkeypatch.delenv("ENVLEX_TEST_MISSING", raising=False)

        assert get_required("ENVLEX_TEST_VALUE") == "from-os"
        assert get_optional("ENVLEX_TEST_MISSING") is None


class TestConverters:
    """Typed accessors."""

    def test_int_strips_whitespace(self) -> None:
        """Surrounding whitespace is ignored."""
        assert get_int("PORT", environ=ENV) == 8080

    def test_int_default_not_converted(self) -> None:
        """Defaults are returned unchanged."""
        assert get_int("MISSING", 3, environ=ENV) == 3

    def test_int_invalid(self) -> None:
        """Unconvertible values raise EnvVarTypeError with the raw value."""
        with pytest.raises(EnvVarTypeError) as exc_info:
            get_int("BAD", environ=ENV)

        error = exc_info.value
        assert error.name == "BAD"
        assert error.value == "eleven"
        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.ENV_VAR_INVALID_INTEGER
        assert isinstance(error.__cause__, ValueError)

    def test_type_error_is_value_error(self) -> None:
        """EnvVarTypeError is a ValueError and an EnvVarError."""
        with pytest.raises(ValueError):
            get_float("BAD", environ=ENV)
        with pytest.raises(EnvVarError):
            get_float("BAD", environ=ENV)

    def test_int_missing(self) -> None:
        """Required by default."""
        with pytest.raises(EnvVarMissingError):
            get_int("MISSING", environ=ENV)

    def test_float(self) -> None:
        """Floats parse with float()."""
        assert get_float("RATIO", environ=ENV) == 0.25
        assert get_float("MISSING", 1.5, environ=ENV) == 1.5

    def test_float_invalid_code(self) -> None:
        """Invalid floats carry their own code."""
        with pytest.raises(EnvVarTypeError) as exc_info:
            get_float("NAME", environ=ENV)

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.ENV_VAR_INVALID_FLOAT

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("1", True), ("TRUE", True), ("on", True), ("0", False), ("No", False), ("off", False)],
    )
    def test_bool_spellings(self, raw: str, expected: bool) -> None:
        """Boolean spellings are case-insensitive."""
        assert get_bool("FLAG", environ={"FLAG": raw}) is expected

    def test_bool_from_mapping(self) -> None:
        """Values in the shared mapping convert."""
        assert get_bool("DEBUG", environ=ENV) is True
        assert get_bool("OFF", environ=ENV) is False
        assert get_bool("MISSING", False, environ=ENV) is False

    def test_bool_invalid(self) -> None:
        """Unknown spellings are rejected."""
        with pytest.raises(EnvVarTypeError) as exc_info:
            get_bool("NAME", environ=ENV)

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.ENV_VAR_INVALID_BOOLEAN


class TestGetList:
    """get_list() splitting."""

    def test_split_strip_drop_empty(self) -> None:
        """Items are stripped and empty items dropped."""
        assert get_list("HOSTS", environ=ENV) == ["a", "b", "c"]

    def test_custom_separator(self) -> None:
        """Any separator string works."""
        assert get_list("P", ":", environ={"P": "/bin:/usr/bin"}) == ["/bin", "/usr/bin"]

    def test_empty_value(self) -> None:
        """An empty variable is an empty list."""
        assert get_list("EMPTY", environ=ENV) == []

    def test_default_and_missing(self) -> None:
        """Default when missing, error when required."""
        assert get_list("MISSING", default=["x"], environ=ENV) == ["x"]
        with pytest.raises(EnvVarMissingError):
            get_list("MISSING", environ=ENV)


class TestComposition:
    """Accessors compose with the parser through plain imports."""

    def test_parse_then_read(self) -> None:
        """A parsed mapping can be passed as environ."""
        values = parse_or_raise("PORT=3000\nDEBUG=true\nHOSTS=$PORT,4000")

        assert get_int("PORT", environ=values) == 3000
        assert get_bool("DEBUG", environ=values) is True
        assert get_list("HOSTS", environ=values) == ["3000", "4000"]
