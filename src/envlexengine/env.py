"""Environment variable accessor helpers.

Independent of the parser: these functions read ``os.environ`` by default,
or any ``Mapping[str, str]`` passed as ``environ=`` - including the dict
returned by :func:`envlexengine.parse`. Compose the two explicitly:

    >>> from envlexengine import parse_or_raise
    >>> from envlexengine.env import get_int
    >>> values = parse_or_raise("PORT=3000")
    >>> get_int("PORT", environ=values)
    3000

Missing variables raise EnvVarMissingError unless a default is given;
unconvertible values raise EnvVarTypeError. A default is returned as-is
(never converted).

Python 3.13+. Zero external dependencies.
"""

import os
from collections.abc import Callable, Mapping
from typing import Final

from .constants import DEFAULT_LIST_SEPARATOR, FALSY_VALUES, TRUTHY_VALUES
from .diagnostics import EnvVarMissingError, EnvVarTypeError, ErrorTemplate

__all__ = [
    "get_bool",
    "get_float",
    "get_int",
    "get_list",
    "get_optional",
    "get_required",
]


class _Missing:
    """Sentinel type for 'no default given'."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "<required>"


_REQUIRED: Final = _Missing()


def _lookup(name: str, environ: Mapping[str, str] | None) -> str | None:
    source = os.environ if environ is None else environ
    return source.get(name)


def _require(name: str, environ: Mapping[str, str] | None) -> str:
    value = _lookup(name, environ)
    if value is None:
        raise EnvVarMissingError(ErrorTemplate.env_var_missing(name), name=name)
    return value


def _convert[T](
    name: str,
    default: T | _Missing,
    environ: Mapping[str, str] | None,
    expected_type: str,
    converter: Callable[[str], T],
) -> T:
    raw = _lookup(name, environ)
    if raw is None:
        if isinstance(default, _Missing):
            raise EnvVarMissingError(ErrorTemplate.env_var_missing(name), name=name)
        return default
    try:
        return converter(raw.strip())
    except ValueError as e:
        raise EnvVarTypeError(
            ErrorTemplate.env_var_invalid(name, raw, expected_type), name=name, value=raw
        ) from e


def _to_bool(raw: str) -> bool:
    lowered = raw.lower()
    if lowered in TRUTHY_VALUES:
        return True
    if lowered in FALSY_VALUES:
        return False
    msg = f"not a boolean: {raw!r}"
    raise ValueError(msg)


def get_optional(
    name: str, default: str | None = None, *, environ: Mapping[str, str] | None = None
) -> str | None:
    """Return the variable's value, or default if it is not set.

    An empty string counts as set.
    """
    value = _lookup(name, environ)
    return default if value is None else value


def get_required(name: str, *, environ: Mapping[str, str] | None = None) -> str:
    """Return the variable's value.

    Raises:
        EnvVarMissingError: If the variable is not set
    """
    return _require(name, environ)


def get_int(
    name: str,
    default: int | _Missing = _REQUIRED,
    *,
    environ: Mapping[str, str] | None = None,
) -> int:
    """Return the variable as an int (base 10, surrounding whitespace ignored).

    Raises:
        EnvVarMissingError: If unset and no default is given
        EnvVarTypeError: If the value is not an integer
    """
    return _convert(name, default, environ, "integer", int)


def get_float(
    name: str,
    default: float | _Missing = _REQUIRED,
    *,
    environ: Mapping[str, str] | None = None,
) -> float:
    """Return the variable as a float.

    Raises:
        EnvVarMissingError: If unset and no default is given
        EnvVarTypeError: If the value is not a number
    """
    return _convert(name, default, environ, "float", float)


def get_bool(
    name: str,
    default: bool | _Missing = _REQUIRED,
    *,
    environ: Mapping[str, str] | None = None,
) -> bool:
    """Return the variable as a bool.

    Accepts 1/true/yes/on and 0/false/no/off, case-insensitively.

    Raises:
        EnvVarMissingError: If unset and no default is given
        EnvVarTypeError: If the value is not a recognized boolean
    """
    return _convert(name, default, environ, "boolean", _to_bool)


def get_list(
    name: str,
    separator: str = DEFAULT_LIST_SEPARATOR,
    default: list[str] | _Missing = _REQUIRED,
    *,
    environ: Mapping[str, str] | None = None,
) -> list[str]:
    """Return the variable split on separator, items stripped, empties dropped.

    Example:
        >>> get_list("HOSTS", environ={"HOSTS": "a, b,,c "})
        ['a', 'b', 'c']

    Raises:
        EnvVarMissingError: If unset and no default is given
    """
    raw = _lookup(name, environ)
    if raw is None:
        if isinstance(default, _Missing):
            raise EnvVarMissingError(ErrorTemplate.env_var_missing(name), name=name)
        return default
    return [item.strip() for item in raw.split(separator) if item.strip()]
