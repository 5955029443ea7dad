"""Interpolation resolver - converts parsed entries to a flat mapping.

Resolution is a single left-to-right fold over the entries. Each entry sees
exactly the values committed by strictly earlier entries, so:

    A=foo           → A = "foo"
    B=$A-bar        → B = "foo-bar"     (chained)
    C=$D            → C = ""            (forward reference)
    A=$A!           → A = "foo!"        (redefinition sees the old value)

Missing names resolve to the empty string; this is never an error.

Python 3.13+. Zero external dependencies.

Thread Safety:
    Each call builds its own mapping; the resolver holds no state.
"""

import logging
from collections.abc import Iterable, Mapping

from envlexengine.syntax import Entry, Literal, ValuePart

__all__ = ["EnvResolver", "resolve_entries", "resolve_value"]

logger = logging.getLogger(__name__)


def resolve_value(parts: Iterable[ValuePart], env: Mapping[str, str]) -> str:
    """Concatenate value parts, substituting references from env.

    Args:
        parts: Literal and Reference parts of one value
        env: Values committed so far

    Returns:
        Resolved string; absent names contribute ""
    """
    chunks: list[str] = []
    for part in parts:
        if Literal.guard(part):
            chunks.append(part.text)
        else:
            chunks.append(env.get(part.name, ""))
    return "".join(chunks)


class EnvResolver:
    """Resolves parsed entries to a key → string mapping.

    Returns a fresh dict per call. Later entries for the same key
    overwrite earlier ones (last write wins), but the earlier value is
    what intermediate references saw.
    """

    __slots__ = ()

    def resolve(self, entries: Iterable[Entry]) -> dict[str, str]:
        """Fold entries into a resolved mapping.

        Args:
            entries: Entries in source order

        Returns:
            Mapping from key to fully resolved value

        Example:
            >>> from envlexengine.syntax import parse
            >>> doc = parse("A=1\\nB=$A\\nA=2").document
            >>> EnvResolver().resolve(doc.entries)
            {'A': '2', 'B': '1'}
        """
        env: dict[str, str] = {}
        for entry in entries:
            for reference in entry.references:
                if reference.name not in env:
                    logger.debug(
                        "Reference '$%s' in '%s' is undefined at this point; using ''",
                        reference.name,
                        entry.key,
                    )
            if entry.key in env:
                logger.debug("Key '%s' redefined; later value wins", entry.key)
            env[entry.key] = resolve_value(entry.value, env)
        return env


def resolve_entries(entries: Iterable[Entry]) -> dict[str, str]:
    """Resolve entries with a default EnvResolver.

    Convenience function for EnvResolver().resolve().
    """
    return EnvResolver().resolve(entries)
