"""Shared pytest setup for the .env parser tests.

Hypothesis profiles size the property tests over generated .env documents
(tests/test_parser_property.py, strategies in tests/strategies/):

    dev      300 examples per test, random seeds
    ci       50 examples, derandomized so failures reproduce across runs
    verbose  100 examples with Hypothesis progress output

The profile comes from HYPOTHESIS_PROFILE when set to one of the names
above, else "ci" when CI=true, else "dev".

The arbitrary-text parse runs in TestParseFuzz are marked ``fuzz`` and only
run when selected with ``pytest -m fuzz``.
"""

import os

import pytest
from hypothesis import Verbosity, settings

settings.register_profile("dev", max_examples=300)
settings.register_profile("ci", max_examples=50, derandomize=True, print_blob=True)
settings.register_profile("verbose", max_examples=100, verbosity=Verbosity.verbose)

_PROFILES: tuple[str, ...] = ("dev", "ci", "verbose")


def _profile_name() -> str:
    requested = os.environ.get("HYPOTHESIS_PROFILE", "")
    if requested in _PROFILES:
        return requested
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_profile_name())


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip the ``fuzz`` parse runs unless ``-m fuzz`` selects them."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return

    skip_fuzz = pytest.mark.skip(reason="arbitrary-text parse run; select with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
