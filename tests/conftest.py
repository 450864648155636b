"""Pytest configuration for the combilex test suite.

Hypothesis profiles (example counts are set here and nowhere else):
- dev: 500 examples, the default for local runs
- ci: 50 derandomized examples, selected when CI=true
- verbose: 100 examples with per-example output

HYPOTHESIS_PROFILE=<name> overrides the automatic choice.

Tests marked ``fuzz`` (tests/fuzz/) compose random parser trees and are
slow; they only run when requested with ``pytest -m fuzz``.
"""

import os

import pytest
from hypothesis import Verbosity, settings

# =============================================================================
# HYPOTHESIS PROFILES
# =============================================================================

_PROFILES = {
    "dev": {"max_examples": 500},
    "ci": {"max_examples": 50, "derandomize": True, "print_blob": True},
    "verbose": {"max_examples": 100, "verbosity": Verbosity.verbose},
}

for _name, _options in _PROFILES.items():
    settings.register_profile(_name, **_options)


def _select_profile() -> str:
    requested = os.environ.get("HYPOTHESIS_PROFILE")
    if requested in _PROFILES:
        return requested
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_select_profile())


# =============================================================================
# FUZZ MARKER
# =============================================================================


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless the marker expression selects them."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return

    skip_fuzz = pytest.mark.skip(reason="fuzz test; run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
