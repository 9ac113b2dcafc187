"""Pytest configuration for the LexiChoice test suite.

Hypothesis profiles:
- dev: local development, 500 examples
- ci: CI runs, 50 derandomized examples
- verbose: debugging, 100 examples with progress output

Profile selection:
- HYPOTHESIS_PROFILE env var, if it names a profile
- "ci" when CI=true
- "dev" otherwise

Tests marked @pytest.mark.fuzz only run with `pytest -m fuzz`.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from lexichoice.locale_utils import get_babel_locale

# =============================================================================
# HYPOTHESIS PROFILES
# =============================================================================

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]

settings.register_profile("dev", max_examples=500, phases=_PHASES, derandomize=False)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=_PHASES,
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=_PHASES,
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FUZZ MARKER
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker."""
    config.addinivalue_line(
        "markers",
        "fuzz: Intensive property tests (excluded from normal test runs)",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip fuzz-marked tests unless `-m fuzz` was given."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# SHARED FIXTURES
# =============================================================================


@pytest.fixture
def clean_babel_cache() -> None:
    """Start a test with an empty Babel locale cache."""
    get_babel_locale.cache_clear()
