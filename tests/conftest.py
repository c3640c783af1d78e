"""
Pytest configuration for arbitrary tests.

Provides:
- Hypothesis configuration for deterministic fuzzing
- A fixture that seeds the shared random source and restores it afterwards
"""

import os
import pytest

from arbitrary.engine import random_source

# =============================================================================
# Hypothesis Configuration
# =============================================================================
# - print_blob=True makes failures easy to reproduce
# - derandomize=True in CI so shrink-property runs are repeatable

try:
    from hypothesis import settings

    settings.register_profile(
        "default",
        print_blob=True,
        derandomize=False,
    )

    settings.register_profile(
        "ci",
        print_blob=True,
        derandomize=True,
    )

    profile = os.environ.get("HYPOTHESIS_PROFILE", "default")
    settings.load_profile(profile)

except ImportError:
    pass  # hypothesis not installed, skip configuration


# =============================================================================
# Shared Fixtures
# =============================================================================

@pytest.fixture
def seeded():
    """Seed the shared random source with a fixed value; restore on teardown."""
    state = random_source.getstate()
    random_source.seed(20141120)
    yield
    random_source.setstate(state)


SIZES = [0, 1, 2, 5, 10, 50, 100, 1000]
