"""
Shared random source for all generators.

One module-level random.Random instance backs every draw, so seeding it
makes a whole generation run reproducible. Shrinking never reads it.

Feature flag: ARBITRARY_SEED=<int> seeds the source at import.
"""

from __future__ import annotations

import logging
import os
import random as _random
from typing import Optional

logger = logging.getLogger(__name__)

ARBITRARY_SEED: Optional[str] = os.environ.get("ARBITRARY_SEED")

_rng = _random.Random()


def seed(value: Optional[int] = None) -> None:
    """Reseed the shared source. None draws fresh entropy from the OS."""
    logger.debug("seeding random source with %r", value)
    _rng.seed(value)


def sample(lo: int, hi: int) -> int:
    """Uniform integer in [lo, hi], both ends inclusive."""
    return _rng.randint(lo, hi)


def sample_float(lo: float, hi: float) -> float:
    """Uniform real in [lo, hi)."""
    return _rng.random() * (hi - lo) + lo


def getstate():
    return _rng.getstate()


def setstate(state) -> None:
    _rng.setstate(state)


if ARBITRARY_SEED is not None:
    seed(int(ARBITRARY_SEED))
