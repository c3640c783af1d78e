"""
Collaborator engines consumed by the primitive arbitraries:

    - random_source: seeded sample / sample_float
    - generator:     Generator, bless, constant, leaf generators
    - shrink:        Shrinker, bless, noop, isomap, array, nearray
"""

from . import random_source, generator, shrink

__all__ = ["random_source", "generator", "shrink"]
