"""
Shrink engine.

A Shrinker maps a failing value to a finite, ordered list of simpler
candidates. Shrinkers are pure: the same input always yields the same list,
and no candidate list depends on earlier calls. The empty list means the
value is already minimal.

Feature flag: ARBITRARY_CHECK_ISOMAP=1 makes every isomap shrinker verify
to(from_(u)) == u before shrinking u.
"""

from __future__ import annotations

import logging
import os
from typing import Callable, Generic, List, Sequence, TypeVar

from arbitrary.errors import IsomorphismError

logger = logging.getLogger(__name__)

# Feature flag: set ARBITRARY_CHECK_ISOMAP=1 to assert isomorphism round trips
ARBITRARY_CHECK_ISOMAP_ENABLED = os.environ.get("ARBITRARY_CHECK_ISOMAP", "0") == "1"

T = TypeVar("T")
U = TypeVar("U")


class Shrinker(Generic[T]):
    """A function from value to candidate list, with isomap."""

    __slots__ = ("_fn",)

    def __init__(self, fn: Callable[[T], Sequence[T]]):
        self._fn = fn

    def __call__(self, value: T) -> List[T]:
        return list(self._fn(value))

    def isomap(
        self,
        to: Callable[[T], U],
        from_: Callable[[U], T],
        check: bool | None = None,
    ) -> "Shrinker[U]":
        """
        Retarget this shrinker from T to U.

        A U counterexample is converted back with from_, shrunk as a T, and
        every candidate converted forward with to. Candidates that convert
        back to u itself are dropped. Correct only when
        to(from_(u)) == u for every u the search can reach; with check
        (default: the ARBITRARY_CHECK_ISOMAP flag) that is asserted on each
        call.
        """
        if check is None:
            check = ARBITRARY_CHECK_ISOMAP_ENABLED

        def _shrink(u: U) -> List[U]:
            t = from_(u)
            if check:
                round_trip = to(t)
                if round_trip != u:
                    logger.debug("isomap round trip failed: %r -> %r -> %r", u, t, round_trip)
                    raise IsomorphismError(
                        f"isomap round trip failed: to(from_({u!r})) == {round_trip!r}"
                    )
            # to() may be lossy (float rounding, microsecond dates)
            return [v for v in map(to, self._fn(t)) if v != u]

        return Shrinker(_shrink)

    def __repr__(self):
        return f"Shrinker({self._fn!r})"


def bless(fn: Callable[[T], Sequence[T]]) -> Shrinker[T]:
    """Lift a plain candidate function into a Shrinker."""
    if isinstance(fn, Shrinker):
        return fn
    return Shrinker(fn)


noop: Shrinker = Shrinker(lambda value: [])


def _shrink_list(elem: Shrinker[T], xs: List[T], non_empty: bool) -> List[List[T]]:
    out: List[List[T]] = []
    can_drop = not (non_empty and len(xs) == 1)
    for i, x in enumerate(xs):
        prefix, rest = xs[:i], xs[i + 1:]
        if can_drop:
            out.append(prefix + rest)
        out.extend(prefix + [y] + rest for y in elem(x))
    return out


def array(elem: Shrinker[T]) -> Shrinker[List[T]]:
    """
    Lift an element shrinker to lists.

    Walking left to right, each position contributes the list with that
    element removed, then the list with that element replaced by each of
    its own candidates.
    """
    return Shrinker(lambda xs: _shrink_list(elem, list(xs), False))


def nearray(elem: Shrinker[T]) -> Shrinker[List[T]]:
    """Like array(), but no candidate is ever the empty list."""
    return Shrinker(lambda xs: _shrink_list(elem, list(xs), True))


__all__ = [
    "Shrinker",
    "bless",
    "noop",
    "array",
    "nearray",
    "ARBITRARY_CHECK_ISOMAP_ENABLED",
]
