"""
Numeric arbitraries: integer, nat, number and the fixed-width aliases.

integer and number accept bounds the way range() does:

    integer()            size hint decides the range [-size, size]
    integer(maxsize)     [-maxsize, maxsize]
    integer(lo, hi)      lo + |x| for x in [-(hi - lo), hi - lo]

The two-bound form reuses the symmetric shrinker through isomap, so the
sign of the underlying value is lost: x and -x both map to lo + |x|.
Generated values stay in [lo, hi]. For floats, lo + |x| can round back to
the value being shrunk; isomap drops such candidates.
"""

from __future__ import annotations

import functools
from typing import Callable, List, Optional

from arbitrary import show
from arbitrary.core.arbitrary import Arbitrary, extend_with_default
from arbitrary.engine import generator, random_source, shrink
from arbitrary.utils import div2

# Floats at or below this magnitude are treated as already minimal
FLOAT_SHRINK_EPSILON = 1e-6


def numeric(impl: Callable[..., Arbitrary]) -> Callable[..., Arbitrary]:
    """Give a maxsize-only implementation the (), (max,) and (min, max) call shapes."""

    @functools.wraps(impl)
    def constructor(*bounds):
        if len(bounds) == 2:
            minsize, maxsize = bounds

            def to(x):
                return abs(x) + minsize

            def from_(x):
                return x - minsize

            return impl(maxsize - minsize).smap(to, from_)
        if len(bounds) == 1:
            return impl(bounds[0])
        if not bounds:
            return impl()
        raise TypeError(f"{impl.__name__}() takes at most 2 bounds ({len(bounds)} given)")

    return constructor


# ---------------------------------------------------------------------------
# Shrink algorithms
# ---------------------------------------------------------------------------

def shrink_integer(i: int) -> List[int]:
    """
    0 first, then magnitudes climbing from |i| // 2 towards |i| in halving
    steps, each offered with both signs. O(log |i|) candidates.
    """
    i = abs(i)
    if i == 0:
        return []
    out = [0]
    j = div2(i)
    k = max(j, 1)
    while j < i:
        out.append(j)
        out.append(-j)
        k = max(div2(k), 1)
        j += k
    return out


def shrink_nat(n: int) -> List[int]:
    """Same halving walk as shrink_integer, non-negative only."""
    out = []
    j = div2(n)
    k = max(j, 1)
    while j < n:
        out.append(j)
        k = max(div2(k), 1)
        j += k
    return out


def shrink_number(x: float) -> List[float]:
    if abs(x) > FLOAT_SHRINK_EPSILON:
        return [0, x / 2, -x / 2]
    return []


# ---------------------------------------------------------------------------
# Arbitraries
# ---------------------------------------------------------------------------

def _integer(maxsize: Optional[int] = None) -> Arbitrary[int]:
    """Integers in [-size, size]."""

    def _gen(size: int) -> int:
        size = maxsize or size
        return random_source.sample(-size, size)

    return Arbitrary(
        generator=generator.bless(_gen),
        shrink=shrink.bless(shrink_integer),
        show=show.default,
    )


def _nat(maxsize: Optional[int] = None) -> Arbitrary[int]:
    """Natural numbers in [0, size]."""

    def _gen(size: int) -> int:
        size = maxsize or size
        return random_source.sample(0, size)

    return Arbitrary(
        generator=generator.bless(_gen),
        shrink=shrink.bless(shrink_nat),
        show=show.default,
    )


def _number(maxsize: Optional[float] = None) -> Arbitrary[float]:
    """Finite floats in [-size, size]. NaN and infinities are never produced."""

    def _gen(size: float) -> float:
        size = maxsize or size
        return random_source.sample_float(-size, size)

    return Arbitrary(
        generator=generator.bless(_gen),
        shrink=shrink.bless(shrink_number),
        show=show.default,
    )


_integer.__name__ = "integer"
_nat.__name__ = "nat"
_number.__name__ = "number"

integer = extend_with_default(numeric(_integer))
nat = extend_with_default(_nat)
number = extend_with_default(numeric(_number))

uint8 = nat(0xFF)
uint16 = nat(0xFFFF)
uint32 = nat(0xFFFFFFFF)

int8 = integer(0x80)
int16 = integer(0x8000)
int32 = integer(0x80000000)
