"""
Choice arbitraries: bool_, elements, constant, falsy.
"""

from __future__ import annotations

import logging
import math
from dataclasses import replace
from typing import Any, List, Sequence, TypeVar

from arbitrary import show
from arbitrary.core.arbitrary import Arbitrary
from arbitrary.engine import generator, random_source, shrink
from arbitrary.errors import ArbitraryConfigError
from arbitrary.utils import index_of

logger = logging.getLogger(__name__)

T = TypeVar("T")


class _Undefined:
    """Singleton standing in for an absent value. Falsy, distinct from None."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return "UNDEFINED"

    def __reduce__(self):
        return (_Undefined, ())


UNDEFINED = _Undefined()


bool_: Arbitrary[bool] = Arbitrary(
    generator=generator.bless(lambda size: random_source.sample(0, 1) == 1),
    shrink=shrink.bless(lambda b: [False] if b is True else []),
    show=show.default,
)


def elements(items: Sequence[T]) -> Arbitrary[T]:
    """
    A uniformly chosen member of items.

    Shrinking only moves towards the front of items: a value at index n
    shrinks to items[:n], the first item (or a value not in items) does not
    shrink. Membership uses strict equality, so 0 and False are different
    members and NaN is never found.

    Raises:
        ArbitraryConfigError: if items is empty.
    """
    items = list(items)
    if not items:
        logger.debug("elements() called with no items")
        raise ArbitraryConfigError("elements: at least one parameter expected")

    def _gen(size: int) -> T:
        return items[random_source.sample(0, len(items) - 1)]

    def _shrink(x: T) -> List[T]:
        idx = index_of(items, x)
        if idx <= 0:
            return []
        return items[:idx]

    return Arbitrary(
        generator=generator.bless(_gen),
        shrink=shrink.bless(_shrink),
        show=show.default,
    )


def constant(x: T) -> Arbitrary[T]:
    """Always x. Does not shrink."""
    return Arbitrary(
        generator=generator.constant(x),
        shrink=shrink.noop,
        show=show.default,
    )


def show_falsy(value: Any) -> str:
    if isinstance(value, float) and math.isnan(value):
        return "falsy: NaN"
    if value == "" and isinstance(value, str):
        return "falsy: empty string"
    if value is UNDEFINED:
        return "falsy: undefined"
    return f"falsy: {value!r}"


FALSY_VALUES: List[Any] = [False, None, UNDEFINED, "", 0, math.nan]

falsy: Arbitrary[Any] = replace(elements(FALSY_VALUES), show=show_falsy)
