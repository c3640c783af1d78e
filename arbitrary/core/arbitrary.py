"""
ARBITRARY CORE
==============
An arbitrary is the triple every property run needs for one domain:

    generator : size -> value
    shrink    : value -> [simpler values]
    show      : value -> str

All three agree on the same domain: anything the generator produces is a
legal input to shrink and show.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from arbitrary import show as _show
from arbitrary.engine.generator import Generator
from arbitrary.engine.shrink import Shrinker

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Arbitrary(Generic[T]):
    generator: Generator[T]
    shrink: Shrinker[T]
    show: Callable[[T], str] = _show.default

    def smap(
        self,
        to: Callable[[T], U],
        from_: Callable[[U], T],
        show: Optional[Callable[[U], str]] = None,
    ) -> "Arbitrary[U]":
        """
        Derive an arbitrary over U through the pair (to, from_).

        Requires to(from_(u)) == u for every u the generator can produce.
        """
        return Arbitrary(
            generator=self.generator.map(to),
            shrink=self.shrink.isomap(to, from_),
            show=show or _show.default,
        )


class DefaultedArbitrary(Generic[T]):
    """
    A factory that is also its own default arbitrary.

    Calling it forwards to the wrapped factory:

        integer(10)        # Arbitrary over [-10, 10]
        integer(10, 20)    # Arbitrary over [10, 30]

    Reading generator/shrink/show uses the result of one eager factory()
    call, so the binding can be passed anywhere an Arbitrary is expected:

        integer.generator(5)
        integer.default    # the Arbitrary itself
    """

    def __init__(self, factory: Callable[..., Arbitrary[T]]):
        self._factory = factory
        self.default: Arbitrary[T] = factory()
        self.__name__ = getattr(factory, "__name__", type(self).__name__)
        self.__doc__ = getattr(factory, "__doc__", None)

    def __call__(self, *bounds: Any) -> Arbitrary[T]:
        return self._factory(*bounds)

    @property
    def generator(self) -> Generator[T]:
        return self.default.generator

    @property
    def shrink(self) -> Shrinker[T]:
        return self.default.shrink

    @property
    def show(self) -> Callable[[T], str]:
        return self.default.show

    def smap(self, to, from_, show=None):
        return self.default.smap(to, from_, show)

    def __repr__(self):
        return f"<arbitrary {self.__name__}>"


def extend_with_default(factory: Callable[..., Arbitrary[T]]) -> DefaultedArbitrary[T]:
    """Wrap factory so it also serves as factory() wherever an Arbitrary is read."""
    return DefaultedArbitrary(factory)


def as_arbitrary(arb: Any) -> Arbitrary[Any]:
    """Return the plain Arbitrary behind arb (unwraps DefaultedArbitrary)."""
    if isinstance(arb, DefaultedArbitrary):
        return arb.default
    if isinstance(arb, Arbitrary):
        return arb
    raise TypeError(f"expected an arbitrary, got {type(arb).__name__}: {arb!r}")
