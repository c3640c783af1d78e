"""
Generator engine.

A Generator is a size-parameterized sampler: calling it with a non-negative
size hint returns one value. Generators are stateless apart from the shared
random source, and compose with .map().

Leaf generators provided here:
    char, asciichar, string, nestring, asciistring, json

Feature flag: ARBITRARY_CHECK_JSON=1 makes the json generator validate
every value it returns with is_json_value.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Callable, Dict, Generic, List, Sequence, TypeVar

from arbitrary.engine import random_source
from arbitrary.errors import ArbitraryError
from arbitrary.json_value import JsonValue, is_json_value, json_depth, json_type_name
from arbitrary.utils import char_array_to_string, logsize

logger = logging.getLogger(__name__)

# Feature flag: set ARBITRARY_CHECK_JSON=1 to validate generated JSON values
ARBITRARY_CHECK_JSON_ENABLED = os.environ.get("ARBITRARY_CHECK_JSON", "0") == "1"

T = TypeVar("T")
U = TypeVar("U")


class Generator(Generic[T]):
    """A function from size hint to value, with structure-preserving map."""

    __slots__ = ("_fn",)

    def __init__(self, fn: Callable[[int], T]):
        self._fn = fn

    def __call__(self, size: int) -> T:
        return self._fn(size)

    def map(self, f: Callable[[T], U]) -> "Generator[U]":
        return Generator(lambda size: f(self._fn(size)))

    def __repr__(self):
        return f"Generator({self._fn!r})"


def bless(fn: Callable[[int], T]) -> Generator[T]:
    """Lift a plain size function into a Generator."""
    if isinstance(fn, Generator):
        return fn
    return Generator(fn)


def constant(x: T) -> Generator[T]:
    return Generator(lambda size: x)


def oneof(generators: Sequence[Generator[Any]]) -> Generator[Any]:
    """Pick one of the given generators uniformly, then sample it."""
    if not generators:
        raise ValueError("oneof: at least one generator expected")
    gens = list(generators)

    def _gen(size: int) -> Any:
        return gens[random_source.sample(0, len(gens) - 1)](size)

    return Generator(_gen)


def array(gen: Generator[T]) -> Generator[List[T]]:
    """Lists of length [0, logsize(size)], elements drawn at the same size."""

    def _gen(size: int) -> List[T]:
        n = random_source.sample(0, logsize(size))
        return [gen(size) for _ in range(n)]

    return Generator(_gen)


def nearray(gen: Generator[T]) -> Generator[List[T]]:
    """Non-empty lists of length [1, logsize(size)]."""

    def _gen(size: int) -> List[T]:
        n = random_source.sample(1, max(1, logsize(size)))
        return [gen(size) for _ in range(n)]

    return Generator(_gen)


def dict_of(gen: Generator[T]) -> Generator[Dict[str, T]]:
    """String-keyed dicts; duplicate keys collapse, so size is an upper bound."""
    pairs = array(Generator(lambda size: (string(size), gen(size))))
    return pairs.map(dict)


# ---------------------------------------------------------------------------
# Leaf generators
# ---------------------------------------------------------------------------

char: Generator[str] = Generator(lambda size: chr(random_source.sample(0, 0xFF)))

# 0x20-0x7e inclusive, no DEL
asciichar: Generator[str] = Generator(lambda size: chr(random_source.sample(0x20, 0x7E)))

string: Generator[str] = array(char).map(char_array_to_string)

nestring: Generator[str] = nearray(char).map(char_array_to_string)

asciistring: Generator[str] = array(asciichar).map(char_array_to_string)


def _json_number(size: int) -> JsonValue:
    if random_source.sample(0, 1) == 0:
        return random_source.sample(-size, size)
    return random_source.sample_float(-size, size)


_json_leaf: Generator[JsonValue] = oneof([
    Generator(lambda size: random_source.sample(0, 1) == 1),
    Generator(_json_number),
    string,
])


def _json(size: int, depth: int) -> JsonValue:
    if depth <= 0:
        return _json_leaf(size)
    child = Generator(lambda s: _json(s, depth - 1))
    branch = random_source.sample(0, 2)
    if branch == 0:
        return _json_leaf(size)
    if branch == 1:
        return array(child)(size // 2)
    return dict_of(child)(size // 2)


def _json_gen(size: int) -> JsonValue:
    value = _json(size, random_source.sample(0, logsize(size)))
    if ARBITRARY_CHECK_JSON_ENABLED:
        if not is_json_value(value):
            raise ArbitraryError(
                f"json generator produced a non-JSON {json_type_name(value)}: {value!r}"
            )
        logger.debug("json: %s of depth %d at size %d", json_type_name(value), json_depth(value), size)
    return value


json: Generator[JsonValue] = Generator(_json_gen)


__all__ = [
    "Generator",
    "bless",
    "constant",
    "oneof",
    "array",
    "nearray",
    "dict_of",
    "char",
    "asciichar",
    "string",
    "nestring",
    "asciistring",
    "json",
    "ARBITRARY_CHECK_JSON_ENABLED",
]
