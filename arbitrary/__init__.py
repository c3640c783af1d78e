# arbitrary/__init__.py
"""
Primitive arbitraries for property-based testing.

An arbitrary bundles a generator (size hint -> value), a shrinker
(value -> simpler candidates) and a show function. This package provides:

    - Core:       Arbitrary, DefaultedArbitrary, extend_with_default
    - Numbers:    integer, nat, number, int8/16/32, uint8/16/32, numeric
    - Choices:    bool_, elements, constant, falsy, UNDEFINED
    - Text:       char, asciichar, string, not_empty_string (nestring), asciistring
    - JSON:       json (value)
    - Dates:      datetime
    - Errors:     ArbitraryError, ArbitraryConfigError, IsomorphismError

integer, nat, number, string and datetime work both as factories and as
ready-made arbitraries:

    integer.generator(10)          # default arbitrary, size hint 10
    integer(100).generator(10)     # fixed range [-100, 100]
    integer(10, 20).shrink(15)     # rescaled to [10, 20]
"""

from __future__ import annotations

from .core.arbitrary import Arbitrary, DefaultedArbitrary, extend_with_default, as_arbitrary
from .errors import ArbitraryError, ArbitraryConfigError, IsomorphismError

from .primitives import (
    numeric,
    integer,
    nat,
    number,
    int8,
    int16,
    int32,
    uint8,
    uint16,
    uint32,
    bool_,
    elements,
    constant,
    falsy,
    UNDEFINED,
    char,
    asciichar,
    string,
    not_empty_string,
    nestring,
    asciistring,
    json,
    value,
    datetime,
)


__all__ = [
    # core
    "Arbitrary",
    "DefaultedArbitrary",
    "extend_with_default",
    "as_arbitrary",

    # errors
    "ArbitraryError",
    "ArbitraryConfigError",
    "IsomorphismError",

    # numbers
    "numeric",
    "integer",
    "nat",
    "number",
    "int8",
    "int16",
    "int32",
    "uint8",
    "uint16",
    "uint32",

    # choices
    "bool_",
    "elements",
    "constant",
    "falsy",
    "UNDEFINED",

    # text
    "char",
    "asciichar",
    "string",
    "not_empty_string",
    "nestring",
    "asciistring",

    # json
    "json",
    "value",

    # dates
    "datetime",
]
