from .numeric import (
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
)
from .choice import bool_, elements, constant, falsy, UNDEFINED
from .text import char, asciichar, string, not_empty_string, nestring, asciistring
from .values import json, value
from .dates import datetime

__all__ = [
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
    "bool_",
    "elements",
    "constant",
    "falsy",
    "UNDEFINED",
    "char",
    "asciichar",
    "string",
    "not_empty_string",
    "nestring",
    "asciistring",
    "json",
    "value",
    "datetime",
]
