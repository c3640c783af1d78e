from .utils import (
    div2,
    log2,
    logsize,
    char_array_to_string,
    string_to_char_array,
    index_of,
)

__all__ = [
    "div2",
    "log2",
    "logsize",
    "char_array_to_string",
    "string_to_char_array",
    "index_of",
]
