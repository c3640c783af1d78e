from __future__ import annotations

import math
from typing import Any, List, Sequence


def div2(x: int) -> int:
    return x // 2


def log2(x: float) -> float:
    return math.log(x) / math.log(2)


def logsize(size: float) -> int:
    """Collection length budget for a size hint: round(log2(size + 1)), at least 1."""
    return max(int(round(log2(size + 1))), 1)


def char_array_to_string(chars: Sequence[str]) -> str:
    return "".join(chars)


def string_to_char_array(s: str) -> List[str]:
    return list(s)


def index_of(items: Sequence[Any], value: Any) -> int:
    """
    Position of value in items under strict equality, or -1.

    Strict means same type and ==, with no identity shortcut:
    0 does not match False, and NaN never matches anything.
    """
    for i, item in enumerate(items):
        if type(item) is type(value) and item == value:
            return i
    return -1
