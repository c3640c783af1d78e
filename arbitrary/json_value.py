"""
JSON value type definition and validation.

A JSON value is the closed variant produced by the json arbitrary:

    bool | int | float | str | list[JsonValue] | dict[str, JsonValue]

null is accepted by the validator (it is legal JSON) but is never
generated.
"""

from __future__ import annotations

import math
from typing import Any, Dict, List, Union

JsonValue = Union[bool, int, float, str, None, List["JsonValue"], Dict[str, "JsonValue"]]

# Maximum nesting depth accepted by is_json_value (keeps recursion bounded)
MAX_JSON_DEPTH = 200


def is_json_value(value: Any, _seen: set[int] | None = None, _depth: int = 0) -> bool:
    """
    Check if a value is a valid JSON value.

    Args:
        value: The value to check.
        _seen: Internal parameter for cycle detection. Do not pass.
        _depth: Internal parameter for depth tracking. Do not pass.

    Returns:
        True if value is a JSON value, False otherwise.

    Note:
        Circular references and nesting beyond MAX_JSON_DEPTH are rejected.
    """
    if _depth > MAX_JSON_DEPTH:
        return False

    if value is None:
        return True
    # bool before int (bool is subclass of int)
    if isinstance(value, bool):
        return True
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, str):
        return True

    if isinstance(value, (list, dict)):
        if _seen is None:
            _seen = set()
        value_id = id(value)
        if value_id in _seen:
            return False
        _seen = _seen | {value_id}

    if isinstance(value, list):
        return all(is_json_value(item, _seen, _depth + 1) for item in value)
    if isinstance(value, dict):
        return (
            all(isinstance(k, str) for k in value.keys()) and
            all(is_json_value(v, _seen, _depth + 1) for v in value.values())
        )
    return False


def json_type_name(value: Any) -> str:
    """
    Return the JSON type name for a value.

    Returns one of: "null", "bool", "int", "float", "str", "list", "dict", or "INVALID".
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "int"
    if isinstance(value, float):
        return "float"
    if isinstance(value, str):
        return "str"
    if isinstance(value, list):
        return "list"
    if isinstance(value, dict):
        return "dict"
    return "INVALID"


def json_depth(value: Any) -> int:
    """Nesting depth: 0 for scalars, 1 + deepest child for containers."""
    if isinstance(value, list):
        return 1 + max((json_depth(v) for v in value), default=0)
    if isinstance(value, dict):
        return 1 + max((json_depth(v) for v in value.values()), default=0)
    return 0
