# arbitrary/show.py
"""
Show functions: render values for failure reports.

Rendering never feeds back into generation or shrinking.
"""

from __future__ import annotations

import json as _json
from typing import Any


def default(value: Any) -> str:
    """repr() for everything; strings keep their quotes so "" stays visible."""
    return repr(value)


def json(value: Any) -> str:
    """Structured serialization, keys in insertion order."""
    return _json.dumps(value, ensure_ascii=False)
