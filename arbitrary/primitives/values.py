"""
JSON arbitrary: booleans, numbers, strings, and arrays / string-keyed dicts
of JSON values. Not shrinkable; shown as serialized JSON.
"""

from __future__ import annotations

from arbitrary import show
from arbitrary.core.arbitrary import Arbitrary
from arbitrary.engine import generator, shrink
from arbitrary.json_value import JsonValue

json: Arbitrary[JsonValue] = Arbitrary(
    generator=generator.json,
    shrink=shrink.noop,
    show=show.json,
)

value = json
