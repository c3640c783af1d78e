"""
Character and string arbitraries.

Characters never shrink. Strings shrink as character lists, by dropping
characters, through the isomorphism str <-> list[str].
"""

from __future__ import annotations

from arbitrary import show
from arbitrary.core.arbitrary import Arbitrary, extend_with_default
from arbitrary.engine import generator, shrink
from arbitrary.utils import char_array_to_string, string_to_char_array

# code points 0x00-0xff
char: Arbitrary[str] = Arbitrary(
    generator=generator.char,
    shrink=shrink.noop,
    show=show.default,
)

# 0x20-0x7e inclusive, no DEL
asciichar: Arbitrary[str] = Arbitrary(
    generator=generator.asciichar,
    shrink=shrink.noop,
    show=show.default,
)


def _string() -> Arbitrary[str]:
    """Strings of char; may shrink down to ""."""
    return Arbitrary(
        generator=generator.string,
        shrink=shrink.array(char.shrink).isomap(char_array_to_string, string_to_char_array),
        show=show.default,
    )


_string.__name__ = "string"

string = extend_with_default(_string)

not_empty_string: Arbitrary[str] = Arbitrary(
    generator=generator.nestring,
    shrink=shrink.nearray(asciichar.shrink).isomap(char_array_to_string, string_to_char_array),
    show=show.default,
)

nestring = not_empty_string

asciistring: Arbitrary[str] = Arbitrary(
    generator=generator.asciistring,
    shrink=shrink.array(asciichar.shrink).isomap(char_array_to_string, string_to_char_array),
    show=show.default,
)
