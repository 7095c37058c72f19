"""
levdist.formats — Convert text into the unit sequence being compared.

The distance functions compare whatever the sequence yields on
indexing.  For ``str`` that is one code point per unit.  Other units
are available by converting first:

    • "codepoint" → the str itself      ("😀" is 1 unit)
    • "utf16"     → tuple of UTF-16 code units  ("😀" is 2 units)
    • "utf8"      → bytes                ("😀" is 4 units)

"utf16" reproduces the behaviour of engines that index JavaScript-
or Java-style strings, where characters outside the Basic
Multilingual Plane are split into surrogate pairs.
"""

import struct
from typing import Sequence, Union

from .core import distance


UNITS = ("codepoint", "utf16", "utf8")
DEFAULT_UNIT = "codepoint"


def _check_unit(unit: str) -> None:
    if unit not in UNITS:
        raise ValueError(f"Unknown unit {unit!r}; expected one of {UNITS}")


# ═══════════════════════════════════════════════════════════════════
#  TEXT ↔ UNIT SEQUENCES
# ═══════════════════════════════════════════════════════════════════

def to_units(text: str, unit: str = DEFAULT_UNIT) -> Sequence:
    """
    Convert a string into the sequence of units it is compared over.

    Lone surrogates are passed through rather than rejected, so every
    str converts.
    """
    _check_unit(unit)
    if unit == "codepoint":
        return text
    if unit == "utf8":
        return text.encode("utf-8", "surrogatepass")

    data = text.encode("utf-16-le", "surrogatepass")
    return struct.unpack(f"<{len(data) // 2}H", data)


def from_units(units: Union[str, bytes, Sequence[int]],
               unit: str = DEFAULT_UNIT) -> str:
    """
    Inverse of to_units:

        from_units(to_units(s, unit), unit) == s
    """
    _check_unit(unit)
    if unit == "codepoint":
        return units if isinstance(units, str) else "".join(units)
    if unit == "utf8":
        return bytes(units).decode("utf-8", "surrogatepass")

    data = struct.pack(f"<{len(units)}H", *units)
    return data.decode("utf-16-le", "surrogatepass")


def unit_length(text: str, unit: str = DEFAULT_UNIT) -> int:
    """Number of units ``text`` occupies under ``unit``."""
    return len(to_units(text, unit))


# ═══════════════════════════════════════════════════════════════════
#  TEXT DISTANCE
# ═══════════════════════════════════════════════════════════════════

def text_distance(a: str, b: str, unit: str = DEFAULT_UNIT) -> int:
    """
    Levenshtein distance between two strings, counted in ``unit``.

        text_distance("😀", "a")           → 1
        text_distance("😀", "a", "utf16")  → 2
        text_distance("😀", "a", "utf8")   → 4
    """
    return distance(to_units(a, unit), to_units(b, unit))
