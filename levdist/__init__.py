"""
levdist — Levenshtein Edit Distance
===================================

The minimum number of single-unit insertions, deletions and
substitutions that turn one sequence into another.

    distance("kitten", "sitting")        → 3
    distance("Hello", "hello")           → 1     (case-sensitive)
    distance([1, 2, 3], [1, 3])          → 1     (any sequence)
    bounded_distance("abc", "xyz", 2)    → None  (more than 2 edits)

Two engines implement the same contract:
  • distance            — single-row DP with affix stripping
  • reference_distance  — the full matrix, kept as a test oracle

For str inputs the unit is the code point.  text_distance() counts
in UTF-16 code units or UTF-8 bytes instead.
"""

from levdist.core import (
    distance,
    bounded_distance,
    normalized_distance,
)
from levdist.reference import reference_distance
from levdist.formats import (
    UNITS, to_units, from_units, unit_length, text_distance,
)

__version__ = "0.1.0"
__all__ = [
    "distance", "bounded_distance", "normalized_distance",
    "reference_distance",
    "UNITS", "to_units", "from_units", "unit_length", "text_distance",
]
