"""
levdist.reference — Full-matrix Levenshtein oracle.

Deliberately the textbook algorithm and nothing else: the whole
(len(a)+1) × (len(b)+1) matrix, filled row by row.  It exists so that
``levdist.core`` can be checked mechanically instead of by inspection.
Do not optimize it and do not import from ``levdist.core``.
"""

from typing import Sequence


def reference_distance(a: Sequence, b: Sequence) -> int:
    """Levenshtein distance via the full Wagner–Fischer matrix."""
    m, n = len(a), len(b)
    if m == 0:
        return n
    if n == 0:
        return m

    # Flat row-major buffer: cell (i, j) lives at i * width + j
    width = n + 1
    matrix = [0] * ((m + 1) * width)

    for i in range(m + 1):
        matrix[i * width] = i
    for j in range(n + 1):
        matrix[j] = j

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            matrix[i * width + j] = min(
                matrix[(i - 1) * width + j] + 1,        # deletion
                matrix[i * width + j - 1] + 1,          # insertion
                matrix[(i - 1) * width + j - 1] + cost, # substitution
            )

    return matrix[m * width + n]
