"""
levdist.core — Levenshtein Edit Distance
=========================================

§1  THE METRIC
──────────────

The edit distance between two sequences is the minimum number of
single-unit insertions, deletions, and substitutions needed to turn
one into the other:

    d("kitten", "sitting")  = 3     (k→s, e→i, +g)
    d("saturday", "sunday") = 3     (-a, -t, r→n)
    d("Hello", "hello")     = 1     (case-sensitive: H ≠ h)

Units are compared with plain ``==``.  No case-folding, no Unicode
normalization, no locale.  For ``str`` the unit is the code point;
see ``levdist.formats`` for UTF-16 / UTF-8 unit adapters.


§2  THE RECURRENCE (Wagner–Fischer)
───────────────────────────────────

    M[i][0] = i
    M[0][j] = j
    M[i][j] = min(
        M[i-1][j]   + 1,          # delete a[i-1]
        M[i][j-1]   + 1,          # insert b[j-1]
        M[i-1][j-1] + cost,       # substitute (cost 0 on match, else 1)
    )

    d(a, b) = M[len(a)][len(b)]

M[i][j] depends only on the row above and the cell to its left, so
the whole matrix never needs to exist at once.


§3  WHAT THIS MODULE DOES DIFFERENTLY FROM THE REFERENCE
────────────────────────────────────────────────────────

    1. Common prefix and suffix are stripped first.  An alignment
       never gains by breaking a matching affix, so this is exact.
    2. The inputs are swapped so the shorter one indexes the row;
       the metric is symmetric.
    3. One row of length min(m, n) + 1 is updated in place, carrying
       the diagonal M[i-1][j-1] in a local.
    4. On a match, M[i][j] = M[i-1][j-1].  Neighbouring cells differ
       by at most 1, so the diagonal is already the minimum.

Every one of these is checked against ``levdist.reference`` by the
differential tests.


§4  COMPLEXITY
──────────────

    distance:          O(m·n) time, O(min(m, n)) extra memory
    bounded_distance:  O(k·min(m, n)) time for threshold k

There is no length limit and no failure mode.  Quadratic time is a
property of the problem; callers that need bounded latency must cap
input sizes before calling in.
"""

from typing import Optional, Sequence


# ═══════════════════════════════════════════════════════════════════
#  CORE DISTANCE FUNCTION
# ═══════════════════════════════════════════════════════════════════

def _strip_affixes(a: Sequence, b: Sequence) -> tuple[int, int, int]:
    """
    Return (start, end_a, end_b) so that a[start:end_a] and
    b[start:end_b] are what is left after removing the common prefix
    and suffix.
    """
    end_a, end_b = len(a), len(b)
    start = 0
    limit = min(end_a, end_b)
    while start < limit and a[start] == b[start]:
        start += 1
    while end_a > start and end_b > start and a[end_a - 1] == b[end_b - 1]:
        end_a -= 1
        end_b -= 1
    return start, end_a, end_b


def distance(a: Sequence, b: Sequence) -> int:
    """
    Levenshtein distance between two sequences.

    Accepts any indexable sequences whose elements compare with ``==``
    (str, bytes, tuple, list, deque, range, ...).  Total: every finite
    pair, both empty included, yields a non-negative int.

        distance("", "")              → 0
        distance("", "hello")         → 5
        distance("kitten", "sitting") → 3

    The result always satisfies

        abs(len(a) - len(b)) <= distance(a, b) <= max(len(a), len(b))
    """
    if len(a) == 0:
        return len(b)
    if len(b) == 0:
        return len(a)

    # Shorter input indexes the row.
    if len(a) < len(b):
        a, b = b, a

    start, end_a, end_b = _strip_affixes(a, b)
    m = end_a - start
    n = end_b - start
    if n == 0:
        return m

    # Index by offset; deque and similar sequences cannot be sliced.
    row = list(range(n + 1))

    for i in range(1, m + 1):
        a_i = a[start + i - 1]
        diag = row[0]       # M[i-1][0]
        row[0] = i
        left = i
        for j in range(1, n + 1):
            above = row[j]  # M[i-1][j]
            if a_i == b[start + j - 1]:
                cell = diag
            else:
                cell = diag
                if above < cell:
                    cell = above
                if left < cell:
                    cell = left
                cell += 1
            row[j] = cell
            diag = above
            left = cell

    return row[n]


# ═══════════════════════════════════════════════════════════════════
#  THRESHOLDED DISTANCE (banded DP)
# ═══════════════════════════════════════════════════════════════════

def bounded_distance(a: Sequence, b: Sequence,
                     max_distance: int) -> Optional[int]:
    """
    Levenshtein distance if it is at most ``max_distance``, else None.

    Only the diagonal band |i - j| <= max_distance is computed: any
    cell outside it is already worth more than the threshold, because
    d(a[:i], b[:j]) >= |i - j|.  Cells inside the band are clamped at
    max_distance + 1, and the scan stops as soon as a whole band row
    exceeds the threshold (path costs never decrease).

    For every threshold k:

        bounded_distance(a, b, k) == distance(a, b)   if distance(a, b) <= k
        bounded_distance(a, b, k) is None              otherwise
    """
    if max_distance < 0:
        raise ValueError(f"max_distance must be >= 0, got {max_distance}")

    if len(a) < len(b):
        a, b = b, a
    m, n = len(a), len(b)

    k = max_distance
    if m - n > k:
        return None
    if n == 0:
        return m

    over = k + 1

    prev = [j if j <= k else over for j in range(n + 1)]
    curr = [over] * (n + 1)

    for i in range(1, m + 1):
        lo = max(1, i - k)
        hi = min(n, i + k)

        curr[0] = i if i <= k else over
        if lo > 1:
            curr[lo - 1] = over
        row_min = curr[0]

        a_i = a[i - 1]
        for j in range(lo, hi + 1):
            cost = 0 if a_i == b[j - 1] else 1
            cell = prev[j - 1] + cost
            if prev[j] + 1 < cell:
                cell = prev[j] + 1
            if curr[j - 1] + 1 < cell:
                cell = curr[j - 1] + 1
            if cell > over:
                cell = over
            curr[j] = cell
            if cell < row_min:
                row_min = cell

        if hi < n:
            curr[hi + 1] = over

        if row_min > k:
            return None

        prev, curr = curr, prev

    result = prev[n]
    return result if result <= k else None


# ═══════════════════════════════════════════════════════════════════
#  NORMALIZED DISTANCE
# ═══════════════════════════════════════════════════════════════════

def normalized_distance(a: Sequence, b: Sequence) -> float:
    """
    Levenshtein distance scaled into [0, 1].

    0.0 = identical (or both empty)
    1.0 = nothing in common (every unit substituted, inserted or deleted)

    Normalized by max(len(a), len(b)), the largest value distance()
    can return for inputs of these lengths.
    """
    longest = max(len(a), len(b))
    if longest == 0:
        return 0.0
    return distance(a, b) / longest
