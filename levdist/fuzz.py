"""
levdist.fuzz — Random inputs for differential testing.

Everything here takes an explicit ``random.Random`` so runs are
reproducible from a seed.  Used by the pytest suite, stress_test.py
and the benchmark.
"""

import random
import string
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence


ASCII_ALPHABET = string.ascii_letters + string.digits
LOWERCASE_ALPHABET = string.ascii_lowercase

# Accented Latin, Cyrillic, CJK, and astral-plane emoji (two UTF-16
# code units each)
UNICODE_ALPHABET = "abcéñ😀😁🎉café世界привет"

PUNCTUATION_ALPHABET = "abc def!@# .,;"
DIGIT_ALPHABET = string.digits
MIXED_CASE_ALPHABET = "aAbBcCdDeEfF"

# Inclusive (min, max) lengths
LENGTH_CLASSES = {
    "short": (0, 19),
    "medium": (20, 69),
    "long": (50, 149),
}


def random_string(rng: random.Random, length: int,
                  alphabet: str = ASCII_ALPHABET) -> str:
    """A string of ``length`` units drawn uniformly from ``alphabet``."""
    return "".join(rng.choice(alphabet) for _ in range(length))


def random_length(rng: random.Random, length_class: str) -> int:
    lo, hi = LENGTH_CLASSES[length_class]
    return rng.randint(lo, hi)


def random_pair(rng: random.Random, length_class: str,
                alphabet: str = ASCII_ALPHABET) -> tuple[str, str]:
    """Two independent random strings from the same length class."""
    return (
        random_string(rng, random_length(rng, length_class), alphabet),
        random_string(rng, random_length(rng, length_class), alphabet),
    )


def mutate(rng: random.Random, s: str, mutations: int,
           alphabet: str = LOWERCASE_ALPHABET) -> str:
    """
    Apply ``mutations`` random single-unit edits to ``s``.

    Each edit is an insert, delete or substitute at a random position.
    Deletes and substitutes on an empty string are no-ops, so the
    result is at most ``mutations`` edits away from ``s``.
    """
    result = s
    for _ in range(mutations):
        op = rng.randrange(3)
        if op == 0:
            pos = rng.randint(0, len(result))
            result = result[:pos] + rng.choice(alphabet) + result[pos:]
        elif op == 1:
            if result:
                pos = rng.randrange(len(result))
                result = result[:pos] + result[pos + 1:]
        else:
            if result:
                pos = rng.randrange(len(result))
                result = result[:pos] + rng.choice(alphabet) + result[pos + 1:]
    return result


def mutation_pair(rng: random.Random, base_length: int,
                  min_mutations: int, max_mutations: int,
                  alphabet: str = ASCII_ALPHABET) -> tuple[str, str]:
    """A random base string and a copy with 1..n random edits applied."""
    base = random_string(rng, base_length, alphabet)
    return base, mutate(rng, base, rng.randint(min_mutations, max_mutations))


# ═══════════════════════════════════════════════════════════════════
#  DIFFERENTIAL CHECK
# ═══════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Mismatch:
    """One input pair on which two engines disagree."""
    a: Sequence
    b: Sequence
    got: int
    expected: int

    def __repr__(self) -> str:
        return f"Mismatch({self.a!r}, {self.b!r}: got {self.got}, expected {self.expected})"


def differential_check(engine: Callable[[Sequence, Sequence], int],
                       oracle: Callable[[Sequence, Sequence], int],
                       pairs: Iterable[tuple[Sequence, Sequence]]) -> list[Mismatch]:
    """Run both callables on every pair and return the disagreements."""
    mismatches = []
    for a, b in pairs:
        got = engine(a, b)
        expected = oracle(a, b)
        if got != expected:
            mismatches.append(Mismatch(a, b, got, expected))
    return mismatches
