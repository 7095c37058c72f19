"""
levdist.bench — Throughput comparison against other Levenshtein engines.

Methodology per string length:
    1. Draw two random strings of that length from a seeded RNG.
    2. Call each engine ``warmup`` times (results discarded).
    3. Time ``iterations`` calls with perf_counter_ns.

Third-party engines are picked up only if installed; nothing here is
required for correctness.
"""

import importlib
import random
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from .core import distance
from .fuzz import ASCII_ALPHABET, random_string
from .reference import reference_distance


DEFAULT_LENGTHS = (4, 8, 16, 32, 64, 128, 248, 512)

Engine = Callable[[str, str], int]


def _try_import(name):
    """Safely attempt to import an optional dependency by name."""
    try:
        return importlib.import_module(name)
    except ImportError:
        return None


# ═══════════════════════════════════════════════════════════════════
#  CONFIGURATION
# ═══════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class BenchmarkConfig:
    """
    Benchmark parameters.

    Long inputs are timed over fewer iterations to keep the total run
    time reasonable:  ``long_iterations`` from ``long_length`` up,
    ``longest_iterations`` from ``longest_length`` up.
    """
    lengths: tuple[int, ...] = DEFAULT_LENGTHS
    warmup: int = 100
    iterations: int = 10000
    long_length: int = 128
    long_iterations: int = 1000
    longest_length: int = 256
    longest_iterations: int = 500
    seed: int = 0
    alphabet: str = ASCII_ALPHABET

    def __post_init__(self):
        if not self.lengths:
            raise ValueError("lengths must not be empty")
        if any(n <= 0 for n in self.lengths):
            raise ValueError(f"lengths must be positive, got {self.lengths}")
        if len(set(self.lengths)) != len(self.lengths):
            raise ValueError(f"lengths must not repeat, got {self.lengths}")
        if self.warmup < 0:
            raise ValueError(f"warmup must be >= 0, got {self.warmup}")
        for name in ("iterations", "long_iterations", "longest_iterations"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if not self.alphabet:
            raise ValueError("alphabet must not be empty")

    def iterations_for(self, length: int) -> int:
        if length >= self.longest_length:
            return min(self.iterations, self.longest_iterations)
        if length >= self.long_length:
            return min(self.iterations, self.long_iterations)
        return self.iterations


# ═══════════════════════════════════════════════════════════════════
#  ENGINES
# ═══════════════════════════════════════════════════════════════════

def available_implementations(include_reference: bool = False) -> dict[str, Engine]:
    """
    Engines to compare, by display name.

    Always contains levdist's own engine; third-party engines appear
    when their package is importable.
    """
    engines: dict[str, Engine] = {"levdist": distance}
    if include_reference:
        engines["levdist (reference)"] = reference_distance

    rapidfuzz_lev = _try_import("rapidfuzz.distance.Levenshtein")
    if rapidfuzz_lev:
        engines["rapidfuzz"] = rapidfuzz_lev.distance

    levenshtein = _try_import("Levenshtein")
    if levenshtein:
        engines["python-Levenshtein"] = levenshtein.distance

    editdistance = _try_import("editdistance")
    if editdistance:
        engines["editdistance"] = editdistance.eval

    pylev = _try_import("pylev")
    if pylev:
        engines["pylev"] = pylev.levenshtein

    return engines


# ═══════════════════════════════════════════════════════════════════
#  REPORT
# ═══════════════════════════════════════════════════════════════════

@dataclass
class BenchmarkResult:
    """Timing of one engine at one string length."""
    name: str
    length: int
    iterations: int
    ns_per_op: Optional[float] = None
    ops_per_sec: Optional[float] = None
    distance: Optional[int] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class BenchmarkReport:
    """All results of one benchmark run, in run order."""
    config: BenchmarkConfig
    results: list[BenchmarkResult] = field(default_factory=list)

    def for_length(self, length: int) -> list[BenchmarkResult]:
        return [r for r in self.results if r.length == length]

    def for_engine(self, name: str) -> list[BenchmarkResult]:
        return [r for r in self.results if r.name == name]

    @property
    def engines(self) -> list[str]:
        names: list[str] = []
        for r in self.results:
            if r.name not in names:
                names.append(r.name)
        return names


# ═══════════════════════════════════════════════════════════════════
#  RUNNER
# ═══════════════════════════════════════════════════════════════════

def time_engine(name: str, fn: Engine, a: str, b: str,
                warmup: int, iterations: int) -> BenchmarkResult:
    """Warm up, then time ``iterations`` calls of fn(a, b)."""
    try:
        for _ in range(warmup):
            fn(a, b)

        t0 = time.perf_counter_ns()
        for _ in range(iterations):
            result = fn(a, b)
        elapsed = time.perf_counter_ns() - t0
    except Exception as exc:  # third-party engines may reject inputs
        return BenchmarkResult(name, len(a), iterations,
                               error=f"{type(exc).__name__}: {exc}")

    # Guard against a timer that did not advance
    elapsed = max(elapsed, 1)
    return BenchmarkResult(
        name=name,
        length=len(a),
        iterations=iterations,
        ns_per_op=elapsed / iterations,
        ops_per_sec=iterations * 1e9 / elapsed,
        distance=int(result),
    )


def run_benchmark(implementations: Optional[dict[str, Engine]] = None,
                  config: Optional[BenchmarkConfig] = None) -> BenchmarkReport:
    """
    Benchmark every engine at every configured length.

    The random inputs depend only on ``config.seed``, so two runs with
    the same config time the same string pairs.
    """
    if config is None:
        config = BenchmarkConfig()
    if implementations is None:
        implementations = available_implementations()

    rng = random.Random(config.seed)
    report = BenchmarkReport(config)

    for length in config.lengths:
        a = random_string(rng, length, config.alphabet)
        b = random_string(rng, length, config.alphabet)
        iterations = config.iterations_for(length)
        for name, fn in implementations.items():
            report.results.append(
                time_engine(name, fn, a, b, config.warmup, iterations))

    return report


def format_report(report: BenchmarkReport) -> str:
    """Render a report as one fixed-width table per string length."""
    lines = ["Levenshtein Distance Benchmarks",
             "================================"]

    for length in report.config.lengths:
        lines.append("")
        lines.append(f"String Length: {length}")
        lines.append("-" * 80)
        for r in report.for_length(length):
            if not r.ok:
                lines.append(f"{r.name:<25} ERROR: {r.error}")
                continue
            lines.append(f"{r.name:<25} {r.ns_per_op:>14,.2f} ns/op  "
                         f"{r.ops_per_sec:>17,.2f} ops/s  d={r.distance}")

    lines.append("")
    return "\n".join(lines)


def disagreements(report: BenchmarkReport) -> list[tuple[int, dict[str, int]]]:
    """
    Lengths at which the engines returned different distances for the
    same input pair, with each engine's answer.
    """
    out = []
    for length in report.config.lengths:
        answers = {r.name: r.distance for r in report.for_length(length) if r.ok}
        if len(set(answers.values())) > 1:
            out.append((length, answers))
    return out
