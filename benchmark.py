"""
Benchmark: levdist vs other Levenshtein implementations.

This benchmark compares levdist against whichever of these are
installed (pip install levdist[bench]):
    1. rapidfuzz           — C++ bit-parallel engine
    2. python-Levenshtein  — C extension
    3. editdistance        — C++ engine
    4. pylev               — pure Python

Before timing anything, every engine is checked against the
full-matrix reference on a table of known pairs.  A fast engine that
returns the wrong number is not a contender.
"""

import argparse
import sys
import os
import time

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from levdist.bench import (
    BenchmarkConfig,
    available_implementations, run_benchmark, format_report, disagreements,
)
from levdist.reference import reference_distance


STRING_PAIRS = [
    ("kitten", "sitting"),
    ("saturday", "sunday"),
    ("intention", "execution"),
    ("pneumonoultramicroscopicsilicovolcanoconiosis",
     "pseudopseudohypoparathyroidism"),
    ("abcdefghijklmnopqrstuvwxyz", "zyxwvutsrqponmlkjihgfedcba"),
    ("the quick brown fox jumps over the lazy dog",
     "the quick brown fox jumped over the lazy cat"),
]


# ═══════════════════════════════════════════════════════════════════
#  BENCHMARKS
# ═══════════════════════════════════════════════════════════════════

def benchmark_agreement(engines):
    """Every engine must agree with the reference before it is timed."""
    print("=" * 70)
    print("  §1  AGREEMENT WITH THE REFERENCE")
    print("=" * 70)
    print()

    all_pass = True
    for name, fn in engines.items():
        failures = []
        t0 = time.perf_counter()
        for s1, s2 in STRING_PAIRS:
            expected = reference_distance(s1, s2)
            got = fn(s1, s2)
            if got != expected:
                failures.append((s1, s2, got, expected))
        dt = time.perf_counter() - t0

        match = "✓" if not failures else "✗"
        print(f"  {match} {name:<25} {len(STRING_PAIRS) - len(failures)}/"
              f"{len(STRING_PAIRS)} pairs  [{dt*1000:.2f}ms]")
        for s1, s2, got, expected in failures:
            all_pass = False
            print(f"      d(\"{s1[:20]}\", \"{s2[:20]}\") = {got}, "
                  f"reference = {expected}")

    print()
    if all_pass:
        print("  RESULT: all engines agree with the reference.")
    else:
        print("  RESULT: MISMATCH — see above.")
    print()


def benchmark_throughput(engines, config):
    """Time every engine across the configured string lengths."""
    print("=" * 70)
    print("  §2  THROUGHPUT")
    print("=" * 70)
    print()

    report = run_benchmark(engines, config)
    print(format_report(report))

    for length, answers in disagreements(report):
        print(f"  ✗ length {length}: engines disagree: {answers}")
    return report


def parse_args(argv=None):
    defaults = BenchmarkConfig()
    parser = argparse.ArgumentParser(
        description="Compare levdist throughput against other Levenshtein engines.")
    parser.add_argument("--seed", type=int, default=defaults.seed,
                        help="seed for the random input strings (default: %(default)s)")
    parser.add_argument("--lengths", type=int, nargs="+",
                        default=list(defaults.lengths),
                        help="string lengths to time")
    parser.add_argument("--iterations", type=int, default=defaults.iterations,
                        help="timed calls per engine for short strings")
    parser.add_argument("--warmup", type=int, default=defaults.warmup,
                        help="untimed calls before each measurement")
    parser.add_argument("--with-reference", action="store_true",
                        help="also time the full-matrix reference engine")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    try:
        config = BenchmarkConfig(
            lengths=tuple(args.lengths),
            iterations=args.iterations,
            warmup=args.warmup,
            seed=args.seed,
        )
    except ValueError as exc:
        print(f"benchmark.py: error: {exc}", file=sys.stderr)
        return 2

    engines = available_implementations(include_reference=args.with_reference)

    print()
    print("╔══════════════════════════════════════════════════════════════════════╗")
    print("║          LEVENSHTEIN DISTANCE — BENCHMARK SUITE                      ║")
    print("╚══════════════════════════════════════════════════════════════════════╝")
    print()
    print(f"  Engines: {', '.join(engines)}")
    print(f"  Seed:    {config.seed}")
    print()

    benchmark_agreement(engines)
    benchmark_throughput(engines, config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
