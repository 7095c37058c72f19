"""
Tests for levdist.bench — the benchmark harness.

Timings are never asserted; only structure, determinism and error
handling are.
"""

import sys
import os
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from levdist.core import distance
from levdist.reference import reference_distance
from levdist.bench import (
    BenchmarkConfig, BenchmarkReport, DEFAULT_LENGTHS,
    available_implementations, run_benchmark, format_report,
    disagreements, time_engine,
)


TINY = BenchmarkConfig(lengths=(4, 16), warmup=1, iterations=3, seed=11)


class TestConfig:

    def test_defaults(self):
        config = BenchmarkConfig()
        assert config.lengths == DEFAULT_LENGTHS == (4, 8, 16, 32, 64, 128, 248, 512)
        assert config.iterations_for(64) == 10000
        assert config.iterations_for(128) == 1000
        assert config.iterations_for(248) == 1000
        assert config.iterations_for(512) == 500

    def test_iterations_never_raised_by_schedule(self):
        config = BenchmarkConfig(iterations=10)
        assert config.iterations_for(512) == 10

    @pytest.mark.parametrize("kwargs", [
        {"lengths": ()},
        {"lengths": (0, 4)},
        {"lengths": (4, 16, 4)},
        {"iterations": 0},
        {"warmup": -1},
        {"longest_iterations": 0},
        {"alphabet": ""},
    ])
    def test_rejects_bad_values(self, kwargs):
        with pytest.raises(ValueError):
            BenchmarkConfig(**kwargs)


class TestImplementations:

    def test_own_engine_always_present(self):
        engines = available_implementations()
        assert engines["levdist"] is distance
        assert "levdist (reference)" not in engines

    def test_reference_on_request(self):
        engines = available_implementations(include_reference=True)
        assert engines["levdist (reference)"] is reference_distance

    def test_every_engine_agrees_on_kitten(self):
        for name, fn in available_implementations().items():
            assert fn("kitten", "sitting") == 3, name


class TestRunBenchmark:

    def test_report_shape(self):
        engines = {"levdist": distance, "reference": reference_distance}
        report = run_benchmark(engines, TINY)
        assert isinstance(report, BenchmarkReport)
        assert len(report.results) == 4
        assert report.engines == ["levdist", "reference"]
        for r in report.results:
            assert r.ok
            assert r.iterations == 3
            assert r.ns_per_op > 0
            assert r.ops_per_sec > 0

    def test_same_seed_same_inputs(self):
        engines = {"levdist": distance}
        first = run_benchmark(engines, TINY)
        second = run_benchmark(engines, TINY)
        assert ([r.distance for r in first.results]
                == [r.distance for r in second.results])

    def test_engines_agree(self):
        engines = {"levdist": distance, "reference": reference_distance}
        report = run_benchmark(engines, TINY)
        assert disagreements(report) == []

    def test_failing_engine_is_recorded(self):
        def broken(a, b):
            raise RuntimeError("nope")

        report = run_benchmark({"levdist": distance, "broken": broken}, TINY)
        failed = report.for_engine("broken")
        assert len(failed) == 2
        assert all(not r.ok for r in failed)
        assert "RuntimeError: nope" in failed[0].error
        assert all(r.ok for r in report.for_engine("levdist"))

    def test_disagreement_detected(self):
        def wrong(a, b):
            return distance(a, b) + 1

        report = run_benchmark({"levdist": distance, "wrong": wrong}, TINY)
        lengths = [length for length, _ in disagreements(report)]
        assert lengths == [4, 16]


class TestTimeEngine:

    def test_result_fields(self):
        r = time_engine("levdist", distance, "kitten", "sittin", 0, 5)
        assert r.name == "levdist"
        assert r.length == 6
        assert r.distance == 2
        assert r.ok


class TestFormatReport:

    def test_sections_and_rows(self):
        report = run_benchmark({"levdist": distance}, TINY)
        text = format_report(report)
        assert "String Length: 4" in text
        assert "String Length: 16" in text
        assert text.count("ns/op") == 2
        assert "levdist" in text

    def test_error_row(self):
        def broken(a, b):
            raise ValueError("bad")

        report = run_benchmark({"broken": broken}, TINY)
        assert "ERROR: ValueError: bad" in format_report(report)


class TestCommandLine:

    def test_defaults_follow_config(self):
        import benchmark
        args = benchmark.parse_args([])
        defaults = BenchmarkConfig()
        assert tuple(args.lengths) == defaults.lengths
        assert args.iterations == defaults.iterations
        assert args.warmup == defaults.warmup
        assert args.seed == defaults.seed

    def test_repeated_lengths_rejected(self, capsys):
        import benchmark
        assert benchmark.main(["--lengths", "4", "16", "4"]) == 2
        assert "must not repeat" in capsys.readouterr().err


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
