"""
Tests for levdist.reference — the full-matrix oracle.

The oracle is only useful if it is independent of the engine it
checks, so these tests also pin down that it shares no code with
levdist.core.
"""

import sys
import os
import ast
import inspect
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from levdist import reference
from levdist.reference import reference_distance


class TestReferenceDistance:

    @pytest.mark.parametrize("s1,s2,expected", [
        ("", "", 0),
        ("", "hello", 5),
        ("hello", "", 5),
        ("cat", "cats", 1),
        ("cats", "cat", 1),
        ("cat", "bat", 1),
        ("kitten", "sitting", 3),
        ("saturday", "sunday", 3),
        ("Hello", "hello", 1),
        ("flaw", "lawn", 2),
    ])
    def test_known_distances(self, s1, s2, expected):
        assert reference_distance(s1, s2) == expected

    def test_rectangular_inputs(self):
        """Row-major indexing must use the width of b, not a."""
        assert reference_distance("a", "abcdefgh") == 7
        assert reference_distance("abcdefgh", "a") == 7
        assert reference_distance("ab", "xaxbx") == 3
        assert reference_distance("xaxbx", "ab") == 3

    def test_single_units(self):
        assert reference_distance("a", "a") == 0
        assert reference_distance("a", "b") == 1

    def test_sequences(self):
        assert reference_distance([1, 2, 3], [1, 3]) == 1
        assert reference_distance(b"abc", b"abd") == 1

    def test_astral_code_points(self):
        assert reference_distance("😀", "😁") == 1
        assert reference_distance("😀", "") == 1


class TestIndependence:

    def test_no_import_of_core(self):
        tree = ast.parse(inspect.getsource(reference))
        imported = []
        for node in ast.walk(tree):
            if isinstance(node, ast.ImportFrom):
                imported.append(node.module or "")
            elif isinstance(node, ast.Import):
                imported.extend(alias.name for alias in node.names)
        assert not any("core" in name for name in imported), imported

    def test_distinct_function(self):
        from levdist.core import distance
        assert reference_distance is not distance
        assert reference_distance.__module__ == "levdist.reference"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
