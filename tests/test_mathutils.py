"""
Tests for integer helpers.
"""

import math

import pytest

from linopt.mathutils import fact


class TestFact:

    @pytest.mark.parametrize("n,expected", [(0, 1), (1, 1), (2, 2), (5, 120), (10, 3628800)])
    def test_small(self, n, expected):
        assert fact(n) == expected

    def test_negative_is_one(self):
        assert fact(-3) == 1

    def test_exact_beyond_64_bits(self):
        assert fact(30) == math.factorial(30)
        assert fact(30) > 2**64
