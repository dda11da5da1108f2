"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_dimension: positive integer extents
    - check_index: [0, size) bounds, no wrap-around, no bools
    - check_rows: empty and jagged literals
    - check_same_shape / check_product_shape: operand compatibility
"""

import numpy as np
import pytest

from linopt.core.exceptions import (
    DimensionMismatchError,
    IndexOutOfRangeError,
    InvalidDimensionError,
    JaggedInputError,
)
from linopt.core.validation import (
    check_dimension,
    check_index,
    check_product_shape,
    check_rows,
    check_same_shape,
)


# ═══════════════════════════════════════════════════════════════════════
# check_dimension
# ═══════════════════════════════════════════════════════════════════════


class TestCheckDimension:

    def test_valid(self):
        assert check_dimension(3, 4) == (3, 4)

    def test_numpy_ints_accepted(self):
        n, m = check_dimension(np.int64(2), np.int32(5))
        assert (n, m) == (2, 5)
        assert type(n) is int

    @pytest.mark.parametrize("n,m", [(0, 1), (1, 0), (-1, 3), (0, 0)])
    def test_non_positive(self, n, m):
        with pytest.raises(InvalidDimensionError, match=">= 1"):
            check_dimension(n, m)

    @pytest.mark.parametrize("n,m", [(2.0, 3), (2, "3"), (True, 2), (None, 1)])
    def test_non_integer(self, n, m):
        with pytest.raises(InvalidDimensionError, match="integers"):
            check_dimension(n, m)


# ═══════════════════════════════════════════════════════════════════════
# check_index
# ═══════════════════════════════════════════════════════════════════════


class TestCheckIndex:

    def test_bounds_inclusive_exclusive(self):
        assert check_index(0, 3, "row") == 0
        assert check_index(2, 3, "row") == 2

    def test_upper_bound(self):
        with pytest.raises(IndexOutOfRangeError, match=r"row index 3 out of range \[0, 3\)"):
            check_index(3, 3, "row")

    def test_negative_rejected(self):
        with pytest.raises(IndexOutOfRangeError) as info:
            check_index(-1, 3, "column")
        assert info.value.axis == "column"
        assert info.value.index == -1
        assert info.value.size == 3

    def test_bool_rejected(self):
        with pytest.raises(IndexOutOfRangeError):
            check_index(True, 3, "row")

    def test_float_rejected(self):
        with pytest.raises(IndexOutOfRangeError):
            check_index(1.0, 3, "row")


# ═══════════════════════════════════════════════════════════════════════
# check_rows
# ═══════════════════════════════════════════════════════════════════════


class TestCheckRows:

    def test_valid(self):
        assert check_rows([[1, 2, 3], [4, 5, 6]]) == (2, 3)

    def test_no_rows(self):
        with pytest.raises(InvalidDimensionError, match="row"):
            check_rows([])

    def test_empty_first_row(self):
        with pytest.raises(InvalidDimensionError, match="column"):
            check_rows([[]])

    def test_jagged(self):
        with pytest.raises(JaggedInputError) as info:
            check_rows([[1, 2], [3, 4], [5]])
        assert info.value.row == 2
        assert info.value.expected == 2
        assert info.value.actual == 1

    def test_jagged_longer_row(self):
        with pytest.raises(JaggedInputError):
            check_rows([[1], [2, 3]])


# ═══════════════════════════════════════════════════════════════════════
# Shape compatibility
# ═══════════════════════════════════════════════════════════════════════


class TestShapeChecks:

    def test_same_shape_ok(self):
        check_same_shape((2, 3), (2, 3), "add")

    def test_same_shape_mismatch(self):
        with pytest.raises(DimensionMismatchError, match="cannot subtract 2x3 and 3x2") as info:
            check_same_shape((2, 3), (3, 2), "subtract")
        assert info.value.operation == "subtract"

    def test_product_ok(self):
        check_product_shape((3, 4), (4, 2))

    def test_product_mismatch(self):
        with pytest.raises(DimensionMismatchError, match="left has 4 columns, right has 3 rows") as info:
            check_product_shape((3, 4), (3, 4))
        assert info.value.operation == "multiply"
        assert info.value.left_shape == (3, 4)
        assert info.value.right_shape == (3, 4)
