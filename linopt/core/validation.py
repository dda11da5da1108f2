"""
Input validation utilities for linopt.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about caller intent.

Design principles:
    - No silent coercion (bools and floats are not indices)
    - No Python-style negative index wrap-around
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
"""

from __future__ import annotations

import operator
from collections.abc import Sequence
from typing import Any

from linopt.core.exceptions import (
    DimensionMismatchError,
    IndexOutOfRangeError,
    InvalidDimensionError,
    JaggedInputError,
)


def _as_int(value: Any) -> int | None:
    """Return value as an int if it is an integer (not a bool), else None."""
    if isinstance(value, bool):
        return None
    try:
        return operator.index(value)
    except TypeError:
        return None


def check_dimension(n: Any, m: Any) -> tuple[int, int]:
    """
    Verify both matrix extents are integers >= 1.

    Args:
        n: Number of rows
        m: Number of columns

    Returns:
        (n, m) as plain ints

    Raises:
        InvalidDimensionError: If either extent is not a positive integer
    """
    n_int = _as_int(n)
    m_int = _as_int(m)
    if n_int is None or m_int is None:
        raise InvalidDimensionError(
            f"dimensions must be integers, got n={n!r}, m={m!r}", n=n, m=m
        )
    if n_int < 1 or m_int < 1:
        raise InvalidDimensionError(
            f"dimensions must be >= 1, got n={n_int}, m={m_int}", n=n_int, m=m_int
        )
    return n_int, m_int


def check_index(index: Any, size: int, axis: str) -> int:
    """
    Verify an index lies in [0, size).

    Args:
        index: Row or column index
        size: Extent of the axis
        axis: 'row' or 'column', used in the error message

    Returns:
        index as a plain int

    Raises:
        IndexOutOfRangeError: If index is not an integer or out of range
    """
    idx = _as_int(index)
    if idx is None or idx < 0 or idx >= size:
        raise IndexOutOfRangeError(
            f"{axis} index {index!r} out of range [0, {size})",
            axis=axis,
            index=index,
            size=size,
        )
    return idx


def check_rows(rows: Sequence[Sequence[Any]]) -> tuple[int, int]:
    """
    Verify a nested literal is non-empty and not jagged.

    Args:
        rows: Sequence of row sequences

    Returns:
        (n, m) of the literal

    Raises:
        InvalidDimensionError: If there are no rows or the first row is empty
        JaggedInputError: If any row length differs from the first row's
    """
    n = len(rows)
    if n == 0:
        raise InvalidDimensionError("need at least 1 row, got 0", n=0, m=None)
    m = len(rows[0])
    if m == 0:
        raise InvalidDimensionError("need at least 1 column, got 0", n=n, m=0)
    for i, row in enumerate(rows):
        if len(row) != m:
            raise JaggedInputError(
                f"row {i} has {len(row)} entries, expected {m} (row 0 length)",
                row=i,
                expected=m,
                actual=len(row),
            )
    return n, m


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two shapes are identical (elementwise operations).

    Raises:
        DimensionMismatchError: If the shapes differ
    """
    if left != right:
        raise DimensionMismatchError(
            f"cannot {operation} {left[0]}x{left[1]} and {right[0]}x{right[1]} "
            f"matrices: shapes must be identical",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )


def check_product_shape(
    left: tuple[int, int],
    right: tuple[int, int],
) -> None:
    """
    Verify the inner dimensions of a matrix product agree.

    Raises:
        DimensionMismatchError: If left has a column count different from
            right's row count
    """
    if left[1] != right[0]:
        raise DimensionMismatchError(
            f"cannot multiply {left[0]}x{left[1]} by {right[0]}x{right[1]}: "
            f"left has {left[1]} columns, right has {right[0]} rows",
            operation="multiply",
            left_shape=left,
            right_shape=right,
        )
