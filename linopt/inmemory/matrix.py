"""
Matrix: in-memory dense matrix over a generic ring element type.

The entries live in a private 2-D numpy array of dtype=object, so any
Python type with +, - and * closed over itself (int, float, Fraction,
Decimal, user-defined polynomials, ...) can be stored without coercion.
The array shape makes the non-jagged invariant structural: every row has
exactly m entries at all times.

Construction:
    Matrix(n, m)                 n x m, every entry 0
    Matrix(n, m, fill)           n x m, every entry `fill`
    Matrix.from_rows(rows)       nested literal, validated
    Matrix.from_array(array)     any 2-D array-like

Design decisions:
    - Each Matrix owns its storage; no two instances share an array, and
      fills, copies and transposes copy every element object
    - Scalars are applied entry by entry, never broadcast by numpy
    - Copying operations build a new result; in-place operations build the
      same result and swap it in, so a failed precondition never leaves a
      half-updated matrix
    - All indices are bounds-checked; negative indices are out of range
"""

from __future__ import annotations

import copy as _copy
import functools
import operator
from collections.abc import Iterator, Sequence
from typing import IO, Any, Callable, Generic

import numpy as np
from numpy.typing import ArrayLike, NDArray

from linopt.core.exceptions import EmptyMatrixError, InvalidDimensionError
from linopt.core.protocols import E
from linopt.core.validation import (
    check_dimension,
    check_index,
    check_product_shape,
    check_rows,
    check_same_shape,
)


class Matrix(Generic[E]):
    """
    Dense n x m matrix with n >= 1 and m >= 1.

    Supports ring arithmetic (+, -, matrix *, scalar *), row and column
    operations, transposition, bounds-checked access, equality and a
    textual round trip (see linopt.inmemory.textio).
    """

    __slots__ = ('_data',)

    # numpy scalars and arrays must defer to our reflected operators
    __array_ufunc__ = None

    # Mutable container
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, n: int, m: int, fill: Any = 0):
        n, m = check_dimension(n, m)
        data = np.empty((n, m), dtype=object)
        _fill(data, fill)
        self._data: NDArray[np.object_] = data

    # === Construction ===

    @classmethod
    def _wrap(cls, data: NDArray[np.object_]) -> Matrix[E]:
        """Adopt an already-validated object array without copying."""
        obj = cls.__new__(cls)
        obj._data = data
        return obj

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[E]]) -> Matrix[E]:
        """
        Build a matrix from a nested sequence of rows.

        Args:
            rows: Row sequences, all of the same non-zero length

        Raises:
            InvalidDimensionError: If there are no rows or row 0 is empty
            JaggedInputError: If row lengths differ
        """
        rows = [list(row) for row in rows]
        n, m = check_rows(rows)
        data = np.empty((n, m), dtype=object)
        for i, row in enumerate(rows):
            for j, entry in enumerate(row):
                data[i, j] = _copy.copy(entry)
        return cls._wrap(data)

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix[Any]:
        """
        Build a matrix from a 2-D array-like.

        numpy integer and float entries become the matching Python
        scalars.

        Raises:
            InvalidDimensionError: If the array is not 2-D with both
                extents >= 1
        """
        arr = np.asarray(array)
        if arr.ndim != 2:
            raise InvalidDimensionError(
                f"expected 2D array, got {arr.ndim}D with shape {arr.shape}"
            )
        check_dimension(*arr.shape)
        return cls._wrap(_copy_each(arr.astype(object)))

    def copy(self) -> Matrix[E]:
        """New matrix holding a copy of every entry."""
        return self._wrap(_copy_each(self._data))

    def __copy__(self) -> Matrix[E]:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Matrix[E]:
        return self._wrap(_copy.deepcopy(self._data, memo))

    def swap(self, other: Matrix[E]) -> None:
        """
        Exchange storage (and therefore shape and content) with other.

        Constant time; no entries are copied.
        """
        if not isinstance(other, Matrix):
            raise TypeError(f"can only swap with a Matrix, got {type(other).__name__}")
        self._data, other._data = other._data, self._data

    def _replace(self, result: Matrix[E]) -> Matrix[E]:
        """Take over result's storage; used by every in-place operation."""
        self.swap(result)
        return self

    # === Accessors ===

    @property
    def n(self) -> int:
        """Number of rows."""
        return self._data.shape[0]

    @property
    def m(self) -> int:
        """
        Number of columns.

        Raises:
            EmptyMatrixError: If the matrix holds no rows
        """
        if self._data.shape[0] == 0:
            raise EmptyMatrixError("column count is undefined for a matrix with no rows")
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        """(n, m)."""
        return self.n, self.m

    def _check_cell(self, r: Any, c: Any) -> tuple[int, int]:
        n, m = self._data.shape
        return check_index(r, n, 'row'), check_index(c, m, 'column')

    def get(self, r: int, c: int) -> E:
        """
        Entry at (r, c).

        The stored object itself is returned, so a mutable element can be
        modified in place through it. Do not hold on to it across an
        operation that replaces this matrix's storage.

        Raises:
            IndexOutOfRangeError: If r or c is out of range
        """
        r, c = self._check_cell(r, c)
        return self._data[r, c]

    def set(self, r: int, c: int, value: E) -> None:
        """
        Overwrite entry (r, c) with value.

        Raises:
            IndexOutOfRangeError: If r or c is out of range
        """
        r, c = self._check_cell(r, c)
        self._data[r, c] = value

    def __getitem__(self, key: tuple[int, int]) -> E:
        r, c = _unpack_key(key)
        return self.get(r, c)

    def __setitem__(self, key: tuple[int, int], value: E) -> None:
        r, c = _unpack_key(key)
        self.set(r, c, value)

    def row(self, r: int) -> list[E]:
        """Copy of row r as a list."""
        r = check_index(r, self.n, 'row')
        return list(self._data[r, :])

    def column(self, c: int) -> list[E]:
        """Copy of column c as a list."""
        c = check_index(c, self.m, 'column')
        return list(self._data[:, c])

    def tolist(self) -> list[list[E]]:
        """Nested list of rows."""
        return [list(row) for row in self._data]

    def to_array(self) -> NDArray[np.object_]:
        """Copy of the backing object array."""
        return self._data.copy()

    def __array__(self, dtype: Any = None, copy: bool | None = None) -> NDArray[Any]:
        """
        numpy conversion.

        copy=False returns a read-only view of the storage; it is only
        possible without a dtype change. Otherwise a new array is returned.
        """
        same_dtype = dtype is None or np.dtype(dtype) == self._data.dtype
        if copy is False:
            if not same_dtype:
                raise ValueError(
                    f"cannot convert Matrix to dtype {np.dtype(dtype)} without copying"
                )
            view = self._data.view()
            view.flags.writeable = False
            return view
        if same_dtype:
            return self._data.copy()
        return self._data.astype(dtype)

    def __iter__(self) -> Iterator[list[E]]:
        for row in self._data:
            yield list(row)

    # === Arithmetic ===

    def _add(self, other: Matrix[E]) -> Matrix[E]:
        check_same_shape(self.shape, other.shape, 'add')
        return self._wrap(self._data + other._data)

    def _subtract(self, other: Matrix[E]) -> Matrix[E]:
        check_same_shape(self.shape, other.shape, 'subtract')
        return self._wrap(self._data - other._data)

    def _matmul(self, other: Matrix[E]) -> Matrix[E]:
        """
        Triple-loop product.

        Entry (i, j) is accumulated left to right starting from the k=0
        product, so the element type needs no additive identity.
        """
        check_product_shape(self.shape, other.shape)
        n, m = self.n, other.m
        out = np.empty((n, m), dtype=object)
        columns = [other._data[:, j] for j in range(m)]
        for i in range(n):
            row = self._data[i, :]
            for j, col in enumerate(columns):
                out[i, j] = functools.reduce(operator.add, map(operator.mul, row, col))
        return self._wrap(out)

    def _scale(self, s: Any) -> Matrix[E]:
        return self._wrap(_apply(lambda e: e * s, self._data))

    def __add__(self, other: Any) -> Matrix[E]:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._add(other)

    def __sub__(self, other: Any) -> Matrix[E]:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._subtract(other)

    def __mul__(self, other: Any) -> Matrix[E]:
        """Matrix product if other is a Matrix, otherwise scaling by other."""
        if isinstance(other, Matrix):
            return self._matmul(other)
        return self._scale(other)

    def __rmul__(self, other: Any) -> Matrix[E]:
        # other is never a Matrix here
        return self._wrap(_apply(lambda e: other * e, self._data))

    def __matmul__(self, other: Any) -> Matrix[E]:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._matmul(other)

    def __iadd__(self, other: Any) -> Matrix[E]:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._replace(self._add(other))

    def __isub__(self, other: Any) -> Matrix[E]:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._replace(self._subtract(other))

    def __imul__(self, other: Any) -> Matrix[E]:
        if isinstance(other, Matrix):
            return self._replace(self._matmul(other))
        return self._replace(self._scale(other))

    def __imatmul__(self, other: Any) -> Matrix[E]:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._replace(self._matmul(other))

    # === Row and column operations ===

    def fill(self, e: E) -> Matrix[E]:
        """Set every entry to a copy of e."""
        _fill(self._data, e)
        return self

    def fill_row(self, r: int, e: E) -> Matrix[E]:
        """
        Set every entry of row r to a copy of e.

        Raises:
            IndexOutOfRangeError: If r is out of range
        """
        r = check_index(r, self.n, 'row')
        _fill(self._data[r, :], e)
        return self

    def fill_column(self, c: int, e: E) -> Matrix[E]:
        """
        Set every entry of column c to a copy of e.

        Raises:
            IndexOutOfRangeError: If c is out of range
        """
        c = check_index(c, self.m, 'column')
        _fill(self._data[:, c], e)
        return self

    def multiply_row(self, r: int, s: Any) -> Matrix[E]:
        """row r <- row r * s."""
        r = check_index(r, self.n, 'row')
        self._data[r, :] = _apply(lambda e: e * s, self._data[r, :])
        return self

    def multiply_column(self, c: int, s: Any) -> Matrix[E]:
        """column c <- column c * s."""
        c = check_index(c, self.m, 'column')
        self._data[:, c] = _apply(lambda e: e * s, self._data[:, c])
        return self

    def combine_rows(
        self,
        row1: int,
        factor1: Any,
        row2: int,
        factor2: Any,
        destination_row: int,
    ) -> Matrix[E]:
        """
        destination_row <- row1 * factor1 + row2 * factor2.

        The destination may coincide with either source row.

        Raises:
            IndexOutOfRangeError: If any of the three row indices is out of
                range; nothing is written in that case
        """
        n = self.n
        row1 = check_index(row1, n, 'row')
        row2 = check_index(row2, n, 'row')
        destination_row = check_index(destination_row, n, 'row')
        combined = (
            _apply(lambda e: e * factor1, self._data[row1, :])
            + _apply(lambda e: e * factor2, self._data[row2, :])
        )
        self._data[destination_row, :] = combined
        return self

    def combine_columns(
        self,
        column1: int,
        factor1: Any,
        column2: int,
        factor2: Any,
        destination_column: int,
    ) -> Matrix[E]:
        """
        destination_column <- column1 * factor1 + column2 * factor2.

        Raises:
            IndexOutOfRangeError: If any of the three column indices is out
                of range; nothing is written in that case
        """
        m = self.m
        column1 = check_index(column1, m, 'column')
        column2 = check_index(column2, m, 'column')
        destination_column = check_index(destination_column, m, 'column')
        combined = (
            _apply(lambda e: e * factor1, self._data[:, column1])
            + _apply(lambda e: e * factor2, self._data[:, column2])
        )
        self._data[:, destination_column] = combined
        return self

    # === Structural transforms ===

    def transpose(self) -> Matrix[E]:
        """New m x n matrix with entry (j, i) equal to this matrix's (i, j)."""
        return self._wrap(_copy_each(self._data.T))

    def inplace_transpose(self) -> Matrix[E]:
        """
        Transpose this matrix and return it.

        A square matrix is transposed by swapping entries across the
        diagonal without allocating. A non-square matrix takes over the
        storage of transpose(), so its shape changes from n x m to m x n.
        """
        n, m = self._data.shape
        if n != m:
            return self._replace(self.transpose())
        data = self._data
        for i in range(n):
            for j in range(i + 1, n):
                data[i, j], data[j, i] = data[j, i], data[i, j]
        return self

    # === Comparison ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self._data.shape != other._data.shape:
            return False
        return all(a == b for a, b in zip(self._data.flat, other._data.flat))

    # === Text serialization ===

    def write(self, fp: IO[str]) -> None:
        """Write this matrix in the textual format to a text stream."""
        from linopt.inmemory.textio import dump
        dump(self, fp)

    def read(self, fp: IO[str], element_type: Callable[[str], E] = float) -> Matrix[E]:
        """
        Replace this matrix's shape and content with one read from fp.

        The receiver is left untouched if the input is malformed.

        Raises:
            MatrixFormatError: If the stream does not hold a valid matrix
        """
        from linopt.inmemory.textio import load
        return self._replace(load(fp, element_type))

    def __str__(self) -> str:
        from linopt.inmemory.textio import dumps
        return dumps(self)

    def __repr__(self) -> str:
        n, m = self._data.shape
        return f"Matrix(n={n}, m={m})"


def _unpack_key(key: Any) -> tuple[Any, Any]:
    """Split a matrix[r, c] subscript."""
    if not isinstance(key, tuple) or len(key) != 2:
        raise TypeError(f"Matrix indices must be a (row, column) pair, got {key!r}")
    return key


def _copy_each(data: NDArray[np.object_]) -> NDArray[np.object_]:
    """New object array holding a shallow copy of every element of data."""
    return _apply(_copy.copy, data)


def _apply(func: Callable[[Any], Any], data: NDArray[np.object_]) -> NDArray[np.object_]:
    """
    New object array of func(e) for every element e of data.

    func receives single elements, so a sequence or array returned by it
    is stored as one entry instead of being broadcast.
    """
    out = np.empty(data.shape, dtype=object)
    for idx, entry in np.ndenumerate(data):
        out[idx] = func(entry)
    return out


def _fill(data: NDArray[np.object_], e: Any) -> None:
    """Set every element of data, in place, to its own copy of e."""
    if _copy.copy(e) is e:
        # immutable: copies are the object itself
        data.fill(e)
        return
    for idx in np.ndindex(data.shape):
        data[idx] = _copy.copy(e)
