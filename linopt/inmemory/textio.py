"""
Textual matrix format.

A matrix is written as a whitespace-delimited token stream:

    <n> <m> <e_00> <e_01> ... <e_0,m-1> <e_10> ... <e_n-1,m-1>

Entries are in row-major order and use str(e). There is no header magic,
no version and no byte-order concern. Reading takes an element_type
callable that turns one token back into an element (int, float,
fractions.Fraction, decimal.Decimal, ...); the round trip is exact
whenever element_type(str(e)) == e.

Usage:
    from linopt.inmemory.textio import dumps, loads

    text = dumps(Matrix(2, 2, 4))     # '2 2 4 4 4 4'
    again = loads(text, int)

Headers with n < 1 or m < 1 are rejected rather than producing an
empty matrix.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, Any, Callable

import numpy as np

from linopt.core.exceptions import MatrixFormatError
from linopt.inmemory.matrix import Matrix

ElementParser = Callable[[str], Any]


def dumps(matrix: Matrix[Any]) -> str:
    """Serialize matrix to a single line of text."""
    n, m = matrix.shape
    tokens = [str(n), str(m)]
    tokens.extend(str(entry) for entry in matrix.to_array().flat)
    return ' '.join(tokens)


def dump(matrix: Matrix[Any], fp: IO[str]) -> None:
    """Write matrix to a text stream."""
    fp.write(dumps(matrix))


def _parse_extent(token: str | None, name: str, position: int) -> int:
    if token is None:
        raise MatrixFormatError(f"missing {name} in header", position=position)
    try:
        value = int(token)
    except ValueError as e:
        raise MatrixFormatError(
            f"{name} must be an integer, got {token!r}", position=position
        ) from e
    if value < 1:
        raise MatrixFormatError(f"{name} must be >= 1, got {value}", position=position)
    return value


def _read_matrix(
    tokens: list[str],
    start: int,
    element_type: ElementParser,
) -> tuple[Matrix[Any], int]:
    """
    Parse one matrix from tokens[start:].

    Returns:
        (matrix, index of the first token after it)
    """
    def token_at(i: int) -> str | None:
        return tokens[i] if i < len(tokens) else None

    n = _parse_extent(token_at(start), 'row count', start)
    m = _parse_extent(token_at(start + 1), 'column count', start + 1)

    body_start = start + 2
    body_end = body_start + n * m
    if body_end > len(tokens):
        raise MatrixFormatError(
            f"expected {n * m} entries for a {n}x{m} matrix, "
            f"got {len(tokens) - body_start}",
            position=len(tokens),
        )

    data = np.empty((n, m), dtype=object)
    flat = data.reshape(-1)
    for offset, token in enumerate(tokens[body_start:body_end]):
        try:
            flat[offset] = element_type(token)
        except (ValueError, TypeError, ArithmeticError) as e:
            raise MatrixFormatError(
                f"cannot parse entry ({offset // m}, {offset % m}) from {token!r}: {e}",
                position=body_start + offset,
            ) from e
    return Matrix._wrap(data), body_end


def loads(text: str, element_type: ElementParser = float) -> Matrix[Any]:
    """
    Parse exactly one matrix from text.

    Args:
        text: Token stream in the textual format
        element_type: Callable turning one token into an element

    Raises:
        MatrixFormatError: If the header is missing or invalid, the body
            is truncated, an entry does not parse, or tokens remain after
            the matrix
    """
    tokens = text.split()
    matrix, end = _read_matrix(tokens, 0, element_type)
    if end != len(tokens):
        raise MatrixFormatError(
            f"{len(tokens) - end} unexpected token(s) after {matrix.n}x{matrix.m} matrix",
            position=end,
        )
    return matrix


def load(fp: IO[str], element_type: ElementParser = float) -> Matrix[Any]:
    """Read exactly one matrix from a text stream. See loads()."""
    return loads(fp.read(), element_type)


def iter_loads(text: str, element_type: ElementParser = float) -> Iterator[Matrix[Any]]:
    """
    Yield every matrix from a stream of concatenated records.

    Raises:
        MatrixFormatError: On the first malformed record
    """
    tokens = text.split()
    position = 0
    while position < len(tokens):
        matrix, position = _read_matrix(tokens, position, element_type)
        yield matrix
