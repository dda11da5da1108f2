"""
linopt: generic dense matrices for Python.

A Matrix holds n x m entries of any ring-like element type (int, float,
Fraction, Decimal, ...) and provides ring arithmetic, row and column
operations, transposition, bounds-checked access and a textual round trip.

Submodules:
    inmemory: Dense in-memory Matrix and its text format
    core: Exceptions, validation, protocols, configuration, logging
    mathutils: Integer helpers
"""

__version__ = "0.1.0"

from linopt.inmemory import Matrix
from linopt.core.exceptions import (
    LinoptError,
    ValidationError,
    DimensionError,
    InvalidDimensionError,
    JaggedInputError,
    DimensionMismatchError,
    IndexOutOfRangeError,
    EmptyMatrixError,
    MatrixFormatError,
)

__all__ = [
    "__version__",
    "Matrix",
    "LinoptError",
    "ValidationError",
    "DimensionError",
    "InvalidDimensionError",
    "JaggedInputError",
    "DimensionMismatchError",
    "IndexOutOfRangeError",
    "EmptyMatrixError",
    "MatrixFormatError",
]
