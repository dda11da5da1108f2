"""
Core infrastructure for linopt.

This module provides the shared abstractions used by every matrix
backing (in-memory today; disk-backed storage would reuse them).

Key components:
    protocols: RingElement, MatrixLike protocols
    exceptions: Exception hierarchy
    validation: Input validators
    config: Environment-driven runtime configuration
    logging: Logging setup for the entry point
"""

from linopt.core.protocols import MatrixLike, RingElement
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
    # Protocols
    "MatrixLike",
    "RingElement",
    # Exceptions
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
