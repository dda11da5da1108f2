"""
Exception hierarchy for linopt.

All exceptions inherit from LinoptError to allow catching any
library-specific error. Every failure is a contract violation detected
synchronously by the operation that raised it; nothing is retried and
nothing is logged on the way out.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - An operation that raises has not mutated any of its operands
"""


class LinoptError(Exception):
    """Base exception for all linopt errors."""
    pass


class ValidationError(LinoptError):
    """
    Input validation failed.

    Raised when caller-provided arguments fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Base class for the shape-related failures below.
    """
    pass


class InvalidDimensionError(DimensionError):
    """
    A matrix extent is not a positive integer.

    Attributes:
        n: Requested number of rows
        m: Requested number of columns
    """

    def __init__(self, message: str, n: object = None, m: object = None):
        super().__init__(message)
        self.n = n
        self.m = m


class JaggedInputError(DimensionError):
    """
    Rows of a nested literal do not all have the same length.

    Attributes:
        row: Index of the first offending row
        expected: Length of row 0
        actual: Length of the offending row
    """

    def __init__(self, message: str, row: int, expected: int, actual: int):
        super().__init__(message)
        self.row = row
        self.expected = expected
        self.actual = actual


class DimensionMismatchError(DimensionError):
    """
    Operand shapes are incompatible for an arithmetic operation.

    Attributes:
        operation: Name of the operation ('add', 'subtract', 'multiply')
        left_shape: (n, m) of the left operand
        right_shape: (n, m) of the right operand
    """

    def __init__(
        self,
        message: str,
        operation: str,
        left_shape: tuple[int, int],
        right_shape: tuple[int, int],
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class IndexOutOfRangeError(ValidationError, IndexError):
    """
    Row or column index outside [0, size).

    Also an IndexError, so generic sequence-handling code catches it.

    Attributes:
        axis: 'row' or 'column'
        index: The offending index
        size: Number of rows or columns on that axis
    """

    def __init__(self, message: str, axis: str, index: object, size: int):
        super().__init__(message)
        self.axis = axis
        self.index = index
        self.size = size


class EmptyMatrixError(ValidationError):
    """Column count requested from a matrix that holds no rows."""
    pass


class MatrixFormatError(ValidationError):
    """
    Textual matrix input is malformed.

    Attributes:
        position: Zero-based index of the token where parsing failed,
            or None if the failure is not tied to one token
    """

    def __init__(self, message: str, position: int | None = None):
        super().__init__(message)
        self.position = position
