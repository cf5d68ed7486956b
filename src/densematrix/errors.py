"""
Exceptions raised by matrix construction, indexing and arithmetic.

Each error also derives from the closest built-in exception, so callers may
catch either the specific class or e.g. ``ValueError``.
"""
from __future__ import annotations


class MatrixError(Exception):
    """Base class for all matrix errors."""


class InvalidDimensionError(MatrixError, ValueError):
    """A row or column count is negative, or a buffer is not two-dimensional."""


class NullInputError(MatrixError, TypeError):
    """A buffer passed to a constructor is None."""


class NullOperandError(MatrixError, TypeError):
    """An operand of add, subtract or multiply is None."""


class InvalidIndexError(MatrixError, IndexError):
    """A row or column index lies outside the matrix."""


class DimensionMismatchError(MatrixError, ValueError):
    """
    Shapes of two operands are incompatible for the requested operation.

    Attributes:
        left_shape: Shape (rows, columns) of the first operand.
        right_shape: Shape (rows, columns) of the second operand.
    """

    def __init__(self, operation: str, left_shape: tuple[int, int], right_shape: tuple[int, int]) -> None:
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape
        super().__init__(
            f"Cannot compute {operation}, matrix dimensions do not match:\n\t"
            f"matrix1 : {left_shape[0]}x{left_shape[1]}\n\t"
            f"matrix2 : {right_shape[0]}x{right_shape[1]}"
        )
