"""
Dense Matrix
============
Two-dimensional matrix of double-precision values backed by a NumPy buffer.

The shape of a matrix is fixed when it is created; only element values may
change afterwards. The module-level functions `add`, `subtract` and
`multiply` are the primitive operations. The arithmetic operators and the
instance methods of the same names forward to them.

Matrices are not thread-safe. Callers sharing one instance across threads
must synchronize writes themselves.
"""
from __future__ import annotations

import logging
import operator
from typing import TYPE_CHECKING, Any, Optional

import numpy as np

from densematrix.config import DEFAULT_ATOL, DEFAULT_RTOL, DTYPE
from densematrix.errors import (
    DimensionMismatchError,
    InvalidDimensionError,
    InvalidIndexError,
    NullInputError,
    NullOperandError,
)

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class Matrix:
    """
    Dense matrix with immutable shape and mutable contents.

    Elements are stored in a `float64` ndarray of shape (rows, columns) which
    is exposed through the `array` property.
    """

    # Keep NumPy from broadcasting an ndarray against a Matrix elementwise.
    __array_ufunc__ = None

    # Mutable value type
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: int, columns: int) -> None:
        """
        Initialize a zero-filled matrix.

        Args:
            rows: Number of rows.
            columns: Number of columns.

        Raises:
            InvalidDimensionError: If `rows` or `columns` is negative.
        """
        rows = operator.index(rows)
        columns = operator.index(columns)
        if rows < 0:
            raise InvalidDimensionError(f"rows cannot be less than zero, got {rows}.")
        if columns < 0:
            raise InvalidDimensionError(f"columns cannot be less than zero, got {columns}.")

        self._rows = rows
        self._columns = columns
        self._array: npt.NDArray[np.float64] = np.zeros((rows, columns), dtype=DTYPE)

    @classmethod
    def from_array(cls, array: Any, copy: bool = False) -> Matrix:
        """
        Create a matrix that wraps an existing two-dimensional buffer.

        A writeable `float64` ndarray is adopted without copying unless
        `copy` is set: element writes through the matrix are then visible to
        every other holder of that buffer, and vice versa. The matrix keeps
        its own view of the data, so reshaping the original array does not
        change the matrix shape. Read-only arrays and any other input
        (nested sequences, arrays of another dtype) are converted into a new
        `float64` buffer.

        Args:
            array: Two-dimensional buffer or nested sequence of numbers.
            copy: Always store a private copy of the data.

        Raises:
            NullInputError: If `array` is None.
            InvalidDimensionError: If `array` is not a rectangular 2-D buffer.
            ValueError: If the elements cannot be converted to float.

        Returns:
            A matrix whose shape is taken from the extents of `array`.
        """
        if array is None:
            raise NullInputError("array cannot be None.")

        try:
            raw = np.asarray(array)
        except ValueError as e:
            raise InvalidDimensionError(f"array must be a rectangular two-dimensional buffer: {e}") from e

        # Non-numeric content raises from numpy unchanged
        buffer = raw.astype(DTYPE, copy=copy)

        if buffer.ndim != 2:
            raise InvalidDimensionError(f"array must be two-dimensional, got {buffer.ndim} dimension(s).")

        if not buffer.flags.writeable:
            logger.debug("Copying read-only buffer.")
            buffer = buffer.copy()

        matrix = cls.__new__(cls)
        matrix._rows, matrix._columns = buffer.shape
        matrix._array = buffer.view()
        logger.debug(f"Wrapped {matrix._rows}x{matrix._columns} buffer (copy={copy}).")
        return matrix

    @classmethod
    def identity(cls, size: int) -> Matrix:
        """Square identity matrix of the given size."""
        matrix = cls(size, size)
        np.fill_diagonal(matrix._array, 1.0)
        return matrix

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(rows={self._rows}, columns={self._columns})"

    def __str__(self) -> str:
        return np.array2string(self._array)

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def columns(self) -> int:
        """Number of columns."""
        return self._columns

    @property
    def shape(self) -> tuple[int, int]:
        """The (rows, columns) pair."""
        return self._rows, self._columns

    @property
    def array(self) -> npt.NDArray[np.float64]:
        """
        View of the element buffer.

        Writes to its elements change the matrix. Its shape may be changed
        without affecting the matrix.
        """
        return self._array.view()

    # --- Element access ---

    def _check_index(self, row: int, column: int) -> tuple[int, int]:
        row = operator.index(row)
        column = operator.index(column)
        if row < 0 or row >= self._rows:
            raise InvalidIndexError(f"row index {row} is out of range for {self._rows} row(s).")
        if column < 0 or column >= self._columns:
            raise InvalidIndexError(f"column index {column} is out of range for {self._columns} column(s).")
        return row, column

    def get(self, row: int, column: int) -> float:
        """
        Return the element at (row, column).

        Raises:
            InvalidIndexError: If either index is negative or not below the extent.
        """
        row, column = self._check_index(row, column)
        return float(self._array[row, column])

    def set(self, row: int, column: int, value: float) -> None:
        """
        Store `value` at (row, column).

        Raises:
            InvalidIndexError: If either index is negative or not below the extent.
        """
        row, column = self._check_index(row, column)
        self._array[row, column] = float(value)

    @staticmethod
    def _split_key(key: Any) -> tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError(f"Matrix indices must be a (row, column) pair, got {key!r}.")
        return key

    def __getitem__(self, key: tuple[int, int]) -> float:
        return self.get(*self._split_key(key))

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        self.set(*self._split_key(key), value)

    # --- Arithmetic ---

    def add(self, matrix: Optional[Matrix]) -> Matrix:
        """Sum of this matrix and `matrix`. See `add`."""
        return add(self, matrix)

    def subtract(self, matrix: Optional[Matrix]) -> Matrix:
        """This matrix minus `matrix`. See `subtract`."""
        return subtract(self, matrix)

    def multiply(self, matrix: Optional[Matrix]) -> Matrix:
        """Product of this matrix (left) and `matrix` (right). See `multiply`."""
        return multiply(self, matrix)

    def __add__(self, other: Any) -> Matrix:
        if other is None or isinstance(other, Matrix):
            return add(self, other)
        return NotImplemented

    def __radd__(self, other: Any) -> Matrix:
        if other is None:
            return add(other, self)
        return NotImplemented

    def __sub__(self, other: Any) -> Matrix:
        if other is None or isinstance(other, Matrix):
            return subtract(self, other)
        return NotImplemented

    def __rsub__(self, other: Any) -> Matrix:
        if other is None:
            return subtract(other, self)
        return NotImplemented

    # `*` and `@` both denote the matrix product
    def __matmul__(self, other: Any) -> Matrix:
        if other is None or isinstance(other, Matrix):
            return multiply(self, other)
        return NotImplemented

    def __rmatmul__(self, other: Any) -> Matrix:
        if other is None:
            return multiply(other, self)
        return NotImplemented

    __mul__ = __matmul__
    __rmul__ = __rmatmul__

    # --- Value semantics ---

    def clone(self) -> Matrix:
        """Deep copy of this matrix with an independent buffer."""
        return Matrix.from_array(self._array, copy=True)

    def __copy__(self) -> Matrix:
        return self.clone()

    def __deepcopy__(self, memo: dict) -> Matrix:
        return self.clone()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._array, other._array))

    def is_close(self, other: Matrix, rtol: float = DEFAULT_RTOL, atol: float = DEFAULT_ATOL) -> bool:
        """
        Compare with another matrix within a floating-point tolerance.

        Args:
            other: Matrix to compare with.
            rtol: Relative tolerance.
            atol: Absolute tolerance.

        Returns:
            True if shapes match and every pair of elements satisfies
            ``|a - b| <= atol + rtol * |b|``.
        """
        if not isinstance(other, Matrix) or self.shape != other.shape:
            return False
        return bool(np.allclose(self._array, other._array, rtol=rtol, atol=atol))

    def to_list(self) -> list[list[float]]:
        """Elements as nested lists of Python floats."""
        return self._array.tolist()


def _check_operands(left: Optional[Matrix], right: Optional[Matrix]) -> None:
    if left is None:
        raise NullOperandError("matrix1 cannot be None.")
    if right is None:
        raise NullOperandError("matrix2 cannot be None.")


def _mismatch(operation: str, left: Matrix, right: Matrix) -> DimensionMismatchError:
    error = DimensionMismatchError(operation, left.shape, right.shape)
    logger.error(str(error))
    return error


def add(left: Optional[Matrix], right: Optional[Matrix]) -> Matrix:
    """
    Elementwise sum of two matrices of equal shape.

    Args:
        left: First operand.
        right: Second operand.

    Raises:
        NullOperandError: If either operand is None.
        DimensionMismatchError: If the shapes differ.

    Returns:
        New matrix; neither operand is modified.
    """
    _check_operands(left, right)
    if left.shape != right.shape:
        raise _mismatch("sum", left, right)

    result = Matrix(left.rows, left.columns)
    np.add(left.array, right.array, out=result.array)
    logger.debug(f"Added two {left.rows}x{left.columns} matrices.")
    return result


def subtract(left: Optional[Matrix], right: Optional[Matrix]) -> Matrix:
    """
    Elementwise difference ``left - right`` of two matrices of equal shape.

    Raises:
        NullOperandError: If either operand is None.
        DimensionMismatchError: If the shapes differ.
    """
    _check_operands(left, right)
    if left.shape != right.shape:
        raise _mismatch("subtract", left, right)

    result = Matrix(left.rows, left.columns)
    np.subtract(left.array, right.array, out=result.array)
    logger.debug(f"Subtracted two {left.rows}x{left.columns} matrices.")
    return result


def multiply(left: Optional[Matrix], right: Optional[Matrix]) -> Matrix:
    """
    Matrix product ``left @ right``.

    Each cell of the zero-initialized result accumulates
    ``left[i, k] * right[k, j]`` over the inner dimension k.

    Args:
        left: Matrix of shape (n, m).
        right: Matrix of shape (m, p).

    Raises:
        NullOperandError: If either operand is None.
        DimensionMismatchError: If ``left.columns != right.rows``.

    Returns:
        New matrix of shape (n, p).
    """
    _check_operands(left, right)
    if left.columns != right.rows:
        raise _mismatch("product", left, right)

    result = Matrix(left.rows, right.columns)
    a = left.array
    b = right.array
    c = result.array
    for i in range(result.rows):
        for j in range(result.columns):
            for k in range(left.columns):
                c[i, j] += a[i, k] * b[k, j]

    logger.debug(f"Multiplied {left.rows}x{left.columns} by {right.rows}x{right.columns}.")
    return result
