"""
Dense matrix value type with elementwise addition and subtraction, matrix
multiplication and dimension validation.
"""
from importlib.metadata import version, PackageNotFoundError

from densematrix.errors import (
    DimensionMismatchError,
    InvalidDimensionError,
    InvalidIndexError,
    MatrixError,
    NullInputError,
    NullOperandError,
)
from densematrix.logging_config import setup_logging
from densematrix.matrix import Matrix, add, multiply, subtract

try:
    __version__ = version("densematrix")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

__all__ = [
    "Matrix",
    "add",
    "subtract",
    "multiply",
    "setup_logging",
    "MatrixError",
    "InvalidDimensionError",
    "NullInputError",
    "NullOperandError",
    "InvalidIndexError",
    "DimensionMismatchError",
]
