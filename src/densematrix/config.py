"""
Configuration & Global Constants
================================
This module serves as the central registry for global constants shared by
the matrix type and its operators.

Exports:
    DTYPE: Element type of every matrix buffer.
    DEFAULT_RTOL (float): Relative tolerance used by `Matrix.is_close`.
    DEFAULT_ATOL (float): Absolute tolerance used by `Matrix.is_close`.
    LOGGER_NAMESPACE (str): Name of the package-level logger.
"""
import numpy as np


# Global Constants
DTYPE = np.float64
DEFAULT_RTOL: float = 1e-9
DEFAULT_ATOL: float = 0.0
LOGGER_NAMESPACE: str = "densematrix"
