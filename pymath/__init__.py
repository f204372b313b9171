"""
pymath: dense matrix arithmetic for Python.

A small numeric library built on NumPy. Its one data type, Matrix, is an
immutable row-major float64 matrix with addition, subtraction, matrix
multiplication and transposition.

Submodules:
    linalg: Matrix type and its operations
    core: Exceptions, validation and precision constants
"""

__version__ = "0.1.0"

from pymath.core.exceptions import (
    PyMathError,
    ValidationError,
    DimensionError,
    ShapeError,
    MatrixIndexError,
)
from pymath.linalg import Matrix, add, sub, mm, transpose

__all__ = [
    "__version__",
    "Matrix",
    "add",
    "sub",
    "mm",
    "transpose",
    "PyMathError",
    "ValidationError",
    "DimensionError",
    "ShapeError",
    "MatrixIndexError",
]
