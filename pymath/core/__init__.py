"""
Core infrastructure for pymath.

This module provides the exception hierarchy, input validators and numeric
constants shared by the linear algebra types.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Precision constants and tolerance tiers
"""

from pymath.core.exceptions import (
    PyMathError,
    ValidationError,
    DimensionError,
    ShapeError,
    MatrixIndexError,
)

__all__ = [
    "PyMathError",
    "ValidationError",
    "DimensionError",
    "ShapeError",
    "MatrixIndexError",
]
