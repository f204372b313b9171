"""
Dense linear algebra.

Public API:
    Matrix          - Immutable dense float64 matrix
    add(a, b)       - Elementwise sum
    sub(a, b)       - Elementwise difference
    mm(a, b)        - Matrix product
    transpose(a)    - Transpose

Example:
    >>> from pymath.linalg import Matrix, mm
    >>> a = Matrix([1.0, 2.0], [3.0, 4.0])
    >>> b = Matrix([5.0, 6.0], [7.0, 8.0])
    >>> print(mm(a, b))
    19.0 22.0
    43.0 50.0
"""

from pymath.linalg.matrix import Matrix
from pymath.linalg.ops import add, sub, mm, transpose

__all__ = [
    "Matrix",
    "add",
    "sub",
    "mm",
    "transpose",
]
