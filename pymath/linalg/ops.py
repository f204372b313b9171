"""
Free-function forms of the Matrix operations.

Each function checks that its operands are matrices and then delegates to
the corresponding Matrix method, so shape validation lives in one place.

Public API:
    add(a, b)       - Elementwise sum
    sub(a, b)       - Elementwise difference
    mm(a, b)        - Matrix product
    transpose(a)    - Transpose
"""

from pymath.core.validation import check_matrix
from pymath.linalg.matrix import Matrix


def add(a: Matrix, b: Matrix) -> Matrix:
    """
    Elementwise sum of two matrices of equal shape.

    Raises:
        ValidationError: If an operand is not a Matrix
        ShapeError: If shapes differ
    """
    check_matrix(a, 'a')
    check_matrix(b, 'b')
    return a.add(b)


def sub(a: Matrix, b: Matrix) -> Matrix:
    """
    Elementwise difference a - b of two matrices of equal shape.

    Raises:
        ValidationError: If an operand is not a Matrix
        ShapeError: If shapes differ
    """
    check_matrix(a, 'a')
    check_matrix(b, 'b')
    return a.sub(b)


def mm(a: Matrix, b: Matrix) -> Matrix:
    """
    Matrix product a @ b.

    Raises:
        ValidationError: If an operand is not a Matrix
        ShapeError: If a.n_cols != b.n_rows
    """
    check_matrix(a, 'a')
    check_matrix(b, 'b')
    return a.mm(b)


def transpose(a: Matrix) -> Matrix:
    """Transpose of a."""
    check_matrix(a, 'a')
    return a.transpose()
