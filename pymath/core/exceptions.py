"""
Exception hierarchy for pymath.

All exceptions inherit from PyMathError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMathError(Exception):
    """Base exception for all pymath errors."""
    pass


class ValidationError(PyMathError):
    """
    Input validation failed.
    
    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.
    
    Raised when input data does not have the dimensionality a matrix
    requires (for example a 3D array passed where rows were expected).
    """
    pass


class ShapeError(DimensionError):
    """
    Operand shapes are incompatible.
    
    Raised for non-rectangular or empty construction, for elementwise
    operations on matrices of different shapes, and for products whose
    inner dimensions disagree.
    
    Attributes:
        operation: Name of the operation that failed ('construct', 'add',
            'sub', 'mm', 'from_data'), if known
        left_shape: Shape of the left operand or of the offending input
        right_shape: Shape of the right operand, for binary operations
    """
    
    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, ...] | None = None,
        right_shape: tuple[int, ...] | None = None
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class MatrixIndexError(ValidationError, IndexError):
    """
    Element index is outside the matrix.
    
    Also an IndexError, so code written against sequences keeps working.
    
    Attributes:
        index: The (row, col) pair, or the single row/column index, requested
        shape: Shape of the matrix that was indexed
    """
    
    def __init__(
        self,
        message: str,
        index: tuple[int, ...] | int | None = None,
        shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.index = index
        self.shape = shape
