"""
Input validation utilities for pymath.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import warnings
from typing import Any, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymath.core.exceptions import (
    DimensionError,
    MatrixIndexError,
    ShapeError,
    ValidationError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.
    
    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).
    
    Args:
        array: Input to validate
        name: Parameter name for error messages
        
    Returns:
        numpy.ndarray with float64 dtype
        
    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e
    
    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number) or np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numeric data"
        )

    return result.astype(np.float64, copy=False)


def check_finite(array: NDArray[np.float64], name: str, stacklevel: int = 2) -> None:
    """
    Warn if array contains NaN or Inf values.
    
    Non-finite values follow standard floating-point semantics through
    every operation, so they are reported rather than rejected.
    
    Args:
        array: Array to check
        name: Parameter name for warning messages
        stacklevel: Stack level counted from the caller of check_finite,
            as in warnings.warn (2 is the caller's caller)
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        warnings.warn(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)",
            RuntimeWarning,
            stacklevel=stacklevel + 1,
        )


def check_2d(array: NDArray[np.float64], name: str) -> None:
    """
    Verify array is 2-dimensional.
    
    Args:
        array: Array to check
        name: Parameter name for error messages
        
    Raises:
        DimensionError: If array is not 2D
    """
    if array.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}"
        )


def check_rectangular(rows: Sequence[Any], name: str) -> None:
    """
    Verify a sequence of rows has at least one row and equal row lengths.
    
    Runs before numpy conversion so ragged input is reported with the
    offending row instead of a generic conversion failure.
    
    Args:
        rows: Sequence of row sequences
        name: Parameter name for error messages
        
    Raises:
        ShapeError: If there are no rows or row lengths differ
        ValidationError: If a row is not a sequence
    """
    if len(rows) == 0:
        raise ShapeError(f"{name}: at least one row is required", operation='construct')

    lengths = []
    for i, row in enumerate(rows):
        try:
            lengths.append(len(row))
        except TypeError as e:
            raise ValidationError(
                f"{name}: row {i} is not a sequence (got {type(row).__name__})"
            ) from e

    expected = lengths[0]
    for i, length in enumerate(lengths):
        if length != expected:
            raise ShapeError(
                f"{name}: row {i} has {length} elements, expected {expected} "
                f"(all rows must have equal length)",
                operation='construct',
            )


def check_nonempty_shape(shape: tuple[int, ...], name: str) -> None:
    """
    Verify every dimension of a shape is an integer of at least 1.
    
    Args:
        shape: Shape tuple to check
        name: Parameter name for error messages
        
    Raises:
        ValidationError: If a dimension is not an integer
        ShapeError: If any dimension is less than 1
    """
    for d in shape:
        if isinstance(d, (bool, np.bool_)) or not isinstance(d, (int, np.integer)):
            raise ValidationError(
                f"{name}: matrix dimensions must be integers, got {type(d).__name__} {d!r}"
            )
    if any(d < 1 for d in shape):
        raise ShapeError(
            f"{name}: matrix dimensions must be at least 1, got shape {shape}",
            operation='construct',
            left_shape=tuple(shape),
        )


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two operands of an elementwise operation have identical shapes.
    
    Args:
        left: Shape of the left operand
        right: Shape of the right operand
        operation: Operation name for error messages
        
    Raises:
        ShapeError: If shapes differ
    """
    if left != right:
        raise ShapeError(
            f"{operation}: shape mismatch, left is {left[0]}x{left[1]} "
            f"but right is {right[0]}x{right[1]}",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )


def check_inner_dims(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify the inner dimensions of a matrix product agree.
    
    Args:
        left: Shape of the left operand (R1, C1)
        right: Shape of the right operand (R2, C2)
        operation: Operation name for error messages
        
    Raises:
        ShapeError: If C1 != R2
    """
    if left[1] != right[0]:
        raise ShapeError(
            f"{operation}: inner dimension mismatch, left is {left[0]}x{left[1]} "
            f"and right is {right[0]}x{right[1]} ({left[1]} != {right[0]})",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )


def check_index(index: int, size: int, axis: str, shape: tuple[int, int]) -> int:
    """
    Verify an element index lies in [0, size).
    
    Negative indices are rejected rather than wrapped.
    
    Args:
        index: Index to check
        size: Length of the indexed axis
        axis: 'row' or 'col', for error messages
        shape: Shape of the matrix, attached to the error
        
    Returns:
        The index as a plain int
        
    Raises:
        MatrixIndexError: If index is not an integer or is out of range
    """
    if isinstance(index, (bool, np.bool_)) or not isinstance(index, (int, np.integer)):
        raise MatrixIndexError(
            f"{axis} index must be an integer, got {type(index).__name__}",
            index=None,
            shape=shape,
        )
    if index < 0 or index >= size:
        raise MatrixIndexError(
            f"{axis} index {index} out of bounds for matrix of shape {shape}",
            index=int(index),
            shape=shape,
        )
    return int(index)


def check_matrix(value: Any, name: str) -> None:
    """
    Verify a value is a pymath Matrix.
    
    Args:
        value: Object to check
        name: Parameter name for error messages
        
    Raises:
        ValidationError: If value is not a Matrix
    """
    # Imported here: matrix.py imports this module.
    from pymath.linalg.matrix import Matrix

    if not isinstance(value, Matrix):
        raise ValidationError(
            f"{name}: expected Matrix, got {type(value).__name__}"
        )
