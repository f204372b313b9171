"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, object rejection
    - check_finite: NaN/Inf warning
    - check_2d: dimensionality check
    - check_rectangular: ragged and empty row detection
    - check_nonempty_shape: zero-sized shapes
    - check_same_shape / check_inner_dims: binary operand shapes
    - check_index: bounds and type of element indices
    - check_matrix: operand type
"""

import warnings

import numpy as np
import pytest

from pymath.core.exceptions import (
    DimensionError,
    MatrixIndexError,
    ShapeError,
    ValidationError,
)
from pymath.core.validation import (
    check_2d,
    check_array,
    check_finite,
    check_index,
    check_inner_dims,
    check_matrix,
    check_nonempty_shape,
    check_rectangular,
    check_same_shape,
)
from pymath.linalg import Matrix


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to float64 ndarray and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "X")
        assert isinstance(result, np.ndarray)
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_float32_promoted_to_float64(self):
        arr = np.array([1.0, 2.0], dtype=np.float32)
        assert check_array(arr, "X").dtype == np.float64

    def test_nested_list_to_2d(self):
        result = check_array([[1, 2], [3, 4]], "X")
        assert result.shape == (2, 2)

    def test_rejects_mixed_types(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2.0], "X")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array([["a", "b"], ["c", "d"]], "X")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array([1 + 2j], "X")

    def test_rejects_bool(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array([True, False], "X")


# ═══════════════════════════════════════════════════════════════════════
# check_finite
# ═══════════════════════════════════════════════════════════════════════


class TestCheckFinite:

    def test_finite_is_silent(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            check_finite(np.array([1.0, 2.0]), "X")

    def test_nan_and_inf_counted(self):
        with pytest.warns(RuntimeWarning, match=r"1 NaN, 2 Inf"):
            check_finite(np.array([np.nan, np.inf, -np.inf, 0.0]), "X")


# ═══════════════════════════════════════════════════════════════════════
# Shape checks
# ═══════════════════════════════════════════════════════════════════════


class TestCheck2d:

    def test_accepts_2d(self):
        check_2d(np.zeros((2, 3)), "X")

    def test_rejects_1d(self):
        with pytest.raises(DimensionError, match="expected 2D"):
            check_2d(np.zeros(3), "X")

    def test_rejects_3d(self):
        with pytest.raises(DimensionError, match="got 3D"):
            check_2d(np.zeros((2, 2, 2)), "X")


class TestCheckRectangular:

    def test_equal_rows_pass(self):
        check_rectangular(([1, 2], [3, 4]), "rows")

    def test_ragged_rows_fail(self):
        with pytest.raises(ShapeError, match="row 1 has 3 elements, expected 2") as exc_info:
            check_rectangular(([1, 2], [3, 4, 5]), "rows")
        assert exc_info.value.operation == "construct"

    def test_no_rows_fail(self):
        with pytest.raises(ShapeError, match="at least one row"):
            check_rectangular((), "rows")

    def test_scalar_row_fails(self):
        with pytest.raises(ValidationError, match="not a sequence"):
            check_rectangular((1.0, 2.0), "rows")


class TestCheckNonemptyShape:

    def test_positive_shape_passes(self):
        check_nonempty_shape((1, 1), "X")

    @pytest.mark.parametrize("shape", [(0, 3), (3, 0), (0, 0), (-1, 2)])
    def test_zero_or_negative_fails(self, shape):
        with pytest.raises(ShapeError, match="at least 1"):
            check_nonempty_shape(shape, "X")

    @pytest.mark.parametrize("shape", [(2.0, 3), ("2", 3), (True, 1), (None, 1)])
    def test_non_integer_fails(self, shape):
        with pytest.raises(ValidationError, match="must be integers"):
            check_nonempty_shape(shape, "X")


class TestBinaryShapes:

    def test_same_shape_passes(self):
        check_same_shape((2, 3), (2, 3), "add")

    def test_same_shape_mismatch(self):
        with pytest.raises(ShapeError, match="2x2 but right is 2x3") as exc_info:
            check_same_shape((2, 2), (2, 3), "add")
        assert exc_info.value.operation == "add"
        assert exc_info.value.left_shape == (2, 2)
        assert exc_info.value.right_shape == (2, 3)

    def test_inner_dims_pass(self):
        check_inner_dims((2, 3), (3, 5), "mm")

    def test_inner_dims_mismatch(self):
        with pytest.raises(ShapeError, match=r"3 != 2") as exc_info:
            check_inner_dims((2, 3), (2, 3), "mm")
        assert exc_info.value.operation == "mm"


# ═══════════════════════════════════════════════════════════════════════
# check_index / check_matrix
# ═══════════════════════════════════════════════════════════════════════


class TestCheckIndex:

    def test_valid_index_returned_as_int(self):
        assert check_index(np.int64(1), 2, "row", (2, 2)) == 1

    @pytest.mark.parametrize("index", [-1, 2, 100])
    def test_out_of_range(self, index):
        with pytest.raises(MatrixIndexError, match="out of bounds") as exc_info:
            check_index(index, 2, "row", (2, 3))
        assert exc_info.value.index == index
        assert exc_info.value.shape == (2, 3)

    @pytest.mark.parametrize("index", [1.0, "0", True, None])
    def test_non_integer(self, index):
        with pytest.raises(MatrixIndexError, match="must be an integer"):
            check_index(index, 2, "col", (2, 2))


class TestCheckMatrix:

    def test_accepts_matrix(self):
        check_matrix(Matrix([1.0]), "a")

    def test_rejects_ndarray(self):
        with pytest.raises(ValidationError, match="expected Matrix, got ndarray"):
            check_matrix(np.eye(2), "a")
