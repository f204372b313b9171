"""
Matrix: dense, row-major, two-dimensional float64 container.

A Matrix owns a private, read-only, C-contiguous float64 array. It is never
mutated after construction; add, sub, mm, transpose and replace all return
new matrices backed by freshly allocated storage.

Construction:
    Matrix([1.0, 2.0], [3.0, 4.0])          # one argument per row
    Matrix.from_rows(rows)                  # iterable of rows or 2D array
    Matrix.from_data(2, 2, [1, 2, 3, 4])    # flat row-major data
    Matrix.zeros(2, 3)
    Matrix.identity(3)
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymath.core.compute.precision import is_close
from pymath.core.compute.tolerances import select_tolerance
from pymath.core.exceptions import MatrixIndexError, ShapeError
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


class Matrix:
    """
    Immutable dense matrix of float64 values.

    Invariants:
        - shape is (R, C) with R >= 1 and C >= 1
        - storage is row-major and read-only
        - no two matrices share storage

    Operators:
        a + b   -> a.add(b)
        a - b   -> a.sub(b)
        a @ b   -> a.mm(b)
        a.T     -> a.transpose()
        a[i, j] -> a.get(i, j)

    Examples:
        >>> a = Matrix([1.0, 2.0], [3.0, 4.0])
        >>> b = Matrix([5.0, 6.0], [7.0, 8.0])
        >>> print(a @ b)
        19.0 22.0
        43.0 50.0
    """

    __slots__ = ('_data',)

    # Unhashable, like numpy arrays
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, *rows: Sequence[float]):
        """
        Build a matrix from one or more rows.

        Args:
            *rows: Each argument is one row, an ordered sequence of numbers

        Raises:
            ShapeError: If no rows are given, a row is empty, or row lengths differ
            ValidationError: If entries are not real numbers
        """
        self._data = self._build(rows, 'rows')

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[float]] | ArrayLike) -> Matrix:
        """
        Build a matrix from an iterable of rows or a 2D array-like.

        Args:
            rows: Iterable of row sequences, or a 2D numpy array

        Returns:
            New Matrix holding a copy of the data

        Raises:
            ShapeError: If the data is empty or non-rectangular
            DimensionError: If an array input is not 2D
            ValidationError: If entries are not real numbers
        """
        if isinstance(rows, np.ndarray):
            array = check_array(rows, 'rows')
            check_2d(array, 'rows')
            check_nonempty_shape(array.shape, 'rows')
            check_finite(array, 'rows')
            return cls._wrap(array)
        return cls._wrap_owned(cls._build(tuple(rows), 'rows'))

    @classmethod
    def from_data(cls, rows: int, cols: int, data: Sequence[float]) -> Matrix:
        """
        Build a rows x cols matrix from flat row-major data.

        Args:
            rows: Number of rows
            cols: Number of columns
            data: rows * cols values, first row first

        Returns:
            New Matrix

        Raises:
            ShapeError: If a dimension is < 1 or len(data) != rows * cols
            ValidationError: If data is not a flat sequence of real numbers
        """
        check_nonempty_shape((rows, cols), 'from_data')
        array = check_array(data, 'data')
        if array.ndim != 1:
            raise ShapeError(
                f"data: expected flat sequence, got {array.ndim}D with shape {array.shape}",
                operation='from_data',
                left_shape=array.shape,
            )
        if array.size != rows * cols:
            raise ShapeError(
                f"data: length {array.size} does not match {rows}x{cols} "
                f"matrix (expected {rows * cols})",
                operation='from_data',
                left_shape=(rows, cols),
            )
        check_finite(array, 'data')
        return cls._wrap(array.reshape(rows, cols))

    @classmethod
    def zeros(cls, rows: int, cols: int) -> Matrix:
        """Matrix of the given shape filled with 0.0."""
        check_nonempty_shape((rows, cols), 'zeros')
        return cls._wrap_owned(np.zeros((rows, cols), dtype=np.float64))

    @classmethod
    def identity(cls, n: int) -> Matrix:
        """n x n identity matrix."""
        check_nonempty_shape((n, n), 'identity')
        return cls._wrap_owned(np.eye(n, dtype=np.float64))

    @staticmethod
    def _build(rows: tuple[Any, ...], name: str) -> NDArray[np.float64]:
        """Validate row input and return an owned, read-only array."""
        check_rectangular(rows, name)
        array = check_array(rows, name)
        check_2d(array, name)
        check_nonempty_shape(array.shape, name)
        # _build always sits one frame below a public constructor
        check_finite(array, name, stacklevel=3)
        array = np.array(array, dtype=np.float64, order='C', copy=True)
        array.flags.writeable = False
        return array

    @classmethod
    def _wrap(cls, array: NDArray[np.float64]) -> Matrix:
        """Wrap a copy of an already-validated 2D array."""
        return cls._wrap_owned(np.array(array, dtype=np.float64, order='C', copy=True))

    @classmethod
    def _wrap_owned(cls, array: NDArray[np.float64]) -> Matrix:
        """Wrap a freshly allocated array without copying."""
        array = np.ascontiguousarray(array, dtype=np.float64)
        array.flags.writeable = False
        obj = cls.__new__(cls)
        obj._data = array
        return obj

    # ------------------------------------------------------------------
    # Shape and element access
    # ------------------------------------------------------------------

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols)."""
        n, p = self._data.shape
        return (n, p)

    @property
    def n_rows(self) -> int:
        return self._data.shape[0]

    @property
    def n_cols(self) -> int:
        return self._data.shape[1]

    @property
    def size(self) -> int:
        """Total number of elements."""
        return int(self._data.size)

    def get(self, row: int, col: int) -> float:
        """
        Element at (row, col).

        Raises:
            MatrixIndexError: If either index is out of range or negative
        """
        i = check_index(row, self.n_rows, 'row', self.shape)
        j = check_index(col, self.n_cols, 'col', self.shape)
        return float(self._data[i, j])

    def __getitem__(self, key: tuple[int, int] | int) -> float | tuple[float, ...]:
        if isinstance(key, tuple):
            if len(key) != 2:
                raise MatrixIndexError(
                    f"expected (row, col) index, got {len(key)} indices",
                    index=key,
                    shape=self.shape,
                )
            return self.get(*key)
        return self.row(key)

    def row(self, i: int) -> tuple[float, ...]:
        """Row i as a tuple of floats."""
        i = check_index(i, self.n_rows, 'row', self.shape)
        return tuple(float(v) for v in self._data[i])

    def col(self, j: int) -> tuple[float, ...]:
        """Column j as a tuple of floats."""
        j = check_index(j, self.n_cols, 'col', self.shape)
        return tuple(float(v) for v in self._data[:, j])

    def replace(self, row: int, col: int, value: float) -> Matrix:
        """
        Copy of this matrix with one element changed.

        The receiver is left untouched.

        Args:
            row: Row index
            col: Column index
            value: New value for the element

        Returns:
            New Matrix

        Raises:
            MatrixIndexError: If either index is out of range or negative
            ValidationError: If value is not a real number
        """
        i = check_index(row, self.n_rows, 'row', self.shape)
        j = check_index(col, self.n_cols, 'col', self.shape)
        scalar = check_array(value, 'value')
        if scalar.ndim != 0:
            raise ShapeError(
                f"value: expected a scalar, got shape {scalar.shape}",
                operation='replace',
                left_shape=scalar.shape,
            )
        check_finite(scalar, 'value')
        data = self._data.copy()
        data[i, j] = scalar
        return self._wrap_owned(data)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add(self, other: Matrix) -> Matrix:
        """
        Elementwise sum.

        Raises:
            ShapeError: If shapes differ
        """
        check_matrix(other, 'other')
        check_same_shape(self.shape, other.shape, 'add')
        return self._wrap_owned(self._data + other._data)

    def sub(self, other: Matrix) -> Matrix:
        """
        Elementwise difference self - other.

        Raises:
            ShapeError: If shapes differ
        """
        check_matrix(other, 'other')
        check_same_shape(self.shape, other.shape, 'sub')
        return self._wrap_owned(self._data - other._data)

    def mm(self, other: Matrix) -> Matrix:
        """
        Matrix product self @ other.

        For self of shape (R1, C1) and other of shape (C1, C2) the result
        has shape (R1, C2) with P[i, j] = sum_k self[i, k] * other[k, j],
        accumulated in float64.

        Raises:
            ShapeError: If self.n_cols != other.n_rows
        """
        check_matrix(other, 'other')
        check_inner_dims(self.shape, other.shape, 'mm')
        return self._wrap_owned(self._data @ other._data)

    def transpose(self) -> Matrix:
        """Matrix of shape (C, R) with T[j, i] = self[i, j]."""
        return self._wrap_owned(self._data.T.copy(order='C'))

    @property
    def T(self) -> Matrix:
        return self.transpose()

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.sub(other)

    def __matmul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.mm(other)

    # ------------------------------------------------------------------
    # Comparison and conversion
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    def allclose(
        self,
        other: Matrix,
        rtol: float | None = None,
        atol: float | None = None,
        accumulated: bool = False,
    ) -> bool:
        """
        True if shapes match and all elements satisfy |a - b| <= atol + rtol * |b|.

        Args:
            other: Matrix to compare against (the reference, b)
            rtol: Relative tolerance, overrides the selected tier
            atol: Absolute tolerance, overrides the selected tier
            accumulated: Use the ACCUMULATED tier instead of DEFAULT, for
                results of several chained products

        Raises:
            ValidationError: If other is not a Matrix
        """
        check_matrix(other, 'other')
        if self.shape != other.shape:
            return False
        tier = select_tolerance(accumulated)
        rtol = tier.rtol if rtol is None else rtol
        atol = tier.atol if atol is None else atol
        return bool(np.all(is_close(self._data, other._data, rtol=rtol, atol=atol)))

    def to_list(self) -> list[list[float]]:
        """Rows as nested Python lists."""
        return self._data.tolist()

    def to_numpy(self) -> NDArray[np.float64]:
        """Writable copy of the backing array."""
        return self._data.copy()

    def __str__(self) -> str:
        # Positional notation keeps a decimal digit at every magnitude
        return "\n".join(
            " ".join(
                np.format_float_positional(v, unique=True, trim='0') for v in row
            )
            for row in self._data
        )

    def __repr__(self) -> str:
        """
        Constructor call that evaluates back to an equal matrix.

        Non-finite values are spelled float('inf') and float('nan') so the
        text stays evaluable; a NaN-holding result still compares unequal,
        as NaN does.
        """
        rows = ", ".join(
            "[" + ", ".join(_repr_value(v) for v in row) + "]"
            for row in self.to_list()
        )
        return f"Matrix({rows})"


def _repr_value(v: float) -> str:
    if np.isfinite(v):
        return repr(v)
    return f"float('{v}')"
