"""
Dense matrix with checked arithmetic and Gauss-Jordan inversion.

Storage is a float64 numpy array owned exclusively by the instance. Every
operation returns a new Matrix with its own storage, so two matrices never
alias each other; the only in-place mutations are element assignment and
resize().

Shape compatibility is always checked and never broadcast: numpy's
broadcasting rules do not apply to Matrix arithmetic.
"""

from __future__ import annotations

import operator
from numbers import Real
from typing import Any, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from perfmodel.core.exceptions import (
    DimensionError,
    IndexOutOfRangeError,
    NotSquareError,
    NumericalError,
    SingularMatrixError,
    ValidationError,
)
from perfmodel.core.tolerances import FP64, PIVOT_TOLERANCE
from perfmodel.core.validation import check_2d, check_array, check_finite


class Matrix:
    """
    Rectangular grid of double-precision values.

    Construction:
        Matrix(rows, cols)              # zero-filled
        Matrix.from_rows([[1, 2], [3, 4]])
        Matrix.from_array(np.eye(3))
        Matrix.identity(n), Matrix.zeros(rows, cols)

    Operators:
        A + B, A - B    same shape required
        A @ B           A.cols == B.rows required
        A * 2.0, 2.0 * A
        A[i, j], A[i, j] = v   bounds-checked, no negative indices
    """

    __slots__ = ('_data',)
    __hash__ = None  # mutable
    __array_ufunc__ = None  # numpy scalars defer to __rmul__

    def __init__(self, rows: int = 0, cols: int = 0):
        rows = operator.index(rows)
        cols = operator.index(cols)
        if rows < 0 or cols < 0:
            raise ValidationError(
                f"Matrix dimensions must be non-negative, got {rows}x{cols}"
            )
        self._data: NDArray[np.floating[Any]] = np.zeros((rows, cols), dtype=np.float64)

    # === Construction ===

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> Matrix:
        """
        Build a matrix from a nested sequence of rows.

        Dimensions are inferred from the input; every row must have the
        same length. An empty sequence gives a 0x0 matrix.
        """
        rows = list(rows)
        if not rows:
            return cls(0, 0)

        lengths = [len(r) for r in rows]
        if len(set(lengths)) > 1:
            raise DimensionError(
                f"rows: all rows must have the same length, got lengths {lengths}",
                expected=lengths[0],
                actual=tuple(lengths),
            )
        arr = check_array(rows, 'rows')
        check_2d(arr, 'rows')
        check_finite(arr, 'rows')
        return cls._wrap(arr)

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix:
        """Build a matrix from a finite 2-D array-like (the input is copied)."""
        arr = check_array(array, 'array')
        check_2d(arr, 'array')
        check_finite(arr, 'array')
        return cls._wrap(arr)

    @classmethod
    def identity(cls, size: int) -> Matrix:
        """Square identity matrix of the given size."""
        result = cls(size, size)
        np.fill_diagonal(result._data, 1.0)
        return result

    @classmethod
    def zeros(cls, rows: int, cols: int) -> Matrix:
        """Zero-filled matrix."""
        return cls(rows, cols)

    @classmethod
    def _wrap(cls, data: NDArray[np.floating[Any]]) -> Matrix:
        """Adopt an array this module already owns, without copying."""
        result = cls.__new__(cls)
        result._data = data
        return result

    # === Shape ===

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    def resize(self, rows: int, cols: int) -> None:
        """
        Change the dimensions in place.

        Cells inside both the old and new shape keep their value; all
        other cells of the new shape are zero.
        """
        resized = Matrix(rows, cols)._data
        keep_r = min(self.rows, resized.shape[0])
        keep_c = min(self.cols, resized.shape[1])
        resized[:keep_r, :keep_c] = self._data[:keep_r, :keep_c]
        self._data = resized

    # === Element access ===

    def _check_index(self, row: int, col: int) -> tuple[int, int]:
        row = operator.index(row)
        col = operator.index(col)
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexOutOfRangeError(
                f"Matrix index ({row}, {col}) out of range for shape {self.shape}",
                index=(row, col),
                shape=self.shape,
            )
        return row, col

    def __getitem__(self, key: tuple[int, int]) -> float:
        row, col = self._check_index(*_split_key(key))
        return float(self._data[row, col])

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        row, col = self._check_index(*_split_key(key))
        value = float(value)
        if not np.isfinite(value):
            raise ValidationError(f"Matrix element ({row}, {col}) must be finite, got {value}")
        self._data[row, col] = value

    def row(self, index: int) -> list[float]:
        """Copy of one row."""
        index = operator.index(index)
        if not 0 <= index < self.rows:
            raise IndexOutOfRangeError(
                f"Matrix row index {index} out of range for {self.rows} rows",
                index=index,
                shape=self.shape,
            )
        return self._data[index].tolist()

    # === Arithmetic ===

    def _check_same_shape(self, other: Matrix, op: str) -> None:
        if self.shape != other.shape:
            raise DimensionError(
                f"Matrix dimensions must match for {op}: {self.shape} vs {other.shape}",
                expected=self.shape,
                actual=other.shape,
            )

    def add(self, other: Matrix) -> Matrix:
        self._check_same_shape(other, 'addition')
        return Matrix._wrap(self._data + other._data)

    def subtract(self, other: Matrix) -> Matrix:
        self._check_same_shape(other, 'subtraction')
        return Matrix._wrap(self._data - other._data)

    def multiply(self, other: Matrix) -> Matrix:
        """
        Matrix product self x other.

        Terms are accumulated over the inner index in ascending order, one
        term at a time, which rounds exactly like the textbook triple loop.
        """
        if self.cols != other.rows:
            raise DimensionError(
                f"Matrix dimensions incompatible for multiplication: "
                f"{self.shape} x {other.shape}",
                expected=(self.cols,),
                actual=(other.rows,),
            )
        result = np.zeros((self.rows, other.cols), dtype=np.float64)
        for k in range(self.cols):
            result += np.outer(self._data[:, k], other._data[k, :])
        return Matrix._wrap(result)

    def scale(self, scalar: float) -> Matrix:
        scalar = float(scalar)
        if not np.isfinite(scalar):
            raise ValidationError(f"scalar: must be finite, got {scalar}")
        return Matrix._wrap(self._data * scalar)

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __matmul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def __mul__(self, other: object) -> Matrix:
        if isinstance(other, Real):
            return self.scale(other)
        return NotImplemented

    __rmul__ = __mul__

    def transpose(self) -> Matrix:
        """New matrix with rows and columns swapped."""
        return Matrix._wrap(self._data.T.copy())

    @property
    def T(self) -> Matrix:
        return self.transpose()

    # === Inverse and determinant ===

    def _require_square(self, op: str) -> None:
        if not self.is_square:
            raise NotSquareError(
                f"Matrix must be square to compute {op}, got shape {self.shape}",
                expected=(self.rows, self.rows),
                actual=self.shape,
            )

    def inverse(self) -> Matrix:
        """
        Inverse by Gauss-Jordan elimination with partial pivoting.

        Works on the augmented matrix [A | I]. For each column i the row
        with the largest |value| in column i among rows >= i becomes the
        pivot row; it is scaled so the pivot is 1 and column i is then
        cleared from every other row, above and below. When all columns are
        processed the right half holds the inverse.

        Raises:
            NotSquareError: If the matrix is not square
            SingularMatrixError: If a pivot magnitude is below PIVOT_TOLERANCE
            NumericalError: If elimination meets a non-finite value
        """
        self._require_square('inverse')
        n = self.rows

        augmented = np.zeros((n, 2 * n), dtype=np.float64)
        augmented[:, :n] = self._data
        augmented[:, n:] = np.eye(n)

        for i in range(n):
            pivot_row = _find_pivot_row(augmented, i)
            pivot_value = augmented[pivot_row, i]
            if not np.isfinite(pivot_value):
                raise NumericalError(
                    f"Matrix has non-finite values in column {i} and cannot be inverted"
                )
            if abs(pivot_value) < PIVOT_TOLERANCE:
                raise SingularMatrixError(
                    f"Matrix is singular and cannot be inverted "
                    f"(pivot {abs(pivot_value):.3e} in column {i} "
                    f"below tolerance {PIVOT_TOLERANCE:.0e})",
                    pivot_column=i,
                    pivot_value=float(abs(pivot_value)),
                    tolerance=PIVOT_TOLERANCE,
                )

            if pivot_row != i:
                _swap_rows(augmented, i, pivot_row)

            _scale_row(augmented, i, 1.0 / augmented[i, i])

            for k in range(n):
                if k != i:
                    _add_row_multiple(augmented, i, k, -augmented[k, i])

        return Matrix._wrap(augmented[:, n:].copy())

    def determinant(self) -> float:
        """
        Determinant.

        1x1 and 2x2 use the closed forms. Larger matrices are reduced to
        upper-triangular form with partial pivoting on a scratch copy; the
        determinant is the product of the pivots, negated once per row swap.
        A pivot below PIVOT_TOLERANCE means the matrix is singular and the
        determinant is 0.0.

        Raises:
            NotSquareError: If the matrix is not square
        """
        self._require_square('determinant')
        a = self._data

        if self.rows == 1:
            return float(a[0, 0])
        if self.rows == 2:
            return float(a[0, 0] * a[1, 1] - a[0, 1] * a[1, 0])

        work = a.copy()
        det = 1.0
        for i in range(self.rows):
            pivot_row = _find_pivot_row(work, i)
            if abs(work[pivot_row, i]) < PIVOT_TOLERANCE:
                return 0.0

            if pivot_row != i:
                _swap_rows(work, i, pivot_row)
                det *= -1.0

            det *= work[i, i]

            for k in range(i + 1, self.rows):
                factor = work[k, i] / work[i, i]
                _add_row_multiple(work, i, k, -factor)

        return float(det)

    # === Conversion and comparison ===

    def copy(self) -> Matrix:
        return Matrix._wrap(self._data.copy())

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        """Copy of the underlying storage."""
        return self._data.copy()

    def tolist(self) -> list[list[float]]:
        return self._data.tolist()

    def allclose(
        self,
        other: Matrix,
        rtol: float = FP64.rtol,
        atol: float = FP64.atol,
    ) -> bool:
        """Elementwise comparison within tolerance; False on shape mismatch."""
        if self.shape != other.shape:
            return False
        return bool(np.allclose(self._data, other._data, rtol=rtol, atol=atol))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    def format(self, precision: int = 4, width: int = 12) -> str:
        """Fixed-width text rendering, one line per row."""
        return "\n".join(
            " ".join(f"{value:{width}.{precision}f}" for value in row)
            for row in self._data
        )

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Matrix({self.rows}x{self.cols}, {self._data.tolist()!r})"


def _split_key(key: object) -> tuple[int, int]:
    if not isinstance(key, tuple) or len(key) != 2:
        raise TypeError(f"Matrix indices must be a (row, col) pair, got {key!r}")
    return key


# === Row operations on owned scratch arrays ===

def _find_pivot_row(work: NDArray[np.floating[Any]], col: int) -> int:
    """First row >= col holding the largest |value| in column col."""
    return col + int(np.argmax(np.abs(work[col:, col])))


def _swap_rows(work: NDArray[np.floating[Any]], r1: int, r2: int) -> None:
    work[[r1, r2]] = work[[r2, r1]]


def _scale_row(work: NDArray[np.floating[Any]], row: int, factor: float) -> None:
    work[row] *= factor


def _add_row_multiple(
    work: NDArray[np.floating[Any]],
    source: int,
    target: int,
    factor: float,
) -> None:
    work[target] += factor * work[source]
