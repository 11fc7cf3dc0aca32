"""
Dense real matrix: storage, construction and element-wise arithmetic.

A Matrix owns a float64 array of shape (rows, cols) with rows, cols >= 1.
The shape invariant is checked once, at construction; every operation
returns a new Matrix built from an independent copy, so no two Matrix
values share storage. The one in-place operation is swap_rows().

Shape-sensitive operations return None when they are undefined for the
given operands (mismatched shapes, non-square input, singular matrix).
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pynumerics.core.validation import (
    check_array,
    check_finite,
    check_rectangular,
    check_2d,
    check_index,
    check_positive_size,
)
from pynumerics.core.exceptions import ValidationError
from pynumerics.core.compute.tolerances import CPU_FP64

if TYPE_CHECKING:
    from pynumerics.matrix.solution import EigenSolution, SVDSolution


class Matrix:
    """
    Dense real matrix with value semantics.

    Construction:
        Matrix([[1, 2], [3, 4]])
        Matrix.new(np.ones((2, 3)))
        eye(3), zeros(2, 4)

    Raises:
        DimensionError: data is empty, has an empty row, or is ragged
        ValidationError: data is non-numeric or contains NaN/Inf
    """

    __slots__ = ('_data',)

    def __init__(self, data: ArrayLike):
        check_rectangular(data, 'data')
        array = check_array(data, 'data')
        check_2d(array, 'data')
        check_finite(array, 'data')
        # np.array copies, so later changes to the caller's object never leak in
        self._data: NDArray[np.float64] = np.array(array, dtype=np.float64)

    @classmethod
    def new(cls, data: ArrayLike) -> Matrix:
        """Alias of the constructor."""
        return cls(data)

    @classmethod
    def _wrap(cls, array: NDArray[np.float64]) -> Matrix:
        """Build from an array already known to satisfy the invariant. Takes ownership."""
        obj = cls.__new__(cls)
        obj._data = array
        return obj

    # --- Shape ---

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    def is_symmetric(self, tol: float = 0.0) -> bool:
        """True if square and |a[i][j] - a[j][i]| <= tol everywhere."""
        if not self.is_square:
            return False
        return bool(np.all(np.abs(self._data - self._data.T) <= tol))

    # --- Access ---

    @property
    def data(self) -> list[list[float]]:
        """Row-major copy of the elements as nested lists."""
        return self.to_list()

    def to_list(self) -> list[list[float]]:
        return self._data.tolist()

    def to_array(self) -> NDArray[np.float64]:
        """Independent numpy copy of the elements."""
        return self._data.copy()

    def copy(self) -> Matrix:
        return Matrix._wrap(self._data.copy())

    def __getitem__(self, index: tuple[int, int]) -> float:
        if not isinstance(index, tuple) or len(index) != 2:
            raise ValidationError(
                f"index: expected a (row, column) pair, got {index!r}"
            )
        i, j = index
        check_index(i, self.rows, 'row')
        check_index(j, self.cols, 'column')
        return float(self._data[i, j])

    def column(self, col_index: int) -> NDArray[np.float64]:
        """
        Copy of one column as a 1D array.

        Raises:
            ValidationError: If col_index is out of range
        """
        check_index(col_index, self.cols, 'col_index')
        return self._data[:, col_index].copy()

    def row(self, row_index: int) -> NDArray[np.float64]:
        """Copy of one row as a 1D array."""
        check_index(row_index, self.rows, 'row_index')
        return self._data[row_index, :].copy()

    def diagonal(self) -> NDArray[np.float64]:
        return np.diag(self._data).copy()

    # --- Comparison ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None  # type: ignore[assignment]

    def allclose(
        self,
        other: Matrix,
        rtol: float = CPU_FP64.rtol,
        atol: float = CPU_FP64.atol,
    ) -> bool:
        """Element-wise comparison within tolerance. False on shape mismatch."""
        if self.shape != other.shape:
            return False
        return bool(np.allclose(self._data, other._data, rtol=rtol, atol=atol))

    def __repr__(self) -> str:
        return f"Matrix(rows={self.rows}, cols={self.cols}, data={self.to_list()!r})"

    def __str__(self) -> str:
        return "\n".join(" ".join(repr(float(x)) for x in row) for row in self._data)

    # --- Arithmetic ---

    def add(self, other: Matrix) -> Matrix | None:
        """Element-wise sum, or None if shapes differ."""
        if self.shape != other.shape:
            return None
        return Matrix._wrap(self._data + other._data)

    def subtract(self, other: Matrix) -> Matrix | None:
        """Element-wise difference, or None if shapes differ."""
        if self.shape != other.shape:
            return None
        return Matrix._wrap(self._data - other._data)

    def multiply(self, other: Matrix) -> Matrix | None:
        """
        Matrix product self @ other.

        Returns a (self.rows x other.cols) Matrix, or None if
        self.cols != other.rows. No pivoting or reordering is applied.
        """
        if self.cols != other.rows:
            return None
        return Matrix._wrap(self._data @ other._data)

    def multiply_by_vector(self, vector: ArrayLike) -> Matrix | None:
        """
        Product with a vector, as a (rows x 1) Matrix.

        Returns None if len(vector) != cols.
        """
        v = check_array(vector, 'vector').ravel()
        check_finite(v, 'vector')
        if v.shape[0] != self.cols:
            return None
        return Matrix._wrap((self._data @ v).reshape(-1, 1))

    def scale(self, factor: float) -> Matrix:
        """Multiply every element by a scalar."""
        factor = float(factor)
        if not np.isfinite(factor):
            raise ValidationError(f"factor: must be finite, got {factor}")
        return Matrix._wrap(self._data * factor)

    def transpose(self) -> Matrix:
        return Matrix._wrap(self._data.T.copy())

    @property
    def T(self) -> Matrix:
        return self.transpose()

    # --- In-place ---

    def swap_rows(self, i: int, j: int) -> None:
        """
        Swap rows i and j in place.

        This is the only mutating Matrix operation; it exists for
        Gaussian elimination on augmented copies.
        """
        check_index(i, self.rows, 'i')
        check_index(j, self.rows, 'j')
        if i != j:
            self._data[[i, j], :] = self._data[[j, i], :]

    # --- Linear algebra (see _cofactor, _elimination, solvers) ---

    def determinant(self) -> float | None:
        """Determinant by cofactor expansion, or None if not square."""
        from pynumerics.matrix._cofactor import determinant
        return determinant(self._data)

    def cofactor_matrix(self) -> Matrix | None:
        """Matrix of signed minors C[i][j] = (-1)^(i+j) det(M_ij), or None if not square."""
        from pynumerics.matrix._cofactor import cofactors
        result = cofactors(self._data)
        return None if result is None else Matrix._wrap(result)

    def adjoint(self) -> Matrix | None:
        """Classical adjugate (transposed cofactor matrix), or None if not square."""
        from pynumerics.matrix._cofactor import adjugate
        result = adjugate(self._data)
        return None if result is None else Matrix._wrap(result)

    def inverse(self, tol: float = 0.0) -> Matrix | None:
        """
        Inverse as adjoint / det.

        Returns None if the matrix is not square or |det| <= tol.
        """
        from pynumerics.matrix._cofactor import inverse
        result = inverse(self._data, tol=tol)
        return None if result is None else Matrix._wrap(result)

    def solve(self, rhs: Matrix | ArrayLike, **kwargs: Any) -> Matrix | None:
        """Solve self @ x = rhs by Gaussian elimination. See matrix.solve()."""
        from pynumerics.matrix.solvers import solve
        return solve(self, rhs, **kwargs)

    def eigen(self, **kwargs: Any) -> EigenSolution | None:
        """Jacobi eigen-decomposition. See matrix.eigen()."""
        from pynumerics.matrix.solvers import eigen
        return eigen(self, **kwargs)

    def svd(self, **kwargs: Any) -> SVDSolution:
        """Approximate singular value decomposition. See matrix.svd()."""
        from pynumerics.matrix.solvers import svd
        return svd(self, **kwargs)

    @staticmethod
    def argsort(values: ArrayLike) -> NDArray[np.intp]:
        """Stable ascending sort permutation. See matrix.argsort()."""
        from pynumerics.matrix.solvers import argsort
        return argsort(values)

    @staticmethod
    def eye(size: int) -> Matrix:
        return eye(size)

    @staticmethod
    def zeros(rows: int, cols: int) -> Matrix:
        return zeros(rows, cols)


def eye(size: int) -> Matrix:
    """Identity matrix of order size."""
    check_positive_size(size, 'size')
    return Matrix._wrap(np.eye(size, dtype=np.float64))


def zeros(rows: int, cols: int) -> Matrix:
    """All-zero matrix of shape (rows, cols)."""
    check_positive_size(rows, 'rows')
    check_positive_size(cols, 'cols')
    return Matrix._wrap(np.zeros((rows, cols), dtype=np.float64))
