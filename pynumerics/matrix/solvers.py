"""
Solver entry points for the matrix engine.

Provides eigen() (cyclic Jacobi), svd() (alternating refinement on top of
eigen), argsort(), and the elimination-based solve() and lstsq().

Undefined operations (non-square input, mismatched right-hand side,
singular system) return None. Exhausting an iteration limit returns a
solution flagged converged=False and issues a RuntimeWarning, or raises
ConvergenceError when strict=True.
"""

from __future__ import annotations

import warnings
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pynumerics.core.result import Result
from pynumerics.core.compute.timing import Timer
from pynumerics.core.compute.limits import (
    JACOBI_MAX_SWEEPS,
    SVD_MAX_ROUNDS,
    SVD_TOL,
)
from pynumerics.core.exceptions import (
    ConvergenceError,
    SingularMatrixError,
    ValidationError,
)
from pynumerics.core.validation import check_array, check_1d, check_finite
from pynumerics.matrix._store import Matrix
from pynumerics.matrix._jacobi import jacobi, STATE_CONVERGED
from pynumerics.matrix._svd import refine
from pynumerics.matrix._elimination import eliminate
from pynumerics.matrix.solution import (
    EigenParams,
    EigenSolution,
    SVDParams,
    SVDSolution,
)


def _ensure_matrix(data: Matrix | ArrayLike) -> Matrix:
    """Convert raw nested data to Matrix if needed."""
    if isinstance(data, Matrix):
        return data
    return Matrix(data)


def _check_limit(value: int, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value < 1:
        raise ValidationError(f"{name}: must be a positive integer, got {value!r}")


def _check_tol(value: float, name: str) -> None:
    if not np.isfinite(value) or value < 0.0:
        raise ValidationError(f"{name}: must be finite and >= 0, got {value!r}")


def argsort(values: ArrayLike) -> NDArray[np.intp]:
    """
    Index permutation p with values[p[0]] <= values[p[1]] <= ...

    The sort is stable, so equal values keep their original order.

    Raises:
        ValidationError: If values is not 1D or contains NaN/Inf
    """
    arr = check_array(values, 'values')
    check_1d(arr, 'values')
    check_finite(arr, 'values')
    return np.argsort(arr, kind='stable')


def eigen(
    matrix: Matrix | ArrayLike,
    *,
    max_sweeps: int = JACOBI_MAX_SWEEPS,
    tol: float = 0.0,
    strict: bool = False,
) -> EigenSolution | None:
    """
    Eigen-decomposition of a real symmetric matrix by cyclic Jacobi rotations.

    Parameters
    ----------
    matrix : Matrix or array-like
        Square matrix. Symmetry is assumed, not checked.
    max_sweeps : int
        Maximum number of full sweeps over the upper triangle.
    tol : float
        Converged once the sum of |a[p][q]|, p < q, is <= tol. The
        default 0.0 requires the off-diagonal part to vanish exactly.
    strict : bool
        Raise ConvergenceError instead of returning a truncated result.

    Returns
    -------
    EigenSolution, or None if matrix is not square. Eigenvalues are in
    diagonal order; use argsort() or EigenSolution.sorted() for ordering.
    """
    m = _ensure_matrix(matrix)
    if not m.is_square:
        return None
    _check_limit(max_sweeps, 'max_sweeps')
    _check_tol(tol, 'tol')

    timer = Timer()
    timer.start()
    with timer.section('sweeps'):
        outcome = jacobi(m._data, max_sweeps=max_sweeps, tol=tol)
    timer.stop()

    converged = outcome.state == STATE_CONVERGED
    warnings_list: list[str] = []
    if not converged:
        msg = (
            f"Jacobi iteration stopped after {outcome.sweeps} sweeps without "
            f"converging (off-diagonal sum {outcome.off_diagonal:.3e} > tol {tol:.3e})"
        )
        if strict:
            raise ConvergenceError(
                msg,
                iterations=outcome.sweeps,
                final_change=outcome.off_diagonal,
                reason='max_iterations',
                threshold=tol,
            )
        warnings.warn(msg, RuntimeWarning, stacklevel=2)
        warnings_list.append(msg)

    params = EigenParams(
        eigenvalues=outcome.eigenvalues,
        eigenvectors=Matrix._wrap(outcome.eigenvectors),
    )
    result = Result(
        params=params,
        info={
            'method': 'jacobi',
            'converged': converged,
            'state': outcome.state,
            'sweeps': outcome.sweeps,
            'rotations': outcome.rotations,
            'off_diagonal': outcome.off_diagonal,
            'max_sweeps': max_sweeps,
            'tol': tol,
        },
        timing=timer.result(),
        backend_name='cpu_jacobi',
        warnings=tuple(warnings_list),
    )
    return EigenSolution(_result=result)


def svd(
    matrix: Matrix | ArrayLike,
    *,
    max_rounds: int = SVD_MAX_ROUNDS,
    tol: float = SVD_TOL,
    max_sweeps: int = JACOBI_MAX_SWEEPS,
    strict: bool = False,
) -> SVDSolution:
    """
    Approximate thin singular value decomposition.

    Starts from Jacobi eigenvectors of A^T A and A A^T and alternately
    re-orthonormalises U = orth(A V) and V = orth(A^T U) until the
    singular values settle.

    Parameters
    ----------
    matrix : Matrix or array-like
        Any (m x n) matrix.
    max_rounds : int
        Maximum number of refinement rounds.
    tol : float
        Converged when the singular values move by at most
        tol * max(largest singular value, 1) in one round.
    max_sweeps : int
        Sweep limit for the underlying Jacobi runs.
    strict : bool
        Raise ConvergenceError instead of returning a truncated result.

    Returns
    -------
    SVDSolution with U (m x k), singular values (k,), V (n x k),
    k = min(m, n). Best-effort: only well-separated singular values
    are reliably accurate.
    """
    m = _ensure_matrix(matrix)
    _check_limit(max_rounds, 'max_rounds')
    _check_limit(max_sweeps, 'max_sweeps')
    _check_tol(tol, 'tol')

    timer = Timer()
    timer.start()
    with timer.section('refinement'):
        outcome = refine(m._data, max_sweeps=max_sweeps, max_rounds=max_rounds, tol=tol)
    timer.stop()

    warnings_list: list[str] = []
    for label, gram in zip(('A^T A', 'A A^T'), outcome.gram_eigen):
        if gram.state != STATE_CONVERGED:
            warnings_list.append(
                f"Jacobi on {label} stopped after {gram.sweeps} sweeps without converging"
            )
    if not outcome.converged:
        msg = (
            f"SVD refinement stopped after {outcome.rounds} rounds without "
            f"converging (last change {outcome.final_change:.3e})"
        )
        if strict:
            raise ConvergenceError(
                msg,
                iterations=outcome.rounds,
                final_change=outcome.final_change,
                reason='max_iterations',
                threshold=tol,
            )
        warnings_list.append(msg)
    for msg in warnings_list:
        warnings.warn(msg, RuntimeWarning, stacklevel=2)

    params = SVDParams(
        U=Matrix._wrap(outcome.U),
        singular_values=outcome.singular_values,
        V=Matrix._wrap(outcome.V),
    )
    result = Result(
        params=params,
        info={
            'method': 'jacobi_alternating',
            'converged': outcome.converged,
            'rounds': outcome.rounds,
            'final_change': outcome.final_change,
            'initial_singular_values': outcome.initial_singular_values,
            'gram_sweeps': tuple(g.sweeps for g in outcome.gram_eigen),
            'max_rounds': max_rounds,
            'tol': tol,
        },
        timing=timer.result(),
        backend_name='cpu_svd',
        warnings=tuple(warnings_list),
    )
    return SVDSolution(_result=result)


def _rhs_array(rhs: Matrix | ArrayLike) -> NDArray[np.float64]:
    """Right-hand side as an (n x k) array."""
    if isinstance(rhs, Matrix):
        return rhs.to_array()
    arr = check_array(rhs, 'rhs')
    check_finite(arr, 'rhs')
    if arr.ndim == 1:
        return arr.reshape(-1, 1)
    if arr.ndim == 2:
        if arr.shape[1] < 1:
            raise ValidationError("rhs: must have at least one column")
        return arr
    raise ValidationError(f"rhs: expected 1D or 2D data, got {arr.ndim}D")


def solve(
    matrix: Matrix | ArrayLike,
    rhs: Matrix | ArrayLike,
    *,
    pivot_tol: float | None = None,
    strict: bool = False,
) -> Matrix | None:
    """
    Solve A x = b by Gaussian elimination with partial pivoting.

    Parameters
    ----------
    matrix : Matrix or array-like
        Square coefficient matrix A.
    rhs : Matrix or array-like
        Vector of length n, or (n x k) right-hand sides.
    pivot_tol : float, optional
        Pivots with magnitude <= pivot_tol mark A as singular.
        Default: eps * n * max|a[i][j]|, relative to the scale of A,
        so uniformly scaled systems solve alike.
    strict : bool
        Raise SingularMatrixError instead of returning None on a
        vanishing pivot.

    Returns
    -------
    (n x k) Matrix, or None if A is not square, b does not have n rows,
    or A is singular.
    """
    a = _ensure_matrix(matrix)
    b = _rhs_array(rhs)
    if pivot_tol is not None:
        _check_tol(pivot_tol, 'pivot_tol')

    if not a.is_square or b.shape[0] != a.rows:
        return None
    if pivot_tol is None:
        scale = float(np.max(np.abs(a._data)))
        pivot_tol = float(np.finfo(np.float64).eps) * a.rows * scale

    x, pivot = eliminate(a._data, b, pivot_tol)
    if x is None:
        if strict:
            raise SingularMatrixError(
                f"Matrix is singular: pivot {pivot:.3e} <= {pivot_tol:.3e}",
                matrix_name='A',
                pivot=pivot,
            )
        return None
    return Matrix._wrap(x)


def lstsq(
    matrix: Matrix | ArrayLike,
    rhs: Matrix | ArrayLike,
    *,
    pivot_tol: float | None = None,
    strict: bool = False,
) -> Matrix | None:
    """
    Least-squares solution of A x ~ b via the normal equations A^T A x = A^T b.

    Returns None if b does not have A.rows rows or A^T A is singular
    (A rank-deficient). The normal equations square the condition
    number; prefer well-conditioned A.
    """
    a = _ensure_matrix(matrix)
    b = _rhs_array(rhs)
    if b.shape[0] != a.rows:
        return None
    at = a._data.T
    return solve(
        Matrix._wrap(at @ a._data),
        Matrix._wrap(at @ b),
        pivot_tol=pivot_tol,
        strict=strict,
    )
