"""
Cyclic Jacobi eigenvalue iteration for real symmetric matrices.

Each sweep visits every pair p < q and applies a plane rotation B that
annihilates a[p, q]. The rotation touches two rows and two columns of the
working matrix (A <- B^T A B) and two columns of the accumulator
(V <- V B), so it is applied in place instead of forming B.

States: iterating -> converged (off-diagonal sum <= tol) or
iterating -> max_iterations_reached. Both terminal states return the
current diagonal and accumulator; the caller decides what to do with a
truncated run.

Symmetry of the input is a precondition, not a check. On non-symmetric
input only the upper triangle drives the rotations and the output is
not meaningful.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pynumerics.core.compute.limits import (
    JACOBI_THRESHOLD_SWEEPS,
    JACOBI_UNDERFLOW_SWEEP,
)

STATE_CONVERGED = 'converged'
STATE_MAX_ITERATIONS = 'max_iterations_reached'


@dataclass(frozen=True)
class JacobiOutcome:
    """Raw output of the sweep loop."""
    eigenvalues: NDArray[np.float64]
    eigenvectors: NDArray[np.float64]
    state: str
    sweeps: int
    off_diagonal: float
    rotations: int


def _off_diagonal_sum(a: NDArray[np.float64]) -> float:
    return float(np.sum(np.abs(np.triu(a, k=1))))


def _rotate(
    a: NDArray[np.float64],
    v: NDArray[np.float64],
    p: int,
    q: int,
) -> None:
    """Annihilate a[p, q] with one two-sided rotation, in place."""
    apq = a[p, q]
    h = a[q, q] - a[p, p]

    if abs(h) + 100.0 * abs(apq) == abs(h):
        # theta overflows; t ~ 1 / (2 theta)
        t = apq / h
    else:
        theta = 0.5 * h / apq
        t = 1.0 / (abs(theta) + np.sqrt(1.0 + theta * theta))
        if theta < 0.0:
            t = -t

    c = 1.0 / np.sqrt(1.0 + t * t)
    s = t * c

    # A B: columns p and q
    col_p = a[:, p].copy()
    col_q = a[:, q]
    a[:, p] = c * col_p - s * col_q
    a[:, q] = s * col_p + c * col_q

    # B^T (A B): rows p and q
    row_p = a[p, :].copy()
    row_q = a[q, :]
    a[p, :] = c * row_p - s * row_q
    a[q, :] = s * row_p + c * row_q

    a[p, q] = 0.0
    a[q, p] = 0.0

    # V B: columns p and q
    vec_p = v[:, p].copy()
    vec_q = v[:, q]
    v[:, p] = c * vec_p - s * vec_q
    v[:, q] = s * vec_p + c * vec_q


def jacobi(
    matrix: NDArray[np.floating[Any]],
    max_sweeps: int,
    tol: float = 0.0,
) -> JacobiOutcome:
    """
    Run Jacobi sweeps on a copy of a square symmetric array.

    Args:
        matrix: Square array (n x n)
        max_sweeps: Upper bound on the number of sweeps
        tol: Converged once the strictly-upper off-diagonal absolute sum
            is <= tol. The default 0.0 demands exact zeros.

    Returns:
        JacobiOutcome with eigenvalues in diagonal order (unsorted) and
        eigenvectors as the columns of the accumulated rotation product.
    """
    a = np.array(matrix, dtype=np.float64)
    n = a.shape[0]
    v = np.eye(n, dtype=np.float64)
    rotations = 0
    off = _off_diagonal_sum(a)

    for sweep in range(1, max_sweeps + 1):
        off = _off_diagonal_sum(a)
        if off <= tol:
            return JacobiOutcome(
                eigenvalues=np.diag(a).copy(),
                eigenvectors=v,
                state=STATE_CONVERGED,
                sweeps=sweep,
                off_diagonal=off,
                rotations=rotations,
            )

        threshold = 0.2 * off / (n * n) if sweep <= JACOBI_THRESHOLD_SWEEPS else 0.0

        for p in range(n - 1):
            for q in range(p + 1, n):
                g = 100.0 * abs(a[p, q])
                if (
                    sweep > JACOBI_UNDERFLOW_SWEEP
                    and abs(a[p, p]) + g == abs(a[p, p])
                    and abs(a[q, q]) + g == abs(a[q, q])
                ):
                    a[p, q] = 0.0
                    a[q, p] = 0.0
                elif abs(a[p, q]) > threshold:
                    _rotate(a, v, p, q)
                    rotations += 1

    off = _off_diagonal_sum(a)
    state = STATE_CONVERGED if off <= tol else STATE_MAX_ITERATIONS
    return JacobiOutcome(
        eigenvalues=np.diag(a).copy(),
        eigenvectors=v,
        state=state,
        sweeps=max_sweeps,
        off_diagonal=off,
        rotations=rotations,
    )
