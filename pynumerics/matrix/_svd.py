"""
Approximate thin SVD by alternating refinement on top of Jacobi.

Outline, for A (m x n) and k = min(m, n):
    1. Jacobi on A^T A and A A^T; argsort the eigenvalues and keep the
       eigenvectors of the k largest as starting V (n x k) and U (m x k).
    2. Each round: U <- orth(A V), V <- orth(A^T U), Sigma <- U^T A V.
       orth() is modified Gram-Schmidt; a column that vanishes (rank
       deficiency) is replaced by the matching eigen-derived column,
       re-orthogonalised.
    3. Stop when the diagonal of Sigma moves by <= tol relative to the
       largest singular value, or after max_rounds.

Gram-Schmidt keeps the diagonal of Sigma non-negative, so the singular
values are read straight off it. This is a best-effort factorization:
accuracy is only claimed for well-separated singular values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pynumerics.matrix._jacobi import jacobi, JacobiOutcome


@dataclass(frozen=True)
class RefinementOutcome:
    """Raw output of the alternating refinement."""
    U: NDArray[np.float64]
    singular_values: NDArray[np.float64]
    V: NDArray[np.float64]
    initial_singular_values: NDArray[np.float64]
    converged: bool
    rounds: int
    final_change: float
    gram_eigen: tuple[JacobiOutcome, JacobiOutcome]


def _leading_vectors(outcome: JacobiOutcome, k: int) -> tuple[NDArray, NDArray]:
    """Eigenvalues and eigenvectors of the k largest eigenvalues, descending."""
    # Stable ascending sort of the negated values: ties keep diagonal order
    order = np.argsort(-outcome.eigenvalues, kind='stable')[:k]
    return outcome.eigenvalues[order], outcome.eigenvectors[:, order]


def _orthonormalize(
    columns: NDArray[np.float64],
    fallback: NDArray[np.float64],
    eps: float,
) -> NDArray[np.float64]:
    """Modified Gram-Schmidt; near-zero columns are taken from fallback."""
    q = np.array(columns, dtype=np.float64)
    k = q.shape[1]
    for j in range(k):
        for candidate in (q[:, j].copy(), fallback[:, j].copy()):
            # Two projection passes keep orthogonality when most of the
            # candidate cancels out
            for _ in range(2):
                for i in range(j):
                    candidate -= (q[:, i] @ candidate) * q[:, i]
            norm = np.linalg.norm(candidate)
            if norm > eps:
                q[:, j] = candidate / norm
                break
        else:
            # Fallback column is dependent too: complete with a basis vector
            q[:, j] = _complete_column(q[:, :j], q.shape[0])
    return q


def _complete_column(basis: NDArray[np.float64], m: int) -> NDArray[np.float64]:
    """Unit vector orthogonal to the columns of basis."""
    best = None
    best_norm = -1.0
    for e in np.eye(m):
        candidate = e - basis @ (basis.T @ e)
        norm = np.linalg.norm(candidate)
        if norm > best_norm:
            best, best_norm = candidate, norm
    return best / best_norm


def refine(
    a: NDArray[np.floating[Any]],
    max_sweeps: int,
    max_rounds: int,
    tol: float,
) -> RefinementOutcome:
    """
    Alternating refinement of U, Sigma, V for the array a.

    Args:
        a: (m x n) array
        max_sweeps: Sweep limit for the two Jacobi runs
        max_rounds: Limit on refinement rounds (>= 1)
        tol: Relative change in singular values that counts as converged
    """
    a = np.asarray(a, dtype=np.float64)
    m, n = a.shape
    k = min(m, n)

    ata = jacobi(a.T @ a, max_sweeps=max_sweeps)
    aat = jacobi(a @ a.T, max_sweeps=max_sweeps)

    lam, V0 = _leading_vectors(ata, k)
    _, U0 = _leading_vectors(aat, k)
    initial = np.sqrt(np.clip(lam, 0.0, None))

    scale = max(float(np.max(np.abs(a))), 1.0)
    eps = np.finfo(np.float64).eps * max(m, n) * scale

    U, V = U0, V0
    previous = initial
    sigma = initial
    change = np.inf
    converged = False
    rounds = 0

    for rounds in range(1, max_rounds + 1):
        U = _orthonormalize(a @ V, U0, eps)
        V = _orthonormalize(a.T @ U, V0, eps)
        sigma = np.diag(U.T @ a @ V).copy()

        change = float(np.max(np.abs(sigma - previous)))
        previous = sigma
        if change <= tol * max(float(np.max(sigma)), 1.0):
            converged = True
            break

    # Gram-Schmidt can leave a rounding-level negative on null directions
    sigma = np.clip(sigma, 0.0, None)
    order = np.argsort(-sigma, kind='stable')
    U, sigma, V = U[:, order], sigma[order], V[:, order]

    return RefinementOutcome(
        U=U,
        singular_values=sigma,
        V=V,
        initial_singular_values=initial,
        converged=converged,
        rounds=rounds,
        final_change=change,
        gram_eigen=(ata, aat),
    )
