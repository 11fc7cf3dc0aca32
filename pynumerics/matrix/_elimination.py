"""
Gaussian elimination with partial pivoting.

Works on an augmented copy [A | B] held in a Matrix so that pivoting goes
through Matrix.swap_rows(), the one in-place Matrix operation.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pynumerics.matrix._store import Matrix


def eliminate(
    a: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
    pivot_tol: float,
) -> tuple[NDArray[np.float64] | None, float]:
    """
    Solve a @ x = b for square a and (n x k) b.

    Returns:
        (x, smallest_pivot). x is None when a pivot of magnitude
        <= pivot_tol is met; smallest_pivot is then the offending pivot.
    """
    n = a.shape[0]
    augmented = Matrix._wrap(np.hstack([a, b]).astype(np.float64))
    work = augmented._data
    smallest = np.inf

    for i in range(n):
        pivot_row = i + int(np.argmax(np.abs(work[i:, i])))
        pivot = abs(work[pivot_row, i])
        smallest = min(smallest, pivot)
        if pivot <= pivot_tol:
            return None, float(pivot)

        augmented.swap_rows(i, pivot_row)

        factors = work[i + 1:, i] / work[i, i]
        work[i + 1:, i:] -= np.outer(factors, work[i, i:])

    # Back substitution, all right-hand sides at once
    x = np.zeros_like(work[:, n:])
    for i in range(n - 1, -1, -1):
        x[i] = (work[i, n:] - work[i, i + 1:n] @ x[i + 1:]) / work[i, i]

    return x, float(smallest)
