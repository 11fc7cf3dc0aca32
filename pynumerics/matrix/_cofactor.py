"""
Determinant, cofactors, adjugate and inverse by cofactor expansion.

Minors are never materialised: the recursion carries the surviving row
and column indices of the original array, so each level only builds two
small index tuples.

Cost is O(n!) in the order n. This is a hard practical limit, not a
correctness one: above COFACTOR_WARN_ORDER a RuntimeWarning is issued
and the computation still runs to completion.
"""

from __future__ import annotations

import warnings
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pynumerics.core.compute.limits import COFACTOR_WARN_ORDER


def _warn_if_large(n: int) -> None:
    if n > COFACTOR_WARN_ORDER:
        warnings.warn(
            f"Cofactor expansion of a {n}x{n} matrix takes O(n!) operations; "
            f"expect long run times above order {COFACTOR_WARN_ORDER}",
            RuntimeWarning,
            stacklevel=3,
        )


def _det(
    a: NDArray[np.floating[Any]],
    rows: tuple[int, ...],
    cols: tuple[int, ...],
) -> float:
    """Determinant of the submatrix a[rows][:, cols], expanding along its first row."""
    n = len(rows)
    if n == 1:
        return float(a[rows[0], cols[0]])
    if n == 2:
        r0, r1 = rows
        c0, c1 = cols
        return float(a[r0, c0] * a[r1, c1] - a[r0, c1] * a[r1, c0])

    top = rows[0]
    below = rows[1:]
    det = 0.0
    for k, col in enumerate(cols):
        element = a[top, col]
        if element == 0.0:
            continue
        sign = 1.0 if k % 2 == 0 else -1.0
        det += sign * element * _det(a, below, cols[:k] + cols[k + 1:])
    return det


def _minor(a: NDArray[np.floating[Any]], i: int, j: int) -> float:
    """Determinant of a with row i and column j deleted (a is at least 2x2)."""
    n = a.shape[0]
    rows = tuple(r for r in range(n) if r != i)
    cols = tuple(c for c in range(n) if c != j)
    return _det(a, rows, cols)


def determinant(a: NDArray[np.floating[Any]]) -> float | None:
    """Determinant of a square array, or None if a is not square."""
    n, p = a.shape
    if n != p:
        return None
    _warn_if_large(n)
    index = tuple(range(n))
    return _det(a, index, index)


def cofactors(a: NDArray[np.floating[Any]]) -> NDArray[np.float64] | None:
    """C[i, j] = (-1)^(i+j) * minor(i, j), or None if a is not square."""
    n, p = a.shape
    if n != p:
        return None
    if n == 1:
        return np.ones((1, 1), dtype=np.float64)
    _warn_if_large(n - 1)

    c = np.empty((n, n), dtype=np.float64)
    for i in range(n):
        for j in range(n):
            sign = 1.0 if (i + j) % 2 == 0 else -1.0
            c[i, j] = sign * _minor(a, i, j)
    return c


def adjugate(a: NDArray[np.floating[Any]]) -> NDArray[np.float64] | None:
    """Classical adjugate: the transpose of the cofactor matrix."""
    c = cofactors(a)
    if c is None:
        return None
    return c.T.copy()


def inverse(a: NDArray[np.floating[Any]], tol: float = 0.0) -> NDArray[np.float64] | None:
    """
    Inverse as adjugate(a) * (1 / det(a)).

    Returns None if a is not square or |det(a)| <= tol.
    """
    det = determinant(a)
    if det is None or abs(det) <= tol:
        return None
    adj = adjugate(a)
    return adj * (1.0 / det)
