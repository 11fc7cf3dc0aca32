"""
Dense real-matrix engine.

Public API:
    Matrix          - Rectangular float64 matrix with value semantics
    eye(n)          - Identity matrix
    zeros(r, c)     - All-zero matrix
    eigen(m)        - Jacobi eigen-decomposition (symmetric input)
    svd(m)          - Approximate thin SVD built on eigen()
    argsort(v)      - Stable ascending sort permutation
    solve(a, b)     - Gaussian elimination with partial pivoting
    lstsq(a, b)     - Least squares via the normal equations

Operations that are undefined for their inputs return None.
"""

from pynumerics.matrix._store import Matrix, eye, zeros
from pynumerics.matrix.solution import (
    EigenParams,
    EigenSolution,
    SVDParams,
    SVDSolution,
)
from pynumerics.matrix.solvers import (
    eigen,
    svd,
    argsort,
    solve,
    lstsq,
)

__all__ = [
    "Matrix",
    "eye",
    "zeros",
    "eigen",
    "svd",
    "argsort",
    "solve",
    "lstsq",
    "EigenParams",
    "EigenSolution",
    "SVDParams",
    "SVDSolution",
]
