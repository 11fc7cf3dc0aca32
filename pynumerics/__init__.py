"""
PyNumerics: a small numerical toolkit for Python.

A dense real-matrix engine (cofactor determinant and inverse, Jacobi
eigen-decomposition, approximate SVD, Gaussian elimination) together with
univariate descriptive statistics and goodness-of-fit tests.

Submodules:
    matrix: Dense matrix type and linear algebra
    statistics: Descriptive statistics and normality tests
    core: Exceptions, result envelope, validation, compute settings
"""

__version__ = "0.1.0"

from pynumerics import matrix
from pynumerics import statistics
from pynumerics.matrix import Matrix, eye, zeros

__all__ = [
    "__version__",
    "matrix",
    "statistics",
    "Matrix",
    "eye",
    "zeros",
]
