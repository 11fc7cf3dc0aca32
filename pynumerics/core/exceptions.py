"""
Exception hierarchy for PyNumerics.

All exceptions inherit from PyNumericsError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information

Note that shape-sensitive matrix operations (add, multiply, inverse, ...)
signal an undefined result by returning None rather than raising. The
exceptions below cover construction failures, invalid arguments, and
strict-mode convergence failures.
"""


class PyNumericsError(Exception):
    """Base exception for all PyNumerics errors."""
    pass


class ValidationError(PyNumericsError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when a matrix is built from empty or ragged rows, or when
    an input does not have the expected number of dimensions.
    """
    pass


class NumericalError(PyNumericsError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: Determinant value, if computed
        pivot: Offending pivot magnitude, if found during elimination
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        determinant: float | None = None,
        pivot: float | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.determinant = determinant
        self.pivot = pivot


class ConvergenceError(PyNumericsError):
    """
    Iterative algorithm failed to converge.

    Raised by the Jacobi eigen solver and the SVD refinement when
    strict=True and the iteration limit is exhausted.

    Attributes:
        iterations: Number of iterations (sweeps or rounds) completed
        final_change: Final off-diagonal sum or singular value change
        reason: Why convergence failed (e.g., 'max_iterations')
        threshold: The convergence threshold that was not met
    """

    def __init__(
        self,
        message: str,
        iterations: int,
        final_change: float | None = None,
        reason: str | None = None,
        threshold: float | None = None
    ):
        super().__init__(message)
        self.iterations = iterations
        self.final_change = final_change
        self.reason = reason
        self.threshold = threshold
