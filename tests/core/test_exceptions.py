"""
Tests for PyNumerics exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyNumericsError)
    - Diagnostic attributes on SingularMatrixError and ConvergenceError
    - Default attribute values (None for optional attributes)
"""

import pytest

from pynumerics.core.exceptions import (
    ConvergenceError,
    DimensionError,
    NumericalError,
    PyNumericsError,
    SingularMatrixError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyNumericsError."""

    def test_validation_error_is_pynumerics_error(self):
        with pytest.raises(PyNumericsError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("ragged rows")

    def test_singular_matrix_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise SingularMatrixError("singular")

    def test_convergence_error_is_not_numerical_error(self):
        err = ConvergenceError("did not converge", iterations=100)
        assert isinstance(err, PyNumericsError)
        assert not isinstance(err, NumericalError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestSingularMatrixError:
    """SingularMatrixError carries matrix diagnostic attributes."""

    def test_all_attributes(self):
        err = SingularMatrixError(
            "A is singular",
            matrix_name="A",
            determinant=0.0,
            pivot=1e-20,
        )
        assert str(err) == "A is singular"
        assert err.matrix_name == "A"
        assert err.determinant == 0.0
        assert err.pivot == 1e-20

    def test_defaults_are_none(self):
        err = SingularMatrixError("singular")
        assert err.matrix_name is None
        assert err.determinant is None
        assert err.pivot is None


class TestConvergenceError:
    """ConvergenceError reports how far the iteration got."""

    def test_all_attributes(self):
        err = ConvergenceError(
            "Jacobi did not converge",
            iterations=100,
            final_change=1e-3,
            reason="max_iterations",
            threshold=0.0,
        )
        assert err.iterations == 100
        assert err.final_change == 1e-3
        assert err.reason == "max_iterations"
        assert err.threshold == 0.0

    def test_defaults_are_none(self):
        err = ConvergenceError("stopped", iterations=3)
        assert err.final_change is None
        assert err.reason is None
        assert err.threshold is None
