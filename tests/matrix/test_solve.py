"""
Tests for Gaussian elimination (solve) and least squares (lstsq).
"""

import numpy as np
import pytest

from pynumerics.core.compute import CPU_FP64
from pynumerics.core.exceptions import SingularMatrixError, ValidationError
from pynumerics.matrix import Matrix, eye, lstsq, solve, zeros


class TestSolve:

    def test_2x2(self):
        x = solve(Matrix([[2, 1], [1, 3]]), [3, 5])
        assert x.shape == (2, 1)
        np.testing.assert_allclose(x.column(0), [0.8, 1.4], rtol=CPU_FP64.rtol)

    def test_requires_pivoting(self):
        # zero in the (0, 0) position
        x = solve(Matrix([[0, 1], [1, 0]]), [2, 3])
        np.testing.assert_allclose(x.column(0), [3.0, 2.0])

    def test_matches_numpy(self, rng):
        a = rng.standard_normal((5, 5))
        b = rng.standard_normal(5)
        x = solve(Matrix(a), b)
        np.testing.assert_allclose(x.column(0), np.linalg.solve(a, b), rtol=1e-9)

    def test_multiple_rhs(self, rng):
        a = rng.standard_normal((4, 4))
        b = rng.standard_normal((4, 3))
        x = solve(Matrix(a), Matrix(b))
        assert x.shape == (4, 3)
        np.testing.assert_allclose(x.to_array(), np.linalg.solve(a, b), rtol=1e-9)

    def test_identity_rhs_gives_inverse(self):
        a = Matrix([[1, 2], [3, 4]])
        np.testing.assert_allclose(
            solve(a, eye(2)).to_array(), a.inverse().to_array(),
            rtol=CPU_FP64.rtol, atol=CPU_FP64.atol,
        )

    def test_method_on_matrix(self):
        x = Matrix([[4.0]]).solve([2.0])
        assert x == Matrix([[0.5]])

    def test_inputs_not_modified(self):
        a = Matrix([[0, 1], [1, 0]])
        b = Matrix([[2], [3]])
        solve(a, b)
        assert a == Matrix([[0, 1], [1, 0]])
        assert b == Matrix([[2], [3]])


class TestSolveUndefined:
    """Undefined systems return None unless strict=True."""

    def test_singular_returns_none(self):
        assert solve(Matrix([[1, 2], [2, 4]]), [1, 2]) is None

    def test_zero_matrix_returns_none(self):
        assert solve(zeros(3, 3), [1, 2, 3]) is None

    def test_singular_strict_raises(self):
        with pytest.raises(SingularMatrixError) as excinfo:
            solve(Matrix([[1, 2], [2, 4]]), [1, 2], strict=True)
        assert excinfo.value.matrix_name == 'A'
        assert excinfo.value.pivot is not None

    def test_non_square_returns_none(self):
        assert solve(zeros(2, 3), [1, 2]) is None

    def test_rhs_length_mismatch_returns_none(self):
        assert solve(eye(2), [1, 2, 3]) is None

    def test_pivot_tolerance(self):
        a = Matrix([[1.0, 0.0], [0.0, 1e-8]])
        assert solve(a, [1.0, 1.0]) is not None
        assert solve(a, [1.0, 1.0], pivot_tol=1e-6) is None

    def test_default_pivot_tolerance_is_relative(self):
        a = eye(3).scale(1e-20)
        x = solve(a, [1e-20, 2e-20, 3e-20])
        np.testing.assert_allclose(x.column(0), [1.0, 2.0, 3.0], rtol=CPU_FP64.rtol)
        assert a.inverse() is not None

    def test_scaled_singular_still_none(self):
        assert solve(Matrix([[1e-20, 2e-20], [2e-20, 4e-20]]), [1.0, 1.0]) is None

    def test_bad_rhs(self):
        with pytest.raises(ValidationError):
            solve(eye(2), [1.0, np.nan])
        with pytest.raises(ValidationError):
            solve(eye(2), np.ones((2, 0)))

    def test_negative_pivot_tol(self):
        with pytest.raises(ValidationError):
            solve(eye(2), [1.0, 1.0], pivot_tol=-1.0)


class TestLstsq:

    def test_exact_fit(self):
        # y = 1 + 2 t
        a = Matrix([[1, 0], [1, 1], [1, 2], [1, 3]])
        x = lstsq(a, [1, 3, 5, 7])
        np.testing.assert_allclose(x.column(0), [1.0, 2.0], rtol=1e-10)

    def test_matches_numpy(self, rng):
        a = rng.standard_normal((20, 3))
        b = rng.standard_normal(20)
        x = lstsq(Matrix(a), b)
        expected, *_ = np.linalg.lstsq(a, b, rcond=None)
        np.testing.assert_allclose(x.column(0), expected, rtol=1e-8)

    def test_rank_deficient_returns_none(self):
        a = Matrix([[1, 2], [2, 4], [3, 6]])
        assert lstsq(a, [1, 2, 3]) is None

    def test_row_mismatch_returns_none(self):
        assert lstsq(zeros(3, 2), [1, 2]) is None
