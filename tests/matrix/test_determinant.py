"""
Tests for determinant, cofactors, adjoint and inverse.
"""

import warnings

import numpy as np
import pytest

from pynumerics.core.compute import CPU_FP64
from pynumerics.matrix import Matrix, eye, zeros


# ═══════════════════════════════════════════════════════════════════════
# Determinant
# ═══════════════════════════════════════════════════════════════════════


class TestDeterminant:

    def test_2x2(self):
        assert Matrix([[1, 2], [3, 4]]).determinant() == -2.0

    def test_1x1(self):
        assert Matrix([[-3.5]]).determinant() == -3.5

    @pytest.mark.parametrize("n", [1, 2, 3, 4, 5, 6])
    def test_identity(self, n):
        assert eye(n).determinant() == 1.0

    def test_3x3_known(self):
        m = Matrix([[2, 0, 1], [1, 3, 2], [1, 1, 2]])
        assert m.determinant() == 6.0

    def test_zero_first_row_element(self):
        m = Matrix([[0, 1, 2], [1, 0, 3], [4, -3, 8]])
        assert m.determinant() == pytest.approx(-2.0)

    def test_singular(self):
        assert Matrix([[1, 2, 3], [4, 5, 6], [7, 8, 9]]).determinant() == pytest.approx(0.0, abs=1e-12)

    def test_matches_numpy(self, rng):
        x = rng.standard_normal((5, 5))
        assert Matrix(x).determinant() == pytest.approx(
            np.linalg.det(x), rel=CPU_FP64.rtol, abs=CPU_FP64.atol
        )

    def test_non_square_returns_none(self):
        assert zeros(2, 3).determinant() is None

    def test_large_order_warns(self):
        with pytest.warns(RuntimeWarning, match="O\\(n!\\)"):
            assert eye(9).determinant() == 1.0

    def test_small_order_does_not_warn(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            eye(8).determinant()


# ═══════════════════════════════════════════════════════════════════════
# Cofactors and adjoint
# ═══════════════════════════════════════════════════════════════════════


class TestAdjoint:

    def test_cofactor_matrix_2x2(self):
        c = Matrix([[1, 2], [3, 4]]).cofactor_matrix()
        assert c == Matrix([[4, -3], [-2, 1]])

    def test_adjoint_is_transposed_cofactors(self):
        a = Matrix([[1, 2], [3, 4]])
        assert a.adjoint() == Matrix([[4, -2], [-3, 1]])
        assert a.adjoint() == a.cofactor_matrix().transpose()

    def test_adjoint_identity_relation(self, rng):
        a = Matrix(rng.standard_normal((4, 4)))
        lhs = a.multiply(a.adjoint()).to_array()
        np.testing.assert_allclose(lhs, a.determinant() * np.eye(4), atol=1e-10)

    def test_1x1(self):
        assert Matrix([[5]]).adjoint() == Matrix([[1]])

    def test_non_square_returns_none(self):
        assert zeros(3, 2).adjoint() is None
        assert zeros(3, 2).cofactor_matrix() is None


# ═══════════════════════════════════════════════════════════════════════
# Inverse
# ═══════════════════════════════════════════════════════════════════════


class TestInverse:

    def test_2x2_exact(self):
        inv = Matrix([[1, 2], [3, 4]]).inverse()
        assert inv == Matrix([[-2.0, 1.0], [1.5, -0.5]])

    def test_product_is_identity(self, rng):
        a = Matrix(rng.standard_normal((4, 4)) + 4 * np.eye(4))
        product = a.multiply(a.inverse())
        np.testing.assert_allclose(product.to_array(), np.eye(4), atol=1e-10)

    def test_matches_numpy(self, rng):
        x = rng.standard_normal((3, 3)) + 3 * np.eye(3)
        np.testing.assert_allclose(
            Matrix(x).inverse().to_array(), np.linalg.inv(x),
            rtol=CPU_FP64.rtol, atol=CPU_FP64.atol,
        )

    def test_singular_returns_none(self):
        assert Matrix([[1, 2], [2, 4]]).inverse() is None

    def test_tolerance(self):
        nearly = Matrix([[1.0, 1.0], [1.0, 1.0 + 1e-13]])
        assert nearly.inverse() is not None
        assert nearly.inverse(tol=1e-10) is None

    def test_non_square_returns_none(self):
        assert zeros(2, 3).inverse() is None
