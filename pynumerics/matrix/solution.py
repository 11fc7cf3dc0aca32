"""
Eigen and SVD solution types.

Contains the parameter payloads and the user-facing solution wrappers.
Both wrap a Result envelope so that convergence state, sweep counts,
timing and warnings travel with the numbers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pynumerics.core.result import Result
from pynumerics.matrix._store import Matrix


@dataclass(frozen=True)
class EigenParams:
    """
    Parameter payload for the Jacobi eigen solver.

    eigenvalues are in diagonal order, NOT sorted; eigenvectors holds the
    matching eigenvectors as columns.
    """
    eigenvalues: NDArray[np.floating[Any]]
    eigenvectors: Matrix


@dataclass
class EigenSolution:
    """
    User-facing eigen-decomposition results.

    Wraps Result[EigenParams]. A truncated run (sweep limit reached) is
    still a solution; check converged or state before trusting it.
    """
    _result: Result[EigenParams]

    @property
    def eigenvalues(self) -> NDArray[np.floating[Any]]:
        """Eigenvalues in diagonal order, shape (n,)."""
        return self._result.params.eigenvalues.copy()

    @property
    def eigenvectors(self) -> Matrix:
        """Eigenvectors as the columns of an (n x n) Matrix."""
        return self._result.params.eigenvectors.copy()

    def eigenvector(self, index: int) -> NDArray[np.floating[Any]]:
        """Eigenvector paired with eigenvalues[index]."""
        return self._result.params.eigenvectors.column(index)

    @property
    def converged(self) -> bool:
        return self._result.info['converged']

    @property
    def state(self) -> str:
        """'converged' or 'max_iterations_reached'."""
        return self._result.info['state']

    @property
    def sweeps(self) -> int:
        return self._result.info['sweeps']

    @property
    def off_diagonal(self) -> float:
        """Sum of |a[p][q]|, p < q, of the final working matrix."""
        return self._result.info['off_diagonal']

    def sorted(self, descending: bool = False) -> EigenSolution:
        """
        Copy with eigenpairs reordered by eigenvalue.

        Ties keep their diagonal order.
        """
        from pynumerics.matrix.solvers import argsort

        values = self._result.params.eigenvalues
        order = argsort(-values if descending else values)
        vectors = self._result.params.eigenvectors.to_array()[:, order]
        params = EigenParams(
            eigenvalues=values[order].copy(),
            eigenvectors=Matrix._wrap(vectors),
        )
        result = Result(
            params=params,
            info={**self._result.info, 'sorted': 'descending' if descending else 'ascending'},
            timing=self._result.timing,
            backend_name=self._result.backend_name,
            warnings=self._result.warnings,
            provenance=self._result.provenance,
        )
        return EigenSolution(_result=result)

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def __repr__(self) -> str:
        values = ", ".join(f"{v:.6g}" for v in self._result.params.eigenvalues)
        return f"EigenSolution(eigenvalues=[{values}], state={self.state!r}, sweeps={self.sweeps})"


@dataclass(frozen=True)
class SVDParams:
    """
    Parameter payload for the approximate SVD.

    Thin factorization A ~ U @ diag(singular_values) @ V^T with
    U (m x k), V (n x k), k = min(m, n), singular values descending.
    """
    U: Matrix
    singular_values: NDArray[np.floating[Any]]
    V: Matrix


@dataclass
class SVDSolution:
    """User-facing SVD results. Wraps Result[SVDParams]."""
    _result: Result[SVDParams]

    @property
    def U(self) -> Matrix:
        """Left singular vectors as columns, (m x k)."""
        return self._result.params.U.copy()

    @property
    def V(self) -> Matrix:
        """Right singular vectors as columns, (n x k)."""
        return self._result.params.V.copy()

    @property
    def singular_values(self) -> NDArray[np.floating[Any]]:
        """Non-negative, descending, shape (k,)."""
        return self._result.params.singular_values.copy()

    @property
    def sigma(self) -> Matrix:
        """Diagonal (k x k) Matrix of singular values."""
        return Matrix._wrap(np.diag(self._result.params.singular_values))

    def as_tuple(self) -> tuple[Matrix, Matrix, Matrix]:
        """(U, Sigma, V)."""
        return self.U, self.sigma, self.V

    def reconstruct(self) -> Matrix:
        """U @ Sigma @ V^T."""
        p = self._result.params
        u = p.U.to_array()
        v = p.V.to_array()
        return Matrix._wrap((u * p.singular_values) @ v.T)

    @property
    def converged(self) -> bool:
        return self._result.info['converged']

    @property
    def rounds(self) -> int:
        return self._result.info['rounds']

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def __repr__(self) -> str:
        values = ", ".join(f"{v:.6g}" for v in self._result.params.singular_values)
        return (
            f"SVDSolution(singular_values=[{values}], "
            f"converged={self.converged}, rounds={self.rounds})"
        )
