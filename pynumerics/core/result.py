"""
Generic result container for PyNumerics iterative computations.

The Result class provides a standardized envelope that the eigen solver,
the SVD and the statistical tests use. This enables shared tooling for
timing, warnings and reproducibility while allowing each domain to define
its own parameter structure.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (converged, sweeps, diagnostics)
    - timing is optional (don't burden unit tests)
    - provenance for reproducibility (versions, algorithm)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, Any]:
    """Generate minimal provenance metadata."""
    import numpy as np
    import pynumerics
    return {
        'pynumerics_version': pynumerics.__version__,
        'numpy_version': np.__version__,
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for numerical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (eigenpairs, singular values, ...)
        info: Structured metadata (method, convergence, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the routine that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Reproducibility metadata (versions, algorithm)

    Examples:
        >>> # Iterative method
        >>> Result(
        ...     params=EigenParams(eigenvalues=values, eigenvectors=vectors),
        ...     info={'method': 'jacobi', 'converged': True, 'sweeps': 6},
        ...     timing={'total_seconds': 0.001, 'sweeps': 0.0009},
        ...     backend_name='cpu_jacobi'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, Any] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
