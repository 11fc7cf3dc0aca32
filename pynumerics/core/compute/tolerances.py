"""
Tolerance tiers for numerical validation.

Defines precision expectations for the compute paths in this package:
- Direct FP64 kernels (cofactor expansion, elimination): machine precision
- Iterative FP64 kernels (Jacobi, SVD refinement): a few ulps of the norm
- Ill-conditioned problems: relaxed

Matrix.allclose() defaults to CPU_FP64; the test suite picks a tier per kernel.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Closed-form kernels: determinant, adjoint, inverse, Gaussian elimination
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, direct kernels',
)

# Rotation-based kernels accumulate rounding over many sweeps
CPU_FP64_ITERATIVE = ToleranceTier(
    rtol=1e-8,
    atol=1e-10,
    name='cpu_fp64_iterative',
    description='CPU double precision, Jacobi sweeps and SVD refinement',
)

# Ill-conditioned problems (cond > 1e4)
CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='cpu_fp64_ill_conditioned',
    description='CPU double precision, ill-conditioned (cond > 1e4)',
)

