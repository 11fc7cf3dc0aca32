"""
Iteration limits and size thresholds shared by the matrix kernels.

Every iterative entry point accepts keyword overrides; these are the
defaults.
"""

# Maximum number of full Jacobi sweeps before giving up
JACOBI_MAX_SWEEPS = 100

# Sweeps during which small off-diagonal entries are skipped
# (threshold 0.2 * off / n**2); afterwards every non-zero entry is rotated
JACOBI_THRESHOLD_SWEEPS = 3

# Sweep after which off-diagonal entries negligible against both diagonal
# entries are set to zero without a rotation
JACOBI_UNDERFLOW_SWEEP = 4

# Maximum number of alternating U/V refinement rounds in the SVD
SVD_MAX_ROUNDS = 100

# Relative change in singular values that counts as converged
SVD_TOL = 1e-12

# Cofactor expansion costs O(n!); above this order a RuntimeWarning is issued
COFACTOR_WARN_ORDER = 8
