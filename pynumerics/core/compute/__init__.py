"""
Shared compute infrastructure for PyNumerics.

This module provides timing utilities, tolerance tiers and iteration
limits that are shared across the matrix and statistics subpackages.

Submodules:
    timing: Execution timing utilities
    tolerances: Tolerance tiers for numerical comparison
    limits: Iteration limits and size thresholds
"""

from pynumerics.core.compute.timing import Timer, timed
from pynumerics.core.compute.tolerances import (
    ToleranceTier,
    CPU_FP64,
    CPU_FP64_ITERATIVE,
    CPU_FP64_ILL_CONDITIONED,
)

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "ToleranceTier",
    "CPU_FP64",
    "CPU_FP64_ITERATIVE",
    "CPU_FP64_ILL_CONDITIONED",
]
