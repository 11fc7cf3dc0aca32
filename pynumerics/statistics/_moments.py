"""
Closed-form descriptive kernels on validated 1D float arrays.
"""

from __future__ import annotations

from collections import Counter
from typing import Any
import numpy as np
from numpy.typing import NDArray


def sample_mean(x: NDArray[np.floating[Any]]) -> float:
    return float(np.sum(x) / x.shape[0])


def sample_variance(x: NDArray[np.floating[Any]], ddof: int = 0) -> float:
    """Sum of squared deviations divided by n - ddof."""
    centered = x - sample_mean(x)
    return float(np.sum(centered * centered) / (x.shape[0] - ddof))


def sample_median(x: NDArray[np.floating[Any]]) -> float:
    """Middle order statistic; mean of the two middle ones for even n."""
    s = np.sort(x)
    n = s.shape[0]
    mid = n // 2
    if n % 2 == 0:
        return float((s[mid - 1] + s[mid]) / 2.0)
    return float(s[mid])


def sample_modes(x: NDArray[np.floating[Any]]) -> tuple[float, ...]:
    """All values attaining the highest frequency, ascending."""
    # -0.0 and 0.0 compare equal and hash alike, so they count as one value
    counts = Counter(x.tolist())
    top = max(counts.values())
    return tuple(sorted(value for value, count in counts.items() if count == top))
