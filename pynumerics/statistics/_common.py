"""
Common types for goodness-of-fit tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class NormalityParams:
    """
    Parameter payload for goodness-of-fit tests.

    Attributes
    ----------
    statistic : float
        Test statistic value.
    statistic_name : str
        "D" (Kolmogorov-Smirnov), "A^2" (Anderson-Darling), "W" (Shapiro-Wilk).
    p_value : float or None
        None where no p-value approximation exists (exponential A^2).
    critical_value : float or None
        Critical value at `significance`, for tests judged against a table.
    significance : float or None
        Significance level the critical value belongs to.
    reject : bool or None
        statistic > critical_value, when a critical value is available.
    method : str
        Human-readable method name.
    distribution : str
        Hypothesised family, "norm" or "expon".
    n : int
        Sample size.
    estimates : dict or None
        Parameters fitted from the sample, e.g. {"mean": 1.2, "sd": 0.4}.
    extras : dict or None
        Test-specific additional outputs (e.g. one-sided KS distances).
    """
    statistic: float
    statistic_name: str
    p_value: float | None
    critical_value: float | None
    significance: float | None
    reject: bool | None
    method: str
    distribution: str
    n: int
    estimates: dict[str, float] | None
    extras: dict[str, Any] | None = None
