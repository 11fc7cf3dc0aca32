"""
Entry points for univariate statistics.

Descriptive functions (mean, variance, sd, median, mode) return plain
floats. Goodness-of-fit tests (ks_normality, anderson_darling,
shapiro_wilk) return a NormalityTestSolution; is_exponential() is a
boolean shortcut over the exponential Anderson-Darling test.
"""

from __future__ import annotations

from typing import Literal
import numpy as np
from numpy.typing import ArrayLike

from pynumerics.core.result import Result
from pynumerics.core.compute.timing import timed
from pynumerics.core.exceptions import ValidationError
from pynumerics.statistics.design import SampleDesign
from pynumerics.statistics.solution import NormalityTestSolution
from pynumerics.statistics._moments import (
    sample_mean,
    sample_variance,
    sample_median,
    sample_modes,
)
from pynumerics.statistics import _normality


Distribution = Literal['norm', 'expon']


def _ensure_design(data: ArrayLike | SampleDesign) -> SampleDesign:
    """Convert raw array to SampleDesign if needed."""
    if isinstance(data, SampleDesign):
        return data
    return SampleDesign.from_array(data)


def _check_ddof(ddof: int, n: int) -> None:
    if isinstance(ddof, bool) or not isinstance(ddof, (int, np.integer)) or ddof < 0:
        raise ValidationError(f"ddof must be a non-negative integer, got {ddof!r}")
    if n - ddof < 1:
        raise ValidationError(
            f"ddof={ddof} leaves no degrees of freedom for n={n}"
        )


def mean(x: ArrayLike | SampleDesign) -> float:
    """Arithmetic mean."""
    return sample_mean(_ensure_design(x).x)


def variance(x: ArrayLike | SampleDesign, *, ddof: int = 0) -> float:
    """
    Variance: sum of squared deviations over (n - ddof).

    The default ddof=0 is the population variance; use ddof=1 for the
    Bessel-corrected sample variance.
    """
    design = _ensure_design(x)
    _check_ddof(ddof, design.n)
    return sample_variance(design.x, ddof=ddof)


def sd(x: ArrayLike | SampleDesign, *, ddof: int = 0) -> float:
    """Standard deviation, sqrt(variance(x, ddof=ddof))."""
    return float(np.sqrt(variance(x, ddof=ddof)))


def median(x: ArrayLike | SampleDesign) -> float:
    """Median; mean of the two middle values for even n."""
    return sample_median(_ensure_design(x).x)


def mode(x: ArrayLike | SampleDesign) -> tuple[float, ...]:
    """
    All most-frequent values, ascending.

    Every value ties when all observations are distinct.
    """
    return sample_modes(_ensure_design(x).x)


def _run(design: SampleDesign, name: str, kernel, *args) -> NormalityTestSolution:
    with timed() as timer:
        with timer.section(name):
            params, warnings_list = kernel(design, *args)

    result = Result(
        params=params,
        info={'test': name, 'n': design.n},
        timing=timer.result(),
        backend_name=f'cpu_{name}',
        warnings=tuple(warnings_list),
    )
    return NormalityTestSolution(_result=result, _design=design)


def ks_normality(x: ArrayLike | SampleDesign) -> NormalityTestSolution:
    """
    Kolmogorov-Smirnov distance between the sample and a fitted normal.

    The normal uses the sample mean and population sd. The p-value comes
    from the Kolmogorov distribution for a fully specified null and is
    therefore conservative (a warning says so).

    Raises
    ------
    ValidationError
        Fewer than 2 observations, or all observations equal.
    """
    return _run(_ensure_design(x), 'ks_normality', _normality.ks_normal)


def anderson_darling(
    x: ArrayLike | SampleDesign,
    dist: Distribution = 'norm',
    *,
    significance: float = 0.05,
) -> NormalityTestSolution:
    """
    Anderson-Darling goodness-of-fit test.

    Parameters
    ----------
    x : array-like or SampleDesign
        1D sample.
    dist : str
        'norm' (mean and sd estimated, sd with ddof=1; needs n >= 8) or
        'expon' (scale estimated as the mean, location 0).
    significance : float
        One of 0.15, 0.10, 0.05, 0.025, 0.01. Selects the Stephens
        critical value used for `reject`.

    Returns
    -------
    NormalityTestSolution. For 'norm' the D'Agostino-Stephens p-value is
    included; for 'expon' p_value is None.
    """
    return _run(
        _ensure_design(x), 'anderson_darling',
        _normality.anderson_darling, dist, significance,
    )


def shapiro_wilk(x: ArrayLike | SampleDesign) -> NormalityTestSolution:
    """
    Shapiro-Wilk normality test.

    Raises
    ------
    ValidationError
        Fewer than 3 observations, or all observations equal.
    """
    return _run(_ensure_design(x), 'shapiro_wilk', _normality.shapiro_wilk)


def is_exponential(x: ArrayLike | SampleDesign, *, significance: float = 0.05) -> bool:
    """True unless the exponential Anderson-Darling test rejects at `significance`."""
    result = anderson_darling(x, 'expon', significance=significance)
    return not result.reject
