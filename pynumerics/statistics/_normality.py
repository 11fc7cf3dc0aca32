"""
Goodness-of-fit kernels: Kolmogorov-Smirnov, Anderson-Darling, Shapiro-Wilk.

Each kernel takes a validated SampleDesign and returns
(NormalityParams, warnings). Distribution parameters are always estimated
from the sample, which makes the Kolmogorov p-value conservative.
"""

from __future__ import annotations

import numpy as np
from scipy import stats as sp_stats

from pynumerics.core.exceptions import ValidationError
from pynumerics.statistics._common import NormalityParams
from pynumerics.statistics._moments import sample_mean, sample_variance
from pynumerics.statistics.design import SampleDesign


# Stephens (1974, 1986) critical values at these significance levels
AD_SIGNIFICANCE_LEVELS = (0.15, 0.10, 0.05, 0.025, 0.01)
_AD_CRITICAL_NORM = np.array([0.576, 0.656, 0.787, 0.918, 1.092])
_AD_CRITICAL_EXPON = np.array([0.922, 1.078, 1.341, 1.606, 1.957])

# Smallest sample the normal-fit critical values and p-value cover
AD_NORM_MIN_SAMPLES = 8


def _require_spread(design: SampleDesign, operation: str) -> None:
    if np.ptp(design.x) == 0.0:
        raise ValidationError(
            f"{design.name} ({operation}): all observations are identical"
        )


def ks_normal(design: SampleDesign) -> tuple[NormalityParams, list[str]]:
    """One-sample KS distance to N(mean, sd) with population sd."""
    design.require(2, 'ks_normality')
    _require_spread(design, 'ks_normality')

    x = design.x
    n = design.n
    mu = sample_mean(x)
    sigma = float(np.sqrt(sample_variance(x, ddof=0)))

    args = (mu, sigma)
    d, p_value = sp_stats.kstest(x, 'norm', args=args, method='exact')
    d_plus, _ = sp_stats.kstest(x, 'norm', args=args, alternative='greater')
    d_minus, _ = sp_stats.kstest(x, 'norm', args=args, alternative='less')

    warnings_list = [
        "p-value is approximate: mean and sd are estimated from the sample"
    ]
    params = NormalityParams(
        statistic=float(d),
        statistic_name='D',
        p_value=float(p_value),
        critical_value=None,
        significance=None,
        reject=None,
        method='One-sample Kolmogorov-Smirnov test (normal)',
        distribution='norm',
        n=n,
        estimates={'mean': mu, 'sd': sigma},
        extras={'D+': float(d_plus), 'D-': float(d_minus)},
    )
    return params, warnings_list


def _ad_statistic(logcdf: np.ndarray, logsf: np.ndarray) -> float:
    n = logcdf.shape[0]
    i = np.arange(1, n + 1)
    return float(-n - np.sum((2 * i - 1.0) / n * (logcdf + logsf[::-1])))


def _ad_normal_p_value(a2: float, n: int) -> float:
    """D'Agostino & Stephens (1986) approximation for the composite normal case."""
    aa = a2 * (1.0 + 0.75 / n + 2.25 / n ** 2)
    if aa < 0.2:
        p = 1.0 - np.exp(-13.436 + 101.14 * aa - 223.73 * aa ** 2)
    elif aa < 0.34:
        p = 1.0 - np.exp(-8.318 + 42.796 * aa - 59.938 * aa ** 2)
    elif aa < 0.6:
        p = np.exp(0.9177 - 4.279 * aa - 1.38 * aa ** 2)
    else:
        p = np.exp(1.2937 - 5.709 * aa + 0.0186 * aa ** 2)
    return float(np.clip(p, 0.0, 1.0))


def anderson_darling(
    design: SampleDesign,
    dist: str,
    significance: float,
) -> tuple[NormalityParams, list[str]]:
    """Anderson-Darling A^2 against a normal or exponential fit."""
    if significance not in AD_SIGNIFICANCE_LEVELS:
        raise ValidationError(
            f"significance must be one of {AD_SIGNIFICANCE_LEVELS}, got {significance!r}"
        )
    level = AD_SIGNIFICANCE_LEVELS.index(significance)
    warnings_list: list[str] = []
    x = np.sort(design.x)
    n = design.n

    if dist == 'norm':
        # Stephens' small-sample factor 1 + 4/n - 25/n**2 is negative for n <= 3
        # and the table is only calibrated from n = 8
        design.require(AD_NORM_MIN_SAMPLES, 'anderson_darling')
        _require_spread(design, 'anderson_darling')
        mu = sample_mean(x)
        s = float(np.sqrt(sample_variance(x, ddof=1)))
        z = (x - mu) / s
        a2 = _ad_statistic(sp_stats.norm.logcdf(z), sp_stats.norm.logsf(z))
        critical = round(float(_AD_CRITICAL_NORM[level] / (1.0 + 4.0 / n - 25.0 / n / n)), 3)
        p_value = _ad_normal_p_value(a2, n)
        estimates = {'mean': mu, 'sd': s}
        method = 'Anderson-Darling test (normal)'
    elif dist == 'expon':
        if np.any(x < 0.0):
            raise ValidationError(
                f"{design.name} (anderson_darling): exponential fit requires "
                f"non-negative observations, min is {x[0]}"
            )
        scale = sample_mean(x)
        if scale == 0.0:
            raise ValidationError(
                f"{design.name} (anderson_darling): all observations are zero"
            )
        w = x / scale
        a2 = _ad_statistic(sp_stats.expon.logcdf(w), sp_stats.expon.logsf(w))
        critical = round(float(_AD_CRITICAL_EXPON[level] / (1.0 + 0.6 / n)), 3)
        p_value = None
        estimates = {'scale': scale, 'rate': 1.0 / scale}
        method = 'Anderson-Darling test (exponential)'
    else:
        raise ValidationError(f"dist must be 'norm' or 'expon', got {dist!r}")

    params = NormalityParams(
        statistic=a2,
        statistic_name='A^2',
        p_value=p_value,
        critical_value=critical,
        significance=significance,
        reject=bool(a2 > critical),
        method=method,
        distribution=dist,
        n=n,
        estimates=estimates,
    )
    return params, warnings_list


def shapiro_wilk(design: SampleDesign) -> tuple[NormalityParams, list[str]]:
    """Shapiro-Wilk W via scipy (Royston's algorithm)."""
    design.require(3, 'shapiro_wilk')
    _require_spread(design, 'shapiro_wilk')
    warnings_list: list[str] = []
    if design.n > 5000:
        warnings_list.append(
            f"p-value may be inaccurate for n > 5000 (n = {design.n})"
        )

    res = sp_stats.shapiro(design.x)
    params = NormalityParams(
        statistic=float(res.statistic),
        statistic_name='W',
        p_value=float(res.pvalue),
        critical_value=None,
        significance=None,
        reject=None,
        method='Shapiro-Wilk normality test',
        distribution='norm',
        n=design.n,
        estimates=None,
    )
    return params, warnings_list
