"""
Univariate statistics.

Public API:
    mean(x)                 - Arithmetic mean
    variance(x, ddof=0)     - Variance (population by default)
    sd(x, ddof=0)           - Standard deviation
    median(x)               - Median
    mode(x)                 - All most-frequent values
    ks_normality(x)         - Kolmogorov-Smirnov distance to a fitted normal
    anderson_darling(x)     - Anderson-Darling test (normal or exponential)
    shapiro_wilk(x)         - Shapiro-Wilk normality test
    is_exponential(x)       - Exponential fit not rejected by Anderson-Darling
"""

from pynumerics.statistics.design import SampleDesign
from pynumerics.statistics._common import NormalityParams
from pynumerics.statistics.solution import NormalityTestSolution
from pynumerics.statistics.solvers import (
    mean,
    variance,
    sd,
    median,
    mode,
    ks_normality,
    anderson_darling,
    shapiro_wilk,
    is_exponential,
)

__all__ = [
    "mean",
    "variance",
    "sd",
    "median",
    "mode",
    "ks_normality",
    "anderson_darling",
    "shapiro_wilk",
    "is_exponential",
    "SampleDesign",
    "NormalityParams",
    "NormalityTestSolution",
]
