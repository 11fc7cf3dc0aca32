"""
Tests for goodness-of-fit tests.

scipy.stats is the reference for every statistic that has a library
counterpart.
"""

import numpy as np
import pytest
from scipy import stats

from pynumerics.core.exceptions import ValidationError
from pynumerics.statistics import (
    NormalityTestSolution,
    anderson_darling,
    is_exponential,
    ks_normality,
    shapiro_wilk,
)


@pytest.fixture
def normal_sample():
    """Normal quantiles: an ideal sample of size 200."""
    p = (np.arange(1, 201) - 0.5) / 200
    return 10.0 + 2.0 * stats.norm.ppf(p)


@pytest.fixture
def exponential_sample():
    p = (np.arange(1, 201) - 0.5) / 200
    return 3.0 * stats.expon.ppf(p)


# ═══════════════════════════════════════════════════════════════════════
# Kolmogorov-Smirnov
# ═══════════════════════════════════════════════════════════════════════


class TestKSNormality:

    def test_matches_scipy(self, normal_sample):
        mu = np.mean(normal_sample)
        sigma = np.std(normal_sample)
        ref = stats.kstest(normal_sample, 'norm', args=(mu, sigma), method='exact')
        result = ks_normality(normal_sample)
        assert result.statistic == pytest.approx(ref.statistic, rel=1e-10)
        assert result.p_value == pytest.approx(ref.pvalue, rel=1e-6)

    def test_one_sided_distances(self, normal_sample):
        result = ks_normality(normal_sample)
        assert result.statistic == pytest.approx(
            max(result.extras['D+'], result.extras['D-']), rel=1e-12
        )

    def test_one_sided_distances_match_scipy(self, normal_sample):
        mu = np.mean(normal_sample)
        sigma = np.std(normal_sample)
        greater = stats.kstest(normal_sample, 'norm', args=(mu, sigma), alternative='greater')
        less = stats.kstest(normal_sample, 'norm', args=(mu, sigma), alternative='less')
        result = ks_normality(normal_sample)
        assert result.extras['D+'] == pytest.approx(greater.statistic, rel=1e-12)
        assert result.extras['D-'] == pytest.approx(less.statistic, rel=1e-12)

    def test_estimates_use_population_sd(self, normal_sample):
        result = ks_normality(normal_sample)
        assert result.estimates['sd'] == pytest.approx(np.std(normal_sample), rel=1e-12)

    def test_approximate_p_value_warning(self, normal_sample):
        result = ks_normality(normal_sample)
        assert any("approximate" in w for w in result.warnings)

    def test_too_few_samples(self):
        with pytest.raises(ValidationError, match="at least 2"):
            ks_normality([1.0])

    def test_constant_sample(self):
        with pytest.raises(ValidationError, match="identical"):
            ks_normality([2.0, 2.0, 2.0])


# ═══════════════════════════════════════════════════════════════════════
# Anderson-Darling
# ═══════════════════════════════════════════════════════════════════════


class TestAndersonDarling:

    def test_normal_statistic_matches_scipy(self, normal_sample):
        ref = stats.anderson(normal_sample, dist='norm')
        result = anderson_darling(normal_sample)
        assert result.statistic == pytest.approx(ref.statistic, rel=1e-10)

    def test_exponential_statistic_matches_scipy(self, exponential_sample):
        ref = stats.anderson(exponential_sample, dist='expon')
        result = anderson_darling(exponential_sample, 'expon')
        assert result.statistic == pytest.approx(ref.statistic, rel=1e-10)

    def test_normal_critical_value(self, normal_sample):
        n = len(normal_sample)
        result = anderson_darling(normal_sample, significance=0.05)
        expected = round(0.787 / (1.0 + 4.0 / n - 25.0 / n ** 2), 3)
        assert result.critical_value == pytest.approx(expected)

    def test_exponential_critical_value(self, exponential_sample):
        result = anderson_darling(exponential_sample, 'expon', significance=0.01)
        assert result.critical_value == pytest.approx(round(1.957 / (1.0 + 0.6 / 200), 3))
        assert result.p_value is None

    def test_normal_sample_not_rejected(self, normal_sample):
        result = anderson_darling(normal_sample)
        assert result.reject is False
        assert result.p_value > 0.05

    def test_exponential_sample_rejected_as_normal(self, exponential_sample):
        result = anderson_darling(exponential_sample)
        assert result.reject is True
        assert result.p_value < 0.01

    def test_unknown_distribution(self, normal_sample):
        with pytest.raises(ValidationError, match="'norm' or 'expon'"):
            anderson_darling(normal_sample, 'gamma')

    def test_unsupported_significance(self, normal_sample):
        with pytest.raises(ValidationError, match="significance"):
            anderson_darling(normal_sample, significance=0.2)

    def test_negative_values_rejected_for_expon(self):
        with pytest.raises(ValidationError, match="non-negative"):
            anderson_darling([-1.0, 2.0, 3.0], 'expon')

    def test_all_zero_rejected_for_expon(self):
        with pytest.raises(ValidationError, match="zero"):
            anderson_darling([0.0, 0.0], 'expon')

    @pytest.mark.parametrize("x", [
        [1.0, 2.0],
        [1.0, 2.5, 2.0],
        [1.0, 2.5, 2.0, 4.0, 3.1, 0.7, 1.9],
    ])
    def test_normal_fit_needs_eight_samples(self, x):
        with pytest.raises(ValidationError, match="at least 8"):
            anderson_darling(x)

    def test_normal_fit_at_minimum_size(self):
        result = anderson_darling([1.0, 2.5, 2.0, 4.0, 3.1, 0.7, 1.9, 2.8])
        assert result.critical_value > 0.0
        assert result.reject is (result.statistic > result.critical_value)
        assert result.warnings == ()

    def test_small_exponential_sample_allowed(self):
        result = anderson_darling([0.5, 1.0, 2.0], 'expon')
        assert result.critical_value > 0.0


class TestIsExponential:

    def test_exponential_sample(self, exponential_sample):
        assert is_exponential(exponential_sample) is True

    def test_uniform_far_from_zero(self, rng):
        x = rng.uniform(100.0, 101.0, size=200)
        assert is_exponential(x) is False


# ═══════════════════════════════════════════════════════════════════════
# Shapiro-Wilk
# ═══════════════════════════════════════════════════════════════════════


class TestShapiroWilk:

    def test_matches_scipy(self, normal_sample):
        ref = stats.shapiro(normal_sample)
        result = shapiro_wilk(normal_sample)
        assert result.statistic == pytest.approx(ref.statistic)
        assert result.p_value == pytest.approx(ref.pvalue)
        assert result.statistic_name == 'W'

    def test_too_few_samples(self):
        with pytest.raises(ValidationError, match="at least 3"):
            shapiro_wilk([1.0, 2.0])


# ═══════════════════════════════════════════════════════════════════════
# Solution object
# ═══════════════════════════════════════════════════════════════════════


class TestNormalityTestSolution:

    def test_metadata(self, normal_sample):
        result = anderson_darling(normal_sample)
        assert isinstance(result, NormalityTestSolution)
        assert result.backend_name == 'cpu_anderson_darling'
        assert result.info == {'test': 'anderson_darling', 'n': 200}
        assert result.n == 200
        assert result.distribution == 'norm'
        assert 'total_seconds' in result.timing
        assert 'anderson_darling' in result.timing

    def test_summary(self, normal_sample):
        text = anderson_darling(normal_sample).summary()
        assert "Anderson-Darling test (normal)" in text
        assert "data:  x" in text
        assert "A^2 = " in text
        assert "critical value at 0.05" in text

    def test_repr_is_summary(self, normal_sample):
        result = shapiro_wilk(normal_sample)
        assert repr(result) == result.summary()
