"""
Tests for the Laplace and logistic distributions and the named-CDF registry.
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose, assert_array_equal
from scipy import stats as sp_stats

from statbox.core.exceptions import ValidationError
from statbox.distributions import (
    available_cdfs,
    get_cdf,
    laplace_cdf,
    laplace_pdf,
    logistic_cdf,
    logistic_inv,
    logistic_pdf,
)


# ═══════════════════════════════════════════════════════════════════════
# Laplace
# ═══════════════════════════════════════════════════════════════════════


class TestLaplace:

    def test_pdf_values(self):
        x = np.array([-np.inf, -np.log(2), 0, np.log(2), np.inf])
        assert_allclose(laplace_pdf(x), [0, 0.25, 0.5, 0.25, 0], rtol=1e-12)

    def test_cdf_values(self):
        x = np.array([-np.inf, -np.log(2), 0, np.log(2), np.inf])
        assert_allclose(laplace_cdf(x), [0, 0.25, 0.5, 0.75, 1], rtol=1e-12)

    def test_location_scale(self):
        x = np.linspace(-5, 7, 25)
        assert_allclose(
            laplace_cdf(x, mu=1.0, beta=2.0),
            sp_stats.laplace.cdf(x, loc=1.0, scale=2.0),
            rtol=1e-12,
        )
        assert_allclose(
            laplace_pdf(x, mu=1.0, beta=2.0),
            sp_stats.laplace.pdf(x, loc=1.0, scale=2.0),
            rtol=1e-12,
        )

    def test_nan_propagates(self):
        assert np.isnan(laplace_cdf(np.nan))
        assert np.isnan(laplace_pdf(np.nan))


# ═══════════════════════════════════════════════════════════════════════
# Logistic
# ═══════════════════════════════════════════════════════════════════════


class TestLogistic:

    def test_pdf_values(self):
        assert logistic_pdf(0.0) == pytest.approx(0.25)
        assert_array_equal(logistic_pdf([-np.inf, np.inf]), [0.0, 0.0])

    def test_pdf_extreme_values_finite(self):
        assert np.all(np.isfinite(logistic_pdf([-1000.0, 1000.0])))

    def test_cdf_values(self):
        x = np.array([-np.inf, -np.log(3), 0, np.log(3), np.inf])
        assert_allclose(logistic_cdf(x), [0, 0.25, 0.5, 0.75, 1], rtol=1e-12)

    def test_matches_scipy(self):
        x = np.linspace(-8, 8, 33)
        assert_allclose(
            logistic_pdf(x, mu=0.5, scale=1.5),
            sp_stats.logistic.pdf(x, loc=0.5, scale=1.5),
            rtol=1e-12,
        )
        assert_allclose(
            logistic_cdf(x, mu=0.5, scale=1.5),
            sp_stats.logistic.cdf(x, loc=0.5, scale=1.5),
            rtol=1e-12,
        )

    def test_inv_values(self):
        p = np.array([-1, 0, 0.25, 0.5, 0.75, 1, 2, np.nan])
        expected = [np.nan, -np.inf, -np.log(3), 0, np.log(3), np.inf, np.nan, np.nan]
        assert_allclose(logistic_inv(p), expected, rtol=1e-12, atol=1e-15)

    def test_inv_inverts_cdf(self):
        x = np.linspace(-6, 6, 13)
        assert_allclose(logistic_inv(logistic_cdf(x, 2.0, 0.5), 2.0, 0.5), x, atol=1e-10)

    def test_float32_preserved(self):
        assert logistic_inv(np.array([0.5], dtype=np.float32)).dtype == np.float32


# ═══════════════════════════════════════════════════════════════════════
# Named CDF registry
# ═══════════════════════════════════════════════════════════════════════


class TestRegistry:

    @pytest.mark.parametrize("name", ["normcdf", "norm", "pnorm", "NormCDF"])
    def test_normal_aliases(self, name):
        assert get_cdf(name)(np.array([0.0]))[0] == pytest.approx(0.5)

    def test_uniform(self):
        assert_allclose(get_cdf("unif")(np.array([-1, 0.3, 2])), [0, 0.3, 1])

    def test_exponential(self):
        assert get_cdf("expcdf")(np.array([1.0]))[0] == pytest.approx(1 - np.exp(-1))

    def test_laplace_and_logistic_registered(self):
        assert get_cdf("laplace_cdf") is laplace_cdf
        assert get_cdf("logistic_cdf") is logistic_cdf

    def test_unknown_name(self):
        with pytest.raises(ValidationError, match="Unknown distribution"):
            get_cdf("gamcdf")

    def test_available(self):
        names = available_cdfs()
        assert "normcdf" in names
        assert "logistic_cdf" in names
