"""Tests for distribution helpers and the bilinear-exponential distribution."""

import math

import numpy as np
import pytest

from chronostats.core.models import BilinearParams
from chronostats.core.statistics.distributions import (
    normpdf,
    normpdf_ll,
    normcdf,
    norm_quantile,
    norm_width,
    chi2_sf,
    bilinear_exponential,
    bilinear_exponential_ll,
    interpolate_ll,
)


# -----------------------------------------------------------------------------
# Normal
# -----------------------------------------------------------------------------

def test_normpdf_peak():
    assert normpdf(0.0, 1.0, 0.0) == pytest.approx(1.0 / math.sqrt(2.0 * math.pi))


def test_normpdf_vectorized():
    x = np.array([-1.0, 0.0, 1.0])
    out = normpdf(0.0, 2.0, x)
    assert out.shape == (3,)
    assert out[0] == pytest.approx(out[2])
    assert out[1] == pytest.approx(1.0 / (2.0 * math.sqrt(2.0 * math.pi)))


def test_normpdf_ll_matches_log_pdf_up_to_constant():
    mu, sigma = 3.0, 0.5
    x = np.array([2.0, 2.7, 3.4])
    const = -math.log(sigma * math.sqrt(2.0 * math.pi))
    np.testing.assert_allclose(normpdf_ll(mu, sigma, x) + const, np.log(normpdf(mu, sigma, x)))


@pytest.mark.parametrize(
    "x, expected",
    [
        (0.0, 0.5),
        (1.959963984540054, 0.975),
        (-1.0, 0.15865525393145707),
    ],
)
def test_normcdf_known_values(x, expected):
    assert normcdf(0.0, 1.0, x) == pytest.approx(expected, abs=1e-12)


def test_normcdf_vectorized():
    out = normcdf(10.0, 2.0, [10.0, 12.0])
    np.testing.assert_allclose(out, [0.5, 0.8413447460685429])


@pytest.mark.parametrize(
    "F, expected",
    [
        (0.5, 0.0),
        (0.975, 1.959963984540054),
        (0.025, -1.959963984540054),
    ],
)
def test_norm_quantile(F, expected):
    assert norm_quantile(F) == pytest.approx(expected, rel=0, abs=1e-12)


def test_norm_quantile_rejects_out_of_range():
    with pytest.raises(ValueError):
        norm_quantile(1.0)


def test_norm_width():
    assert norm_width(1) == pytest.approx(0.0, abs=1e-12)
    # N=39: F = 0.975
    assert norm_width(39) == pytest.approx(2.0 * 1.959963984540054)
    assert norm_width(1000) > norm_width(10)


# -----------------------------------------------------------------------------
# Chi-square upper tail
# -----------------------------------------------------------------------------

@pytest.mark.parametrize(
    "x, df, expected",
    [
        (3.841458820694124, 1, 0.05),
        (5.991464547107979, 2, 0.05),
        (18.307038053275146, 10, 0.05),
        (2.0, 2, math.exp(-1.0)),
        (0.5, 4, math.exp(-0.25) * 1.25),
    ],
)
def test_chi2_sf_known_values(x, df, expected):
    assert chi2_sf(x, df) == pytest.approx(expected, abs=1e-9)


def test_chi2_sf_limits():
    assert chi2_sf(0.0, 3) == 1.0
    assert chi2_sf(math.inf, 3) == 0.0
    assert math.isnan(chi2_sf(float('nan'), 3))


def test_chi2_sf_rejects_bad_df():
    with pytest.raises(ValueError):
        chi2_sf(1.0, 0)


# -----------------------------------------------------------------------------
# Bilinear exponential
# -----------------------------------------------------------------------------

class TestBilinearExponential:
    """Density and its log form."""

    def test_value_at_mode_is_scale(self):
        p = BilinearParams(scale=3.5, mode=10.0, width=2.0, sharpness=1.3, skew=0.7)
        assert bilinear_exponential(10.0, p) == 3.5

    @pytest.mark.parametrize("d", [0.1, 0.5, 1.0, 2.5, 7.0])
    def test_symmetric_when_skew_is_one(self, d):
        p = (1.0, 5.0, 1.5, 2.0, 1.0)
        assert bilinear_exponential(5.0 + d, p) == pytest.approx(bilinear_exponential(5.0 - d, p), rel=1e-12)

    def test_symmetric_density_decreases_away_from_mode(self):
        p = (1.0, 0.0, 1.0, 1.0, 1.0)
        f = bilinear_exponential(np.array([0.0, 0.5, 1.0, 2.0, 4.0]), p)
        assert np.all(np.diff(f) < 0)

    def test_skewed_value(self):
        """mode=0, width=1, sharpness=1, skew=2 at x=-1 and x=+1."""
        p = BilinearParams(1.0, 0.0, 1.0, 1.0, 2.0)
        # xs=-1: v=3/4, exponent = 4*(-1)*(3/4) - (1/4)*(-1)*(1/4) = -2.9375
        assert bilinear_exponential(-1.0, p) == pytest.approx(math.exp(-2.9375))
        # xs=+1: v=1/4, exponent = 4*(1/4) - (1/4)*(3/4) = 0.8125
        assert bilinear_exponential(1.0, p) == pytest.approx(math.exp(0.8125))

    def test_vectorized_preserves_shape(self):
        x = np.linspace(-3.0, 3.0, 12).reshape(3, 4)
        f = bilinear_exponential(x, (2.0, 0.0, 1.0, 1.0, 1.0))
        assert f.shape == (3, 4)
        assert np.all(f > 0)

    def test_scalar_returns_float(self):
        assert isinstance(bilinear_exponential(1.0, (1.0, 0.0, 1.0, 1.0, 1.0)), float)

    def test_log_form_matches_log_of_density(self):
        x = np.array([-2.0, -0.3, 0.0, 0.8, 3.0])
        p = (2.5, 0.1, 0.9, 1.7, 1.4)
        np.testing.assert_allclose(bilinear_exponential_ll(x, p), np.log(bilinear_exponential(x, p)), rtol=1e-12)

    def test_log_form_batched_columns(self):
        """Column i of the (5, n) table parameterises sample i."""
        p = np.array([
            [1.0, 2.0, 0.5],    # scale
            [0.0, 10.0, -1.0],  # mode
            [1.0, 2.0, 0.3],    # width
            [1.0, 0.8, 2.0],    # sharpness
            [1.0, 1.5, 0.6],    # skew
        ])
        x = np.array([0.4, 9.0, -0.7])
        ll = bilinear_exponential_ll(x, p)
        assert ll.shape == (3,)
        for i in range(3):
            expected = math.log(bilinear_exponential(x[i], p[:, i]))
            assert ll[i] == pytest.approx(expected, rel=1e-12)

    def test_zero_width_propagates_non_finite(self):
        f = bilinear_exponential(1.0, (1.0, 0.0, 0.0, 1.0, 1.0))
        assert not math.isfinite(f)

    def test_wrong_parameter_count_raises(self):
        with pytest.raises(ValueError):
            bilinear_exponential(1.0, (1.0, 0.0, 1.0))


# -----------------------------------------------------------------------------
# Log-likelihood by interpolation
# -----------------------------------------------------------------------------

class TestInterpolateLL:
    """Per-sample lookup into tabulated log-density columns."""

    TABLE = np.array([
        [-5.0, -1.0],
        [-1.0, -2.0],
        [-3.0, -3.0],
        [-9.0, -4.0],
    ])

    def test_interior_queries(self):
        ll = interpolate_ll([0.5, 2.5], self.TABLE)
        np.testing.assert_allclose(ll, [-3.0, -3.5])

    @pytest.mark.parametrize("xi", [0.0, 3.0, -0.2, 3.5, 10.0])
    def test_outside_domain_is_minus_inf(self, xi):
        ll = interpolate_ll([1.5, xi], self.TABLE)
        assert ll[0] == pytest.approx(-2.0)
        assert ll[1] == -np.inf

    def test_outside_domain_ignores_table_values(self):
        table = np.full((4, 1), 100.0)
        assert interpolate_ll([3.0], table)[0] == -np.inf

    def test_column_count_mismatch_raises(self):
        with pytest.raises(ValueError):
            interpolate_ll([0.5, 1.0, 1.5], self.TABLE)

    def test_requires_2d_table(self):
        with pytest.raises(ValueError):
            interpolate_ll([0.5], np.array([1.0, 2.0, 3.0]))
