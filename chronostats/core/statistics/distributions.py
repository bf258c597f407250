"""chronostats.core.statistics.distributions

Distribution helpers (no SciPy).

Implemented:
- Normal PDF / log-likelihood / CDF, elementwise over numpy arrays
- Standard normal quantile via stdlib ``statistics.NormalDist``
- Chi-square upper tail via the regularized incomplete gamma function
- Bilinear-exponential density and its log form
- Log-likelihood lookup from tabulated per-sample curves

Bilinear exponential:
  With xs = (x - mode) / width and the atan sigmoid v = 1/2 - atan(xs)/pi
  (v -> 1 on the left, v -> 0 on the right),

    f(x) = scale * exp(sharpness^2 * skew^2 * xs * v
                       - sharpness^2 / skew^2 * xs * (1 - v))

  i.e. an exponential decay on each side of the mode with rates
  sharpness^2*skew^2 (left) and sharpness^2/skew^2 (right), blended smoothly.
  Zero width or skew is a caller error and propagates as NaN/inf.
"""

from __future__ import annotations

import math
from statistics import NormalDist

import numpy as np

from ..interpolation.indexing import linterp_at_index


# ----------------------------
# Normal
# ----------------------------

_NORMAL = NormalDist()


def normpdf(mu, sigma, x):
    """Probability density of Normal(mu, sigma) at x."""
    x = np.asarray(x, dtype=float)
    out = np.exp(-(x - mu) * (x - mu) / (2 * sigma * sigma)) / (math.sqrt(2 * math.pi) * sigma)
    return out if out.ndim else float(out)


def normpdf_ll(mu, sigma, x):
    """Unnormalised log-likelihood of Normal(mu, sigma) at x.

    Drops the constant -log(sigma*sqrt(2*pi)); only differences are meaningful.
    """
    x = np.asarray(x, dtype=float)
    out = -(x - mu) * (x - mu) / (2 * sigma * sigma)
    return out if out.ndim else float(out)


def normcdf(mu, sigma, x):
    """Cumulative probability of Normal(mu, sigma) at x.

    Not precise far out in the tails, where 1 - erf loses digits.
    """
    z = (np.asarray(x, dtype=float) - mu) / (sigma * math.sqrt(2))
    out = 0.5 + np.vectorize(math.erf, otypes=[float])(z) / 2
    return out if out.ndim else float(out)


def norm_quantile(F: float) -> float:
    """Standard normal quantile (inverse CDF).

    How far from the mean, in units of sigma, a fraction F of a normal
    population falls below.

    Args:
        F: probability in (0, 1)
    """
    if not (0.0 < F < 1.0):
        raise ValueError("F must be in (0,1)")
    return float(_NORMAL.inv_cdf(F))


def norm_width(N: int) -> float:
    """Expected spread, in units of sigma, of N draws from a normal distribution."""
    if N <= 0:
        raise ValueError("N must be positive")
    F = 1.0 - 1.0 / (N + 1)
    return 2.0 * norm_quantile(F)


# ----------------------------
# Chi-square upper tail
# ----------------------------

_EPS = 1e-14
_MAX_TERMS = 2000
_TINY = 1e-300


def _lower_gamma_series(a: float, x: float) -> float:
    """P(a, x) by its power series; converges quickly for x < a + 1."""
    term = 1.0 / a
    total = term
    denom = a
    for _ in range(_MAX_TERMS):
        denom += 1.0
        term *= x / denom
        total += term
        if abs(term) < abs(total) * _EPS:
            break
    return total * math.exp(-x + a * math.log(x) - math.lgamma(a))


def _upper_gamma_fraction(a: float, x: float) -> float:
    """Q(a, x) by continued fraction (modified Lentz); used for x >= a + 1."""
    b = x + 1.0 - a
    c = 1.0 / _TINY
    d = 1.0 / b
    h = d
    for k in range(1, _MAX_TERMS + 1):
        an = -k * (k - a)
        b += 2.0
        d = an * d + b
        if abs(d) < _TINY:
            d = _TINY
        c = b + an / c
        if abs(c) < _TINY:
            c = _TINY
        d = 1.0 / d
        step = d * c
        h *= step
        if abs(step - 1.0) < _EPS:
            break
    return h * math.exp(-x + a * math.log(x) - math.lgamma(a))


def chi2_sf(x: float, df: int) -> float:
    """Upper-tail probability P(X > x) of a chi-square distribution.

    Args:
        x: value
        df: degrees of freedom (>0)
    """
    if df <= 0:
        raise ValueError("df must be positive")
    if math.isnan(x):
        return float('nan')
    if x <= 0.0:
        return 1.0
    if math.isinf(x):
        return 0.0

    a = 0.5 * df
    half_x = 0.5 * x
    if half_x < a + 1.0:
        q = 1.0 - _lower_gamma_series(a, half_x)
    else:
        q = _upper_gamma_fraction(a, half_x)
    return min(max(q, 0.0), 1.0)


# ----------------------------
# Bilinear exponential
# ----------------------------

def _unpack(p):
    p = np.asarray(tuple(p) if not isinstance(p, np.ndarray) else p, dtype=float)
    if p.shape[0] != 5:
        raise ValueError(f"Expected 5 parameters (scale, mode, width, sharpness, skew), got {p.shape[0]}")
    return p[0], p[1], p[2], p[3], p[4]


def _bilinear_exponent(x, mode, width, sharpness, skew):
    xs = (x - mode) / width
    v = 0.5 - np.arctan(xs) / np.pi
    return sharpness**2 * skew**2 * xs * v - sharpness**2 / skew**2 * xs * (1 - v)


def bilinear_exponential(x, p):
    """Bilinear-exponential density at x.

    Args:
        x: scalar or array of values
        p: (scale, mode, width, sharpness, skew), a BilinearParams or any
           length-5 sequence

    Returns:
        density with the shape of x (float for scalar x)
    """
    scale, mode, width, sharpness, skew = _unpack(p)
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        f = scale * np.exp(_bilinear_exponent(np.asarray(x, dtype=float), mode, width, sharpness, skew))
    return f if np.ndim(f) else float(f)


def bilinear_exponential_ll(x, p):
    """Log of the bilinear-exponential density, batched per sample.

    Args:
        x: values, one per sample (length n)
        p: parameter table of shape (5, n); row order is
           (scale, mode, width, sharpness, skew) and column i holds the
           parameters of sample i. A single length-5 parameter set is
           broadcast over all of x.

    Returns:
        log-density per sample (length n)
    """
    scale, mode, width, sharpness, skew = _unpack(p)
    x = np.asarray(x, dtype=float)
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        ll = np.log(scale) + _bilinear_exponent(x, mode, width, sharpness, skew)
    return ll if np.ndim(ll) else float(ll)


def interpolate_ll(x, p) -> np.ndarray:
    """Log-likelihood of each sample from its own tabulated curve.

    Column i of the 2-D table ``p`` is sample i's log-density tabulated over
    index space; ``x[i]`` is a fractional 0-based index into that column.
    Queries not strictly inside the column's range give -inf.

    Args:
        x: fractional indices, one per sample (length n)
        p: table of shape (m, n)

    Returns:
        log-likelihood per sample, shaped like x
    """
    x = np.asarray(x, dtype=float)
    table = np.asarray(p, dtype=float)
    if table.ndim != 2:
        raise ValueError("p must be a 2-D table with one column per sample")
    if table.shape[1] != x.size:
        raise ValueError(f"x has {x.size} samples but p has {table.shape[1]} columns")

    ll = np.empty(x.shape, dtype=float)
    for i, xi in enumerate(x.flat):
        ll.flat[i] = linterp_at_index(table[:, i], xi, -np.inf)
    return ll
