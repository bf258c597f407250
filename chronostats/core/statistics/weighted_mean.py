"""chronostats.core.statistics.weighted_mean

Inverse-variance weighted means with MSWD.

Definitions used (n values x_i with one-sigma uncertainties s_i):
    s1   = sum(x_i / s_i^2)
    s2   = sum(1 / s_i^2)
    mean = s1 / s2
    mswd = sum((x_i - mean)^2 / s_i^2) / (n - 1)

Two uncertainties are offered:
- ``gwmean``: sqrt(mswd / s2), the standard error scaled by the observed
  scatter (use when scatter may exceed or fall short of the stated errors)
- ``awmean``: sqrt(1 / s2), the plain inverse-variance standard error

A single value is returned as-is with mswd = 0, since the MSWD has no
degrees of freedom for n = 1.

Every sigma must be positive. This is not checked: a zero sigma yields
inf/NaN in the result.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence, Tuple

import numpy as np

from .distributions import chi2_sf, norm_quantile
from ..results.weighted_mean_result import WeightedMeanResult, MswdTestResult

log = logging.getLogger(__name__)


def _weighted_sums(x: Sequence[float], sigma: Sequence[float]) -> Tuple[np.ndarray, np.ndarray]:
    xv = np.asarray(x, dtype=np.float64).ravel()
    sv = np.asarray(sigma, dtype=np.float64).ravel()
    if xv.size != sv.size:
        raise ValueError(f"x and sigma length mismatch: {xv.size} != {sv.size}")
    if xv.size == 0:
        raise ValueError("At least one value is required")
    return xv, sv


def _mean_and_mswd(xv: np.ndarray, sv: np.ndarray) -> Tuple[float, float, np.float64]:
    """Return (mean, mswd, s2) for n > 1."""
    # numpy scalars keep 1/0 and 0/0 as inf/nan instead of raising
    with np.errstate(divide='ignore', invalid='ignore'):
        w = 1.0 / (sv * sv)
        s1 = np.sum(xv * w)
        s2 = np.sum(w)
        wx = s1 / s2
        s3 = np.sum((xv - wx) * (xv - wx) * w)
        mswd = s3 / np.float64(xv.size - 1)
    return float(wx), float(mswd), s2


def gwmean(x: Sequence[float], sigma: Sequence[float]) -> WeightedMeanResult:
    """Weighted mean with the uncertainty corrected by the MSWD.

    Args:
        x: values (length n >= 1)
        sigma: one-sigma uncertainties (length n, all > 0)

    Returns:
        WeightedMeanResult(mean, sigma, mswd)
    """
    xv, sv = _weighted_sums(x, sigma)
    if xv.size == 1:
        return WeightedMeanResult(float(xv[0]), float(sv[0]), 0.0)

    wx, mswd, s2 = _mean_and_mswd(xv, sv)
    with np.errstate(divide='ignore', invalid='ignore'):
        wsigma = float(np.sqrt(mswd / s2))
    log.debug("gwmean: n=%d mean=%g sigma=%g mswd=%g", xv.size, wx, wsigma, mswd)
    return WeightedMeanResult(wx, wsigma, mswd)


def awmean(x: Sequence[float], sigma: Sequence[float]) -> WeightedMeanResult:
    """Weighted mean with the plain inverse-variance uncertainty.

    The MSWD is still reported but does not scale the uncertainty.
    """
    xv, sv = _weighted_sums(x, sigma)
    if xv.size == 1:
        return WeightedMeanResult(float(xv[0]), float(sv[0]), 0.0)

    wx, mswd, s2 = _mean_and_mswd(xv, sv)
    with np.errstate(divide='ignore', invalid='ignore'):
        wsigma = float(np.sqrt(1.0 / s2))
    log.debug("awmean: n=%d mean=%g sigma=%g mswd=%g", xv.size, wx, wsigma, mswd)
    return WeightedMeanResult(wx, wsigma, mswd)


def mswd_test(mswd: float, n: int, confidence_level: float = 0.95) -> MswdTestResult:
    """Test whether an MSWD is consistent with the stated uncertainties.

    Acceptable range (Wendt & Carl, 1991):
        1 -/+ k * sqrt(2 / (n - 1)),  k = Phi^{-1}(1 - alpha/2)

    The p-value is the upper chi-square tail of mswd * (n - 1).

    Args:
        mswd: MSWD of n values
        n: number of values (>= 2)
        confidence_level: confidence level of the range

    Returns:
        MswdTestResult
    """
    if n < 2:
        raise ValueError("MSWD test needs at least two values")
    if not 0 < confidence_level < 1:
        raise ValueError("confidence_level must be between 0 and 1")

    dof = int(n) - 1
    k = norm_quantile(1.0 - (1.0 - confidence_level) / 2.0)
    half_width = k * math.sqrt(2.0 / dof)
    lower = max(0.0, 1.0 - half_width)
    upper = 1.0 + half_width

    mswd = float(mswd)
    p_value = chi2_sf(mswd * dof, dof) if math.isfinite(mswd) else None

    return MswdTestResult(
        mswd=mswd,
        degrees_of_freedom=dof,
        p_value=p_value,
        acceptable_lower=lower,
        acceptable_upper=upper,
        confidence_level=confidence_level,
        passed=bool(lower <= mswd <= upper),
    )


# Descriptive aliases
weighted_mean_mswd_corrected = gwmean
weighted_mean_uncorrected = awmean
