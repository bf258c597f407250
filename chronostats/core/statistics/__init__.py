"""Statistics utilities for chronostats.

This package contains small, dependency-light statistical helpers:
- Weighted means with MSWD and the MSWD goodness-of-fit test
- Distribution functions (normal, chi-square tail, bilinear exponential)
- NaN-aware reductions

No SciPy dependency is required.
"""

from .distributions import (
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
from .weighted_mean import (
    gwmean,
    awmean,
    mswd_test,
    weighted_mean_mswd_corrected,
    weighted_mean_uncorrected,
)
from .nanstats import nanmean, nanstd, nanmedian, nanminimum, nanmaximum, nanrange, pctile

__all__ = [
    "normpdf",
    "normpdf_ll",
    "normcdf",
    "norm_quantile",
    "norm_width",
    "chi2_sf",
    "bilinear_exponential",
    "bilinear_exponential_ll",
    "interpolate_ll",
    "gwmean",
    "awmean",
    "mswd_test",
    "weighted_mean_mswd_corrected",
    "weighted_mean_uncorrected",
    "nanmean",
    "nanstd",
    "nanmedian",
    "nanminimum",
    "nanmaximum",
    "nanrange",
    "pctile",
]
