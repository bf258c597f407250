"""
Core module for chronostats.

Pure numerical routines with no I/O: weighted means, index interpolation,
rejection sampling and the bilinear-exponential distribution.
"""

from .models import BilinearParams, SamplerOptions

from .results import WeightedMeanResult, MswdTestResult

from .interpolation import (
    linterp_at_index,
    interpolate_at_index,
    find_closest,
    find_closest_below,
    find_closest_above,
    linterp1,
    linterp1s,
    linsp,
    bin_centers,
)

from .statistics import (
    gwmean,
    awmean,
    mswd_test,
    weighted_mean_mswd_corrected,
    weighted_mean_uncorrected,
    normpdf,
    normpdf_ll,
    normcdf,
    norm_quantile,
    norm_width,
    bilinear_exponential,
    bilinear_exponential_ll,
    interpolate_ll,
    nanmean,
    nanstd,
    nanmedian,
    nanminimum,
    nanmaximum,
    nanrange,
    pctile,
)

from .sampling import draw_from_distribution, fill_from_distribution, SamplingError

__all__ = [
    # Models
    "BilinearParams",
    "SamplerOptions",

    # Results
    "WeightedMeanResult",
    "MswdTestResult",

    # Interpolation
    "linterp_at_index",
    "interpolate_at_index",
    "find_closest",
    "find_closest_below",
    "find_closest_above",
    "linterp1",
    "linterp1s",
    "linsp",
    "bin_centers",

    # Weighted means
    "gwmean",
    "awmean",
    "mswd_test",
    "weighted_mean_mswd_corrected",
    "weighted_mean_uncorrected",

    # Distributions
    "normpdf",
    "normpdf_ll",
    "normcdf",
    "norm_quantile",
    "norm_width",
    "bilinear_exponential",
    "bilinear_exponential_ll",
    "interpolate_ll",

    # NaN-aware reductions
    "nanmean",
    "nanstd",
    "nanmedian",
    "nanminimum",
    "nanmaximum",
    "nanrange",
    "pctile",

    # Sampling
    "draw_from_distribution",
    "fill_from_distribution",
    "SamplingError",
]
