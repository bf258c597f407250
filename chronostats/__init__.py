"""
chronostats - numerical utilities for geochronological data reduction

Weighted means with MSWD, NaN-aware reductions, interpolation, and
Monte-Carlo sampling from tabulated or parametric distributions.

Conventions:
- Arrays are float64 numpy arrays; scalar inputs give float outputs
- Indices into tabulated curves are 0-based
- Uncertainties are one-sigma, in the units of the values
- Invalid numeric preconditions (zero sigma, zero width) propagate as NaN/inf
- Random draws take an explicit numpy Generator; nothing uses global state
"""

__version__ = "1.0.0"

from .core.models import BilinearParams, SamplerOptions
from .core.results import WeightedMeanResult, MswdTestResult
from .core.interpolation import linterp_at_index, interpolate_at_index
from .core.statistics import (
    gwmean,
    awmean,
    mswd_test,
    weighted_mean_mswd_corrected,
    weighted_mean_uncorrected,
    bilinear_exponential,
    bilinear_exponential_ll,
    interpolate_ll,
)
from .core.sampling import draw_from_distribution, fill_from_distribution, SamplingError

__all__ = [
    # Version
    "__version__",

    # Models
    "BilinearParams",
    "SamplerOptions",

    # Results
    "WeightedMeanResult",
    "MswdTestResult",

    # Core operations
    "linterp_at_index",
    "interpolate_at_index",
    "gwmean",
    "awmean",
    "mswd_test",
    "weighted_mean_mswd_corrected",
    "weighted_mean_uncorrected",
    "bilinear_exponential",
    "bilinear_exponential_ll",
    "interpolate_ll",
    "draw_from_distribution",
    "fill_from_distribution",
    "SamplingError",
]
