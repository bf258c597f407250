"""Interpolation helpers (index-space and 1-D linear)."""

from .indexing import linterp_at_index, find_closest, find_closest_below, find_closest_above
from .linear import linterp1, linterp1s, linsp, bin_centers

# Alias matching the operation name used in the documentation
interpolate_at_index = linterp_at_index

__all__ = [
    "linterp_at_index",
    "interpolate_at_index",
    "find_closest",
    "find_closest_below",
    "find_closest_above",
    "linterp1",
    "linterp1s",
    "linsp",
    "bin_centers",
]
