"""chronostats.core.statistics.nanstats

Reductions that skip missing values (NaN).

Each function reduces the whole array when ``axis`` is None, or along the
given axis otherwise. An all-NaN slice yields NaN for that slice.
"""

from __future__ import annotations

import warnings
from typing import Optional

import numpy as np


def _reduce(func, A, axis: Optional[int], **kwargs):
    a = np.asarray(A, dtype=float)
    with warnings.catch_warnings():
        # All-NaN slices return NaN; numpy warns about them
        warnings.simplefilter("ignore", category=RuntimeWarning)
        out = func(a, axis=axis, **kwargs)
    return out if np.ndim(out) else float(out)


def nanmean(A, axis: Optional[int] = None):
    """Mean ignoring NaNs."""
    return _reduce(np.nanmean, A, axis)


def nanstd(A, axis: Optional[int] = None):
    """Sample standard deviation (ddof=1) ignoring NaNs."""
    return _reduce(np.nanstd, A, axis, ddof=1)


def nanmedian(A, axis: Optional[int] = None):
    """Median ignoring NaNs."""
    return _reduce(np.nanmedian, A, axis)


def _nan_extreme(func, A, axis: Optional[int]):
    a = np.asarray(A, dtype=float)
    if a.size == 0:
        raise ValueError("Cannot reduce an empty array")
    return _reduce(func, a, axis)


def nanminimum(A, axis: Optional[int] = None):
    """Minimum ignoring NaNs."""
    return _nan_extreme(np.nanmin, A, axis)


def nanmaximum(A, axis: Optional[int] = None):
    """Maximum ignoring NaNs."""
    return _nan_extreme(np.nanmax, A, axis)


def nanrange(A, axis: Optional[int] = None):
    """Range (max - min) ignoring NaNs."""
    return _nan_extreme(lambda a, axis: np.nanmax(a, axis=axis) - np.nanmin(a, axis=axis), A, axis)


def pctile(A, p: float, axis: Optional[int] = None):
    """Percentile ``p`` (0..100) ignoring NaNs.

    Args:
        A: array
        p: percentile, or sequence of percentiles, in [0, 100]
        axis: reduction axis, None for the whole array
    """
    q = np.asarray(p, dtype=float)
    if np.any((q < 0) | (q > 100)):
        raise ValueError("p must be in [0, 100]")
    return _reduce(np.nanpercentile, A, axis, q=q)
