"""chronostats.core.interpolation.linear

1-D piecewise-linear interpolation with linear extrapolation, plus a couple
of grid helpers.

``numpy.interp`` clamps to the end values outside the data range; here the
first and last segments are extended instead, so queries beyond the data
follow the end slopes.
"""

from __future__ import annotations

import numpy as np


def _as_knots(x, y):
    xk = np.asarray(x, dtype=float)
    yk = np.asarray(y, dtype=float)
    if xk.ndim != 1 or yk.ndim != 1:
        raise ValueError("x and y must be 1-D")
    if xk.shape != yk.shape:
        raise ValueError(f"x and y length mismatch: {xk.size} != {yk.size}")
    if xk.size < 2:
        raise ValueError("At least two knots are required for interpolation")
    return xk, yk


def linterp1(x, y, xq):
    """Interpolate ``y(x)`` at ``xq``; ``x`` must be ascending.

    Returns a float for scalar ``xq`` and an array of ``xq``'s shape otherwise.
    """
    xk, yk = _as_knots(x, y)
    q = np.asarray(xq, dtype=float)

    yq = np.interp(q, xk, yk)

    lo = q < xk[0]
    hi = q > xk[-1]
    if np.any(lo):
        slope = (yk[1] - yk[0]) / (xk[1] - xk[0])
        yq = np.where(lo, yk[0] + slope * (q - xk[0]), yq)
    if np.any(hi):
        slope = (yk[-1] - yk[-2]) / (xk[-1] - xk[-2])
        yq = np.where(hi, yk[-1] + slope * (q - xk[-1]), yq)

    if yq.ndim == 0:
        return float(yq)
    return yq


def linterp1s(x, y, xq):
    """Like ``linterp1`` but sorts the knots by ``x`` first."""
    xk, yk = _as_knots(x, y)
    order = np.argsort(xk, kind="stable")
    return linterp1(xk[order], yk[order], xq)


def linsp(lower: float, upper: float, n: int) -> np.ndarray:
    """``n`` evenly spaced points from ``lower`` to ``upper`` inclusive."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return np.linspace(lower, upper, int(n))


def bin_centers(edges) -> np.ndarray:
    """Midpoints of consecutive bin edges."""
    e = np.asarray(edges, dtype=float)
    return (e[:-1] + e[1:]) / 2
