"""chronostats.core.interpolation.indexing

Index-space helpers.

A tabulated curve ``y`` of length m is treated as a piecewise-linear function
of its (0-based) index. ``linterp_at_index`` evaluates it at a fractional
index; queries that are not strictly inside ``(0, m-1)`` return a caller
supplied sentinel instead of raising.

The nearest-index lookups return 0-based positions into ``target``.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np


def linterp_at_index(y: Sequence[float], i: float, outboundsval: float = float('nan')) -> float:
    """Linearly interpolate ``y`` at fractional index ``i``.

    Args:
        y: tabulated curve (length m)
        i: real-valued 0-based index
        outboundsval: returned verbatim unless 0 < i < m-1

    Returns:
        f*y[floor(i)+1] + (1-f)*y[floor(i)], with f = i - floor(i)
    """
    # NaN compares False on both sides and falls through to the sentinel
    if 0 < i < len(y) - 1:
        i_below = math.floor(i)
        i_above = i_below + 1
        f = i - i_below
        return float(f * y[i_above] + (1 - f) * y[i_below])
    return float(outboundsval)


def find_closest(source, target) -> np.ndarray:
    """Index of the closest value in ``target`` for each value in ``source``.

    Ties resolve to the lower index.
    """
    src = np.atleast_1d(np.asarray(source, dtype=float))
    tgt = np.asarray(target, dtype=float)
    if tgt.size == 0:
        raise ValueError("target must not be empty")

    index = np.empty(src.shape, dtype=np.int64)
    for k, s in enumerate(src.flat):
        index.flat[k] = int(np.argmin((tgt - s) ** 2))
    return index


def _find_closest_where(source, target, below: bool) -> np.ndarray:
    src = np.atleast_1d(np.asarray(source, dtype=float))
    tgt = np.asarray(target, dtype=float)

    index = np.empty(src.shape, dtype=np.int64)
    for k, s in enumerate(src.flat):
        candidates = np.flatnonzero(tgt < s) if below else np.flatnonzero(tgt > s)
        if candidates.size == 0:
            side = "below" if below else "above"
            raise ValueError(f"No target value {side} {s!r}")
        nearest = int(np.argmin((tgt[candidates] - s) ** 2))
        index.flat[k] = candidates[nearest]
    return index


def find_closest_below(source, target) -> np.ndarray:
    """Index of the closest ``target`` value strictly below each ``source`` value.

    Raises:
        ValueError: if some source value has no target below it
    """
    return _find_closest_where(source, target, below=True)


def find_closest_above(source, target) -> np.ndarray:
    """Index of the closest ``target`` value strictly above each ``source`` value.

    Raises:
        ValueError: if some source value has no target above it
    """
    return _find_closest_where(source, target, below=False)
