"""Rejection sampling from a tabulated density curve.

The curve ``dist`` (length m >= 2) is a piecewise-linear, possibly
unnormalised density over index space [0, m-1]. Draws are returned
normalised to [0, 1] (index / (m-1)).

Algorithm, per draw:
    1. rx ~ U(0, m-1)
    2. y  = linear interpolation of dist at rx
    3. ry ~ U(0, max(dist))
    4. accept rx / (m-1) if y > ry, otherwise retry

The maximum of the curve is the rejection envelope, so the expected number
of trials per draw is (m-1) * max(dist) / integral(dist). There is no trial
limit unless ``SamplerOptions.max_trials`` is set: a curve that is zero
almost everywhere never terminates. Check ``max(dist) > 0`` before sampling.

Candidates are proposed for all pending draws at once; a round ends when
each pending slot has had one proposal.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from ..models.options import SamplerOptions

log = logging.getLogger(__name__)


class SamplingError(RuntimeError):
    """Raised when a bounded sampler exhausts its trial budget."""


def _as_curve(dist) -> np.ndarray:
    curve = np.asarray(dist, dtype=float).ravel()
    if curve.size < 2:
        raise ValueError("Distribution curve needs at least two points")
    return curve


def _resolve_rng(rng: Optional[np.random.Generator], options: SamplerOptions) -> np.random.Generator:
    if rng is not None:
        return rng
    return options.make_rng()


def _rejection_fill(curve: np.ndarray, out: np.ndarray, rng: np.random.Generator, options: SamplerOptions) -> None:
    n = out.size
    if n == 0:
        return

    dist_ymax = float(np.max(curve))
    dist_xmax = float(curve.size - 1)
    last_segment = curve.size - 2

    if not dist_ymax > 0:
        log.warning(
            "Distribution maximum is %r; rejection sampling cannot accept any draw%s",
            dist_ymax,
            "" if options.bounded else " and will not terminate",
        )

    pending = np.arange(n)
    rounds = 0
    while pending.size:
        if options.max_trials is not None and rounds >= options.max_trials:
            raise SamplingError(
                f"{pending.size} of {n} draws still pending after {rounds} trials"
            )
        rounds += 1

        # Pick random x values
        rx = rng.random(pending.size) * dist_xmax
        # Interpolate the distribution at them
        f = np.minimum(np.floor(rx).astype(np.intp), last_segment)
        frac = rx - f
        y = curve[f + 1] * frac + curve[f] * (1 - frac)
        # Accept where the curve lies above a uniform height
        ry = rng.random(pending.size) * dist_ymax
        accepted = y > ry

        out.flat[pending[accepted]] = rx[accepted] / dist_xmax
        pending = pending[~accepted]

    log.debug("Drew %d values from a %d-point curve in %d rounds", n, curve.size, rounds)


def draw_from_distribution(
    dist,
    n: int,
    rng: Optional[np.random.Generator] = None,
    options: Optional[SamplerOptions] = None,
) -> np.ndarray:
    """Draw ``n`` random numbers from the distribution tabulated in ``dist``.

    Args:
        dist: density curve (length m >= 2), need not be normalised
        n: number of draws
        rng: random generator; created from ``options.seed`` if None
        options: sampler options (defaults if None)

    Returns:
        array of n values in [0, 1]

    Raises:
        SamplingError: if ``options.max_trials`` is set and exhausted
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    options = options or SamplerOptions.default()
    curve = _as_curve(dist)

    x = np.empty(int(n), dtype=float)
    _rejection_fill(curve, x, _resolve_rng(rng, options), options)
    return x


def fill_from_distribution(
    dist,
    x: np.ndarray,
    rng: Optional[np.random.Generator] = None,
    options: Optional[SamplerOptions] = None,
) -> np.ndarray:
    """Fill the existing array ``x`` in place with draws from ``dist``.

    Every element of ``x`` (any shape) is overwritten. Returns ``x``.
    """
    if not isinstance(x, np.ndarray) or not np.issubdtype(x.dtype, np.floating):
        raise ValueError("x must be a floating-point numpy array")
    options = options or SamplerOptions.default()
    curve = _as_curve(dist)

    _rejection_fill(curve, x, _resolve_rng(rng, options), options)
    return x
