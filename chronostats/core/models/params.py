"""
Parameters of the bilinear-exponential distribution.

Conventions:
- Order is always (scale, mode, width, sharpness, skew)
- scale is the pre-exponential factor; log(scale) enters the log form
- width and skew must be non-zero; this is not checked, zero values give
  NaN/inf in the evaluated density
"""

from dataclasses import dataclass
from typing import Dict, Any, Sequence

import numpy as np

PARAM_NAMES = ("scale", "mode", "width", "sharpness", "skew")


@dataclass(frozen=True)
class BilinearParams:
    """
    One bilinear-exponential parameter set.

    Attributes:
        scale: pre-exponential (normalisation) constant
        mode: location of the peak
        width: spread, in the units of x
        sharpness: steepness of both tails
        skew: asymmetry; 1 is symmetric, >1 steepens the left tail
    """

    scale: float
    mode: float
    width: float
    sharpness: float
    skew: float

    def __post_init__(self):
        for name in PARAM_NAMES:
            object.__setattr__(self, name, float(getattr(self, name)))

    def as_array(self) -> np.ndarray:
        """Return the parameters as a length-5 float array."""
        return np.array([getattr(self, name) for name in PARAM_NAMES], dtype=float)

    def __iter__(self):
        return iter(tuple(getattr(self, name) for name in PARAM_NAMES))

    def to_dict(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in PARAM_NAMES}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BilinearParams':
        return cls(**{name: data[name] for name in PARAM_NAMES})

    @classmethod
    def from_sequence(cls, p: Sequence[float]) -> 'BilinearParams':
        """Build from a length-5 sequence in canonical order."""
        if len(p) != len(PARAM_NAMES):
            raise ValueError(f"Expected {len(PARAM_NAMES)} parameters, got {len(p)}")
        return cls(*p)
