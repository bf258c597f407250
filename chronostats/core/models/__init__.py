"""
Data models for chronostats.

- BilinearParams: the five parameters of a bilinear-exponential distribution
- SamplerOptions: configuration for the rejection sampler
"""

from .params import BilinearParams, PARAM_NAMES
from .options import SamplerOptions

__all__ = [
    "BilinearParams",
    "PARAM_NAMES",
    "SamplerOptions",
]
