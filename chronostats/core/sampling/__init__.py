"""Monte-Carlo sampling from tabulated distributions."""

from .rejection import draw_from_distribution, fill_from_distribution, SamplingError

__all__ = [
    "draw_from_distribution",
    "fill_from_distribution",
    "SamplingError",
]
