"""
Result data structures.
"""

from .weighted_mean_result import WeightedMeanResult, MswdTestResult

__all__ = [
    "WeightedMeanResult",
    "MswdTestResult",
]
