"""
Result classes for weighted-mean estimation.

``WeightedMeanResult`` is a named 3-tuple so callers can unpack
``mean, sigma, mswd = gwmean(x, sigma)``. ``MswdTestResult`` carries the
goodness-of-fit diagnostics for an MSWD.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, NamedTuple, Optional


def _json_safe_value(value: Any) -> Any:
    """Convert non-JSON-safe floats (nan/inf) to None."""
    if value is None:
        return None
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
    return value


class WeightedMeanResult(NamedTuple):
    """
    Inverse-variance weighted mean.

    Attributes:
        mean: weighted mean
        sigma: one-sigma uncertainty of the mean
        mswd: mean square of weighted deviates (0 for a single value)
    """

    mean: float
    sigma: float
    mswd: float

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "mean": _json_safe_value(self.mean),
            "sigma": _json_safe_value(self.sigma),
            "mswd": _json_safe_value(self.mswd),
        }


@dataclass
class MswdTestResult:
    """
    Goodness-of-fit test of an MSWD.

    The MSWD times its degrees of freedom is chi-square distributed when the
    scatter is explained by the stated uncertainties alone.

    Attributes:
        mswd: tested MSWD
        degrees_of_freedom: n - 1
        p_value: upper-tail chi-square probability of mswd * dof
        acceptable_lower: lower limit of the acceptable MSWD range
        acceptable_upper: upper limit of the acceptable MSWD range
        confidence_level: confidence level of the range
        passed: True if the MSWD lies within the acceptable range
    """

    mswd: float
    degrees_of_freedom: int
    p_value: Optional[float]
    acceptable_lower: float
    acceptable_upper: float
    confidence_level: float
    passed: bool

    @property
    def overdispersed(self) -> bool:
        """Scatter exceeds what the stated uncertainties explain."""
        return self.mswd > self.acceptable_upper

    @property
    def underdispersed(self) -> bool:
        """Scatter is smaller than the stated uncertainties suggest."""
        return self.mswd < self.acceptable_lower

    def to_dict(self) -> Dict[str, Any]:
        """Serialize test result to dictionary."""
        return {
            "test_name": "mswd",
            "mswd": _json_safe_value(self.mswd),
            "degrees_of_freedom": self.degrees_of_freedom,
            "p_value": _json_safe_value(self.p_value),
            "acceptable_lower": _json_safe_value(self.acceptable_lower),
            "acceptable_upper": _json_safe_value(self.acceptable_upper),
            "confidence_level": self.confidence_level,
            "passed": self.passed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'MswdTestResult':
        """Create MswdTestResult from dictionary."""
        return cls(
            mswd=data["mswd"],
            degrees_of_freedom=data["degrees_of_freedom"],
            p_value=data.get("p_value"),
            acceptable_lower=data["acceptable_lower"],
            acceptable_upper=data["acceptable_upper"],
            confidence_level=data["confidence_level"],
            passed=data["passed"],
        )
