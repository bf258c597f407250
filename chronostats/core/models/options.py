"""
Sampler options.

This module defines configuration for the rejection sampler: an optional
trial cap and an optional seed for the random generator.
"""

from dataclasses import dataclass
from typing import Optional, Dict, Any

import numpy as np


@dataclass
class SamplerOptions:
    """
    Configuration options for drawing from a tabulated distribution.

    Attributes:
        max_trials: Maximum number of proposal rounds per call, None for no
            limit (default: None). Each round proposes one candidate for
            every draw still pending.
        seed: Seed for a fresh numpy Generator when the caller does not
            pass one (default: None, i.e. OS entropy)
    """

    max_trials: Optional[int] = None
    seed: Optional[int] = None

    def __post_init__(self):
        """Validate options after initialization."""
        if self.max_trials is not None:
            if int(self.max_trials) != self.max_trials or self.max_trials < 1:
                raise ValueError("max_trials must be a positive integer or None")
            self.max_trials = int(self.max_trials)

        if self.seed is not None and self.seed < 0:
            raise ValueError("seed must be non-negative")

    @property
    def bounded(self) -> bool:
        """True when a trial cap is set."""
        return self.max_trials is not None

    def make_rng(self) -> np.random.Generator:
        """Create a generator seeded from these options."""
        return np.random.default_rng(self.seed)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize options to dictionary."""
        return {
            "max_trials": self.max_trials,
            "seed": self.seed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SamplerOptions':
        """Create SamplerOptions from a dictionary."""
        return cls(
            max_trials=data.get("max_trials"),
            seed=data.get("seed"),
        )

    @classmethod
    def default(cls) -> 'SamplerOptions':
        """Create options with default values (unbounded, unseeded)."""
        return cls()

    def __repr__(self) -> str:
        return f"SamplerOptions(max_trials={self.max_trials}, seed={self.seed})"
