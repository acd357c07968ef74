"""Random Source

Uniform draws shared by all three estimators. Always passed in
explicitly so a seed (or a scripted test double) fully controls a run.
"""

import random
from typing import Optional


class RandomSource:
    """Pseudo-random draws backed by a private random.Random instance."""

    def __init__(self, seed: Optional[int] = None):
        """Initialize the source.

        Args:
            seed: Seed for reproducible sequences, None for OS entropy
        """
        self.seed = seed
        self._rng = random.Random(seed)

    def reseed(self, seed: Optional[int] = None):
        """Restart the sequence from a new seed."""
        self.seed = seed
        self._rng.seed(seed)

    def next_unit(self) -> float:
        """Uniform real in [0, 1)."""
        return self._rng.random()

    def next_symmetric(self) -> float:
        """Uniform real in [-1, 1]."""
        return self._rng.uniform(-1.0, 1.0)

    def next_uniform(self, low: float, high: float) -> float:
        """Uniform real in [low, high]."""
        return self._rng.uniform(low, high)

    def next_bool(self) -> bool:
        """Fair coin flip."""
        return self._rng.random() < 0.5

    def __repr__(self) -> str:
        return f"RandomSource(seed={self.seed!r})"
