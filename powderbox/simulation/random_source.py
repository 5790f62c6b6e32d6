"""RandomSource — the sampling primitives every probabilistic rule uses.

Wraps a NumPy ``Generator`` so that a whole run is reproducible from a
single seed.  Rules only ever ask three questions: an inclusive integer
range, a percentage chance, and a left/right coin flip.  Tests swap in
subclasses that pin those answers.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.random import Generator


@dataclass
class RandomSource:
    """Integer-range and percentage-chance sampling.

    Attributes:
        generator: Underlying seeded NumPy generator.
    """

    generator: Generator

    @classmethod
    def from_seed(cls, seed: int | None = None) -> RandomSource:
        """Build a source from a seed (None draws OS entropy)."""
        return cls(generator=np.random.default_rng(seed))

    def rint(self, lo: int, hi: int) -> int:
        """Return an integer uniformly drawn from ``[lo, hi]`` inclusive."""
        return int(self.generator.integers(lo, hi + 1))

    def chance(self, percent: int) -> bool:
        """Return True with probability ``percent``/100.

        Rolls 1..100 and succeeds when the roll is at most ``percent``,
        so 0 never fires and 100 always does.
        """
        return self.rint(1, 100) <= percent

    def direction(self) -> int:
        """Return -1 or +1 with equal probability."""
        return 1 if self.rint(0, 1) == 1 else -1
