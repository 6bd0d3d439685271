"""Injectable random-number provider."""

from __future__ import annotations

from typing import Optional, Sequence, TypeVar

import numpy as np

T = TypeVar("T")


class RandomProvider:
    """Uniform draws backed by a numpy Generator.

    Anything exposing ``random``, ``integer`` and ``choice`` with the same
    semantics can stand in for this class.
    """

    def __init__(self, seed: Optional[int] = None, generator: Optional[np.random.Generator] = None):
        self._rng = generator if generator is not None else np.random.default_rng(seed)

    def random(self) -> float:
        """Uniform float in [0, 1)."""

        return float(self._rng.random())

    def integer(self, low: int, high: int) -> int:
        """Uniform integer in [low, high], both ends inclusive."""

        return int(self._rng.integers(low, high, endpoint=True))

    def choice(self, items: Sequence[T]) -> T:
        if not items:
            raise ValueError("cannot choose from an empty sequence")
        return items[self.integer(0, len(items) - 1)]
