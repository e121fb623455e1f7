"""
Random sources for the score perturbation.

Scores get a small random bump so repeated runs on the same profile do not
always present the exact same ordering. The source is injected into the
scoring engine so tests can pin it.
"""
from __future__ import annotations

import random
from itertools import cycle
from typing import Iterable, Optional, Protocol


class RandomSource(Protocol):
    def next(self) -> float:
        """Return a float in [0, 1)."""
        ...


class SeededRandomSource:
    """PRNG-backed source; ``seed=None`` seeds from the OS."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def next(self) -> float:
        return self._rng.random()


class FixedRandomSource:
    """Cycles through a fixed sequence of values."""

    def __init__(self, values: Iterable[float]):
        values = list(values)
        if not values:
            raise ValueError("FixedRandomSource needs at least one value")
        if any(not 0.0 <= v < 1.0 for v in values):
            raise ValueError("FixedRandomSource values must lie in [0, 1)")
        self._values = cycle(values)

    def next(self) -> float:
        return next(self._values)


class ZeroRandomSource:
    """Disables the perturbation."""

    def next(self) -> float:
        return 0.0
