"""Central randomness source supporting optional seeding.

Usage:
    rng = RandomSource(seed=123)  # deterministic
    face = rng.randint(1, 6)

The Game owns one instance (game.rng); the progression engine and the dice
animation draw from it so test suites can reproduce sequences by supplying a seed.
"""

from __future__ import annotations
import random


class RandomSource:
    def __init__(self, seed: int | None = None):
        self._seed = seed
        self._rng = random.Random(seed) if seed is not None else random.Random()

    @property
    def seed(self) -> int | None:
        return self._seed

    def reseed(self, seed: int | None):
        """Reseed RNG (None -> fresh non-deterministic)."""
        self._seed = seed
        self._rng = random.Random(seed) if seed is not None else random.Random()

    def randint(self, a: int, b: int) -> int:
        return self._rng.randint(a, b)

