"""Portable seeded pseudo-random source for exercise generation.

A plain linear congruential generator with explicit 32-bit state. The same
seed yields the same draw sequence on every platform, which keeps generated
exercise content reproducible for retries and tests.
"""
from __future__ import annotations

from typing import Sequence, TypeVar

__all__ = ["SeededRandom", "MULTIPLIER", "INCREMENT", "MODULUS"]

T = TypeVar("T")

MULTIPLIER = 1664525
INCREMENT = 1013904223
MODULUS = 2**32


class SeededRandom:
    def __init__(self, seed: int) -> None:
        self.state = int(seed) % MODULUS

    def next(self) -> float:
        """Advance the state and return a float in ``[0, 1)``."""
        self.state = (self.state * MULTIPLIER + INCREMENT) % MODULUS
        return self.state / MODULUS

    def random_int(self, lo: int, hi: int) -> int:
        """Uniform integer in the closed range ``[lo, hi]``."""
        return int(self.next() * (hi - lo + 1)) + lo

    def pick(self, values: Sequence[T]) -> T:
        return values[int(self.next() * len(values))]
