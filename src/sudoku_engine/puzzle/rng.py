from __future__ import annotations

from collections.abc import MutableSequence
from typing import Final, TypeVar

import numpy as np

__all__ = [
    "NumpyRandom",
    "RandomSource",
    "SeededRandom",
    "hash_seed",
    "make_random",
]

T = TypeVar("T")

LCG_MULTIPLIER: Final[int] = 9301
LCG_INCREMENT: Final[int] = 49297
LCG_MODULUS: Final[int] = 233280


def hash_seed(seed: str) -> int:
    """Fold ``seed`` into a signed 32-bit integer with ``h = h * 31 + ord(ch)``."""
    h = 0
    for ch in seed:
        h = (h * 31 + ord(ch)) & 0xFFFFFFFF
    return h - (1 << 32) if h & 0x80000000 else h


class RandomSource:
    """Source of uniform draws used by the generator and solver.

    Subclasses provide :meth:`next_float` and :meth:`next_int`; shuffling is
    built on top of ``next_int`` so that every source shuffles the same way."""

    def next_float(self) -> float:
        raise NotImplementedError

    def next_int(self, low: int, high: int) -> int:
        """Integer in ``[low, high)``."""
        raise NotImplementedError

    def shuffle(self, items: MutableSequence[T]) -> None:
        """Fisher-Yates shuffle in place."""
        for i in range(len(items) - 1, 0, -1):
            j = self.next_int(0, i + 1)
            items[i], items[j] = items[j], items[i]


class SeededRandom(RandomSource):
    """Deterministic linear congruential generator keyed by a string.

    All arithmetic is on integers, so a given seed yields the same sequence
    on every platform."""

    def __init__(self, seed: str) -> None:
        self.seed = seed
        self.state = abs(hash_seed(seed))

    def _advance(self) -> int:
        self.state = (self.state * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
        return self.state

    def next_float(self) -> float:
        return self._advance() / LCG_MODULUS

    def next_int(self, low: int, high: int) -> int:
        if high <= low:
            msg = f"Empty range [{low}, {high})."
            raise ValueError(msg)
        return low + self._advance() * (high - low) // LCG_MODULUS


class NumpyRandom(RandomSource):
    def __init__(self, rng: np.random.Generator | int | None = None) -> None:
        if not isinstance(rng, np.random.Generator):
            rng = np.random.default_rng(rng)
        self.rng = rng

    def next_float(self) -> float:
        return float(self.rng.random())

    def next_int(self, low: int, high: int) -> int:
        if high <= low:
            msg = f"Empty range [{low}, {high})."
            raise ValueError(msg)
        return int(self.rng.integers(low, high))


def make_random(
    seed: str | None = None, rng: np.random.Generator | int | None = None
) -> RandomSource:
    """A :class:`SeededRandom` when ``seed`` is given, otherwise numpy-backed."""
    if seed is not None:
        return SeededRandom(seed)
    return NumpyRandom(rng)
