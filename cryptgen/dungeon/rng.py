"""Deterministic random source and seed derivation.

Every stochastic decision made during generation goes through a single
``SeededRandom`` owned by the generator, so no module-level ``random`` state
is ever consulted. Call order is part of the contract: two runs that seed the
same value and issue the same calls see the same numbers.
"""
from __future__ import annotations

import hashlib
import random
import time
from typing import Union

SEED_MASK = 0xFFFFFFFF

SeedLike = Union[int, str, None]


class SeededRandom:
    __slots__ = ("_rng", "_seed")

    def __init__(self, seed: int = 0):
        self._rng = random.Random()
        self._seed = 0
        self.seed(seed)

    @property
    def current_seed(self) -> int:
        return self._seed

    def seed(self, value: int) -> None:
        """Reset internal state so the next draws replay from the start."""
        self._seed = int(value) & SEED_MASK
        self._rng.seed(self._seed)

    def next_int(self, low: int, high: int) -> int:
        """Uniform int in ``[low, high)``; a degenerate range returns ``low``."""
        if high <= low:
            return low
        return self._rng.randrange(low, high)

    def next_float01(self) -> float:
        return self._rng.random()

    def next_bool(self) -> bool:
        return self._rng.random() < 0.5


def seed_from_string(text: str) -> int:
    """Hash arbitrary text into an unsigned 32-bit seed (stable across processes)."""
    digest = hashlib.sha256(text.encode("utf-8")).digest()
    return int.from_bytes(digest[:4], "big")


def time_seed() -> int:
    return int(time.time() * 1000) & SEED_MASK


def resolve_seed(value: SeedLike = None) -> int:
    """Turn a caller supplied seed into the integer the generator uses.

    ints are masked to 32 bits, non-empty strings are hashed, anything else
    (None, empty string) falls back to the wall clock.
    """
    if isinstance(value, bool):
        value = int(value)
    if isinstance(value, int):
        return value & SEED_MASK
    if isinstance(value, str) and len(value) > 0:
        return seed_from_string(value)
    return time_seed()


__all__ = ["SeededRandom", "seed_from_string", "time_seed", "resolve_seed", "SEED_MASK"]
