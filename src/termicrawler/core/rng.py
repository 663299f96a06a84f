"""Seeded random number generators for TermiCrawler.

Two generators live here:

- :class:`GameRNG` wraps Python's ``random.Random`` and is used wherever the
  game needs ordinary reproducible randomness (crit rolls, encounters, weak
  letters, marker placement).  Sub-systems should use a *forked* RNG so that
  consuming values in one system does not perturb another.
- :class:`SineRNG` is the counter-based hash used by the dungeon generator.
  Every draw advances a single counter, so the sequence is fully determined
  by the seed and the order of draws.
"""

from __future__ import annotations

import hashlib
import math
import random
from typing import Sequence, TypeVar

T = TypeVar("T")


class GameRNG:
    """Reproducible randomness for everything outside the dungeon generator.

    A session owns one root instance; battles, encounters, markers and play
    agents each draw from a named :meth:`fork` of it.
    """

    def __init__(self, seed: int) -> None:
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def seed(self) -> int:
        return self._seed

    def random_int(self, low: int, high: int) -> int:
        """Inclusive on both ends."""
        return self._rng.randint(low, high)

    def random_float(self) -> float:
        return self._rng.random()

    def random_choice(self, seq: Sequence[T]) -> T:
        return self._rng.choice(seq)

    def random_sample(self, seq: Sequence[T], k: int) -> list[T]:
        """*k* distinct picks from *seq*, in draw order."""
        return self._rng.sample(list(seq), k)

    def fork(self, name: str) -> GameRNG:
        """Derive a child stream keyed by ``(seed, name)``.

        The child seed is the first 8 bytes of ``sha256("{seed}:{name}")``,
        so ``fork("floor:3")`` is the same stream on every run with this seed
        and does not depend on how much the parent has been used.
        """
        digest = hashlib.sha256(f"{self._seed}:{name}".encode()).digest()
        return GameRNG(int.from_bytes(digest[:8], "big"))

    def __repr__(self) -> str:
        return f"GameRNG(seed={self._seed})"


class SineRNG:
    """Counter-based pseudo-random sequence seeded by an integer.

    Each draw hashes the current counter with ``sin`` and then increments
    it, so two instances built from the same seed yield identical sequences
    as long as they are asked for values in the same order.
    """

    def __init__(self, seed: int) -> None:
        self._seed = seed
        self._counter = seed

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def counter(self) -> int:
        """The value the next draw will hash."""
        return self._counter

    def random_int(self, low: int, high: int) -> int:
        """Return an integer in ``[low, high]`` (both inclusive)."""
        x = math.sin(self._counter) * 10000
        self._counter += 1
        frac = x - math.floor(x)
        return math.floor(frac * (high - low + 1)) + low

    def __repr__(self) -> str:
        return f"SineRNG(seed={self._seed}, counter={self._counter})"
