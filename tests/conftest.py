"""Shared fixtures for TermiCrawler tests."""

from __future__ import annotations

import pytest


class FixedRNG:
    """Stand-in for GameRNG that always rolls the same float."""

    def __init__(self, value: float) -> None:
        self.value = value
        self.calls = 0

    def random_float(self) -> float:
        self.calls += 1
        return self.value


@pytest.fixture
def no_crit_rng() -> FixedRNG:
    """Rolls 0.99, above any crit rate the tests set up."""
    return FixedRNG(0.99)


@pytest.fixture
def always_crit_rng() -> FixedRNG:
    """Rolls 0.0, below the base crit rate."""
    return FixedRNG(0.0)
