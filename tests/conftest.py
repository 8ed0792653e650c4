"""Shared fixtures for the Land15 test suite."""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from land15.common.random import GeneratorRandom
from land15.simulation.config import Land15Config


class FixedSequenceRandom:
    """A ``RandomSource`` that cycles through a fixed list of unit values."""

    def __init__(self, values: Sequence[float]) -> None:
        self.values = list(values)
        self.calls = 0

    def reseed(self, seed: int) -> None:
        self.calls = 0

    def next_unit(self) -> float:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value

    def next_u64(self) -> int:
        return int(self.next_unit() * (2**64 - 1))

    def next_range(self, lo: float, hi: float) -> float:
        return lo + self.next_unit() * (hi - lo)


@pytest.fixture
def rng() -> GeneratorRandom:
    """A deterministic random source for reproducible tests."""
    return GeneratorRandom(seed=12345)


@pytest.fixture
def default_config() -> Land15Config:
    """Default configuration (no YAML file needed)."""
    return Land15Config()


@pytest.fixture
def small_config() -> Land15Config:
    """A 16x12 island with a short warm-up for fast tests."""
    return Land15Config(
        w=16,
        h=12,
        seed=7,
        warmup_days=20,
        height_relax_iterations=50,
    )


@pytest.fixture
def fixed_rng() -> type[FixedSequenceRandom]:
    """Factory for fixed-sequence random sources: ``fixed_rng([0.5])``."""
    return FixedSequenceRandom
