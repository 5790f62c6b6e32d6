"""Shared fixtures for the Powderbox test suite."""

from __future__ import annotations

import numpy as np
import pytest

from powderbox.simulation.config import RuleTable, SimulationConfig
from powderbox.simulation.random_source import RandomSource
from powderbox.world.grid import Grid


class PinnedRandom(RandomSource):
    """A random source with fixed answers.

    ``chance`` always returns ``hit``; ``rint`` always returns the lower
    bound (so blasts roll fire and jitter is zero); ``direction`` always
    returns ``side``.
    """

    def __init__(self, *, hit: bool, side: int = 1) -> None:
        super().__init__(generator=np.random.default_rng(0))
        self.hit = hit
        self.side = side

    def rint(self, lo: int, hi: int) -> int:
        return lo

    def chance(self, percent: int) -> bool:
        return self.hit

    def direction(self) -> int:
        return self.side


@pytest.fixture
def rng() -> RandomSource:
    """A deterministic random source for reproducible tests."""
    return RandomSource.from_seed(12345)


@pytest.fixture
def lucky() -> RandomSource:
    """Every percentage check succeeds."""
    return PinnedRandom(hit=True)


@pytest.fixture
def unlucky() -> RandomSource:
    """Every percentage check fails."""
    return PinnedRandom(hit=False)


@pytest.fixture
def rules() -> RuleTable:
    return RuleTable()


@pytest.fixture
def small_grid() -> Grid:
    """A small 8x8 grid for fast tests."""
    return Grid(width=8, height=8)


@pytest.fixture
def default_config() -> SimulationConfig:
    """Default simulation config (no YAML file needed)."""
    return SimulationConfig(grid_width=32, grid_height=24)
