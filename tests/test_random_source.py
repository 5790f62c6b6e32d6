"""Tests for powderbox.simulation.random_source."""

from powderbox.simulation.random_source import RandomSource


def test_rint_is_inclusive(rng: RandomSource) -> None:
    draws = {rng.rint(3, 5) for _ in range(500)}
    assert draws == {3, 4, 5}


def test_chance_extremes(rng: RandomSource) -> None:
    assert not any(rng.chance(0) for _ in range(200))
    assert all(rng.chance(100) for _ in range(200))


def test_chance_rate_is_plausible(rng: RandomSource) -> None:
    hits = sum(rng.chance(25) for _ in range(4000))
    assert 800 < hits < 1200


def test_direction(rng: RandomSource) -> None:
    assert {rng.direction() for _ in range(200)} == {-1, 1}


def test_same_seed_same_stream() -> None:
    a = RandomSource.from_seed(7)
    b = RandomSource.from_seed(7)
    assert [a.rint(0, 1000) for _ in range(50)] == [b.rint(0, 1000) for _ in range(50)]
