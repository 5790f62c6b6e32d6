"""Tests for powderbox.physics.agents — humans and zombies."""

import pytest

from powderbox.materials.material import Material
from powderbox.physics.update import advance
from powderbox.simulation.config import RuleTable
from powderbox.simulation.random_source import RandomSource
from powderbox.world.grid import Grid

M = Material


@pytest.fixture
def floor() -> Grid:
    """A 7x2 grid whose bottom row is wall."""
    grid = Grid(width=7, height=2)
    for x in range(7):
        grid.set(x, 1, M.WALL)
    return grid


class TestHazards:
    """Agents die next to hazards."""

    def test_human_turns_to_ash_near_fire(
        self,
        floor: Grid,
        unlucky: RandomSource,
        rules: RuleTable,
    ) -> None:
        floor.set(0, 0, M.HUMAN)
        floor.set(1, 0, M.FIRE, 20)
        advance(floor, unlucky, rules)
        assert floor.kind_at(0, 0) is M.ASH

    def test_zombie_bursts_into_flame(
        self,
        floor: Grid,
        unlucky: RandomSource,
        rules: RuleTable,
    ) -> None:
        floor.set(0, 0, M.ZOMBIE)
        floor.set(1, 0, M.TOXIC_GAS, 20)
        advance(floor, unlucky, rules)
        assert floor.kind_at(0, 0) is M.FIRE
        assert floor.cell_at(0, 0).life == rules.zombie_death_life

    def test_live_water_is_deadly(
        self,
        floor: Grid,
        unlucky: RandomSource,
        rules: RuleTable,
    ) -> None:
        floor.set(0, 0, M.HUMAN)
        floor.set(1, 0, M.WATER, 5)
        advance(floor, unlucky, rules)
        assert floor.kind_at(0, 0) is M.ASH

    def test_live_water_electrocutes(
        self,
        floor: Grid,
        unlucky: RandomSource,
        rules: RuleTable,
    ) -> None:
        floor.set(0, 0, M.WATER, 5)
        floor.set(1, 0, M.HUMAN)
        advance(floor, unlucky, rules)
        assert floor.kind_at(1, 0) is M.ASH

    def test_still_water_is_safe(
        self,
        floor: Grid,
        unlucky: RandomSource,
        rules: RuleTable,
    ) -> None:
        floor.set(0, 0, M.HUMAN)
        floor.set(1, 0, M.WATER)
        advance(floor, unlucky, rules)
        assert floor.count(M.HUMAN) == 1


class TestMovement:
    """Falling, fleeing, chasing and climbing."""

    def test_falls_before_anything_else(
        self,
        rng: RandomSource,
        rules: RuleTable,
    ) -> None:
        grid = Grid(width=1, height=3)
        grid.set(0, 0, M.HUMAN)
        advance(grid, rng, rules)
        assert grid.kind_at(0, 1) is M.HUMAN
        assert grid.cell_at(0, 1).life == 1

    def test_human_flees_and_zombie_chases(
        self,
        floor: Grid,
        unlucky: RandomSource,
        rules: RuleTable,
    ) -> None:
        floor.set(2, 0, M.HUMAN)
        floor.set(5, 0, M.ZOMBIE)
        advance(floor, unlucky, rules)
        assert floor.kind_at(1, 0) is M.HUMAN
        assert floor.kind_at(4, 0) is M.ZOMBIE

    def test_wanders_with_nobody_in_sight(
        self,
        floor: Grid,
        unlucky: RandomSource,
        rules: RuleTable,
    ) -> None:
        floor.set(3, 0, M.HUMAN)
        advance(floor, unlucky, rules)
        # the pinned source always flips toward +x
        assert floor.kind_at(4, 0) is M.HUMAN

    def test_climbs_over_an_obstacle(
        self,
        lucky: RandomSource,
        rules: RuleTable,
    ) -> None:
        grid = Grid(width=3, height=3)
        for x in range(3):
            grid.set(x, 2, M.WALL)
        grid.set(0, 1, M.HUMAN)
        grid.set(1, 1, M.STONE)
        advance(grid, lucky, rules)
        assert grid.kind_at(1, 0) is M.HUMAN
        assert grid.kind_at(0, 1) is M.EMPTY

    def test_blocked_without_the_climb_roll(
        self,
        unlucky: RandomSource,
        rules: RuleTable,
    ) -> None:
        grid = Grid(width=3, height=3)
        for x in range(3):
            grid.set(x, 2, M.WALL)
        grid.set(0, 1, M.HUMAN)
        grid.set(1, 1, M.STONE)
        advance(grid, unlucky, rules)
        assert grid.kind_at(0, 1) is M.HUMAN

    def test_one_move_per_tick(
        self,
        floor: Grid,
        lucky: RandomSource,
        rules: RuleTable,
    ) -> None:
        floor.set(0, 0, M.ZOMBIE)
        advance(floor, lucky, rules)
        assert floor.kind_at(1, 0) is M.ZOMBIE


class TestMelee:
    """Bites and fights between adjacent agents."""

    def test_bite_infects(
        self,
        floor: Grid,
        lucky: RandomSource,
        rules: RuleTable,
    ) -> None:
        floor.set(1, 0, M.ZOMBIE)
        floor.set(2, 0, M.HUMAN)
        advance(floor, lucky, rules)
        assert floor.count(M.HUMAN) == 0
        assert floor.count(M.ZOMBIE) == 2

    def test_bite_may_ignite(
        self,
        floor: Grid,
        unlucky: RandomSource,
        rules: RuleTable,
    ) -> None:
        floor.set(1, 0, M.ZOMBIE)
        floor.set(2, 0, M.HUMAN)
        advance(floor, unlucky, rules)
        assert floor.count(M.HUMAN) == 0
        assert floor.count(M.FIRE) + floor.count(M.SMOKE) == 1

    def test_human_torches_zombie(
        self,
        floor: Grid,
        lucky: RandomSource,
        rules: RuleTable,
    ) -> None:
        floor.set(1, 0, M.HUMAN)
        floor.set(2, 0, M.ZOMBIE)
        advance(floor, lucky, rules)
        assert floor.count(M.ZOMBIE) == 0
        assert floor.kind_at(2, 0) is M.FIRE
        assert floor.kind_at(0, 0) is M.HUMAN
