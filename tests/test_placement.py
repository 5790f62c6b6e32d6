"""Tests for powderbox.world.placement — brush, explosions, lightning."""

from powderbox.materials.material import Material
from powderbox.simulation.config import RuleTable
from powderbox.simulation.random_source import RandomSource
from powderbox.world.grid import Grid
from powderbox.world.placement import (
    BLAST_PROOF,
    cast_lightning,
    explode,
    stamp_circle,
)

M = Material


class TestStampCircle:
    """Tests for circular brush stamping."""

    def test_radius_zero_is_single_cell(
        self,
        small_grid: Grid,
        rules: RuleTable,
    ) -> None:
        stamp_circle(small_grid, 3, 3, 0, M.SAND, rules)
        assert small_grid.count(M.SAND) == 1
        assert small_grid.kind_at(3, 3) is M.SAND

    def test_radius_one_is_plus_shape(
        self,
        small_grid: Grid,
        rules: RuleTable,
    ) -> None:
        stamp_circle(small_grid, 3, 3, 1, M.STONE, rules)
        assert small_grid.count(M.STONE) == 5
        assert small_grid.kind_at(2, 2) is M.EMPTY

    def test_radius_two_disc(self, small_grid: Grid, rules: RuleTable) -> None:
        stamp_circle(small_grid, 4, 4, 2, M.WATER, rules)
        assert small_grid.count(M.WATER) == 13

    def test_lifetimes(self, small_grid: Grid, rules: RuleTable) -> None:
        stamp_circle(small_grid, 1, 1, 0, M.STEAM, rules)
        stamp_circle(small_grid, 3, 3, 0, M.FIRE, rules)
        stamp_circle(small_grid, 5, 5, 0, M.WOOD, rules)
        assert small_grid.cell_at(1, 1).life == rules.placed_gas_life == 25
        assert small_grid.cell_at(3, 3).life == rules.placed_fire_life == 20
        assert small_grid.cell_at(5, 5).life == 0

    def test_overwrites_and_resets_life(
        self,
        small_grid: Grid,
        rules: RuleTable,
    ) -> None:
        small_grid.set(2, 2, M.WIRE, 9)
        stamp_circle(small_grid, 2, 2, 0, M.EMPTY, rules)
        assert small_grid.cell_at(2, 2).life == 0
        assert small_grid.kind_at(2, 2) is M.EMPTY

    def test_clipped_at_edges(self, small_grid: Grid, rules: RuleTable) -> None:
        stamp_circle(small_grid, 0, 0, 1, M.SAND, rules)
        assert small_grid.count(M.SAND) == 3

    def test_fully_outside_is_noop(self, small_grid: Grid, rules: RuleTable) -> None:
        stamp_circle(small_grid, 50, 50, 2, M.SAND, rules)
        assert small_grid.count(M.EMPTY) == 64

    def test_lightning_is_cast_not_stamped(self, rules: RuleTable) -> None:
        grid = Grid(width=3, height=4)
        stamp_circle(grid, 1, 0, 3, M.LIGHTNING, rules)
        assert grid.count(M.LIGHTNING) == 4
        assert all(grid.kind_at(1, y) is M.LIGHTNING for y in range(4))


class TestExplode:
    """Tests for explosions."""

    def test_blast_proof_cells_survive(
        self,
        rng: RandomSource,
        rules: RuleTable,
    ) -> None:
        grid = Grid(width=9, height=9)
        proof = sorted(BLAST_PROOF, key=lambda k: k.value)
        for y in range(9):
            for x in range(9):
                grid.set(x, y, proof[(x + y) % len(proof)])
        before = [[cell.kind for cell in row] for row in grid.cells]

        explode(grid, 4, 4, 4, rng, rules)

        after = [[cell.kind for cell in row] for row in grid.cells]
        assert after == before

    def test_blast_proof_set(self) -> None:
        assert BLAST_PROOF == {M.WALL, M.STONE, M.GLASS, M.METAL, M.WIRE, M.ICE}

    def test_breakable_cells_become_blast_products(
        self,
        rng: RandomSource,
        rules: RuleTable,
    ) -> None:
        grid = Grid(width=11, height=11)
        for y in range(11):
            for x in range(11):
                grid.set(x, y, M.WOOD)

        explode(grid, 5, 5, 3, rng, rules)

        for y in range(11):
            for x in range(11):
                cell = grid.cell_at(x, y)
                inside = (x - 5) ** 2 + (y - 5) ** 2 <= 9
                if not inside:
                    assert cell.kind is M.WOOD
                elif cell.kind is M.FIRE:
                    assert 15 <= cell.life <= 25
                else:
                    assert cell.kind in (M.SMOKE, M.GAS)
                    assert cell.life == 20

    def test_all_three_outcomes_occur(
        self,
        rng: RandomSource,
        rules: RuleTable,
    ) -> None:
        grid = Grid(width=21, height=21)
        explode(grid, 10, 10, 10, rng, rules)
        fire, smoke, gas = (grid.count(k) for k in (M.FIRE, M.SMOKE, M.GAS))
        assert fire > smoke > 0
        assert fire > gas > 0
        assert fire + smoke + gas == 317

    def test_clipped_at_edges(self, rng: RandomSource, rules: RuleTable) -> None:
        grid = Grid(width=3, height=3)
        explode(grid, 0, 0, 1, rng, rules)
        assert grid.count(M.EMPTY) == 6


class TestCastLightning:
    """Tests for the vertical lightning beam."""

    def test_beam_reaches_floor(self, rules: RuleTable) -> None:
        grid = Grid(width=1, height=5)
        cast_lightning(grid, 0, 0, rules)
        for y in range(5):
            cell = grid.cell_at(0, y)
            assert cell.kind is M.LIGHTNING
            assert cell.life == 2

    def test_beam_stops_above_obstruction(self, rules: RuleTable) -> None:
        grid = Grid(width=1, height=6)
        grid.set(0, 4, M.SAND)
        cast_lightning(grid, 0, 1, rules)
        assert grid.kind_at(0, 0) is M.EMPTY
        assert [grid.kind_at(0, y) for y in (1, 2, 3)] == [M.LIGHTNING] * 3
        assert grid.kind_at(0, 4) is M.SAND

    def test_beam_passes_through_gas(self, rules: RuleTable) -> None:
        grid = Grid(width=1, height=4)
        grid.set(0, 2, M.SMOKE, 10)
        cast_lightning(grid, 0, 0, rules)
        assert grid.count(M.LIGHTNING) == 4

    def test_charges_water_below(self, rules: RuleTable) -> None:
        grid = Grid(width=1, height=4)
        grid.set(0, 3, M.SALTWATER, 2)
        cast_lightning(grid, 0, 0, rules)
        assert grid.cell_at(0, 3).life == 8

    def test_keeps_higher_water_charge(self, rules: RuleTable) -> None:
        grid = Grid(width=1, height=3)
        grid.set(0, 2, M.WATER, 11)
        cast_lightning(grid, 0, 0, rules)
        assert grid.cell_at(0, 2).life == 11

    def test_out_of_bounds_is_noop(self, rules: RuleTable) -> None:
        grid = Grid(width=2, height=2)
        cast_lightning(grid, 5, 0, rules)
        cast_lightning(grid, 0, -1, rules)
        assert grid.count(M.EMPTY) == 4
