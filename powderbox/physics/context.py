"""TickContext — shared state for one pass of the update engine.

Bundles the grid, the random source, the rule table and the per-tick
update mask.  Rules move particles through ``move`` so that every
destination is finalized and never processed twice in the same tick.
"""

from __future__ import annotations

from collections.abc import Container
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from powderbox.materials.material import Material, is_gas
from powderbox.world.placement import explode

if TYPE_CHECKING:
    from powderbox.simulation.config import RuleTable
    from powderbox.simulation.random_source import RandomSource
    from powderbox.world.cell import Cell
    from powderbox.world.grid import Grid

WATERS = frozenset({Material.WATER, Material.SALTWATER})
WIRES = frozenset({Material.WIRE, Material.METAL})
HEAT = frozenset({Material.FIRE, Material.LAVA})
FUEL_GASES = frozenset({Material.HYDROGEN, Material.GAS})


@dataclass
class TickContext:
    """Everything a rule may touch during one tick.

    Attributes:
        grid: The grid being advanced.
        rng: Random source for every probabilistic rule.
        rules: Tunable rule constants.
        updated: Mask of positions already finalized this tick.
    """

    grid: Grid
    rng: RandomSource
    rules: RuleTable
    updated: NDArray[np.bool_] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.updated = np.zeros((self.grid.height, self.grid.width), dtype=bool)

    def cell(self, x: int, y: int) -> Cell:
        return self.grid.cells[y][x]

    def is_final(self, x: int, y: int) -> bool:
        return bool(self.updated[y, x])

    def finalize(self, x: int, y: int) -> None:
        self.updated[y, x] = True

    def move(self, x: int, y: int, nx: int, ny: int) -> tuple[int, int]:
        """Swap ``(x, y)`` with ``(nx, ny)`` and finalize the destination.

        A gas pushed back onto ``(x, y)`` before its own turn is aged
        there, since the scan has already passed that position.

        Returns:
            The particle's new position.
        """
        target = self.grid.cells[ny][nx]
        displaced_gas = is_gas(target.kind) and not self.updated[ny, nx]
        self.grid.swap(x, y, nx, ny)
        self.updated[ny, nx] = True
        if displaced_gas:
            self.age_gas(self.grid.cells[y][x])
        return nx, ny

    def age_gas(self, cell: Cell) -> None:
        """Spend one tick of a gas cell's lifetime.

        An expired gas vanishes, except that steam may condense back to
        water and smoke may settle as ash.
        """
        if cell.drain() > 0:
            return
        rules = self.rules
        if cell.kind is Material.STEAM and self.rng.chance(rules.steam_condense_chance):
            cell.become(Material.WATER)
        elif cell.kind is Material.SMOKE and self.rng.chance(rules.smoke_ash_chance):
            cell.become(Material.ASH)
        else:
            cell.become(Material.EMPTY)

    def touches(self, x: int, y: int, kinds: Container[Material]) -> bool:
        """Return True if any of the 8 neighbours holds one of ``kinds``."""
        return any(n.kind in kinds for _, _, n in self.grid.neighbourhood(x, y))

    def explode(self, x: int, y: int, radius: int) -> None:
        explode(self.grid, x, y, radius, self.rng, self.rules)

    def ignite(
        self,
        x: int,
        y: int,
        base_life: int,
        jitter: int,
        blast_radius: int,
    ) -> None:
        """Set the flammable cell at ``(x, y)`` alight.

        Gunpowder detonates with ``blast_radius`` instead of burning.
        """
        target = self.grid.cells[y][x]
        if target.kind is Material.GUNPOWDER:
            self.explode(x, y, blast_radius)
        else:
            target.become(Material.FIRE, base_life + self.rng.rint(0, jitter))
