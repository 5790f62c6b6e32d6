"""Placement tools — brush stamping, explosions and lightning bolts.

These write straight into the grid.  They are called by the front-end
between ticks and by the physics rules mid-tick (explosions); both are
safe because only one tick is ever in flight.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING

from powderbox.materials.material import Material, is_gas

if TYPE_CHECKING:
    from powderbox.simulation.config import RuleTable
    from powderbox.simulation.random_source import RandomSource
    from powderbox.world.cell import Cell
    from powderbox.world.grid import Grid

logger = logging.getLogger(__name__)

# Matter a blast cannot break.
BLAST_PROOF = frozenset(
    {
        Material.WALL,
        Material.STONE,
        Material.GLASS,
        Material.METAL,
        Material.WIRE,
        Material.ICE,
    },
)

_WATERS = (Material.WATER, Material.SALTWATER)


def _disc(grid: Grid, cx: int, cy: int, radius: int) -> Iterator[Cell]:
    """Yield in-bounds cells within Euclidean ``radius`` of the centre."""
    r2 = radius * radius
    for dy in range(-radius, radius + 1):
        y = cy + dy
        if not 0 <= y < grid.height:
            continue
        for dx in range(-radius, radius + 1):
            x = cx + dx
            if 0 <= x < grid.width and dx * dx + dy * dy <= r2:
                yield grid.cells[y][x]


def stamp_circle(
    grid: Grid,
    cx: int,
    cy: int,
    radius: int,
    kind: Material,
    rules: RuleTable,
) -> None:
    """Fill a disc of cells with ``kind``.

    Gases are seeded with their placement lifetime, fire with its own,
    everything else with zero.  Lightning is never stamped as a disc: it
    is cast as a bolt from the centre instead.

    Args:
        grid: Grid to paint into.
        cx: Centre column.
        cy: Centre row.
        radius: Euclidean radius, inclusive.
        kind: Material to place (EMPTY erases).
        rules: Source of the placement lifetimes.
    """
    if kind is Material.LIGHTNING:
        cast_lightning(grid, cx, cy, rules)
        return

    life = 0
    if is_gas(kind):
        life = rules.placed_gas_life
    elif kind is Material.FIRE:
        life = rules.placed_fire_life

    for cell in _disc(grid, cx, cy, radius):
        cell.become(kind, life)


def explode(
    grid: Grid,
    cx: int,
    cy: int,
    radius: int,
    rng: RandomSource,
    rules: RuleTable,
) -> None:
    """Blow up a disc, turning breakable cells into fire, smoke or gas.

    Each breakable cell rolls once: fire (``blast_fire_chance``), smoke
    (the next ``blast_smoke_chance``) or neutral gas (the rest).

    Args:
        grid: Grid to modify.
        cx: Blast centre column.
        cy: Blast centre row.
        radius: Euclidean blast radius, inclusive.
        rng: Random source for the per-cell outcome.
        rules: Blast probabilities and lifetimes.
    """
    logger.debug("explosion at (%d, %d) radius %d", cx, cy, radius)
    fire_cut = rules.blast_fire_chance
    smoke_cut = fire_cut + rules.blast_smoke_chance
    for cell in _disc(grid, cx, cy, radius):
        if cell.kind in BLAST_PROOF:
            continue
        roll = rng.rint(1, 100)
        if roll <= fire_cut:
            life = rules.blast_fire_life + rng.rint(0, rules.blast_fire_jitter)
            cell.become(Material.FIRE, life)
        elif roll <= smoke_cut:
            cell.become(Material.SMOKE, rules.blast_smoke_life)
        else:
            cell.become(Material.GAS, rules.blast_smoke_life)


def cast_lightning(grid: Grid, x: int, y: int, rules: RuleTable) -> None:
    """Drop a vertical bolt from ``(x, y)`` to the first obstruction.

    The bolt extends down through empty and gaseous cells, stopping above
    anything else or at the floor.  Water or salt water directly under
    the bolt is left charged.

    Args:
        grid: Grid to modify.
        x: Column of the bolt.
        y: Row where the bolt starts.
        rules: Lightning lifetime and water charge.
    """
    if not grid.in_bounds(x, y):
        return

    end = y
    while end + 1 < grid.height:
        below = grid.cells[end + 1][x]
        if not below.is_empty and not is_gas(below.kind):
            break
        end += 1

    for row in range(y, end + 1):
        grid.cells[row][x].become(Material.LIGHTNING, rules.lightning_life)

    if end + 1 < grid.height:
        struck = grid.cells[end + 1][x]
        if struck.kind in _WATERS:
            struck.charge_to(rules.lightning_water_charge)
