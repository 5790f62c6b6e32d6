"""Update engine — advance the grid by exactly one tick.

Rows are scanned from the bottom up and columns left to right.  Falling
matter therefore settles within a single tick, while anything that
moves up (gas, fire, climbing agents) lands on a finalized position and
waits for the next tick.

Behaviour is chosen from a closed table keyed by material.  Kinds with
no entry are inert and are simply finalized where they stand.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from powderbox.materials.material import Material
from powderbox.physics.agents import update_agent
from powderbox.physics.context import TickContext
from powderbox.physics.energy import update_fire, update_lightning
from powderbox.physics.gases import update_gas
from powderbox.physics.liquids import update_liquid
from powderbox.physics.powders import update_powder
from powderbox.physics.terrain import (
    update_combustible,
    update_conductor,
    update_growth,
    update_ice,
    update_wet_dirt,
)

if TYPE_CHECKING:
    from powderbox.simulation.config import RuleTable
    from powderbox.simulation.random_source import RandomSource
    from powderbox.world.grid import Grid

Handler = Callable[[TickContext, int, int], None]
VisitHook = Callable[[int, int, Material], None]

M = Material

HANDLERS: dict[Material, Handler] = {
    M.SAND: update_powder,
    M.GUNPOWDER: update_powder,
    M.ASH: update_powder,
    M.SNOW: update_powder,
    M.WATER: update_liquid,
    M.SALTWATER: update_liquid,
    M.OIL: update_liquid,
    M.ETHANOL: update_liquid,
    M.ACID: update_liquid,
    M.LAVA: update_liquid,
    M.MERCURY: update_liquid,
    M.SMOKE: update_gas,
    M.STEAM: update_gas,
    M.GAS: update_gas,
    M.TOXIC_GAS: update_gas,
    M.HYDROGEN: update_gas,
    M.CHLORINE: update_gas,
    M.FIRE: update_fire,
    M.LIGHTNING: update_lightning,
    M.HUMAN: update_agent,
    M.ZOMBIE: update_agent,
    M.WET_DIRT: update_wet_dirt,
    M.PLANT: update_growth,
    M.SEAWEED: update_growth,
    M.WOOD: update_combustible,
    M.COAL: update_combustible,
    M.WIRE: update_conductor,
    M.METAL: update_conductor,
    M.ICE: update_ice,
}

# Kinds that never act on their own: exactly the kinds missing from
# HANDLERS, so the two together cover every Material.
INERT = frozenset({M.EMPTY, M.WALL, M.STONE, M.GLASS, M.DIRT})


def advance(
    grid: Grid,
    rng: RandomSource,
    rules: RuleTable,
    *,
    on_visit: VisitHook | None = None,
) -> None:
    """Run one simulation tick over ``grid`` in place.

    Args:
        grid: The grid to advance.
        rng: Random source for every probabilistic rule.
        rules: Rule constants.
        on_visit: Optional hook called with ``(x, y, kind)`` each time a
            cell is dispatched, for instrumentation.
    """
    ctx = TickContext(grid=grid, rng=rng, rules=rules)
    updated = ctx.updated
    for y in range(grid.height - 1, -1, -1):
        row = grid.cells[y]
        for x in range(grid.width):
            if updated[y, x]:
                continue
            kind = row[x].kind
            if on_visit is not None:
                on_visit(x, y, kind)
            handler = HANDLERS.get(kind)
            if handler is not None:
                handler(ctx, x, y)
            updated[y, x] = True
