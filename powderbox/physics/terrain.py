"""Static terrain rules: drying, growth, burning, conduction, melting.

None of these kinds ever move; they only change kind or update their
``life`` counter in response to their neighbours.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from powderbox.materials.material import Material, is_flammable
from powderbox.physics.context import FUEL_GASES, HEAT, WATERS, WIRES

if TYPE_CHECKING:
    from powderbox.physics.context import TickContext

M = Material

_MELTERS = frozenset({M.FIRE, M.LAVA, M.STEAM})


def update_wet_dirt(ctx: TickContext, x: int, y: int) -> None:
    """Dry out when no water is adjacent."""
    cell = ctx.cell(x, y)
    if not ctx.touches(x, y, WATERS) and cell.drain() == 0:
        cell.become(M.DIRT)


def update_growth(ctx: TickContext, x: int, y: int) -> None:
    """Burn near heat; otherwise occasionally grow one cell upward.

    Plants grow from wet dirt into open air.  Seaweed grows from its top
    segment into the water above it.
    """
    cell = ctx.cell(x, y)
    rules = ctx.rules
    if ctx.touches(x, y, HEAT):
        cell.become(M.FIRE, rules.plant_fire_life)
        return

    grid = ctx.grid
    above = grid.kind_at(x, y - 1)
    if cell.kind is M.PLANT:
        rooted = grid.kind_at(x, y + 1) is M.WET_DIRT
        if rooted and ctx.rng.chance(rules.plant_growth_chance):
            if above is M.EMPTY:
                grid.set(x, y - 1, M.PLANT)
                ctx.finalize(x, y - 1)
    elif above in WATERS and ctx.rng.chance(rules.seaweed_growth_chance):
        grid.set(x, y - 1, M.SEAWEED)
        ctx.finalize(x, y - 1)


def update_combustible(ctx: TickContext, x: int, y: int) -> None:
    """Wood and coal catch fire from adjacent heat; coal burns longer."""
    cell = ctx.cell(x, y)
    if ctx.touches(x, y, HEAT):
        if cell.kind is M.COAL:
            cell.become(M.FIRE, ctx.rules.coal_fire_life)
        else:
            cell.become(M.FIRE, ctx.rules.wood_fire_life)


def update_conductor(ctx: TickContext, x: int, y: int) -> None:
    """Pass charge along wire and metal, sparking fuel on the way.

    Each hop loses at least one point of charge, so a pulse dies out
    over a finite distance.
    """
    cell = ctx.cell(x, y)
    charge = cell.life
    if charge <= 0:
        return

    rules = ctx.rules
    rng = ctx.rng
    for nx, ny, n in ctx.grid.neighbourhood(x, y):
        if n.kind in WIRES or n.kind in WATERS:
            n.charge_to(charge - 1)
        elif is_flammable(n.kind):
            if rng.chance(rules.wire_ignite_chance):
                ctx.ignite(
                    nx,
                    ny,
                    rules.fire_spread_life,
                    rules.fire_spread_jitter,
                    rules.gunpowder_blast_radius,
                )
        elif n.kind in FUEL_GASES and rng.chance(rules.wire_detonate_chance):
            ctx.explode(nx, ny, rules.hydrogen_blast_radius)

    cell.drain()


def update_ice(ctx: TickContext, x: int, y: int) -> None:
    """Each hot neighbour gives ice a chance to melt."""
    cell = ctx.cell(x, y)
    for _, _, n in ctx.grid.neighbourhood(x, y):
        if n.kind in _MELTERS and ctx.rng.chance(ctx.rules.ice_melt_chance):
            cell.become(M.WATER)
            return
