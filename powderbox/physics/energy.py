"""Fire and lightning.

Fire flickers upward, spreads to flammable neighbours, is doused by
water and burns out into smoke.  Lightning is a short-lived beam that
energises conductors and water, ignites fuel and detonates gas within
its reach.  Neither moves after its own turn.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from powderbox.materials.material import Material, is_flammable, is_gas
from powderbox.physics.context import FUEL_GASES, WATERS, WIRES

if TYPE_CHECKING:
    from powderbox.physics.context import TickContext

M = Material


def update_fire(ctx: TickContext, x: int, y: int) -> None:
    """Advance one fire cell."""
    grid = ctx.grid
    rules = ctx.rules
    rng = ctx.rng

    if grid.in_bounds(x, y - 1):
        above = ctx.cell(x, y - 1)
        if (above.is_empty or is_gas(above.kind)) and rng.chance(
            rules.fire_rise_chance,
        ):
            x, y = ctx.move(x, y, x, y - 1)

    doused = False
    for nx, ny, n in grid.neighbourhood(x, y):
        if is_flammable(n.kind):
            if rng.chance(rules.fire_ignite_chance):
                ctx.ignite(
                    nx,
                    ny,
                    rules.fire_spread_life,
                    rules.fire_spread_jitter,
                    rules.gunpowder_blast_radius,
                )
        elif n.kind in WATERS:
            doused = True
        elif n.kind in WIRES and rng.chance(rules.fire_charge_chance):
            n.charge_to(rules.fire_charge)

    cell = ctx.cell(x, y)
    if cell.kind is not M.FIRE:
        return
    # Dousing skips this tick's burn, so the smoke keeps its full life.
    if doused or cell.drain() == 0:
        cell.become(M.SMOKE, rules.smoke_life)


def update_lightning(ctx: TickContext, x: int, y: int) -> None:
    """Discharge into the surrounding square, then fade."""
    rules = ctx.rules
    for nx, ny, n in ctx.grid.neighbourhood(x, y, reach=rules.lightning_reach):
        if n.kind in WIRES:
            n.charge_to(rules.lightning_wire_charge)
        elif n.kind in WATERS:
            n.charge_to(rules.lightning_water_charge)
        elif is_flammable(n.kind):
            ctx.ignite(
                nx,
                ny,
                rules.lightning_fire_life,
                rules.lightning_fire_jitter,
                rules.lightning_blast_radius,
            )
        elif n.kind in FUEL_GASES:
            ctx.explode(nx, ny, rules.hydrogen_blast_radius)

    cell = ctx.cell(x, y)
    if cell.kind is M.LIGHTNING and cell.drain() == 0:
        cell.become(M.EMPTY)
