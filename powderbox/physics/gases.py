"""Gas rules: buoyancy, ignition and decay.

Gases rise into empty space (hydrogen up to two rows per tick), drift
sideways when blocked, and lose one point of lifetime every tick.  An
expired gas vanishes, except that steam may condense back to water and
smoke may settle as ash.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from powderbox.materials.material import Material
from powderbox.physics.context import HEAT

if TYPE_CHECKING:
    from powderbox.physics.context import TickContext

M = Material


def _rise(ctx: TickContext, x: int, y: int, kind: Material) -> tuple[int, int]:
    grid = ctx.grid
    steps = ctx.rules.hydrogen_rise_steps if kind is M.HYDROGEN else 1
    moved = False
    for _ in range(steps):
        if not (grid.in_bounds(x, y - 1) and ctx.cell(x, y - 1).is_empty):
            break
        x, y = ctx.move(x, y, x, y - 1)
        moved = True
    if moved:
        return x, y

    order = (1, -1) if ctx.rng.rint(0, 1) == 1 else (-1, 1)
    for dx in order:
        nx = x + dx
        ny = y - 1 if ctx.rng.chance(ctx.rules.gas_drift_up_chance) else y
        if grid.in_bounds(nx, ny) and ctx.cell(nx, ny).is_empty:
            return ctx.move(x, y, nx, ny)
    return x, y


def update_gas(ctx: TickContext, x: int, y: int) -> None:
    """Advance one gas cell: rise, react, then age."""
    rules = ctx.rules
    kind = ctx.cell(x, y).kind
    x, y = _rise(ctx, x, y, kind)
    cell = ctx.cell(x, y)

    # Ignition replaces this tick's ageing, so lit gas keeps its full life.
    if kind in (M.HYDROGEN, M.GAS) and ctx.touches(x, y, HEAT):
        if kind is M.HYDROGEN:
            ctx.explode(x, y, rules.hydrogen_blast_radius)
        else:
            cell.become(M.FIRE, rules.gas_ignite_life)
        return

    if kind is M.CHLORINE:
        for _, _, n in ctx.grid.neighbourhood(x, y):
            if n.kind is M.PLANT and ctx.rng.chance(rules.chlorine_toxify_chance):
                n.become(M.TOXIC_GAS, rules.toxic_gas_life)

    ctx.age_gas(cell)
