"""Powder rules: sand, gunpowder, ash and snow.

Powders fall straight down into empty space or through liquids, then
slide diagonally in a random order.  Snow melts near heat, gunpowder
detonates near heat, and sand left under still water long enough seeds
a seaweed strand above itself.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from powderbox.materials.material import Material, is_liquid
from powderbox.physics.context import HEAT

if TYPE_CHECKING:
    from powderbox.physics.context import TickContext


def _can_enter(ctx: TickContext, x: int, y: int) -> bool:
    if not ctx.grid.in_bounds(x, y):
        return False
    target = ctx.cell(x, y)
    return target.is_empty or is_liquid(target.kind)


def _fall(ctx: TickContext, x: int, y: int) -> tuple[int, int]:
    """Drop one row if possible, straight or diagonally."""
    if _can_enter(ctx, x, y + 1):
        return ctx.move(x, y, x, y + 1)
    side = ctx.rng.direction()
    for nx in (x + side, x - side):
        if _can_enter(ctx, nx, y + 1):
            return ctx.move(x, y, nx, y + 1)
    return x, y


def _soak_sand(ctx: TickContext, x: int, y: int) -> None:
    grid = ctx.grid
    cell = ctx.cell(x, y)
    if grid.kind_at(x, y - 1) is not Material.WATER:
        cell.life = 0
        return

    cell.life += 1
    if cell.life <= ctx.rules.sand_submersion_ticks:
        return

    crowded = any(
        n.kind is Material.SEAWEED
        for _, _, n in grid.neighbourhood(
            x,
            y,
            reach=ctx.rules.seaweed_spacing,
            include_centre=True,
        )
    )
    if not crowded:
        grid.set(x, y - 1, Material.SEAWEED)
    cell.life = 0


def update_powder(ctx: TickContext, x: int, y: int) -> None:
    """Advance one powder grain."""
    kind = ctx.cell(x, y).kind
    x, y = _fall(ctx, x, y)

    if kind is Material.SNOW:
        if ctx.touches(x, y, HEAT):
            ctx.cell(x, y).become(Material.WATER)
    elif kind is Material.SAND:
        _soak_sand(ctx, x, y)
    elif kind is Material.GUNPOWDER:
        if ctx.touches(x, y, HEAT):
            ctx.explode(x, y, ctx.rules.gunpowder_blast_radius)
