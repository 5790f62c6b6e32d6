"""Liquid rules: flow, density stacking and chemistry.

A liquid falls into empty space or gas, sinks through any lighter
liquid, and otherwise spreads sideways.  Sideways displacement of a
lighter liquid only succeeds half the time so layered liquids separate
gradually instead of in a single tick.  After moving, each liquid reacts
with its 8 neighbours; once a reaction changes the liquid itself, the
remaining reactions for that tick are skipped.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from powderbox.materials.material import (
    Material,
    denser_than,
    is_dissolvable,
    is_flammable,
    is_gas,
    is_liquid,
)
from powderbox.physics.context import HEAT, WATERS

if TYPE_CHECKING:
    from powderbox.physics.context import TickContext
    from powderbox.world.cell import Cell

M = Material


def _flow(ctx: TickContext, x: int, y: int, kind: Material) -> tuple[int, int]:
    grid = ctx.grid
    if grid.in_bounds(x, y + 1):
        below = ctx.cell(x, y + 1)
        if below.is_empty or is_gas(below.kind):
            return ctx.move(x, y, x, y + 1)
        if is_liquid(below.kind) and denser_than(kind, below.kind):
            return ctx.move(x, y, x, y + 1)

    order = (1, -1) if ctx.rng.rint(0, 1) == 1 else (-1, 1)
    for dx in order:
        nx = x + dx
        if not grid.in_bounds(nx, y):
            continue
        side = ctx.cell(nx, y)
        if side.is_empty or is_gas(side.kind):
            return ctx.move(x, y, nx, y)
        if (
            is_liquid(side.kind)
            and denser_than(kind, side.kind)
            and ctx.rng.chance(ctx.rules.liquid_displace_chance)
        ):
            return ctx.move(x, y, nx, y)
    return x, y


def _quench(ctx: TickContext, cell: Cell) -> None:
    """Water meeting lava: boil off as steam or set into stone."""
    if ctx.rng.chance(ctx.rules.water_lava_steam_chance):
        cell.become(M.STEAM, ctx.rules.steam_life)
    else:
        cell.become(M.STONE)


def _react_water(ctx: TickContext, x: int, y: int, cell: Cell) -> None:
    for _, _, n in ctx.grid.neighbourhood(x, y):
        if n.kind is M.FIRE:
            n.become(M.SMOKE, ctx.rules.smoke_life)
        elif n.kind is M.LAVA:
            n.become(M.STONE)
            _quench(ctx, cell)
            return


def _react_fuel(ctx: TickContext, x: int, y: int, cell: Cell) -> None:
    if ctx.touches(x, y, HEAT):
        cell.become(M.FIRE, ctx.rules.liquid_fire_life)


def _react_acid(ctx: TickContext, x: int, y: int, cell: Cell) -> None:
    rules = ctx.rules
    for _, _, n in ctx.grid.neighbourhood(x, y):
        if is_dissolvable(n.kind):
            if ctx.rng.chance(rules.acid_toxic_chance):
                n.become(M.TOXIC_GAS, rules.toxic_gas_life)
            else:
                n.become(M.EMPTY)
            if ctx.rng.chance(rules.acid_consumed_chance):
                cell.become(M.EMPTY)
                return
        elif n.kind is M.WATER and ctx.rng.chance(rules.acid_salt_chance):
            cell.become(M.SALTWATER)
            if ctx.rng.chance(rules.acid_steam_chance):
                n.become(M.STEAM, rules.steam_life)
            return


def _react_lava(ctx: TickContext, x: int, y: int, cell: Cell) -> None:
    rules = ctx.rules
    for _, _, n in ctx.grid.neighbourhood(x, y):
        if is_flammable(n.kind):
            n.become(M.FIRE, rules.liquid_fire_life)
        elif n.kind in (M.SAND, M.SNOW):
            n.become(M.GLASS)
        elif n.kind in WATERS:
            n.become(M.STONE)
            _quench(ctx, cell)
            return
        elif n.kind is M.ICE:
            n.become(M.WATER)

    cell.life += 1
    if cell.life > rules.lava_cooling_age:
        cell.become(M.STONE)


def _soak_and_conduct(ctx: TickContext, x: int, y: int, cell: Cell) -> None:
    """Wet nearby dirt, then pass on and bleed off electrical charge."""
    grid = ctx.grid
    for _, _, n in grid.neighbourhood(x, y):
        if n.kind in (M.DIRT, M.WET_DIRT):
            n.become(M.WET_DIRT, ctx.rules.wet_dirt_moisture)

    charge = cell.life
    if charge <= 0:
        return
    for _, _, n in grid.neighbourhood(x, y):
        if n.kind in WATERS:
            n.charge_to(charge - 1)
        elif n.kind in (M.HUMAN, M.ZOMBIE):
            n.become(M.ASH)
    cell.drain()


_Reaction = Callable[["TickContext", int, int, "Cell"], None]

_REACTIONS: dict[Material, _Reaction] = {
    M.WATER: _react_water,
    M.SALTWATER: _react_water,
    M.OIL: _react_fuel,
    M.ETHANOL: _react_fuel,
    M.ACID: _react_acid,
    M.LAVA: _react_lava,
}


def update_liquid(ctx: TickContext, x: int, y: int) -> None:
    """Advance one liquid cell: flow, then react where it ends up."""
    kind = ctx.cell(x, y).kind
    x, y = _flow(ctx, x, y, kind)
    cell = ctx.cell(x, y)

    reaction = _REACTIONS.get(kind)
    if reaction is not None:
        reaction(ctx, x, y, cell)

    if cell.kind is kind and kind in WATERS:
        _soak_and_conduct(ctx, x, y, cell)
