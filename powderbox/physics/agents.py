"""Humans and zombies — the two mobile agents.

Each agent takes one turn per tick:

- **Hazard check**: fire, lava, acid, toxic gas, chlorine, lightning or
  live water in any of the 8 neighbours kills the agent.  A human
  crumbles to ash; a zombie bursts into flame.
- **Gravity**: an agent standing over empty space or gas drops one row
  and does nothing else this tick.
- **Sight**: the agent looks for its opponent within a square of radius
  ``agent_sight``.  Humans walk away from the nearest zombie; zombies
  walk toward the nearest human.  With nobody in sight the direction is
  a coin flip.
- **Melee**: humans fight adjacent zombies (burning or ashing them);
  zombies bite every adjacent human (infecting or igniting them).
- **Walking**: step sideways into empty space or gas.  When blocked,
  try to climb up and over the obstacle, else retry in a random
  direction.

The cell's ``life`` field is only an animation counter for agents.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from powderbox.materials.material import Material, is_gas, is_hazard
from powderbox.physics.context import WATERS

if TYPE_CHECKING:
    from powderbox.physics.context import TickContext

M = Material

_OPPONENT = {M.HUMAN: M.ZOMBIE, M.ZOMBIE: M.HUMAN}


def _in_danger(ctx: TickContext, x: int, y: int) -> bool:
    for _, _, n in ctx.grid.neighbourhood(x, y):
        if is_hazard(n.kind):
            return True
        if n.kind in WATERS and n.life > 0:
            return True
    return False


def _nearest(
    ctx: TickContext,
    x: int,
    y: int,
    kind: Material,
) -> tuple[int, int] | None:
    """Return the closest cell of ``kind`` in sight (Chebyshev distance)."""
    best: tuple[int, int] | None = None
    best_dist = ctx.rules.agent_sight + 1
    for nx, ny, n in ctx.grid.neighbourhood(x, y, reach=ctx.rules.agent_sight):
        if n.kind is not kind:
            continue
        dist = max(abs(nx - x), abs(ny - y))
        if dist < best_dist:
            best, best_dist = (nx, ny), dist
    return best


def _fight(ctx: TickContext, x: int, y: int) -> None:
    """Human attacks each adjacent zombie."""
    rules = ctx.rules
    rng = ctx.rng
    for _, _, n in ctx.grid.neighbourhood(x, y):
        if n.kind is not M.ZOMBIE or not rng.chance(rules.human_fight_chance):
            continue
        if rng.chance(rules.human_torch_chance):
            life = rules.torched_fire_life + rng.rint(0, rules.torched_fire_jitter)
            n.become(M.FIRE, life)
        else:
            n.become(M.ASH)


def _bite(ctx: TickContext, x: int, y: int) -> None:
    """Zombie bites every adjacent human."""
    rules = ctx.rules
    for _, _, n in ctx.grid.neighbourhood(x, y):
        if n.kind is not M.HUMAN:
            continue
        if ctx.rng.chance(rules.zombie_infect_chance):
            n.become(M.ZOMBIE)
        else:
            n.become(M.FIRE, rules.bitten_fire_life)


def _step_into(ctx: TickContext, x: int, y: int, nx: int) -> bool:
    if not ctx.grid.in_bounds(nx, y):
        return False
    target = ctx.cell(nx, y)
    if target.is_empty or is_gas(target.kind):
        ctx.move(x, y, nx, y)
        return True
    return False


def _walk(ctx: TickContext, x: int, y: int, step: int) -> None:
    if _step_into(ctx, x, y, x + step):
        return
    grid = ctx.grid
    if (
        grid.in_bounds(x + step, y - 1)
        and ctx.cell(x + step, y - 1).is_empty
        and ctx.cell(x, y - 1).is_empty
        and ctx.rng.chance(ctx.rules.agent_climb_chance)
    ):
        ctx.move(x, y, x + step, y - 1)
        return
    _step_into(ctx, x, y, x + ctx.rng.direction())


def update_agent(ctx: TickContext, x: int, y: int) -> None:
    """Take one turn for the human or zombie at ``(x, y)``."""
    cell = ctx.cell(x, y)
    kind = cell.kind

    if _in_danger(ctx, x, y):
        if kind is M.HUMAN:
            cell.become(M.ASH)
        else:
            cell.become(M.FIRE, ctx.rules.zombie_death_life)
        return

    cell.life += 1

    if ctx.grid.in_bounds(x, y + 1):
        below = ctx.cell(x, y + 1)
        if below.is_empty or is_gas(below.kind):
            ctx.move(x, y, x, y + 1)
            return

    target = _nearest(ctx, x, y, _OPPONENT[kind])

    if kind is M.HUMAN:
        _fight(ctx, x, y)
    else:
        _bite(ctx, x, y)

    if target is None:
        step = ctx.rng.direction()
    elif kind is M.HUMAN:
        step = 1 if target[0] < x else -1
    else:
        step = 1 if target[0] > x else -1

    _walk(ctx, x, y, step)
