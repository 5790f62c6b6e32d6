"""SimulationEngine — the operation set a front-end drives.

Owns the grid, the seeded random source and the tool status, and
exposes the commands a front-end issues between frames:

1. Placement (``place``, ``erase``, ``cast_lightning``)
2. Grid management (``resize``, ``clear``)
3. Time (``step``, ``run``)
4. Read-back (``snapshot``, ``status``)

Only one tick runs at a time, so callers never see a half-updated grid.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from powderbox.materials.material import Material, display_name
from powderbox.physics.update import advance
from powderbox.simulation.config import RuleTable, SimulationConfig
from powderbox.simulation.random_source import RandomSource
from powderbox.simulation.status import ToolStatus
from powderbox.world.grid import Grid, GridSnapshot
from powderbox.world.placement import cast_lightning, stamp_circle

logger = logging.getLogger(__name__)


@dataclass
class SimulationEngine:
    """Drives the sandbox forward tick by tick.

    Attributes:
        config: Loaded simulation configuration.
        grid: The cell grid.
        rng: Seeded random source shared by ticks and placements.
        status: Current tool, brush size and pause flag.
        tick: Number of ticks advanced so far.
    """

    config: SimulationConfig
    grid: Grid = field(init=False)
    rng: RandomSource = field(init=False)
    status: ToolStatus = field(init=False)
    tick: int = 0

    def __post_init__(self) -> None:
        """Build grid, random source and tool status from config."""
        self.rng = RandomSource.from_seed(self.config.seed)
        self.grid = Grid(
            width=self.config.grid_width,
            height=self.config.grid_height,
        )
        self.status = ToolStatus(brush_size=self.config.brush_size)

    @property
    def rules(self) -> RuleTable:
        return self.config.rules

    def resize(self, width: int, height: int) -> None:
        """Re-create an empty grid at new dimensions.

        Raises:
            ValueError: If either dimension is not positive.
        """
        self.grid.resize(width, height)
        logger.info("grid resized to %dx%d", width, height)

    def clear(self) -> None:
        """Empty every cell, keeping the dimensions."""
        self.grid.clear()
        logger.info("grid cleared")

    def step(self) -> None:
        """Advance the simulation by one tick."""
        advance(self.grid, self.rng, self.rules)
        self.tick += 1

    def run(self, ticks: int) -> None:
        """Run the simulation for a fixed number of ticks.

        Args:
            ticks: Number of ticks to advance.
        """
        for _ in range(ticks):
            self.step()

    def place(self, x: int, y: int, radius: int, kind: Material) -> None:
        """Stamp a disc of ``kind`` centred on ``(x, y)``.

        Cells outside the grid are ignored.
        """
        logger.debug("placing %s at (%d, %d) r=%d", display_name(kind), x, y, radius)
        stamp_circle(self.grid, x, y, radius, kind, self.rules)

    def erase(self, x: int, y: int, radius: int) -> None:
        """Empty a disc centred on ``(x, y)``."""
        stamp_circle(self.grid, x, y, radius, Material.EMPTY, self.rules)

    def cast_lightning(self, x: int, y: int) -> None:
        """Drop a lightning bolt from ``(x, y)``."""
        cast_lightning(self.grid, x, y, self.rules)

    def apply_brush(self, x: int, y: int) -> None:
        """Place the current tool at ``(x, y)`` with the current brush."""
        self.place(x, y, self.status.brush_size, self.status.current)

    def snapshot(self) -> GridSnapshot:
        """Return a read-only copy of the settled grid."""
        return self.grid.snapshot()
