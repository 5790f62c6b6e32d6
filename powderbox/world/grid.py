"""Grid — the mutable container for all simulation state.

The Grid owns cells arranged as ``cells[y][x]`` with the origin at the
top-left and ``y`` growing downward, so gravity pulls toward larger row
indices.  It offers bounds checks, neighbourhood iteration and value
swaps; all physical behaviour lives in ``powderbox.physics``.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from powderbox.materials.material import Material
from powderbox.world.cell import Cell


@dataclass(frozen=True)
class GridSnapshot:
    """Read-only copy of a grid's state, for rendering.

    Attributes:
        kinds: ``(height, width)`` array of ``Material.value`` codes.
        life: ``(height, width)`` array of life counters.
    """

    kinds: NDArray[np.int16]
    life: NDArray[np.int32]

    @property
    def height(self) -> int:
        return int(self.kinds.shape[0])

    @property
    def width(self) -> int:
        return int(self.kinds.shape[1])

    def kind_at(self, x: int, y: int) -> Material:
        """Return the material recorded at ``(x, y)``."""
        return Material(int(self.kinds[y, x]))


def _check_dimensions(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        msg = f"grid dimensions must be positive, got {width}x{height}"
        raise ValueError(msg)


@dataclass
class Grid:
    """A rectangular field of cells.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        cells: 2D list of Cell objects indexed as ``cells[y][x]``.
    """

    width: int
    height: int
    cells: list[list[Cell]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate dimensions and fill the grid with empty cells."""
        self.resize(self.width, self.height)

    def resize(self, width: int, height: int) -> None:
        """Re-create the grid at new dimensions.

        All previous content is discarded.

        Raises:
            ValueError: If either dimension is not positive.
        """
        _check_dimensions(width, height)
        self.width = width
        self.height = height
        self.cells = [[Cell() for _ in range(width)] for _ in range(height)]

    def clear(self) -> None:
        """Reset every cell to empty without changing dimensions."""
        for row in self.cells:
            for cell in row:
                cell.become(Material.EMPTY)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell_at(self, x: int, y: int) -> Cell:
        """Return the cell at grid coordinates ``(x, y)``.

        Raises:
            IndexError: If coordinates are out of bounds.
        """
        if not self.in_bounds(x, y):
            msg = f"({x}, {y}) out of bounds for {self.width}x{self.height}"
            raise IndexError(msg)
        return self.cells[y][x]

    def kind_at(self, x: int, y: int) -> Material | None:
        """Return the kind at ``(x, y)``, or None outside the grid."""
        if not self.in_bounds(x, y):
            return None
        return self.cells[y][x].kind

    def set(self, x: int, y: int, kind: Material, life: int = 0) -> None:
        """Overwrite the cell at ``(x, y)``; out-of-bounds is a no-op."""
        if self.in_bounds(x, y):
            self.cells[y][x].become(kind, life)

    def swap(self, ax: int, ay: int, bx: int, by: int) -> None:
        """Exchange the contents of two in-bounds cells."""
        self.cells[ay][ax].swap(self.cells[by][bx])

    def neighbourhood(
        self,
        x: int,
        y: int,
        *,
        reach: int = 1,
        include_centre: bool = False,
    ) -> Iterator[tuple[int, int, Cell]]:
        """Yield ``(nx, ny, cell)`` for the square around ``(x, y)``.

        Positions are visited row by row from the top-left; cells outside
        the grid are skipped.

        Args:
            x: Centre column.
            y: Centre row.
            reach: Chebyshev radius of the square (1 gives 3x3).
            include_centre: Whether to yield ``(x, y)`` itself.
        """
        for dy in range(-reach, reach + 1):
            ny = y + dy
            if not 0 <= ny < self.height:
                continue
            row = self.cells[ny]
            for dx in range(-reach, reach + 1):
                if dx == 0 and dy == 0 and not include_centre:
                    continue
                nx = x + dx
                if 0 <= nx < self.width:
                    yield nx, ny, row[nx]

    def count(self, kind: Material) -> int:
        """Return how many cells hold ``kind``."""
        return sum(cell.kind is kind for row in self.cells for cell in row)

    def snapshot(self) -> GridSnapshot:
        """Copy kinds and life values into read-only NumPy arrays."""
        kinds = np.array(
            [[cell.kind.value for cell in row] for row in self.cells],
            dtype=np.int16,
        )
        life = np.array(
            [[cell.life for cell in row] for row in self.cells],
            dtype=np.int32,
        )
        kinds.flags.writeable = False
        life.flags.writeable = False
        return GridSnapshot(kinds=kinds, life=life)
