"""Cell — a single location in the sandbox grid.

A cell is a plain value: a material kind plus one integer ``life``
field whose meaning depends on the kind:

- sand: ticks spent under still water
- water / salt water: electrical charge
- lava: age
- gases, fire, lightning: remaining lifetime
- wet dirt: moisture
- wire / metal: electrical charge
- human / zombie: animation tick
"""

from __future__ import annotations

from dataclasses import dataclass

from powderbox.materials.material import Material


@dataclass
class Cell:
    """A single grid cell.

    Attributes:
        kind: Material currently occupying the cell.
        life: Kind-dependent counter, never negative.
    """

    kind: Material = Material.EMPTY
    life: int = 0

    def become(self, kind: Material, life: int = 0) -> None:
        """Turn this cell into ``kind`` with a fresh ``life`` value."""
        self.kind = kind
        self.life = max(0, life)

    def drain(self, amount: int = 1) -> int:
        """Decrease ``life`` by ``amount``, clamped at zero.

        Returns:
            The remaining life.
        """
        self.life = max(0, self.life - amount)
        return self.life

    def charge_to(self, level: int) -> None:
        """Raise ``life`` to at least ``level``."""
        self.life = max(self.life, level)

    def swap(self, other: Cell) -> None:
        """Exchange full contents with ``other``."""
        self.kind, other.kind = other.kind, self.kind
        self.life, other.life = other.life, self.life

    @property
    def is_empty(self) -> bool:
        return self.kind is Material.EMPTY
