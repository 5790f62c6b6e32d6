"""ToolStatus — the read-only status block a front-end displays.

Tracks which material the brush places, the brush radius and whether
the simulation is paused.  The engine never consults it while ticking.
"""

from __future__ import annotations

from dataclasses import dataclass

from powderbox.materials.material import Material, display_name

MIN_BRUSH = 1
MAX_BRUSH = 8


@dataclass
class ToolStatus:
    """Current tool selection.

    Attributes:
        current: Material the brush places.
        brush_size: Brush radius, kept within ``MIN_BRUSH..MAX_BRUSH``.
        paused: Whether the front-end has stopped ticking.
    """

    current: Material = Material.SAND
    brush_size: int = MIN_BRUSH
    paused: bool = False

    def __post_init__(self) -> None:
        self.brush_size = min(MAX_BRUSH, max(MIN_BRUSH, self.brush_size))

    def select(self, kind: Material) -> None:
        self.current = kind

    def grow_brush(self) -> None:
        self.brush_size = min(MAX_BRUSH, self.brush_size + 1)

    def shrink_brush(self) -> None:
        self.brush_size = max(MIN_BRUSH, self.brush_size - 1)

    def toggle_pause(self) -> None:
        self.paused = not self.paused

    def describe(self) -> str:
        """One-line summary, e.g. ``Current: Sand | Brush r=1``."""
        text = f"Current: {display_name(self.current)} | Brush r={self.brush_size}"
        if self.paused:
            text += " [PAUSED]"
        return text
