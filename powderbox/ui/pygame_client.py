"""Pygame 2D front-end for the Powderbox sandbox.

Renders grid snapshots into a window, paints with the mouse and maps
keys onto engine commands.  The simulation steps at a configurable tick
rate while the display refreshes at the Pygame frame rate.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

import numpy as np
import pygame

if TYPE_CHECKING:
    from powderbox.simulation.engine import SimulationEngine

from powderbox.materials.catalog import entry_for, next_entry
from powderbox.materials.material import Material

_BG = (0, 0, 0)
_PANEL_BG = (24, 24, 28)
_TEXT = (200, 200, 200)
_CURSOR = (255, 255, 255)
_LIVE_WATER = (250, 240, 90)

M = Material

_COLOURS: dict[Material, tuple[int, int, int]] = {
    M.EMPTY: _BG,
    M.SAND: (220, 190, 110),
    M.GUNPOWDER: (90, 85, 80),
    M.ASH: (150, 140, 150),
    M.SNOW: (240, 240, 250),
    M.WATER: (40, 110, 230),
    M.SALTWATER: (70, 150, 220),
    M.OIL: (90, 60, 30),
    M.ETHANOL: (170, 220, 240),
    M.ACID: (140, 250, 60),
    M.LAVA: (240, 80, 20),
    M.MERCURY: (180, 180, 200),
    M.STONE: (120, 120, 120),
    M.GLASS: (190, 230, 235),
    M.WALL: (70, 70, 80),
    M.WOOD: (130, 80, 40),
    M.PLANT: (40, 170, 50),
    M.METAL: (160, 165, 175),
    M.WIRE: (200, 120, 60),
    M.ICE: (170, 220, 255),
    M.COAL: (35, 35, 35),
    M.DIRT: (115, 80, 45),
    M.WET_DIRT: (80, 55, 30),
    M.SEAWEED: (20, 120, 70),
    M.SMOKE: (100, 100, 100),
    M.STEAM: (210, 210, 220),
    M.GAS: (170, 150, 190),
    M.TOXIC_GAS: (120, 200, 40),
    M.HYDROGEN: (200, 180, 230),
    M.CHLORINE: (200, 230, 80),
    M.FIRE: (255, 140, 20),
    M.LIGHTNING: (255, 255, 120),
    M.HUMAN: (80, 220, 120),
    M.ZOMBIE: (200, 40, 40),
}

# Number-row quick picks.
_QUICK_KEYS: dict[int, Material] = {
    pygame.K_1: M.SAND,
    pygame.K_2: M.WATER,
    pygame.K_3: M.STONE,
    pygame.K_4: M.WOOD,
    pygame.K_5: M.FIRE,
    pygame.K_6: M.OIL,
    pygame.K_7: M.LAVA,
    pygame.K_8: M.PLANT,
    pygame.K_9: M.GUNPOWDER,
    pygame.K_0: M.ACID,
    pygame.K_w: M.WALL,
    pygame.K_l: M.LIGHTNING,
    pygame.K_h: M.HUMAN,
    pygame.K_z: M.ZOMBIE,
    pygame.K_d: M.DIRT,
}


def _palette() -> np.ndarray:
    """Build a lookup table from ``Material.value`` to RGB."""
    size = max(kind.value for kind in Material) + 1
    table = np.zeros((size, 3), dtype=np.uint8)
    for kind, colour in _COLOURS.items():
        table[kind.value] = colour
    return table


class PygameRenderer:
    """Renders a SimulationEngine state into a Pygame window.

    Attributes:
        engine: The simulation engine to visualise.
        cell_size: Pixel size of each grid cell.
        screen: The Pygame display surface.
    """

    # Speed presets: ticks per second
    _SPEED_STEPS: ClassVar[list[float]] = [
        1.0,
        5.0,
        10.0,
        15.0,
        30.0,
        60.0,
        120.0,
    ]

    def __init__(
        self,
        engine: SimulationEngine,
        cell_size: int = 6,
        ticks_per_second: float = 60.0,
    ) -> None:
        """Initialise the renderer.

        Args:
            engine: The simulation engine to render.
            cell_size: Pixel width/height per grid cell.
            ticks_per_second: Simulation ticks per real-time second.
        """
        self.engine = engine
        self.cell_size = cell_size
        self.ticks_per_second = ticks_per_second
        self._speed_index = self._nearest_speed(ticks_per_second)
        self._tick_accumulator = 0.0
        self._palette = _palette()
        self._panel_width = 260

        pygame.init()
        self.screen = pygame.display.set_mode(self._window_size(), pygame.RESIZABLE)
        pygame.display.set_caption("Powderbox")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("monospace", 14)
        self.running = True

    def _window_size(self) -> tuple[int, int]:
        grid = self.engine.grid
        return (
            grid.width * self.cell_size + self._panel_width,
            grid.height * self.cell_size,
        )

    def _nearest_speed(self, tps: float) -> int:
        """Return the index of the closest speed preset."""
        best = 0
        best_diff = abs(self._SPEED_STEPS[0] - tps)
        for i, s in enumerate(self._SPEED_STEPS):
            diff = abs(s - tps)
            if diff < best_diff:
                best, best_diff = i, diff
        return best

    def run(self, fps: int = 60) -> None:
        """Main loop: handle events, step sim, render.

        Args:
            fps: Target frames per second.
        """
        while self.running:
            dt = self.clock.tick(fps) / 1000.0  # seconds elapsed
            self._handle_events()
            self._paint()
            if not self.engine.status.paused:
                self._tick_accumulator += self.ticks_per_second * dt
                steps = int(self._tick_accumulator)
                self._tick_accumulator -= steps
                for _ in range(steps):
                    self.engine.step()
            self._draw()

        pygame.quit()

    def _grid_pos(self, pixel: tuple[int, int]) -> tuple[int, int]:
        return pixel[0] // self.cell_size, pixel[1] // self.cell_size

    def _paint(self) -> None:
        """Apply the brush while a mouse button is held over the grid."""
        left, _, right = pygame.mouse.get_pressed()
        if not (left or right):
            return
        x, y = self._grid_pos(pygame.mouse.get_pos())
        if not self.engine.grid.in_bounds(x, y):
            return
        if left:
            self.engine.apply_brush(x, y)
        else:
            self.engine.erase(x, y, self.engine.status.brush_size)

    def _handle_events(self) -> None:
        """Process Pygame input events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.VIDEORESIZE:
                width = max(1, (event.w - self._panel_width) // self.cell_size)
                height = max(1, event.h // self.cell_size)
                self.engine.resize(width, height)
                self.screen = pygame.display.set_mode(
                    self._window_size(),
                    pygame.RESIZABLE,
                )
            elif event.type == pygame.KEYDOWN:
                self._handle_key(event)

    def _handle_key(self, event: pygame.event.Event) -> None:
        status = self.engine.status
        key = event.key
        if key in (pygame.K_ESCAPE, pygame.K_q):
            self.running = False
        elif key in (pygame.K_SPACE, pygame.K_p):
            status.toggle_pause()
        elif key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
            status.grow_brush()
        elif key in (pygame.K_MINUS, pygame.K_KP_MINUS):
            status.shrink_brush()
        elif key in (pygame.K_c, pygame.K_x):
            self.engine.clear()
        elif key == pygame.K_TAB:
            step = -1 if event.mod & pygame.KMOD_SHIFT else 1
            status.select(next_entry(status.current, step).kind)
        elif key == pygame.K_PERIOD:
            self._speed_index = min(len(self._SPEED_STEPS) - 1, self._speed_index + 1)
            self.ticks_per_second = self._SPEED_STEPS[self._speed_index]
        elif key == pygame.K_COMMA:
            self._speed_index = max(0, self._speed_index - 1)
            self.ticks_per_second = self._SPEED_STEPS[self._speed_index]
        elif key in _QUICK_KEYS:
            status.select(_QUICK_KEYS[key])

    def _draw(self) -> None:
        """Render one frame."""
        self.screen.fill(_BG)
        self._draw_grid()
        self._draw_cursor()
        self._draw_info_panel()
        pygame.display.flip()

    def _frame_pixels(self) -> np.ndarray:
        """Turn the current snapshot into an RGB array of shape (h, w, 3)."""
        snap = self.engine.snapshot()
        rgb = self._palette[snap.kinds]

        # Live water glows; agents blink with their animation counter.
        live = (
            (snap.kinds == M.WATER.value) | (snap.kinds == M.SALTWATER.value)
        ) & (snap.life > 0)
        rgb[live] = _LIVE_WATER
        agents = (snap.kinds == M.HUMAN.value) | (snap.kinds == M.ZOMBIE.value)
        blink = agents & ((snap.life // 6) % 2 == 1)
        rgb[blink] = rgb[blink] // 2
        return rgb

    def _draw_grid(self) -> None:
        rgb = self._frame_pixels()
        surface = pygame.surfarray.make_surface(rgb.swapaxes(0, 1))
        grid = self.engine.grid
        scaled = pygame.transform.scale(
            surface,
            (grid.width * self.cell_size, grid.height * self.cell_size),
        )
        self.screen.blit(scaled, (0, 0))

    def _draw_cursor(self) -> None:
        x, y = self._grid_pos(pygame.mouse.get_pos())
        if not self.engine.grid.in_bounds(x, y):
            return
        cs = self.cell_size
        radius = (self.engine.status.brush_size + 0.5) * cs
        centre = (x * cs + cs // 2, y * cs + cs // 2)
        pygame.draw.circle(self.screen, _CURSOR, centre, int(radius), width=1)

    def _draw_info_panel(self) -> None:
        """Draw a stats panel on the right side of the window."""
        panel_x = self.engine.grid.width * self.cell_size
        pygame.draw.rect(
            self.screen,
            _PANEL_BG,
            (panel_x, 0, self._panel_width, self.screen.get_height()),
        )
        status = self.engine.status
        entry = entry_for(status.current)

        lines = [
            f"Tick: {self.engine.tick}",
            f"Speed: {self.ticks_per_second:.0f} t/s",
            f"{'PAUSED' if status.paused else 'RUNNING'}",
            "",
            f"Tool: {entry.label} ({entry.category.title})",
            f"  {entry.description}",
            f"Brush r={status.brush_size}",
            "",
            "--- Controls ---",
            "LMB: draw  RMB: erase",
            "+/-: brush  ,/.: speed",
            "TAB: next tool",
            "1-0 W L H Z D: quick pick",
            "C/X: clear",
            "SPACE/P: pause",
            "ESC/Q: quit",
        ]

        y = 10
        for line in lines:
            surf = self.font.render(line, True, _TEXT)
            self.screen.blit(surf, (panel_x + 10, y))
            y += 18
