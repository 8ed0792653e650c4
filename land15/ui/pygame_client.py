"""Pygame 2D visualization for the Land15 island.

Draws one coloured tile per cell, picked by cover type, from a read-only
``BoardView``.  The simulation advances at a configurable number of days
per second while the display refreshes at the Pygame frame rate.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

import pygame

from land15.generation.pipeline import cover_counts
from land15.world.square import Lulc

if TYPE_CHECKING:
    from land15.simulation.engine import SimulationEngine

# Colour palette
_BG = (10, 10, 20)
_TEXT = (200, 200, 200)

_TILE_COLOURS: dict[Lulc, tuple[int, int, int]] = {
    Lulc.UNKNOWN: (255, 0, 255),
    Lulc.SAND: (222, 204, 140),
    Lulc.WATER: (40, 80, 170),
    Lulc.TREES: (30, 100, 40),
    Lulc.LOW_BUILT: (150, 130, 120),
    Lulc.HIGH_BUILT: (110, 100, 100),
    Lulc.GRASS: (100, 170, 70),
    Lulc.ROCK: (120, 120, 120),
    Lulc.AGRICULTURE: (190, 170, 60),
    Lulc.WASTELAND: (90, 70, 50),
    Lulc.BARE: (160, 130, 100),
}

# Water alternates between two shades every _WATER_ANIM_FRAMES frames
_WATER_ALT = (50, 95, 185)
_WATER_ANIM_FRAMES = 60


class PygameRenderer:
    """Renders a SimulationEngine's island into a Pygame window.

    The renderer reads cell state only through ``engine.view()`` and
    advances time only through ``engine.advance_day()``.

    Attributes:
        engine: The simulation engine to drive.
        view: Read-only view of the current board.
        cell_size: Pixel size of each grid cell.
        screen: The Pygame display surface.
    """

    # Speed presets: days per second
    _SPEED_STEPS: ClassVar[list[float]] = [
        0.5,
        1.0,
        2.0,
        5.0,
        10.0,
        30.0,
        60.0,
        120.0,
        365.0,
    ]

    def __init__(
        self,
        engine: SimulationEngine,
        cell_size: int = 16,
        days_per_second: float = 1.0,
    ) -> None:
        """Initialise the renderer.

        Args:
            engine: A ready simulation engine.
            cell_size: Pixel width/height per grid cell.
            days_per_second: Simulated days per real-time second.
        """
        self.engine = engine
        self.view = engine.view()
        self.cell_size = cell_size
        self.days_per_second = days_per_second
        self._speed_index = self._nearest_speed(days_per_second)
        self._day_accumulator = 0.0
        self._frame = 0

        self._panel_width = 200
        self._win_w = self.view.width * cell_size + self._panel_width
        self._win_h = max(self.view.height * cell_size, 240)

        pygame.init()
        self.screen = pygame.display.set_mode((self._win_w, self._win_h))
        pygame.display.set_caption("Land15")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("monospace", 14)
        self.running = True
        self.paused = False

    def _nearest_speed(self, dps: float) -> int:
        """Return the index of the closest speed preset."""
        return min(
            range(len(self._SPEED_STEPS)),
            key=lambda i: abs(self._SPEED_STEPS[i] - dps),
        )

    def run(self, fps: int = 60) -> None:
        """Main loop: handle events, step sim, render.

        Args:
            fps: Target frames per second.
        """
        while self.running:
            dt = self.clock.tick(fps) / 1000.0
            self._handle_events()
            if not self.paused:
                self._day_accumulator += self.days_per_second * dt
                steps = int(self._day_accumulator)
                self._day_accumulator -= steps
                self.engine.run(steps)
            self._draw()
            self._frame += 1

        pygame.quit()

    def _handle_events(self) -> None:
        """Process Pygame input events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_SPACE:
                    self.paused = not self.paused
                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS):
                    self._speed_index = min(
                        len(self._SPEED_STEPS) - 1,
                        self._speed_index + 1,
                    )
                    self.days_per_second = self._SPEED_STEPS[self._speed_index]
                elif event.key == pygame.K_MINUS:
                    self._speed_index = max(0, self._speed_index - 1)
                    self.days_per_second = self._SPEED_STEPS[self._speed_index]

    def _draw(self) -> None:
        """Render one frame."""
        self.screen.fill(_BG)
        self._draw_tiles()
        self._draw_info_panel()
        pygame.display.flip()

    def _draw_tiles(self) -> None:
        """Draw one tile per cell, coloured by cover type."""
        cs = self.cell_size
        cover = self.view.field("cover")
        water_alt = (self._frame // _WATER_ANIM_FRAMES) & 1
        for y in range(self.view.height):
            for x in range(self.view.width):
                lulc = Lulc(int(cover[y, x]))
                colour = _TILE_COLOURS[lulc]
                if lulc is Lulc.WATER and water_alt:
                    colour = _WATER_ALT
                pygame.draw.rect(self.screen, colour, (x * cs, y * cs, cs, cs))

    def _draw_info_panel(self) -> None:
        """Draw a stats panel on the right side of the window."""
        panel_x = self.view.width * self.cell_size + 10
        y = 10

        lines = [
            f"Day: {self.engine.day}",
            f"Speed: {self.days_per_second:.1f} d/s",
            f"{'PAUSED' if self.paused else 'RUNNING'}",
            "",
            "--- Cover ---",
        ]
        counts = cover_counts(self.view.field("cover"))
        lines += [f"{lulc.name.lower()}: {n}" for lulc, n in counts.items() if n]
        lines += [
            "",
            "--- Controls ---",
            "SPACE: pause",
            "+/-: speed",
            "ESC: quit",
        ]

        for line in lines:
            surf = self.font.render(line, True, _TEXT)
            self.screen.blit(surf, (panel_x, y))
            y += 18
