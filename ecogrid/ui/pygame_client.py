"""Pygame 2D visualization for the ecogrid simulation.

Draws each cell's terrain, then its occupant if any, with a side panel
showing the tick counter and population.  The window doubles as the tick
driver: the simulation steps at a configurable rate while the display
refreshes at the Pygame frame rate, and can be paused, single-stepped
and reset from the keyboard.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

import pygame

if TYPE_CHECKING:
    from ecogrid.simulation.engine import SimulationEngine

from ecogrid.life.species import Species

# Colour palette
_BG = (20, 20, 20)
_TEXT = (200, 200, 200)


class PygameRenderer:
    """Renders a SimulationEngine state into a Pygame window.

    Attributes:
        engine: The simulation engine to visualise.
        cell_size: Pixel size of each grid cell.
        screen: The Pygame display surface.
    """

    # Speed presets: ticks per second
    _SPEED_STEPS: ClassVar[list[float]] = [
        0.5,
        1.0,
        2.0,
        5.0,
        10.0,
        20.0,
        30.0,
        60.0,
    ]

    def __init__(
        self,
        engine: SimulationEngine,
        cell_size: int = 10,
        ticks_per_second: float = 5.0,
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

        w = engine.current.width * cell_size
        h = engine.current.depth * cell_size
        self._panel_width = 220
        self._win_w = w + self._panel_width
        self._win_h = max(h, 260)

        pygame.init()
        self.screen = pygame.display.set_mode((self._win_w, self._win_h))
        pygame.display.set_caption("ecogrid")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("monospace", 14)
        self.running = True
        self.paused = True

    def _nearest_speed(self, tps: float) -> int:
        """Return the index of the closest speed preset."""
        return min(
            range(len(self._SPEED_STEPS)),
            key=lambda i: abs(self._SPEED_STEPS[i] - tps),
        )

    def run(self, fps: int = 30) -> None:
        """Main loop: handle events, step sim, render.

        Args:
            fps: Target frames per second.
        """
        while self.running:
            dt = self.clock.tick(fps) / 1000.0  # seconds elapsed
            self._handle_events()
            if not self.paused:
                self._tick_accumulator += self.ticks_per_second * dt
                steps = int(self._tick_accumulator)
                self._tick_accumulator -= steps
                for _ in range(steps):
                    self.engine.step()
            self._draw()

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
                elif event.key == pygame.K_n:
                    self.engine.step()
                elif event.key == pygame.K_r:
                    self.paused = True
                    self._tick_accumulator = 0.0
                    self.engine.reset()
                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS):
                    self._speed_index = min(
                        len(self._SPEED_STEPS) - 1,
                        self._speed_index + 1,
                    )
                    self.ticks_per_second = self._SPEED_STEPS[self._speed_index]
                elif event.key == pygame.K_MINUS:
                    self._speed_index = max(0, self._speed_index - 1)
                    self.ticks_per_second = self._SPEED_STEPS[self._speed_index]

    def _draw(self) -> None:
        """Render one frame."""
        self.screen.fill(_BG)
        self._draw_field()
        self._draw_info_panel()
        pygame.display.flip()

    def _draw_field(self) -> None:
        """Draw terrain, then any occupant on top of it."""
        cs = self.cell_size
        grid = self.engine.current
        for loc in grid.locations():
            rect = (loc.col * cs, loc.row * cs, cs, cs)
            pygame.draw.rect(self.screen, grid.terrain_at(loc).colour, rect)
            actor = grid.occupant_at(loc)
            if actor is not None:
                pygame.draw.rect(self.screen, actor.profile.colour, rect)

    def _draw_info_panel(self) -> None:
        """Draw a stats panel on the right side of the window."""
        panel_x = self.engine.current.width * self.cell_size + 10
        y = 10
        stats = self.engine.population()

        lines = [
            f"Step: {self.engine.tick}",
            f"Speed: {self.ticks_per_second:.1f} t/s",
            f"{'PAUSED' if self.paused else 'RUNNING'}",
            "",
            "--- Population ---",
        ]
        lines += [f"{s.label}: {stats[s]}" for s in Species]
        if not stats.is_viable():
            lines.append("(not viable)")

        lines += [
            "",
            "--- Controls ---",
            "SPACE: start/stop",
            "N: single step",
            "R: reset",
            "+/-: speed",
            "ESC: quit",
        ]

        for line in lines:
            surf = self.font.render(line, True, _TEXT)
            self.screen.blit(surf, (panel_x, y))
            y += 18
