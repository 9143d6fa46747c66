from __future__ import annotations
import logging
import pygame
from typing import Optional

from .config import (
    FPS,
    LOG_FORMAT,
    LOG_LEVEL,
    MODE_END,
    MODE_OBSTACLE,
    MODE_START,
    MODES,
    CELL_SIZE,
    COLS,
    ROWS,
    TOOLBAR_HEIGHT,
    WINDOW_TITLE,
)
from .grid import Grid
from .input_handler import InputHandler
from .pathfinding import SearchResult, run_search
from .renderer import Renderer

logger = logging.getLogger(__name__)


def apply_edit(grid: Grid, mode: str, row: int, col: int) -> bool:
    """
    Apply one grid click in the given edit mode.
    Returns True if the grid changed.
    """
    if mode == MODE_START:
        return grid.set_start(row, col)
    if mode == MODE_END:
        return grid.set_end(row, col)
    if mode == MODE_OBSTACLE:
        return grid.toggle_obstacle(row, col)
    logger.error("Unknown edit mode: %r", mode)
    raise ValueError(f"Unknown edit mode: {mode!r}")


class App:
    """Main application: owns the grid, the window and the event loop."""

    def __init__(
        self,
        rows: int = ROWS,
        cols: int = COLS,
        clock: Optional[pygame.time.Clock] = None,
    ) -> None:
        pygame.init()
        self.screen_width = cols * CELL_SIZE
        self.screen_height = rows * CELL_SIZE + TOOLBAR_HEIGHT
        self.screen = pygame.display.set_mode(
            (self.screen_width, self.screen_height)
        )
        pygame.display.set_caption(WINDOW_TITLE)
        # Clock for frame rate (injectable for testing)
        self.clock = clock or pygame.time.Clock()
        self.fps = FPS
        self.grid = Grid(rows, cols)
        self.mode = MODE_START
        # Result of the most recent search, shown in the status line
        self.result: Optional[SearchResult] = None
        self.renderer = Renderer(self.screen_width, self.screen_height)
        self.input = InputHandler(rows=rows, cols=cols)
        self.running = True

    @property
    def status(self) -> str:
        return self.result.message if self.result is not None else ""

    def select_mode(self, mode: str) -> None:
        if mode not in MODES:
            raise ValueError(f"Unknown edit mode: {mode!r}")
        self.mode = mode

    def edit(self, row: int, col: int) -> None:
        """Apply a grid click in the current mode."""
        if apply_edit(self.grid, self.mode, row, col) and self.result is not None:
            # Drop the stale path highlight once the layout changes
            self.grid.reset_search_state()
            self.result = None

    def run_search(self) -> SearchResult:
        self.result = run_search(self.grid)
        return self.result

    def clear(self) -> None:
        """Clear all: fresh cells, no start or end."""
        self.grid.reinitialize()
        self.result = None
        logger.info("Grid cleared")

    def handle_events(self) -> None:
        """Process input via InputHandler and dispatch editor commands."""
        self.input.process_events()
        if self.input.should_quit():
            self.running = False
            return
        # Commands are applied in the order the user issued them
        for command in self.input.get_commands():
            name = command[0]
            if name == "mode":
                self.select_mode(command[1])
            elif name == "click":
                self.edit(command[1], command[2])
            elif name == "clear":
                self.clear()
            elif name == "run":
                self.run_search()

    def render(self) -> None:
        self.renderer.render(self.screen, self.grid, self.mode, self.status)

    def run(self) -> None:
        """Main loop: handle events and render until quit."""
        while self.running:
            self.clock.tick(self.fps)
            self.handle_events()
            self.render()
        pygame.quit()


def main() -> None:
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    App().run()
