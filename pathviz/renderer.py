"""
Pygame renderer: draws the toolbar, status line and grid cells.
"""

from __future__ import annotations
import pygame
import logging
from typing import TYPE_CHECKING, Optional, Tuple

if TYPE_CHECKING:
    from .grid import Grid

from .config import (
    BUTTON_ACTIVE_COLOR,
    BUTTON_COLOR,
    BUTTON_HEIGHT,
    BUTTON_MARGIN,
    CELL_SIZE,
    EMPTY_COLOR,
    END_COLOR,
    FONT_SIZE,
    GRID_LINE_COLOR,
    OBSTACLE_COLOR,
    PATH_COLOR,
    START_COLOR,
    TEXT_COLOR,
    TOOLBAR_COLOR,
    TOOLBAR_HEIGHT,
)
from .input_handler import BUTTON_MODES, button_rects

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]


def cell_color(walkable: bool, is_start: bool, is_end: bool, on_path: bool) -> Color:
    """Pick a cell's fill color; start and end win over everything else."""
    if is_start:
        return START_COLOR
    if is_end:
        return END_COLOR
    if not walkable:
        return OBSTACLE_COLOR
    if on_path:
        return PATH_COLOR
    return EMPTY_COLOR


def status_line(mode: str, status: str) -> str:
    """Text shown under the buttons: the edit mode and the last result."""
    line = f"Mode: {mode}"
    if status:
        line += f"  |  {status}"
    return line


class Renderer:
    """Draws the editor onto a pygame surface."""

    def __init__(
        self,
        width: int,
        height: int,
        cell_size: int = CELL_SIZE,
        toolbar_height: int = TOOLBAR_HEIGHT,
    ) -> None:
        self.width = width
        self.height = height
        self.cell_size = cell_size
        self.toolbar_height = toolbar_height
        self.buttons = button_rects(width)
        # Font is created lazily so the grid can be drawn without pygame.font
        self._font: Optional[pygame.font.Font] = None

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, FONT_SIZE)
            logger.debug("Loaded default font at size %d", FONT_SIZE)
        return self._font

    def draw_grid(self, surface: pygame.Surface, grid: Grid) -> None:
        """Fill every cell with its state color and outline it."""
        size = self.cell_size
        for cell in grid.cells():
            rect = pygame.Rect(
                cell.col * size, self.toolbar_height + cell.row * size, size, size
            )
            color = cell_color(*grid.cell_state(cell.row, cell.col))
            pygame.draw.rect(surface, color, rect)
            pygame.draw.rect(surface, GRID_LINE_COLOR, rect, 1)

    def draw_toolbar(self, surface: pygame.Surface, mode: str, status: str) -> None:
        """Draw the buttons, highlighting the active mode, and the status line."""
        font = self._get_font()
        surface.fill(TOOLBAR_COLOR, (0, 0, self.width, self.toolbar_height))
        for label, rect in self.buttons.items():
            active = BUTTON_MODES.get(label) == mode
            pygame.draw.rect(
                surface, BUTTON_ACTIVE_COLOR if active else BUTTON_COLOR, rect
            )
            pygame.draw.rect(surface, GRID_LINE_COLOR, rect, 1)
            text = font.render(label, True, TEXT_COLOR)
            surface.blit(text, text.get_rect(center=rect.center))
        text = font.render(status_line(mode, status), True, TEXT_COLOR)
        surface.blit(text, (BUTTON_MARGIN, BUTTON_MARGIN * 2 + BUTTON_HEIGHT))

    def render(
        self, surface: pygame.Surface, grid: Grid, mode: str, status: str = ""
    ) -> None:
        """Render the entire frame and flip the display."""
        self.draw_toolbar(surface, mode, status)
        self.draw_grid(surface, grid)
        pygame.display.flip()
