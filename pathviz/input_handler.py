"""
Input handling abstraction to decouple Pygame input from the grid editor.
"""

from __future__ import annotations
import pygame
from typing import Dict, Iterable, List, Optional, Tuple, Union

from .config import (
    BUTTON_HEIGHT,
    BUTTON_LABELS,
    BUTTON_MARGIN,
    CELL_SIZE,
    COLS,
    MODE_END,
    MODE_OBSTACLE,
    MODE_START,
    ROWS,
    SCREEN_WIDTH,
    TOOLBAR_HEIGHT,
)

# Toolbar button label -> edit mode it selects
BUTTON_MODES = {"Start": MODE_START, "End": MODE_END, "Obstacle": MODE_OBSTACLE}

# Keyboard shortcuts for the edit modes
KEY_MODES = {pygame.K_s: MODE_START, pygame.K_e: MODE_END, pygame.K_o: MODE_OBSTACLE}

# Command name followed by its arguments
Command = Tuple[Union[str, int], ...]


def button_rects(width: int = SCREEN_WIDTH) -> Dict[str, pygame.Rect]:
    """Lay out the toolbar buttons evenly across the top of the window."""
    count = len(BUTTON_LABELS)
    button_w = (width - BUTTON_MARGIN * (count + 1)) // count
    rects = {}
    for i, label in enumerate(BUTTON_LABELS):
        x = BUTTON_MARGIN + i * (button_w + BUTTON_MARGIN)
        rects[label] = pygame.Rect(x, BUTTON_MARGIN, button_w, BUTTON_HEIGHT)
    return rects


class InputHandler:
    """
    Gathers per-frame input. Processes Pygame events into editor actions:
    mode changes, grid clicks, run, clear and quit.
    """

    def __init__(
        self,
        rows: int = ROWS,
        cols: int = COLS,
        cell_size: int = CELL_SIZE,
        toolbar_height: int = TOOLBAR_HEIGHT,
    ) -> None:
        self.rows = rows
        self.cols = cols
        self.cell_size = cell_size
        self.toolbar_height = toolbar_height
        self._buttons = button_rects(cols * cell_size)
        self._quit = False
        # Editor commands issued this frame, in event order:
        # ("mode", mode), ("click", row, col), ("run",), ("clear",)
        self._commands: List[Command] = []

    def cell_at(self, x: int, y: int) -> Optional[Tuple[int, int]]:
        """Map a pixel position to (row, col), or None outside the grid."""
        gy = y - self.toolbar_height
        if x < 0 or gy < 0:
            return None
        row, col = gy // self.cell_size, x // self.cell_size
        if row >= self.rows or col >= self.cols:
            return None
        return (row, col)

    def button_at(self, x: int, y: int) -> Optional[str]:
        """Return the label of the toolbar button under (x, y), if any."""
        for label, rect in self._buttons.items():
            if rect.collidepoint(x, y):
                return label
        return None

    def process_events(self, events: Optional[Iterable] = None) -> None:
        """
        Poll Pygame events (or consume the given ones) and record the
        frame's editor commands in the order they happened.
        """
        self._quit = False
        self._commands = []
        if events is None:
            events = pygame.event.get()
        for event in events:
            if event.type == pygame.QUIT:
                self._quit = True
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self._quit = True
                elif event.key in (pygame.K_RETURN, pygame.K_SPACE):
                    self._commands.append(("run",))
                elif event.key == pygame.K_c:
                    self._commands.append(("clear",))
                elif event.key in KEY_MODES:
                    self._commands.append(("mode", KEY_MODES[event.key]))
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self._handle_click(*event.pos)

    def _handle_click(self, x: int, y: int) -> None:
        # Buttons only live in the toolbar strip above the grid
        label = self.button_at(x, y) if y < self.toolbar_height else None
        if label in BUTTON_MODES:
            self._commands.append(("mode", BUTTON_MODES[label]))
        elif label == "Run":
            self._commands.append(("run",))
        elif label == "Clear":
            self._commands.append(("clear",))
        else:
            cell = self.cell_at(x, y)
            if cell is not None:
                self._commands.append(("click",) + cell)

    def get_commands(self) -> List[Command]:
        """Return this frame's editor commands in event order."""
        return list(self._commands)

    def should_quit(self) -> bool:
        """Return True if a quit command was issued this frame."""
        return self._quit

    def run_pressed(self) -> bool:
        """Return True if Run (button, Return or Space) was pressed this frame."""
        return ("run",) in self._commands

    def clear_pressed(self) -> bool:
        return ("clear",) in self._commands

    def mode_selected(self) -> Optional[str]:
        """Return the last edit mode chosen this frame, or None."""
        modes = [cmd[1] for cmd in self._commands if cmd[0] == "mode"]
        return modes[-1] if modes else None

    def get_clicks(self) -> List[Tuple[int, int]]:
        """Return the grid cells clicked this frame."""
        return [(cmd[1], cmd[2]) for cmd in self._commands if cmd[0] == "click"]
