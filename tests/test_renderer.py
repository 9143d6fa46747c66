import pygame
import pytest

from pathviz.config import (
    BUTTON_ACTIVE_COLOR,
    BUTTON_COLOR,
    BUTTON_HEIGHT,
    BUTTON_MARGIN,
    EMPTY_COLOR,
    END_COLOR,
    OBSTACLE_COLOR,
    PATH_COLOR,
    MODE_END,
    MODE_START,
    START_COLOR,
    TOOLBAR_COLOR,
    TOOLBAR_HEIGHT,
)
from pathviz.grid import Grid
from pathviz.pathfinding import run_search
from pathviz.renderer import Renderer, cell_color, status_line


@pytest.mark.parametrize(
    "state,expected",
    [
        ((True, False, False, False), EMPTY_COLOR),
        ((False, False, False, False), OBSTACLE_COLOR),
        ((True, False, False, True), PATH_COLOR),
        ((True, True, False, True), START_COLOR),
        ((True, False, True, False), END_COLOR),
        # Start wins when start and end share a cell
        ((True, True, True, False), START_COLOR),
    ],
)
def test_cell_color_priority(state, expected):
    assert cell_color(*state) == expected


def test_draw_grid_fills_cells():
    grid = Grid.from_rows(["S.E", "###"])
    grid.set_walkable(1, 1, True)
    run_search(grid)
    renderer = Renderer(30, 30, cell_size=10, toolbar_height=10)
    surface = pygame.Surface((30, 30))
    renderer.draw_grid(surface, grid)

    def center(row, col):
        return tuple(surface.get_at((col * 10 + 5, 10 + row * 10 + 5)))[:3]

    assert center(0, 0) == START_COLOR
    assert center(0, 1) == PATH_COLOR
    assert center(0, 2) == END_COLOR
    assert center(1, 0) == OBSTACLE_COLOR
    assert center(1, 1) == EMPTY_COLOR


@pytest.mark.parametrize(
    "mode,status,expected",
    [
        ("start", "", "Mode: start"),
        ("end", "No path found", "Mode: end  |  No path found"),
    ],
)
def test_status_line_text(mode, status, expected):
    assert status_line(mode, status) == expected


def test_toolbar_highlights_active_mode():
    renderer = Renderer(600, 660)
    surface = pygame.Surface((600, 660))
    renderer.draw_toolbar(surface, MODE_END, "No path found")

    def corner(label):
        # Just inside the 1px outline, clear of the centered label text
        rect = renderer.buttons[label]
        return tuple(surface.get_at((rect.x + 2, rect.y + 2)))[:3]

    assert corner("End") == BUTTON_ACTIVE_COLOR
    assert corner("Start") == BUTTON_COLOR
    assert corner("Run") == BUTTON_COLOR
    # Toolbar background is filled outside the buttons
    assert tuple(surface.get_at((599, 0)))[:3] == TOOLBAR_COLOR
    # Status line text is drawn below the button row
    status_top = BUTTON_MARGIN * 2 + BUTTON_HEIGHT
    status_pixels = {
        tuple(surface.get_at((x, y)))[:3]
        for x in range(BUTTON_MARGIN, 300)
        for y in range(status_top, TOOLBAR_HEIGHT)
    }
    assert status_pixels - {TOOLBAR_COLOR}


def test_render_draws_frame_and_flips(monkeypatch):
    flips = []
    monkeypatch.setattr(pygame.display, "flip", lambda: flips.append(True))
    grid = Grid.from_rows(["S.E"])
    renderer = Renderer(300, TOOLBAR_HEIGHT + 10, cell_size=10)
    surface = pygame.Surface((300, TOOLBAR_HEIGHT + 10))
    renderer.render(surface, grid, MODE_START, "")
    assert flips == [True]
    assert tuple(surface.get_at((5, TOOLBAR_HEIGHT + 5)))[:3] == START_COLOR
