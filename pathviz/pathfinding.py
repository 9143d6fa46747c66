"""
Pathfinding utilities: grid-based A* search over a Grid.
"""

from __future__ import annotations
import heapq
import logging
from typing import TYPE_CHECKING, List, Set, Tuple

from .config import STEP_COST

if TYPE_CHECKING:
    from .grid import Cell, Grid, Pos

logger = logging.getLogger(__name__)


class SearchResult:
    """Outcome of one search run."""

    found = False
    message = ""

    def __init__(self, expanded: int = 0) -> None:
        # Number of cells closed during the run
        self.expanded = expanded


class PathFound(SearchResult):
    found = True

    def __init__(self, path: List[Cell], expanded: int = 0) -> None:
        super().__init__(expanded)
        # Cells from start to end inclusive
        self.path = path

    @property
    def steps(self) -> int:
        return len(self.path) - 1

    @property
    def message(self) -> str:
        return f"Path found: {self.steps} steps"

    def positions(self) -> List[Pos]:
        return [cell.pos for cell in self.path]

    def __repr__(self) -> str:
        return f"<PathFound steps={self.steps} expanded={self.expanded}>"


class NoPathFound(SearchResult):
    message = "No path found"

    def __repr__(self) -> str:
        return f"<NoPathFound expanded={self.expanded}>"


class MissingEndpoints(SearchResult):
    message = "Set a start and an end first"

    def __repr__(self) -> str:
        return "<MissingEndpoints>"


def heuristic(a: Pos, b: Pos) -> int:
    """Manhattan distance heuristic for grid."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def reconstruct_path(grid: Grid, end: Cell) -> List[Cell]:
    """
    Follow parent links back from end, flag every intermediate cell as on the
    path and return the cells ordered from start to end.
    """
    path = [end]
    current = end
    while current.parent is not None:
        current = grid.cell(*current.parent)
        path.append(current)
    path.reverse()
    # Endpoints are never flagged
    for cell in path[1:-1]:
        cell.on_path = True
    return path


def run_search(grid: Grid) -> SearchResult:
    """
    Run A* from grid.start to grid.end, mutating the cells' search state.

    Returns PathFound with the start-to-end cell list, NoPathFound when the
    end is unreachable, or MissingEndpoints when start or end is unset (in
    which case no cell is touched).
    """
    if grid.start is None or grid.end is None:
        logger.info("Search requested without start and end")
        return MissingEndpoints()

    grid.reset_search_state()
    start = grid.cell(*grid.start)
    goal = grid.cell(*grid.end)

    start.g = 0
    start.h = heuristic(start.pos, goal.pos)
    start.f = start.h

    # A* open set as a priority queue of (f_score, h_score, count, pos).
    # Lower h breaks f ties, then insertion order.
    open_set: List[Tuple[float, int, int, Pos]] = []
    count = 0
    heapq.heappush(open_set, (start.f, start.h, count, start.pos))
    # Closed set of finalized positions
    closed: Set[Pos] = set()

    while open_set:
        _, _, _, pos = heapq.heappop(open_set)
        # Outdated entry for a cell that was improved and already expanded
        if pos in closed:
            continue
        current = grid.cell(*pos)
        # If reached goal, reconstruct path
        if current == goal:
            path = reconstruct_path(grid, current)
            logger.info(
                "Path found from %s to %s: %d steps, %d cells expanded",
                start.pos, goal.pos, len(path) - 1, len(closed),
            )
            return PathFound(path, expanded=len(closed))

        closed.add(pos)
        logger.debug("Expanding %s g=%s f=%s", pos, current.g, current.f)

        for neighbor in grid.neighbors(current):
            # Skip walls or already finalized cells
            if not neighbor.walkable or neighbor.pos in closed:
                continue
            tentative_g = current.g + STEP_COST
            # If this path to neighbor is better than any previous one
            if tentative_g < neighbor.g:
                neighbor.parent = current.pos
                neighbor.g = tentative_g
                neighbor.h = heuristic(neighbor.pos, goal.pos)
                neighbor.f = neighbor.g + neighbor.h
                count += 1
                heapq.heappush(
                    open_set, (neighbor.f, neighbor.h, count, neighbor.pos)
                )

    # No path found
    logger.info(
        "No path from %s to %s after expanding %d cells",
        start.pos, goal.pos, len(closed),
    )
    return NoPathFound(expanded=len(closed))
