"""
Grid model: fixed-size matrix of cells with their search attributes.
"""

from __future__ import annotations
import math
import logging
from typing import Iterator, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

Pos = Tuple[int, int]

# Neighbor offsets as (d_row, d_col): north, south, west, east
DIRECTIONS: Tuple[Pos, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


class InvalidCoordinate(IndexError):
    """
    Raised when a (row, col) pair lies outside the grid.

    Unlike the search outcomes, which are returned as result objects, an
    out-of-bounds coordinate is a caller error and is raised.
    """

    def __init__(self, row: int, col: int, rows: int, cols: int) -> None:
        super().__init__(
            f"Cell ({row}, {col}) is outside the {rows}x{cols} grid"
        )
        self.row = row
        self.col = col


class Cell:
    """One grid cell: walkability plus the per-run A* bookkeeping."""

    def __init__(self, row: int, col: int, walkable: bool = True) -> None:
        self.row = row
        self.col = col
        self.walkable = walkable
        # Best known cost from the start cell
        self.g: float = math.inf
        # Heuristic estimate to the end cell and f = g + h
        self.h: int = 0
        self.f: float = 0
        # Position of the predecessor on the best known route
        self.parent: Optional[Pos] = None
        self.on_path = False

    @property
    def pos(self) -> Pos:
        return (self.row, self.col)

    def reset(self) -> None:
        """Clear search state; walkability is left alone."""
        self.g = math.inf
        self.h = 0
        self.f = 0
        self.parent = None
        self.on_path = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        return self.pos == other.pos

    def __hash__(self) -> int:
        return hash(self.pos)

    def __repr__(self) -> str:
        return (
            f"<Cell ({self.row}, {self.col}) walkable={self.walkable} "
            f"g={self.g} f={self.f}>"
        )


class Grid:
    """
    Fixed-size grid of cells.

    Start and end are held as positions on the grid rather than as flags on
    the cells, so moving either one is a single assignment.
    """

    def __init__(self, rows: int, cols: int) -> None:
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self.start: Optional[Pos] = None
        self.end: Optional[Pos] = None
        self._cells: List[List[Cell]] = []
        self.reinitialize()

    @classmethod
    def from_rows(cls, lines: Sequence[str]) -> Grid:
        """
        Build a grid from text rows.
        '#' marks an obstacle, 'S' the start, 'E' the end; any other
        character is an open cell. A layout with more than one S or E is
        rejected.
        """
        if not lines:
            raise ValueError("Grid layout must have at least one row")
        width = len(lines[0])
        if any(len(line) != width for line in lines):
            raise ValueError("Grid layout rows must all have the same length")
        grid = cls(len(lines), width)
        for r, line in enumerate(lines):
            for c, ch in enumerate(line):
                if ch == "#":
                    grid.set_walkable(r, c, False)
                elif ch == "S":
                    if grid.start is not None:
                        raise ValueError(f"Grid layout has more than one start (row {r})")
                    grid.set_start(r, c)
                elif ch == "E":
                    if grid.end is not None:
                        raise ValueError(f"Grid layout has more than one end (row {r})")
                    grid.set_end(r, c)
        return grid

    def reinitialize(self) -> None:
        """Replace every cell with a fresh default cell and drop start/end."""
        self._cells = [
            [Cell(r, c) for c in range(self.cols)] for r in range(self.rows)
        ]
        self.start = None
        self.end = None
        logger.debug("Grid reinitialized (%dx%d)", self.rows, self.cols)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell(self, row: int, col: int) -> Cell:
        """Return the cell at (row, col); raise InvalidCoordinate if out of bounds."""
        if not self.in_bounds(row, col):
            raise InvalidCoordinate(row, col, self.rows, self.cols)
        return self._cells[row][col]

    def cells(self) -> Iterator[Cell]:
        """Iterate over all cells in row-major order."""
        for row in self._cells:
            yield from row

    def neighbors(self, cell: Cell) -> List[Cell]:
        """Return the in-bounds orthogonal neighbors in N, S, W, E order."""
        result = []
        for dr, dc in DIRECTIONS:
            nr, nc = cell.row + dr, cell.col + dc
            if self.in_bounds(nr, nc):
                result.append(self._cells[nr][nc])
        return result

    def reset_search_state(self) -> None:
        """Clear g/h/f, parents and path flags on every cell."""
        for cell in self.cells():
            cell.reset()

    def is_start(self, cell: Cell) -> bool:
        return self.start == cell.pos

    def is_end(self, cell: Cell) -> bool:
        return self.end == cell.pos

    def set_walkable(self, row: int, col: int, walkable: bool) -> bool:
        """
        Set walkability of a cell. Start and end cells are never turned into
        obstacles; returns False when the change is refused.
        """
        cell = self.cell(row, col)
        if self.is_start(cell) or self.is_end(cell):
            logger.debug("Refusing to change walkability of endpoint %s", cell.pos)
            return False
        cell.walkable = walkable
        return True

    def toggle_obstacle(self, row: int, col: int) -> bool:
        cell = self.cell(row, col)
        return self.set_walkable(row, col, not cell.walkable)

    def set_start(self, row: int, col: int) -> bool:
        """Mark (row, col) as the start cell if it is walkable."""
        cell = self.cell(row, col)
        if not cell.walkable:
            logger.debug("Refusing start on obstacle %s", cell.pos)
            return False
        self.start = cell.pos
        return True

    def set_end(self, row: int, col: int) -> bool:
        """Mark (row, col) as the end cell if it is walkable."""
        cell = self.cell(row, col)
        if not cell.walkable:
            logger.debug("Refusing end on obstacle %s", cell.pos)
            return False
        self.end = cell.pos
        return True

    def clear_start(self) -> None:
        self.start = None

    def clear_end(self) -> None:
        self.end = None

    def cell_state(self, row: int, col: int) -> Tuple[bool, bool, bool, bool]:
        """Return (walkable, is_start, is_end, on_path) for rendering."""
        cell = self.cell(row, col)
        return (cell.walkable, self.is_start(cell), self.is_end(cell), cell.on_path)

    def __repr__(self) -> str:
        return f"<Grid {self.rows}x{self.cols} start={self.start} end={self.end}>"
