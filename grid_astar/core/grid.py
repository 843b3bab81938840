# grid_astar/core/grid.py
"""Fixed-size occupancy grid used by the pathfinder."""

from __future__ import annotations

from typing import Iterator, List, Optional, Sequence, Tuple

from .search_state import Coord, SearchState


# Neighbour offsets. Order matters: it decides A* tie-breaking downstream.
_ORTHOGONAL: Tuple[Coord, ...] = (
    (0, -1),  # N
    (1, 0),  # E
    (0, 1),  # S
    (-1, 0),  # W
)
_DIAGONAL: Tuple[Coord, ...] = (
    (1, -1),  # NE
    (1, 1),  # SE
    (-1, 1),  # SW
    (-1, -1),  # NW
)


class Cell:
    """A single grid position with a mutable walkability flag."""

    __slots__ = ("_x", "_y", "walkable")

    def __init__(self, x: int, y: int, walkable: bool = True) -> None:
        self._x = x
        self._y = y
        self.walkable = walkable

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    @property
    def coord(self) -> Coord:
        return (self._x, self._y)

    def __repr__(self) -> str:
        return f"Cell(x={self._x}, y={self._y}, walkable={self.walkable})"


class Grid:
    """Rectangular ``width`` x ``height`` collection of :class:`Cell`.

    The grid only knows about walkability and topology. Search scratch
    (``g``, ``h``, ``f`` and parent links) lives in a separate
    :class:`SearchState` so a search never mutates the grid.
    """

    def __init__(self, width: int, height: int) -> None:
        if not isinstance(width, int) or not isinstance(height, int):
            raise ValueError("grid dimensions must be integers")
        if width <= 0 or height <= 0:
            raise ValueError("grid dimensions must be positive")
        self.width = width
        self.height = height
        self._cells: List[List[Cell]] = [
            [Cell(x, y) for x in range(width)] for y in range(height)
        ]

    @classmethod
    def from_rows(cls, rows: Sequence[str], blocked: str = "#") -> "Grid":
        """Build a grid from equal-length strings; ``blocked`` marks walls."""

        if not rows:
            raise ValueError("rows must not be empty")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("all rows must have the same length")
        grid = cls(width, len(rows))
        for y, row in enumerate(rows):
            for x, glyph in enumerate(row):
                if glyph in blocked:
                    grid.set_walkable(x, y, False)
        return grid

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_walkable(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and self._cells[y][x].walkable

    def lookup(self, x: int, y: int) -> Optional[Cell]:
        """Return the cell at ``(x, y)`` if it is in bounds and walkable.

        Blocked cells are invisible to search: they can be neither
        traversed nor used as a start or end point.
        """
        if self.is_walkable(x, y):
            return self._cells[y][x]
        return None

    def cells(self) -> Iterator[Cell]:
        """Yield every cell in row-major order."""
        for row in self._cells:
            yield from row

    def neighbors_of(self, cell: Cell, diagonal: bool = False) -> List[Cell]:
        """Return walkable neighbours of ``cell`` in N, E, S, W (NE, SE, SW, NW) order."""
        offsets = _ORTHOGONAL + _DIAGONAL if diagonal else _ORTHOGONAL
        neighbors: List[Cell] = []
        for dx, dy in offsets:
            neighbor = self.lookup(cell.x + dx, cell.y + dy)
            if neighbor is not None:
                neighbors.append(neighbor)
        return neighbors

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def set_walkable(self, x: int, y: int, walkable: bool) -> None:
        """Set walkability of ``(x, y)``; out-of-bounds coordinates are ignored."""
        if self.in_bounds(x, y):
            self._cells[y][x].walkable = walkable

    def reset_search_state(self) -> SearchState:
        """Return search scratch with every ``g/h/f`` at 0 and no parents.

        Call this at the start of every path query.
        """
        return SearchState(self.width, self.height)


__all__ = ["Cell", "Grid"]
