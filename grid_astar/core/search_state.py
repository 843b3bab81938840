"""Per-search scratch storage for A* bookkeeping."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple


Coord = Tuple[int, int]


@dataclass
class SearchRecord:
    """Scratch values for one cell during one search."""

    g: float = 0
    h: float = 0
    f: float = 0
    parent: Optional[Coord] = None
    opened_at: Optional[int] = None
    closed: bool = False

    @property
    def cost(self) -> float:
        """Return the priority used for open-set selection."""
        return self.f

    def clear(self) -> None:
        self.g = 0
        self.h = 0
        self.f = 0
        self.parent = None
        self.opened_at = None
        self.closed = False


class SearchState:
    """Flat table of :class:`SearchRecord` covering every cell of a grid.

    Records are indexed ``y * width + x``. Parent links are stored as
    coordinates so the table never holds references into the grid.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._records: List[SearchRecord] = [
            SearchRecord() for _ in range(width * height)
        ]
        self._next_order = 0

    # ------------------------------------------------------------------
    # Record access
    # ------------------------------------------------------------------
    def record(self, coord: Coord) -> SearchRecord:
        """Return the scratch record for ``coord``."""
        x, y = coord
        return self._records[y * self.width + x]

    def __iter__(self) -> Iterator[SearchRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    # ------------------------------------------------------------------
    # Open/closed bookkeeping
    # ------------------------------------------------------------------
    def is_open(self, coord: Coord) -> bool:
        rec = self.record(coord)
        return rec.opened_at is not None and not rec.closed

    def is_closed(self, coord: Coord) -> bool:
        return self.record(coord).closed

    def mark_open(self, coord: Coord) -> int:
        """Assign ``coord`` its insertion order in the open set and return it."""
        rec = self.record(coord)
        if rec.opened_at is None:
            rec.opened_at = self._next_order
            self._next_order += 1
        return rec.opened_at

    def mark_closed(self, coord: Coord) -> None:
        self.record(coord).closed = True

    def reset(self) -> None:
        """Zero every record in place."""
        for rec in self._records:
            rec.clear()
        self._next_order = 0

    # ------------------------------------------------------------------
    # Path reconstruction
    # ------------------------------------------------------------------
    def path_to(self, coord: Coord) -> List[Coord]:
        """Follow parent links back from ``coord`` and return start-to-end order."""
        path = [coord]
        parent = self.record(coord).parent
        while parent is not None:
            path.append(parent)
            parent = self.record(parent).parent
        path.reverse()
        return path


__all__ = ["Coord", "SearchRecord", "SearchState"]
