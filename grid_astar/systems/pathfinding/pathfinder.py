# grid_astar/systems/pathfinding/pathfinder.py
"""A* search over a :class:`~grid_astar.core.grid.Grid`."""

from __future__ import annotations

from heapq import heappop, heappush
from typing import List, Optional, Tuple, Union
import logging

from ...config import CONFIG
from ...core.grid import Cell, Grid
from ...core.search_state import Coord, SearchState
from .heuristics import Heuristic, get_heuristic

logger = logging.getLogger(__name__)


class Pathfinder:
    """Run A* queries against one grid.

    The pathfinder keeps no per-query state; every call to
    :meth:`find_path` works on a fresh :class:`SearchState`.
    """

    def __init__(
        self,
        grid: Grid,
        heuristic: Union[str, Heuristic, None] = None,
        diagonal: Optional[bool] = None,
    ) -> None:
        self.grid = grid
        if heuristic is None:
            heuristic = CONFIG.search.heuristic
        self.heuristic: Heuristic = (
            get_heuristic(heuristic) if isinstance(heuristic, str) else heuristic
        )
        self.diagonal = CONFIG.search.diagonal if diagonal is None else diagonal

    def find_path(
        self,
        start_x: int,
        start_y: int,
        end_x: int,
        end_y: int,
        diagonal: Optional[bool] = None,
    ) -> List[Coord]:
        """Return the path from start to end as ``(x, y)`` pairs, inclusive.

        An empty list means there is no path: either endpoint is out of
        bounds or blocked, or the goal cannot be reached.
        """

        if diagonal is None:
            diagonal = self.diagonal

        state = self.grid.reset_search_state()

        start = self.grid.lookup(start_x, start_y)
        end = self.grid.lookup(end_x, end_y)
        if start is None or end is None:
            logger.debug(
                "Pathfinder: rejected query (%d,%d)->(%d,%d); start_ok=%s end_ok=%s",
                start_x, start_y, end_x, end_y, start is not None, end is not None,
            )
            return []

        return self._search(state, start, end, diagonal)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _search(
        self, state: SearchState, start: Cell, end: Cell, diagonal: bool
    ) -> List[Coord]:
        # Heap entries are (f, insertion order, cell). A cell keeps its
        # insertion order when re-pushed, so popping the smallest entry picks
        # the lowest f and, on ties, the earliest-inserted open cell.
        open_heap: List[Tuple[float, int, Cell]] = []

        rec = state.record(start.coord)
        rec.g = 0
        rec.h = self.heuristic(start.coord, end.coord)
        rec.f = rec.h
        heappush(open_heap, (rec.f, state.mark_open(start.coord), start))

        expanded = 0
        while open_heap:
            f, _, current = heappop(open_heap)
            current_rec = state.record(current.coord)
            if current_rec.closed or f != current_rec.f:
                continue  # superseded entry

            if current is end:
                path = state.path_to(end.coord)
                logger.debug(
                    "Pathfinder: path %s->%s found, %d steps, %d expansions",
                    start.coord, end.coord, len(path) - 1, expanded,
                )
                return path

            state.mark_closed(current.coord)
            expanded += 1

            for neighbor in self.grid.neighbors_of(current, diagonal):
                coord = neighbor.coord
                if state.is_closed(coord):
                    continue

                tentative_g = current_rec.g + 1
                neighbor_rec = state.record(coord)

                if not state.is_open(coord):
                    state.mark_open(coord)
                elif tentative_g >= neighbor_rec.g:
                    continue

                neighbor_rec.parent = current.coord
                neighbor_rec.g = tentative_g
                neighbor_rec.h = self.heuristic(coord, end.coord)
                neighbor_rec.f = neighbor_rec.g + neighbor_rec.h
                heappush(open_heap, (neighbor_rec.f, neighbor_rec.opened_at, neighbor))

        logger.debug(
            "Pathfinder: no path %s->%s after %d expansions",
            start.coord, end.coord, expanded,
        )
        return []


__all__ = ["Pathfinder"]
