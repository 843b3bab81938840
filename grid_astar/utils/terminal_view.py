"""ASCII terminal renderer for grids and paths."""

from __future__ import annotations

import sys
from typing import Sequence

from ..core.grid import Grid
from ..core.search_state import Coord


# Basic ANSI colour codes used by :class:`TerminalView`
_COLOURS = {
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "white": "\x1b[37m",
    "reset": "\x1b[0m",
}

_GLYPH_COLOURS = {
    ".": "white",
    "#": "red",
    "*": "yellow",
    "S": "green",
    "E": "green",
}


class TerminalView:
    """Minimal grid viewer: ``.`` open, ``#`` blocked, ``*`` path, ``S``/``E`` endpoints."""

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def render(
        self,
        grid: Grid,
        path: Sequence[Coord] | None = None,
        colour: bool = False,
    ) -> str:
        """Return ``grid`` as text with ``path`` overlaid."""

        overlay: dict[Coord, str] = {}
        if path:
            for coord in path:
                overlay[tuple(coord)] = "*"
            overlay[tuple(path[0])] = "S"
            overlay[tuple(path[-1])] = "E"

        lines: list[str] = []
        for y in range(grid.height):
            row: list[str] = []
            for x in range(grid.width):
                glyph = overlay.get((x, y)) or ("." if grid.is_walkable(x, y) else "#")
                if colour:
                    row.append(f"{_COLOURS[_GLYPH_COLOURS[glyph]]}{glyph}")
                else:
                    row.append(glyph)
            if colour:
                row.append(_COLOURS["reset"])
            lines.append("".join(row))
        return "\n".join(lines)

    def show(self, grid: Grid, path: Sequence[Coord] | None = None) -> None:
        """Write the coloured rendering to ``stdout``."""

        sys.stdout.write(self.render(grid, path, colour=True) + "\n")
        sys.stdout.flush()


_view = TerminalView()


def get_view() -> TerminalView:
    """Return the singleton :class:`TerminalView` instance."""

    return _view


__all__ = ["TerminalView", "get_view"]
