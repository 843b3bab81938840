# tests/conftest.py
import pytest

from grid_astar.core.grid import Grid


@pytest.fixture
def open_grid():
    """5x5 grid with every cell walkable."""
    return Grid(5, 5)


@pytest.fixture
def make_grid():
    """Build a grid from ASCII rows, ``#`` marking blocked cells."""

    def _make(*rows: str) -> Grid:
        return Grid.from_rows(list(rows))

    return _make
