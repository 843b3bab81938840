import pytest

from grid_astar.core.grid import Cell, Grid
from grid_astar.core.search_state import SearchState


def _coords(cells):
    return [c.coord for c in cells]


def test_grid_starts_fully_walkable():
    grid = Grid(4, 3)
    assert grid.size == (4, 3)
    cells = list(grid.cells())
    assert len(cells) == 12
    assert all(c.walkable for c in cells)
    assert cells[0].coord == (0, 0)
    assert cells[5].coord == (1, 1)


@pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-1, 3), (2.5, 3)])
def test_grid_rejects_bad_dimensions(width, height):
    with pytest.raises(ValueError):
        Grid(width, height)


def test_cell_coordinates_are_read_only():
    cell = Cell(2, 3)
    with pytest.raises(AttributeError):
        cell.x = 5  # type: ignore[misc]
    assert cell.coord == (2, 3)
    assert cell.walkable


def test_lookup_bounds_and_walkability(open_grid):
    assert open_grid.lookup(0, 0).coord == (0, 0)
    assert open_grid.lookup(4, 4).coord == (4, 4)
    assert open_grid.lookup(-1, 0) is None
    assert open_grid.lookup(5, 0) is None
    assert open_grid.lookup(0, 5) is None

    open_grid.set_walkable(2, 2, False)
    assert open_grid.lookup(2, 2) is None
    assert not open_grid.is_walkable(2, 2)

    open_grid.set_walkable(2, 2, True)
    assert open_grid.lookup(2, 2) is not None


def test_set_walkable_out_of_bounds_is_noop(open_grid):
    open_grid.set_walkable(-1, 0, False)
    open_grid.set_walkable(0, 99, False)
    assert all(c.walkable for c in open_grid.cells())


def test_neighbors_orthogonal_order():
    grid = Grid(3, 3)
    center = grid.lookup(1, 1)
    assert _coords(grid.neighbors_of(center)) == [(1, 0), (2, 1), (1, 2), (0, 1)]


def test_neighbors_diagonal_order():
    grid = Grid(3, 3)
    center = grid.lookup(1, 1)
    assert _coords(grid.neighbors_of(center, diagonal=True)) == [
        (1, 0), (2, 1), (1, 2), (0, 1),
        (2, 0), (2, 2), (0, 2), (0, 0),
    ]


def test_neighbors_skip_out_of_bounds_and_blocked():
    grid = Grid(3, 3)
    grid.set_walkable(1, 0, False)
    corner = grid.lookup(0, 0)
    assert _coords(grid.neighbors_of(corner)) == [(0, 1)]
    assert _coords(grid.neighbors_of(corner, diagonal=True)) == [(0, 1), (1, 1)]


def test_reset_search_state_is_zeroed(open_grid):
    state = open_grid.reset_search_state()
    assert isinstance(state, SearchState)
    assert len(state) == 25
    assert all(
        (r.g, r.h, r.f, r.parent) == (0, 0, 0, None) for r in state
    )


def test_reset_search_state_returns_independent_tables(open_grid):
    first = open_grid.reset_search_state()
    first.record((1, 1)).g = 7
    second = open_grid.reset_search_state()
    assert second.record((1, 1)).g == 0


def test_from_rows_marks_blocked_cells():
    grid = Grid.from_rows(["..#", "#..", "..."])
    assert grid.size == (3, 3)
    assert not grid.is_walkable(2, 0)
    assert not grid.is_walkable(0, 1)
    assert grid.is_walkable(1, 1)


def test_from_rows_rejects_bad_input():
    with pytest.raises(ValueError):
        Grid.from_rows([])
    with pytest.raises(ValueError):
        Grid.from_rows(["...", ".."])
