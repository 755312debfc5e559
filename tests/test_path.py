# tests/test_path.py
import pytest

from gridpath.path import Path
from gridpath.pathfind import find_path
from tests.util import coords, open_grid


@pytest.fixture
def grid():
    return open_grid(5, 1)


@pytest.fixture
def path(grid):
    """(0,0) -> (4,0) along a single row."""
    out = find_path(grid, (0, 0), (4, 0))
    assert out is not None
    return out


def test_empty_path():
    """An empty path is invalid and every lookup is absent."""
    p = Path()

    assert not p.valid()
    assert len(p) == 0
    assert p.total_cost() == 0
    assert p.current() is None
    assert p.next() is None
    assert p.prev() is None
    assert p.get(0) is None
    p.advance()
    p.set_index(3)
    assert p.index == 0


def test_valid(path):
    assert path.valid()
    assert len(path) == 5


def test_total_cost_tracks_grid_edits(grid, path):
    """total_cost reads the cells' current cost, not the cost at search time."""
    assert path.total_cost() == 5

    grid.get(2, 0).cost = 4.5

    assert path.total_cost() == 8.5


def test_cursor_walk(path):
    assert path.at_start()
    assert path.prev() is None
    assert (path.current().x, path.next().x) == (0, 1)

    path.advance()

    assert not path.at_start()
    assert path.current().x == 1
    assert path.prev().x == 0
    assert path.next().x == 2


def test_next_and_prev_do_not_move(path):
    path.next()
    path.prev()
    assert path.index == 0


def test_advance_clamps_at_end(path):
    for _ in range(10):
        path.advance()

    assert path.index == 4
    assert path.at_end()
    assert path.current().x == 4
    assert path.next() is None


def test_restart(path):
    path.set_index(3)
    path.restart()
    assert path.index == 0
    assert path.at_start()


def test_set_index_clamps(path):
    path.set_index(99)
    assert path.index == 4
    path.set_index(-3)
    assert path.index == 0
    path.set_index(2)
    assert path.current().x == 2


def test_reverse(path):
    path.reverse()
    assert coords(path) == [(4, 0), (3, 0), (2, 0), (1, 0), (0, 0)]


def test_reverse_twice_restores_order(path):
    before = list(path)
    path.reverse()
    path.reverse()
    assert list(path) == before


def test_reverse_keeps_cursor(path):
    """The cursor index survives a reverse; it now points at the mirror cell."""
    path.set_index(1)
    path.reverse()
    assert path.index == 1
    assert path.current().x == 3


def test_get(path, grid):
    assert path.get(0) is grid.get(0, 0)
    assert path.get(4) is grid.get(4, 0)
    assert path.get(5) is None
    assert path.get(-1) is None


def test_index_of(path, grid):
    assert path.index_of(grid.get(3, 0)) == 3
    assert path.index_of(open_grid(5, 1).get(3, 0)) == -1


def test_same_paths(grid, path):
    """Paths with the same cells in the same order are the same."""
    other = find_path(grid, (0, 0), (4, 0))
    assert other is not path
    assert path.same(other)
    assert other.same(path)


def test_same_differs_on_length(grid, path):
    shorter = find_path(grid, (0, 0), (3, 0))
    assert not path.same(shorter)


def test_same_differs_on_cell(path):
    """Same coordinates on another grid are different cells."""
    other = Path(path)
    other.cells[2] = open_grid(5, 1).get(2, 0)
    assert not path.same(other)


def test_same_differs_on_order(path):
    other = Path(path)
    other.reverse()
    assert not path.same(other)


def test_same_none(path):
    assert not path.same(None)


def test_path_copy_is_independent(path):
    """A Path built from another doesn't share its sequence or cursor."""
    other = Path(path)
    other.reverse()
    other.advance()
    assert coords(path)[0] == (0, 0)
    assert path.index == 0
