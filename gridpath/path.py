"""Ordered cell sequence with a traversal cursor."""

from collections.abc import Iterable, Iterator

from gridpath.grid import Cell
from gridpath.util import clamp


class Path:
    """Cells from start to destination, plus a cursor for stepping along them.

    Holds the grid's own Cell objects, so edits to cost/walkability show
    through; the sequence itself only changes via reverse().
    """

    __slots__ = ("cells", "index")

    def __init__(self, cells: Iterable[Cell] | None = None):
        self.cells: list[Cell] = list(cells) if cells is not None else []
        self.index = 0

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def __repr__(self) -> str:
        steps = " ".join(f"({c.x},{c.y})" for c in self.cells)
        return f"Path([{steps}], index={self.index})"

    def valid(self) -> bool:
        return bool(self.cells)

    def total_cost(self) -> float:
        """Sum of the current cost of every cell on the path."""
        return sum(cell.cost for cell in self.cells)

    def reverse(self) -> None:
        """Reverse the cells in place. The cursor is left where it was."""
        self.cells.reverse()

    def restart(self) -> None:
        self.index = 0

    def current(self) -> Cell | None:
        return self.get(self.index)

    def next(self) -> Cell | None:
        """The cell after the cursor, without moving. None at the end."""
        if self.index < len(self.cells) - 1:
            return self.cells[self.index + 1]
        return None

    def prev(self) -> Cell | None:
        """The cell before the cursor, without moving. None at the start."""
        if 0 < self.index <= len(self.cells):
            return self.cells[self.index - 1]
        return None

    def advance(self) -> None:
        self.set_index(self.index + 1)

    def at_start(self) -> bool:
        return self.index == 0

    def at_end(self) -> bool:
        return self.index >= len(self.cells) - 1

    def same(self, other: "Path | None") -> bool:
        """True if both paths visit the exact same Cells in the same order."""
        if other is None or len(self.cells) != len(other.cells):
            return False
        return all(a is b for a, b in zip(self.cells, other.cells))

    def get(self, index: int) -> Cell | None:
        if 0 <= index < len(self.cells):
            return self.cells[index]
        return None

    def index_of(self, cell: Cell) -> int:
        """Position of `cell` on the path, or -1."""
        for i, c in enumerate(self.cells):
            if c is cell:
                return i
        return -1

    def set_index(self, index: int) -> None:
        """Move the cursor, clamped to the path's bounds."""
        self.index = clamp(index, 0, len(self.cells) - 1)
