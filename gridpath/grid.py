"""Dense rectangular tile grid.

Cells are addressed by (x, y) with x growing right and y growing down. The
grid owns every Cell; hosts edit cost/walkability in place between searches.
"""

import logging
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import numpy as np

from gridpath.config import settings

log = logging.getLogger(__name__)

CostMap = np.ndarray[tuple[int, int], np.dtype[np.float64]]
WalkableMask = np.ndarray[tuple[int, int], np.dtype[np.bool_]]


@dataclass(slots=True, eq=False)
class Cell:
    """One grid position. Equality is identity: one Cell per coordinate."""

    x: int
    y: int
    cost: float = 1.0
    walkable: bool = True
    tag: str = " "

    def __str__(self) -> str:
        return (
            f"X:{self.x} Y:{self.y} Cost:{self.cost:f} "
            f"Walkable:{self.walkable} Tag:{self.tag!r}"
        )


class Grid:
    """Fixed-size, row-major field of Cells."""

    def __init__(
        self,
        width: int,
        height: int,
        cell_width: int | None = None,
        cell_height: int | None = None,
    ):
        if width <= 0 or height <= 0:
            raise ValueError(f"grid size must be positive, got {width}x{height}")
        cell_width = settings.cell_width if cell_width is None else cell_width
        cell_height = settings.cell_height if cell_height is None else cell_height
        if cell_width <= 0 or cell_height <= 0:
            raise ValueError(
                f"cell size must be positive, got {cell_width}x{cell_height}"
            )
        self.cell_width = cell_width
        self.cell_height = cell_height
        self.rows: list[list[Cell]] = [
            [Cell(x, y) for x in range(width)] for y in range(height)
        ]

    @classmethod
    def from_tag_rows(
        cls,
        rows: Sequence[Sequence[str]],
        cell_width: int | None = None,
        cell_height: int | None = None,
    ) -> "Grid":
        """Build a grid whose cell tags come from `rows`, one entry per cell."""
        if not rows or not rows[0]:
            raise ValueError("layout must have at least one row and one column")
        width = len(rows[0])
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(
                    f"layout is not rectangular: row {y} has {len(row)} cells, "
                    f"expected {width}"
                )
        grid = cls(width, len(rows), cell_width, cell_height)
        for y, row in enumerate(rows):
            for x, tag in enumerate(row):
                grid.rows[y][x].tag = tag
        return grid

    @classmethod
    def from_strings(
        cls,
        rows: Sequence[str],
        cell_width: int | None = None,
        cell_height: int | None = None,
    ) -> "Grid":
        """Build a grid from text rows; each character tags one cell."""
        return cls.from_tag_rows([list(row) for row in rows], cell_width, cell_height)

    @property
    def width(self) -> int:
        return len(self.rows[0])

    @property
    def height(self) -> int:
        return len(self.rows)

    def get(self, x: int, y: int) -> Cell | None:
        """Cell at (x, y), or None when out of bounds."""
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return None
        return self.rows[y][x]

    def index_of(self, cell: Cell) -> int:
        """Stable integer key for `cell`."""
        return cell.y * self.width + cell.x

    def all_cells(self) -> list[Cell]:
        return [cell for row in self.rows for cell in row]

    def cells_by_tag(self, tag: str) -> list[Cell]:
        return [cell for cell in self.all_cells() if cell.tag == tag]

    def cells_by_cost(self, cost: float) -> list[Cell]:
        return [cell for cell in self.all_cells() if cell.cost == cost]

    def cells_by_walkable(self, walkable: bool) -> list[Cell]:
        return [cell for cell in self.all_cells() if cell.walkable == walkable]

    def set_walkable(self, tag: str, walkable: bool) -> None:
        """Set walkability on every cell tagged `tag`."""
        for cell in self.cells_by_tag(tag):
            cell.walkable = walkable

    def set_cost(self, tag: str, cost: float) -> None:
        """Set movement cost on every cell tagged `tag`.

        Negative costs are stored, but searches assume non-negative steps.
        """
        if not math.isfinite(cost):
            raise ValueError(f"cost must be finite, got {cost!r}")
        if cost < 0:
            log.warning("negative cost %s set on tag %r", cost, tag)
        for cell in self.cells_by_tag(tag):
            cell.cost = cost

    def grid_to_world(self, x: int, y: int) -> tuple[float, float]:
        return float(x * self.cell_width), float(y * self.cell_height)

    def world_to_grid(self, x: float, y: float) -> tuple[int, int]:
        return math.floor(x / self.cell_width), math.floor(y / self.cell_height)

    def to_strings(self) -> list[str]:
        return ["".join(cell.tag for cell in row) for row in self.rows]

    def to_text(self) -> str:
        return "".join(
            "".join(f"{cell.tag} " for cell in row) + "\n" for row in self.rows
        )

    def cost_map(self) -> CostMap:
        """Costs as a (height, width) array, np.inf where not walkable."""
        out = np.full((self.height, self.width), np.inf, dtype=np.float64)
        for cell in self.cells_by_walkable(True):
            out[cell.y, cell.x] = cell.cost
        return out

    def walkable_mask(self) -> WalkableMask:
        out = np.zeros((self.height, self.width), dtype=np.bool_)
        for cell in self.cells_by_walkable(True):
            out[cell.y, cell.x] = True
        return out

    def neighbors(
        self, cell: Cell, dirs: Iterable[tuple[int, int]]
    ) -> list[tuple[int, int, Cell]]:
        """In-bounds neighbors of `cell` along `dirs`, as (dx, dy, neighbor)."""
        out = []
        for dx, dy in dirs:
            if (n := self.get(cell.x + dx, cell.y + dy)) is not None:
                out.append((dx, dy, n))
        return out
