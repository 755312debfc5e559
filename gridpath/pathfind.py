"""Cost-ordered best-first search over a Grid.

The search runs backwards from the destination so that walking parent links
from the start node yields the path already in start -> destination order.

A cell is claimed by the first node that reaches it and is never re-opened,
even if a cheaper route to it turns up later. Paths are good but are not
guaranteed to be the cheapest possible, unlike classic Dijkstra/A*.
"""

import heapq
import logging
from dataclasses import dataclass

from gridpath import util
from gridpath.config import settings
from gridpath.grid import Cell, Grid
from gridpath.path import Path
from gridpath.util import DIAGONAL_DIRS, FOUR_DIRS

log = logging.getLogger(__name__)

NO_PARENT = -1

Point = tuple[int, int]


@dataclass(slots=True)
class SearchNode:
    cell: Cell
    cost: float
    parent: int = NO_PARENT


def resolve(grid: Grid, where: Cell | Point) -> Cell | None:
    if isinstance(where, Cell):
        return where
    x, y = where
    return grid.get(x, y)


def is_walkable(cell: Cell | None) -> bool:
    return cell is not None and cell.walkable


def trace(nodes: list[SearchNode], handle: int) -> list[Cell]:
    """Cells from nodes[handle] up through its parents to the root."""
    out = []
    while handle != NO_PARENT:
        node = nodes[handle]
        out.append(node.cell)
        handle = node.parent
    return out


def find_path(
    grid: Grid,
    start: Cell | Point,
    dest: Cell | Point,
    *,
    diagonals: bool = False,
    walls_block_diagonals: bool = False,
    diagonal_cost: float | None = None,
) -> Path | None:
    """Find a path from start to dest.

    Returns None when either end is missing or not walkable, or when dest
    can't be reached. With walls_block_diagonals, a diagonal step is only
    taken when both orthogonal cells flanking it are walkable.
    """
    start_cell = resolve(grid, start)
    dest_cell = resolve(grid, dest)
    if start_cell is None or dest_cell is None:
        return None
    if not start_cell.walkable or not dest_cell.walkable:
        return None
    if diagonal_cost is None:
        diagonal_cost = settings.diagonal_cost

    # Arena of search nodes; parents are handles into it.
    nodes = [SearchNode(cell=dest_cell, cost=dest_cell.cost)]
    visited = {grid.index_of(dest_cell)}
    # Handles grow with insertion, so equal costs pop first-in first-out.
    frontier: list[tuple[float, int]] = [(dest_cell.cost, 0)]
    expanded = 0

    def claim(cell: Cell, cost: float, parent: int) -> None:
        visited.add(grid.index_of(cell))
        nodes.append(SearchNode(cell=cell, cost=cost, parent=parent))
        handle = len(nodes) - 1
        heapq.heappush(frontier, (cost, handle))

    while frontier:
        _, handle = heapq.heappop(frontier)
        node = nodes[handle]

        if node.cell is start_cell:
            path = Path(trace(nodes, handle))
            log.debug(
                "path found %s",
                util.tags(
                    start=(start_cell.x, start_cell.y),
                    dest=(dest_cell.x, dest_cell.y),
                    expanded=expanded,
                    length=len(path),
                ),
            )
            return path

        expanded += 1
        for _, _, n in grid.neighbors(node.cell, FOUR_DIRS):
            if n.walkable and grid.index_of(n) not in visited:
                claim(n, n.cost + node.cost, handle)

        if not diagonals:
            continue

        for dx, dy, n in grid.neighbors(node.cell, DIAGONAL_DIRS):
            if not n.walkable or grid.index_of(n) in visited:
                continue
            if walls_block_diagonals:
                horizontal = grid.get(node.cell.x + dx, node.cell.y)
                vertical = grid.get(node.cell.x, node.cell.y + dy)
                if not (is_walkable(horizontal) and is_walkable(vertical)):
                    continue
            claim(n, n.cost + node.cost + diagonal_cost, handle)

    log.debug(
        "no path %s",
        util.tags(
            start=(start_cell.x, start_cell.y),
            dest=(dest_cell.x, dest_cell.y),
            expanded=expanded,
        ),
    )
    return None


def find_path_by_world_coords(
    grid: Grid,
    start_x: float,
    start_y: float,
    end_x: float,
    end_y: float,
    *,
    diagonals: bool = False,
    walls_block_diagonals: bool = False,
) -> Path | None:
    """find_path between the cells under two world-space positions."""
    start = grid.get(*grid.world_to_grid(start_x, start_y))
    dest = grid.get(*grid.world_to_grid(end_x, end_y))
    if start is None or dest is None:
        return None
    return find_path(
        grid,
        start,
        dest,
        diagonals=diagonals,
        walls_block_diagonals=walls_block_diagonals,
    )


def get_next_step(
    grid: Grid,
    current: Cell | Point,
    goal: Cell | Point,
    *,
    diagonals: bool = False,
    walls_block_diagonals: bool = False,
) -> Cell | None:
    """Get the next cell toward a goal.

    Returns None if already at the goal or blocked.
    """
    path = find_path(
        grid,
        current,
        goal,
        diagonals=diagonals,
        walls_block_diagonals=walls_block_diagonals,
    )

    if path is None or len(path) < 2:
        return None

    return path.get(1)
