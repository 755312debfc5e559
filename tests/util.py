from gridpath.grid import Grid


def open_grid(width: int = 5, height: int = 5) -> Grid:
    return Grid(width, height, cell_width=16, cell_height=16)


def walled_grid(rows: list[str], walls: str = "#") -> Grid:
    grid = Grid.from_strings(rows, cell_width=16, cell_height=16)
    for tag in walls:
        grid.set_walkable(tag, False)
    return grid


def coords(path) -> list[tuple[int, int]]:
    return [(cell.x, cell.y) for cell in path]


def diagonal_choice_grid() -> Grid:
    """From (2, 1), (0, 0) is reached through the dear (1, 0) or the diagonal (1, 1)."""
    grid = walled_grid(
        [
            ".x.",
            "...",
        ]
    )
    grid.set_cost("x", 3)
    return grid
