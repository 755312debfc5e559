# (dx, dy) offsets: left, right, up, down.
FOUR_DIRS = [(-1, 0), (1, 0), (0, -1), (0, 1)]
# up-left, up-right, down-left, down-right.
DIAGONAL_DIRS = [(-1, -1), (1, -1), (-1, 1), (1, 1)]

# Extra cost charged on top of the entered cell's cost for a diagonal step.
DIAGONAL_COST = 0.414


def tags(**kwargs: object) -> str:
    return " ".join(f"{kw}: {str(v)}" for kw, v in kwargs.items())


def clamp(x: int, lo: int, hi: int) -> int:
    return max(min(x, hi), lo)
