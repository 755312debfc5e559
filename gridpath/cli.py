#!/usr/bin/env python3
"""
cli.py: find and draw a path across a text map.

Usage examples:
  # 4-way path between two corners of a map where '#' is a wall
  gridpath maps/cave.txt --start 0,0 --dest 9,4

  # Allow diagonal moves, but never squeeze past wall corners
  gridpath maps/cave.txt --start 0,0 --dest 9,4 --diagonals --walls-block-diagonals

  # Water is walkable but slow; 'X' and '#' are both walls
  gridpath maps/cave.txt --start 0,0 --dest 9,4 --walls '#X' --cost '~=5'

  # Negative coordinates need the = form so they are not read as flags
  gridpath maps/cave.txt --start=-1,0 --dest 9,4
"""

import argparse
import logging
import sys
from pathlib import Path as FilePath

from gridpath.config import settings
from gridpath.grid import Grid
from gridpath.path import Path
from gridpath.pathfind import find_path

log = logging.getLogger(__name__)

PATH_MARK = "*"


def parse_point(text: str) -> tuple[int, int]:
    try:
        x, y = (int(v) for v in text.split(","))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected X,Y but got {text!r}") from exc
    return x, y


def parse_cost(text: str) -> tuple[str, float]:
    tag, sep, value = text.partition("=")
    if not sep or len(tag) != 1:
        raise argparse.ArgumentTypeError(f"expected CHAR=VALUE but got {text!r}")
    try:
        return tag, float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"cost for {tag!r} must be a number") from exc


def render(grid: Grid, path: Path) -> str:
    rows = [list(row) for row in grid.to_strings()]
    for cell in path:
        rows[cell.y][cell.x] = PATH_MARK
    return "\n".join("".join(row) for row in rows)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="gridpath", description="Find a path across a text map."
    )
    ap.add_argument("map", type=FilePath, help="Text map, one row per line.")
    ap.add_argument(
        "--start",
        type=parse_point,
        required=True,
        help="X,Y (write --start=-1,0 for negatives)",
    )
    ap.add_argument(
        "--dest",
        type=parse_point,
        required=True,
        help="X,Y (write --dest=-1,0 for negatives)",
    )
    ap.add_argument("--diagonals", action="store_true", help="Allow 8-way moves.")
    ap.add_argument(
        "--walls-block-diagonals",
        action="store_true",
        help="Forbid diagonal moves past wall corners.",
    )
    ap.add_argument(
        "--walls",
        default=settings.wall_tags,
        help=f"Characters that are not walkable (default {settings.wall_tags!r}).",
    )
    ap.add_argument(
        "--cost",
        type=parse_cost,
        action="append",
        default=[],
        metavar="CHAR=VALUE",
        help="Movement cost for cells drawn with CHAR. Repeatable.",
    )
    return ap


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=settings.log_level)
    ap = build_parser()
    args = ap.parse_args(argv)

    try:
        lines = args.map.read_text().splitlines()
        while lines and not lines[-1]:
            lines.pop()
        grid = Grid.from_strings(lines)
    except (OSError, ValueError) as exc:
        ap.error(f"{args.map}: {exc}")

    for tag in args.walls:
        grid.set_walkable(tag, False)
    for tag, cost in args.cost:
        try:
            grid.set_cost(tag, cost)
        except ValueError as exc:
            ap.error(str(exc))

    log.info("loaded %s (%dx%d)", args.map, grid.width, grid.height)

    path = find_path(
        grid,
        args.start,
        args.dest,
        diagonals=args.diagonals,
        walls_block_diagonals=args.walls_block_diagonals,
    )
    if path is None:
        print(f"No path from {args.start} to {args.dest}.", file=sys.stderr)
        return 1

    print(render(grid, path))
    print(f"length: {len(path)} cost: {path.total_cost():g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
