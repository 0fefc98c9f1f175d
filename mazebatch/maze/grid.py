"""Cell model and structural checks for maze grids."""

from __future__ import annotations

from collections import deque
from typing import Any, List, Sequence, Tuple

import numpy as np

from ..base import Cell, Grid

WALLS = ("top", "right", "bottom", "left")
TOP, RIGHT, BOTTOM, LEFT = range(4)

# wall side -> (dx, dy, opposite side)
NEIGHBOURS = {
    "top": (0, -1, "bottom"),
    "right": (1, 0, "left"),
    "bottom": (0, 1, "top"),
    "left": (-1, 0, "right"),
}


def make_cell(x: int, y: int) -> Cell:
    return {"x": x, "y": y, "top": True, "left": True, "bottom": True, "right": True}


def empty_grid(width: int, height: int) -> Grid:
    return [[make_cell(x, y) for x in range(width)] for y in range(height)]


def flatten(grid: Sequence[Sequence[Cell]]) -> List[Cell]:
    """Row-major flattening: ``flat[y * width + x] == grid[y][x]``."""

    return [cell for row in grid for cell in row]


def unflatten(flat: Sequence[Cell], width: int, height: int) -> Grid:
    if len(flat) != width * height:
        raise ValueError(
            f"Flattened maze has {len(flat)} cells, expected {width}x{height}={width * height}"
        )
    return [list(flat[y * width:(y + 1) * width]) for y in range(height)]


def is_flattened(maze: Sequence[Any]) -> bool:
    return bool(maze) and isinstance(maze[0], dict)


def grid_shape(maze: Sequence[Any]) -> Tuple[int, int]:
    """Return ``(width, height)`` of a nested grid."""

    if is_flattened(maze):
        raise ValueError("grid_shape expects a nested grid, got a flattened maze")
    height = len(maze)
    width = len(maze[0]) if height else 0
    if any(len(row) != width for row in maze):
        raise ValueError("Maze rows have inconsistent widths")
    return width, height


def check_shape(maze: Sequence[Any], width: int, height: int, flattened: bool) -> None:
    """Raise ``ValueError`` unless ``maze`` is a ``width`` x ``height`` maze."""

    if flattened:
        if len(maze) != width * height:
            raise ValueError(
                f"Expected {width * height} cells, found {len(maze)}"
            )
        if not all(isinstance(cell, dict) for cell in maze):
            raise ValueError("Flattened maze must contain only cell objects")
        grid = unflatten(maze, width, height)
    else:
        if is_flattened(maze):
            raise ValueError("Expected a nested grid, got a flattened maze")
        found = grid_shape(maze)
        if found != (width, height):
            raise ValueError(f"Expected a {width}x{height} grid, found {found[0]}x{found[1]}")
        grid = maze
    for y, row in enumerate(grid):
        for x, cell in enumerate(row):
            missing = [key for key in ("x", "y") + WALLS if key not in cell]
            if missing:
                raise ValueError(f"Cell ({x}, {y}) is missing {', '.join(missing)}")
            if (cell["x"], cell["y"]) != (x, y):
                raise ValueError(
                    f"Cell at ({x}, {y}) reports coordinates ({cell['x']}, {cell['y']})"
                )


def wall_array(grid: Sequence[Sequence[Cell]]) -> np.ndarray:
    """Return a ``(height, width, 4)`` bool array of walls (top, right, bottom, left)."""

    width, height = grid_shape(grid)
    walls = np.zeros((height, width, 4), dtype=bool)
    for y, row in enumerate(grid):
        for x, cell in enumerate(row):
            walls[y, x] = [bool(cell[side]) for side in WALLS]
    return walls


def open_passages(walls: np.ndarray) -> int:
    """Count passages between neighbouring cells (each shared wall once)."""

    horizontal = np.count_nonzero(~walls[:, :-1, RIGHT])
    vertical = np.count_nonzero(~walls[:-1, :, BOTTOM])
    return int(horizontal + vertical)


def is_perfect(grid: Sequence[Sequence[Cell]]) -> bool:
    """True when exactly one path joins any two cells of ``grid``."""

    walls = wall_array(grid)
    height, width = walls.shape[:2]
    if width == 0 or height == 0:
        return False

    if not (walls[0, :, TOP].all() and walls[-1, :, BOTTOM].all()):
        return False
    if not (walls[:, 0, LEFT].all() and walls[:, -1, RIGHT].all()):
        return False
    if not np.array_equal(walls[:, :-1, RIGHT], walls[:, 1:, LEFT]):
        return False
    if not np.array_equal(walls[:-1, :, BOTTOM], walls[1:, :, TOP]):
        return False

    if open_passages(walls) != width * height - 1:
        return False
    return _reachable_count(walls) == width * height


def _reachable_count(walls: np.ndarray) -> int:
    height, width = walls.shape[:2]
    start = (0, 0)
    seen = {start}
    queue: deque[Tuple[int, int]] = deque([start])
    while queue:
        x, y = queue.popleft()
        for side_index, side in enumerate(WALLS):
            if walls[y, x, side_index]:
                continue
            dx, dy, _ = NEIGHBOURS[side]
            nx, ny = x + dx, y + dy
            if 0 <= nx < width and 0 <= ny < height and (nx, ny) not in seen:
                seen.add((nx, ny))
                queue.append((nx, ny))
    return len(seen)


__all__ = [
    "NEIGHBOURS",
    "WALLS",
    "check_shape",
    "empty_grid",
    "flatten",
    "grid_shape",
    "is_flattened",
    "is_perfect",
    "make_cell",
    "open_passages",
    "unflatten",
    "wall_array",
]
