"""Default maze source: randomized depth-first carving."""

from __future__ import annotations

import random
from typing import List, Tuple

from ..base import Grid, MazeSource
from .grid import NEIGHBOURS, empty_grid


class BacktrackerMazeSource(MazeSource):
    """Carve perfect mazes with an iterative recursive-backtracker.

    With ``perfect=False`` a share of the remaining interior walls
    (``loop_ratio``) is knocked down afterwards, which introduces loops.
    """

    def __init__(self, *, loop_ratio: float = 0.1) -> None:
        if not 0.0 <= loop_ratio <= 1.0:
            raise ValueError("loop_ratio must be between 0 and 1")
        self.loop_ratio = loop_ratio

    def generate(self, width: int, height: int, perfect: bool, seed: int) -> Grid:
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be positive")
        rng = random.Random(seed)
        grid = empty_grid(width, height)
        self._carve(grid, width, height, rng)
        if not perfect:
            self._open_loops(grid, width, height, rng)
        return grid

    # ------------------------------------------------------------------

    def _carve(self, grid: Grid, width: int, height: int, rng: random.Random) -> None:
        visited = [[False] * width for _ in range(height)]
        visited[0][0] = True
        stack: List[Tuple[int, int]] = [(0, 0)]
        while stack:
            x, y = stack[-1]
            options = []
            for side, (dx, dy, opposite) in NEIGHBOURS.items():
                nx, ny = x + dx, y + dy
                if 0 <= nx < width and 0 <= ny < height and not visited[ny][nx]:
                    options.append((side, opposite, nx, ny))
            if not options:
                stack.pop()
                continue
            side, opposite, nx, ny = rng.choice(options)
            grid[y][x][side] = False
            grid[ny][nx][opposite] = False
            visited[ny][nx] = True
            stack.append((nx, ny))

    def _open_loops(self, grid: Grid, width: int, height: int, rng: random.Random) -> None:
        closed = []
        for y in range(height):
            for x in range(width):
                if x + 1 < width and grid[y][x]["right"]:
                    closed.append((x, y, "right"))
                if y + 1 < height and grid[y][x]["bottom"]:
                    closed.append((x, y, "bottom"))
        rng.shuffle(closed)
        for x, y, side in closed[: int(len(closed) * self.loop_ratio)]:
            dx, dy, opposite = NEIGHBOURS[side]
            grid[y][x][side] = False
            grid[y + dy][x + dx][opposite] = False


__all__ = ["BacktrackerMazeSource"]
