"""Maze grids: cell model, default source and preview rendering."""

__all__ = [
    "BacktrackerMazeSource",
    "check_shape",
    "flatten",
    "is_perfect",
    "render_maze",
    "save_previews",
    "unflatten",
    "wall_array",
]

from .backtracker import BacktrackerMazeSource
from .grid import check_shape, flatten, is_perfect, unflatten, wall_array
from .render import render_maze, save_previews
