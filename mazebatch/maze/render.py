"""Preview rendering of maze grids with Pillow."""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Sequence

from PIL import Image, ImageDraw

from ..base import Cell, PathLike
from .grid import grid_shape, is_flattened, unflatten

WALL_COLOR = (0, 0, 0)
PATH_COLOR = (255, 255, 255)


def render_maze(
    grid: Sequence[Sequence[Cell]],
    *,
    cell_size: int = 16,
    wall_width: int = 2,
) -> Image.Image:
    """Draw white passages with black walls; one ``cell_size`` square per cell."""

    if cell_size <= wall_width:
        raise ValueError("cell_size must be larger than wall_width")
    width, height = grid_shape(grid)
    margin = wall_width
    canvas = Image.new(
        "RGB",
        (width * cell_size + 2 * margin, height * cell_size + 2 * margin),
        PATH_COLOR,
    )
    draw = ImageDraw.Draw(canvas)

    for row in grid:
        for cell in row:
            left = margin + cell["x"] * cell_size
            top = margin + cell["y"] * cell_size
            right = left + cell_size
            bottom = top + cell_size
            if cell["top"]:
                draw.line((left, top, right, top), fill=WALL_COLOR, width=wall_width)
            if cell["bottom"]:
                draw.line((left, bottom, right, bottom), fill=WALL_COLOR, width=wall_width)
            if cell["left"]:
                draw.line((left, top, left, bottom), fill=WALL_COLOR, width=wall_width)
            if cell["right"]:
                draw.line((right, top, right, bottom), fill=WALL_COLOR, width=wall_width)
    return canvas


def save_previews(
    mazes: Sequence[Any],
    width: int,
    height: int,
    directory: PathLike,
    limit: int,
    *,
    cell_size: int = 16,
) -> List[Path]:
    """Render the first ``limit`` mazes of a batch as ``maze_<index>.png``."""

    out_dir = Path(directory)
    out_dir.mkdir(parents=True, exist_ok=True)
    paths: List[Path] = []
    for index, maze in enumerate(mazes[: max(0, limit)]):
        grid = unflatten(maze, width, height) if is_flattened(maze) else maze
        path = out_dir / f"maze_{index}.png"
        render_maze(grid, cell_size=cell_size).save(path)
        paths.append(path)
    return paths


__all__ = ["render_maze", "save_previews"]
