"""Load batch documents back from disk and check their structure."""

from __future__ import annotations

from typing import List

from .base import AbstractBatchReader, Grid, PathLike
from .maze.grid import check_shape, is_perfect, unflatten


class BatchReader(AbstractBatchReader):
    """Read a document of ``width`` x ``height`` mazes, nested or flattened."""

    def __init__(
        self,
        document_path: PathLike,
        *,
        width: int,
        height: int,
        flattened: bool,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be positive")
        self.width = width
        self.height = height
        self.flattened = flattened
        super().__init__(document_path)

    def grid(self, index: int) -> Grid:
        maze = self.get_maze(index)
        if self.flattened:
            return unflatten(maze, self.width, self.height)
        return maze

    def verify(self) -> None:
        for index, maze in enumerate(self.mazes):
            try:
                check_shape(maze, self.width, self.height, self.flattened)
            except ValueError as exc:
                raise ValueError(f"Maze {index} in {self.document_path}: {exc}") from exc

    def imperfect_indices(self) -> List[int]:
        return [index for index in range(len(self)) if not is_perfect(self.grid(index))]


__all__ = ["BatchReader"]
