"""Abstract interfaces for maze sources and batch documents."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Union

PathLike = Union[str, Path]
Cell = Dict[str, Any]
Grid = List[List[Cell]]


class ConfigError(ValueError):
    """Raised when a batch or sweep configuration is invalid."""


class GenerationError(RuntimeError):
    """Raised when a maze source fails while a batch is being built."""

    def __init__(self, message: str, *, index: int, seed: int) -> None:
        super().__init__(message)
        self.index = index
        self.seed = seed


class MazeSource(ABC):
    """Pluggable maze generator used by the batch generator.

    Implementations must be deterministic: the same ``(width, height,
    perfect, seed)`` tuple always yields the same grid. The grid is a list of
    ``height`` rows, each holding ``width`` cell dictionaries.
    """

    @abstractmethod
    def generate(self, width: int, height: int, perfect: bool, seed: int) -> Grid:
        """Return one maze grid for the requested size and seed."""


class AbstractBatchReader(ABC):
    """Base class scaffolding for reading batch documents back from disk."""

    def __init__(self, document_path: PathLike) -> None:
        self.document_path = Path(document_path)
        if not self.document_path.exists():
            raise FileNotFoundError(f"Batch document not found: {self.document_path}")
        self._mazes = self._read_document()

    @property
    def mazes(self) -> List[Any]:
        """Return the loaded mazes in document order."""

        return self._mazes

    def __len__(self) -> int:
        return len(self._mazes)

    def _read_document(self) -> List[Any]:
        raw = json.loads(self.document_path.read_text(encoding="utf-8"))
        if not isinstance(raw, list):
            raise ValueError("Batch document must be a list of mazes")
        return raw

    def get_maze(self, index: int) -> Any:
        try:
            return self._mazes[index]
        except IndexError as exc:
            raise IndexError(
                f"Maze index {index} out of range for {len(self._mazes)} mazes"
            ) from exc

    @abstractmethod
    def verify(self, *args, **kwargs) -> None:
        """Check every maze in the document, raising on the first bad one."""


__all__ = [
    "AbstractBatchReader",
    "Cell",
    "ConfigError",
    "GenerationError",
    "Grid",
    "MazeSource",
    "PathLike",
]
