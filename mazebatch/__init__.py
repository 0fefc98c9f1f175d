"""Reproducible batch generation of mazes serialized to JSON."""

__all__ = [
    "AbstractBatchReader",
    "BacktrackerMazeSource",
    "Batch",
    "BatchConfig",
    "BatchGenerator",
    "BatchReader",
    "ConfigError",
    "GenerationError",
    "MazeSource",
    "OffsetSeeds",
    "SeedPolicy",
    "SequentialSeeds",
    "SpreadSeeds",
    "SweepConfig",
    "SweepReport",
    "seed_policy_from_name",
]

from .base import AbstractBatchReader, ConfigError, GenerationError, MazeSource
from .batch import Batch, BatchGenerator, SweepReport
from .config import BatchConfig, SweepConfig
from .maze import BacktrackerMazeSource
from .reader import BatchReader
from .seeds import OffsetSeeds, SeedPolicy, SequentialSeeds, SpreadSeeds, seed_policy_from_name
