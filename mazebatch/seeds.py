"""Seed derivation policies for reproducible maze batches."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List

from .base import ConfigError

DEFAULT_MAX_SEED = 1337420


class SeedPolicy(ABC):
    """Maps a batch index to the seed used to request that maze."""

    name = "abstract"

    @abstractmethod
    def _derive(self, index: int, count: int) -> int:
        ...

    def seed(self, index: int, count: int) -> int:
        if count <= 0:
            raise ValueError("count must be positive")
        if not 0 <= index < count:
            raise ValueError(f"index {index} outside batch of {count}")
        return self._derive(index, count)

    def seeds(self, count: int) -> List[int]:
        if count <= 0:
            raise ValueError("count must be positive")
        return [self._derive(index, count) for index in range(count)]

    def describe(self) -> str:
        return self.name


@dataclass(frozen=True)
class SequentialSeeds(SeedPolicy):
    """seed(i) = i"""

    name = "sequential"

    def _derive(self, index: int, count: int) -> int:
        return index


@dataclass(frozen=True)
class OffsetSeeds(SeedPolicy):
    """seed(i) = i + offset"""

    offset: int = 0
    name = "offset"

    def _derive(self, index: int, count: int) -> int:
        return index + self.offset

    def describe(self) -> str:
        return f"offset({self.offset})"


@dataclass(frozen=True)
class SpreadSeeds(SeedPolicy):
    """Spread ``count`` seeds evenly over ``[0, max_seed]``.

    A single-maze batch gets seed 0.
    """

    max_seed: int = DEFAULT_MAX_SEED
    name = "spread"

    def __post_init__(self) -> None:
        if self.max_seed < 0:
            raise ConfigError("max_seed must be non-negative")

    def _derive(self, index: int, count: int) -> int:
        if count == 1:
            return 0
        # float arithmetic keeps seeds identical to previously published batches
        return math.floor(index / (count - 1) * self.max_seed)

    def describe(self) -> str:
        return f"spread({self.max_seed})"


SEED_POLICIES = ("sequential", "offset", "spread")


def seed_policy_from_name(
    name: str,
    *,
    offset: int = 0,
    max_seed: int = DEFAULT_MAX_SEED,
) -> SeedPolicy:
    key = name.strip().lower()
    if key == "sequential":
        return SequentialSeeds()
    if key == "offset":
        return OffsetSeeds(offset=offset)
    if key == "spread":
        return SpreadSeeds(max_seed=max_seed)
    raise ConfigError(
        f"Unknown seed policy '{name}', expected one of: {', '.join(SEED_POLICIES)}"
    )


__all__ = [
    "DEFAULT_MAX_SEED",
    "OffsetSeeds",
    "SEED_POLICIES",
    "SeedPolicy",
    "SequentialSeeds",
    "SpreadSeeds",
    "seed_policy_from_name",
]
