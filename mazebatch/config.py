"""Batch and sweep configuration, validated when constructed."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Sequence, Tuple, Union

from .base import ConfigError, PathLike
from .seeds import OffsetSeeds, SeedPolicy, SequentialSeeds, SpreadSeeds

DEFAULT_OUTPUT_DIR = Path("mazes")
DEFAULT_FILENAME = "mazes.json"
DEFAULT_FILENAME_PATTERN = "mazes_{size}.json"


def _require_positive(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigError(f"{name} must be a positive integer, got {value!r}")


def _check_indent(indent: Optional[int]) -> None:
    if indent is not None and (isinstance(indent, bool) or indent < 0):
        raise ConfigError("indent must be None or a non-negative integer")


@dataclass
class BatchConfig:
    """One batch: ``count`` mazes of ``width`` x ``height`` written to one file."""

    width: int
    height: int
    count: int
    seed_policy: SeedPolicy = field(default_factory=SequentialSeeds)
    perfect: bool = True
    flatten: bool = True
    output_dir: PathLike = DEFAULT_OUTPUT_DIR
    filename: str = DEFAULT_FILENAME
    indent: Optional[int] = None

    def __post_init__(self) -> None:
        _require_positive("width", self.width)
        _require_positive("height", self.height)
        _require_positive("count", self.count)
        if not isinstance(self.seed_policy, SeedPolicy):
            raise ConfigError("seed_policy must be a SeedPolicy instance")
        if not self.filename or not str(self.filename).strip():
            raise ConfigError("filename must not be empty")
        _check_indent(self.indent)
        self.output_dir = Path(self.output_dir)

    @property
    def output_path(self) -> Path:
        return Path(self.output_dir) / self.filename


@dataclass
class SweepConfig:
    """Square batches over ``sizes``, one output file per size."""

    sizes: Sequence[int]
    count: int
    seed_policy: SeedPolicy = field(default_factory=SequentialSeeds)
    perfect: bool = True
    flatten: bool = False
    output_dir: PathLike = DEFAULT_OUTPUT_DIR
    filename_pattern: str = DEFAULT_FILENAME_PATTERN
    indent: Optional[int] = None
    isolate_failures: bool = False

    def __post_init__(self) -> None:
        self.sizes = tuple(self.sizes)
        if not self.sizes:
            raise ConfigError("sizes must not be empty")
        for size in self.sizes:
            _require_positive("size", size)
        _require_positive("count", self.count)
        if not isinstance(self.seed_policy, SeedPolicy):
            raise ConfigError("seed_policy must be a SeedPolicy instance")
        if "{size}" not in self.filename_pattern:
            raise ConfigError("filename_pattern must contain '{size}'")
        _check_indent(self.indent)
        self.output_dir = Path(self.output_dir)

    def filename_for(self, size: int) -> str:
        return self.filename_pattern.format(size=size)

    def batch_for(self, size: int) -> BatchConfig:
        return BatchConfig(
            width=size,
            height=size,
            count=self.count,
            seed_policy=self.seed_policy,
            perfect=self.perfect,
            flatten=self.flatten,
            output_dir=self.output_dir,
            filename=self.filename_for(size),
            indent=self.indent,
        )


def sweep_sizes(first: int, last: int) -> Tuple[int, ...]:
    """Inclusive size range, ``sweep_sizes(2, 39) == (2, 3, ..., 39)``."""

    if last < first:
        raise ConfigError(f"Empty size range {first}..{last}")
    return tuple(range(first, last + 1))


PRESETS: Dict[str, Union[BatchConfig, SweepConfig]] = {
    "single": BatchConfig(
        width=25,
        height=25,
        count=500,
        seed_policy=SpreadSeeds(max_seed=1337420),
        flatten=True,
    ),
    "sweep": SweepConfig(
        sizes=sweep_sizes(2, 39),
        count=500,
        seed_policy=SequentialSeeds(),
    ),
    "sweep-offset": SweepConfig(
        sizes=sweep_sizes(2, 39),
        count=500,
        seed_policy=OffsetSeeds(offset=1000),
    ),
}


def get_preset(name: str) -> Union[BatchConfig, SweepConfig]:
    try:
        return PRESETS[name]
    except KeyError as exc:
        raise ConfigError(
            f"Unknown preset '{name}', expected one of: {', '.join(sorted(PRESETS))}"
        ) from exc


__all__ = [
    "BatchConfig",
    "DEFAULT_FILENAME",
    "DEFAULT_FILENAME_PATTERN",
    "DEFAULT_OUTPUT_DIR",
    "PRESETS",
    "SweepConfig",
    "get_preset",
    "sweep_sizes",
]
