"""Deterministic batch generation of mazes serialized to JSON documents."""

from __future__ import annotations

import argparse
import dataclasses
import json
import os
import shutil
import sys
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

from .base import ConfigError, GenerationError, MazeSource, PathLike
from .config import BatchConfig, SweepConfig, get_preset, sweep_sizes
from .maze.backtracker import BacktrackerMazeSource
from .maze.grid import flatten as flatten_grid
from .maze.render import save_previews
from .seeds import DEFAULT_MAX_SEED, SEED_POLICIES, SeedPolicy, seed_policy_from_name

ProgressFn = Callable[[str], None]


def _new_file_mode() -> int:
    """Mode a plain open() would give a new file under the current umask."""

    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


@dataclass
class Batch:
    width: int
    height: int
    seeds: List[int]
    mazes: List[Any]
    flattened: bool = False

    def __len__(self) -> int:
        return len(self.mazes)

    def to_json(self, *, indent: Optional[int] = None) -> str:
        if indent is None:
            return json.dumps(self.mazes, separators=(",", ":"))
        return json.dumps(self.mazes, indent=indent)


@dataclass
class SweepReport:
    written: Dict[int, Path] = field(default_factory=dict)
    failed: Dict[int, BaseException] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed


class BatchGenerator:
    """Request ``count`` mazes from a source and persist them as one document."""

    def __init__(self, source: Optional[MazeSource] = None) -> None:
        self.source = source if source is not None else BacktrackerMazeSource()

    def generate(
        self,
        width: int,
        height: int,
        count: int,
        seed_policy: SeedPolicy,
        *,
        perfect: bool = True,
        flatten: bool = False,
    ) -> Batch:
        for name, value in (("width", width), ("height", height), ("count", count)):
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ConfigError(f"{name} must be a positive integer, got {value!r}")

        seeds = seed_policy.seeds(count)
        mazes: List[Any] = []
        for index, seed in enumerate(seeds):
            try:
                grid = self.source.generate(width, height, perfect, seed)
            except Exception as exc:
                raise GenerationError(
                    f"Maze {index + 1}/{count} ({width}x{height}, seed={seed}) failed: {exc}",
                    index=index,
                    seed=seed,
                ) from exc
            mazes.append(flatten_grid(grid) if flatten else grid)
        return Batch(width=width, height=height, seeds=seeds, mazes=mazes, flattened=flatten)

    def write(self, batch: Batch, path: PathLike, *, indent: Optional[int] = None) -> Path:
        """Replace ``path`` with the serialized batch.

        The document goes to a temporary file beside ``path`` first, so
        readers see either the previous file or the complete new one.
        """

        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        payload = batch.to_json(indent=indent)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{target.name}.", suffix=".tmp", dir=str(target.parent)
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
            if target.exists():
                shutil.copymode(target, tmp_name)
            else:
                os.chmod(tmp_name, _new_file_mode())
            os.replace(tmp_name, target)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
        return target

    def run(self, config: BatchConfig, *, preview_limit: int = 0) -> Path:
        batch = self.generate(
            config.width,
            config.height,
            config.count,
            config.seed_policy,
            perfect=config.perfect,
            flatten=config.flatten,
        )
        path = self.write(batch, config.output_path, indent=config.indent)
        if preview_limit > 0:
            preview_dir = path.parent / f"{path.stem}_previews"
            save_previews(batch.mazes, batch.width, batch.height, preview_dir, preview_limit)
        return path

    def run_sweep(
        self,
        config: SweepConfig,
        *,
        preview_limit: int = 0,
        progress: Optional[ProgressFn] = None,
    ) -> SweepReport:
        """Run one batch per size, in order.

        Without ``isolate_failures`` the first failing size propagates and
        later sizes are not generated.
        """

        report = SweepReport()
        total = len(config.sizes)
        for position, size in enumerate(config.sizes, start=1):
            try:
                path = self.run(config.batch_for(size), preview_limit=preview_limit)
            except (GenerationError, OSError) as exc:
                if not config.isolate_failures:
                    raise
                report.failed[size] = exc
                if progress is not None:
                    progress(f"[{position}/{total}] size {size} failed: {exc}")
                continue
            report.written[size] = path
            if progress is not None:
                progress(f"[{position}/{total}] wrote {config.count} mazes of {size}x{size} to {path}")
        return report


__all__ = ["Batch", "BatchGenerator", "SweepReport"]


def _add_common_arguments(parser: argparse.ArgumentParser, default_preset: str) -> None:
    parser.add_argument("--preset", type=str, default=default_preset, help="Named configuration to start from")
    parser.add_argument("--count", type=int, default=None, help="Number of mazes per batch")
    parser.add_argument("--seeds", choices=SEED_POLICIES, default=None, help="Seed derivation policy")
    parser.add_argument("--offset", type=int, default=None, help="Offset for the 'offset' seed policy")
    parser.add_argument("--max-seed", type=int, default=None, help="Upper seed for the 'spread' policy")
    parser.add_argument(
        "--flatten",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Store each maze as a flat row-major cell list",
    )
    parser.add_argument(
        "--perfect",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Request perfect mazes (no loops)",
    )
    parser.add_argument("--output-dir", type=Path, default=None, help="Where to write documents")
    parser.add_argument("--indent", type=int, default=None, help="Pretty-print JSON with this indent")
    parser.add_argument("--preview", type=int, default=0, help="Render the first N mazes of each batch as PNG")


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate reproducible maze batches as JSON")
    subparsers = parser.add_subparsers(dest="command", required=True)

    single = subparsers.add_parser("single", help="Write one batch to one file")
    _add_common_arguments(single, "single")
    single.add_argument("--width", type=int, default=None)
    single.add_argument("--height", type=int, default=None)
    single.add_argument("--filename", type=str, default=None)

    sweep = subparsers.add_parser("sweep", help="Write one square batch per size")
    _add_common_arguments(sweep, "sweep")
    sweep.add_argument("--min-size", type=int, default=None)
    sweep.add_argument("--max-size", type=int, default=None)
    sweep.add_argument("--pattern", type=str, default=None, help="File name pattern containing {size}")
    sweep.add_argument(
        "--keep-going",
        action="store_true",
        help="Continue with the next size when one size fails",
    )
    return parser.parse_args(argv)


def _seed_policy_from_args(args: argparse.Namespace, current: SeedPolicy) -> SeedPolicy:
    if args.seeds is None and args.offset is None and args.max_seed is None:
        return current
    name = args.seeds
    if name is None:
        if args.offset is not None and args.max_seed is not None:
            raise ConfigError("--offset and --max-seed belong to different seed policies")
        name = "offset" if args.offset is not None else "spread"
    if args.offset is not None and name != "offset":
        raise ConfigError(f"--offset does not apply to the '{name}' seed policy")
    if args.max_seed is not None and name != "spread":
        raise ConfigError(f"--max-seed does not apply to the '{name}' seed policy")
    offset = args.offset if args.offset is not None else getattr(current, "offset", 0)
    max_seed = args.max_seed if args.max_seed is not None else getattr(current, "max_seed", DEFAULT_MAX_SEED)
    return seed_policy_from_name(name, offset=offset, max_seed=max_seed)


def _common_overrides(args: argparse.Namespace, current: Union[BatchConfig, SweepConfig]) -> dict:
    overrides: Dict[str, Any] = {"seed_policy": _seed_policy_from_args(args, current.seed_policy)}
    if args.count is not None:
        overrides["count"] = args.count
    if args.flatten is not None:
        overrides["flatten"] = args.flatten
    if args.perfect is not None:
        overrides["perfect"] = args.perfect
    if args.output_dir is not None:
        overrides["output_dir"] = args.output_dir
    if args.indent is not None:
        overrides["indent"] = args.indent
    return overrides


def build_config(args: argparse.Namespace) -> Union[BatchConfig, SweepConfig]:
    base = get_preset(args.preset)
    if args.command == "single":
        if not isinstance(base, BatchConfig):
            raise ConfigError(f"Preset '{args.preset}' is not a single-batch preset")
        overrides = _common_overrides(args, base)
        if args.width is not None:
            overrides["width"] = args.width
        if args.height is not None:
            overrides["height"] = args.height
        if args.filename is not None:
            overrides["filename"] = args.filename
        return dataclasses.replace(base, **overrides)

    if not isinstance(base, SweepConfig):
        raise ConfigError(f"Preset '{args.preset}' is not a sweep preset")
    overrides = _common_overrides(args, base)
    if args.min_size is not None or args.max_size is not None:
        first = args.min_size if args.min_size is not None else min(base.sizes)
        last = args.max_size if args.max_size is not None else max(base.sizes)
        overrides["sizes"] = sweep_sizes(first, last)
    if args.pattern is not None:
        overrides["filename_pattern"] = args.pattern
    if args.keep_going:
        overrides["isolate_failures"] = True
    return dataclasses.replace(base, **overrides)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    config = build_config(args)
    generator = BatchGenerator()

    if isinstance(config, BatchConfig):
        path = generator.run(config, preview_limit=args.preview)
        print(
            f"Wrote {config.count} mazes of {config.width}x{config.height} "
            f"({config.seed_policy.describe()} seeds) to {path}"
        )
        return 0

    report = generator.run_sweep(config, preview_limit=args.preview, progress=print)
    print(f"Wrote {len(report.written)} of {len(config.sizes)} sizes to {config.output_dir}")
    if not report.ok:
        print(f"Failed sizes: {', '.join(str(size) for size in report.failed)}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
