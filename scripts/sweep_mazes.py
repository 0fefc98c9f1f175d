#!/usr/bin/env python3
"""Generate one batch of square mazes per size from 2 to 39, one file per size."""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from mazebatch import BatchGenerator, OffsetSeeds, SweepConfig
from mazebatch.config import sweep_sizes

MIN_SIZE = 2
MAX_SIZE = 39
MAZE_COUNT = 500
SEED_OFFSET = 0
OUTPUT_DIR = ROOT / "mazes"


def main() -> None:
    config = SweepConfig(
        sizes=sweep_sizes(MIN_SIZE, MAX_SIZE),
        count=MAZE_COUNT,
        seed_policy=OffsetSeeds(offset=SEED_OFFSET),
        flatten=False,
        output_dir=OUTPUT_DIR,
    )
    report = BatchGenerator().run_sweep(config, progress=print)
    print(f"Wrote {len(report.written)} files to {config.output_dir}")


if __name__ == "__main__":
    main()
