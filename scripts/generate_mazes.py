#!/usr/bin/env python3
"""Generate the fixed 25x25 batch of 500 flattened mazes with spread seeds."""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from mazebatch import BatchConfig, BatchGenerator, SpreadSeeds

SIZE = (25, 25)
MAZE_COUNT = 500
MAX_SEED = 1337420
OUTPUT_DIR = ROOT / "mazes"


def main() -> None:
    config = BatchConfig(
        width=SIZE[0],
        height=SIZE[1],
        count=MAZE_COUNT,
        seed_policy=SpreadSeeds(max_seed=MAX_SEED),
        flatten=True,
        output_dir=OUTPUT_DIR,
        filename="mazes.json",
    )
    path = BatchGenerator().run(config)
    print(f"Wrote {config.count} mazes to {path}")


if __name__ == "__main__":
    main()
