import unittest
from pathlib import Path

from mazebatch import BatchConfig, ConfigError, OffsetSeeds, SequentialSeeds, SpreadSeeds, SweepConfig
from mazebatch.config import PRESETS, get_preset, sweep_sizes


class BatchConfigTests(unittest.TestCase):
    def test_invalid_dimensions_are_rejected(self) -> None:
        for kwargs in (
            {"width": 0, "height": 3, "count": 1},
            {"width": 3, "height": -2, "count": 1},
            {"width": 3, "height": 3, "count": 0},
            {"width": True, "height": 3, "count": 1},
            {"width": 2.5, "height": 3, "count": 1},
        ):
            with self.assertRaises(ConfigError):
                BatchConfig(**kwargs)

    def test_seed_policy_and_filename_are_checked(self) -> None:
        with self.assertRaises(ConfigError):
            BatchConfig(width=2, height=2, count=1, seed_policy="spread")
        with self.assertRaises(ConfigError):
            BatchConfig(width=2, height=2, count=1, filename=" ")
        with self.assertRaises(ConfigError):
            BatchConfig(width=2, height=2, count=1, indent=-1)

    def test_output_path_joins_directory_and_name(self) -> None:
        config = BatchConfig(width=2, height=2, count=1, output_dir="out", filename="x.json")
        self.assertEqual(config.output_path, Path("out") / "x.json")


class SweepConfigTests(unittest.TestCase):
    def test_batch_for_builds_square_batch(self) -> None:
        sweep = SweepConfig(sizes=[2, 3], count=4, seed_policy=OffsetSeeds(offset=3), output_dir="out")
        batch = sweep.batch_for(3)
        self.assertEqual((batch.width, batch.height, batch.count), (3, 3, 4))
        self.assertEqual(batch.filename, "mazes_3.json")
        self.assertEqual(batch.seed_policy, OffsetSeeds(offset=3))
        self.assertFalse(batch.flatten)

    def test_invalid_sweeps_are_rejected(self) -> None:
        with self.assertRaises(ConfigError):
            SweepConfig(sizes=[], count=1)
        with self.assertRaises(ConfigError):
            SweepConfig(sizes=[2, 0], count=1)
        with self.assertRaises(ConfigError):
            SweepConfig(sizes=[2], count=1, filename_pattern="mazes.json")

    def test_sweep_sizes_are_inclusive(self) -> None:
        sizes = sweep_sizes(2, 39)
        self.assertEqual(sizes[0], 2)
        self.assertEqual(sizes[-1], 39)
        self.assertEqual(len(sizes), 38)
        with self.assertRaises(ConfigError):
            sweep_sizes(5, 4)


class PresetTests(unittest.TestCase):
    def test_single_preset_matches_published_batch(self) -> None:
        single = get_preset("single")
        self.assertEqual((single.width, single.height, single.count), (25, 25, 500))
        self.assertEqual(single.seed_policy, SpreadSeeds(max_seed=1337420))
        self.assertTrue(single.flatten)
        self.assertEqual(single.filename, "mazes.json")

    def test_sweep_presets(self) -> None:
        sweep = PRESETS["sweep"]
        self.assertEqual(sweep.sizes, tuple(range(2, 40)))
        self.assertEqual(sweep.seed_policy, SequentialSeeds())
        self.assertIsInstance(PRESETS["sweep-offset"].seed_policy, OffsetSeeds)

    def test_unknown_preset(self) -> None:
        with self.assertRaises(ConfigError):
            get_preset("huge")


if __name__ == "__main__":
    unittest.main()
