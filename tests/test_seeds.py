import unittest

from mazebatch import ConfigError, OffsetSeeds, SequentialSeeds, SpreadSeeds, seed_policy_from_name


class SeedPolicyTests(unittest.TestCase):
    def test_sequential_seeds_match_indices(self) -> None:
        self.assertEqual(SequentialSeeds().seeds(4), [0, 1, 2, 3])

    def test_offset_seeds_shift_every_index(self) -> None:
        policy = OffsetSeeds(offset=100)
        self.assertEqual(policy.seeds(3), [100, 101, 102])
        self.assertEqual(policy.seed(2, 3), 102)

    def test_spread_seeds_cover_full_range(self) -> None:
        seeds = SpreadSeeds(max_seed=1337420).seeds(500)
        self.assertEqual(len(seeds), 500)
        self.assertEqual(seeds[0], 0)
        self.assertEqual(seeds[-1], 1337420)
        self.assertTrue(all(a <= b for a, b in zip(seeds, seeds[1:])))

    def test_spread_seeds_are_floored(self) -> None:
        self.assertEqual(SpreadSeeds(max_seed=10).seeds(3), [0, 5, 10])
        self.assertEqual(SpreadSeeds(max_seed=10).seeds(4), [0, 3, 6, 10])

    def test_spread_single_maze_does_not_divide_by_zero(self) -> None:
        self.assertEqual(SpreadSeeds().seeds(1), [0])
        self.assertEqual(SpreadSeeds().seed(0, 1), 0)

    def test_invalid_index_and_count_are_rejected(self) -> None:
        with self.assertRaises(ValueError):
            SequentialSeeds().seeds(0)
        with self.assertRaises(ValueError):
            SequentialSeeds().seed(3, 3)
        with self.assertRaises(ValueError):
            SpreadSeeds().seed(-1, 3)

    def test_negative_max_seed_is_a_config_error(self) -> None:
        with self.assertRaises(ConfigError):
            SpreadSeeds(max_seed=-1)

    def test_policy_lookup_by_name(self) -> None:
        self.assertEqual(seed_policy_from_name("sequential"), SequentialSeeds())
        self.assertEqual(seed_policy_from_name("Offset", offset=7), OffsetSeeds(offset=7))
        self.assertEqual(seed_policy_from_name("spread", max_seed=99), SpreadSeeds(max_seed=99))
        with self.assertRaises(ConfigError):
            seed_policy_from_name("random")


if __name__ == "__main__":
    unittest.main()
