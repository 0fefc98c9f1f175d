import tempfile
import unittest
from pathlib import Path

from mazebatch.maze import BacktrackerMazeSource, flatten, is_perfect, render_maze, save_previews, unflatten, wall_array
from mazebatch.maze.grid import check_shape, empty_grid, grid_shape, open_passages


class BacktrackerTests(unittest.TestCase):
    def setUp(self) -> None:
        self.source = BacktrackerMazeSource()

    def test_generated_mazes_are_perfect(self) -> None:
        for width, height in ((1, 1), (2, 2), (5, 3), (8, 8)):
            for seed in (0, 1, 1337420):
                grid = self.source.generate(width, height, True, seed)
                self.assertEqual(grid_shape(grid), (width, height))
                self.assertTrue(is_perfect(grid), f"{width}x{height} seed={seed}")

    def test_smallest_sweep_size_is_structurally_valid(self) -> None:
        grid = self.source.generate(2, 2, True, 0)
        check_shape(grid, 2, 2, flattened=False)
        self.assertEqual(open_passages(wall_array(grid)), 3)

    def test_large_maze_does_not_hit_recursion_limit(self) -> None:
        grid = self.source.generate(60, 60, True, 3)
        self.assertTrue(is_perfect(grid))

    def test_same_seed_same_maze(self) -> None:
        self.assertEqual(self.source.generate(7, 4, True, 42), self.source.generate(7, 4, True, 42))
        self.assertNotEqual(self.source.generate(7, 4, True, 42), self.source.generate(7, 4, True, 43))

    def test_imperfect_mazes_contain_loops(self) -> None:
        source = BacktrackerMazeSource(loop_ratio=0.5)
        grid = source.generate(5, 5, False, 9)
        self.assertGreater(open_passages(wall_array(grid)), 24)
        self.assertFalse(is_perfect(grid))

    def test_invalid_arguments(self) -> None:
        with self.assertRaises(ValueError):
            self.source.generate(0, 3, True, 0)
        with self.assertRaises(ValueError):
            BacktrackerMazeSource(loop_ratio=1.5)


class GridTests(unittest.TestCase):
    def test_flatten_round_trip(self) -> None:
        grid = empty_grid(3, 2)
        flat = flatten(grid)
        self.assertEqual(len(flat), 6)
        self.assertEqual(flat[4], grid[1][1])
        self.assertEqual(unflatten(flat, 3, 2), grid)
        with self.assertRaises(ValueError):
            unflatten(flat, 2, 2)

    def test_fully_walled_grid_is_not_perfect(self) -> None:
        self.assertFalse(is_perfect(empty_grid(2, 2)))

    def test_inconsistent_shared_wall_is_not_perfect(self) -> None:
        grid = BacktrackerMazeSource().generate(3, 3, True, 5)
        for row in grid:
            for cell in row:
                if cell["x"] < 2 and not cell["right"]:
                    cell["right"] = True
                    break
            else:
                continue
            break
        self.assertFalse(is_perfect(grid))

    def test_open_border_is_not_perfect(self) -> None:
        grid = BacktrackerMazeSource().generate(3, 3, True, 5)
        grid[0][1]["top"] = False
        self.assertFalse(is_perfect(grid))

    def test_check_shape_reports_mismatches(self) -> None:
        grid = empty_grid(3, 3)
        with self.assertRaises(ValueError):
            check_shape(grid, 4, 3, flattened=False)
        with self.assertRaises(ValueError):
            check_shape(flatten(grid), 3, 3, flattened=False)
        with self.assertRaises(ValueError):
            check_shape(flatten(grid)[:-1], 3, 3, flattened=True)
        grid[1][2]["x"] = 0
        with self.assertRaises(ValueError):
            check_shape(grid, 3, 3, flattened=False)

    def test_wall_array_layout(self) -> None:
        grid = empty_grid(2, 1)
        grid[0][0]["right"] = False
        grid[0][1]["left"] = False
        walls = wall_array(grid)
        self.assertEqual(walls.shape, (1, 2, 4))
        self.assertEqual(walls[0, 0].tolist(), [True, False, True, True])
        self.assertEqual(walls[0, 1].tolist(), [True, True, True, False])


class RenderTests(unittest.TestCase):
    def test_render_draws_walls_and_passages(self) -> None:
        grid = BacktrackerMazeSource().generate(3, 3, True, 0)
        image = render_maze(grid, cell_size=10, wall_width=2)
        self.assertEqual(image.size, (34, 34))
        self.assertEqual(image.getpixel((2, 10)), (0, 0, 0))
        self.assertEqual(image.getpixel((7, 7)), (255, 255, 255))

    def test_render_rejects_tiny_cells(self) -> None:
        with self.assertRaises(ValueError):
            render_maze(empty_grid(2, 2), cell_size=2, wall_width=2)

    def test_save_previews_handles_flattened_mazes(self) -> None:
        source = BacktrackerMazeSource()
        mazes = [flatten(source.generate(4, 3, True, seed)) for seed in range(3)]
        with tempfile.TemporaryDirectory() as tmp:
            paths = save_previews(mazes, 4, 3, Path(tmp) / "previews", 2)
            self.assertEqual([p.name for p in paths], ["maze_0.png", "maze_1.png"])
            self.assertTrue(all(p.exists() for p in paths))


if __name__ == "__main__":
    unittest.main()
