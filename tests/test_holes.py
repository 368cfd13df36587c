import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import numpy as np

from prim_maze.algo.prim import generate
from prim_maze.core import analysis
from prim_maze.core.errors import OutOfRange
from prim_maze.core.grid import Grid
from prim_maze.core.holes import HolePuncher, punch_hole, punch_holes

class TestHolePuncher(unittest.TestCase):
    def open_3x3(self):
        # Every door open, symmetric
        maze = np.full((3, 3), Grid.ALL_DOORS, dtype=np.uint8)
        maze[:, 0] ^= Grid.LEFT
        maze[:, -1] ^= Grid.RIGHT
        maze[0, :] ^= Grid.UP
        maze[-1, :] ^= Grid.DOWN
        return maze

    def assert_isolated(self, maze, x, y):
        self.assertEqual(maze[y, x], 0)
        grid = Grid(maze.shape[1], maze.shape[0])
        for nx, ny, dir_bit in grid.get_neighbors(x, y):
            self.assertFalse(maze[ny, nx] & Grid.OPPOSITE[dir_bit], f"({nx}, {ny}) still opens towards ({x}, {y})")

    def test_center_hole(self):
        maze = self.open_3x3()
        out = punch_hole(maze, (1, 1))
        self.assertIs(out, maze)
        self.assert_isolated(maze, 1, 1)
        self.assertTrue(analysis.is_symmetric(maze))
        # Ring around the hole untouched
        self.assertEqual(maze[0, 0], Grid.RIGHT | Grid.DOWN)
        self.assertEqual(maze[0, 1], Grid.LEFT | Grid.RIGHT)

    def test_corner_and_edge_holes(self):
        for coord in [(0, 0), (2, 0), (0, 2), (2, 2), (1, 0), (0, 1), (2, 1), (1, 2)]:
            maze = self.open_3x3()
            punch_hole(maze, coord)
            self.assert_isolated(maze, *coord)
            self.assertTrue(analysis.is_symmetric(maze))
            self.assertTrue(analysis.is_boundary_safe(maze))

    def test_single_row(self):
        maze = generate(5, 1, seed=3)
        punch_hole(maze, (4, 0))
        self.assertEqual(maze.tolist(), [[1, 3, 3, 2, 0]])

    def test_generated_maze(self):
        maze = generate(12, 9, seed=11)
        holes = [(0, 0), (11, 8), (5, 4), (11, 0), (3, 8)]
        for coord in holes:
            punch_hole(maze, coord)
            self.assertTrue(analysis.is_symmetric(maze))
            self.assert_isolated(maze, *coord)

        stats = analysis.calculate_stats(maze)
        self.assertGreaterEqual(stats["isolated"], len(holes))
        self.assertFalse(analysis.is_connected(maze))
        self.assertTrue(analysis.is_acyclic(maze))

    def test_wider_dtypes_keep_other_bits(self):
        maze = np.array([[Grid.RIGHT | 0x100, Grid.LEFT]], dtype=np.int32)
        punch_hole(maze, (1, 0))
        self.assertEqual(maze.tolist(), [[0x100, 0]])

        maze = np.array([[Grid.RIGHT | Grid.DOWN, Grid.LEFT],
                         [Grid.UP, 0]], dtype=np.int8)
        punch_hole(maze, (1, 0))
        self.assertEqual(maze.tolist(), [[Grid.DOWN, 0], [Grid.UP, 0]])

    def test_idempotent(self):
        maze = generate(6, 6, seed=2)
        once = punch_hole(maze.copy(), (2, 3))
        twice = punch_hole(punch_hole(maze.copy(), (2, 3)), (2, 3))
        self.assertEqual(once.tobytes(), twice.tobytes())

    def test_order_independent(self):
        maze = generate(10, 10, seed=4)
        coords = [(1, 1), (1, 2), (5, 5), (9, 0)]
        a = punch_holes(maze.copy(), coords)
        b = punch_holes(maze.copy(), list(reversed(coords)))
        self.assertEqual(a.tobytes(), b.tobytes())
        for coord in coords:
            self.assert_isolated(a, *coord)

    def test_out_of_range(self):
        maze = generate(4, 4, seed=1)
        for coord in [(-1, 0), (0, -1), (4, 0), (0, 4)]:
            with self.assertRaises(OutOfRange):
                punch_hole(maze, coord)

    def test_out_of_range_no_partial_mutation(self):
        maze = generate(4, 4, seed=1)
        before = maze.copy()
        with self.assertRaises(OutOfRange):
            punch_holes(maze, [(1, 1), (2, 2), (7, 7)])
        self.assertEqual(maze.tobytes(), before.tobytes())

    def test_rejects_non_2d(self):
        with self.assertRaises(ValueError):
            HolePuncher.punch_hole(np.zeros(4, dtype=np.uint8), (0, 0))
        with self.assertRaises(ValueError):
            HolePuncher.punch_holes([[1, 2]], [(0, 0)])

if __name__ == '__main__':
    unittest.main()
