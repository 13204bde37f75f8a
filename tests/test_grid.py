import unittest
import sys
import os

# Add project root to path so we can import maze_stepper
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_stepper.core.grid import Grid, new_grid, opposite, delta, carve

class TestGrid(unittest.TestCase):
    def test_initialization(self):
        grid = new_grid(10)
        self.assertEqual(grid.width, 10)
        self.assertEqual(grid.height, 10)
        self.assertEqual(len(grid.cells), 100, f"Grid initialization size mismatch. Expected 100, got {len(grid.cells)}")
        # Nothing carved yet
        for val in grid.cells:
            self.assertEqual(val, 0)

    def test_invalid_size(self):
        with self.assertRaises(ValueError):
            new_grid(0)

    def test_coordinates(self):
        grid = Grid(5, 5)
        idx = grid.get_index(2, 2)
        self.assertEqual(idx, 12) # 2 * 5 + 2

        with self.assertRaises(IndexError):
            grid.get_index(-1, 0)
        with self.assertRaises(IndexError):
            grid.get_index(0, 5)

    def test_direction_lookups(self):
        self.assertEqual(opposite(Grid.NORTH), Grid.SOUTH)
        self.assertEqual(opposite(Grid.SOUTH), Grid.NORTH)
        self.assertEqual(opposite(Grid.EAST), Grid.WEST)
        self.assertEqual(opposite(Grid.WEST), Grid.EAST)

        self.assertEqual(delta(Grid.NORTH), (0, -1))
        self.assertEqual(delta(Grid.SOUTH), (0, 1))
        self.assertEqual(delta(Grid.EAST), (1, 0))
        self.assertEqual(delta(Grid.WEST), (-1, 0))

        with self.assertRaises(KeyError):
            opposite(3)

    def test_names(self):
        self.assertEqual(Grid.NAMES[0], "X")
        self.assertEqual(Grid.NAMES[Grid.NORTH | Grid.EAST], "NE")
        self.assertEqual(Grid.NAMES[Grid.ALL_PASSAGES], "NSEW")

    def test_carve_path(self):
        grid = Grid(2, 2)
        # 0,0  1,0
        # 0,1  1,1

        # Carve from (0,0) EAST to (1,0)
        grid.carve_path(0, 0, Grid.EAST)

        self.assertEqual(grid.get(0, 0), Grid.EAST)
        self.assertEqual(grid.get(1, 0), Grid.WEST)
        # Others untouched
        self.assertEqual(grid.get(0, 1), 0)
        self.assertEqual(grid.get(1, 1), 0)

    def test_carve_is_idempotent(self):
        grid = new_grid(3)
        carve(grid, 1, 1, Grid.NORTH)
        before = grid.cells.tobytes()
        carve(grid, 1, 1, Grid.NORTH)
        carve(grid, 1, 0, Grid.SOUTH)
        self.assertEqual(grid.cells.tobytes(), before)

    def test_carve_into_void(self):
        grid = new_grid(2)
        grid.carve_path(0, 0, Grid.NORTH)
        grid.carve_path(1, 1, Grid.EAST)
        self.assertEqual(grid.cells.tobytes(), bytes(4))

    def test_visited_flags(self):
        grid = Grid(3, 3)
        self.assertFalse(grid.is_visited(1, 1))
        grid.carve_path(1, 1, Grid.WEST)
        self.assertTrue(grid.is_visited(1, 1))
        self.assertTrue(grid.is_visited(0, 1))
        self.assertTrue(grid.has_passage(0, 1, Grid.EAST))

    def test_neighbors(self):
        grid = Grid(3, 3)
        # Center cell (1,1) should have 4 neighbors
        neighbors = list(grid.get_neighbors(1, 1))
        self.assertEqual(len(neighbors), 4)

        # Corner cell (0,0) should have 2 neighbors (East, South)
        corner_neighbors = list(grid.get_neighbors(0, 0))
        self.assertEqual(len(corner_neighbors), 2)
        self.assertIn((1, 0, Grid.EAST), corner_neighbors)
        self.assertIn((0, 1, Grid.SOUTH), corner_neighbors)

    def test_open_neighbors(self):
        grid = Grid(3, 3)
        grid.carve_path(1, 1, Grid.NORTH)
        grid.carve_path(1, 1, Grid.EAST)
        self.assertEqual(sorted(grid.get_open_neighbors(1, 1)), [(1, 0), (2, 1)])
        self.assertEqual(list(grid.get_open_neighbors(0, 0)), [])

    def test_rows_and_array(self):
        grid = new_grid(3)
        grid.carve_path(0, 2, Grid.EAST)
        self.assertEqual(grid.rows(), [[0, 0, 0], [0, 0, 0], [Grid.EAST, Grid.WEST, 0]])

        arr = grid.as_array()
        self.assertEqual(arr.shape, (3, 3))
        self.assertEqual(int(arr[2, 1]), Grid.WEST)
        with self.assertRaises(ValueError):
            arr[0, 0] = 1

    def test_asciify(self):
        grid = new_grid(2)
        grid.carve_path(0, 0, Grid.EAST)
        grid.carve_path(1, 0, Grid.SOUTH)
        grid.carve_path(1, 1, Grid.WEST)
        expected = (
            "___\n"
            "|_  |\n"
            "|___|\n"
        )
        self.assertEqual(grid.asciify(), expected)

if __name__ == '__main__':
    unittest.main()
