import unittest
import sys
import os

# Add project root to path so we can import maze_meander
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_meander.core.direction import Direction
from maze_meander.core.errors import MazeConfigError, MazeInvariantError
from maze_meander.core.grid import Grid

class TestGrid(unittest.TestCase):
    def test_initialization(self):
        w, h = 10, 12
        grid = Grid(w, h, 2)
        self.assertEqual(len(grid.cells), w * h, f"Grid initialization size mismatch. Expected {w*h}, got {len(grid.cells)}")
        for cell in grid.iter_cells():
            self.assertEqual(cell.edges, [False, False, False, False])
            self.assertFalse(cell.visited)
        self.assertFalse(grid.goal_reached)
        self.assertIsNone(grid.finish)
        self.assertIsNone(grid.finish_cell)
        self.assertEqual(grid.start, (0, 1))

    def test_config_errors(self):
        with self.assertRaises(MazeConfigError):
            Grid(0, 10, 1)
        with self.assertRaises(MazeConfigError):
            Grid(10, -1, 1)
        with self.assertRaises(MazeConfigError):
            Grid(10, 10, 0)
        # 5 >= 10 / 2: zones would touch
        with self.assertRaises(MazeConfigError):
            Grid(10, 20, 5)
        with self.assertRaises(MazeConfigError):
            Grid(2, 2, 1)
        # Non-integer sizes are configuration errors, not TypeErrors
        with self.assertRaises(MazeConfigError):
            Grid(10.0, 10, 2)
        with self.assertRaises(MazeConfigError):
            Grid(10, "10", 2)
        with self.assertRaises(MazeConfigError):
            Grid(10, 10, True)
        # Config errors are still ValueErrors
        with self.assertRaises(ValueError):
            Grid(5, 5, 3)

    def test_smallest_valid_grid(self):
        grid = Grid(3, 3, 1)
        self.assertEqual(grid.start, (0, 0))

    def test_coordinates(self):
        grid = Grid(5, 5, 1)
        self.assertEqual(grid.get_index(2, 2), 12)  # 2 * 5 + 2
        self.assertEqual(grid.cell(3, 1).pos, (3, 1))

        with self.assertRaises(IndexError):
            grid.get_index(-1, 0)
        with self.assertRaises(IndexError):
            grid.cell(0, 5)

    def test_cell_types(self):
        grid = Grid(5, 5, 1)
        # Center is inside the circle, corners are not
        self.assertEqual(grid.cell(2, 2).cell_type, 0)
        self.assertEqual(grid.cell(1, 2).cell_type, 0)
        self.assertEqual(grid.cell(0, 0).cell_type, 1)
        self.assertEqual(grid.cell(4, 4).cell_type, 1)
        self.assertEqual({c.cell_type for c in grid.iter_cells()}, {0, 1})

    def test_regions(self):
        grid = Grid(8, 10, 2)
        start = {c.pos for c in grid.iter_cells() if c.start_area}
        finish = {c.pos for c in grid.iter_cells() if c.finish_area}
        self.assertEqual(start, {(0, 0), (1, 0), (0, 1), (1, 1)})
        self.assertEqual(finish, {(6, 8), (7, 8), (6, 9), (7, 9)})
        self.assertTrue(grid.start_cell.start_area)

    def test_adjacent(self):
        grid = Grid(5, 5, 1)
        center = grid.cell(2, 2)
        self.assertEqual(grid.adjacent(center, Direction.NORTH).pos, (2, 3))
        self.assertEqual(grid.adjacent(center, Direction.SOUTH).pos, (2, 1))
        self.assertEqual(grid.adjacent(center, Direction.EAST).pos, (3, 2))
        self.assertEqual(grid.adjacent(center, Direction.WEST).pos, (1, 2))

        corner = grid.cell(0, 0)
        self.assertIsNone(grid.adjacent(corner, Direction.SOUTH))
        self.assertIsNone(grid.adjacent(corner, Direction.WEST))
        self.assertIsNone(grid.adjacent(grid.cell(4, 4), Direction.NORTH))

    def test_neighbors(self):
        grid = Grid(5, 5, 1)
        self.assertEqual(len(list(grid.get_neighbors(grid.cell(2, 2)))), 4)

        corner_neighbors = [(n.pos, d) for n, d in grid.get_neighbors(grid.cell(0, 0))]
        self.assertEqual(len(corner_neighbors), 2)
        self.assertIn(((1, 0), Direction.EAST), corner_neighbors)
        self.assertIn(((0, 1), Direction.NORTH), corner_neighbors)

    def test_valid_moves(self):
        grid = Grid(5, 5, 1)
        # Off the grid
        self.assertFalse(grid.is_valid_move(grid.cell(0, 0), Direction.WEST))
        # Into the start area
        self.assertFalse(grid.is_valid_move(grid.cell(0, 1), Direction.SOUTH))
        # Plain move
        self.assertTrue(grid.is_valid_move(grid.cell(2, 2), Direction.EAST))
        # Into a visited cell
        grid.cell(3, 2).mark_as_visited()
        self.assertFalse(grid.is_valid_move(grid.cell(2, 2), Direction.EAST))

    def test_finish_entry_blocked_after_goal(self):
        grid = Grid(6, 6, 2)
        self.assertTrue(grid.is_valid_move(grid.cell(3, 4), Direction.EAST))
        self.assertTrue(grid.is_valid_move(grid.cell(4, 3), Direction.NORTH))

        target = grid.record_edge(grid.cell(3, 4), Direction.EAST)
        grid.mark_goal(target)
        self.assertTrue(grid.goal_reached)
        self.assertEqual(grid.finish, (4, 4))
        self.assertIs(grid.finish_cell, target)

        self.assertFalse(grid.is_valid_move(grid.cell(4, 3), Direction.NORTH))
        self.assertFalse(grid.is_valid_move(grid.cell(3, 5), Direction.EAST))

    def test_record_edge(self):
        grid = Grid(5, 5, 1)
        origin = grid.cell(2, 2)
        target = grid.record_edge(origin, Direction.WEST)

        self.assertEqual(target.pos, (1, 2))
        self.assertTrue(origin.has_edge(Direction.WEST))
        self.assertTrue(target.visited)
        # Edges are directed: nothing recorded on the target
        self.assertFalse(target.has_edge(Direction.EAST))

        with self.assertRaises(MazeInvariantError):
            grid.record_edge(grid.cell(4, 0), Direction.EAST)

    def test_incoming_direction(self):
        grid = Grid(5, 5, 1)
        start = grid.start_cell
        start.mark_as_visited()
        a = grid.record_edge(start, Direction.NORTH)
        b = grid.record_edge(a, Direction.EAST)

        self.assertIsNone(grid.incoming_direction(start))
        self.assertEqual(grid.incoming_direction(a), Direction.NORTH)
        self.assertEqual(grid.incoming_direction(b), Direction.EAST)
        self.assertIsNone(grid.incoming_direction(grid.cell(3, 3)))

        self.assertIs(grid.predecessor(b), a)
        self.assertIs(grid.predecessor(a), start)

    def test_predecessor_without_edge(self):
        grid = Grid(5, 5, 1)
        with self.assertRaises(MazeInvariantError):
            grid.predecessor(grid.cell(2, 2))
        with self.assertRaises(MazeInvariantError):
            grid.predecessor(grid.start_cell)

    def test_connections(self):
        grid = Grid(5, 5, 1)
        a = grid.record_edge(grid.cell(1, 1), Direction.NORTH)
        grid.record_edge(a, Direction.EAST)
        self.assertEqual(grid.connections(a), 2)
        self.assertEqual(grid.connections(grid.cell(1, 1)), 1)
        self.assertEqual(grid.connections(grid.cell(3, 3)), 0)
        self.assertEqual(grid.visited_count(), 2)

if __name__ == '__main__':
    unittest.main()
