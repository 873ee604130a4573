import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from perfect_maze.core.maze import Maze, GenTactic
from perfect_maze.core.rand import SeededRandom
from perfect_maze.core.analysis import MazeAnalyzer

class TestAnalysis(unittest.TestCase):
    def create_corridor(self):
        # 7x3 -> three rooms in a row, both walls open
        maze = Maze(7, 3)
        maze.open_wall(1, 2)
        maze.open_wall(1, 4)
        return maze

    def test_corridor_stats(self):
        maze = self.create_corridor()
        stats = MazeAnalyzer.calculate_stats(maze)
        self.assertEqual(stats["rooms"], 3)
        self.assertEqual(stats["open_walls"], 2)
        self.assertEqual(stats["dead_ends"], 2)
        self.assertEqual(stats["corridors"], 1)
        self.assertEqual(stats["junctions"], 0)
        self.assertAlmostEqual(stats["dead_end_percent"], 200 / 3)
        self.assertTrue(MazeAnalyzer.is_perfect(maze))

    def test_unconnected(self):
        maze = Maze(7, 3)
        maze.open_wall(1, 2)
        self.assertFalse(MazeAnalyzer.is_connected(maze))
        self.assertFalse(MazeAnalyzer.is_perfect(maze))

    def test_cycle_is_not_perfect(self):
        # 2x2 rooms with all four walls open -> connected but has a loop
        maze = Maze(5, 5)
        for wi, wj in [(1, 2), (3, 2), (2, 1), (2, 3)]:
            maze.open_wall(wi, wj)
        self.assertTrue(MazeAnalyzer.is_connected(maze))
        self.assertEqual(MazeAnalyzer.open_walls(maze), 4)
        self.assertFalse(MazeAnalyzer.is_perfect(maze))
        self.assertEqual(MazeAnalyzer.room_degree(maze, 1, 1), 2)

    def test_generated_stats_add_up(self):
        maze = Maze(31, 31)
        maze.gen(GenTactic.WILSON, SeededRandom(21))
        stats = MazeAnalyzer.calculate_stats(maze)
        self.assertGreater(stats["dead_ends"], 0)
        self.assertEqual(stats["dead_ends"] + stats["corridors"] + stats["junctions"], stats["rooms"])
        # Degrees sum to twice the edge count in a tree
        degree_sum = sum(MazeAnalyzer.room_degree(maze, i, j) for i, j in maze.rooms())
        self.assertEqual(degree_sum, 2 * stats["open_walls"])

if __name__ == '__main__':
    unittest.main()
