from abc import ABC, abstractmethod
from typing import Iterator
from perfect_maze.core.maze import Maze
from perfect_maze.core.rand import RandomSource

# Progress is reported once per this many opened walls
REPORT_EVERY = 100

class Generator(ABC):
    def __init__(self, maze: Maze, rng: RandomSource):
        self.maze = maze
        self.rng = rng
        self.step_count = 0

    @abstractmethod
    def run(self) -> Iterator[str]:
        """
        Yields status strings or progress updates.
        The actual grid modifications happen in-place on self.maze.
        """
        pass

    def run_all(self):
        """Helper to run the generator to completion."""
        for _ in self.run():
            pass

    def random_room(self):
        """Uniform room pick: rooms sit at 2k+1 on both axes."""
        i = 2 * self.rng.uniform(self.maze.room_rows) + 1
        j = 2 * self.rng.uniform(self.maze.room_cols) + 1
        return i, j

    def carve(self, wall_i: int, wall_j: int) -> bool:
        """Opens a wall. Returns True only if it was closed before."""
        if self.maze.at(wall_i, wall_j) != self.maze.WALL:
            return False
        self.maze.open_wall(wall_i, wall_j)
        self.step_count += 1
        return True
