import logging
from typing import Iterator, List, Tuple
from perfect_maze.core.matrix import Matrix
from perfect_maze.core.maze import Maze
from perfect_maze.algo.base import Generator, REPORT_EVERY

logger = logging.getLogger(__name__)

class RecursiveBacktracker(Generator):
    def run(self) -> Iterator[str]:
        maze = self.maze
        visited: Matrix[bool] = Matrix(maze.height, maze.width, False)

        start = self.random_room()
        logger.debug(f"Backtracker starting at {start}")
        visited.update(*start, True)

        # Stack of (i, j) rooms
        stack: List[Tuple[int, int]] = [start]

        while stack:
            ci, cj = stack[-1]

            # Fresh shuffle per step; a fixed 4-element list keeps this bounded
            directions = self.rng.shuffle(list(Maze.DIRECTIONS))

            advanced = False
            for di, dj in directions:
                ni, nj = ci + 2 * di, cj + 2 * dj

                # None -> outside the grid
                seen = visited.at(ni, nj)
                if seen is None or seen:
                    continue

                self.carve(ci + di, cj + dj)
                visited.update(ni, nj, True)
                stack.append((ni, nj))
                advanced = True

                if self.step_count % REPORT_EVERY == 0:
                    yield f"Carving... Stack: {len(stack)}"
                break

            if not advanced:
                # Backtrack
                stack.pop()

        yield "Done"
