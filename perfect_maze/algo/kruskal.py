import logging
from typing import Iterator, List, Tuple
from perfect_maze.core.dsu import DSU
from perfect_maze.core.maze import Maze
from perfect_maze.algo.base import Generator, REPORT_EVERY

logger = logging.getLogger(__name__)

# (row, col, di, dj): a room and the direction of the neighbor it may join
Edge = Tuple[int, int, int, int]

class RandomizedKruskal(Generator):
    def build_edges(self) -> List[Edge]:
        """
        Only NORTH and EAST per room, so every wall shows up exactly once.
        """
        maze = self.maze
        edges: List[Edge] = []
        for i, j in maze.rooms():
            for di, dj in (Maze.NORTH, Maze.EAST):
                if maze.in_bounds(i + 2 * di, j + 2 * dj):
                    edges.append((i, j, di, dj))
        return edges

    def run(self) -> Iterator[str]:
        maze = self.maze
        width = maze.width

        edges = self.build_edges()
        self.rng.shuffle(edges)
        logger.debug(f"Kruskal processing {len(edges)} candidate walls")

        # One DSU for the whole run; it is the cycle detector
        dsu = DSU(maze.width * maze.height)

        while edges:
            ci, cj, di, dj = edges.pop()
            ni, nj = ci + 2 * di, cj + 2 * dj
            if not maze.in_bounds(ni, nj):
                continue

            # Joining two rooms already connected would close a loop
            if dsu.merge(ci * width + cj, ni * width + nj):
                self.carve(ci + di, cj + dj)

                if self.step_count % REPORT_EVERY == 0:
                    yield f"Merging... Edges left: {len(edges)}"

        yield "Done"
