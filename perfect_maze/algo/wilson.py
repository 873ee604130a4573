import logging
from typing import Dict, Iterator, List, Tuple
from perfect_maze.core.matrix import Matrix
from perfect_maze.algo.base import Generator, REPORT_EVERY

logger = logging.getLogger(__name__)

class WilsonsAlgorithm(Generator):
    """
    Loop-erased random walks.

    1. One random room seeds the tree.
    2. From a room outside the tree, walk to random room neighbors, erasing
       a loop as soon as the walk crosses its own path.
    3. Once the walk touches the tree, open every wall along it and add its
       rooms to the tree.
    4. Repeat until no room is left outside.

    Every spanning tree is equally likely, unlike DFS and Kruskal.

    A walk that takes more than WALK_LIMIT_FACTOR * rooms random steps
    (e.g. a RandomSource stuck on one value) stops drawing and heads straight
    for the tree root instead. Uniformity only holds while that limit is not hit.
    """

    WALK_LIMIT_FACTOR = 100

    def run(self) -> Iterator[str]:
        maze = self.maze
        in_tree: Matrix[bool] = Matrix(maze.height, maze.width, False)

        root = self.random_room()
        in_tree.update(*root, True)
        logger.debug(f"Wilson tree rooted at {root}")

        # Walk starts are taken in random order
        pending = self.rng.shuffle(list(maze.rooms()))

        for start in pending:
            if in_tree.at(*start):
                continue

            path = self.walk(start, in_tree, root)

            for (ci, cj), (ni, nj) in zip(path, path[1:]):
                self.carve((ci + ni) // 2, (cj + nj) // 2)
                in_tree.update(ci, cj, True)

                if self.step_count % REPORT_EVERY == 0:
                    yield f"Splicing walk... Tree edges: {self.step_count}"

        yield "Done"

    def walk(self, start: Tuple[int, int], in_tree: Matrix[bool],
             anchor: Tuple[int, int]) -> List[Tuple[int, int]]:
        """
        Loop-erased random walk from start. The returned path ends on the
        first tree room reached. anchor must be a tree room; it is the
        target once the random step limit runs out.
        """
        path: List[Tuple[int, int]] = [start]
        # room -> its index in path
        position: Dict[Tuple[int, int], int] = {start: 0}

        steps_left = self.WALK_LIMIT_FACTOR * self.maze.room_count
        routed = False
        current = start
        while not in_tree.at(*current):
            if steps_left > 0:
                options = [(ni, nj) for ni, nj, _, _ in self.maze.room_neighbors(*current)]
                current = self.rng.choice(options)
                steps_left -= 1
            else:
                if not routed:
                    logger.warning(f"Random walk from {start} hit its step limit, routing to {anchor}")
                    routed = True
                current = self.step_toward(current, anchor)

            if current in position:
                # Erase the loop back to where the walk first hit current
                cut = position[current] + 1
                for room in path[cut:]:
                    del position[room]
                del path[cut:]
            else:
                position[current] = len(path)
                path.append(current)

        return path

    @staticmethod
    def step_toward(current: Tuple[int, int], target: Tuple[int, int]) -> Tuple[int, int]:
        """One room step closer to target: rows first, then columns."""
        ci, cj = current
        ti, tj = target
        if ci != ti:
            return (ci + (2 if ti > ci else -2), cj)
        return (ci, cj + (2 if tj > cj else -2))
