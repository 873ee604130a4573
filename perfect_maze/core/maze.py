import logging
from enum import Enum
from typing import Iterator, Optional, Tuple, Union

import numpy as np

from perfect_maze.core.matrix import Matrix
from perfect_maze.core.rand import RandomSource, SeededRandom

logger = logging.getLogger(__name__)

class GenTactic(Enum):
    """
    DFS     -> biased towards long corridors
    KRUSKAL -> biased towards short corridors
    WILSON  -> unbiased (uniform spanning tree)
    """
    DFS = "dfs"
    KRUSKAL = "kruskal"
    WILSON = "wilson"

class Maze:
    """
    Doubled lattice: rooms live on (odd, odd) cells, and the cell between two
    rooms that are 2 apart is the wall joining them. Width and height count
    the walls too, so Maze(3, 3) starts as

        # # #
        # . #
        # # #
    """

    # Cell states
    OPEN = 0
    WALL = 1

    # Direction Helpers (row, col) offsets: N, S, W, E
    NORTH = (-1, 0)
    SOUTH = (1, 0)
    WEST = (0, -1)
    EAST = (0, 1)
    DIRECTIONS = (NORTH, SOUTH, WEST, EAST)

    MIN_SIZE = 3

    __slots__ = ('width', 'height', 'grid', 'generated')

    def __init__(self, width: int, height: int):
        # Too small -> 3, even -> next odd
        width = max(self.MIN_SIZE, width)
        height = max(self.MIN_SIZE, height)
        if width % 2 == 0:
            width += 1
        if height % 2 == 0:
            height += 1

        self.width = width
        self.height = height
        self.grid: Matrix[int] = Matrix(height, width, self.WALL)
        self.generated = False
        self._init_lattice()

    def _init_lattice(self):
        self.grid.fill(self.WALL)
        for i, j in self.rooms():
            self.grid.update(i, j, self.OPEN)

    def reset(self):
        """Restores the freshly constructed lattice (every wall closed)."""
        self._init_lattice()
        self.generated = False

    def dimensions(self) -> Tuple[int, int]:
        return self.width, self.height

    def at(self, i: int, j: int) -> Optional[int]:
        return self.grid.at(i, j)

    def in_bounds(self, i: int, j: int) -> bool:
        return self.grid.in_bounds(i, j)

    @staticmethod
    def is_room(i: int, j: int) -> bool:
        return i % 2 == 1 and j % 2 == 1

    def rooms(self) -> Iterator[Tuple[int, int]]:
        for i in range(1, self.height, 2):
            for j in range(1, self.width, 2):
                yield (i, j)

    @property
    def room_rows(self) -> int:
        return self.height // 2

    @property
    def room_cols(self) -> int:
        return self.width // 2

    @property
    def room_count(self) -> int:
        return self.room_rows * self.room_cols

    def room_neighbors(self, i: int, j: int) -> Iterator[Tuple[int, int, int, int]]:
        """
        Yields (ni, nj, wall_i, wall_j) for every in-bounds room two steps away.
        Does NOT check whether the wall is open.
        """
        for di, dj in self.DIRECTIONS:
            ni, nj = i + 2 * di, j + 2 * dj
            if self.grid.in_bounds(ni, nj):
                yield (ni, nj, i + di, j + dj)

    def open_wall(self, i: int, j: int) -> bool:
        return self.grid.update(i, j, self.OPEN)

    def to_numpy(self) -> np.ndarray:
        """(height, width) uint8 copy of the grid for renderers. 1 = wall."""
        arr = np.array(self.grid.cells, dtype=np.uint8)
        return arr.reshape((self.height, self.width))

    def gen(self, tactic: Union[GenTactic, str] = GenTactic.DFS, rng: Optional[RandomSource] = None):
        """
        Carves the grid in place into a perfect maze.
        The grid is always reset to the bare lattice first, so walls left open
        by an earlier (or abandoned) run never leak into the new one.
        """
        tactic = GenTactic(tactic)

        if rng is None:
            rng = SeededRandom()

        if self.generated:
            logger.debug("Maze already generated, resetting lattice before regenerating")
        self.reset()

        # Imported here: the generators import Maze for typing
        from perfect_maze.algo.dfs import RecursiveBacktracker
        from perfect_maze.algo.kruskal import RandomizedKruskal
        from perfect_maze.algo.wilson import WilsonsAlgorithm

        algos = {
            GenTactic.DFS: RecursiveBacktracker,
            GenTactic.KRUSKAL: RandomizedKruskal,
            GenTactic.WILSON: WilsonsAlgorithm,
        }

        logger.debug(f"Generating {self.width}x{self.height} maze with {tactic.value.upper()}")
        algo = algos[tactic](self, rng)
        algo.run_all()
        self.generated = True
        return algo
