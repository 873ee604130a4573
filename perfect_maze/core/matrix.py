from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")

class Matrix(Generic[T]):
    """
    Fixed-size 2D container over a flat row-major list.
    Every read/write goes through in_bounds(); out-of-range access is
    reported (None / False), never raised, so callers can probe past the edge.
    """

    __slots__ = ('rows', 'cols', 'cells')

    def __init__(self, rows: int, cols: int, initial: T):
        self.rows = rows
        self.cols = cols
        self.cells: List[T] = [initial] * (rows * cols)

    def __len__(self) -> int:
        return self.rows * self.cols

    def in_bounds(self, i: int, j: int) -> bool:
        # Negative indices must not wrap around like list indexing does
        return 0 <= i < self.rows and 0 <= j < self.cols

    def update(self, i: int, j: int, value: T) -> bool:
        if not self.in_bounds(i, j):
            return False
        self.cells[i * self.cols + j] = value
        return True

    def at(self, i: int, j: int) -> Optional[T]:
        if not self.in_bounds(i, j):
            return None
        return self.cells[i * self.cols + j]

    def fill(self, value: T):
        self.cells = [value] * (self.rows * self.cols)

    def to_list(self) -> List[List[T]]:
        return [self.cells[i * self.cols:(i + 1) * self.cols] for i in range(self.rows)]
