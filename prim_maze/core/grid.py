from array import array
from typing import Iterator, Tuple

import numpy as np

from prim_maze.core.errors import InvalidDimension, OutOfRange

class Grid:
    # Doorway bits (1 = door towards that neighbor)
    RIGHT = 0b0001
    LEFT  = 0b0010
    DOWN  = 0b0100
    UP    = 0b1000

    ALL_DOORS = RIGHT | LEFT | DOWN | UP

    # Traversal status, only meaningful while a generator runs
    UNREACHED = 0
    FRONTIER  = 1
    PAINTED   = 2

    # Direction Helpers
    DX = {UP: 0, DOWN: 0, RIGHT: 1, LEFT: -1}
    DY = {UP: -1, DOWN: 1, RIGHT: 0, LEFT: 0}
    OPPOSITE = {UP: DOWN, DOWN: UP, RIGHT: LEFT, LEFT: RIGHT}

    __slots__ = ('width', 'height', 'cells', 'status')

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise InvalidDimension(width, height)
        self.width = width
        self.height = height
        # 'B' (unsigned char) -> 1 byte per cell, no doors yet
        self.cells = array('B', bytes(width * height))
        self.status = array('B', [self.UNREACHED]) * (width * height)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_index(self, x: int, y: int) -> int:
        if self.in_bounds(x, y):
            return y * self.width + x
        raise OutOfRange(x, y, self.width, self.height)

    @classmethod
    def direction_to(cls, a: Tuple[int, int], b: Tuple[int, int]) -> int:
        """
        Direction bit pointing from cell a to cell b.
        Only defined for axis-aligned cells at distance one.
        """
        dx = b[0] - a[0]
        dy = b[1] - a[1]
        for dir_bit in (cls.UP, cls.DOWN, cls.RIGHT, cls.LEFT):
            if cls.DX[dir_bit] == dx and cls.DY[dir_bit] == dy:
                return dir_bit
        raise ValueError(f"Cells {a} and {b} are not adjacent")

    @classmethod
    def opposite_direction(cls, a: Tuple[int, int], b: Tuple[int, int]) -> int:
        """Direction bit pointing from cell b back to cell a."""
        return cls.OPPOSITE[cls.direction_to(a, b)]

    def open_door(self, x: int, y: int, dir_bit: int):
        """
        Sets the door bit on (x,y) towards 'dir_bit' and the OPPOSITE bit
        on the neighbor, so both sides always agree.
        """
        nx = x + self.DX[dir_bit]
        ny = y + self.DY[dir_bit]
        idx1 = self.get_index(x, y)
        idx2 = self.get_index(nx, ny)

        self.cells[idx1] |= dir_bit
        self.cells[idx2] |= self.OPPOSITE[dir_bit]

    def has_door(self, x: int, y: int, dir_bit: int) -> bool:
        return (self.cells[y * self.width + x] & dir_bit) != 0

    def get_status(self, x: int, y: int) -> int:
        return self.status[y * self.width + x]

    def set_status(self, x: int, y: int, status: int):
        self.status[y * self.width + x] = status

    def get_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int, int]]:
        """
        Yields (nx, ny, direction_to_neighbor) for all in-bounds neighbors,
        always in the order UP, DOWN, RIGHT, LEFT.
        Does NOT check doors.
        """
        if not self.in_bounds(x, y):
            raise OutOfRange(x, y, self.width, self.height)
        return self._iter_neighbors(x, y)

    def _iter_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int, int]]:
        if y > 0:
            yield (x, y - 1, self.UP)
        if y < self.height - 1:
            yield (x, y + 1, self.DOWN)
        if x < self.width - 1:
            yield (x + 1, y, self.RIGHT)
        if x > 0:
            yield (x - 1, y, self.LEFT)

    def to_array(self) -> np.ndarray:
        """Copy of the doorway bits as a (height, width) uint8 array."""
        return np.frombuffer(self.cells.tobytes(), dtype=np.uint8).reshape(self.height, self.width).copy()
