import logging
from typing import Iterable, Tuple

import numpy as np

from prim_maze.core.errors import OutOfRange
from prim_maze.core.grid import Grid

logger = logging.getLogger(__name__)

class HolePuncher:
    @staticmethod
    def _check(maze: np.ndarray, x: int, y: int):
        height, width = maze.shape
        if not (0 <= x < width and 0 <= y < height):
            raise OutOfRange(x, y, width, height)

    @staticmethod
    def _check_shape(maze: np.ndarray):
        if getattr(maze, "ndim", None) != 2:
            raise ValueError("Maze must be a 2D (height, width) array")

    @staticmethod
    def punch_hole(maze: np.ndarray, coord: Tuple[int, int]) -> np.ndarray:
        """
        Cuts the cell at coord off from the maze.
        Clears all of its doors and, on every in-bounds neighbor, the one bit
        pointing back at it. Modifies maze in place and returns it.
        """
        HolePuncher._check_shape(maze)
        x, y = coord
        HolePuncher._check(maze, x, y)
        height, width = maze.shape

        maze[y, x] = 0
        for dir_bit in (Grid.UP, Grid.DOWN, Grid.RIGHT, Grid.LEFT):
            nx = x + Grid.DX[dir_bit]
            ny = y + Grid.DY[dir_bit]
            if 0 <= nx < width and 0 <= ny < height:
                maze[ny, nx] ^= maze[ny, nx] & Grid.OPPOSITE[dir_bit]

        logger.debug("Punched hole at (%d, %d)", x, y)
        return maze

    @staticmethod
    def punch_holes(maze: np.ndarray, coords: Iterable[Tuple[int, int]]) -> np.ndarray:
        """
        Punches a hole at every coordinate. All coordinates are validated
        before the maze is touched.
        """
        HolePuncher._check_shape(maze)
        coords = [tuple(c) for c in coords]
        for x, y in coords:
            HolePuncher._check(maze, x, y)

        for coord in coords:
            HolePuncher.punch_hole(maze, coord)
        return maze


punch_hole = HolePuncher.punch_hole
punch_holes = HolePuncher.punch_holes
