import logging
import random
from typing import Iterator, List, Optional, Tuple

import numpy as np

from prim_maze.core.grid import Grid
from prim_maze.algo.base import Generator

logger = logging.getLogger(__name__)

class PrimsAlgorithm(Generator):
    """
    Randomized Prim's algorithm on the 4-neighbor grid graph.

    Every step picks a frontier cell uniformly at random and connects it to
    one of ALL its currently PAINTED neighbors, also chosen uniformly, not
    just the neighbor that put it on the frontier.
    """

    def run(self) -> Iterator[str]:
        grid = self.grid
        rng = random.Random(self.seed)

        start_x = rng.randrange(grid.width)
        start_y = rng.randrange(grid.height)
        self.start = (start_x, start_y)
        grid.set_status(start_x, start_y, Grid.PAINTED)
        painted = 1

        # Frontier: each FRONTIER cell appears exactly once, in insertion order
        frontier: List[Tuple[int, int]] = []

        def promote_neighbors(cx, cy):
            for nx, ny, _ in grid.get_neighbors(cx, cy):
                if grid.get_status(nx, ny) == Grid.UNREACHED:
                    grid.set_status(nx, ny, Grid.FRONTIER)
                    frontier.append((nx, ny))

        promote_neighbors(start_x, start_y)

        while frontier:
            # Pick random cell from frontier, swap remove for O(1)
            idx = rng.randrange(len(frontier))
            cx, cy = frontier[idx]
            frontier[idx] = frontier[-1]
            frontier.pop()
            assert grid.get_status(cx, cy) == Grid.FRONTIER

            painted_neighbors = [
                dir_bit for nx, ny, dir_bit in grid.get_neighbors(cx, cy)
                if grid.get_status(nx, ny) == Grid.PAINTED
            ]
            assert painted_neighbors, f"Frontier cell ({cx}, {cy}) has no painted neighbor"

            dir_bit = rng.choice(painted_neighbors)
            grid.open_door(cx, cy, dir_bit)
            grid.set_status(cx, cy, Grid.PAINTED)
            painted += 1
            self.step_count += 1

            promote_neighbors(cx, cy)

            if self.step_count % 100 == 0:
                yield f"Frontier: {len(frontier)}"

        assert painted == grid.width * grid.height
        assert self.step_count == grid.width * grid.height - 1

        yield "Done"


def generate(width: int, height: int, seed: Optional[int] = None) -> np.ndarray:
    """
    Generates a perfect maze and returns its (height, width) doorway bitmask
    array. The same seed and dimensions always give the same maze; with
    seed=None the random source is seeded from OS entropy.
    """
    grid = Grid(width, height)
    logger.debug("Generating %dx%d maze (seed=%s)", width, height, seed)
    PrimsAlgorithm(grid, seed=seed).run_all()
    return grid.to_array()
