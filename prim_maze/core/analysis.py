from collections import deque
from typing import Dict, Iterator, Set, Tuple

import numpy as np

from prim_maze.core.grid import Grid

DIRECTIONS = (Grid.UP, Grid.DOWN, Grid.RIGHT, Grid.LEFT)


def _open_neighbors(maze: np.ndarray, x: int, y: int) -> Iterator[Tuple[int, int]]:
    """
    Yields (nx, ny) for every in-bounds neighbor the cell has a door to.
    """
    height, width = maze.shape
    val = int(maze[y, x])
    for dir_bit in DIRECTIONS:
        if val & dir_bit:
            nx = x + Grid.DX[dir_bit]
            ny = y + Grid.DY[dir_bit]
            if 0 <= nx < width and 0 <= ny < height:
                yield (nx, ny)


def count_doorways(maze: np.ndarray) -> int:
    """Number of undirected doorway edges (RIGHT and DOWN bits counted once each)."""
    maze = np.asarray(maze)
    right = np.count_nonzero(maze[:, :-1] & Grid.RIGHT)
    down = np.count_nonzero(maze[:-1, :] & Grid.DOWN)
    return int(right + down)


def is_symmetric(maze: np.ndarray) -> bool:
    maze = np.asarray(maze)
    right = (maze[:, :-1] & Grid.RIGHT) != 0
    left = (maze[:, 1:] & Grid.LEFT) != 0
    down = (maze[:-1, :] & Grid.DOWN) != 0
    up = (maze[1:, :] & Grid.UP) != 0
    return bool(np.array_equal(right, left) and np.array_equal(down, up))


def is_boundary_safe(maze: np.ndarray) -> bool:
    """True when no cell has a door leading off the grid."""
    maze = np.asarray(maze)
    return not (
        np.any(maze[:, 0] & Grid.LEFT)
        or np.any(maze[:, -1] & Grid.RIGHT)
        or np.any(maze[0, :] & Grid.UP)
        or np.any(maze[-1, :] & Grid.DOWN)
    )


def reachable_from(maze: np.ndarray, start: Tuple[int, int]) -> Set[Tuple[int, int]]:
    maze = np.asarray(maze)
    seen = {start}
    queue = deque([start])
    while queue:
        cx, cy = queue.popleft()
        for n in _open_neighbors(maze, cx, cy):
            if n not in seen:
                seen.add(n)
                queue.append(n)
    return seen


def is_connected(maze: np.ndarray) -> bool:
    maze = np.asarray(maze)
    return len(reachable_from(maze, (0, 0))) == maze.size


def is_acyclic(maze: np.ndarray) -> bool:
    """
    Walks every component keeping track of the parent of each cell.
    Reaching an already seen cell other than the parent means a cycle.
    """
    maze = np.asarray(maze)
    height, width = maze.shape
    seen: Set[Tuple[int, int]] = set()

    for y in range(height):
        for x in range(width):
            if (x, y) in seen:
                continue
            seen.add((x, y))
            stack = [((x, y), None)]
            while stack:
                cell, parent = stack.pop()
                for n in _open_neighbors(maze, *cell):
                    if n == parent:
                        continue
                    if n in seen:
                        return False
                    seen.add(n)
                    stack.append((n, cell))
    return True


def is_perfect(maze: np.ndarray) -> bool:
    """Spanning tree check: symmetric, W*H-1 doors, connected and cycle free."""
    maze = np.asarray(maze)
    return (
        is_symmetric(maze)
        and is_boundary_safe(maze)
        and count_doorways(maze) == maze.size - 1
        and is_connected(maze)
        and is_acyclic(maze)
    )


def calculate_stats(maze: np.ndarray) -> Dict[str, float]:
    maze = np.asarray(maze)
    dead_ends = 0
    corridors = 0 # 2 doors
    junctions = 0 # 3 or 4 doors
    isolated = 0 # no doors (holes, or a 1x1 maze)

    for val in maze.flat:
        doors = bin(int(val) & Grid.ALL_DOORS).count("1")
        if doors == 0: isolated += 1
        elif doors == 1: dead_ends += 1
        elif doors == 2: corridors += 1
        else: junctions += 1

    total = maze.size
    return {
        "dead_ends": dead_ends,
        "corridors": corridors,
        "junctions": junctions,
        "isolated": isolated,
        "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0
    }
