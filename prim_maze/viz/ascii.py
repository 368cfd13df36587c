import numpy as np

from prim_maze.core.grid import Grid

def render(maze: np.ndarray, wall: str = "X", floor: str = " ") -> np.ndarray:
    """
    Maps every cell to a 3x3 block of glyphs.
    Corners are always wall, the centre is always floor and each edge
    is floor only when the cell has a door in that direction.
    Returns a (3*height, 3*width) array of single characters.
    """
    if len(wall) != 1 or len(floor) != 1:
        raise ValueError(f"Glyphs must be single characters, got wall={wall!r} floor={floor!r}")
    maze = np.asarray(maze)
    height, width = maze.shape
    out = np.full((3 * height, 3 * width), wall, dtype="<U1")

    # Block centres
    out[1::3, 1::3] = floor

    for dir_bit in (Grid.UP, Grid.DOWN, Grid.RIGHT, Grid.LEFT):
        row = 1 + Grid.DY[dir_bit]
        col = 1 + Grid.DX[dir_bit]
        view = out[row::3, col::3]
        view[(maze & dir_bit) != 0] = floor

    return out

def to_text(maze: np.ndarray, wall: str = "X", floor: str = " ") -> str:
    return "\n".join("".join(row) for row in render(maze, wall, floor))
