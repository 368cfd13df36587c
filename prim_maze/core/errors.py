class MazeError(Exception):
    """Base class for errors raised by prim_maze."""


class InvalidDimension(MazeError, ValueError):
    def __init__(self, width: int, height: int):
        super().__init__(f"Maze dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height


class OutOfRange(MazeError, IndexError):
    def __init__(self, x: int, y: int, width: int, height: int):
        super().__init__(f"Coordinate ({x}, {y}) out of bounds for {width}x{height} maze")
        self.x = x
        self.y = y
