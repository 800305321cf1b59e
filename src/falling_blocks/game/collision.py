from __future__ import annotations

from .grid import Board
from .shapes import Shape


def collides(board: Board, shape: Shape, x: int, y: int) -> bool:
    """True if `shape` placed with its top-left cell at (x, y) hits a wall,
    the floor or a locked cell. Space above the top row never collides.
    """
    h, w = shape.shape
    for dy in range(h):
        for dx in range(w):
            if shape[dy, dx] and board.is_occupied(x + dx, y + dy):
                return True
    return False
