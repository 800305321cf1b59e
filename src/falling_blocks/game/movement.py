from __future__ import annotations

from .collision import collides
from .grid import Board
from .pieces import Piece, rotate_cw


def move(board: Board, piece: Piece, dx: int) -> bool:
    """Shift the piece horizontally; a blocked move leaves it untouched."""
    piece.x += dx
    if collides(board, piece.shape, piece.x, piece.y):
        piece.x -= dx
        return False
    return True


def rotate(board: Board, piece: Piece) -> bool:
    """Turn the piece clockwise in place. No wall kicks are tried."""
    rotated = rotate_cw(piece.shape)
    if collides(board, rotated, piece.x, piece.y):
        return False
    piece.shape = rotated
    return True


def soft_drop(board: Board, piece: Piece) -> bool:
    """Move the piece down one row.

    Returns True when the piece could not descend and must lock; the piece
    is left at its last valid row in that case.
    """
    piece.y += 1
    if collides(board, piece.shape, piece.x, piece.y):
        piece.y -= 1
        return True
    return False


def hard_drop(board: Board, piece: Piece) -> int:
    """Slide the piece down until it rests on something; return rows travelled."""
    rows = 0
    while not collides(board, piece.shape, piece.x, piece.y + 1):
        piece.y += 1
        rows += 1
    return rows
