from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .grid import BOARD_WIDTH
from .shapes import BASE_SHAPES, COLORS, Shape, TetrominoType


SPAWN_X = BOARD_WIDTH // 2 - 1
SPAWN_Y = 0


def rotate_cw(shape: Shape) -> Shape:
    """Transpose, then reverse each row: a clockwise quarter turn of the bounding box."""
    return shape.T[:, ::-1].copy()


@dataclass
class Piece:
    kind: TetrominoType
    shape: Shape
    x: int = SPAWN_X
    y: int = SPAWN_Y

    @property
    def color(self) -> str:
        return COLORS[self.kind]

    @property
    def position(self) -> Tuple[int, int]:
        return self.x, self.y

    def cells_at(self, origin_x: int, origin_y: int) -> List[Tuple[int, int]]:
        h, w = self.shape.shape
        cells: List[Tuple[int, int]] = []
        for dy in range(h):
            for dx in range(w):
                if self.shape[dy, dx]:
                    cells.append((origin_x + dx, origin_y + dy))
        return cells

    def cells(self) -> List[Tuple[int, int]]:
        return self.cells_at(self.x, self.y)


def spawn_piece(kind: TetrominoType) -> Piece:
    """A fresh piece of `kind` at the spawn position, in catalog orientation."""
    return Piece(kind=kind, shape=BASE_SHAPES[kind].copy(), x=SPAWN_X, y=SPAWN_Y)


class PieceFactory:
    """Uniform random draw from the shape catalog.

    Holds nothing but the random source, so seeding or injecting `rng`
    makes the piece sequence reproducible.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()

    def create_piece(self) -> Piece:
        kind = self.rng.choice(list(TetrominoType))
        return spawn_piece(kind)
