from __future__ import annotations

from enum import IntEnum
from typing import Dict, Tuple

import numpy as np


class TetrominoType(IntEnum):
    I = 1
    O = 2
    T = 3
    L = 4
    J = 5
    S = 6
    Z = 7


Shape = np.ndarray


BASE_SHAPES: Dict[TetrominoType, Shape] = {
    TetrominoType.I: np.array([[1, 1, 1, 1]], dtype=np.int8),
    TetrominoType.O: np.array([[1, 1], [1, 1]], dtype=np.int8),
    TetrominoType.T: np.array([[1, 1, 1], [0, 1, 0]], dtype=np.int8),
    TetrominoType.L: np.array([[1, 1, 1], [1, 0, 0]], dtype=np.int8),
    TetrominoType.J: np.array([[1, 1, 1], [0, 0, 1]], dtype=np.int8),
    TetrominoType.S: np.array([[1, 1, 0], [0, 1, 1]], dtype=np.int8),
    TetrominoType.Z: np.array([[0, 1, 1], [1, 1, 0]], dtype=np.int8),
}

# Catalog geometry is shared; never hand these arrays out for mutation.
for _shape in BASE_SHAPES.values():
    _shape.setflags(write=False)


COLORS: Dict[TetrominoType, str] = {
    TetrominoType.I: "#00ffff",  # cyan
    TetrominoType.O: "#ffff00",  # yellow
    TetrominoType.T: "#ff00ff",  # purple
    TetrominoType.L: "#ffa500",  # orange
    TetrominoType.J: "#0000ff",  # blue
    TetrominoType.S: "#00ff00",  # green
    TetrominoType.Z: "#ff0000",  # red
}


def color_for(value: int) -> str:
    """Colour of a catalog entry, given its type id (sign is ignored)."""
    return COLORS[TetrominoType(abs(int(value)))]


def hex_to_rgb(color: str) -> Tuple[int, int, int]:
    c = color.lstrip("#")
    return int(c[0:2], 16), int(c[2:4], 16), int(c[4:6], 16)
