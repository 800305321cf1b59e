from __future__ import annotations

from typing import Iterable, Tuple

import numpy as np


Coordinate = Tuple[int, int]

BOARD_WIDTH = 10
BOARD_HEIGHT = 20
EMPTY = 0


class Board:
    """Fixed 10x20 grid of locked cells.

    The grid uses 0 for empty cells and positive integers for locked cells.
    The integer is the tetromino type id of the piece that produced the cell,
    which renderers map back to a colour through the shape catalog.
    Row 0 is the top of the board.
    """

    def __init__(self) -> None:
        self.width = BOARD_WIDTH
        self.height = BOARD_HEIGHT
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    def reset(self) -> None:
        self.grid.fill(EMPTY)

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_occupied(self, x: int, y: int) -> bool:
        """Occupancy with the walls and floor treated as solid.

        Coordinates left of column 0, right of the last column or at/below
        the last row count as occupied. Rows above the top are open space.
        """
        if x < 0 or x >= self.width or y >= self.height:
            return True
        if y < 0:
            return False
        return bool(self.grid[y, x] != EMPTY)

    def set_cell(self, x: int, y: int, value: int) -> None:
        assert self.is_inside(x, y), f"cell ({x}, {y}) is off the board"
        self.grid[y, x] = value

    def clear_row(self, y: int) -> None:
        self.grid[y].fill(EMPTY)

    def shift_rows_down(self, from_y: int) -> None:
        """Drop every row above `from_y` by one, overwriting row `from_y`.

        Row 0 becomes empty afterwards.
        """
        if from_y > 0:
            self.grid[1 : from_y + 1] = self.grid[0:from_y].copy()
        self.clear_row(0)

    def is_row_full(self, y: int) -> bool:
        return bool(np.all(self.grid[y] != EMPTY))

    def clear_full_rows(self) -> int:
        """Remove full rows bottom-up and return how many were removed.

        The cursor stays on a row after clearing it, because the row above
        has just been shifted into that index.
        """
        cleared = 0
        y = self.height - 1
        while y >= 0:
            if self.is_row_full(y):
                self.shift_rows_down(y)
                cleared += 1
            else:
                y -= 1
        return cleared

    def merge_piece(self, cells: Iterable[Coordinate], value: int) -> None:
        for x, y in cells:
            # Cells still above the top edge have nowhere to go.
            if y < 0:
                continue
            self.set_cell(x, y, value)

    def filled_cells(self) -> int:
        return int(np.count_nonzero(self.grid))

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()


def print_board(grid: np.ndarray) -> None:
    for row in grid:
        print("".join(["█" if cell > 0 else ("▒" if cell < 0 else "·") for cell in row]))
