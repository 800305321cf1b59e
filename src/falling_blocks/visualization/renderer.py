from __future__ import annotations

from typing import Tuple

import numpy as np
import pygame

from falling_blocks.game import GameSnapshot, RunState
from falling_blocks.game.shapes import color_for, hex_to_rgb


BACKGROUND = (10, 10, 14)
EMPTY_CELL = (20, 20, 26)
TEXT_COLOR = (255, 255, 255)


def _color_for_value(v: int) -> Tuple[int, int, int]:
    if v == 0:
        return EMPTY_CELL
    return hex_to_rgb(color_for(v))


class Renderer:
    """Draws a game snapshot: board, falling piece, next-piece preview and stats."""

    def __init__(self, cell_size: int = 30, margin: int = 20, preview_cells: int = 5) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self.preview_cells = preview_cells
        self._font = None

    def window_size(self, board_shape: Tuple[int, int]) -> Tuple[int, int]:
        h, w = board_shape
        width = w * self.cell_size + self.preview_cells * self.cell_size + self.margin * 3
        height = h * self.cell_size + self.margin * 2
        return width, height

    def _font_for(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.SysFont(None, 28)
        return self._font

    def _grid_surface(self, snapshot: GameSnapshot) -> pygame.Surface:
        board = snapshot.board
        h, w = board.shape
        surf = pygame.Surface((w * self.cell_size, h * self.cell_size))
        surf.fill((30, 30, 36))
        for y in range(h):
            for x in range(w):
                self._cell(surf, x, y, _color_for_value(int(board[y, x])))
        px, py = snapshot.active_position
        self._shape(surf, snapshot.active_shape, px, py, hex_to_rgb(snapshot.active_color))
        return surf

    def _cell(self, surf: pygame.Surface, x: int, y: int, color: Tuple[int, int, int]) -> None:
        rect = pygame.Rect(
            x * self.cell_size,
            y * self.cell_size,
            self.cell_size - 1,
            self.cell_size - 1,
        )
        pygame.draw.rect(surf, color, rect)

    def _shape(self, surf: pygame.Surface, shape: np.ndarray, ox: int, oy: int, color: Tuple[int, int, int]) -> None:
        h, w = shape.shape
        for dy in range(h):
            for dx in range(w):
                if shape[dy, dx] and oy + dy >= 0:
                    self._cell(surf, ox + dx, oy + dy, color)

    def _side_panel(self, snapshot: GameSnapshot) -> pygame.Surface:
        size = self.preview_cells * self.cell_size
        surf = pygame.Surface((size, size))
        surf.fill(BACKGROUND)
        self._shape(surf, snapshot.next_shape, 1, 1, hex_to_rgb(snapshot.next_color))
        return surf

    def draw(self, screen: pygame.Surface, snapshot: GameSnapshot) -> None:
        grid_surf = self._grid_surface(snapshot)
        screen.fill(BACKGROUND)
        screen.blit(grid_surf, (self.margin, self.margin))

        panel_x = self.margin * 2 + grid_surf.get_width()
        screen.blit(self._side_panel(snapshot), (panel_x, self.margin))

        font = self._font_for()
        lines = [
            f"Score: {snapshot.score}",
            f"Lines: {snapshot.lines}",
            f"Level: {snapshot.level}",
        ]
        if snapshot.run_state is RunState.PAUSED:
            lines.append("Paused")
        text_y = self.margin * 2 + self.preview_cells * self.cell_size
        for line in lines:
            text = font.render(line, True, TEXT_COLOR)
            screen.blit(text, (panel_x, text_y))
            text_y += text.get_height() + 6
