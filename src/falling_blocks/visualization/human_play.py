from __future__ import annotations

from typing import Dict

import pygame

from falling_blocks.game import Command, FallingBlocksGame, GameOver
from .renderer import Renderer


KEY_TO_COMMAND: Dict[int, Command] = {
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_UP: Command.ROTATE_CW,
    pygame.K_DOWN: Command.SOFT_DROP,
    pygame.K_RETURN: Command.HARD_DROP,
    pygame.K_SPACE: Command.TOGGLE_PAUSE,
}


def _report(event: GameOver) -> None:
    print(f"Game over! Score: {event.final_score} (lines {event.lines}, level {event.level})")


def run() -> None:
    pygame.init()
    try:
        clock = pygame.time.Clock()
        game = FallingBlocksGame(on_game_over=_report)
        renderer = Renderer(cell_size=28)

        snapshot = game.snapshot()
        screen = pygame.display.set_mode(renderer.window_size(snapshot.board.shape))
        pygame.display.set_caption("Falling Blocks")

        running = True
        while running:
            # Input handling
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_r and game.game_over:
                        game.reset()
                    else:
                        command = KEY_TO_COMMAND.get(event.key)
                        if command is not None:
                            game.handle(command)

            # Gravity; the engine ignores ticks while paused or over
            game.tick(clock.tick(60))

            renderer.draw(screen, game.snapshot())

            if game.game_over:
                font = pygame.font.SysFont(None, 30)
                text = font.render(f"Game Over - {game.score} - R to restart, ESC to quit", True, (255, 255, 255))
                rect = text.get_rect(center=(screen.get_width() // 2, 12))
                screen.blit(text, rect)
            pygame.display.flip()
    finally:
        pygame.quit()


if __name__ == "__main__":  # pragma: no cover
    run()
