from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Callable, List, Optional, Tuple

import numpy as np

from .grid import Board
from .gravity import GravityScheduler
from .movement import hard_drop, move, rotate, soft_drop
from .pieces import SPAWN_Y, Piece, PieceFactory
from .rules import ScoringRules
from .scoring import ScoreKeeper, clear_lines


class RunState(Enum):
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class Command(IntEnum):
    NONE = 0
    MOVE_LEFT = 1
    MOVE_RIGHT = 2
    ROTATE_CW = 3
    SOFT_DROP = 4
    HARD_DROP = 5
    TOGGLE_PAUSE = 6


@dataclass
class GameConfig:
    random_seed: Optional[int] = None
    rules: ScoringRules = field(default_factory=ScoringRules)


@dataclass(frozen=True)
class GameOver:
    final_score: int
    lines: int
    level: int


GameOverListener = Callable[[GameOver], None]


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view handed to renderers once per frame."""

    board: np.ndarray
    active_shape: np.ndarray
    active_color: str
    active_position: Tuple[int, int]
    next_shape: np.ndarray
    next_color: str
    score: int
    lines: int
    level: int
    run_state: RunState


class FallingBlocksGame:
    """Session state and the command surface the host drives.

    The host owns the frame loop: it calls `tick` (or `tick_at`) once per
    frame and forwards player input as commands. Everything happens
    synchronously inside those calls. Once the session is over, every tick
    and command is ignored until `reset`.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None,
        on_game_over: Optional[GameOverListener] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.factory = PieceFactory(rng or random.Random(self.config.random_seed))
        self.board = Board()
        self.scores = ScoreKeeper(self.config.rules)
        self.gravity = GravityScheduler(self.scores.drop_interval_ms)
        self._listeners: List[GameOverListener] = []
        if on_game_over is not None:
            self._listeners.append(on_game_over)
        self.run_state = RunState.RUNNING
        self.active_piece: Piece = self.factory.create_piece()
        self.next_piece: Piece = self.factory.create_piece()

    # ------------------------------------------------------------------ state
    @property
    def score(self) -> int:
        return self.scores.score

    @property
    def lines_cleared(self) -> int:
        return self.scores.lines

    @property
    def level(self) -> int:
        return self.scores.level

    @property
    def drop_interval_ms(self) -> int:
        return self.scores.drop_interval_ms

    @property
    def running(self) -> bool:
        return self.run_state is RunState.RUNNING

    @property
    def game_over(self) -> bool:
        return self.run_state is RunState.GAME_OVER

    def add_game_over_listener(self, listener: GameOverListener) -> None:
        self._listeners.append(listener)

    def reset(self) -> None:
        self.board.reset()
        self.scores.reset()
        self.gravity.interval_ms = self.scores.drop_interval_ms
        self.gravity.reset()
        self.gravity.rebase()
        self.run_state = RunState.RUNNING
        self.active_piece = self.factory.create_piece()
        self.next_piece = self.factory.create_piece()

    # ------------------------------------------------------------- host loop
    def tick(self, elapsed_ms: float) -> None:
        if not self.running:
            return
        if self.gravity.advance(elapsed_ms):
            self._drop()

    def tick_at(self, timestamp_ms: float) -> None:
        if not self.running:
            return
        if self.gravity.advance_to(timestamp_ms):
            self._drop()

    # -------------------------------------------------------------- commands
    def move_left(self) -> None:
        if self.running:
            move(self.board, self.active_piece, -1)

    def move_right(self) -> None:
        if self.running:
            move(self.board, self.active_piece, 1)

    def rotate_cw(self) -> None:
        if self.running:
            rotate(self.board, self.active_piece)

    def soft_drop_once(self) -> None:
        if self.running:
            self._drop()

    def hard_drop(self) -> None:
        if self.running:
            hard_drop(self.board, self.active_piece)
            self._drop()

    def toggle_pause(self) -> None:
        if self.run_state is RunState.RUNNING:
            self.run_state = RunState.PAUSED
        elif self.run_state is RunState.PAUSED:
            self.run_state = RunState.RUNNING
            self.gravity.rebase()

    def handle(self, command: Command) -> None:
        if command == Command.MOVE_LEFT:
            self.move_left()
        elif command == Command.MOVE_RIGHT:
            self.move_right()
        elif command == Command.ROTATE_CW:
            self.rotate_cw()
        elif command == Command.SOFT_DROP:
            self.soft_drop_once()
        elif command == Command.HARD_DROP:
            self.hard_drop()
        elif command == Command.TOGGLE_PAUSE:
            self.toggle_pause()
        elif command == Command.NONE:
            pass

    # -------------------------------------------------------------- internals
    def _drop(self) -> None:
        if soft_drop(self.board, self.active_piece):
            self._lock()
            if self.game_over:
                return
        self.gravity.reset()

    def _lock(self) -> None:
        assert self.running, "pieces only lock while the game is running"
        piece = self.active_piece
        self.board.merge_piece(piece.cells(), int(piece.kind))
        clear_lines(self.board, self.scores)
        self.gravity.interval_ms = self.scores.drop_interval_ms
        # Only a piece that never left the spawn row ends the game.
        if piece.y == SPAWN_Y:
            self._end_game()
            return
        self.active_piece = self.next_piece
        self.next_piece = self.factory.create_piece()

    def _end_game(self) -> None:
        self.run_state = RunState.GAME_OVER
        event = GameOver(final_score=self.score, lines=self.lines_cleared, level=self.level)
        for listener in self._listeners:
            listener(event)

    # ---------------------------------------------------------------- output
    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            board=self.board.clone_state(),
            active_shape=self.active_piece.shape.copy(),
            active_color=self.active_piece.color,
            active_position=self.active_piece.position,
            next_shape=self.next_piece.shape.copy(),
            next_color=self.next_piece.color,
            score=self.score,
            lines=self.lines_cleared,
            level=self.level,
            run_state=self.run_state,
        )

    def get_state(self) -> np.ndarray:
        # Overlay the active piece on a copy of the board for observation
        state = self.board.clone_state()
        if not self.game_over:
            for x, y in self.active_piece.cells():
                if self.board.is_inside(x, y):
                    # Negative marks the falling piece
                    state[y, x] = -int(self.active_piece.kind)
        return state
