"""Game module for Falling Blocks.

Exports the core game engine and supporting classes:
- Board: Locked-cell grid and line clearing
- Piece / PieceFactory: Active piece geometry and random spawning
- TetrominoType: Enum of catalog shapes
- ScoringRules / ScoreKeeper: Scoring, level and drop-interval rules
- GravityScheduler: Frame-time accumulation for automatic drops
- FallingBlocksGame: Session state machine and command surface
"""

from .grid import Board, BOARD_WIDTH, BOARD_HEIGHT, EMPTY
from .shapes import TetrominoType, BASE_SHAPES, COLORS, color_for
from .pieces import Piece, PieceFactory, rotate_cw, spawn_piece
from .collision import collides
from .movement import move, rotate, soft_drop, hard_drop
from .rules import ScoringRules
from .scoring import ScoreKeeper, clear_lines
from .gravity import GravityScheduler
from .core import FallingBlocksGame, GameConfig, GameOver, GameSnapshot, RunState, Command

__all__ = [
    "Board",
    "BOARD_WIDTH",
    "BOARD_HEIGHT",
    "EMPTY",
    "TetrominoType",
    "BASE_SHAPES",
    "COLORS",
    "color_for",
    "Piece",
    "PieceFactory",
    "rotate_cw",
    "spawn_piece",
    "collides",
    "move",
    "rotate",
    "soft_drop",
    "hard_drop",
    "ScoringRules",
    "ScoreKeeper",
    "clear_lines",
    "GravityScheduler",
    "FallingBlocksGame",
    "GameConfig",
    "GameOver",
    "GameSnapshot",
    "RunState",
    "Command",
]
