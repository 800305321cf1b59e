import random

import pytest

from falling_blocks.game import Board, FallingBlocksGame, GameConfig, TetrominoType, spawn_piece


@pytest.fixture
def board():
    return Board()


@pytest.fixture
def game():
    return FallingBlocksGame(GameConfig(random_seed=1234))


@pytest.fixture
def events():
    return []


@pytest.fixture
def watched_game(events):
    return FallingBlocksGame(rng=random.Random(7), on_game_over=events.append)


def fill_row(board, y, skip=()):
    for x in range(board.width):
        if x not in skip:
            board.set_cell(x, y, int(TetrominoType.T))


def vertical_i(x=4, y=0):
    piece = spawn_piece(TetrominoType.I)
    piece.shape = piece.shape.T.copy()
    piece.x, piece.y = x, y
    return piece
