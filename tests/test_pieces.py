import random
from collections import Counter

import numpy as np

from falling_blocks.game import BASE_SHAPES, COLORS, PieceFactory, TetrominoType, color_for, spawn_piece
from falling_blocks.game.shapes import hex_to_rgb


def test_catalog_has_seven_shapes_of_four_cells():
    assert len(BASE_SHAPES) == 7
    for kind, shape in BASE_SHAPES.items():
        assert int(shape.sum()) == 4, kind
        assert kind in COLORS


def test_spawned_piece_is_top_centre_with_own_copy():
    piece = spawn_piece(TetrominoType.Z)
    assert piece.position == (4, 0)
    assert piece.color == "#ff0000"
    piece.shape[0, 0] = 1
    assert BASE_SHAPES[TetrominoType.Z][0, 0] == 0


def test_factory_draws_every_kind_roughly_uniformly():
    factory = PieceFactory(random.Random(3))
    counts = Counter(factory.create_piece().kind for _ in range(7000))
    assert set(counts) == set(TetrominoType)
    for kind in TetrominoType:
        assert 800 < counts[kind] < 1200


def test_seeded_factories_agree():
    a = PieceFactory(random.Random(99))
    b = PieceFactory(random.Random(99))
    kinds_a = [a.create_piece().kind for _ in range(50)]
    kinds_b = [b.create_piece().kind for _ in range(50)]
    assert kinds_a == kinds_b


def test_cells_follow_position():
    piece = spawn_piece(TetrominoType.T)
    piece.x, piece.y = 2, 7
    assert piece.cells() == [(2, 7), (3, 7), (4, 7), (3, 8)]


def test_color_lookup_accepts_overlay_values():
    assert color_for(int(TetrominoType.I)) == "#00ffff"
    assert color_for(-int(TetrominoType.J)) == "#0000ff"
    assert hex_to_rgb("#ffa500") == (255, 165, 0)


def test_piece_shapes_are_int8_arrays():
    piece = spawn_piece(TetrominoType.S)
    assert isinstance(piece.shape, np.ndarray)
    assert piece.shape.dtype == np.int8
