from __future__ import annotations

from plychess.engine.board import Board
from plychess.engine.movegen import generate_moves
from plychess.engine.piece import Color


def test_white_pawn_push_promotions() -> None:
    b = Board.from_fen("k7/4P3/8/8/8/8/8/4K3")
    ms = generate_moves(b, Color.WHITE)
    i = ms.index("e7e8q")
    assert ms[i : i + 4] == ["e7e8q", "e7e8r", "e7e8b", "e7e8n"]
    assert "e7e8" not in ms


def test_white_pawn_capture_promotion_is_forced() -> None:
    b = Board.from_fen("3rk3/4P3/8/8/8/8/8/4K3")
    assert generate_moves(b, Color.WHITE) == ["e7d8q", "e7d8r", "e7d8b", "e7d8n"]


def test_black_pawn_push_promotions() -> None:
    b = Board.from_fen("4k3/8/8/8/8/8/3p4/K7")
    ms = set(generate_moves(b, Color.BLACK))
    assert {"d2d1q", "d2d1r", "d2d1b", "d2d1n"} <= ms


def test_engine_first_move_promotes_to_queen() -> None:
    b = Board.from_fen("k7/4P3/8/8/8/8/8/7K")
    first = generate_moves(b, Color.WHITE)[0]
    assert first == "e7e8q"
