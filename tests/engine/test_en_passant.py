from __future__ import annotations

from plychess.engine.board import Board
from plychess.engine.movegen import generate_moves
from plychess.engine.move import str_to_square
from plychess.engine.piece import Color, Piece, PieceType


def test_white_en_passant_generation_and_apply() -> None:
    b = Board.startpos()
    for m in ("e2e4", "a7a6", "e4e5", "d7d5"):
        b.apply(m)
    moves = generate_moves(b, Color.WHITE)
    assert "e5d6" in moves

    b.apply("e5d6")
    assert b.squares[str_to_square("d6")] == Piece(PieceType.PAWN, Color.WHITE)
    assert b.squares[str_to_square("d5")] is None
    assert b.squares[str_to_square("e5")] is None


def test_black_en_passant_generation_and_apply() -> None:
    fen = "4k3/8/8/8/3pP3/8/8/4K3 b - e3 0 1"
    b = Board.from_fen(fen)
    assert generate_moves(b, Color.BLACK) == ["d4e3"]

    b.apply("d4e3")
    assert b.squares[str_to_square("e3")] == Piece(PieceType.PAWN, Color.BLACK)
    assert b.squares[str_to_square("e4")] is None
    assert b.squares[str_to_square("d4")] is None


def test_en_passant_expires_after_one_ply() -> None:
    b = Board.startpos()
    for m in ("e2e4", "a7a6", "e4e5", "d7d5", "g1f3", "a6a5"):
        b.apply(m)
    assert "e5d6" not in generate_moves(b, Color.WHITE)


def test_plain_diagonal_move_onto_unflagged_square_removes_nothing() -> None:
    b = Board.from_fen("4k3/8/8/3p4/4P3/8/8/4K3")
    b.apply("e4d5")
    assert b.squares[str_to_square("d4")] is None
    assert b.squares[str_to_square("d5")] == Piece(PieceType.PAWN, Color.WHITE)
