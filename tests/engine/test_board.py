from __future__ import annotations

import pytest

from plychess.engine.board import Board
from plychess.engine.move import str_to_square
from plychess.engine.piece import Color, Piece, PieceType


def test_startpos_render() -> None:
    lines = Board.startpos().render().splitlines()
    assert len(lines) == 8
    assert lines[0] == "BR BN BB BQ BK BB BN BR"
    assert lines[1] == "BP BP BP BP BP BP BP BP"
    assert lines[2] == "-- -- -- -- -- -- -- --"
    assert lines[7] == "WR WN WB WQ WK WB WN WR"


def test_startpos_layout_and_kings() -> None:
    b = Board.startpos()
    assert b.placement() == "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
    assert b.king_square(Color.WHITE) == 60
    assert b.king_square(Color.BLACK) == 4
    assert b.piece_at(0) == Piece(PieceType.ROOK, Color.BLACK)
    assert not any(b.has_moved)
    assert not any(b.en_passant)


def test_from_fen_marks_pawns_off_home_row_as_moved() -> None:
    b = Board.from_fen("4k3/8/8/8/4P3/8/3P4/4K3")
    assert b.has_moved[str_to_square("e4")]
    assert not b.has_moved[str_to_square("d2")]


def test_from_fen_flags_en_passant_square() -> None:
    b = Board.from_fen("4k3/8/8/3Pp3/8/8/8/4K3 w - e6 0 1")
    assert b.en_passant[str_to_square("e6")]
    assert sum(b.en_passant) == 1


@pytest.mark.parametrize(
    "fen",
    [
        "",
        "8/8/8",
        "9/8/8/8/8/8/8/8",
        "ppppppppp/8/8/8/8/8/8/8",
        "7/8/8/8/8/8/8/8",
        "x7/8/8/8/8/8/8/8",
        "8/8/8/8/8/8/8/8 w - z9 0 1",
    ],
)
def test_from_fen_rejects_malformed(fen: str) -> None:
    with pytest.raises(ValueError):
        Board.from_fen(fen)


def test_encode_decode_occupants() -> None:
    b = Board.startpos()
    data = b.encode()
    assert len(data) == 64
    assert data[60] == PieceType.KING | Color.WHITE
    assert data[30] == 0
    assert Board.decode(data).placement() == b.placement()
    with pytest.raises(ValueError):
        Board.decode(b"\x00" * 10)


def test_copy_is_independent() -> None:
    b = Board.startpos()
    c = b.copy()
    c.apply("e2e4")
    assert b.placement() == "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
    assert not b.en_passant[str_to_square("e3")]
