from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from .board import Board
from .move import offset, parse_move
from .piece import Color, PieceType


logger = logging.getLogger(__name__)


# Clockwise from north; north is towards rank 8 (row - 1).
RAYS: Tuple[Tuple[int, int], ...] = (
    (0, -1),
    (1, -1),
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 1),
    (-1, 0),
    (-1, -1),
)

KNIGHT_DELTAS: Tuple[Tuple[int, int], ...] = (
    (1, 2),
    (-1, 2),
    (2, 1),
    (-2, 1),
    (-1, -2),
    (1, -2),
    (-2, -1),
    (2, -1),
)


def _enemy_pawn_row_step(color: Color) -> int:
    # Black pawns attack downwards, so they threaten a white king from the row above.
    return -1 if color == Color.WHITE else 1


def is_attacked(
    board: Board,
    color: Color,
    king_sq: int,
    *,
    vacated: Optional[int] = None,
    blocked: Optional[int] = None,
    knight_checks: bool = False,
) -> bool:
    """Return True if the ``color`` king on ``king_sq`` is attacked.

    The board is read, never written. ``vacated`` is treated as empty and
    ``blocked`` as holding an own piece, which simulates a move without
    making it.

    Covers sliders along the eight rays, an adjacent enemy king, and enemy
    pawns on the two diagonals they capture along. Knights are only looked
    at when ``knight_checks`` is set.
    """
    enemy = color.opposite
    pawn_dr = _enemy_pawn_row_step(color)
    for df, dr in RAYS:
        diagonal = df != 0 and dr != 0
        line = PieceType.BISHOP if diagonal else PieceType.ROOK
        sq = offset(king_sq, df, dr)
        distance = 1
        while sq is not None and sq != blocked:
            piece = board.squares[sq]
            if piece is not None and sq != vacated:
                if piece.color != enemy:
                    break
                if piece.is_a(PieceType.QUEEN | line):
                    return True
                if distance == 1 and piece.kind == PieceType.KING:
                    return True
                if distance == 1 and diagonal and dr == pawn_dr and piece.kind == PieceType.PAWN:
                    return True
                break
            sq = offset(sq, df, dr)
            distance += 1

    if knight_checks:
        for df, dr in KNIGHT_DELTAS:
            sq = offset(king_sq, df, dr)
            if sq is None or sq == vacated or sq == blocked:
                continue
            piece = board.squares[sq]
            if piece is not None and piece.color == enemy and piece.kind == PieceType.KNIGHT:
                return True
    return False


def filter_king_safety(
    board: Board,
    color: Color,
    moves: Iterable[str],
    king_sq: Optional[int],
    *,
    knight_checks: bool = False,
) -> List[str]:
    """Drop moves that would leave the ``color`` king attacked.

    Args:
        board (Board): Current position; not modified.
        color (Color): Side whose moves are filtered.
        moves (Iterable[str]): Candidate move strings.
        king_sq (Optional[int]): The king's square before any candidate is
            played. When ``None`` there is no king to protect and every
            candidate is kept.
        knight_checks (bool): Also reject moves that leave the king in
            reach of an enemy knight.

    Returns:
        List[str]: Surviving moves in their original order.
    """
    if king_sq is None:
        return list(moves)
    legal: List[str] = []
    for m in moves:
        mv = parse_move(m)
        king = mv.to_sq if mv.from_sq == king_sq else king_sq
        if is_attacked(
            board,
            color,
            king,
            vacated=mv.from_sq,
            blocked=mv.to_sq,
            knight_checks=knight_checks,
        ):
            logger.debug("discarding %s: king left attacked", m)
            continue
        legal.append(m)
    return legal


def in_check(board: Board, color: Color, *, knight_checks: bool = False) -> bool:
    king_sq = board.king_square(color)
    if king_sq is None:
        return False
    return is_attacked(board, color, king_sq, knight_checks=knight_checks)
