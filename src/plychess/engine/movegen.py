from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .board import Board
from .move import PROMOTION_PIECES, offset, row_of, square_to_str
from .piece import SLIDERS, Color, PieceType
from .safety import filter_king_safety


logger = logging.getLogger(__name__)


# (file step, row step); row steps are positive towards rank 1.
BISHOP_DIRS: Tuple[Tuple[int, int], ...] = ((1, 1), (-1, 1), (-1, -1), (1, -1))
ROOK_DIRS: Tuple[Tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
QUEEN_DIRS = BISHOP_DIRS + ROOK_DIRS

KNIGHT_STEPS: Tuple[Tuple[int, int], ...] = (
    (1, 2),
    (-1, 2),
    (2, 1),
    (-2, 1),
    (-1, -2),
    (1, -2),
    (-2, -1),
    (2, -1),
)
KING_STEPS: Tuple[Tuple[int, int], ...] = (
    (1, 0),
    (-1, 0),
    (0, 1),
    (0, -1),
    (1, 1),
    (-1, -1),
    (-1, 1),
    (1, -1),
)

_SLIDER_DIRS = {
    PieceType.BISHOP: BISHOP_DIRS,
    PieceType.ROOK: ROOK_DIRS,
    PieceType.QUEEN: QUEEN_DIRS,
}


@dataclass(frozen=True)
class Candidate:
    """Pseudo-legal move tagged with whether it captures."""

    move: str
    is_capture: bool


def _pawn_geometry(color: Color) -> Tuple[int, Tuple[int, int], int]:
    """Return (forward row step, capture file steps, promotion row)."""
    if color == Color.WHITE:
        return -1, (1, -1), 0
    return 1, (-1, 1), 7


class _Collector:
    def __init__(self, board: Board, color: Color) -> None:
        self.board = board
        self.color = color
        self.out: List[Candidate] = []

    def add(self, fr: int, to: int, capture: bool, promote: bool = False) -> None:
        base = square_to_str(fr) + square_to_str(to)
        if promote:
            for p in PROMOTION_PIECES:
                self.out.append(Candidate(base + p, capture))
        else:
            self.out.append(Candidate(base, capture))

    def step(self, fr: int, to: Optional[int]) -> None:
        """Single-step target: empty or enemy-occupied squares are emitted."""
        if to is None:
            return
        target = self.board.squares[to]
        if target is None:
            self.add(fr, to, False)
        elif target.color != self.color:
            self.add(fr, to, True)

    def slide(self, fr: int, dirs: Tuple[Tuple[int, int], ...]) -> None:
        for df, dr in dirs:
            to = offset(fr, df, dr)
            while to is not None:
                target = self.board.squares[to]
                if target is not None:
                    if target.color != self.color:
                        self.add(fr, to, True)
                    break
                self.add(fr, to, False)
                to = offset(to, df, dr)

    def pawn(self, fr: int) -> None:
        forward, capture_files, last_row = _pawn_geometry(self.color)
        for df in capture_files:
            to = offset(fr, df, forward)
            if to is None:
                continue
            target = self.board.squares[to]
            if target is not None and target.color == self.color:
                continue
            if target is not None or self.board.en_passant[to]:
                self.add(fr, to, True, row_of(to) == last_row)

        one = offset(fr, 0, forward)
        if one is not None and self.board.squares[one] is None:
            self.add(fr, one, False, row_of(one) == last_row)
        if self.board.has_moved[fr]:
            return
        # Only the landing square is checked; the pawn may hop a blocker.
        two = offset(fr, 0, 2 * forward)
        if two is not None and self.board.squares[two] is None:
            self.add(fr, two, False, row_of(two) == last_row)


def generate_candidates(board: Board, color: Color) -> Tuple[List[Candidate], Optional[int]]:
    """Enumerate pseudo-legal moves for ``color``.

    Squares are scanned from a8 to h1 and each piece's moves are emitted in a
    fixed direction order, so the output order is deterministic.

    Returns:
        Tuple[List[Candidate], Optional[int]]: Tagged candidates and the
            square of ``color``'s king (``None`` if it has none).
    """
    collector = _Collector(board, color)
    king_sq: Optional[int] = None
    for sq, piece in enumerate(board.squares):
        if piece is None or piece.color != color:
            continue
        if piece.is_a(SLIDERS):
            collector.slide(sq, _SLIDER_DIRS[piece.kind])
        elif piece.kind == PieceType.KNIGHT:
            for df, dr in KNIGHT_STEPS:
                collector.step(sq, offset(sq, df, dr))
        elif piece.kind == PieceType.KING:
            king_sq = sq
            for df, dr in KING_STEPS:
                collector.step(sq, offset(sq, df, dr))
        elif piece.kind == PieceType.PAWN:
            collector.pawn(sq)
    return collector.out, king_sq


def select_forced(candidates: List[Candidate], forced_capture: bool = True) -> List[str]:
    """Apply the capture-priority house rule.

    If any candidate captures, only the captures are kept; otherwise every
    candidate is. This is stricter than standard chess, where quiet moves
    stay available. ``forced_capture=False`` keeps every candidate.
    """
    if forced_capture and any(c.is_capture for c in candidates):
        return [c.move for c in candidates if c.is_capture]
    return [c.move for c in candidates]


def generate_moves(
    board: Board,
    color: Color,
    *,
    forced_capture: bool = True,
    knight_checks: bool = False,
) -> List[str]:
    """Return the moves ``color`` may play.

    Candidates are generated, reduced by the capture-priority rule, then
    filtered for king safety.

    Args:
        board (Board): Position to generate from; not modified.
        color (Color): Side to generate for.
        forced_capture (bool): Enforce the capture-priority rule.
        knight_checks (bool): Let the king-safety filter see knight attacks.

    Returns:
        List[str]: Legal move strings in generation order.
    """
    candidates, king_sq = generate_candidates(board, color)
    moves = select_forced(candidates, forced_capture)
    logger.debug("candidates before king safety: %s", ",".join(moves))
    return filter_king_safety(board, color, moves, king_sq, knight_checks=knight_checks)
