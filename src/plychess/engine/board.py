from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union

from .move import Move, parse_move, str_to_square
from .piece import PROMOTION_TYPES, Color, Piece, PieceType, code_of


logger = logging.getLogger(__name__)


STARTPOS_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

# King destination -> (rook corner, rook destination). Fixed to the corners of
# the standard initial layout.
CASTLING_ROOK_HOPS: Dict[int, Tuple[int, int]] = {
    2: (0, 3),  # c8: a8 -> d8
    6: (7, 5),  # g8: h8 -> f8
    58: (56, 59),  # c1: a1 -> d1
    62: (63, 61),  # g1: h1 -> f1
}

PAWN_HOME_ROW = {Color.WHITE: 6, Color.BLACK: 1}


def _empty_flags() -> List[bool]:
    return [False] * 64


@dataclass
class Board:
    """64-cell board with per-square move and en-passant flags.

    Notes:
    - Squares are 0..63 with a8=0 .. h8=7 .. a1=56 .. h1=63, i.e. top-left
      from White's perspective, row-major.
    - ``squares[i]`` is the occupant or ``None``; ``has_moved[i]`` and
      ``en_passant[i]`` belong to the square, not to a piece identity.
    """

    squares: List[Optional[Piece]] = field(default_factory=lambda: [None] * 64)
    has_moved: List[bool] = field(default_factory=_empty_flags)
    en_passant: List[bool] = field(default_factory=_empty_flags)

    def __post_init__(self) -> None:
        if len(self.squares) != 64 or len(self.has_moved) != 64 or len(self.en_passant) != 64:
            raise ValueError("board must have exactly 64 squares")

    @classmethod
    def empty(cls) -> "Board":
        return cls()

    @classmethod
    def startpos(cls) -> "Board":
        """Create a board in the standard chess starting position."""
        return cls.from_fen(STARTPOS_FEN)

    @classmethod
    def from_fen(cls, fen: str) -> "Board":
        """Create a board from a FEN string or just its placement field.

        Args:
            fen (str): Full FEN or piece-placement field.

        Returns:
            Board: Board holding the placement. When the FEN carries an
                en-passant square, that square is flagged as capturable.

        Raises:
            ValueError: If the placement or en-passant field is malformed.

        Notes:
            Side to move, castling rights and move counters are ignored. Pawns
            standing off their home row are marked as moved so they get no
            double step.
        """
        if not fen or not isinstance(fen, str):
            raise ValueError("FEN must be a non-empty string")
        parts = fen.strip().split()
        if not parts:
            raise ValueError("FEN must be a non-empty string")
        ranks = parts[0].split("/")
        if len(ranks) != 8:
            raise ValueError("FEN board must have 8 ranks")

        board = cls()
        for row, rank in enumerate(ranks):
            file_idx = 0
            for ch in rank:
                if ch.isdigit():
                    n = int(ch)
                    if n < 1 or n > 8:
                        raise ValueError("invalid empty count in FEN rank")
                    file_idx += n
                    continue
                if file_idx >= 8:
                    raise ValueError("too many squares in FEN rank")
                sq = row * 8 + file_idx
                piece = Piece.from_char(ch)
                board.squares[sq] = piece
                if piece.kind == PieceType.PAWN and row != PAWN_HOME_ROW[piece.color]:
                    board.has_moved[sq] = True
                file_idx += 1
            if file_idx != 8:
                raise ValueError("rank does not sum to 8 squares in FEN")

        if len(parts) >= 4 and parts[3] != "-":
            try:
                ep_sq = str_to_square(parts[3])
            except ValueError as e:
                raise ValueError("invalid en passant square") from e
            board.en_passant[ep_sq] = True
        return board

    def placement(self) -> str:
        """Serialize the occupants into a FEN piece-placement field."""
        rows: List[str] = []
        for row in range(8):
            run = 0
            out = []
            for file_idx in range(8):
                piece = self.squares[row * 8 + file_idx]
                if piece is None:
                    run += 1
                    continue
                if run:
                    out.append(str(run))
                    run = 0
                out.append(piece.char)
            if run:
                out.append(str(run))
            rows.append("".join(out))
        return "/".join(rows)

    def copy(self) -> "Board":
        return Board(list(self.squares), list(self.has_moved), list(self.en_passant))

    def piece_at(self, sq: int) -> Optional[Piece]:
        return self.squares[sq]

    def king_square(self, color: Color) -> Optional[int]:
        for sq, piece in enumerate(self.squares):
            if piece is not None and piece.kind == PieceType.KING and piece.color == color:
                return sq
        return None

    def render(self) -> str:
        """Two-letter codes, eight per line, rank 8 first."""
        lines = []
        for row in range(8):
            lines.append(" ".join(code_of(p) for p in self.squares[row * 8 : row * 8 + 8]))
        return "\n".join(lines)

    def encode(self) -> bytes:
        """Pack the 64 occupants as one byte each. Flags are not included."""
        return bytes(0 if p is None else p.pack() for p in self.squares)

    @classmethod
    def decode(cls, data: bytes) -> "Board":
        if len(data) != 64:
            raise ValueError(f"expected 64 bytes, got {len(data)}")
        return cls(squares=[Piece.unpack(b) for b in data])

    def apply(self, move: Union[str, Move]) -> None:
        """Commit ``move`` to the board in place.

        No legality checks are made: the move is trusted to come from the
        generator or from a player who knows what they are doing. Only the
        string syntax is checked.

        Args:
            move (Union[str, Move]): Coordinate-notation move or parsed Move.

        Raises:
            ValueError: If ``move`` is a malformed move string.
        """
        mv = parse_move(move) if isinstance(move, str) else move
        fr, to = mv.from_sq, mv.to_sq
        mover = self.squares[fr]
        logger.debug("apply %s (%s)", mv.to_str(), code_of(mover))

        self.squares[to] = mover
        self.has_moved[to] = True
        self.squares[fr] = None
        self.has_moved[fr] = False
        # The destination keeps its flag so an en-passant landing is detectable below
        for sq in range(64):
            if sq != to:
                self.en_passant[sq] = False

        if mover is None:
            return

        if mv.promotion:
            self.squares[to] = Piece(PROMOTION_TYPES[mv.promotion], mover.color)
        elif mover.kind == PieceType.KING and to in CASTLING_ROOK_HOPS:
            self._relocate_castling_rook(to)
        elif mover.kind == PieceType.PAWN:
            step = to - fr
            if step in (16, -16):
                self.en_passant[fr + step // 2] = True
            elif step in (7, 9, -7, -9) and self.en_passant[to]:
                captured = to - 8 if step > 0 else to + 8
                self.squares[captured] = None
                self.has_moved[captured] = False

    def _relocate_castling_rook(self, king_to: int) -> None:
        # Unconditional: whatever stands on the corner is replaced by a rook of
        # the corner's home color on the hop square.
        corner, target = CASTLING_ROOK_HOPS[king_to]
        home = Color.WHITE if king_to >= 56 else Color.BLACK
        self.squares[target] = Piece(PieceType.ROOK, home)
        self.has_moved[target] = True
        self.squares[corner] = None
        self.has_moved[corner] = False
