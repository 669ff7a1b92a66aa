from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union

from .board import Board
from .move import Move, parse_move
from .movegen import generate_moves
from .piece import Color
from .safety import in_check


class IllegalMoveError(ValueError):
    """Raised when a validated move is not among the side's legal moves."""


@dataclass
class Game:
    """Game wrapper around a board with helper operations.

    Responsibility: track board state and history, expose legal moves under
    the configured rules, apply moves.
    """

    board: Board
    move_stack: List[str] = field(default_factory=list)
    forced_capture: bool = True
    knight_checks: bool = False

    @classmethod
    def new(cls, **rules: bool) -> "Game":
        return cls(board=Board.startpos(), **rules)

    @classmethod
    def from_fen(cls, fen: str, **rules: bool) -> "Game":
        return cls(board=Board.from_fen(fen), **rules)

    def legal_moves(self, color: Color) -> List[str]:
        return generate_moves(
            self.board,
            color,
            forced_capture=self.forced_capture,
            knight_checks=self.knight_checks,
        )

    def apply_move(self, move: Union[str, Move], *, validate_for: Optional[Color] = None) -> str:
        """Apply ``move`` and record it.

        Without ``validate_for`` the move is trusted and only its syntax is
        checked. With it, the move must be one of that side's legal moves.

        Returns:
            str: The normalized move string that was applied.

        Raises:
            ValueError: If the move string is malformed.
            IllegalMoveError: If validation is requested and fails.
        """
        mv = parse_move(move) if isinstance(move, str) else move
        text = mv.to_str()
        if validate_for is not None and text not in self.legal_moves(validate_for):
            raise IllegalMoveError(f"illegal move: {text}")
        self.board.apply(mv)
        self.move_stack.append(text)
        return text

    def engine_move(self, color: Color) -> Optional[str]:
        """Play the first legal move for ``color``; ``None`` if there is none."""
        moves = self.legal_moves(color)
        if not moves:
            return None
        return self.apply_move(moves[0])

    def in_check(self, color: Color) -> bool:
        return in_check(self.board, color, knight_checks=self.knight_checks)

    def history(self) -> List[str]:
        return list(self.move_stack)
