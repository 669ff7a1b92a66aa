from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag
from typing import Optional


class PieceType(IntFlag):
    """Piece type, one bit per type so membership is a single ``&`` test."""

    NONE = 0
    PAWN = 1
    BISHOP = 2
    KNIGHT = 4
    ROOK = 8
    QUEEN = 16
    KING = 32


class Color(IntFlag):
    WHITE = 64
    BLACK = 128

    @property
    def opposite(self) -> "Color":
        return Color.BLACK if self == Color.WHITE else Color.WHITE

    @classmethod
    def parse(cls, name: str) -> "Color":
        """Map ``"white"``/``"black"`` (any case) or ``"w"``/``"b"`` to a Color.

        Raises:
            ValueError: If ``name`` names neither side.
        """
        key = name.strip().lower()
        if key in ("white", "w"):
            return cls.WHITE
        if key in ("black", "b"):
            return cls.BLACK
        raise ValueError(f"invalid color: {name!r}")


TYPE_MASK = 0x3F
COLOR_MASK = 0xC0

SLIDERS = PieceType.BISHOP | PieceType.ROOK | PieceType.QUEEN

_TYPE_LETTER = {
    PieceType.PAWN: "P",
    PieceType.BISHOP: "B",
    PieceType.KNIGHT: "N",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}
_LETTER_TYPE = {v: k for k, v in _TYPE_LETTER.items()}

PROMOTION_TYPES = {
    "q": PieceType.QUEEN,
    "r": PieceType.ROOK,
    "b": PieceType.BISHOP,
    "n": PieceType.KNIGHT,
}


def _single_bit(value: int) -> bool:
    return value != 0 and value & (value - 1) == 0


@dataclass(frozen=True)
class Piece:
    """Occupant of a square: one type and one color.

    Empty squares are represented by ``None`` on the board, never by a Piece
    with ``PieceType.NONE``.
    """

    kind: PieceType
    color: Color

    def pack(self) -> int:
        """Return the 8-bit encoding ``kind | color``."""
        return int(self.kind) | int(self.color)

    @classmethod
    def unpack(cls, value: int) -> Optional["Piece"]:
        """Decode an 8-bit value produced by :meth:`pack`.

        Returns:
            Optional[Piece]: The occupant, or ``None`` for the empty value 0.

        Raises:
            ValueError: If the value does not hold exactly one type bit and one
                color bit.
        """
        if value == 0:
            return None
        if value < 0 or value > 0xFF:
            raise ValueError(f"piece encoding out of range: {value}")
        kind = value & TYPE_MASK
        color = value & COLOR_MASK
        if not _single_bit(kind) or not _single_bit(color):
            raise ValueError(f"invalid piece encoding: {value:#04x}")
        return cls(PieceType(kind), Color(color))

    def is_a(self, kinds: PieceType) -> bool:
        return bool(self.kind & kinds)

    @property
    def code(self) -> str:
        """Two-letter board code such as ``"WP"`` or ``"BK"``."""
        side = "W" if self.color == Color.WHITE else "B"
        return side + _TYPE_LETTER[self.kind]

    @property
    def char(self) -> str:
        """FEN letter (uppercase = white, lowercase = black)."""
        letter = _TYPE_LETTER[self.kind]
        return letter if self.color == Color.WHITE else letter.lower()

    @classmethod
    def from_char(cls, ch: str) -> "Piece":
        kind = _LETTER_TYPE.get(ch.upper())
        if kind is None:
            raise ValueError(f"invalid piece in FEN: {ch!r}")
        return cls(kind, Color.WHITE if ch.isupper() else Color.BLACK)


def code_of(piece: Optional[Piece]) -> str:
    return "--" if piece is None else piece.code
