from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


PROMOTION_PIECES = ("q", "r", "b", "n")


@dataclass(frozen=True)
class Move:
    """A move string split into its squares and optional promotion letter.

    Square indices follow the board layout: a8 is 0, h8 is 7, a1 is 56 and
    h1 is 63.

    Attributes:
        from_sq (int): Square the piece leaves.
        to_sq (int): Square the piece lands on.
        promotion (Optional[str]): One of ``q``, ``r``, ``b``, ``n``, or
            ``None`` for an ordinary move.
    """

    from_sq: int
    to_sq: int
    promotion: Optional[str] = None

    def to_str(self) -> str:
        """Four or five characters, e.g. ``"g1f3"`` or ``"b7b8n"``."""
        return square_to_str(self.from_sq) + square_to_str(self.to_sq) + (self.promotion or "")

    def __str__(self) -> str:
        return self.to_str()


def parse_move(text: str) -> Move:
    """Split ``"e2e4"`` or ``"a7a8q"`` into a :class:`Move`.

    The two squares are decoded with :func:`str_to_square`, so the resulting
    indices count from a8=0 down to h1=63. A fifth character picks the
    promotion piece and is accepted in either case.

    Raises:
        ValueError: Wrong length, a square off the board, or a promotion
            letter other than q, r, b or n.
    """
    if len(text) not in (4, 5):
        raise ValueError(f"invalid move length: {text!r}")
    from_sq = str_to_square(text[0:2])
    to_sq = str_to_square(text[2:4])
    promo: Optional[str] = None
    if len(text) == 5:
        promo = text[4].lower()
        if promo not in PROMOTION_PIECES:
            raise ValueError(f"invalid promotion piece: {promo!r}")
    return Move(from_sq, to_sq, promo)


def str_to_square(s: str) -> int:
    """Index of the square named ``s``, with a8=0, h8=7, a1=56 and h1=63.

    Rank 8 is row 0, so the row is ``8 - rank`` and the index is
    ``row * 8 + file``. Raises ``ValueError`` for anything that is not a
    lowercase file letter followed by a rank digit.
    """
    if len(s) != 2 or s[0] < "a" or s[0] > "h" or s[1] < "1" or s[1] > "8":
        raise ValueError(f"invalid square: {s!r}")
    file = ord(s[0]) - ord("a")
    row = 7 - (ord(s[1]) - ord("1"))
    return row * 8 + file


def square_to_str(idx: int) -> str:
    """Name of square ``idx``: 0 is ``"a8"``, 7 is ``"h8"``, 63 is ``"h1"``.

    Inverse of :func:`str_to_square`. Indices outside 0..63 raise
    ``ValueError``.
    """
    if idx < 0 or idx > 63:
        raise ValueError(f"invalid square index: {idx}")
    return chr(ord("a") + idx % 8) + chr(ord("1") + 7 - idx // 8)


to_algebraic = square_to_str


def file_of(idx: int) -> int:
    return idx % 8


def row_of(idx: int) -> int:
    """Row counted from the top (row 0 holds rank 8)."""
    return idx // 8


def offset(idx: int, df: int, dr: int) -> Optional[int]:
    """Step ``df`` files and ``dr`` rows from ``idx``.

    Returns ``None`` when the step leaves the board, which covers both the
    rank bounds and file wrap-around.
    """
    f = idx % 8 + df
    r = idx // 8 + dr
    if 0 <= f < 8 and 0 <= r < 8:
        return r * 8 + f
    return None
