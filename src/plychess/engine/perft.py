from __future__ import annotations

from .board import Board
from .movegen import generate_moves
from .piece import Color


def perft(
    board: Board,
    color: Color,
    depth: int,
    *,
    forced_capture: bool = True,
    knight_checks: bool = False,
) -> int:
    """Count leaf nodes of the move tree rooted at ``board``.

    Definition:
    - depth == 0 returns 1 (the current node).
    - depth > 0 returns the sum over all children's perft(depth-1), with the
      side to move alternating from ``color``.

    Counts follow this engine's rules (capture priority, no castling), so they
    match standard perft tables only while no capture is reachable.
    """
    if depth < 0:
        raise ValueError("depth must be >= 0")
    if depth == 0:
        return 1

    nodes = 0
    for m in generate_moves(board, color, forced_capture=forced_capture, knight_checks=knight_checks):
        child = board.copy()
        child.apply(m)
        nodes += perft(
            child,
            color.opposite,
            depth - 1,
            forced_capture=forced_capture,
            knight_checks=knight_checks,
        )
    return nodes
