#!/usr/bin/env python3
# ruff: noqa: E402
from __future__ import annotations

import argparse
import time
import os
import sys

# Allow running this script directly via `python scripts/perft.py`
# by adding the repo's `src/` to sys.path.
SRC_PATH = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src")
if SRC_PATH not in sys.path:
    sys.path.insert(0, SRC_PATH)

from plychess.engine.board import Board, STARTPOS_FEN
from plychess.engine.perft import perft
from plychess.engine.piece import Color


def main() -> None:
    parser = argparse.ArgumentParser(description="Count move-tree leaves for a position")
    parser.add_argument(
        "--fen", type=str, default=STARTPOS_FEN, help="FEN or placement (default: startpos)"
    )
    parser.add_argument("--side", type=str, default="white", help="side to move (default: white)")
    parser.add_argument("--depth", type=int, default=3, help="Perft depth (default: 3)")
    parser.add_argument(
        "--no-forced-capture", dest="forced_capture", action="store_false", help="disable capture priority"
    )
    parser.add_argument("--knight-checks", action="store_true", help="filter knight checks")
    args = parser.parse_args()

    board = Board.from_fen(args.fen)
    start = time.perf_counter()
    nodes = perft(
        board,
        Color.parse(args.side),
        args.depth,
        forced_capture=args.forced_capture,
        knight_checks=args.knight_checks,
    )
    dt = time.perf_counter() - start
    print(f"nodes={nodes} depth={args.depth} time_ms={int(dt*1000)} nps={int(nodes/max(dt,1e-9))}")


if __name__ == "__main__":
    main()
