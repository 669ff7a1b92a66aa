from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from ..protocol.console import run_console
from ..protocol.options import SessionOptions


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="plychess",
        description="Play against the first-legal-move engine, or enter moves for both sides.",
    )
    parser.add_argument(
        "side",
        nargs="?",
        default=None,
        help="side the engine plays (white|black); omit for manual two-player mode",
    )
    parser.add_argument("--fen", type=str, default=None, help="start from this FEN or placement")
    parser.add_argument(
        "--no-forced-capture",
        dest="forced_capture",
        action="store_false",
        help="allow quiet moves even when a capture is available",
    )
    parser.add_argument(
        "--knight-checks",
        action="store_true",
        help="make the king-safety filter account for knights",
    )
    parser.add_argument(
        "--strict", action="store_true", help="reject human moves that are not legal"
    )
    parser.add_argument(
        "--quiet-moves-list",
        dest="show_moves",
        action="store_false",
        help="do not print the engine's legal move list",
    )
    parser.add_argument("--log-level", default="WARNING", help="logging level (default: WARNING)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        options = SessionOptions(
            engine_side=args.side,
            fen=args.fen,
            forced_capture=args.forced_capture,
            knight_checks=args.knight_checks,
            strict=args.strict,
            show_moves=args.show_moves,
            log_level=args.log_level,
        )
    except ValidationError as e:
        parser.print_usage(sys.stderr)
        for err in e.errors():
            loc = ".".join(str(p) for p in err.get("loc", ()))
            sys.stderr.write(f"plychess: error: {loc}: {err.get('msg', 'invalid value')}\n")
        return 2

    logging.basicConfig(level=getattr(logging, options.log_level))
    run_console(options)
    return 0


if __name__ == "__main__":
    sys.exit(main())
