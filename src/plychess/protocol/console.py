from __future__ import annotations

import logging
import sys
from typing import Callable, Iterable, Optional

from ..engine.game import Game
from ..engine.piece import Color
from .options import SessionOptions


logger = logging.getLogger(__name__)

Writer = Callable[[str], None]

PROMPT = "Make a move..."
END_COMMAND = "end"


def _side_name(color: Color) -> str:
    return "white" if color == Color.WHITE else "black"


class ConsoleSession:
    """Terminal play loop around a :class:`Game`.

    Notes:
    - Without an engine side every input move is applied unchecked, which is
      handy for setting up positions by hand.
    - With an engine side, the engine answers each human move with the first
      move from its legal list.
    - I/O goes through a ``Writer`` so tests can capture output.
    """

    def __init__(self, options: Optional[SessionOptions] = None) -> None:
        self.options = options or SessionOptions()
        rules = {
            "forced_capture": self.options.forced_capture,
            "knight_checks": self.options.knight_checks,
        }
        if self.options.fen:
            self.game = Game.from_fen(self.options.fen, **rules)
        else:
            self.game = Game.new(**rules)
        self.engine: Optional[Color] = self.options.engine_color
        self.finished = False

    @property
    def human(self) -> Optional[Color]:
        return None if self.engine is None else self.engine.opposite

    def start(self, write: Writer) -> None:
        logger.info("session started (engine=%s)", self.options.engine_side or "none")
        write(self.game.board.render())
        if self.engine == Color.WHITE:
            self._engine_turn(write)
        if not self.finished:
            write(PROMPT)

    def handle(self, line: str, write: Writer) -> bool:
        """Process one input line. Returns False once the session is over."""
        text = line.strip()
        if not text:
            return True
        if text == END_COMMAND:
            logger.info("session ended by user after %d moves", len(self.game.move_stack))
            self.finished = True
            return False

        validate_for = self.human if self.options.strict else None
        try:
            self.game.apply_move(text, validate_for=validate_for)
        except ValueError as e:
            logger.warning("rejected move %r: %s", text, e)
            write(f"invalid move: {text} ({e})")
            write(PROMPT)
            return True

        write(self.game.board.render())
        if self.engine is not None:
            self._engine_turn(write)
        if self.finished:
            return False
        write(PROMPT)
        return True

    def _engine_turn(self, write: Writer) -> None:
        engine = self.engine
        if engine is None:
            return
        moves = self.game.legal_moves(engine)
        if self.options.show_moves:
            write("Possible moves: " + ", ".join(moves))
        if not moves:
            logger.info("engine (%s) has no legal moves", _side_name(engine))
            write(f"No legal moves for {_side_name(engine)}.")
            self.finished = True
            return
        write(f"Making move: {moves[0]}")
        self.game.apply_move(moves[0])
        write(self.game.board.render())
        if self.game.in_check(engine.opposite):
            write("Check.")


def _default_writer(line: str) -> None:
    sys.stdout.write(line + "\n")
    sys.stdout.flush()


def run_console(
    options: Optional[SessionOptions] = None,
    lines: Optional[Iterable[str]] = None,
    write: Writer = _default_writer,
) -> ConsoleSession:
    session = ConsoleSession(options)
    session.start(write)
    if session.finished:
        return session
    for raw in lines if lines is not None else sys.stdin:
        if not session.handle(raw, write):
            break
    return session
