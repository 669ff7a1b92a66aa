from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from ..engine.board import Board
from ..engine.piece import Color


class SessionOptions(BaseModel):
    """Validated settings for one console session."""

    engine_side: Optional[Literal["white", "black"]] = Field(
        default=None, description="Side the engine plays; None for manual two-player mode"
    )
    fen: Optional[str] = Field(default=None, description="Starting position (FEN or placement)")
    forced_capture: bool = Field(default=True, description="Captures are mandatory when available")
    knight_checks: bool = Field(default=False, description="King-safety filter sees knights")
    strict: bool = Field(default=False, description="Reject human moves that are not legal")
    show_moves: bool = Field(default=True, description="Print the engine's legal move list")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    @field_validator("engine_side", mode="before")
    @classmethod
    def _lower_side(cls, v: object) -> object:
        return v.lower() if isinstance(v, str) else v

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v: object) -> object:
        return v.upper() if isinstance(v, str) else v

    @field_validator("fen")
    @classmethod
    def _check_fen(cls, v: Optional[str]) -> Optional[str]:
        if v is not None:
            Board.from_fen(v)
        return v

    @property
    def engine_color(self) -> Optional[Color]:
        return None if self.engine_side is None else Color.parse(self.engine_side)
