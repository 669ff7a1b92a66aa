from __future__ import annotations

import pytest

from plychess.engine.move import Move, offset, parse_move, square_to_str, str_to_square, to_algebraic


def test_corner_squares() -> None:
    assert square_to_str(0) == "a8"
    assert square_to_str(7) == "h8"
    assert square_to_str(56) == "a1"
    assert square_to_str(63) == "h1"
    assert str_to_square("e2") == 52
    assert str_to_square("e4") == 36


def test_algebraic_round_trip_all_squares() -> None:
    for idx in range(64):
        name = to_algebraic(idx)
        assert str_to_square(name) == idx
        mv = parse_move(name + name)
        assert mv.from_sq == idx and mv.to_sq == idx


def test_parse_move_with_promotion() -> None:
    mv = parse_move("e7e8Q")
    assert mv == Move(str_to_square("e7"), str_to_square("e8"), "q")
    assert mv.to_str() == "e7e8q"
    assert str(parse_move("g1f3")) == "g1f3"


def test_parse_move_counts_from_a8() -> None:
    mv = parse_move("a8h1")
    assert (mv.from_sq, mv.to_sq) == (0, 63)
    mv = parse_move("h8a1")
    assert (mv.from_sq, mv.to_sq) == (7, 56)


@pytest.mark.parametrize("text", ["", "e2", "e2e4qq", "e9e4", "i2i4", "e7e8k", "E2E4"])
def test_parse_move_rejects_malformed(text: str) -> None:
    with pytest.raises(ValueError):
        parse_move(text)


def test_square_to_str_rejects_out_of_range() -> None:
    with pytest.raises(ValueError):
        square_to_str(64)
    with pytest.raises(ValueError):
        square_to_str(-1)


def test_offset_guards_file_wrap_and_rank_bounds() -> None:
    h4 = str_to_square("h4")
    assert offset(h4, 1, 0) is None
    assert offset(str_to_square("a4"), -1, -1) is None
    assert offset(str_to_square("e8"), 0, -1) is None
    assert offset(str_to_square("e1"), 0, 1) is None
    assert offset(str_to_square("e2"), 0, -2) == str_to_square("e4")
